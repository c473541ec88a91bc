"""
# Attribute list tokenization and the attribute tables used by tag variants.

# Attribute lists are the `KEY=VALUE,KEY=VALUE` bodies of tags like `#EXT-X-KEY`.
# Values may be quoted strings which may contain commas; the quotes are retained
# by the tokenizer so that the value grammar can distinguish quoted and
# enumerated values.

# [ Entry Points ]
# - &pairs
# - &structure
# - &sequence
"""
import typing
import functools

from .core import struct, InvalidInput

def pairs(string, *, len=len, quote='"', separator=',', assignment='='):
	"""
	# Generate the `(key, value)` pairs of an attribute list.

	# Keys are produced as they appear; values are produced raw, quotes included.
	# A value that begins with a double quote continues through the closing quote
	# before the next separator is recognized.

	#!syntax/python
		assert list(pairs('KEY="a,b",K2=c')) == [('KEY', '"a,b"'), ('K2', 'c')]

	# [ Exceptions ]
	# /&InvalidInput/
		# Raised when the pair being read has no assignment, an empty key,
		# or an unterminated quotation. Pairs that precede the failure
		# are produced before the exception is raised.
	"""
	pos = 0
	end = len(string)

	while pos < end:
		eq = string.find(assignment, pos)
		comma = string.find(separator, pos)
		if eq == -1 or (comma != -1 and comma < eq):
			raise InvalidInput("attribute has no assignment", source=string[pos:])

		key = string[pos:eq]
		if not key:
			raise InvalidInput("attribute has an empty name", source=string[pos:])

		start = eq + 1
		if string[start:start+1] == quote:
			close = string.find(quote, start + 1)
			if close == -1:
				raise InvalidInput("unterminated quoted string", source=string[start:], attribute=key)
			stop = string.find(separator, close + 1)
		else:
			stop = string.find(separator, start)

		if stop == -1:
			stop = end

		yield (key, string[start:stop])

		if stop == end - 1:
			# Trailing separator; no pair follows.
			raise InvalidInput("attribute list ends with a separator", source=string)
		pos = stop + 1

def emit(value) -> str:
	return str(value)

def quoted(value) -> str:
	"""
	# Write a value that is carried inside a quoted string.
	"""
	return '"' + str(value) + '"'

@struct()
class Field(object):
	"""
	# Declaration of a single attribute of a tag's attribute list.

	# [ Properties ]
	# /key/
		# The attribute name as it appears on the wire.
	# /identifier/
		# The name of the record field that holds the parsed value.
	# /parse/
		# Callable constructing the value from the raw attribute value.
	# /required/
		# Whether the attribute must be present.
	# /cast/
		# Type that directly constructed values are normalized to.
		# &None when no normalization is performed.
	# /construct/
		# Callable performing the normalization; defaults to &cast.
	# /format/
		# Callable producing the wire form of the value.
	"""

	key: (str)
	identifier: (str)
	parse: (typing.Callable)
	required: (bool) = False
	cast: (type) = None
	construct: (typing.Callable) = None
	format: (typing.Callable) = emit

@functools.lru_cache(32)
def index(fields):
	"""
	# Map the keys of the &fields to their &Field.
	"""
	return {f.key: f for f in fields}

def structure(fields, string, extension:Field=None):
	"""
	# Tokenize the attribute list, &string, and parse the values of recognized keys.

	# Returns a dictionary of record keywords suitable for constructing a tag.

	# Unrecognized keys are ignored. When &extension is given, keys starting with
	# its &Field.key are collected, in order, into a tuple of `(key, value)` pairs
	# stored under the extension's identifier.

	# [ Exceptions ]
	# /&InvalidInput/
		# Raised for tokenization failures, invalid values, duplicate keys,
		# and missing required attributes.
	"""
	idx = index(fields)
	values = {}
	extended = {}

	for key, raw in pairs(string):
		f = idx.get(key)
		if f is None:
			if extension is not None and key.startswith(extension.key):
				if key in extended:
					raise InvalidInput("duplicate attribute", source=raw, attribute=key)
				try:
					extended[key] = extension.parse(raw)
				except InvalidInput as err:
					raise InvalidInput("invalid attribute value", source=raw, attribute=key) from err
			continue

		if f.identifier in values:
			raise InvalidInput("duplicate attribute", source=raw, attribute=key)

		try:
			values[f.identifier] = f.parse(raw)
		except InvalidInput as err:
			raise InvalidInput("invalid attribute value", source=raw, attribute=key) from err

	for f in fields:
		if f.required and f.identifier not in values:
			raise InvalidInput("missing required attribute", source=string, attribute=f.key)

	if extension is not None:
		values[extension.identifier] = tuple(extended.items())

	return values

def sequence(instance, fields, extension:Field=None):
	"""
	# Generate the `KEY=VALUE` strings of &instance in the order of &fields.

	# &None values are skipped; booleans are written as `YES` when &True and
	# omitted when &False as `NO` is their default.
	"""
	for f in fields:
		v = getattr(instance, f.identifier)
		if v is None or v is False:
			continue
		elif v is True:
			yield f.key + '=YES'
		else:
			yield f.key + '=' + f.format(v)

	if extension is not None:
		for key, v in getattr(instance, extension.identifier):
			yield key + '=' + extension.format(v)

def cast(instance, identifier, Type, constructor=None, key=None, setattr=object.__setattr__):
	"""
	# Replace the field of a frozen record with an instance of &Type when
	# it is not &None and not already a &Type.

	# &constructor defaults to &Type.
	"""
	v = getattr(instance, identifier)
	if v is None or isinstance(v, Type):
		return

	try:
		setattr(instance, identifier, (constructor or Type)(v))
	except InvalidInput:
		raise
	except (TypeError, ValueError) as err:
		raise InvalidInput("invalid value", source=repr(v), attribute=key or identifier) from err

def normalize(instance, fields):
	"""
	# Cast the fields of a newly constructed record and check that required
	# fields are present.
	"""
	for f in fields:
		if getattr(instance, f.identifier) is None:
			if f.required:
				raise InvalidInput("missing required attribute", attribute=f.key)
		elif f.cast is not None:
			cast(instance, f.identifier, f.cast, f.construct, f.key)
