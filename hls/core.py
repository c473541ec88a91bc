"""
# Core exceptions, enumerations, and the record constructor used by tag variants.

# [ Exceptions ]
# /&Error/
	# Base class of all errors raised by the package.
# /&InvalidInput/
	# The single failure kind: malformed literals, tokenizer syntax errors,
	# duplicate or missing attributes, unknown tags, and violated invariants.
"""
import enum
import functools
import dataclasses

# Frozen, slotted dataclass constructor used by all tag variants.
struct = functools.partial(dataclasses.dataclass, slots=True, eq=True, frozen=True)

class ErrorKind(enum.Enum):
	"""
	# Discriminant carried by &Error instances.
	"""

	invalid_input = 'InvalidInput'

class Error(Exception):
	"""
	# Base class for playlist tag errors.

	# [ Properties ]
	# /message/
		# Description of the failure.
	# /source/
		# The offending substring; often the raw value or the complete line.
	# /attribute/
		# The attribute name whose value failed; &None when not applicable.
	# /line/
		# The line number assigned by a caller processing a sequence of lines.
	"""

	kind = None

	def __init__(self, message, *, source=None, attribute=None, line=None):
		self.message = message
		self.source = source
		self.attribute = attribute
		self.line = line
		super().__init__(message)

	def __str__(self):
		parts = [self.message]
		if self.attribute is not None:
			parts.append("attribute %s" %(self.attribute,))
		if self.source is not None:
			parts.append("in %r" %(self.source,))
		if self.line is not None:
			parts.append("on line %d" %(self.line,))
		return ', '.join(parts)

class InvalidInput(Error, ValueError):
	"""
	# The text given to a parser or the fields given to a record were not valid.
	"""

	kind = ErrorKind.invalid_input

class ProtocolVersion(enum.IntEnum):
	"""
	# Protocol compatibility version designated by `#EXT-X-VERSION`.
	# Totally ordered; used to infer the minimum version a tag requires.
	"""

	v1 = 1
	v2 = 2
	v3 = 3
	v4 = 4
	v5 = 5
	v6 = 6
	v7 = 7

	def __str__(self):
		return str(self.value)

	@classmethod
	def from_string(Class, string):
		if not string.isdigit() or not string.isascii():
			raise InvalidInput("protocol version must be a decimal integer", source=string)

		try:
			return Class(int(string))
		except ValueError:
			raise InvalidInput("unknown protocol version", source=string) from None

class TagKind(enum.Enum):
	"""
	# The playlist context in which a tag is legal.

	# [ Elements ]
	# /basic/
		# Legal in both media and master playlists; `#EXTM3U` and `#EXT-X-VERSION`.
	# /media_segment/
		# Applies to the media segment that follows it.
	# /media_playlist/
		# Applies to an entire media playlist.
	# /master_playlist/
		# Applies to an entire master playlist.
	# /media_or_master_playlist/
		# Legal in either playlist type, but scoped to the whole playlist.
	"""

	basic = 'basic'
	media_segment = 'media-segment'
	media_playlist = 'media-playlist'
	master_playlist = 'master-playlist'
	media_or_master_playlist = 'media-or-master-playlist'
