"""
# Value grammar for attribute values and scalar tag bodies.

# Every type here is an immutable builtin subclass that provides a `from_string`
# constructor for parsing the wire form and a `__str__` producing the canonical form.

# [ Types ]
# /&QuotedString/
	# Text that was, or will be, enclosed in double quotes.
# /&HexadecimalSequence/
	# Bytes written as `0x` followed by uppercase hexadecimal digits.
# /&DecimalInteger/
	# Unsigned 64-bit integer.
# /&DecimalFloatingPoint/ /&SignedDecimalFloatingPoint/
	# Finite floating point values; the former is never negative.
# /&DecimalResolution/
	# The `<width>x<height>` pair.
# /&ByteRange/
	# The `<length>[@<offset>]` pair.
# /&Duration/
	# Whole seconds and the nanosecond remainder.
# /&M3u8String/
	# Plain line text.

# [ Tokens ]
# Enumerated strings are &Token subclasses; parsing is an exact, case sensitive
# match against the values of the enumeration.
"""
import re
import enum
import math
import decimal
import datetime

from .core import InvalidInput

control_characters = frozenset([chr(x) for x in range(0x20)] + ['\x7f'])

integer_pattern = re.compile(r'[0-9]+')
hexadecimal_pattern = re.compile(r'[0-9a-fA-F]+')
float_pattern = re.compile(
	r'(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?'
)
signed_float_pattern = re.compile(
	r'[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?'
)
instream_id_pattern = re.compile(r'CC[1-4]|SERVICE(?:[1-9]|[1-5][0-9]|6[0-3])')

def _format_float(value, repr=repr, float=float):
	# Integral values are written without a fractional part.
	if value.is_integer():
		return '%d' %(value,)
	return repr(float(value))

class QuotedString(str):
	"""
	# A string that can be written inside double quotes.

	# The instance holds the unquoted content; &__str__ produces the quoted form.
	# Double quotes and control characters are rejected on construction.
	"""
	__slots__ = ()

	def __new__(Class, string, control=control_characters):
		if '"' in string:
			raise InvalidInput("quoted string contains a double quote", source=string)
		if not control.isdisjoint(string):
			raise InvalidInput("quoted string contains a control character", source=string)

		return str.__new__(Class, string)

	def __str__(self):
		return '"' + self + '"'

	def __repr__(self):
		return "%s(%s)" %(self.__class__.__name__, str.__repr__(self))

	@classmethod
	def from_string(Class, string, len=len):
		"""
		# Remove the enclosing quotes from &string and validate the content.
		"""
		if len(string) < 2 or string[:1] != '"' or string[-1:] != '"':
			raise InvalidInput("quoted string must be enclosed in double quotes", source=string)

		return Class(string[1:-1])

class InStreamId(QuotedString):
	"""
	# The `INSTREAM-ID` of closed caption renditions: `CC1` through `CC4`,
	# or `SERVICE1` through `SERVICE63`.
	"""
	__slots__ = ()

	def __new__(Class, string, match=instream_id_pattern.fullmatch):
		if match(string) is None:
			raise InvalidInput("unrecognized in-stream identifier", source=string)

		return QuotedString.__new__(Class, string)

	@property
	def service(self) -> bool:
		"""
		# Whether the identifier selects a digital television service channel.
		"""
		return self.startswith('SERVICE')

class M3u8String(str):
	"""
	# Line-safe text; carriage returns and line feeds are rejected.
	"""
	__slots__ = ()

	def __new__(Class, string):
		if '\n' in string or '\r' in string:
			raise InvalidInput("text contains a line terminator", source=string)

		return str.__new__(Class, string)

	def __repr__(self):
		return "%s(%s)" %(self.__class__.__name__, str.__repr__(self))

	@classmethod
	def from_string(Class, string):
		return Class(string)

class HexadecimalSequence(bytes):
	"""
	# Byte string expressed in hexadecimal.

	# Parsing is case insensitive; serialization always writes the `0x` prefix
	# followed by uppercase digits.
	"""
	__slots__ = ()

	def __str__(self):
		return '0x' + self.hex().upper()

	def __repr__(self):
		return "%s(%s)" %(self.__class__.__name__, bytes.__repr__(self))

	@classmethod
	def from_string(Class, string, match=hexadecimal_pattern.fullmatch):
		if string[:2] not in ('0x', '0X'):
			raise InvalidInput("hexadecimal sequence must start with 0x", source=string)

		digits = string[2:]
		if match(digits) is None:
			raise InvalidInput("hexadecimal sequence contains no digits or invalid digits", source=string)
		if len(digits) % 2:
			raise InvalidInput("hexadecimal sequence has an odd number of digits", source=string)

		return Class(bytes.fromhex(digits))

class DecimalInteger(int):
	"""
	# Unsigned integer in the range `0` through `2**64 - 1`.
	"""
	__slots__ = ()

	limit = 0xFFFFFFFFFFFFFFFF

	def __new__(Class, value=0):
		i = int.__new__(Class, value)
		if i < 0 or i > Class.limit:
			raise InvalidInput("decimal integer out of range", source=str(value))
		return i

	def __repr__(self):
		return "%s(%d)" %(self.__class__.__name__, self)

	def __str__(self):
		return "%d" %(self,)

	@classmethod
	def from_string(Class, string, match=integer_pattern.fullmatch):
		if match(string) is None:
			raise InvalidInput("decimal integer must consist of digits", source=string)

		return Class(int(string))

class DecimalFloatingPoint(float):
	"""
	# Non-negative, finite floating point value.
	"""
	__slots__ = ()

	def __new__(Class, value=0.0, isfinite=math.isfinite):
		f = float.__new__(Class, value)
		if not isfinite(f) or f < 0:
			raise InvalidInput("decimal floating point must be finite and non-negative", source=str(value))
		return f

	__str__ = _format_float

	def __repr__(self):
		return "%s(%r)" %(self.__class__.__name__, float(self))

	@classmethod
	def from_string(Class, string, match=float_pattern.fullmatch):
		if match(string) is None:
			raise InvalidInput("invalid decimal floating point", source=string)

		return Class(float(string))

	def to_duration(self):
		"""
		# Interpret the value as seconds and construct a &Duration.
		"""
		return Duration.from_seconds(float(self))

	@classmethod
	def from_duration(Class, duration):
		return Class(float(duration))

class SignedDecimalFloatingPoint(float):
	"""
	# Finite floating point value that may be negative.
	"""
	__slots__ = ()

	def __new__(Class, value=0.0, isfinite=math.isfinite):
		f = float.__new__(Class, value)
		if not isfinite(f):
			raise InvalidInput("signed decimal floating point must be finite", source=str(value))
		return f

	__str__ = _format_float

	def __repr__(self):
		return "%s(%r)" %(self.__class__.__name__, float(self))

	@classmethod
	def from_string(Class, string, match=signed_float_pattern.fullmatch):
		if match(string) is None:
			raise InvalidInput("invalid signed decimal floating point", source=string)

		return Class(float(string))

class Duration(tuple):
	"""
	# A span of time expressed as whole seconds and a nanosecond remainder.

	# [ Properties ]
	# /seconds/
		# Whole seconds.
	# /nanoseconds/
		# Sub-second remainder in `0` through `999999999`.
	"""
	__slots__ = ()

	def __new__(Class, seconds, nanoseconds=0):
		if seconds < 0 or not 0 <= nanoseconds < 1000000000:
			raise InvalidInput("duration out of range", source="%r.%r" %(seconds, nanoseconds))
		if int(seconds) != seconds or int(nanoseconds) != nanoseconds:
			raise InvalidInput("duration components must be whole numbers", source="%r.%r" %(seconds, nanoseconds))

		return tuple.__new__(Class, (int(seconds), int(nanoseconds)))

	def __getnewargs__(self):
		return tuple(self)

	@property
	def seconds(self) -> int:
		return self[0]

	@property
	def nanoseconds(self) -> int:
		return self[1]

	@property
	def integral(self) -> bool:
		"""
		# Whether the duration is an exact number of seconds.
		"""
		return self[1] == 0

	def __float__(self):
		return self[0] + (self[1] / 1000000000)

	def __str__(self):
		if not self[1]:
			return str(self[0])

		return '%d.%s' %(self[0], ('%09d' %(self[1],)).rstrip('0'))

	def __repr__(self):
		return "%s(%d, %d)" %(self.__class__.__name__, self[0], self[1])

	def timedelta(self):
		"""
		# Construct a &datetime.timedelta; precision is reduced to microseconds.
		"""
		return datetime.timedelta(seconds=self[0], microseconds=self[1] // 1000)

	@classmethod
	def from_decimal(Class, string, Decimal=decimal.Decimal):
		"""
		# Construct from a decimal string of seconds.

		# The nanosecond remainder is the fractional part multiplied by `10**9`
		# and rounded toward zero. Decimal arithmetic is used so that `6.006`
		# yields exactly six million nanoseconds.
		"""
		try:
			d = Decimal(string)
		except decimal.InvalidOperation:
			raise InvalidInput("invalid duration", source=string) from None

		if not d.is_finite() or d < 0:
			raise InvalidInput("duration must be finite and non-negative", source=string)

		seconds = int(d)
		nanoseconds = int((d - seconds) * 1000000000)
		return Class(seconds, nanoseconds)

	@classmethod
	def from_seconds(Class, seconds, repr=repr, float=float):
		"""
		# Construct from a &float number of seconds using its shortest representation.
		"""
		return Class.from_decimal(repr(float(seconds)))

	@classmethod
	def from_string(Class, string):
		"""
		# Parse a decimal floating point number of seconds.
		"""
		DecimalFloatingPoint.from_string(string)
		return Class.from_decimal(string)

class DecimalResolution(tuple):
	"""
	# Display resolution: `(width, height)`.
	"""
	__slots__ = ()

	def __new__(Class, width, height):
		if width <= 0 or height <= 0:
			raise InvalidInput("resolution dimensions must be positive", source="%rx%r" %(width, height))

		return tuple.__new__(Class, (DecimalInteger(width), DecimalInteger(height)))

	def __getnewargs__(self):
		return tuple(self)

	@property
	def width(self) -> int:
		return self[0]

	@property
	def height(self) -> int:
		return self[1]

	def __str__(self):
		return "%dx%d" %self

	def __repr__(self):
		return "%s(%d, %d)" %((self.__class__.__name__,) + self)

	@classmethod
	def from_string(Class, string, search=re.compile('[xX]').search):
		m = search(string)
		if m is None:
			raise InvalidInput("resolution requires an x separator", source=string)

		i = m.start()
		width = DecimalInteger.from_string(string[:i])
		height = DecimalInteger.from_string(string[i+1:])
		return Class(width, height)

class ByteRange(tuple):
	"""
	# Sub-range of a resource: `(length, offset)`; &offset is &None when
	# the range follows the previous one.
	"""
	__slots__ = ()

	def __new__(Class, length, offset=None):
		length = DecimalInteger(length)
		if offset is not None:
			offset = DecimalInteger(offset)
		return tuple.__new__(Class, (length, offset))

	def __getnewargs__(self):
		return tuple(self)

	@property
	def length(self) -> int:
		return self[0]

	@property
	def offset(self):
		return self[1]

	def __str__(self):
		if self[1] is None:
			return str(self[0])
		return "%d@%d" %self

	def __repr__(self):
		offset = None if self[1] is None else int(self[1])
		return "%s(%d, %r)" %(self.__class__.__name__, self[0], offset)

	@classmethod
	def from_string(Class, string):
		length, sep, offset = string.partition('@')
		if sep:
			return Class(DecimalInteger.from_string(length), DecimalInteger.from_string(offset))
		else:
			return Class(DecimalInteger.from_string(length))

class Token(enum.Enum):
	"""
	# Base class for enumerated strings.
	"""

	def __str__(self):
		return self.value

	@classmethod
	def from_string(Class, string):
		try:
			return Class(string)
		except ValueError:
			raise InvalidInput(
				"unrecognized %s token" %(Class.__name__,), source=string
			) from None

class YesOrNo(Token):
	yes = 'YES'
	no = 'NO'

class Yes(Token):
	"""
	# Enumerated string permitting only `YES`; used by attributes that
	# are either present and affirmative or absent.
	"""
	yes = 'YES'

class EncryptionMethod(Token):
	none = 'NONE'
	aes128 = 'AES-128'
	sample_aes = 'SAMPLE-AES'

class SessionEncryptionMethod(Token):
	"""
	# Encryption methods permitted by `#EXT-X-SESSION-KEY`; `NONE` is excluded.
	"""
	aes128 = 'AES-128'
	sample_aes = 'SAMPLE-AES'

class MediaType(Token):
	audio = 'AUDIO'
	video = 'VIDEO'
	subtitles = 'SUBTITLES'
	closed_captions = 'CLOSED-CAPTIONS'

class PlaylistType(Token):
	event = 'EVENT'
	vod = 'VOD'

class HdcpLevel(Token):
	type0 = 'TYPE-0'
	none = 'NONE'

class ClosedCaptions(Token):
	"""
	# The enumerated alternative of the `CLOSED-CAPTIONS` attribute.
	# &from_string returns a &QuotedString group identifier when the value is quoted.
	"""
	none = 'NONE'

	@classmethod
	def from_string(Class, string):
		if string[:1] == '"':
			return QuotedString.from_string(string)
		return super().from_string(string)

def boolean(string) -> bool:
	"""
	# Parse an enumerated `YES` or `NO` into a &bool.
	"""
	return YesOrNo.from_string(string) is YesOrNo.yes

def flag(value) -> bool:
	"""
	# Normalize a directly given `YES` or `NO` value to a &bool.
	# Accepts &bool, &YesOrNo members, and the enumerated strings.
	"""
	if isinstance(value, bool):
		return value
	elif isinstance(value, YesOrNo):
		return value is YesOrNo.yes
	elif isinstance(value, str):
		return boolean(value)
	else:
		raise InvalidInput("YES or NO required", source=repr(value))

def affirmative(string) -> bool:
	"""
	# Parse an enumerated string that can only be `YES`.
	"""
	Yes.from_string(string)
	return True

def client_value(string):
	"""
	# Parse the value of a client defined, `X-` prefixed, attribute.
	# Quoted strings, hexadecimal sequences, and decimal floating points are permitted.
	"""
	if string[:1] == '"':
		return QuotedString.from_string(string)
	elif string[:2] in ('0x', '0X'):
		return HexadecimalSequence.from_string(string)
	else:
		return DecimalFloatingPoint.from_string(string)
