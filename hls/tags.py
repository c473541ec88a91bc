"""
# Playlist tag records.

# Each tag is a frozen record class with:

# /`name`/
	# The tag name, `#EXT-X-KEY`.
# /`prefix`/
	# The literal that starts the line: the name followed by a colon for tags
	# with a body, or the name alone for markers.
# /`from_string`/
	# Class method parsing a complete line.
# /`__str__`/
	# The canonical line.

# Attribute list tags declare their attributes in a `fields` table of
# &attributes.Field instances. The table order is the canonical order used by
# &__str__. Cross-field constraints are checked by `__post_init__` so that
# directly constructed records are held to the same rules as parsed ones.

# [ Unions ]
# /&Tag/
	# Any tag record.
# /&MediaSegmentTag/
	# The subset of tags that describe a single media segment.
"""
import typing

from . import attributes
from .attributes import Field
from .core import struct, InvalidInput, ProtocolVersion
from .types import (
	QuotedString,
	InStreamId,
	M3u8String,
	HexadecimalSequence,
	DecimalInteger,
	DecimalFloatingPoint,
	SignedDecimalFloatingPoint,
	DecimalResolution,
	ByteRange,
	Duration,
	EncryptionMethod,
	SessionEncryptionMethod,
	MediaType,
	PlaylistType,
	HdcpLevel,
	ClosedCaptions,
	boolean,
	flag,
	affirmative,
	client_value,
)

def body(Class, line):
	"""
	# Remove the prefix of &Class from &line.
	"""
	if not line.startswith(Class.prefix):
		raise InvalidInput("line does not start with " + Class.prefix, source=line)
	return line[len(Class.prefix):]

def marker(Class, line):
	"""
	# Construct a tag that has no body; the line must be exactly the tag name.
	"""
	if line != Class.name:
		raise InvalidInput("expected " + Class.name, source=line)
	return Class()

def construct(Class, line, values):
	"""
	# Construct &Class from the parsed &values annotating failures with &line.
	"""
	try:
		return Class(**values)
	except InvalidInput as err:
		if err.source is None:
			err.source = line
		raise

def structured(Class, line, extension=None):
	return construct(Class, line, attributes.structure(Class.fields, body(Class, line), extension))

def value(Class, line, parse):
	"""
	# Parse the body of a tag whose body is a single value.
	"""
	try:
		return parse(body(Class, line))
	except InvalidInput as err:
		if err.source is None:
			err.source = line
		raise

def scalar(Class, line, parse, identifier):
	return construct(Class, line, {identifier: value(Class, line, parse)})

def check_iv(iv):
	if iv is not None and len(iv) != 16:
		raise InvalidInput("initialization vector must be 128 bits", source=str(iv), attribute='IV')

def key_format_version(key) -> ProtocolVersion:
	"""
	# Compatibility version of `#EXT-X-KEY` and `#EXT-X-SESSION-KEY` records.
	"""
	if key.key_format is not None or key.key_format_versions is not None:
		return ProtocolVersion.v5
	elif key.iv is not None:
		return ProtocolVersion.v2
	else:
		return ProtocolVersion.v1

def quoted_byte_range(string):
	return ByteRange.from_string(QuotedString.from_string(string))

def client_attribute(value):
	"""
	# Normalize a directly given client attribute value to one of the
	# types produced by &client_value.
	"""
	if isinstance(value, (QuotedString, HexadecimalSequence, DecimalFloatingPoint)):
		return value
	elif isinstance(value, str):
		return QuotedString(value)
	elif isinstance(value, (bytes, bytearray)):
		return HexadecimalSequence(value)
	else:
		return DecimalFloatingPoint(value)

def captions(value):
	"""
	# Normalize a directly given CLOSED-CAPTIONS value. The string `NONE`
	# selects the token; a group named NONE must be given as a &QuotedString.
	"""
	if value == ClosedCaptions.none.value:
		return ClosedCaptions.none
	return QuotedString(value)

quoted = QuotedString.from_string
ClassVar = typing.ClassVar

# Basic Tags

@struct()
class ExtM3u(object):
	"""
	# `#EXTM3U`; the first line of every playlist.
	"""
	name: ClassVar[str] = '#EXTM3U'
	prefix: ClassVar[str] = '#EXTM3U'

	@classmethod
	def from_string(Class, line):
		return marker(Class, line)

	def __str__(self):
		return self.prefix

@struct()
class ExtXVersion(object):
	"""
	# `#EXT-X-VERSION`; the compatibility version of the playlist.
	"""
	name: ClassVar[str] = '#EXT-X-VERSION'
	prefix: ClassVar[str] = '#EXT-X-VERSION:'

	version: (ProtocolVersion)

	def __post_init__(self):
		attributes.cast(self, 'version', ProtocolVersion)

	@classmethod
	def from_string(Class, line):
		return scalar(Class, line, ProtocolVersion.from_string, 'version')

	def __str__(self):
		return self.prefix + str(self.version)

# Media Segment Tags

@struct()
class ExtInf(object):
	"""
	# `#EXTINF`; the duration and optional title of the following segment.

	# [ Properties ]
	# /duration/
		# The &Duration of the segment.
	# /title/
		# The text following the comma; &None when no comma is present.
	"""
	name: ClassVar[str] = '#EXTINF'
	prefix: ClassVar[str] = '#EXTINF:'

	duration: (Duration)
	title: (M3u8String) = None

	def __post_init__(self):
		attributes.cast(self, 'duration', Duration, Duration.from_seconds)
		attributes.cast(self, 'title', M3u8String)

	@classmethod
	def from_string(Class, line):
		duration, comma, title = value(Class, line, (lambda x: x.partition(',')))
		values = {
			'duration': Duration.from_string(duration),
			'title': M3u8String(title) if comma else None,
		}
		return construct(Class, line, values)

	def __str__(self):
		if self.title is None:
			return self.prefix + str(self.duration)
		return self.prefix + str(self.duration) + ',' + self.title

	def compatibility_version(self) -> ProtocolVersion:
		# Durations must be integers before version 3.
		if self.duration.integral:
			return ProtocolVersion.v1
		return ProtocolVersion.v3

@struct()
class ExtXByteRange(object):
	"""
	# `#EXT-X-BYTERANGE`; the segment is a sub-range of its resource.

	# [ Properties ]
	# /length/
		# Number of bytes in the sub-range.
	# /offset/
		# Start of the sub-range; &None when it follows the previous segment.
	"""
	name: ClassVar[str] = '#EXT-X-BYTERANGE'
	prefix: ClassVar[str] = '#EXT-X-BYTERANGE:'

	length: (DecimalInteger)
	offset: (DecimalInteger) = None

	def __post_init__(self):
		attributes.cast(self, 'length', DecimalInteger)
		attributes.cast(self, 'offset', DecimalInteger)

	@classmethod
	def from_string(Class, line):
		r = value(Class, line, ByteRange.from_string)
		return construct(Class, line, {'length': r.length, 'offset': r.offset})

	@property
	def range(self) -> ByteRange:
		return ByteRange(self.length, self.offset)

	def __str__(self):
		return self.prefix + str(self.range)

	def compatibility_version(self) -> ProtocolVersion:
		return ProtocolVersion.v4

@struct()
class ExtXDiscontinuity(object):
	"""
	# `#EXT-X-DISCONTINUITY`; encoding parameters change at the following segment.
	"""
	name: ClassVar[str] = '#EXT-X-DISCONTINUITY'
	prefix: ClassVar[str] = '#EXT-X-DISCONTINUITY'

	@classmethod
	def from_string(Class, line):
		return marker(Class, line)

	def __str__(self):
		return self.prefix

@struct()
class ExtXKey(object):
	"""
	# `#EXT-X-KEY`; how the following segments are encrypted.

	# `METHOD=NONE` forbids the `URI` attribute; any other method requires it.
	"""
	name: ClassVar[str] = '#EXT-X-KEY'
	prefix: ClassVar[str] = '#EXT-X-KEY:'
	fields: ClassVar[tuple] = (
		Field('METHOD', 'method', EncryptionMethod.from_string, True, EncryptionMethod),
		Field('URI', 'uri', quoted, cast=QuotedString),
		Field('IV', 'iv', HexadecimalSequence.from_string, cast=HexadecimalSequence),
		Field('KEYFORMAT', 'key_format', quoted, cast=QuotedString),
		Field('KEYFORMATVERSIONS', 'key_format_versions', quoted, cast=QuotedString),
	)

	method: (EncryptionMethod)
	uri: (QuotedString) = None
	iv: (HexadecimalSequence) = None
	key_format: (QuotedString) = None
	key_format_versions: (QuotedString) = None

	def __post_init__(self):
		attributes.normalize(self, self.fields)

		if self.method is EncryptionMethod.none:
			if self.uri is not None:
				raise InvalidInput("URI must be absent when METHOD is NONE", attribute='URI')
		elif self.uri is None:
			raise InvalidInput("URI is required unless METHOD is NONE", attribute='URI')

		check_iv(self.iv)

	@classmethod
	def from_string(Class, line):
		return structured(Class, line)

	def __str__(self):
		return self.prefix + ','.join(attributes.sequence(self, self.fields))

	compatibility_version = key_format_version

@struct()
class ExtXMap(object):
	"""
	# `#EXT-X-MAP`; the media initialization section of the following segments.
	"""
	name: ClassVar[str] = '#EXT-X-MAP'
	prefix: ClassVar[str] = '#EXT-X-MAP:'
	fields: ClassVar[tuple] = (
		Field('URI', 'uri', quoted, True, QuotedString),
		Field('BYTERANGE', 'byte_range', quoted_byte_range, format=attributes.quoted),
	)

	uri: (QuotedString)
	byte_range: (ByteRange) = None

	def __post_init__(self):
		attributes.normalize(self, self.fields)
		attributes.cast(self, 'byte_range', ByteRange, (lambda x: ByteRange(*x)), 'BYTERANGE')

	@classmethod
	def from_string(Class, line):
		return structured(Class, line)

	def __str__(self):
		return self.prefix + ','.join(attributes.sequence(self, self.fields))

	def compatibility_version(self) -> ProtocolVersion:
		return ProtocolVersion.v5

@struct()
class ExtXProgramDateTime(object):
	"""
	# `#EXT-X-PROGRAM-DATE-TIME`; the absolute date and time of the first sample
	# of the following segment. The text is carried without interpretation.
	"""
	name: ClassVar[str] = '#EXT-X-PROGRAM-DATE-TIME'
	prefix: ClassVar[str] = '#EXT-X-PROGRAM-DATE-TIME:'

	date_time: (M3u8String)

	def __post_init__(self):
		attributes.cast(self, 'date_time', M3u8String)
		if not self.date_time:
			raise InvalidInput("program date-time is empty")

	@classmethod
	def from_string(Class, line):
		return scalar(Class, line, M3u8String.from_string, 'date_time')

	def __str__(self):
		return self.prefix + self.date_time

@struct()
class ExtXDateRange(object):
	"""
	# `#EXT-X-DATERANGE`; associates attributes with a range of time.

	# Client defined attributes, `X-<name>`, are retained in &client_attributes
	# in the order they appeared.
	"""
	name: ClassVar[str] = '#EXT-X-DATERANGE'
	prefix: ClassVar[str] = '#EXT-X-DATERANGE:'
	fields: ClassVar[tuple] = (
		Field('ID', 'id', quoted, True, QuotedString),
		Field('CLASS', 'class_name', quoted, cast=QuotedString),
		Field('START-DATE', 'start_date', quoted, True, QuotedString),
		Field('END-DATE', 'end_date', quoted, cast=QuotedString),
		Field('DURATION', 'duration', Duration.from_string),
		Field('PLANNED-DURATION', 'planned_duration', Duration.from_string),
		Field('SCTE35-CMD', 'scte35_cmd', HexadecimalSequence.from_string, cast=HexadecimalSequence),
		Field('SCTE35-OUT', 'scte35_out', HexadecimalSequence.from_string, cast=HexadecimalSequence),
		Field('SCTE35-IN', 'scte35_in', HexadecimalSequence.from_string, cast=HexadecimalSequence),
		Field('END-ON-NEXT', 'end_on_next', affirmative, cast=bool, construct=flag),
	)
	extension: ClassVar[Field] = Field('X-', 'client_attributes', client_value)

	id: (QuotedString)
	start_date: (QuotedString)
	class_name: (QuotedString) = None
	end_date: (QuotedString) = None
	duration: (Duration) = None
	planned_duration: (Duration) = None
	scte35_cmd: (HexadecimalSequence) = None
	scte35_out: (HexadecimalSequence) = None
	scte35_in: (HexadecimalSequence) = None
	end_on_next: (bool) = False
	client_attributes: (tuple) = ()

	def __post_init__(self):
		attributes.normalize(self, self.fields)
		attributes.cast(self, 'duration', Duration, Duration.from_seconds, 'DURATION')
		attributes.cast(self, 'planned_duration', Duration, Duration.from_seconds, 'PLANNED-DURATION')

		client = self.client_attributes
		if isinstance(client, dict):
			client = client.items()
		client = tuple((key, client_attribute(v)) for key, v in client)
		for key, v in client:
			if not key.startswith(self.extension.key):
				raise InvalidInput("client attribute names must start with X-", attribute=key)
		if len(set(key for key, v in client)) != len(client):
			raise InvalidInput("duplicate client attribute", attribute='X-')
		object.__setattr__(self, 'client_attributes', client)

		if self.end_on_next:
			if self.class_name is None:
				raise InvalidInput("END-ON-NEXT requires CLASS", attribute='END-ON-NEXT')
			if self.duration is not None or self.end_date is not None:
				raise InvalidInput("END-ON-NEXT excludes DURATION and END-DATE", attribute='END-ON-NEXT')

	@classmethod
	def from_string(Class, line):
		return structured(Class, line, Class.extension)

	def __str__(self):
		return self.prefix + ','.join(attributes.sequence(self, self.fields, self.extension))

# Media Playlist Tags

@struct()
class ExtXTargetDuration(object):
	"""
	# `#EXT-X-TARGETDURATION`; the maximum segment duration in whole seconds.
	"""
	name: ClassVar[str] = '#EXT-X-TARGETDURATION'
	prefix: ClassVar[str] = '#EXT-X-TARGETDURATION:'

	duration: (Duration)

	def __post_init__(self):
		attributes.cast(self, 'duration', Duration, Duration.from_seconds)
		if not self.duration.integral:
			raise InvalidInput("target duration must be whole seconds", source=str(self.duration))

	@classmethod
	def from_string(Class, line):
		return scalar(Class, line, (lambda x: Duration(DecimalInteger.from_string(x))), 'duration')

	def __str__(self):
		return self.prefix + str(self.duration.seconds)

@struct()
class ExtXMediaSequence(object):
	"""
	# `#EXT-X-MEDIA-SEQUENCE`; the sequence number of the first segment.
	"""
	name: ClassVar[str] = '#EXT-X-MEDIA-SEQUENCE'
	prefix: ClassVar[str] = '#EXT-X-MEDIA-SEQUENCE:'

	sequence_number: (DecimalInteger)

	def __post_init__(self):
		attributes.cast(self, 'sequence_number', DecimalInteger)

	@classmethod
	def from_string(Class, line):
		return scalar(Class, line, DecimalInteger.from_string, 'sequence_number')

	def __str__(self):
		return self.prefix + str(self.sequence_number)

@struct()
class ExtXDiscontinuitySequence(object):
	"""
	# `#EXT-X-DISCONTINUITY-SEQUENCE`; the discontinuity sequence number of the first segment.
	"""
	name: ClassVar[str] = '#EXT-X-DISCONTINUITY-SEQUENCE'
	prefix: ClassVar[str] = '#EXT-X-DISCONTINUITY-SEQUENCE:'

	sequence_number: (DecimalInteger)

	def __post_init__(self):
		attributes.cast(self, 'sequence_number', DecimalInteger)

	@classmethod
	def from_string(Class, line):
		return scalar(Class, line, DecimalInteger.from_string, 'sequence_number')

	def __str__(self):
		return self.prefix + str(self.sequence_number)

@struct()
class ExtXEndList(object):
	"""
	# `#EXT-X-ENDLIST`; no more segments will be added.
	"""
	name: ClassVar[str] = '#EXT-X-ENDLIST'
	prefix: ClassVar[str] = '#EXT-X-ENDLIST'

	@classmethod
	def from_string(Class, line):
		return marker(Class, line)

	def __str__(self):
		return self.prefix

@struct()
class ExtXPlaylistType(object):
	name: ClassVar[str] = '#EXT-X-PLAYLIST-TYPE'
	prefix: ClassVar[str] = '#EXT-X-PLAYLIST-TYPE:'

	playlist_type: (PlaylistType)

	def __post_init__(self):
		attributes.cast(self, 'playlist_type', PlaylistType)

	@classmethod
	def from_string(Class, line):
		return scalar(Class, line, PlaylistType.from_string, 'playlist_type')

	def __str__(self):
		return self.prefix + str(self.playlist_type)

@struct()
class ExtXIFramesOnly(object):
	"""
	# `#EXT-X-I-FRAMES-ONLY`; each segment is a single I-frame.
	"""
	name: ClassVar[str] = '#EXT-X-I-FRAMES-ONLY'
	prefix: ClassVar[str] = '#EXT-X-I-FRAMES-ONLY'

	@classmethod
	def from_string(Class, line):
		return marker(Class, line)

	def __str__(self):
		return self.prefix

	def compatibility_version(self) -> ProtocolVersion:
		return ProtocolVersion.v4

# Master Playlist Tags

@struct()
class ExtXMedia(object):
	"""
	# `#EXT-X-MEDIA`; an alternative rendition of the content.

	# [ Constraints ]
	# - `CLOSED-CAPTIONS` renditions require `URI` and `INSTREAM-ID`.
	# - `INSTREAM-ID` is not permitted for other types.
	# - `FORCED` is only permitted for `SUBTITLES`.
	# - When `DEFAULT=YES`, a present `AUTOSELECT` must be `YES`.
	"""
	name: ClassVar[str] = '#EXT-X-MEDIA'
	prefix: ClassVar[str] = '#EXT-X-MEDIA:'
	fields: ClassVar[tuple] = (
		Field('TYPE', 'media_type', MediaType.from_string, True, MediaType),
		Field('URI', 'uri', quoted, cast=QuotedString),
		Field('GROUP-ID', 'group_id', quoted, True, QuotedString),
		Field('LANGUAGE', 'language', quoted, cast=QuotedString),
		Field('ASSOC-LANGUAGE', 'assoc_language', quoted, cast=QuotedString),
		Field('NAME', 'rendition_name', quoted, True, QuotedString),
		Field('DEFAULT', 'default', boolean, cast=bool, construct=flag),
		Field('AUTOSELECT', 'autoselect', boolean, cast=bool, construct=flag),
		Field('FORCED', 'forced', boolean, cast=bool, construct=flag),
		Field('INSTREAM-ID', 'instream_id', InStreamId.from_string, cast=InStreamId),
		Field('CHARACTERISTICS', 'characteristics', quoted, cast=QuotedString),
		Field('CHANNELS', 'channels', quoted, cast=QuotedString),
	)

	media_type: (MediaType)
	group_id: (QuotedString)
	rendition_name: (QuotedString)
	uri: (QuotedString) = None
	language: (QuotedString) = None
	assoc_language: (QuotedString) = None
	default: (bool) = False
	autoselect: (bool) = False
	forced: (bool) = False
	instream_id: (InStreamId) = None
	characteristics: (QuotedString) = None
	channels: (QuotedString) = None

	def __post_init__(self):
		attributes.normalize(self, self.fields)

		if self.media_type is MediaType.closed_captions:
			if self.uri is None:
				raise InvalidInput("CLOSED-CAPTIONS renditions require URI", attribute='URI')
			if self.instream_id is None:
				raise InvalidInput("CLOSED-CAPTIONS renditions require INSTREAM-ID", attribute='INSTREAM-ID')
		elif self.instream_id is not None:
			raise InvalidInput("INSTREAM-ID is only permitted for CLOSED-CAPTIONS", attribute='INSTREAM-ID')

		if self.forced and self.media_type is not MediaType.subtitles:
			raise InvalidInput("FORCED is only permitted for SUBTITLES", attribute='FORCED')

	@classmethod
	def from_string(Class, line):
		values = attributes.structure(Class.fields, body(Class, line))

		# Presence, not only the value, is constrained.
		if 'forced' in values and values['media_type'] is not MediaType.subtitles:
			raise InvalidInput("FORCED is only permitted for SUBTITLES", source=line, attribute='FORCED')
		if values.get('default') and values.get('autoselect') is False:
			raise InvalidInput("AUTOSELECT must be YES when DEFAULT is YES", source=line, attribute='AUTOSELECT')

		return construct(Class, line, values)

	def __str__(self):
		return self.prefix + ','.join(attributes.sequence(self, self.fields))

	def compatibility_version(self) -> ProtocolVersion:
		if self.instream_id is not None and self.instream_id.service:
			return ProtocolVersion.v7
		return ProtocolVersion.v1

@struct()
class ExtXStreamInf(object):
	"""
	# `#EXT-X-STREAM-INF`; a variant stream. The URI line that follows the tag
	# is not part of the record.
	"""
	name: ClassVar[str] = '#EXT-X-STREAM-INF'
	prefix: ClassVar[str] = '#EXT-X-STREAM-INF:'
	fields: ClassVar[tuple] = (
		Field('BANDWIDTH', 'bandwidth', DecimalInteger.from_string, True, DecimalInteger),
		Field('AVERAGE-BANDWIDTH', 'average_bandwidth', DecimalInteger.from_string, cast=DecimalInteger),
		Field('CODECS', 'codecs', quoted, cast=QuotedString),
		Field('RESOLUTION', 'resolution', DecimalResolution.from_string),
		Field('FRAME-RATE', 'frame_rate', DecimalFloatingPoint.from_string, cast=DecimalFloatingPoint),
		Field('HDCP-LEVEL', 'hdcp_level', HdcpLevel.from_string, cast=HdcpLevel),
		Field('AUDIO', 'audio', quoted, cast=QuotedString),
		Field('VIDEO', 'video', quoted, cast=QuotedString),
		Field('SUBTITLES', 'subtitles', quoted, cast=QuotedString),
		Field('CLOSED-CAPTIONS', 'closed_captions', ClosedCaptions.from_string),
	)

	bandwidth: (DecimalInteger)
	average_bandwidth: (DecimalInteger) = None
	codecs: (QuotedString) = None
	resolution: (DecimalResolution) = None
	frame_rate: (DecimalFloatingPoint) = None
	hdcp_level: (HdcpLevel) = None
	audio: (QuotedString) = None
	video: (QuotedString) = None
	subtitles: (QuotedString) = None
	closed_captions: (typing.Union[QuotedString, ClosedCaptions]) = None

	def __post_init__(self):
		attributes.normalize(self, self.fields)
		attributes.cast(self, 'resolution', DecimalResolution, (lambda x: DecimalResolution(*x)), 'RESOLUTION')
		attributes.cast(self, 'closed_captions', (QuotedString, ClosedCaptions), captions, 'CLOSED-CAPTIONS')

	@classmethod
	def from_string(Class, line):
		return structured(Class, line)

	def __str__(self):
		return self.prefix + ','.join(attributes.sequence(self, self.fields))

@struct()
class ExtXIFrameStreamInf(object):
	"""
	# `#EXT-X-I-FRAME-STREAM-INF`; a media playlist of I-frames of a variant stream.
	"""
	name: ClassVar[str] = '#EXT-X-I-FRAME-STREAM-INF'
	prefix: ClassVar[str] = '#EXT-X-I-FRAME-STREAM-INF:'
	fields: ClassVar[tuple] = (
		Field('URI', 'uri', quoted, True, QuotedString),
		Field('BANDWIDTH', 'bandwidth', DecimalInteger.from_string, True, DecimalInteger),
		Field('AVERAGE-BANDWIDTH', 'average_bandwidth', DecimalInteger.from_string, cast=DecimalInteger),
		Field('CODECS', 'codecs', quoted, cast=QuotedString),
		Field('RESOLUTION', 'resolution', DecimalResolution.from_string),
		Field('HDCP-LEVEL', 'hdcp_level', HdcpLevel.from_string, cast=HdcpLevel),
		Field('VIDEO', 'video', quoted, cast=QuotedString),
	)

	uri: (QuotedString)
	bandwidth: (DecimalInteger)
	average_bandwidth: (DecimalInteger) = None
	codecs: (QuotedString) = None
	resolution: (DecimalResolution) = None
	hdcp_level: (HdcpLevel) = None
	video: (QuotedString) = None

	def __post_init__(self):
		attributes.normalize(self, self.fields)
		attributes.cast(self, 'resolution', DecimalResolution, (lambda x: DecimalResolution(*x)), 'RESOLUTION')

	@classmethod
	def from_string(Class, line):
		return structured(Class, line)

	def __str__(self):
		return self.prefix + ','.join(attributes.sequence(self, self.fields))

@struct()
class ExtXSessionData(object):
	"""
	# `#EXT-X-SESSION-DATA`; arbitrary session data carried by a master playlist.

	# Exactly one of &value or &uri is present.
	"""
	name: ClassVar[str] = '#EXT-X-SESSION-DATA'
	prefix: ClassVar[str] = '#EXT-X-SESSION-DATA:'
	fields: ClassVar[tuple] = (
		Field('DATA-ID', 'data_id', quoted, True, QuotedString),
		Field('VALUE', 'value', quoted, cast=QuotedString),
		Field('URI', 'uri', quoted, cast=QuotedString),
		Field('LANGUAGE', 'language', quoted, cast=QuotedString),
	)

	data_id: (QuotedString)
	value: (QuotedString) = None
	uri: (QuotedString) = None
	language: (QuotedString) = None

	def __post_init__(self):
		attributes.normalize(self, self.fields)

		if self.value is None and self.uri is None:
			raise InvalidInput("session data requires either VALUE or URI", attribute='VALUE')
		if self.value is not None and self.uri is not None:
			raise InvalidInput("session data must not have both VALUE and URI", attribute='URI')

	@classmethod
	def from_string(Class, line):
		return structured(Class, line)

	def __str__(self):
		return self.prefix + ','.join(attributes.sequence(self, self.fields))

@struct()
class ExtXSessionKey(object):
	"""
	# `#EXT-X-SESSION-KEY`; an encryption key that may be preloaded by clients.
	"""
	name: ClassVar[str] = '#EXT-X-SESSION-KEY'
	prefix: ClassVar[str] = '#EXT-X-SESSION-KEY:'
	fields: ClassVar[tuple] = (
		Field('METHOD', 'method', SessionEncryptionMethod.from_string, True, SessionEncryptionMethod),
		Field('URI', 'uri', quoted, True, QuotedString),
		Field('IV', 'iv', HexadecimalSequence.from_string, cast=HexadecimalSequence),
		Field('KEYFORMAT', 'key_format', quoted, cast=QuotedString),
		Field('KEYFORMATVERSIONS', 'key_format_versions', quoted, cast=QuotedString),
	)

	method: (SessionEncryptionMethod)
	uri: (QuotedString)
	iv: (HexadecimalSequence) = None
	key_format: (QuotedString) = None
	key_format_versions: (QuotedString) = None

	def __post_init__(self):
		attributes.normalize(self, self.fields)
		check_iv(self.iv)

	@classmethod
	def from_string(Class, line):
		return structured(Class, line)

	def __str__(self):
		return self.prefix + ','.join(attributes.sequence(self, self.fields))

	compatibility_version = key_format_version

# Media or Master Playlist Tags

@struct()
class ExtXIndependentSegments(object):
	"""
	# `#EXT-X-INDEPENDENT-SEGMENTS`; segments can be decoded without prior segments.
	"""
	name: ClassVar[str] = '#EXT-X-INDEPENDENT-SEGMENTS'
	prefix: ClassVar[str] = '#EXT-X-INDEPENDENT-SEGMENTS'

	@classmethod
	def from_string(Class, line):
		return marker(Class, line)

	def __str__(self):
		return self.prefix

@struct()
class ExtXStart(object):
	"""
	# `#EXT-X-START`; the preferred point at which to start playback.

	# &precise defaults to &False and is only written when &True.
	"""
	name: ClassVar[str] = '#EXT-X-START'
	prefix: ClassVar[str] = '#EXT-X-START:'
	fields: ClassVar[tuple] = (
		Field('TIME-OFFSET', 'time_offset', SignedDecimalFloatingPoint.from_string, True, SignedDecimalFloatingPoint),
		Field('PRECISE', 'precise', boolean, cast=bool, construct=flag),
	)

	time_offset: (SignedDecimalFloatingPoint)
	precise: (bool) = False

	def __post_init__(self):
		attributes.normalize(self, self.fields)

	@classmethod
	def from_string(Class, line):
		return structured(Class, line)

	def __str__(self):
		return self.prefix + ','.join(attributes.sequence(self, self.fields))

Tag = typing.Union[
	ExtM3u,
	ExtXVersion,
	ExtInf,
	ExtXByteRange,
	ExtXDiscontinuity,
	ExtXKey,
	ExtXMap,
	ExtXProgramDateTime,
	ExtXDateRange,
	ExtXTargetDuration,
	ExtXMediaSequence,
	ExtXDiscontinuitySequence,
	ExtXEndList,
	ExtXPlaylistType,
	ExtXIFramesOnly,
	ExtXMedia,
	ExtXStreamInf,
	ExtXIFrameStreamInf,
	ExtXSessionData,
	ExtXSessionKey,
	ExtXIndependentSegments,
	ExtXStart,
]

MediaSegmentTag = typing.Union[
	ExtInf,
	ExtXByteRange,
	ExtXDateRange,
	ExtXDiscontinuity,
	ExtXKey,
	ExtXMap,
	ExtXProgramDateTime,
]
