"""
# Tag dispatch, classification, and compatibility version inference.

# [ Properties ]
# /variants/
	# All tag record classes.
# /index/
	# Mapping of tag names to their record class.
# /classification/
	# Mapping of tag record classes to their &TagKind.
"""
import logging
import typing

from . import tags as records
from .core import InvalidInput, ProtocolVersion, TagKind, struct

logger = logging.getLogger(__name__)

variants = (
	records.ExtM3u,
	records.ExtXVersion,
	records.ExtInf,
	records.ExtXByteRange,
	records.ExtXDiscontinuity,
	records.ExtXKey,
	records.ExtXMap,
	records.ExtXProgramDateTime,
	records.ExtXDateRange,
	records.ExtXTargetDuration,
	records.ExtXMediaSequence,
	records.ExtXDiscontinuitySequence,
	records.ExtXEndList,
	records.ExtXPlaylistType,
	records.ExtXIFramesOnly,
	records.ExtXMedia,
	records.ExtXStreamInf,
	records.ExtXIFrameStreamInf,
	records.ExtXSessionData,
	records.ExtXSessionKey,
	records.ExtXIndependentSegments,
	records.ExtXStart,
)

index = {v.name: v for v in variants}

classification = {
	records.ExtM3u: TagKind.basic,
	records.ExtXVersion: TagKind.basic,

	records.ExtInf: TagKind.media_segment,
	records.ExtXByteRange: TagKind.media_segment,
	records.ExtXDiscontinuity: TagKind.media_segment,
	records.ExtXKey: TagKind.media_segment,
	records.ExtXMap: TagKind.media_segment,
	records.ExtXProgramDateTime: TagKind.media_segment,
	records.ExtXDateRange: TagKind.media_segment,

	records.ExtXTargetDuration: TagKind.media_playlist,
	records.ExtXMediaSequence: TagKind.media_playlist,
	records.ExtXDiscontinuitySequence: TagKind.media_playlist,
	records.ExtXEndList: TagKind.media_playlist,
	records.ExtXPlaylistType: TagKind.media_playlist,
	records.ExtXIFramesOnly: TagKind.media_playlist,

	records.ExtXMedia: TagKind.master_playlist,
	records.ExtXStreamInf: TagKind.master_playlist,
	records.ExtXIFrameStreamInf: TagKind.master_playlist,
	records.ExtXSessionData: TagKind.master_playlist,
	records.ExtXSessionKey: TagKind.master_playlist,

	records.ExtXIndependentSegments: TagKind.media_or_master_playlist,
	records.ExtXStart: TagKind.media_or_master_playlist,
}

@struct()
class Policy(object):
	"""
	# Parsing configuration.

	# [ Properties ]
	# /unknown/
		# `'error'` to raise &InvalidInput for unrecognized tags, or
		# `'ignore'` to skip lines that begin with `#EXT` but name no known tag.
	"""

	unknown: (str) = 'error'

	def __post_init__(self):
		if self.unknown not in ('error', 'ignore'):
			raise ValueError("unknown tag policy must be 'error' or 'ignore', not %r" %(self.unknown,))

default = Policy()

def identify(line:str, *, index=index):
	"""
	# Identify the tag record class of &line using its name, the text
	# before the first colon. &None when the name is not recognized.
	"""
	return index.get(line.partition(':')[0])

def parse(line:str, policy:Policy=default) -> typing.Optional[records.Tag]:
	"""
	# Parse a single playlist line into its tag record.

	# [ Returns ]
	# The tag record; &None when the tag is unknown and &policy ignores unknown tags.

	# [ Exceptions ]
	# /&InvalidInput/
		# The line is not a valid tag, or the tag is unknown and &policy
		# does not permit it.
	"""
	Variant = identify(line)
	if Variant is not None:
		return Variant.from_string(line)

	if policy.unknown == 'ignore' and line.startswith('#EXT'):
		logger.debug("ignoring unknown tag %r", line.partition(':')[0])
		return None

	raise InvalidInput("unknown tag", source=line)

def parse_segment_tag(line:str) -> records.MediaSegmentTag:
	"""
	# Parse a line that must be a media segment tag.
	"""
	tag = parse(line)
	if kind(tag) is not TagKind.media_segment:
		raise InvalidInput("not a media segment tag", source=line)
	return tag

def serialize(tag) -> str:
	"""
	# Construct the canonical line of &tag.
	"""
	return str(tag)

def kind(tag) -> TagKind:
	"""
	# The &TagKind of a tag record or record class.
	"""
	if isinstance(tag, type):
		return classification[tag]
	return classification[tag.__class__]

def compatibility_version(tag) -> ProtocolVersion:
	"""
	# The minimum protocol version that &tag requires.
	"""
	m = getattr(tag, 'compatibility_version', None)
	if m is None:
		return ProtocolVersion.v1
	return m()

def required_version(tags) -> ProtocolVersion:
	"""
	# The maximum compatibility version of the given &tags; `v1` when empty.
	"""
	return max(map(compatibility_version, tags), default=ProtocolVersion.v1)

def tags(lines, policy:Policy=default):
	"""
	# Parse the tag lines of a playlist.

	# Blank lines, comments, and URI lines are skipped; trailing line
	# terminators are removed.

	# [ Parameters ]
	# /lines/
		# Iterable of playlist lines.
	# /policy/
		# The configuration used to parse each line.

	# [ Returns ]
	# Iterator of `(line_number, tag)` pairs. Line numbers start at `1`.

	# [ Exceptions ]
	# /&InvalidInput/
		# With &InvalidInput.line set to the number of the failing line.
	"""
	for number, line in enumerate(lines, 1):
		line = line.rstrip('\r\n')
		if not line.startswith('#EXT'):
			continue

		try:
			tag = parse(line, policy)
		except InvalidInput as err:
			err.line = number
			raise

		if tag is not None:
			yield (number, tag)
