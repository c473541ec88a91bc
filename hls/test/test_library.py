import logging

from .. import library
from .. import tags
from ..core import InvalidInput, ProtocolVersion, TagKind
from .test_tags import samples

def test_module_protocol(test):
	'parse' in test/dir(library)
	'Policy' in test/dir(library)
	test/len(library.variants) == 22
	test/len(library.index) == 22
	test/set(library.classification) == set(library.variants)

def test_parse(test):
	for Class, line in samples:
		test.isinstance(library.parse(line), Class)
		test/library.serialize(library.parse(line)) == line

def test_round_trip(test):
	# Parsing the serialized form of every tag gives an equal tag.
	for Class, line in samples:
		tag = library.parse(line)
		test/library.parse(library.serialize(tag)) == tag

def test_serialize_integers(test):
	test/library.serialize(library.parse('#EXT-X-MEDIA-SEQUENCE:2680')) == '#EXT-X-MEDIA-SEQUENCE:2680'
	test/library.serialize(library.parse('#EXT-X-DISCONTINUITY-SEQUENCE:3')) == '#EXT-X-DISCONTINUITY-SEQUENCE:3'
	test/library.serialize(library.parse('#EXT-X-BYTERANGE:1024')) == '#EXT-X-BYTERANGE:1024'
	test/library.serialize(tags.ExtXStreamInf(1, average_bandwidth=2)) == '#EXT-X-STREAM-INF:BANDWIDTH=1,AVERAGE-BANDWIDTH=2'

def test_prefix_disjointness(test):
	# Each sample line is accepted by exactly one variant.
	for Class, line in samples:
		accepted = []
		for Variant in library.variants:
			try:
				Variant.from_string(line)
			except InvalidInput:
				pass
			else:
				accepted.append(Variant)
		test/accepted == [Class]

def test_identify(test):
	test/library.identify('#EXT-X-DISCONTINUITY') % tags.ExtXDiscontinuity
	test/library.identify('#EXT-X-DISCONTINUITY-SEQUENCE:1') % tags.ExtXDiscontinuitySequence
	test/library.identify('#EXT-X-MEDIA:TYPE=AUDIO') % tags.ExtXMedia
	test/library.identify('#EXT-X-MEDIA-SEQUENCE:1') % tags.ExtXMediaSequence
	test/library.identify('#EXT-X-I-FRAMES-ONLY') % tags.ExtXIFramesOnly
	test/library.identify('#EXT-X-I-FRAME-STREAM-INF:URI="a"') % tags.ExtXIFrameStreamInf
	test/library.identify('#EXT-X-UNKNOWN') % None
	test/library.identify('segment.ts') % None

def test_parse_unknown(test):
	with test/InvalidInput as exc:
		library.parse('#EXT-X-UNKNOWN:1')
	test/exc().source == '#EXT-X-UNKNOWN:1'

	test/InvalidInput ^ (lambda: library.parse('segment.ts'))
	test/InvalidInput ^ (lambda: library.parse(''))

def test_parse_ignore_unknown(test, caplog):
	policy = library.Policy(unknown='ignore')
	with caplog.at_level(logging.DEBUG, logger='hls.library'):
		test/library.parse('#EXT-X-UNKNOWN:1', policy) == None
	'#EXT-X-UNKNOWN' in test/caplog.text

	# Known tags are still validated.
	test/InvalidInput ^ (lambda: library.parse('#EXT-X-VERSION:x', policy))
	# Only tag lines are subject to the policy.
	test/InvalidInput ^ (lambda: library.parse('segment.ts', policy))

def test_Policy(test):
	test/library.Policy().unknown == 'error'
	test/ValueError ^ (lambda: library.Policy(unknown='warn'))

def test_parse_segment_tag(test):
	tag = library.parse_segment_tag('#EXTINF:4,')
	test.isinstance(tag, tags.ExtInf)
	test.isinstance(library.parse_segment_tag('#EXT-X-DISCONTINUITY'), tags.ExtXDiscontinuity)

	test/InvalidInput ^ (lambda: library.parse_segment_tag('#EXT-X-ENDLIST'))
	test/InvalidInput ^ (lambda: library.parse_segment_tag('#EXTM3U'))

def test_kind(test):
	test/library.kind(tags.ExtM3u()) % TagKind.basic
	test/library.kind(tags.ExtXVersion(3)) % TagKind.basic
	test/library.kind(tags.ExtInf(1)) % TagKind.media_segment
	test/library.kind(tags.ExtXDateRange('a', 'd')) % TagKind.media_segment
	test/library.kind(tags.ExtXEndList()) % TagKind.media_playlist
	test/library.kind(tags.ExtXIFramesOnly) % TagKind.media_playlist
	test/library.kind(tags.ExtXSessionKey) % TagKind.master_playlist
	test/library.kind(tags.ExtXStart(0)) % TagKind.media_or_master_playlist
	test/library.kind(tags.ExtXIndependentSegments()) % TagKind.media_or_master_playlist

def test_compatibility_version(test):
	test/library.compatibility_version(tags.ExtM3u()) % ProtocolVersion.v1
	test/library.compatibility_version(tags.ExtInf(6.5)) % ProtocolVersion.v3
	test/library.compatibility_version(tags.ExtXMap('init.mp4')) % ProtocolVersion.v5

def test_required_version(test):
	test/library.required_version([]) % ProtocolVersion.v1
	seq = [
		tags.ExtM3u(),
		tags.ExtInf(6),
		tags.ExtXByteRange(10),
		tags.ExtInf(6.5),
	]
	test/library.required_version(seq) % ProtocolVersion.v4

	seq.append(library.parse('#EXT-X-KEY:METHOD=AES-128,URI="k",KEYFORMAT="f"'))
	test/library.required_version(seq) % ProtocolVersion.v5

def test_tags(test):
	lines = [
		'#EXTM3U\n',
		'#EXT-X-TARGETDURATION:10\n',
		'\n',
		'# comment\n',
		'#EXTINF:9.009,\r\n',
		'first.ts\n',
	]
	parsed = list(library.tags(lines))
	test/[n for n, t in parsed] == [1, 2, 5]
	test.isinstance(parsed[2][1], tags.ExtInf)
	test/parsed[2][1].title == ''

def test_tags_errors(test):
	lines = ['#EXTM3U', '#EXT-X-UNKNOWN', '#EXT-X-VERSION:x']
	with test/InvalidInput as exc:
		list(library.tags(lines))
	test/exc().line == 2

	parsed = library.tags(lines, library.Policy(unknown='ignore'))
	test/next(parsed)[0] == 1
	with test/InvalidInput as exc:
		next(parsed)
	test/exc().line == 3
	'on line 3' in test/str(exc())
