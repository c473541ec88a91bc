"""
# hls is a Python project providing the tag grammar of HTTP Live Streaming
# playlists, M3U8. It parses single playlist lines into typed tag records and
# writes records back out in canonical form. It does not fetch playlists or
# assemble them into documents; it is intended to be a dependency of the
# applications and servers that do.

# [ Values ]
# ----------

# &.types provides the value grammar: quoted strings, hexadecimal sequences,
# decimal integers and floating points, resolutions, byte ranges, durations,
# and the enumerated strings. &.attributes tokenizes `KEY=VALUE` attribute lists.

# [ Tags ]
# --------

# &.tags defines a record class for each tag. &.library.parse identifies the
# record class of a line by its tag name, and &.library.kind classifies
# records by the playlist context in which they are legal.
"""
