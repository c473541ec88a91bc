__factor_type__ = 'project'
identity = 'http://fault.io/python/hls'
name = 'hls'
abstract = 'HTTP Live Streaming playlist tag parsing and serialization'
icon = '🎞'

fork = 'rfc8216'
versioning = 'continuous'
status = 'flux'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'
