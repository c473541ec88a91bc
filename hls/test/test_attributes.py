from .. import attributes
from .. import types
from ..core import InvalidInput, struct

def test_pairs(test):
	test/list(attributes.pairs('KEY="a,b",K2=c')) == [('KEY', '"a,b"'), ('K2', 'c')]
	test/list(attributes.pairs('A=1')) == [('A', '1')]
	test/list(attributes.pairs('')) == []

	# Values are raw; no trimming and no unquoting.
	test/list(attributes.pairs('A="",B=0x00')) == [('A', '""'), ('B', '0x00')]

	# Equals signs inside values are content.
	test/list(attributes.pairs('URI="a?b=c",X=1')) == [('URI', '"a?b=c"'), ('X', '1')]

def test_pairs_quoted_value_continuation(test):
	# Text following the closing quote belongs to the same value.
	test/list(attributes.pairs('A="x"y,B=1')) == [('A', '"x"y'), ('B', '1')]

def test_pairs_errors(test):
	with test/InvalidInput as exc:
		list(attributes.pairs('KEY="a,b'))
	test/exc().attribute == 'KEY'

	test/InvalidInput ^ (lambda: list(attributes.pairs('KEY')))
	test/InvalidInput ^ (lambda: list(attributes.pairs('=1')))
	test/InvalidInput ^ (lambda: list(attributes.pairs('A=1,,B=2')))
	test/InvalidInput ^ (lambda: list(attributes.pairs('A=1,')))
	test/InvalidInput ^ (lambda: list(attributes.pairs('A,B=1')))

def test_pairs_partial(test):
	# Pairs preceding a failure are produced.
	i = attributes.pairs('A=1,B')
	test/next(i) == ('A', '1')
	test/InvalidInput ^ (lambda: next(i))

fields = (
	attributes.Field('NAME', 'name', types.QuotedString.from_string, True, types.QuotedString),
	attributes.Field('COUNT', 'count', types.DecimalInteger.from_string, cast=types.DecimalInteger),
	attributes.Field('ENABLED', 'enabled', types.boolean, cast=bool, construct=types.flag),
)

@struct()
class Sample(object):
	name: (types.QuotedString)
	count: (types.DecimalInteger) = None
	enabled: (bool) = False

	def __post_init__(self):
		attributes.normalize(self, fields)

def test_structure(test):
	values = attributes.structure(fields, 'COUNT=3,NAME="x",ENABLED=YES')
	test/values == {'name': 'x', 'count': 3, 'enabled': True}

	# Unrecognized keys are ignored.
	values = attributes.structure(fields, 'NAME="x",OTHER=1')
	test/values == {'name': 'x'}

def test_structure_errors(test):
	with test/InvalidInput as exc:
		attributes.structure(fields, 'COUNT=3')
	test/exc().attribute == 'NAME'
	test/exc().message == "missing required attribute"

	with test/InvalidInput as exc:
		attributes.structure(fields, 'NAME="x",NAME="y"')
	test/exc().message == "duplicate attribute"

	with test/InvalidInput as exc:
		attributes.structure(fields, 'NAME="x",COUNT=three')
	test/exc().attribute == 'COUNT'
	test/exc().source == 'three'
	test.isinstance(exc().__cause__, InvalidInput)

	# Keys are matched exactly.
	test/InvalidInput ^ (lambda: attributes.structure(fields, 'name="x"'))

def test_structure_extension(test):
	ext = attributes.Field('X-', 'client', types.client_value)
	values = attributes.structure(fields, 'NAME="x",X-B=1,X-A="a"', ext)
	test/values['client'] == (('X-B', 1.0), ('X-A', 'a'))

	values = attributes.structure(fields, 'NAME="x"', ext)
	test/values['client'] == ()

	test/InvalidInput ^ (lambda: attributes.structure(fields, 'NAME="x",X-A=1,X-A=2', ext))
	test/InvalidInput ^ (lambda: attributes.structure(fields, 'NAME="x",X-A=bare', ext))

def test_sequence(test):
	s = Sample(types.QuotedString('x'), 3, True)
	test/list(attributes.sequence(s, fields)) == ['NAME="x"', 'COUNT=3', 'ENABLED=YES']

	# Absent and false values are omitted.
	s = Sample(types.QuotedString('x'))
	test/list(attributes.sequence(s, fields)) == ['NAME="x"']

def test_normalize(test):
	s = Sample('plain', 5)
	test.isinstance(s.name, types.QuotedString)
	test.isinstance(s.count, types.DecimalInteger)
	test/str(s.name) == '"plain"'

	test/InvalidInput ^ (lambda: Sample(None))
	test/InvalidInput ^ (lambda: Sample('x', -1))

	# Enumerated strings are normalized by the field's constructor.
	test/Sample('x', enabled='NO').enabled == False
	test/Sample('x', enabled='YES').enabled == True
	test/InvalidInput ^ (lambda: Sample('x', enabled='no'))
	test/InvalidInput ^ (lambda: Sample('a"b'))

def test_quoted(test):
	test/attributes.quoted(types.ByteRange(10, 2)) == '"10@2"'
	test/attributes.emit(types.DecimalInteger(7)) == '7'
