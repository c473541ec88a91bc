"""
# Contention primitives for the project's tests. Provides &Test, &Contention, and &Absurdity,
# and the `test` fixture that passes a &Test instance to each test function.
"""
import builtins
import operator
import functools
import contextlib

import pytest

class Absurdity(AssertionError):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__contains__': 'contains',

		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter, inverse=None):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse
		super().__init__(operator, former, latter)

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

	def __repr__(self):
		return '{0}({1!r}, {2!r}, {3!r}, inverse={4!r})'.format(
			self.__class__.__name__, self.operator, self.former, self.latter, self.inverse
		)

class Contention(object):
	"""
	# Contentions are made by the true division operator of &Test instances
	# and provide the assertions of a test.

	#!syntax/python
		from hls import types

		def test_integer(test):
			test/types.DecimalInteger.from_string('10') == 10

	# All of the comparison operations are passed on to the underlying objects
	# being examined; a false result raises &Absurdity.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	# Build operator methods based on operator.
	_override = {
		'__mod__' : ('__mod__', lambda x,y: x is y)
	}

	for k in ('__eq__', '__ne__', '__lt__', '__gt__', '__le__', '__ge__', '__contains__', '__mod__'):
		if k in _override:
			opname, v = _override[k]
		else:
			opname, v = k, getattr(operator, k)

		def check(self, ob, opname=opname, operator=v):
			x, y = self.object, ob
			if self.inverse:
				if operator(x, y): raise self.test.Absurdity(opname, x, y, inverse=True)
			else:
				if not operator(x, y): raise self.test.Absurdity(opname, x, y, inverse=False)
			return True
		locals()[k] = check
	del k, check, opname, v

	__hash__ = None

	##
	# Special cases for context manager exception traps.

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		test, x = self.test, self.object
		y = self.storage = val
		if isinstance(y, test.Fate):
			# Skips and explicit failures pass through.
			return

		if not isinstance(y, x): raise self.test.Absurdity("isinstance", x, y)
		return True # !!! Inhibiting raise.

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the given exception when it is called::

		#!syntax/python
			test/Exception ^ (lambda: subject())

		# Reads: "Test that 'Exception' is raised by 'subject'".
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

class Test(object):
	"""
	# An object that manages an individual test.
	# Provides interfaces for constructing and checking &Contention's using
	# a simple syntax.

	# [ Properties ]

	# /identifier/
		# The node identifier of the test function.

	# /exits/
		# A &contextlib.ExitStack for cleaning up allocations made during the test.
		# The fixture closes the stack after the test function returns.
	"""
	__slots__ = ('identifier', 'exits',)

	# These referenced via Test instances to allow subclasses to override
	# the implementations.
	Absurdity = Absurdity
	Contention = Contention
	Fate = (pytest.skip.Exception, pytest.fail.Exception)

	def __init__(self, identifier, ExitStack=contextlib.ExitStack):
		self.identifier = identifier
		self.exits = ExitStack()

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __rtruediv__(self, object):
		return self.Contention(self, object)

	def __floordiv__(self, object):
		return self.Contention(self, object, True)

	def __rfloordiv__(self, object):
		return self.Contention(self, object, True)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args, inverse=True)

	def issubclass(self, *args):
		if not builtins.issubclass(*args):
			raise self.Absurdity("issubclass", *args, inverse=True)

	def skip(self, condition):
		"""
		# Used by test subjects to skip the test given that the provided &condition is
		# &True.
		"""
		if condition: pytest.skip(str(condition))

	def fail(self, cause):
		pytest.fail(str(cause))

@pytest.fixture
def test(request):
	t = Test(request.node.nodeid)
	with t.exits:
		yield t
