"""
# Test primitives: &Test, &Contention, &Absurdity, and &Fate.
"""
import builtins
import operator
import functools
import contextlib

class Absurdity(Exception):
	"""
	# Raised by &Contention instances when a contended relationship does not hold.
	"""

	# Reconstitution of the contended expression.
	operator_symbols = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__le__': '<=',
		'__gt__': '>',
		'__ge__': '>=',
		'__mod__': 'is',
		'__lshift__': 'contains',
	}

	def __init__(self, operator, former, latter, inverse=None):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse

	def __str__(self):
		symbol = self.operator_symbols.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), symbol, repr(self.latter)))

	def __repr__(self):
		return '{0}({1!r}, {2!r}, {3!r}, inverse={4!r})'.format(
			self.__class__.__name__, self.operator, self.former, self.latter, self.inverse
		)

class Contention(object):
	"""
	# The subject of an assertion made by a &Test.

	#!python
		def test_offsets(test):
			test/zones.print_offset(-8100000) == "-02:15"
			test/errors.InvalidConfiguration ^ (lambda: zones.parse_offset("+2"))

	# Comparison operators are applied to the contended object and raise &Absurdity
	# when the result is false, or true for inverse contentions made with `//`.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	_override = {
		'__mod__': (lambda x, y: x is y),
		'__lshift__': (lambda x, y: y in x),
	}

	for _name in ('__eq__', '__ne__', '__lt__', '__le__', '__gt__', '__ge__', '__mod__', '__lshift__'):
		def check(self, ob, _name=_name, _op=_override.get(_name, getattr(operator, _name))):
			x = self.object
			if bool(_op(x, ob)) == self.inverse:
				raise self.test.Absurdity(_name, x, ob, inverse=self.inverse)
			return True
		locals()[_name] = check
	del _name, check

	__hash__ = None

	# Exception traps.

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		test, x = self.test, self.object
		y = self.storage = val
		if isinstance(y, test.Fate):
			# Fates are never trapped.
			return

		if not isinstance(y, x):
			raise self.test.Absurdity("isinstance", x, y)
		return True

	def __xor__(self, subject):
		"""
		# Contend that &subject raises the exception when called.

		#!python
			test/Exception ^ (lambda: subject())
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

class Fate(BaseException):
	"""
	# The conclusion of a test; raised by subjects to end the test early.
	"""
	name = 'fate'
	line = None

	descriptors = {
		# Abstract, Impact
		'return': ("passed", 1),
		'pass': ("passed", 1),
		'skip': ("skipped", 0),
		'fail': ("failed", -1),
		'interrupt': ("interrupted", -1),
	}

	def __init__(self, content, subtype=None):
		self.content = content
		self.subtype = subtype or self.name

	@property
	def impact(self):
		return self.descriptors[self.subtype][1]

	@property
	def negative(self):
		return self.impact < 0

	def __str__(self):
		return '%s: %s' % (self.descriptors[self.subtype][0], self.content)

class Test(object):
	"""
	# A test subject and its fate.

	# [ Properties ]
	# /identifier/
		# The qualified name of the subject.
	# /subject/
		# The callable performing contentions with the &Test instance.
	# /fate/
		# The conclusion of the test after &seal.
	# /exits/
		# A &contextlib.ExitStack for resources allocated by the subject.
	"""
	__slots__ = ('subject', 'identifier', 'fate', 'exits',)

	Absurdity = Absurdity
	Contention = Contention
	Fate = Fate

	def __init__(self, identifier, subject, ExitStack=contextlib.ExitStack):
		self.identifier = identifier
		self.subject = subject
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

	def seal(self, isinstance=builtins.isinstance):
		"""
		# Execute the subject and assign &fate.

		# Exceptions are trapped and recorded as a failing &Fate whose cause is the
		# exception; control exceptions are re-raised after the fate is assigned.
		"""
		if hasattr(self, 'fate'):
			raise RuntimeError("test has already been sealed")

		tb = None
		try:
			r = self.subject(self)
			self.fate = r if isinstance(r, self.Fate) else self.Fate(r, subtype='return')
		except BaseException as err:
			if isinstance(err, self.Fate):
				tb = err.__traceback__
				self.fate = err
			elif not isinstance(err, Exception):
				self.fate = self.Fate('test raised interrupt', subtype='interrupt')
				self.fate.__cause__ = err
				raise
			else:
				tb = err.__traceback__
				self.fate = self.Fate('test raised exception', subtype='fail')
				self.fate.__cause__ = err

		if tb is not None:
			while tb.tb_next is not None:
				tb = tb.tb_next
			self.fate.line = tb.tb_lineno

	def skip(self, condition):
		"""
		# Skip the test when &condition is true.
		"""
		if condition:
			raise self.Fate(condition, subtype='skip')

	def fail(self, cause):
		raise self.Fate(cause, subtype='fail')
