"""
# Duration field implementations.

# [ Elements ]
# /MillisField/
	# The precise millisecond unit.
# /PreciseField/
	# A unit with an exact size in milliseconds.
# /ScaledField/
	# A multiple of another duration field.
# /ImpreciseField/
	# A unit whose size varies; arithmetic is performed by its calendar field.
# /UnsupportedField/
	# A unit that the chronology lacks.
"""
import functools

from . import abstract
from . import arithmetic
from . import errors
from .fieldtypes import DurationFieldType

class DurationField(object):
	"""
	# Common implementation of &.abstract.DurationFieldOps.
	"""
	__slots__ = ('type',)

	def __init__(self, type:DurationFieldType):
		self.type = type

	@property
	def name(self):
		return self.type.name

	def is_supported(self):
		return True

	def is_precise(self):
		return False

	def unit_millis(self):
		raise NotImplementedError

	def get_value_long(self, duration, instant=None):
		raise NotImplementedError

	def get_value(self, duration, instant=None):
		"""
		# The whole units in &duration confined to the 32-bit range.
		"""
		return arithmetic.to_int(self.get_value_long(duration, instant))

	def get_millis(self, value, instant=None):
		raise NotImplementedError

	def add(self, instant, value):
		raise NotImplementedError

	def subtract(self, instant, value):
		return self.add(instant, -value)

	def get_difference_long(self, minuend, subtrahend):
		raise NotImplementedError

	def get_difference(self, minuend, subtrahend):
		return arithmetic.to_int(self.get_difference_long(minuend, subtrahend))

	def _key(self):
		return self.unit_millis() if self.is_supported() else 0

	def __lt__(self, ob):
		return self._key() < ob._key()

	def __gt__(self, ob):
		return self._key() > ob._key()

	def __le__(self, ob):
		return self._key() <= ob._key()

	def __ge__(self, ob):
		return self._key() >= ob._key()

	def __repr__(self):
		return '<%s: %s>' % (self.__class__.__name__, self.type.name)

class PreciseField(DurationField):
	"""
	# A duration field whose units are exactly &unit milliseconds.
	"""
	__slots__ = ('unit',)

	def __init__(self, type, unit):
		super().__init__(type)
		self.unit = unit

	def is_precise(self):
		return True

	def unit_millis(self):
		return self.unit

	def get_value_long(self, duration, instant=None):
		return arithmetic.quotient(duration, self.unit)

	def get_millis(self, value, instant=None):
		return arithmetic.multiply(value, self.unit)

	def add(self, instant, value):
		return arithmetic.add(instant, arithmetic.multiply(value, self.unit))

	def get_difference_long(self, minuend, subtrahend):
		return arithmetic.quotient(arithmetic.subtract(minuend, subtrahend), self.unit)

	def __eq__(self, ob):
		return type(ob) is type(self) and ob.type == self.type and ob.unit == self.unit

	def __hash__(self):
		return hash((self.type, self.unit))

class MillisField(PreciseField):
	"""
	# The base unit.
	"""
	__slots__ = ()

	def __init__(self):
		super().__init__(DurationFieldType.millis, 1)

	def get_value_long(self, duration, instant=None):
		return duration

	def get_millis(self, value, instant=None):
		return value

	def add(self, instant, value):
		return arithmetic.add(instant, value)

	def get_difference_long(self, minuend, subtrahend):
		return arithmetic.subtract(minuend, subtrahend)

millis = MillisField()

class ScaledField(DurationField):
	"""
	# A duration field counting &scalar units of a wrapped field; centuries of years.
	"""
	__slots__ = ('field', 'scalar')

	def __init__(self, field, type, scalar):
		if not field.is_supported():
			raise errors.InvalidConfiguration("The field must be supported")
		if scalar in (0, 1):
			raise errors.InvalidConfiguration("The scalar must not be 0 or 1")
		super().__init__(type)
		self.field = field
		self.scalar = scalar

	def is_precise(self):
		return self.field.is_precise()

	def unit_millis(self):
		return self.field.unit_millis() * self.scalar

	def get_value_long(self, duration, instant=None):
		return arithmetic.quotient(self.field.get_value_long(duration, instant), self.scalar)

	def get_millis(self, value, instant=None):
		return self.field.get_millis(arithmetic.multiply(value, self.scalar), instant)

	def add(self, instant, value):
		return self.field.add(instant, arithmetic.multiply(value, self.scalar))

	def get_difference_long(self, minuend, subtrahend):
		return arithmetic.quotient(self.field.get_difference_long(minuend, subtrahend), self.scalar)

class ImpreciseField(DurationField):
	"""
	# A duration field whose unit size depends on the instant.

	# Arithmetic is delegated to the calendar field that owns the unit so that
	# month and year lengths are respected.

	# [ Properties ]
	# /owner/
		# The calendar field performing the arithmetic.
	# /average/
		# The average unit size used when no instant is available.
	"""
	__slots__ = ('owner', 'average')

	def __init__(self, type, average, owner):
		super().__init__(type)
		self.average = average
		self.owner = owner

	def unit_millis(self):
		return self.average

	def get_value_long(self, duration, instant=None):
		if instant is None:
			return arithmetic.quotient(duration, self.average)
		return self.owner.get_difference_long(arithmetic.add(instant, duration), instant)

	def get_millis(self, value, instant=None):
		if instant is None:
			return arithmetic.multiply(value, self.average)
		return arithmetic.subtract(self.owner.add(instant, value), instant)

	def add(self, instant, value):
		return self.owner.add(instant, value)

	def get_difference_long(self, minuend, subtrahend):
		return self.owner.get_difference_long(minuend, subtrahend)

class UnsupportedField(DurationField):
	"""
	# A duration field for a unit the chronology does not have.

	# Every operation other than the identity and support queries raises
	# &errors.UnsupportedField.
	"""
	__slots__ = ()

	def is_supported(self):
		return False

	def is_precise(self):
		return True

	def unit_millis(self):
		return 0

	def _unsupported(self, *args):
		raise errors.UnsupportedField(self.type.name)

	get_value_long = _unsupported
	get_value = _unsupported
	get_millis = _unsupported
	add = _unsupported
	subtract = _unsupported
	get_difference_long = _unsupported
	get_difference = _unsupported
	del _unsupported

	def __eq__(self, ob):
		return type(ob) is type(self) and ob.type == self.type

	def __hash__(self):
		return hash((UnsupportedField, self.type))

@functools.lru_cache(maxsize=None)
def unsupported(type):
	"""
	# The shared &UnsupportedField for &type.
	"""
	return UnsupportedField(type)

abstract.DurationFieldOps.register(DurationField)
