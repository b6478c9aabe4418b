"""
# Calendar field implementations shared by chronologies.

# &BaseField provides the operations that can be expressed in terms of `get`, `set`,
# and the duration fields. The remaining classes cover the recurring shapes of
# calendar fields so that a chronology only implements the calendar specific ones.

# [ Elements ]
# /BaseField/
	# Defaults for every operation of &.abstract.DateTimeFieldOps.
# /UnitField/
	# A field whose unit is precise, but whose range is not; millisOfDay, dayOfMonth.
# /PreciseField/
	# A field whose unit and range are both precise; hourOfDay.
# /DecoratedField/
	# A field delegating to another field.
# /ZeroIsMaxField/
	# Replaces zero with the maximum; clock hours.
# /DividedField/
	# The quotient of another field; centuryOfEra.
# /RemainderField/
	# The remainder of another field; yearOfCentury.
# /UnsupportedField/
	# A field that the chronology lacks.
"""
import functools

from . import abstract
from . import arithmetic
from . import errors
from . import durations

class BaseField(object):
	"""
	# Implementation of the derived operations of a calendar field.

	# Subclasses implement &get, &set, &round_floor, &duration_field,
	# &range_duration_field, &minimum, and &maximum.
	"""
	__slots__ = ('type',)

	def __init__(self, type):
		self.type = type

	@property
	def name(self):
		return self.type.name

	def is_supported(self):
		return True

	def is_lenient(self):
		return False

	def get(self, instant):
		raise NotImplementedError

	def set(self, instant, value):
		raise NotImplementedError

	def add(self, instant, amount):
		return self.duration_field().add(instant, amount)

	def add_wrap_field(self, instant, amount):
		"""
		# Add &amount to the field's value wrapping within the field's range at &instant.
		"""
		current = self.get(instant)
		wrapped = arithmetic.wrap(current, amount, self.minimum(instant), self.maximum(instant))
		return self.set(instant, wrapped)

	def get_difference(self, minuend, subtrahend):
		return self.duration_field().get_difference(minuend, subtrahend)

	def get_difference_long(self, minuend, subtrahend):
		return self.duration_field().get_difference_long(minuend, subtrahend)

	def duration_field(self):
		raise NotImplementedError

	def range_duration_field(self):
		raise NotImplementedError

	def leap_duration_field(self):
		return None

	def is_leap(self, instant):
		return False

	def leap_amount(self, instant):
		return 0

	def minimum(self, instant=None):
		raise NotImplementedError

	def maximum(self, instant=None):
		raise NotImplementedError

	def minimum_for(self, partial, values=None):
		"""
		# The smallest legal value given the other values of &partial.
		"""
		return self.minimum()

	def maximum_for(self, partial, values=None):
		"""
		# The largest legal value given the other values of &partial.
		"""
		return self.maximum()

	# Rounding

	def round_floor(self, instant):
		raise NotImplementedError

	def round_ceiling(self, instant):
		floor = self.round_floor(instant)
		if floor != instant:
			instant = self.add(floor, 1)
		return instant

	def round_half_floor(self, instant):
		floor = self.round_floor(instant)
		ceiling = self.round_ceiling(instant)
		if instant - floor <= ceiling - instant:
			return floor
		return ceiling

	def round_half_ceiling(self, instant):
		floor = self.round_floor(instant)
		ceiling = self.round_ceiling(instant)
		if ceiling - instant <= instant - floor:
			return ceiling
		return floor

	def round_half_even(self, instant):
		floor = self.round_floor(instant)
		ceiling = self.round_ceiling(instant)
		below = instant - floor
		above = ceiling - instant

		if below < above:
			return floor
		elif below > above:
			return ceiling
		else:
			# Tie; select the even value.
			if self.get(ceiling) & 1 == 0:
				return ceiling
			return floor

	def remainder(self, instant):
		return instant - self.round_floor(instant)

	# Partial operations; &values is a list updated in place and returned.

	def set_partial(self, partial, index, values, value):
		"""
		# Set the value at &index and clamp the smaller fields that follow it.
		"""
		arithmetic.verify_bounds(self, value,
			self.minimum_for(partial, values), self.maximum_for(partial, values))
		values[index] = value

		for i in range(index + 1, len(partial)):
			field = partial.field(i)
			upper = field.maximum_for(partial, values)
			if values[i] > upper:
				values[i] = upper
			lower = field.minimum_for(partial, values)
			if values[i] < lower:
				values[i] = lower
		return values

	def _carry_field(self, partial, index):
		following = partial.field(index - 1)
		if self.range_duration_field().type != following.duration_field().type:
			raise errors.InvalidConfiguration("Fields invalid for add")
		return following

	def add_partial(self, partial, index, values, amount):
		"""
		# Add &amount to the value at &index carrying into the larger fields of &partial.

		# The larger field must be contiguous with this one. Exceeding the largest field
		# raises &errors.IllegalFieldValue.
		"""
		if amount == 0:
			return values

		carry = None
		while amount > 0:
			upper = self.maximum_for(partial, values)
			proposed = values[index] + amount
			if proposed <= upper:
				values[index] = proposed
				break
			if carry is None:
				if index == 0:
					raise errors.IllegalFieldValue(self.type, proposed, None, upper,
						"Maximum value exceeded for add")
				carry = self._carry_field(partial, index)
			amount -= (upper + 1) - values[index]
			values = carry.add_partial(partial, index - 1, values, 1)
			values[index] = self.minimum_for(partial, values)

		while amount < 0:
			lower = self.minimum_for(partial, values)
			proposed = values[index] + amount
			if proposed >= lower:
				values[index] = proposed
				break
			if carry is None:
				if index == 0:
					raise errors.IllegalFieldValue(self.type, proposed, lower, None,
						"Minimum value exceeded for add")
				carry = self._carry_field(partial, index)
			amount -= (lower - 1) - values[index]
			values = carry.add_partial(partial, index - 1, values, -1)
			values[index] = self.maximum_for(partial, values)

		return self.set_partial(partial, index, values, values[index])

	def add_wrap_partial(self, partial, index, values, amount):
		"""
		# Add &amount to the value at &index carrying into larger fields and wrapping
		# the whole partial when the largest field overflows; 10:20 plus 16 hours is 02:20.
		"""
		if amount == 0:
			return values

		carry = None
		while amount > 0:
			upper = self.maximum_for(partial, values)
			proposed = values[index] + amount
			if proposed <= upper:
				values[index] = proposed
				break
			if carry is None:
				if index == 0:
					amount -= (upper + 1) - values[index]
					values[index] = self.minimum_for(partial, values)
					continue
				carry = self._carry_field(partial, index)
			amount -= (upper + 1) - values[index]
			values = carry.add_wrap_partial(partial, index - 1, values, 1)
			values[index] = self.minimum_for(partial, values)

		while amount < 0:
			lower = self.minimum_for(partial, values)
			proposed = values[index] + amount
			if proposed >= lower:
				values[index] = proposed
				break
			if carry is None:
				if index == 0:
					amount -= (lower - 1) - values[index]
					values[index] = self.maximum_for(partial, values)
					continue
				carry = self._carry_field(partial, index)
			amount -= (lower - 1) - values[index]
			values = carry.add_wrap_partial(partial, index - 1, values, -1)
			values[index] = self.maximum_for(partial, values)

		return self.set_partial(partial, index, values, values[index])

	def add_wrap_field_partial(self, partial, index, values, amount):
		"""
		# Add &amount to the value at &index wrapping within the field; larger fields are unaffected.
		"""
		current = values[index]
		wrapped = arithmetic.wrap(current, amount,
			self.minimum_for(partial, values), self.maximum_for(partial, values))
		return self.set_partial(partial, index, values, wrapped)

	def __repr__(self):
		return '<%s: %s>' % (self.__class__.__name__, self.type.name)

class UnitField(BaseField):
	"""
	# A field with a precise unit whose range is implemented by the subclass.

	# &set moves the instant by whole units and the minimum value is zero unless
	# overridden.
	"""
	__slots__ = ('unit', 'unit_field')

	def __init__(self, type, unit_field):
		super().__init__(type)
		if not unit_field.is_precise():
			raise errors.InvalidConfiguration("Unit duration field must be precise")
		self.unit_field = unit_field
		self.unit = unit_field.unit_millis()
		if self.unit < 1:
			raise errors.InvalidConfiguration("The unit milliseconds must be at least 1")

	def maximum_for_set(self, instant, value):
		return self.maximum(instant)

	def set(self, instant, value):
		arithmetic.verify_bounds(self, value, self.minimum(), self.maximum_for_set(instant, value))
		return instant + (value - self.get(instant)) * self.unit

	def round_floor(self, instant):
		return instant - (instant % self.unit)

	def round_ceiling(self, instant):
		return -((-instant) // self.unit) * self.unit

	def remainder(self, instant):
		return instant % self.unit

	def duration_field(self):
		return self.unit_field

	def minimum(self, instant=None):
		return 0

class PreciseField(UnitField):
	"""
	# A field whose unit and range are both precise.

	# Values are `(instant // unit) % range`.
	"""
	__slots__ = ('range', 'range_field')

	def __init__(self, type, unit_field, range_field):
		super().__init__(type, unit_field)
		if not range_field.is_precise():
			raise errors.InvalidConfiguration("Range duration field must be precise")
		self.range_field = range_field
		self.range = range_field.unit_millis() // self.unit
		if self.range < 2:
			raise errors.InvalidConfiguration("The effective range must be at least 2")

	def get(self, instant):
		return (instant // self.unit) % self.range

	def add_wrap_field(self, instant, amount):
		current = self.get(instant)
		wrapped = arithmetic.wrap(current, amount, self.minimum(), self.maximum())
		return instant + (wrapped - current) * self.unit

	def set(self, instant, value):
		arithmetic.verify_bounds(self, value, self.minimum(), self.maximum())
		return instant + (value - self.get(instant)) * self.unit

	def range_duration_field(self):
		return self.range_field

	def maximum(self, instant=None):
		return self.range - 1

class DecoratedField(BaseField):
	"""
	# A field that delegates to &field; subclasses override the operations that differ.
	"""
	__slots__ = ('field',)

	def __init__(self, field, type=None):
		if not field.is_supported():
			raise errors.InvalidConfiguration("The field must be supported")
		super().__init__(type or field.type)
		self.field = field

	def is_lenient(self):
		return self.field.is_lenient()

	def get(self, instant):
		return self.field.get(instant)

	def set(self, instant, value):
		return self.field.set(instant, value)

	def add(self, instant, amount):
		return self.field.add(instant, amount)

	def get_difference_long(self, minuend, subtrahend):
		return self.field.get_difference_long(minuend, subtrahend)

	def duration_field(self):
		return self.field.duration_field()

	def range_duration_field(self):
		return self.field.range_duration_field()

	def leap_duration_field(self):
		return self.field.leap_duration_field()

	def is_leap(self, instant):
		return self.field.is_leap(instant)

	def leap_amount(self, instant):
		return self.field.leap_amount(instant)

	def minimum(self, instant=None):
		return self.field.minimum(instant)

	def maximum(self, instant=None):
		return self.field.maximum(instant)

	def round_floor(self, instant):
		return self.field.round_floor(instant)

class ZeroIsMaxField(DecoratedField):
	"""
	# Presents the zero value of the wrapped field as one more than its maximum.

	# Clock hours; `0` becomes `24` for clockhourOfDay and `12` for clockhourOfHalfday.
	"""
	__slots__ = ()

	def get(self, instant):
		value = self.field.get(instant)
		if value == 0:
			value = self.maximum()
		return value

	def add_wrap_field(self, instant, amount):
		return self.field.add_wrap_field(instant, amount)

	def set(self, instant, value):
		upper = self.maximum()
		arithmetic.verify_bounds(self, value, 1, upper)
		if value == upper:
			value = 0
		return self.field.set(instant, value)

	def minimum(self, instant=None):
		return 1

	def maximum(self, instant=None):
		return self.field.maximum(instant) + 1

	def maximum_for(self, partial, values=None):
		return self.field.maximum_for(partial, values) + 1

	def round_ceiling(self, instant):
		return self.field.round_ceiling(instant)

	def remainder(self, instant):
		return self.field.remainder(instant)

class DividedField(DecoratedField):
	"""
	# The floored quotient of the wrapped field's value and &divisor.

	# [ Properties ]
	# /divisor/
		# The number of wrapped units per unit of this field.
	"""
	__slots__ = ('divisor', 'scaled', 'range_field', 'lower', 'upper')

	def __init__(self, field, type, divisor, range_field=None):
		super().__init__(field, type)
		if divisor < 2:
			raise errors.InvalidConfiguration("The divisor must be at least 2")

		self.divisor = divisor
		unit = field.duration_field()
		if unit is None:
			self.scaled = None
		else:
			self.scaled = durations.ScaledField(unit, type.duration_type, divisor)
		self.range_field = range_field

		self.lower = field.minimum() // divisor
		self.upper = field.maximum() // divisor

	def get(self, instant):
		return self.field.get(instant) // self.divisor

	def add(self, instant, amount):
		return self.field.add(instant, amount * self.divisor)

	def get_difference_long(self, minuend, subtrahend):
		return arithmetic.quotient(self.field.get_difference_long(minuend, subtrahend), self.divisor)

	def get_difference(self, minuend, subtrahend):
		return arithmetic.to_int(self.get_difference_long(minuend, subtrahend))

	def add_wrap_field(self, instant, amount):
		return self.set(instant, arithmetic.wrap(self.get(instant), amount, self.lower, self.upper))

	def set(self, instant, value):
		arithmetic.verify_bounds(self, value, self.lower, self.upper)
		remainder = self.field.get(instant) % self.divisor
		return self.field.set(instant, value * self.divisor + remainder)

	def duration_field(self):
		return self.scaled

	def range_duration_field(self):
		if self.range_field is not None:
			return self.range_field
		return self.field.range_duration_field()

	def minimum(self, instant=None):
		return self.lower

	def maximum(self, instant=None):
		return self.upper

	def round_floor(self, instant):
		field = self.field
		return field.round_floor(field.set(instant, self.get(instant) * self.divisor))

class RemainderField(DecoratedField):
	"""
	# The floored remainder of the field divided by a &DividedField.

	# Values range from zero to one less than the divisor.
	"""
	__slots__ = ('divided', 'divisor')

	def __init__(self, divided, type):
		super().__init__(divided.field, type)
		self.divided = divided
		self.divisor = divided.divisor

	def get(self, instant):
		return self.field.get(instant) % self.divisor

	def add_wrap_field(self, instant, amount):
		return self.set(instant, arithmetic.wrap(self.get(instant), amount, 0, self.divisor - 1))

	def set(self, instant, value):
		arithmetic.verify_bounds(self, value, 0, self.divisor - 1)
		quotient = self.field.get(instant) // self.divisor
		return self.field.set(instant, quotient * self.divisor + value)

	def range_duration_field(self):
		return self.divided.duration_field()

	def minimum(self, instant=None):
		return 0

	def maximum(self, instant=None):
		return self.divisor - 1

	def round_floor(self, instant):
		return self.field.round_floor(instant)

	def round_ceiling(self, instant):
		return self.field.round_ceiling(instant)

	def remainder(self, instant):
		return self.field.remainder(instant)

class UnsupportedField(BaseField):
	"""
	# A field that the chronology does not have.

	# The identity, support, and duration field queries succeed;
	# everything else raises &errors.UnsupportedField.
	"""
	__slots__ = ('unit_field',)

	def __init__(self, type, unit_field):
		super().__init__(type)
		self.unit_field = unit_field

	def is_supported(self):
		return False

	def duration_field(self):
		return self.unit_field

	def range_duration_field(self):
		return None

	def leap_duration_field(self):
		return None

	def add(self, instant, amount):
		return self.unit_field.add(instant, amount)

	def get_difference(self, minuend, subtrahend):
		return self.unit_field.get_difference(minuend, subtrahend)

	def get_difference_long(self, minuend, subtrahend):
		return self.unit_field.get_difference_long(minuend, subtrahend)

	def _unsupported(self, *args, **kw):
		raise errors.UnsupportedField(self.type.name)

	get = _unsupported
	set = _unsupported
	add_wrap_field = _unsupported
	is_leap = _unsupported
	leap_amount = _unsupported
	minimum = _unsupported
	maximum = _unsupported
	minimum_for = _unsupported
	maximum_for = _unsupported
	round_floor = _unsupported
	round_ceiling = _unsupported
	round_half_floor = _unsupported
	round_half_ceiling = _unsupported
	round_half_even = _unsupported
	remainder = _unsupported
	set_partial = _unsupported
	add_partial = _unsupported
	add_wrap_partial = _unsupported
	add_wrap_field_partial = _unsupported
	del _unsupported

@functools.lru_cache(maxsize=None)
def unsupported(type, unit_field):
	"""
	# The shared &UnsupportedField for &type with the duration field, &unit_field.
	"""
	return UnsupportedField(type, unit_field)

def is_contiguous(partial):
	"""
	# Whether each field of &partial cycles within the unit of the field before it.

	# Contiguous partials, such as a date or a time of day, can be resolved against
	# an instant without reference to the absent fields.
	"""
	last = None
	for i in range(len(partial)):
		field = partial.field(i)
		if i > 0:
			upper = field.range_duration_field()
			if upper is None or upper.type != last.type:
				return False
		last = field.duration_field()
	return True

abstract.DateTimeFieldOps.register(BaseField)
