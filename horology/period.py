"""
# Periods: amounts of calendar units.

# A period holds one 32-bit amount for each unit of its &.periodtypes.PeriodType.
# The amounts are independent; one day and twenty-four hours are different periods
# even though they often describe the same duration.

# [ Elements ]
# /Period/
	# The immutable period.
# /MutablePeriod/
	# A period whose amounts are updated in place.
# /Years/
	# A number of years.
# /Months/
	# A number of months.
# /Weeks/
	# A number of weeks.
# /Days/
	# A number of days.
# /Hours/
	# A number of hours.
# /Minutes/
	# A number of minutes.
# /Seconds/
	# A number of seconds.
"""
from . import abstract
from . import arithmetic
from . import constants
from . import errors
from .fieldtypes import DurationFieldType as D
from .periodtypes import PeriodType, slots

# Unit names in standard slot order; used for keyword construction and accessors.
unit_names = tuple(t.name for t in slots)

def _resolve(ob, chronology):
	# Normalize an instant-like object to `(millis, chronology)`.
	if isinstance(ob, int):
		if chronology is None:
			from . import iso
			chronology = iso.ISOChronology.instance()
		return ob, chronology
	return ob.millis, chronology or ob.chronology

def _partial_bounds(start, end, base=0):
	# Resolve a pair of contiguous partials to UTC millisecond instants.
	if start is None or end is None:
		raise errors.InvalidConfiguration("ReadablePartial objects must not be null")
	if start.field_types() != end.field_types():
		raise errors.InvalidConfiguration("ReadablePartial objects must have the same set of fields")
	if not start.is_contiguous():
		raise errors.InvalidConfiguration("ReadablePartial objects must be contiguous")
	chronology = start.chronology.with_utc()
	return chronology, chronology.set_partial(start, base), chronology.set_partial(end, base)

def _standard_millis(p, *, weeks=True, days=True, hours=True, minutes=True):
	# Sum the precise units of the period selected by the flags.
	get = p.period_type.get_indexed_field
	total = get(p, 7)
	total += get(p, 6) * constants.millis_per_second
	if minutes:
		total += get(p, 5) * constants.millis_per_minute
	if hours:
		total += get(p, 4) * constants.millis_per_hour
	if days:
		total += get(p, 3) * constants.millis_per_day
	if weeks:
		total += get(p, 2) * constants.millis_per_week
	return total

class BasePeriod(object):
	"""
	# Common implementation of the period classes.

	# [ Properties ]
	# /period_type/
		# The units of the period.
	# /_values/
		# The amounts of each unit in the order of &period_type.
	"""
	__slots__ = ('period_type', '_values')

	def __init__(self, values=None, period_type=None):
		if period_type is None:
			period_type = PeriodType.standard()
		self.period_type = period_type
		if values is None:
			values = [0] * len(period_type)
		elif len(values) != len(period_type):
			raise errors.InvalidConfiguration("values must have one amount for each unit")
		self._values = [arithmetic.to_int(v) for v in values]

	@classmethod
	def _construct(Class, values, period_type):
		return Class(values, period_type)

	@classmethod
	def of(Class, period_type=None, **units):
		"""
		# Construct a period from keyword amounts; `Period.of(months=2, days=3)`.

		# [ Exceptions ]
		# /errors.UnsupportedField/
			# A non-zero amount was given for a unit absent from &period_type.
		"""
		if period_type is None:
			period_type = PeriodType.standard()
		values = [0] * len(period_type)
		for name, amount in units.items():
			try:
				slot = unit_names.index(name)
			except ValueError:
				raise errors.InvalidConfiguration("unknown period unit: " + repr(name))
			if amount != 0:
				period_type.set_indexed_field(values, slot, amount)
		return Class._construct(values, period_type)

	@classmethod
	def between(Class, start, end, period_type=None, chronology=None):
		"""
		# The period from &start to &end.

		# The bounds may be millisecond instants, instants, or contiguous partials of
		# the same field types. Units are extracted largest first.
		"""
		if period_type is None:
			period_type = PeriodType.standard()

		if hasattr(start, 'field_types'):
			chronology, s, e = _partial_bounds(start, end)
		else:
			s, chronology = _resolve(start, chronology)
			e, _ = _resolve(end, chronology)

		p = Class._construct(None, period_type)
		p._values = chronology.get_period(p, s, e)
		return p

	@classmethod
	def from_duration(Class, duration, period_type=None, chronology=None):
		"""
		# Split the millisecond &duration into the precise units of &period_type.

		# Imprecise units, years and months, are left at zero.
		"""
		if period_type is None:
			period_type = PeriodType.standard()
		if chronology is None:
			from . import iso
			chronology = iso.ISOChronology.utc()
		if hasattr(duration, 'millis'):
			duration = duration.millis

		p = Class._construct(None, period_type)
		p._values = chronology.with_utc().get_period_duration(p, duration)
		return p

	def __len__(self):
		return len(self._values)

	def size(self):
		return len(self._values)

	def field_type(self, index):
		return self.period_type.field_type(index)

	def field_types(self):
		return self.period_type.types

	def value(self, index):
		return self._values[index]

	def values(self):
		return tuple(self._values)

	def get(self, type):
		"""
		# The amount of the unit &type; zero when unsupported.
		"""
		i = self.period_type.index_of(type)
		return 0 if i == -1 else self._values[i]

	def is_supported(self, type):
		return self.period_type.is_supported(type)

	def to_period(self):
		return Period(list(self._values), self.period_type)

	def to_mutable_period(self):
		return MutablePeriod(list(self._values), self.period_type)

	def to_duration_from(self, start):
		"""
		# The duration of the period when added to the instant &start.
		"""
		millis, chronology = _resolve(start, None)
		from .types import Duration
		return Duration(chronology.add_period(self, millis, 1) - millis)

	def _converted(self, period_type):
		# Copy the amounts into &period_type; unsupported non-zero amounts raise.
		values = [0] * len(period_type)
		for i, t in enumerate(self.period_type.types):
			amount = self._values[i]
			if amount != 0:
				j = period_type.index_of(t)
				if j == -1:
					raise errors.UnsupportedField(t.name,
						"Period does not support field '%s'" % (t.name,))
				values[j] = amount
		return values

	def _check_years_and_months(self, destination):
		for slot, name in ((1, 'months'), (0, 'years')):
			if self.period_type.get_indexed_field(self, slot) != 0:
				raise errors.UnsupportedField(name,
					"Cannot convert to %s as this period contains months and months vary in length" % (destination,))

	def __eq__(self, ob):
		if not isinstance(ob, BasePeriod):
			return NotImplemented
		return ob.period_type == self.period_type and list(ob._values) == list(self._values)

	def __repr__(self):
		parts = [
			'%s=%d' % (t.name, v)
			for t, v in zip(self.period_type.types, self._values) if v != 0
		]
		return '%s(%s)' % (self.__class__.__name__, ', '.join(parts))

class Period(BasePeriod):
	"""
	# An immutable period.

	#!python
		from horology.period import Period
		p = Period.of(hours=25, minutes=70).normalized_standard()
		(p.days, p.hours, p.minutes) == (1, 2, 10)
	"""
	__slots__ = ()

	def __hash__(self):
		return hash((self.period_type, tuple(self._values)))

	def _with_values(self, values):
		if values == self._values:
			return self
		return Period(values, self.period_type)

	def with_period_type(self, period_type):
		if period_type is None:
			period_type = PeriodType.standard()
		if period_type == self.period_type:
			return self
		return Period(self._converted(period_type), period_type)

	def with_field(self, type, value):
		"""
		# Set the amount of the unit &type.
		"""
		if type is None:
			raise errors.InvalidConfiguration("Field must not be null")
		i = self.period_type.index_of(type)
		if i == -1:
			raise errors.UnsupportedField(type.name, "Period does not support field '%s'" % (type.name,))
		values = list(self._values)
		values[i] = arithmetic.to_int(value)
		return self._with_values(values)

	def with_field_added(self, type, amount):
		if type is None:
			raise errors.InvalidConfiguration("Field must not be null")
		if amount == 0:
			return self
		i = self.period_type.index_of(type)
		if i == -1:
			raise errors.UnsupportedField(type.name, "Period does not support field '%s'" % (type.name,))
		values = list(self._values)
		values[i] = arithmetic.add_int(values[i], amount)
		return self._with_values(values)

	def with_fields(self, period):
		"""
		# Replace the amounts of this period with the non-zero amounts of &period.
		"""
		if period is None:
			return self
		values = list(self._values)
		for i in range(len(period)):
			amount = period.value(i)
			if amount != 0:
				t = period.field_type(i)
				j = self.period_type.index_of(t)
				if j == -1:
					raise errors.UnsupportedField(t.name, "Period does not support field '%s'" % (t.name,))
				values[j] = amount
		return self._with_values(values)

	def _combined(self, period, sign):
		if period is None:
			return self
		values = list(self._values)
		pt = self.period_type
		for slot, t in enumerate(slots):
			amount = period.get(t) if hasattr(period, 'get') else 0
			if amount != 0:
				pt.add_indexed_field(values, slot, arithmetic.multiply_int(amount, sign))
		return self._with_values(values)

	def plus(self, period):
		return self._combined(period, 1)

	def minus(self, period):
		return self._combined(period, -1)

	def multiplied_by(self, scalar):
		if scalar == 1 or self == ZERO:
			return self
		return Period([arithmetic.multiply_int(v, scalar) for v in self._values], self.period_type)

	def negated(self):
		return self.multiplied_by(-1)

	def __neg__(self):
		return self.negated()

	def __add__(self, ob):
		return self.plus(ob)

	def __sub__(self, ob):
		return self.minus(ob)

	# Conversion to precise units.

	def to_standard_duration(self):
		"""
		# The duration of the period assuming days of 24 hours and weeks of seven days.

		# [ Exceptions ]
		# /errors.UnsupportedField/
			# The period has years or months.
		"""
		self._check_years_and_months('Duration')
		from .types import Duration
		return Duration(arithmetic.check_long(_standard_millis(self)))

	def to_standard_weeks(self):
		self._check_years_and_months('Weeks')
		millis = _standard_millis(self, weeks=False)
		weeks = self.period_type.get_indexed_field(self, 2)
		return Weeks(arithmetic.to_int(weeks + arithmetic.quotient(millis, constants.millis_per_week)))

	def to_standard_days(self):
		self._check_years_and_months('Days')
		get = self.period_type.get_indexed_field
		millis = _standard_millis(self, weeks=False, days=False)
		days = arithmetic.quotient(millis, constants.millis_per_day) + get(self, 3) + get(self, 2) * 7
		return Days(arithmetic.to_int(days))

	def to_standard_hours(self):
		self._check_years_and_months('Hours')
		get = self.period_type.get_indexed_field
		millis = _standard_millis(self, weeks=False, days=False, hours=False)
		hours = arithmetic.quotient(millis, constants.millis_per_hour) \
			+ get(self, 4) + get(self, 3) * 24 + get(self, 2) * 168
		return Hours(arithmetic.to_int(hours))

	def to_standard_minutes(self):
		self._check_years_and_months('Minutes')
		get = self.period_type.get_indexed_field
		millis = _standard_millis(self, weeks=False, days=False, hours=False, minutes=False)
		minutes = arithmetic.quotient(millis, constants.millis_per_minute) \
			+ get(self, 5) + get(self, 4) * 60 + get(self, 3) * 1440 + get(self, 2) * 10080
		return Minutes(arithmetic.to_int(minutes))

	def to_standard_seconds(self):
		self._check_years_and_months('Seconds')
		get = self.period_type.get_indexed_field
		seconds = arithmetic.quotient(get(self, 7), constants.millis_per_second) \
			+ get(self, 6) + get(self, 5) * 60 + get(self, 4) * 3600 \
			+ get(self, 3) * 86400 + get(self, 2) * 604800
		return Seconds(arithmetic.to_int(seconds))

	def normalized_standard(self, period_type=None):
		"""
		# Carry the precise units into the larger units of &period_type.

		# Years and months are combined separately, twelve months to a year, as
		# they cannot be converted to the smaller units.

		# [ Exceptions ]
		# /errors.UnsupportedField/
			# &period_type lacks years or months and the amount cannot be expressed.
		"""
		if period_type is None:
			period_type = PeriodType.standard()

		millis = _standard_millis(self)
		result = Period.from_duration(millis, period_type)

		get = self.period_type.get_indexed_field
		years = get(self, 0)
		months = get(self, 1)
		if years != 0 or months != 0:
			total = years * 12 + months
			if period_type.is_supported(D.years):
				normalized = arithmetic.to_int(arithmetic.quotient(total, 12))
				result = result.with_field(D.years, normalized)
				total -= normalized * 12
			if period_type.is_supported(D.months):
				normalized = arithmetic.to_int(total)
				result = result.with_field(D.months, normalized)
				total -= normalized
			if total != 0:
				raise errors.UnsupportedField('months',
					"Unable to normalize as PeriodType is missing either years or months "
					"but period has a month/year amount: %r" % (self,))

		return result

	def __reduce__(self):
		return (Period, (list(self._values), self.period_type))

# Generate the unit accessors: `years`, `with_years`, `plus_years`, and `minus_years`.
def _period_accessors(Class, mutable=False):
	for slot, name in enumerate(unit_names):
		def get(self, _slot=slot):
			return self.period_type.get_indexed_field(self, _slot)
		setattr(Class, name, property(get))

		if mutable:
			def set(self, value, _slot=slot):
				self.period_type.set_indexed_field(self._values, _slot, arithmetic.to_int(value))
			def add(self, amount, _slot=slot):
				self.period_type.add_indexed_field(self._values, _slot, amount)
			set.__name__ = 'set_' + name
			add.__name__ = 'add_' + name
			setattr(Class, set.__name__, set)
			setattr(Class, add.__name__, add)
			continue

		def with_(self, value, _slot=slot):
			values = list(self._values)
			self.period_type.set_indexed_field(values, _slot, arithmetic.to_int(value))
			return self._with_values(values)
		def plus(self, amount, _slot=slot):
			if amount == 0:
				return self
			values = list(self._values)
			self.period_type.add_indexed_field(values, _slot, amount)
			return self._with_values(values)
		def minus(self, amount, _slot=slot, _plus=plus):
			return _plus(self, arithmetic.negate(amount))

		with_.__name__ = 'with_' + name
		plus.__name__ = 'plus_' + name
		minus.__name__ = 'minus_' + name
		setattr(Class, with_.__name__, with_)
		setattr(Class, plus.__name__, plus)
		setattr(Class, minus.__name__, minus)

_period_accessors(Period)

ZERO = Period()

class MutablePeriod(BasePeriod):
	"""
	# A period whose amounts are updated in place.

	# Instances are not safe for concurrent mutation.
	"""
	__slots__ = ()

	__hash__ = None

	def set_value(self, index, value):
		self._values[index] = arithmetic.to_int(value)

	def set_field(self, type, value):
		i = self.period_type.index_of(type)
		if i == -1:
			raise errors.UnsupportedField(type.name, "Period does not support field '%s'" % (type.name,))
		self._values[i] = arithmetic.to_int(value)

	def add_field(self, type, amount):
		if amount == 0:
			return
		i = self.period_type.index_of(type)
		if i == -1:
			raise errors.UnsupportedField(type.name, "Period does not support field '%s'" % (type.name,))
		self._values[i] = arithmetic.add_int(self._values[i], amount)

	def set_period(self, period):
		"""
		# Replace all amounts with those of &period; &None clears.
		"""
		if period is None:
			self.clear()
			return
		self._values = self._converted_from(period)

	def _converted_from(self, period):
		values = [0] * len(self.period_type)
		for i in range(len(period)):
			amount = period.value(i)
			t = period.field_type(i)
			if amount != 0:
				j = self.period_type.index_of(t)
				if j == -1:
					raise errors.UnsupportedField(t.name, "Period does not support field '%s'" % (t.name,))
				values[j] = amount
		return values

	def add(self, period):
		"""
		# Add the amounts of &period to this period.
		"""
		if period is None:
			return
		values = list(self._values)
		for slot, t in enumerate(slots):
			amount = period.get(t)
			if amount != 0:
				self.period_type.add_indexed_field(values, slot, amount)
		self._values = values

	def clear(self):
		self._values = [0] * len(self.period_type)

	def copy(self):
		return MutablePeriod(list(self._values), self.period_type)

_period_accessors(MutablePeriod, mutable=True)

class SingleFieldPeriod(object):
	"""
	# A period of one unit; subclasses define &unit.

	# [ Properties ]
	# /amount/
		# The number of units.
	"""
	__slots__ = ('amount',)

	unit = None

	#: The base instant for resolving partials; a leap year so February 29 resolves.
	partial_base = 2 * 365 * constants.millis_per_day

	def __init__(self, amount):
		self.amount = arithmetic.to_int(amount)

	@classmethod
	def between(Class, start, end, chronology=None):
		"""
		# The number of whole units from &start to &end.

		# The bounds may be millisecond instants, instants, or contiguous partials.
		"""
		if hasattr(start, 'field_types'):
			chronology, s, e = _partial_bounds(start, end, Class.partial_base)
		else:
			s, chronology = _resolve(start, chronology)
			e, _ = _resolve(end, chronology)
		return Class(Class.unit.get_field(chronology).get_difference(e, s))

	@property
	def period_type(self):
		return PeriodType.for_unit(self.unit)

	def __len__(self):
		return 1

	def field_type(self, index):
		if index != 0:
			raise IndexError(index)
		return self.unit

	def value(self, index):
		if index != 0:
			raise IndexError(index)
		return self.amount

	def get(self, type):
		return self.amount if type == self.unit else 0

	def to_period(self):
		return Period.of(**{self.unit.name: self.amount})

	def _amount(self, ob):
		if isinstance(ob, SingleFieldPeriod):
			if ob.unit != self.unit:
				raise errors.InvalidConfiguration("periods must have the same unit")
			return ob.amount
		return ob

	def plus(self, ob):
		amount = self._amount(ob)
		if amount == 0:
			return self
		return self.__class__(arithmetic.add_int(self.amount, amount))

	def minus(self, ob):
		return self.plus(arithmetic.negate(self._amount(ob)))

	def multiplied_by(self, scalar):
		return self.__class__(arithmetic.multiply_int(self.amount, scalar))

	def divided_by(self, divisor):
		if divisor == 1:
			return self
		return self.__class__(arithmetic.quotient(self.amount, divisor))

	def negated(self):
		return self.__class__(arithmetic.negate(self.amount))

	def is_greater_than(self, ob):
		return self.amount > (0 if ob is None else self._amount(ob))

	def is_less_than(self, ob):
		return self.amount < (0 if ob is None else self._amount(ob))

	def __int__(self):
		return self.amount

	def __eq__(self, ob):
		return type(ob) is type(self) and ob.amount == self.amount

	def __hash__(self):
		return hash((self.unit, self.amount))

	def __lt__(self, ob):
		return self.amount < self._amount(ob)

	def __le__(self, ob):
		return self.amount <= self._amount(ob)

	def __gt__(self, ob):
		return self.amount > self._amount(ob)

	def __ge__(self, ob):
		return self.amount >= self._amount(ob)

	def __repr__(self):
		return '%s(%d)' % (self.__class__.__name__, self.amount)

class Years(SingleFieldPeriod):
	__slots__ = ()
	unit = D.years

class Months(SingleFieldPeriod):
	__slots__ = ()
	unit = D.months

class Weeks(SingleFieldPeriod):
	__slots__ = ()
	unit = D.weeks

class Days(SingleFieldPeriod):
	__slots__ = ()
	unit = D.days

class Hours(SingleFieldPeriod):
	__slots__ = ()
	unit = D.hours

class Minutes(SingleFieldPeriod):
	__slots__ = ()
	unit = D.minutes

class Seconds(SingleFieldPeriod):
	__slots__ = ()
	unit = D.seconds

abstract.Period.register(BasePeriod)
