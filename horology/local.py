"""
# Contiguous partials without a zone: dates, times of day, and month-days.

# Each type holds a fixed, contiguous set of field types interpreted by a UTC
# chronology. Arithmetic on &LocalDate and &LocalTime is performed on the local
# milliseconds the values describe; &MonthDay uses the partial field operations as
# it has no year to resolve against.

# [ Elements ]
# /LocalDate/
	# Year, month of year, and day of month.
# /LocalTime/
	# Hour of day, minute of hour, second of minute, and millis of second.
# /MonthDay/
	# Month of year and day of month; February 29 is valid.
"""
from . import arithmetic
from . import constants
from . import errors
from . import partial
from .fieldtypes import DurationFieldType as D, DateTimeFieldType as F

def _utc(chronology):
	if chronology is None:
		from . import iso
		return iso.ISOChronology.utc()
	return chronology.with_utc()

class LocalPartial(partial.AbstractPartial):
	"""
	# A partial whose field types are fixed by the class.

	# [ Properties ]
	# /chronology/
		# The UTC chronology interpreting the values.
	"""
	__slots__ = ('chronology', '_values')

	#: The field types of the partial; defined by subclasses.
	types = ()

	def __init__(self, *values, chronology=None):
		if len(values) != len(self.types):
			raise errors.InvalidConfiguration(
				"%s requires %d values" % (self.__class__.__name__, len(self.types)))
		self.chronology = _utc(chronology)
		self._values = list(values)
		self.chronology.validate(self, self._values)
		self._values = tuple(self._values)

	@classmethod
	def _create(Class, values, chronology):
		return Class(*values, chronology=chronology)

	@classmethod
	def from_local_millis(Class, local, chronology=None):
		"""
		# Extract the fields of the class from the local milliseconds, &local.
		"""
		chronology = _utc(chronology)
		return Class._create([t.get_field(chronology).get(local) for t in Class.types], chronology)

	@classmethod
	def from_instant(Class, instant, zone=None, chronology=None):
		"""
		# The local fields of the UTC &instant in &zone; the default zone when &None.
		"""
		if zone is None:
			from . import system
			zone = system.default_zone()
		return Class.from_local_millis(zone.utc_to_local(instant), chronology)

	@classmethod
	def now(Class, zone=None):
		from . import system
		return Class.from_instant(system.current_millis(), zone)

	def __len__(self):
		return len(self.types)

	def field_type(self, index):
		return self.types[index]

	def values(self):
		return self._values

	def value(self, index):
		return self._values[index]

	def _replace(self, values):
		if list(values) == list(self._values):
			return self
		return self._create(values, self.chronology)

	def with_field(self, type, value):
		"""
		# Set the value of &type clamping the smaller fields.
		"""
		index = self.index_of_supported(type)
		if value == self._values[index]:
			return self
		return self._replace(self.field(index).set_partial(self, index, list(self._values), value))

	def __reduce__(self):
		return (self._create, (self._values, self.chronology))

class LocalDate(LocalPartial):
	"""
	# A date without a time or zone.

	#!python
		from horology.local import LocalDate
		d = LocalDate(2020, 1, 31).plus_months(1)
		(d.year, d.month_of_year, d.day_of_month) == (2020, 2, 29)
	"""
	__slots__ = ()

	types = (F.year, F.month_of_year, F.day_of_month)
	date_units = frozenset(D.types()[:7])

	def __init__(self, year, month=1, day=1, chronology=None):
		super().__init__(year, month, day, chronology=chronology)

	year = property(lambda self: self._values[0])
	month_of_year = property(lambda self: self._values[1])
	day_of_month = property(lambda self: self._values[2])

	def local_millis(self):
		"""
		# The local milliseconds of midnight at the start of the date.
		"""
		y, m, d = self._values
		return self.chronology.date_time_millis(y, m, d, 0)

	def _get(self, field):
		return field.get(self.local_millis())

	@property
	def day_of_week(self):
		return self._get(self.chronology.day_of_week())

	@property
	def day_of_year(self):
		return self._get(self.chronology.day_of_year())

	@property
	def week_of_weekyear(self):
		return self._get(self.chronology.week_of_weekyear())

	@property
	def weekyear(self):
		return self._get(self.chronology.weekyear())

	@property
	def era(self):
		return self._get(self.chronology.era())

	def with_year(self, year):
		return self.with_field(F.year, year)

	def with_month_of_year(self, month):
		return self.with_field(F.month_of_year, month)

	def with_day_of_month(self, day):
		return self.with_field(F.day_of_month, day)

	def with_day_of_week(self, weekday):
		field = self.chronology.day_of_week()
		return self.from_local_millis(field.set(self.local_millis(), weekday), self.chronology)

	def with_local_field(self, type, value):
		"""
		# Set any date field supported by the chronology; day of year, week of weekyear.
		"""
		if type.duration_type not in self.date_units:
			raise errors.UnsupportedField(type.name, "Field is not a date field")
		field = type.get_field(self.chronology)
		return self.from_local_millis(field.set(self.local_millis(), value), self.chronology)

	def with_field_added(self, unit, amount):
		"""
		# Add &amount of the duration &unit; units smaller than a day are unsupported.
		"""
		if unit not in self.date_units:
			raise errors.UnsupportedField(unit.name, "Field is not a date unit")
		if amount == 0:
			return self
		local = unit.get_field(self.chronology).add(self.local_millis(), amount)
		return self.from_local_millis(local, self.chronology)

	def with_period_added(self, period, scalar=1):
		"""
		# Add &scalar multiples of the date units of &period; time units are ignored.
		"""
		if period is None or scalar == 0:
			return self
		local = self.local_millis()
		for i in range(len(period)):
			unit = period.field_type(i)
			value = period.value(i)
			if value != 0 and unit in self.date_units:
				local = unit.get_field(self.chronology).add(local, arithmetic.multiply_int(value, scalar))
		return self.from_local_millis(local, self.chronology)

	def plus(self, period):
		return self.with_period_added(period, 1)

	def minus(self, period):
		return self.with_period_added(period, -1)

	for _unit in (D.years, D.months, D.weeks, D.days):
		def _plus(self, amount, _unit=_unit):
			return self.with_field_added(_unit, amount)
		def _minus(self, amount, _unit=_unit):
			return self.with_field_added(_unit, arithmetic.negate(amount))
		_plus.__name__ = 'plus_' + _unit.name
		_minus.__name__ = 'minus_' + _unit.name
		locals()[_plus.__name__] = _plus
		locals()[_minus.__name__] = _minus
	del _unit, _plus, _minus

	def to_datetime_at_start_of_day(self, zone=None):
		"""
		# The first instant of the date in &zone.

		# When midnight is skipped by a transition the instant following the gap is used.
		"""
		from . import iso
		from . import types
		chronology = iso.ISOChronology.instance(zone)
		zone = chronology.zone
		local = self.local_millis()
		instant = zone.local_to_utc(local, False)
		if zone.is_local_gap(local):
			# Midnight was skipped; the day starts at the transition.
			instant = zone.previous_transition(instant) + 1
		return types.DateTime(instant, chronology)

	def to_datetime(self, time=None, zone=None):
		"""
		# Combine the date with &time, midnight when &None, in &zone.
		"""
		from . import iso
		from . import types
		chronology = iso.ISOChronology.instance(zone)
		millis_of_day = 0 if time is None else time.millis_of_day
		y, m, d = self._values
		return types.DateTime(chronology.date_time_millis(y, m, d, millis_of_day), chronology)

	def __str__(self):
		y, m, d = self._values
		sign = '-' if y < 0 else ''
		return '%s%04d-%02d-%02d' % (sign, abs(y), m, d)

class LocalTime(LocalPartial):
	"""
	# A time of day without a date or zone.

	# Arithmetic wraps at midnight.
	"""
	__slots__ = ()

	types = (F.hour_of_day, F.minute_of_hour, F.second_of_minute, F.millis_of_second)
	time_units = frozenset((D.halfdays, D.hours, D.minutes, D.seconds, D.millis))

	def __init__(self, hour=0, minute=0, second=0, millis=0, chronology=None):
		super().__init__(hour, minute, second, millis, chronology=chronology)

	@classmethod
	def from_millis_of_day(Class, millis, chronology=None):
		return Class.from_local_millis(millis, chronology)

	@classmethod
	def midnight(Class):
		return Class(0, 0, 0, 0)

	hour_of_day = property(lambda self: self._values[0])
	minute_of_hour = property(lambda self: self._values[1])
	second_of_minute = property(lambda self: self._values[2])
	millis_of_second = property(lambda self: self._values[3])

	@property
	def millis_of_day(self):
		h, m, s, ms = self._values
		return h * constants.millis_per_hour + m * constants.millis_per_minute \
			+ s * constants.millis_per_second + ms

	def with_hour_of_day(self, hour):
		return self.with_field(F.hour_of_day, hour)

	def with_minute_of_hour(self, minute):
		return self.with_field(F.minute_of_hour, minute)

	def with_second_of_minute(self, second):
		return self.with_field(F.second_of_minute, second)

	def with_millis_of_second(self, millis):
		return self.with_field(F.millis_of_second, millis)

	def with_field_added(self, unit, amount):
		"""
		# Add &amount of the duration &unit wrapping at midnight.
		"""
		if unit not in self.time_units:
			raise errors.UnsupportedField(unit.name, "Field is not a time unit")
		if amount == 0:
			return self
		local = unit.get_field(self.chronology).add(self.millis_of_day, amount)
		return self.from_millis_of_day(local % constants.millis_per_day, self.chronology)

	def with_period_added(self, period, scalar=1):
		if period is None or scalar == 0:
			return self
		local = self.millis_of_day
		for i in range(len(period)):
			unit = period.field_type(i)
			value = period.value(i)
			if value != 0 and unit in self.time_units:
				local = unit.get_field(self.chronology).add(local, arithmetic.multiply_int(value, scalar))
		return self.from_millis_of_day(local % constants.millis_per_day, self.chronology)

	def plus(self, period):
		return self.with_period_added(period, 1)

	def minus(self, period):
		return self.with_period_added(period, -1)

	for _unit in (D.hours, D.minutes, D.seconds, D.millis):
		def _plus(self, amount, _unit=_unit):
			return self.with_field_added(_unit, amount)
		def _minus(self, amount, _unit=_unit):
			return self.with_field_added(_unit, arithmetic.negate(amount))
		_plus.__name__ = 'plus_' + _unit.name
		_minus.__name__ = 'minus_' + _unit.name
		locals()[_plus.__name__] = _plus
		locals()[_minus.__name__] = _minus
	del _unit, _plus, _minus

	def __str__(self):
		return '%02d:%02d:%02d.%03d' % self._values

class MonthDay(LocalPartial):
	"""
	# A month and day of month without a year.

	# Validation uses the longest length of each month so `--02-29` is legal;
	# adding months wraps at the year and clamps the day.
	"""
	__slots__ = ()

	types = (F.month_of_year, F.day_of_month)

	def __init__(self, month, day, chronology=None):
		super().__init__(month, day, chronology=chronology)

	month_of_year = property(lambda self: self._values[0])
	day_of_month = property(lambda self: self._values[1])

	def with_month_of_year(self, month):
		return self.with_field(F.month_of_year, month)

	def with_day_of_month(self, day):
		return self.with_field(F.day_of_month, day)

	def with_field_added(self, type, amount):
		"""
		# Add &amount to the field &type carrying days into months and wrapping months.
		"""
		index = self.index_of_supported(type)
		if amount == 0:
			return self
		values = self.field(index).add_wrap_partial(self, index, list(self._values), amount)
		return self._replace(values)

	def plus_months(self, months):
		return self.with_field_added(F.month_of_year, months)

	def minus_months(self, months):
		return self.with_field_added(F.month_of_year, arithmetic.negate(months))

	def plus_days(self, days):
		return self.with_field_added(F.day_of_month, days)

	def minus_days(self, days):
		return self.with_field_added(F.day_of_month, arithmetic.negate(days))

	def to_local_date(self, year):
		"""
		# The date in &year; February 29 requires a leap year.
		"""
		return LocalDate(year, self._values[0], self._values[1], self.chronology)

	def __str__(self):
		return '--%02d-%02d' % self._values
