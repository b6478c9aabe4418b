"""
# The ISO-8601 chronology: the proleptic gregorian calendar with weeks
# starting on monday and a first week of the year holding at least four days.

# &ISOChronology.utc is assembled from the fields in this module; instances for other
# zones wrap it with a &.zoned.ZonedChronology.

#!python
	from horology import iso
	c = iso.ISOChronology.utc()
	ms = c.datetime_millis(2010, 6, 30, 12)
	c.day_of_week().get(ms) == 3
"""
import functools

from . import arithmetic
from . import constants
from . import errors
from . import gregorian
from . import week
from . import durations
from . import fields
from .chronology import AssembledChronology
from .fieldtypes import DurationFieldType as D, DateTimeFieldType as F

day = constants.millis_per_day
week_millis = constants.millis_per_week

class Calendar(object):
	"""
	# Gregorian calendar arithmetic on UTC millisecond instants.

	# [ Properties ]
	# /minimum_days/
		# Days of the new year required in the first week of the weekyear.
	"""
	__slots__ = ('minimum_days',)

	min_year = -292275054
	max_year = 292278993

	#: 365.2425 days
	average_year = 31556952000
	average_month = average_year // 12

	def __init__(self, minimum_days=4):
		if minimum_days < 1 or minimum_days > 7:
			raise errors.IllegalFieldValue('minDaysInFirstWeek', minimum_days, 1, 7)
		self.minimum_days = minimum_days

	def date(self, instant):
		"""
		# The `(year, month, day)` of &instant.
		"""
		return gregorian.epoch_date(instant // day)

	def year(self, instant):
		return gregorian.year_from_days(instant // day)

	def month_of_year(self, instant):
		return self.date(instant)[1]

	def day_of_month(self, instant):
		return self.date(instant)[2]

	def day_of_year(self, instant):
		days = instant // day
		y = gregorian.year_from_days(days)
		return days - gregorian.epoch_days(y) + 1

	def day_of_week(self, instant):
		return week.day_of_week(instant // day)

	def millis_of_day(self, instant):
		return instant % day

	def is_leap_year(self, year):
		return gregorian.year_is_leap(year)

	def is_leap_day(self, instant):
		y, m, d = self.date(instant)
		return m == 2 and d == 29

	def days_in_year(self, year):
		return gregorian.days_in_year(year)

	def days_in_year_month(self, year, month):
		return gregorian.days_in_month(year, month)

	def days_in_month_max(self, month=None):
		if month is None:
			return 31
		if month == 2:
			return 29
		return gregorian.calendar_year[month-1]

	def year_millis(self, year):
		return gregorian.epoch_days(year) * day

	def year_month_millis(self, year, month):
		return gregorian.epoch_days(year, month) * day

	def year_month_day_millis(self, year, month, dom):
		return gregorian.epoch_days(year, month, dom) * day

	def set_year(self, instant, year):
		"""
		# Move &instant to &year retaining the day of year and time; the day after
		# february is adjusted when the leap state of the years differ.
		"""
		this_year = self.year(instant)
		doy = self.day_of_year(instant)
		millis = self.millis_of_day(instant)

		if doy > (31 + 28):
			if self.is_leap_year(this_year):
				if not self.is_leap_year(year):
					doy -= 1
			elif self.is_leap_year(year):
				doy += 1

		return (gregorian.epoch_days(year) + doy - 1) * day + millis

	def year_difference(self, minuend, subtrahend):
		"""
		# Whole years from &subtrahend to &minuend where `minuend >= subtrahend`.
		"""
		minuend_year = self.year(minuend)
		subtrahend_year = self.year(subtrahend)

		minuend_rem = minuend - self.year_millis(minuend_year)
		subtrahend_rem = subtrahend - self.year_millis(subtrahend_year)

		# Align the remainders around february 29th.
		feb29 = (31 + 28) * day
		if subtrahend_rem >= feb29:
			if self.is_leap_year(subtrahend_year):
				if not self.is_leap_year(minuend_year):
					subtrahend_rem -= day
			elif minuend_rem >= feb29 and self.is_leap_year(minuend_year):
				minuend_rem -= day

		difference = minuend_year - subtrahend_year
		if minuend_rem < subtrahend_rem:
			difference -= 1
		return difference

	# Week based years

	def first_week_millis(self, year):
		return week.first_week_start(gregorian.epoch_days(year), self.minimum_days) * day

	def weeks_in_year(self, year):
		return (self.first_week_millis(year + 1) - self.first_week_millis(year)) // week_millis

	def week_of_weekyear(self, instant):
		year = self.year(instant)
		first = self.first_week_millis(year)
		if instant < first:
			return self.weeks_in_year(year - 1)
		if instant >= self.first_week_millis(year + 1):
			return 1
		return ((instant - first) // week_millis) + 1

	def weekyear(self, instant):
		year = self.year(instant)
		w = self.week_of_weekyear(instant)
		if w == 1:
			return self.year(instant + week_millis)
		elif w > 51:
			return self.year(instant - (2 * week_millis))
		return year

class YearField(fields.BaseField):
	__slots__ = ('calendar', 'unit_field', 'days')

	def __init__(self, calendar, days):
		super().__init__(F.year)
		self.calendar = calendar
		self.days = days
		self.unit_field = durations.ImpreciseField(D.years, calendar.average_year, self)

	def get(self, instant):
		return self.calendar.year(instant)

	def add(self, instant, years):
		if years == 0:
			return instant
		return self.set(instant, arithmetic.add_int(self.get(instant), years))

	def add_wrap_field(self, instant, years):
		if years == 0:
			return instant
		c = self.calendar
		return self.set(instant, arithmetic.wrap(self.get(instant), years, c.min_year, c.max_year))

	def set(self, instant, year):
		c = self.calendar
		arithmetic.verify_bounds(self, year, c.min_year, c.max_year)
		return c.set_year(instant, year)

	def get_difference_long(self, minuend, subtrahend):
		if minuend < subtrahend:
			return -self.calendar.year_difference(subtrahend, minuend)
		return self.calendar.year_difference(minuend, subtrahend)

	def get_difference(self, minuend, subtrahend):
		return arithmetic.to_int(self.get_difference_long(minuend, subtrahend))

	def duration_field(self):
		return self.unit_field

	def range_duration_field(self):
		return None

	def is_leap(self, instant):
		return self.calendar.is_leap_year(self.get(instant))

	def leap_amount(self, instant):
		return 1 if self.is_leap(instant) else 0

	def leap_duration_field(self):
		return self.days

	def minimum(self, instant=None):
		return self.calendar.min_year

	def maximum(self, instant=None):
		return self.calendar.max_year

	def round_floor(self, instant):
		return self.calendar.year_millis(self.get(instant))

	def round_ceiling(self, instant):
		year = self.get(instant)
		start = self.calendar.year_millis(year)
		if instant != start:
			instant = self.calendar.year_millis(year + 1)
		return instant

class YearOfEraField(fields.DecoratedField):
	"""
	# One based year within the era; year zero is 1 BCE.
	"""
	__slots__ = ('eras',)

	def __init__(self, year, eras):
		super().__init__(year, F.year_of_era)
		self.eras = eras

	def get(self, instant):
		year = self.field.get(instant)
		if year <= 0:
			year = 1 - year
		return year

	def set(self, instant, value):
		arithmetic.verify_bounds(self, value, 1, self.maximum())
		if self.field.get(instant) <= 0:
			value = 1 - value
		return self.field.set(instant, value)

	def add_wrap_field(self, instant, amount):
		return self.field.add_wrap_field(instant, amount)

	def range_duration_field(self):
		return self.eras

	def minimum(self, instant=None):
		return 1

	def maximum(self, instant=None):
		return self.field.maximum()

	def round_ceiling(self, instant):
		return self.field.round_ceiling(instant)

	def remainder(self, instant):
		return self.field.remainder(instant)

class AbsoluteYearField(fields.DecoratedField):
	"""
	# The magnitude of the year; the basis of the century fields.
	"""
	__slots__ = ('eras',)

	def __init__(self, year, eras):
		super().__init__(year, F.year_of_era)
		self.eras = eras

	def get(self, instant):
		value = self.field.get(instant)
		return -value if value < 0 else value

	def set(self, instant, value):
		arithmetic.verify_bounds(self, value, 0, self.maximum())
		if self.field.get(instant) < 0:
			value = -value
		return self.field.set(instant, value)

	def range_duration_field(self):
		return self.eras

	def minimum(self, instant=None):
		return 0

	def maximum(self, instant=None):
		return self.field.maximum()

	def round_ceiling(self, instant):
		return self.field.round_ceiling(instant)

	def remainder(self, instant):
		return self.field.remainder(instant)

class EraField(fields.BaseField):
	__slots__ = ('calendar', 'eras')

	def __init__(self, calendar, eras):
		super().__init__(F.era)
		self.calendar = calendar
		self.eras = eras

	def get(self, instant):
		return constants.bce if self.calendar.year(instant) <= 0 else constants.ce

	def set(self, instant, era):
		arithmetic.verify_bounds(self, era, constants.bce, constants.ce)
		if self.get(instant) != era:
			# Retain the year of era.
			year = self.calendar.year(instant)
			return self.calendar.set_year(instant, 1 - year)
		return instant

	def round_floor(self, instant):
		if self.get(instant) == constants.ce:
			return self.calendar.year_millis(1)
		return constants.long_min

	def round_ceiling(self, instant):
		if self.get(instant) == constants.bce:
			return self.calendar.year_millis(1)
		return constants.long_max

	def round_half_floor(self, instant):
		return self.round_floor(instant)

	round_half_ceiling = round_half_floor
	round_half_even = round_half_floor

	def duration_field(self):
		return self.eras

	def range_duration_field(self):
		return None

	def minimum(self, instant=None):
		return constants.bce

	def maximum(self, instant=None):
		return constants.ce

class MonthOfYearField(fields.BaseField):
	__slots__ = ('calendar', 'unit_field', 'years', 'days')

	leap_month = 2

	def __init__(self, calendar, years, days):
		super().__init__(F.month_of_year)
		self.calendar = calendar
		self.years = years
		self.days = days
		self.unit_field = durations.ImpreciseField(D.months, calendar.average_month, self)

	def get(self, instant):
		return self.calendar.month_of_year(instant)

	def add(self, instant, months):
		if months == 0:
			return instant

		c = self.calendar
		millis = c.millis_of_day(instant)
		year, month, dom = c.date(instant)

		index = month - 1 + months
		target_year = year + (index // 12)
		target_month = (index % 12) + 1
		if target_year < c.min_year or target_year > c.max_year:
			raise errors.IllegalFieldValue(F.year, target_year, c.min_year, c.max_year,
				"Magnitude of add amount is too large: %d" % (months,))

		dom = min(dom, c.days_in_year_month(target_year, target_month))
		return c.year_month_day_millis(target_year, target_month, dom) + millis

	def add_partial(self, partial, index, values, amount):
		if amount == 0:
			return values

		if len(partial) > 0 and partial.field_type(0) == F.month_of_year and index == 0:
			# Lone month; wrap.
			month = ((values[0] - 1 + (amount % 12) + 12) % 12) + 1
			return self.set_partial(partial, 0, values, month)

		if fields.is_contiguous(partial):
			chronology = partial.chronology
			instant = 0
			for i in range(len(partial)):
				instant = partial.field_type(i).get_field(chronology).set(instant, values[i])
			instant = self.add(instant, amount)
			return chronology.get_partial(partial, instant)

		return super().add_partial(partial, index, values, amount)

	def add_wrap_field(self, instant, months):
		return self.set(instant, arithmetic.wrap(self.get(instant), months, 1, 12))

	def get_difference_long(self, minuend, subtrahend):
		if minuend < subtrahend:
			return -self.get_difference(subtrahend, minuend)

		c = self.calendar
		m_year, m_month, m_dom = c.date(minuend)
		s_year, s_month, s_dom = c.date(subtrahend)

		difference = (m_year - s_year) * 12 + m_month - s_month

		# The last day of a month is a whole month after a later day of an earlier month.
		if m_dom == c.days_in_year_month(m_year, m_month) and s_dom > m_dom:
			subtrahend -= (s_dom - m_dom) * day

		m_rem = minuend - c.year_month_millis(m_year, m_month)
		s_rem = subtrahend - c.year_month_millis(s_year, s_month)
		if m_rem < s_rem:
			difference -= 1
		return difference

	def get_difference(self, minuend, subtrahend):
		return arithmetic.to_int(self.get_difference_long(minuend, subtrahend))

	def set(self, instant, month):
		arithmetic.verify_bounds(self, month, 1, 12)
		c = self.calendar
		year, m, dom = c.date(instant)
		dom = min(dom, c.days_in_year_month(year, month))
		return c.year_month_day_millis(year, month, dom) + c.millis_of_day(instant)

	def duration_field(self):
		return self.unit_field

	def range_duration_field(self):
		return self.years

	def is_leap(self, instant):
		year, month, dom = self.calendar.date(instant)
		return month == self.leap_month and self.calendar.is_leap_year(year)

	def leap_amount(self, instant):
		return 1 if self.is_leap(instant) else 0

	def leap_duration_field(self):
		return self.days

	def minimum(self, instant=None):
		return 1

	def maximum(self, instant=None):
		return 12

	def round_floor(self, instant):
		year, month, dom = self.calendar.date(instant)
		return self.calendar.year_month_millis(year, month)

def _partial_value(partial, values, type):
	"""
	# The value of &type in the partial or &None.
	"""
	if values is None:
		values = partial.values()
	for i in range(len(partial)):
		if partial.field_type(i) == type:
			return values[i]
	return None

class DayOfMonthField(fields.UnitField):
	__slots__ = ('calendar', 'months')

	def __init__(self, calendar, days, months):
		super().__init__(F.day_of_month, days)
		self.calendar = calendar
		self.months = months

	def get(self, instant):
		return self.calendar.day_of_month(instant)

	def range_duration_field(self):
		return self.months

	def minimum(self, instant=None):
		return 1

	def maximum(self, instant=None):
		if instant is None:
			return 31
		y, m, d = self.calendar.date(instant)
		return self.calendar.days_in_year_month(y, m)

	def maximum_for(self, partial, values=None):
		month = _partial_value(partial, values, F.month_of_year)
		if month is None:
			return 31
		year = _partial_value(partial, values, F.year)
		if year is None:
			return self.calendar.days_in_month_max(month)
		return self.calendar.days_in_year_month(year, month)

	def maximum_for_set(self, instant, value):
		if value > 28 or value < 1:
			return self.maximum(instant)
		return 28

	def is_leap(self, instant):
		return self.calendar.is_leap_day(instant)

class DayOfYearField(fields.UnitField):
	__slots__ = ('calendar', 'years')

	def __init__(self, calendar, days, years):
		super().__init__(F.day_of_year, days)
		self.calendar = calendar
		self.years = years

	def get(self, instant):
		return self.calendar.day_of_year(instant)

	def range_duration_field(self):
		return self.years

	def minimum(self, instant=None):
		return 1

	def maximum(self, instant=None):
		if instant is None:
			return 366
		return self.calendar.days_in_year(self.calendar.year(instant))

	def maximum_for(self, partial, values=None):
		year = _partial_value(partial, values, F.year)
		if year is None:
			return 366
		return self.calendar.days_in_year(year)

	def maximum_for_set(self, instant, value):
		if value > 365 or value < 1:
			return self.maximum(instant)
		return 365

	def is_leap(self, instant):
		return self.calendar.is_leap_day(instant)

class DayOfWeekField(fields.UnitField):
	__slots__ = ('calendar', 'weeks')

	def __init__(self, calendar, days, weeks):
		super().__init__(F.day_of_week, days)
		self.calendar = calendar
		self.weeks = weeks

	def get(self, instant):
		return self.calendar.day_of_week(instant)

	def range_duration_field(self):
		return self.weeks

	def minimum(self, instant=None):
		return constants.monday

	def maximum(self, instant=None):
		return constants.sunday

class WeekOfWeekyearField(fields.UnitField):
	__slots__ = ('calendar', 'weekyears')

	# Weeks start on monday, three days before the epoch's thursday.
	shift = 3 * day

	def __init__(self, calendar, weeks, weekyears):
		super().__init__(F.week_of_weekyear, weeks)
		self.calendar = calendar
		self.weekyears = weekyears

	def get(self, instant):
		return self.calendar.week_of_weekyear(instant)

	def range_duration_field(self):
		return self.weekyears

	def round_floor(self, instant):
		return super().round_floor(instant + self.shift) - self.shift

	def round_ceiling(self, instant):
		return super().round_ceiling(instant + self.shift) - self.shift

	def remainder(self, instant):
		return super().remainder(instant + self.shift)

	def minimum(self, instant=None):
		return 1

	def maximum(self, instant=None):
		if instant is None:
			return 53
		return self.calendar.weeks_in_year(self.calendar.weekyear(instant))

	def maximum_for(self, partial, values=None):
		weekyear = _partial_value(partial, values, F.weekyear)
		if weekyear is None:
			return 53
		return self.calendar.weeks_in_year(weekyear)

	def maximum_for_set(self, instant, value):
		if value > 52:
			return self.maximum(instant)
		return 52

class WeekyearField(fields.BaseField):
	__slots__ = ('calendar', 'unit_field', 'weeks')

	def __init__(self, calendar, weeks):
		super().__init__(F.weekyear)
		self.calendar = calendar
		self.weeks = weeks
		self.unit_field = durations.ImpreciseField(D.weekyears, calendar.average_year, self)

	def get(self, instant):
		return self.calendar.weekyear(instant)

	def add(self, instant, years):
		if years == 0:
			return instant
		return self.set(instant, self.get(instant) + years)

	def add_wrap_field(self, instant, years):
		c = self.calendar
		return self.set(instant, arithmetic.wrap(self.get(instant), years, c.min_year, c.max_year))

	def set(self, instant, year):
		c = self.calendar
		arithmetic.verify_bounds(self, year, c.min_year, c.max_year)

		current = self.get(instant)
		if current == year:
			return instant

		dow = c.day_of_week(instant)
		limit = min(c.weeks_in_year(current), c.weeks_in_year(year))
		target_week = min(c.week_of_weekyear(instant), limit)

		# Land within the target weekyear, then align the week and weekday.
		work = c.set_year(instant, year)
		landed = self.get(work)
		if landed < year:
			work += week_millis
		elif landed > year:
			work -= week_millis

		work += (target_week - c.week_of_weekyear(work)) * week_millis
		return work + (dow - c.day_of_week(work)) * day

	def get_difference_long(self, minuend, subtrahend):
		if minuend < subtrahend:
			return -self.get_difference_long(subtrahend, minuend)

		c = self.calendar
		m_year = self.get(minuend)
		s_year = self.get(subtrahend)
		m_rem = self.remainder(minuend)
		s_rem = self.remainder(subtrahend)

		if s_rem >= week_millis * 52 and c.weeks_in_year(m_year) <= 52:
			s_rem -= week_millis

		difference = m_year - s_year
		if m_rem < s_rem:
			difference -= 1
		return difference

	def get_difference(self, minuend, subtrahend):
		return arithmetic.to_int(self.get_difference_long(minuend, subtrahend))

	def duration_field(self):
		return self.unit_field

	def range_duration_field(self):
		return None

	def is_leap(self, instant):
		return self.calendar.weeks_in_year(self.get(instant)) > 52

	def leap_amount(self, instant):
		return self.calendar.weeks_in_year(self.get(instant)) - 52

	def leap_duration_field(self):
		return self.weeks

	def minimum(self, instant=None):
		return self.calendar.min_year

	def maximum(self, instant=None):
		return self.calendar.max_year

	def round_floor(self, instant):
		c = self.calendar
		# Start of the week, then back to the first week.
		instant = instant - ((instant + WeekOfWeekyearField.shift) % week_millis)
		w = c.week_of_weekyear(instant)
		if w > 1:
			instant -= week_millis * (w - 1)
		return instant

def assemble_iso(table, calendar):
	"""
	# Populate &table with the gregorian fields computed by &calendar.
	"""
	P = durations.PreciseField
	millis = durations.millis
	seconds = P(D.seconds, constants.millis_per_second)
	minutes = P(D.minutes, constants.millis_per_minute)
	hours = P(D.hours, constants.millis_per_hour)
	halfdays = P(D.halfdays, constants.millis_per_halfday)
	days = P(D.days, constants.millis_per_day)
	weeks = P(D.weeks, constants.millis_per_week)
	eras = durations.unsupported(D.eras)

	table.update(
		millis=millis, seconds=seconds, minutes=minutes, hours=hours,
		halfdays=halfdays, days=days, weeks=weeks, eras=eras,
	)

	# Time of day
	PF = fields.PreciseField
	table['millis_of_second'] = PF(F.millis_of_second, millis, seconds)
	table['millis_of_day'] = PF(F.millis_of_day, millis, days)
	table['second_of_minute'] = PF(F.second_of_minute, seconds, minutes)
	table['second_of_day'] = PF(F.second_of_day, seconds, days)
	table['minute_of_hour'] = PF(F.minute_of_hour, minutes, hours)
	table['minute_of_day'] = PF(F.minute_of_day, minutes, days)
	table['hour_of_day'] = hod = PF(F.hour_of_day, hours, days)
	table['hour_of_halfday'] = hoh = PF(F.hour_of_halfday, hours, halfdays)
	table['clockhour_of_day'] = fields.ZeroIsMaxField(hod, F.clockhour_of_day)
	table['clockhour_of_halfday'] = fields.ZeroIsMaxField(hoh, F.clockhour_of_halfday)
	table['halfday_of_day'] = PF(F.halfday_of_day, halfdays, days)

	# Date
	year = YearField(calendar, days)
	table['year'] = year
	table['years'] = years = year.duration_field()
	table['year_of_era'] = YearOfEraField(year, eras)
	table['era'] = EraField(calendar, eras)

	century = fields.DividedField(AbsoluteYearField(year, eras), F.century_of_era, 100, eras)
	table['century_of_era'] = century
	table['centuries'] = century.duration_field()
	table['year_of_century'] = fields.RemainderField(century, F.year_of_century)

	month = MonthOfYearField(calendar, years, days)
	table['month_of_year'] = month
	table['months'] = months = month.duration_field()

	weekyear = WeekyearField(calendar, weeks)
	table['weekyear'] = weekyear
	table['weekyears'] = weekyears = weekyear.duration_field()
	weekyear_century = fields.DividedField(weekyear, F.century_of_era, 100)
	table['weekyear_of_century'] = fields.RemainderField(weekyear_century, F.weekyear_of_century)

	table['day_of_month'] = DayOfMonthField(calendar, days, months)
	table['day_of_year'] = DayOfYearField(calendar, days, years)
	table['day_of_week'] = DayOfWeekField(calendar, days, weeks)
	table['week_of_weekyear'] = WeekOfWeekyearField(calendar, weeks, weekyears)

class ISOChronology(AssembledChronology):
	"""
	# The ISO-8601 calendar system.

	# Instances are shared per zone; use &utc and &instance rather than the constructor.
	"""
	__slots__ = ('calendar',)

	def __init__(self, base=None, zone=None):
		self.calendar = Calendar(4)
		super().__init__(base, zone)

	def assemble(self, table):
		if self.base is None:
			assemble_iso(table, self.calendar)

	@classmethod
	def utc(Class):
		"""
		# The ISO chronology in UTC.
		"""
		return _utc_instance(Class)

	@classmethod
	def instance(Class, zone=None):
		"""
		# The ISO chronology in &zone. &None selects the default zone.
		"""
		if zone is None:
			from . import system
			zone = system.default_zone()
		return _zoned_instance(Class, zone)

	@property
	def zone(self):
		if self.base is None:
			from . import zones
			return zones.UTC
		return self.base.zone

	def with_utc(self):
		return self.utc()

	def with_zone(self, zone):
		if zone is None:
			from . import system
			zone = system.default_zone()
		if zone == self.zone:
			return self
		return self.instance(zone)

	def date_time_millis(self, year, month, day_of_month, millis_of_day):
		if self.base is not None:
			return self.base.date_time_millis(year, month, day_of_month, millis_of_day)

		c = self.calendar
		arithmetic.verify_bounds(F.year, year, c.min_year, c.max_year)
		arithmetic.verify_bounds(F.month_of_year, month, 1, 12)
		arithmetic.verify_bounds(F.day_of_month, day_of_month, 1, c.days_in_year_month(year, month))
		arithmetic.verify_bounds(F.millis_of_day, millis_of_day, 0, day - 1)
		return arithmetic.add(c.year_month_day_millis(year, month, day_of_month), millis_of_day)

	def datetime_millis(self, year, month, day_of_month, hour=0, minute=0, second=0, millis=0):
		if self.base is not None:
			return self.base.datetime_millis(year, month, day_of_month, hour, minute, second, millis)

		arithmetic.verify_bounds(F.hour_of_day, hour, 0, 23)
		arithmetic.verify_bounds(F.minute_of_hour, minute, 0, 59)
		arithmetic.verify_bounds(F.second_of_minute, second, 0, 59)
		arithmetic.verify_bounds(F.millis_of_second, millis, 0, 999)
		mod = hour * constants.millis_per_hour + minute * constants.millis_per_minute \
			+ second * constants.millis_per_second + millis
		return self.date_time_millis(year, month, day_of_month, mod)

	def time_millis(self, instant, hour, minute, second, millis):
		if self.base is not None:
			return self.base.time_millis(instant, hour, minute, second, millis)
		return super().time_millis(instant, hour, minute, second, millis)

	def __eq__(self, ob):
		return isinstance(ob, ISOChronology) and ob.zone == self.zone

	def __hash__(self):
		return hash(('ISO', self.zone))

	def __repr__(self):
		return 'ISOChronology[%s]' % (self.zone.id,)

@functools.lru_cache(maxsize=None)
def _utc_instance(Class):
	return Class()

@functools.lru_cache(maxsize=64)
def _zoned_instance(Class, zone):
	from . import zones
	from . import zoned
	if zone == zones.UTC:
		return Class.utc()
	return Class(zoned.ZonedChronology(Class.utc(), zone), zone)
