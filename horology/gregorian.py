"""
# Proleptic gregorian calendar arithmetic.

# Days are counted from 0000-01-01 by the cycle functions and from the
# 1970-01-01 epoch by the `epoch_` prefixed functions used by &.iso.
"""
import operator
from . import calendar as callib
from . import constants

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: Month lengths of a common year.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Month lengths of a leap year.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:]

#: number of months in a year.
months_in_year = len(calendar_year)

#: Days leading up to each month; indexed by zero-based month.
common_offsets = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)
leap_offsets = (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366)

# (title, repeat, sub)
leap_cycle = (
	('leap', 1, calendar_leap),
	('years', 3, calendar_year)
)

cycle = (
	'gregorian-cycle', 1, (
		('first-century', 25, leap_cycle),
		# The first year of the following centuries is not leap.
		('centuries', 3, (
			('first-year-exception', 4, calendar_year),
			('regular-cycle', 24, leap_cycle),
		)),
	)
)

table = callib.aggregate(cycle)

def resolve_by_months(months,
		_select_months=operator.itemgetter(0),
		_select_days=operator.itemgetter(1),
		_table=table,
	):
	return callib.resolve((_select_months, _select_days), months, _table)

def resolve_by_days(days,
		_select_months=operator.itemgetter(0),
		_select_days=operator.itemgetter(1),
		_table=table,
	):
	return callib.resolve((_select_days, _select_months), days, _table)

#: Total number of months in a Gregorian cycle.
months_in_cycle = months_in_year * years_in_century * centuries_in_cycle
days_in_cycle = table[-1][1]

def year_is_leap(y):
	"""
	# Whether the gregorian year, &y, is a leap year.
	"""
	return y % 4 == 0 and (y % 400 == 0 or y % 100 != 0)

def days_in_year(y):
	return 366 if year_is_leap(y) else 365

def days_in_month(y, m):
	"""
	# The number of days in the one-based month, &m, of the year, &y.
	"""
	if m == 2:
		return 29 if year_is_leap(y) else 28
	return calendar_year[m-1]

def days_before_month(y, m):
	"""
	# The number of days in the year, &y, that precede the one-based month, &m.
	"""
	return (leap_offsets if year_is_leap(y) else common_offsets)[m-1]

def date_from_days(days, _resolver=resolve_by_days):
	"""
	# Convert days since 0000-01-01 into a `(year, month, day)` tuple.
	"""
	cycles, months, day, _d = _resolver(days)
	year_of_cycle, moy = divmod(months, months_in_year)
	return ((cycles * 400) + year_of_cycle, moy + 1, day + 1)

def days_from_date(date, _resolver=resolve_by_months):
	"""
	# Convert a `(year, month, day)` tuple into days since 0000-01-01.
	"""
	year, month, day = date
	cycles, day_of_cycle, moy, _d = _resolver((month - 1) + (year * 12))
	return (cycles * days_in_cycle) + day_of_cycle + (day - 1)

def epoch_date(days, *, epoch=constants.epoch_days):
	"""
	# The `(year, month, day)` of the day number relative to 1970-01-01.
	"""
	return date_from_days(days + epoch)

def epoch_days(year, month=1, day=1, *, epoch=constants.epoch_days):
	"""
	# The day number, relative to 1970-01-01, of the given date.
	"""
	return days_from_date((year, month, day)) - epoch

def year_from_days(days):
	return epoch_date(days)[0]
