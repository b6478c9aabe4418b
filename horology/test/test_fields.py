from .. import constants
from .. import errors
from ..iso import ISOChronology
from ..fieldtypes import DurationFieldType as D, DateTimeFieldType as F

def utc():
	return ISOChronology.utc()

def at(*args):
	return utc().datetime_millis(*args)

def test_time_fields(test):
	c = utc()
	t = at(2021, 6, 15, 13, 45, 30, 250)
	test/c.hour_of_day().get(t) == 13
	test/c.minute_of_hour().get(t) == 45
	test/c.second_of_minute().get(t) == 30
	test/c.millis_of_second().get(t) == 250
	test/c.minute_of_day().get(t) == 13 * 60 + 45
	test/c.halfday_of_day().get(t) == constants.pm
	test/c.hour_of_halfday().get(t) == 1
	test/c.clockhour_of_halfday().get(t) == 1
	test/c.millis_of_day().get(t) == ((13 * 60 + 45) * 60 + 30) * 1000 + 250

def test_clock_hours(test):
	c = utc()
	midnight = at(2021, 6, 15)
	noon = at(2021, 6, 15, 12)
	test/c.clockhour_of_day().get(midnight) == 24
	test/c.clockhour_of_day().get(noon) == 12
	test/c.clockhour_of_halfday().get(midnight) == 12
	test/c.clockhour_of_halfday().get(noon) == 12
	test/c.clockhour_of_day().set(noon, 24) == midnight
	test/c.clockhour_of_day().minimum() == 1
	test/c.clockhour_of_day().maximum() == 24
	test/errors.IllegalFieldValue ^ (lambda: c.clockhour_of_day().set(noon, 0))

def test_set_bounds(test):
	c = utc()
	t = at(2021, 4, 10)
	with test/errors.IllegalFieldValue as exc:
		c.hour_of_day().set(t, 24)
	e = exc()
	test/e.field_type == F.hour_of_day
	test/e.lower == 0
	test/e.upper == 23
	test/str(e) == "Value 24 for hourOfDay must be in the range [0,23]"

	with test/errors.IllegalFieldValue as exc:
		c.day_of_month().set(t, 31)
	test/exc().upper == 30

	test/c.day_of_month().get(c.day_of_month().set(t, 30)) == 30
	test/errors.IllegalFieldValue ^ (lambda: c.month_of_year().set(t, 13))

def test_date_fields(test):
	c = utc()
	t = at(2020, 12, 31, 23)
	test/c.year().get(t) == 2020
	test/c.month_of_year().get(t) == 12
	test/c.day_of_month().get(t) == 31
	test/c.day_of_year().get(t) == 366
	test/c.day_of_week().get(t) == constants.thursday
	test/c.century_of_era().get(t) == 20
	test/c.year_of_century().get(t) == 20
	test/c.year_of_era().get(t) == 2020
	test/c.era().get(t) == constants.ce

def test_eras(test):
	c = utc()
	zero = at(0, 6, 1)
	test/c.era().get(zero) == constants.bce
	test/c.year_of_era().get(zero) == 1
	test/c.year_of_era().get(at(-1, 6, 1)) == 2

	# Switching era keeps the year of era.
	ad = c.era().set(zero, constants.ce)
	test/c.year().get(ad) == 1
	test/c.era().set(ad, constants.bce) == zero
	test/c.year_of_era().set(zero, 5) == at(-4, 6, 1)

def test_weekyear(test):
	c = utc()
	# 2021-01-03 is a sunday in the last week of 2020.
	t = at(2021, 1, 3)
	test/c.weekyear().get(t) == 2020
	test/c.week_of_weekyear().get(t) == 53
	test/c.weekyear().get(at(2021, 1, 4)) == 2021
	test/c.week_of_weekyear().get(at(2021, 1, 4)) == 1
	test/c.week_of_weekyear().get(at(2019, 12, 30)) == 1
	test/c.weekyear().get(at(2019, 12, 30)) == 2020
	test/c.weekyear_of_century().get(t) == 20

	test/c.weekyear().is_leap(t) == True
	test/c.week_of_weekyear().maximum(t) == 53
	test/c.week_of_weekyear().maximum(at(2021, 6, 1)) == 52

def test_weekyear_set(test):
	c = utc()
	# Week 53, sunday; 2021 has 52 weeks so the week is clamped.
	t = c.weekyear().set(at(2021, 1, 3), 2021)
	test/c.weekyear().get(t) == 2021
	test/c.week_of_weekyear().get(t) == 52
	test/c.day_of_week().get(t) == constants.sunday

def test_month_add(test):
	c = utc()
	months = c.month_of_year()
	test/months.add(at(2021, 1, 31), 1) == at(2021, 2, 28)
	test/months.add(at(2020, 1, 31), 1) == at(2020, 2, 29)
	test/months.add(at(2021, 11, 15, 10), 3) == at(2022, 2, 15, 10)
	test/months.add(at(2021, 1, 15), -1) == at(2020, 12, 15)
	test/months.add(at(2021, 3, 31), -25) == at(2019, 2, 28)

	with test/errors.IllegalFieldValue as exc:
		months.add(at(2021, 1, 1), 12 * 300000000)
	test/exc().field_type == F.year

def test_month_difference(test):
	months = utc().month_of_year()
	test/months.get_difference(at(2021, 3, 31), at(2021, 1, 31)) == 2
	test/months.get_difference(at(2021, 2, 28), at(2021, 1, 31)) == 1
	test/months.get_difference(at(2021, 3, 30), at(2021, 1, 31)) == 1
	test/months.get_difference(at(2021, 1, 31), at(2021, 3, 31)) == -2
	test/months.get_difference(at(2021, 2, 27), at(2021, 1, 31)) == 0

def test_year_add(test):
	years = utc().year()
	test/years.add(at(2020, 2, 29), 1) == at(2021, 2, 28)
	test/years.add(at(2020, 2, 29), 4) == at(2024, 2, 29)
	# February 28th is the anniversary of a leap day in common years.
	test/years.get_difference(at(2021, 2, 28), at(2020, 2, 29)) == 1
	test/years.get_difference(at(2021, 2, 27), at(2020, 2, 29)) == 0
	test/years.get_difference(at(2021, 3, 1), at(2020, 2, 29)) == 1
	test/years.is_leap(at(2020, 1, 1)) == True
	test/years.leap_duration_field().type == D.days

def test_add_wrap_field(test):
	c = utc()
	t = at(2021, 6, 15, 23, 30)
	test/c.hour_of_day().add_wrap_field(t, 2) == at(2021, 6, 15, 1, 30)
	test/c.minute_of_hour().add_wrap_field(t, -45) == at(2021, 6, 15, 23, 45)
	test/c.month_of_year().add_wrap_field(at(2021, 11, 30), 3) == at(2021, 2, 28)
	test/c.day_of_week().add_wrap_field(at(2021, 6, 13), 1) == at(2021, 6, 7)
	test/c.year_of_century().add_wrap_field(at(2099, 1, 1), 1) == at(2000, 1, 1)

def test_rounding(test):
	hours = utc().hour_of_day()
	t = at(2021, 6, 15, 10, 37, 30)
	test/hours.round_floor(t) == at(2021, 6, 15, 10)
	test/hours.round_ceiling(t) == at(2021, 6, 15, 11)
	test/hours.round_half_floor(t) == at(2021, 6, 15, 11)
	test/hours.round_half_ceiling(t) == at(2021, 6, 15, 11)
	test/hours.remainder(t) == (37 * 60 + 30) * 1000

	aligned = at(2021, 6, 15, 10)
	test/hours.round_ceiling(aligned) == aligned
	test/hours.round_floor(aligned) == aligned

	half = at(2021, 6, 15, 10, 30)
	test/hours.round_half_floor(half) == at(2021, 6, 15, 10)
	test/hours.round_half_ceiling(half) == at(2021, 6, 15, 11)
	# Ties select the even value.
	test/hours.round_half_even(half) == at(2021, 6, 15, 10)
	test/hours.round_half_even(at(2021, 6, 15, 11, 30)) == at(2021, 6, 15, 12)

def test_rounding_calendar(test):
	c = utc()
	t = at(2021, 6, 15, 10)
	test/c.month_of_year().round_floor(t) == at(2021, 6, 1)
	test/c.month_of_year().round_ceiling(t) == at(2021, 7, 1)
	test/c.year().round_floor(t) == at(2021, 1, 1)
	test/c.year().round_ceiling(t) == at(2022, 1, 1)
	test/c.day_of_month().round_floor(t) == at(2021, 6, 15)
	# 2021-06-15 is a tuesday.
	test/c.week_of_weekyear().round_floor(t) == at(2021, 6, 14)
	test/c.weekyear().round_floor(t) == at(2021, 1, 4)
	test/c.century_of_era().round_floor(t) == at(2000, 1, 1)
	test/c.month_of_year().round_half_floor(at(2021, 6, 16, 12)) == at(2021, 7, 1)

def test_negative_instants(test):
	c = utc()
	t = -1
	test/c.year().get(t) == 1969
	test/c.millis_of_second().get(t) == 999
	test/c.hour_of_day().get(t) == 23
	test/c.day_of_week().get(t) == constants.wednesday
	test/c.hour_of_day().round_floor(t) == -constants.millis_per_hour

def test_unsupported_field(test):
	c = utc()
	eras = c.eras()
	test/eras.is_supported() == False
	test/errors.UnsupportedField ^ (lambda: eras.add(0, 1))
	test/errors.UnsupportedField ^ (lambda: eras.get_millis(1))

def test_duration_fields(test):
	c = utc()
	days = c.days()
	test/days.is_precise() == True
	test/days.unit_millis() == constants.millis_per_day
	test/days.add(0, 2) == 2 * constants.millis_per_day
	test/days.get_difference(at(2021, 3, 1), at(2021, 2, 1)) == 28
	test/days.get_value(constants.millis_per_day * 3 + 5) == 3

	months = c.months()
	test/months.is_precise() == False
	test/months.add(at(2021, 1, 31), 1) == at(2021, 2, 28)
	test/months.get_difference(at(2021, 6, 1), at(2021, 1, 1)) == 5

	centuries = c.centuries()
	test/centuries.add(at(2021, 1, 1), 1) == at(2121, 1, 1)

	test/errors.Overflow ^ (lambda: c.millis().add(constants.long_max, 1))

def test_maximum_for_partial(test):
	from ..partial import Partial
	p = Partial([(F.month_of_year, 2), (F.day_of_month, 1)])
	test/p.field(1).maximum_for(p) == 29
	q = Partial([(F.year, 2021), (F.month_of_year, 2), (F.day_of_month, 1)])
	test/q.field(2).maximum_for(q) == 28

if __name__ == '__main__':
	import sys
	from contention import library as libtest
	libtest.execute(sys.modules[__name__])
