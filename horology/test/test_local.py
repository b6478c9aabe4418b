import pickle

from .. import constants
from .. import errors
from .. import system
from .. import zones
from ..local import LocalDate, LocalTime, MonthDay
from ..partial import Partial
from ..period import Period
from ..fieldtypes import DurationFieldType as D, DateTimeFieldType as F
from .test_zones import eastern, instant, hour

def midnight_gap():
	# Clocks move from 00:00 to 01:00 on 2021-03-14.
	return zones.TransitionZone('Test/Midnight',
		[constants.long_min, instant(2021, 3, 14, 4)],
		[-4 * hour, -3 * hour],
		[-4 * hour, -4 * hour],
		['STD', 'DST'],
	)

def test_date_fields(test):
	d = LocalDate(2021, 6, 15)
	test/(d.year, d.month_of_year, d.day_of_month) == (2021, 6, 15)
	test/d.day_of_week == constants.tuesday
	test/d.day_of_year == 166
	test/d.week_of_weekyear == 24
	test/d.weekyear == 2021
	test/d.era == constants.ce
	test/str(d) == '2021-06-15'
	test/str(LocalDate(-5, 1, 1)) == '-0005-01-01'
	test/LocalDate(2021) == LocalDate(2021, 1, 1)

def test_date_invalid(test):
	test/errors.IllegalFieldValue ^ (lambda: LocalDate(2021, 2, 29))
	test/errors.IllegalFieldValue ^ (lambda: LocalDate(2021, 0, 1))
	LocalDate(2020, 2, 29)

def test_date_with(test):
	d = LocalDate(2021, 1, 31)
	test/d.with_month_of_year(2) == LocalDate(2021, 2, 28)
	test/d.with_year(2020).with_month_of_year(2) == LocalDate(2020, 2, 29)
	test/d.with_day_of_month(31) % d
	test/LocalDate(2021, 6, 15).with_day_of_week(constants.sunday) == LocalDate(2021, 6, 20)
	test/d.with_local_field(F.day_of_year, 1) == LocalDate(2021, 1, 1)
	test/d.with_local_field(F.week_of_weekyear, 1) == LocalDate(2021, 1, 10)
	test/errors.UnsupportedField ^ (lambda: d.with_local_field(F.hour_of_day, 1))
	test/errors.UnsupportedField ^ (lambda: d.with_field(F.hour_of_day, 1))

def test_date_arithmetic(test):
	test/LocalDate(2020, 1, 31).plus_months(1) == LocalDate(2020, 2, 29)
	test/LocalDate(2021, 6, 15).minus_weeks(1) == LocalDate(2021, 6, 8)
	test/LocalDate(2021, 12, 31).plus_days(1) == LocalDate(2022, 1, 1)
	test/LocalDate(2020, 2, 29).plus_years(1) == LocalDate(2021, 2, 28)
	test/LocalDate(2021, 1, 1).with_field_added(D.days, 0) == LocalDate(2021, 1, 1)
	test/errors.UnsupportedField ^ (lambda: LocalDate(2021, 1, 1).with_field_added(D.hours, 1))

	# Time units are ignored.
	p = Period.of(years=1, months=1, days=1, hours=25)
	test/LocalDate(2020, 1, 31).plus(p) == LocalDate(2021, 3, 1)
	test/LocalDate(2021, 3, 1).minus(Period.of(days=1)) == LocalDate(2021, 2, 28)

def test_date_comparison(test):
	test/(LocalDate(2021, 1, 31) < LocalDate(2021, 2, 1)) == True
	test/LocalDate(2021, 1, 1) == Partial([(F.year, 2021), (F.month_of_year, 1), (F.day_of_month, 1)])
	test/hash(LocalDate(2021, 1, 1)) == hash(LocalDate(2021, 1, 1))
	test/pickle.loads(pickle.dumps(LocalDate(2021, 6, 15))) == LocalDate(2021, 6, 15)

def test_date_instants(test):
	z = eastern()
	test/LocalDate.from_instant(instant(2021, 6, 1, 2), z) == LocalDate(2021, 5, 31)

	d = LocalDate(2021, 6, 15)
	test/d.to_datetime_at_start_of_day(z).millis == instant(2021, 6, 15, 4)
	test/d.to_datetime(LocalTime(10, 30), z).millis == instant(2021, 6, 15, 14, 30)
	test/d.to_datetime(zone=z).millis == instant(2021, 6, 15, 4)
	test/d.to_datetime_at_start_of_day(z).zone == z

def test_start_of_day_in_gap(test):
	z = midnight_gap()
	d = LocalDate(2021, 3, 14)
	start = d.to_datetime_at_start_of_day(z)
	test/start.millis == instant(2021, 3, 14, 4)
	test/errors.NonexistentLocalTime ^ (lambda: d.to_datetime(zone=z))

def test_date_now(test):
	system.set_default_zone(eastern())
	system.set_fixed_millis(instant(2021, 6, 1, 2))
	test/LocalDate.now() == LocalDate(2021, 5, 31)
	test/LocalDate.now(zones.UTC) == LocalDate(2021, 6, 1)
	test/LocalTime.now() == LocalTime(22)

def test_time_fields(test):
	t = LocalTime(1, 2, 3, 4)
	test/(t.hour_of_day, t.minute_of_hour, t.second_of_minute, t.millis_of_second) == (1, 2, 3, 4)
	test/t.millis_of_day == 3723004
	test/LocalTime.from_millis_of_day(3723004) == t
	test/str(t) == '01:02:03.004'
	test/LocalTime.midnight() == LocalTime()
	test/t.with_hour_of_day(5) == LocalTime(5, 2, 3, 4)
	test/t.with_minute_of_hour(0).with_second_of_minute(0).with_millis_of_second(0) == LocalTime(1)
	test/errors.IllegalFieldValue ^ (lambda: LocalTime(24))
	test/errors.IllegalFieldValue ^ (lambda: LocalTime(1, 60))

def test_time_arithmetic(test):
	test/LocalTime(23, 30).plus_hours(2) == LocalTime(1, 30)
	test/LocalTime(0, 30).minus_minutes(90) == LocalTime(23)
	test/LocalTime(10).plus_millis(1500) == LocalTime(10, 0, 1, 500)
	test/LocalTime(10).plus(Period.of(days=2, hours=1, seconds=30)) == LocalTime(11, 0, 30)
	test/LocalTime(10).minus(Period.of(minutes=15)) == LocalTime(9, 45)
	test/errors.UnsupportedField ^ (lambda: LocalTime(10).with_field_added(D.days, 1))

def test_month_day(test):
	leap = MonthDay(2, 29)
	test/str(leap) == '--02-29'
	test/leap.to_local_date(2020) == LocalDate(2020, 2, 29)
	test/errors.IllegalFieldValue ^ (lambda: leap.to_local_date(2021))
	test/errors.IllegalFieldValue ^ (lambda: MonthDay(4, 31))

	test/MonthDay(1, 31).plus_months(1) == MonthDay(2, 29)
	test/MonthDay(12, 15).plus_months(2) == MonthDay(2, 15)
	test/MonthDay(1, 15).minus_months(2) == MonthDay(11, 15)
	test/MonthDay(2, 28).plus_days(2) == MonthDay(3, 1)
	test/MonthDay(12, 31).plus_days(1) == MonthDay(1, 1)
	test/MonthDay(3, 1).minus_days(1) == MonthDay(2, 29)
	test/MonthDay(6, 1).with_day_of_month(30).with_month_of_year(7) == MonthDay(7, 30)

if __name__ == '__main__':
	import sys
	from contention import library as libtest
	libtest.execute(sys.modules[__name__])
