import pickle

from .. import constants
from .. import errors
from ..iso import ISOChronology
from ..local import LocalDate, MonthDay
from ..period import Period, MutablePeriod, Years, Months, Weeks, Days, Hours, Minutes, Seconds
from ..periodtypes import PeriodType
from ..types import DateTime, Duration
from ..fieldtypes import DurationFieldType as D

def test_of(test):
	p = Period.of(months=2, days=3)
	test/p.values() == (0, 2, 0, 3, 0, 0, 0, 0)
	test/p.months == 2
	test/p.days == 3
	test/p.get(D.days) == 3
	test/p.get(D.centuries) == 0
	test/p.period_type == PeriodType.standard()
	test/len(p) == 8
	test/repr(p) == 'Period(months=2, days=3)'

	ymd = Period.of(PeriodType.year_month_day(), years=1, days=2)
	test/ymd.values() == (1, 0, 2)
	test/ymd.hours == 0
	test/errors.UnsupportedField ^ (lambda: Period.of(PeriodType.year_month_day(), hours=1))
	test/errors.InvalidConfiguration ^ (lambda: Period.of(fortnights=1))
	test/errors.InvalidConfiguration ^ (lambda: Period([1, 2], PeriodType.standard()))
	test/errors.Overflow ^ (lambda: Period.of(days=2**31))

def test_between_instants(test):
	utc = ISOChronology.utc()
	p = Period.between(0, 90061001, chronology=utc)
	test/p == Period.of(days=1, hours=1, minutes=1, seconds=1, millis=1)

	start = DateTime(utc.datetime_millis(2020, 1, 31), utc)
	end = DateTime(utc.datetime_millis(2021, 3, 15, 10), utc)
	test/Period.between(start, end) == Period.of(years=1, months=1, weeks=2, days=1, hours=10)
	test/Period.between(start, end, PeriodType.day_time()).days == 409
	test/Period.between(end, start, PeriodType.year_month_day()) == Period.of(
		PeriodType.year_month_day(), years=-1, months=-1, days=-15)

def test_between_partials(test):
	p = Period.between(LocalDate(2020, 1, 31), LocalDate(2021, 3, 1))
	test/p == Period.of(years=1, months=1, days=1)

	test/errors.InvalidConfiguration ^ (lambda: Period.between(LocalDate(2021, 1, 1), MonthDay(1, 1)))
	test/errors.InvalidConfiguration ^ (lambda: Period.between(LocalDate(2021, 1, 1), None))

def test_from_duration(test):
	p = Period.from_duration(constants.millis_per_week + 3 * constants.millis_per_hour + 5)
	test/p == Period.of(weeks=1, hours=3, millis=5)
	test/Period.from_duration(Duration(constants.millis_per_day), PeriodType.time()).hours == 24

def test_with(test):
	p = Period.of(days=3)
	test/p.with_field(D.hours, 5).hours == 5
	test/p.with_field(D.days, 3) % p
	test/p.with_field_added(D.days, 2).days == 5
	test/p.with_field_added(D.days, 0) % p
	test/p.with_fields(Period.of(hours=1, days=0)) == Period.of(days=3, hours=1)
	test/p.with_fields(None) % p
	test/p.with_days(1).days == 1
	test/p.plus_weeks(2).weeks == 2
	test/p.minus_days(1).days == 2

	ymd = Period.of(PeriodType.year_month_day(), days=1)
	test/errors.UnsupportedField ^ (lambda: ymd.with_field(D.hours, 1))
	test/errors.UnsupportedField ^ (lambda: ymd.with_hours(1))
	test/errors.InvalidConfiguration ^ (lambda: ymd.with_field(None, 1))
	test/errors.Overflow ^ (lambda: Period.of(days=2**31 - 1).plus_days(1))

def test_combination(test):
	a = Period.of(days=1, hours=2)
	b = Period.of(hours=3, minutes=4)
	test/a.plus(b) == Period.of(days=1, hours=5, minutes=4)
	test/a.minus(b) == Period.of(days=1, hours=-1, minutes=-4)
	test/(a + b) == a.plus(b)
	test/(a - b) == a.minus(b)
	test/a.plus(Days(2)).days == 3
	test/a.plus(None) % a
	test/a.multiplied_by(3) == Period.of(days=3, hours=6)
	test/a.multiplied_by(1) % a
	test/-a == Period.of(days=-1, hours=-2)
	test/a.negated() == -a

	ymd = Period.of(PeriodType.year_month_day(), days=1)
	test/errors.UnsupportedField ^ (lambda: ymd.plus(Period.of(hours=1)))

def test_period_type_change(test):
	p = Period.of(days=2)
	q = p.with_period_type(PeriodType.day_time())
	test/q.values() == (2, 0, 0, 0, 0)
	test/q != p
	test/p.with_period_type(None) % p
	test/errors.UnsupportedField ^ (lambda: Period.of(weeks=1).with_period_type(PeriodType.day_time()))

def test_standard_conversions(test):
	test/Period.of(weeks=1, days=1, hours=1).to_standard_duration() == Duration(
		8 * constants.millis_per_day + constants.millis_per_hour)
	test/Period.of(days=15).to_standard_weeks() == Weeks(2)
	test/Period.of(weeks=1, days=1, hours=47).to_standard_days() == Days(9)
	test/Period.of(days=1, minutes=90).to_standard_hours() == Hours(25)
	test/Period.of(hours=1, seconds=150).to_standard_minutes() == Minutes(62)
	test/Period.of(minutes=1, millis=2500).to_standard_seconds() == Seconds(62)

	with test/errors.UnsupportedField as exc:
		Period.of(months=1).to_standard_duration()
	test/exc().field_name == 'months'
	test/errors.UnsupportedField ^ (lambda: Period.of(years=1).to_standard_days())

def test_normalized_standard(test):
	p = Period.of(hours=25, minutes=70).normalized_standard()
	test/(p.days, p.hours, p.minutes) == (1, 2, 10)

	test/Period.of(years=1, months=14).normalized_standard() == Period.of(years=2, months=2)
	test/Period.of(years=-1, months=6).normalized_standard() == Period.of(months=-6)

	months = PeriodType.for_fields([D.months, D.days])
	n = Period.of(years=1, months=14, hours=48).normalized_standard(months)
	test/n.values() == (26, 2)

	test/errors.UnsupportedField ^ (lambda: Period.of(months=1).normalized_standard(PeriodType.day_time()))

def test_duration_from(test):
	utc = ISOChronology.utc()
	start = DateTime(utc.datetime_millis(2021, 1, 1), utc)
	test/Period.of(months=1).to_duration_from(start) == Duration(31 * constants.millis_per_day)
	test/Period.of(months=1).to_duration_from(DateTime(utc.datetime_millis(2021, 2, 1), utc)) \
		== Duration(28 * constants.millis_per_day)

def test_hash_and_pickle(test):
	p = Period.of(days=1)
	test/hash(p) == hash(Period.of(days=1))
	test/pickle.loads(pickle.dumps(p)) == p
	test/(p == 1) == False

def test_mutable(test):
	m = MutablePeriod()
	m.set_days(3)
	m.add_days(2)
	test/m.days == 5
	m.add(Period.of(hours=1))
	test/m.hours == 1
	m.set_field(D.hours, 4)
	m.add_field(D.minutes, 30)
	test/m.to_period() == Period.of(days=5, hours=4, minutes=30)

	copy = m.copy()
	m.set_value(0, 1)
	test/m.years == 1
	test/copy.years == 0

	m.set_period(Period.of(weeks=2))
	test/m.to_period() == Period.of(weeks=2)
	m.set_period(None)
	test/m.to_period() == Period()
	m.clear()

	test/TypeError ^ (lambda: hash(m))
	test/Period.of(days=1).to_mutable_period().days == 1

	ymd = MutablePeriod(None, PeriodType.year_month_day())
	test/errors.UnsupportedField ^ (lambda: ymd.set_field(D.hours, 1))
	test/errors.UnsupportedField ^ (lambda: ymd.add_field(D.hours, 1))
	test/errors.UnsupportedField ^ (lambda: ymd.set_period(Period.of(hours=1)))

def test_single_field(test):
	test/Days(3).plus(Days(2)) == Days(5)
	test/Days(3).plus(2) == Days(5)
	test/Days(3).minus(1) == Days(2)
	test/Days(3).plus(0).amount == 3
	test/Days(3).multiplied_by(2) == Days(6)
	test/Days(3).divided_by(2) == Days(1)
	test/Days(-3).divided_by(2) == Days(-1)
	test/Days(3).negated() == Days(-3)
	test/int(Days(3)) == 3
	test/errors.InvalidConfiguration ^ (lambda: Days(3).plus(Hours(1)))
	test/errors.Overflow ^ (lambda: Days(2**31))
	test/errors.Overflow ^ (lambda: Days(-2**31).negated())

	test/(Days(3) < Days(4)) == True
	test/Days(3).is_greater_than(None) == True
	test/Days(-1).is_less_than(None) == True
	test/(Days(3) == Hours(3)) == False

	d = Days(3)
	test/len(d) == 1
	test/d.field_type(0) == D.days
	test/d.value(0) == 3
	test/d.get(D.days) == 3
	test/d.get(D.hours) == 0
	test/d.period_type == PeriodType.for_unit(D.days)
	test/d.to_period() == Period.of(days=3)
	test/repr(d) == 'Days(3)'

def test_single_field_between(test):
	utc = ISOChronology.utc()
	test/Days.between(LocalDate(2021, 1, 1), LocalDate(2021, 3, 1)) == Days(59)
	test/Hours.between(0, 5 * constants.millis_per_hour, utc) == Hours(5)
	test/Years.between(DateTime(0, utc), DateTime(utc.datetime_millis(2021, 6, 1), utc)) == Years(51)
	test/Weeks.between(LocalDate(2021, 1, 1), LocalDate(2021, 1, 15)) == Weeks(2)

	# Partials without a year resolve in a leap year.
	test/Months.between(MonthDay(1, 31), MonthDay(2, 29)) == Months(1)
	test/Days.between(MonthDay(2, 28), MonthDay(3, 1)) == Days(2)

if __name__ == '__main__':
	import sys
	from contention import library as libtest
	libtest.execute(sys.modules[__name__])
