import pickle

from .. import constants
from .. import errors
from .. import system
from .. import zones
from ..iso import ISOChronology
from ..period import Period, Days, Hours
from ..periodtypes import PeriodType
from ..types import Instant, Duration, DateTime, MutableDateTime, Interval, MutableInterval, DateTimeComparator
from ..fieldtypes import DurationFieldType as D, DateTimeFieldType as F
from .test_zones import eastern, instant, hour, minute

def test_instant(test):
	i = Instant(5)
	test/i.plus(10) == Instant(15)
	test/i.minus(Duration(5)) == Instant(0)
	test/i.plus(0) % i
	test/(Instant(1) < Instant(2)) == True
	test/i.is_before(6) == True
	test/i.is_after(6) == False
	test/i.is_equal(5) == True
	test/int(i) == 5
	test/i.chronology == ISOChronology.utc()
	test/Instant(0).to_datetime(zones.UTC).year == 1970
	test/errors.Overflow ^ (lambda: Instant(constants.long_max + 1))

	system.set_fixed_millis(100)
	test/Instant.now() == Instant(100)
	test/i.is_before_now() == True

def test_duration(test):
	test/Duration.between(0, 5000) == Duration(5000)
	test/Duration.between(Instant(10), Instant(4)).millis == -6
	test/Duration.of_days(2).standard_hours == 48
	test/Duration.of_hours(1).millis == hour
	test/Duration.of_minutes(90).standard_hours == 1
	test/Duration.of_seconds(61).standard_minutes == 1
	test/Duration.of_millis(2500).standard_seconds == 2
	test/Duration(-2500).standard_seconds == -2
	test/Duration.of_hours(49).standard_days == 2

def test_duration_arithmetic(test):
	d = Duration.of_hours(1)
	test/d.plus(Duration(minute)) == Duration(hour + minute)
	test/d.minus(minute).millis == hour - minute
	test/(d + d) == Duration(2 * hour)
	test/(d - d) == Duration(0)
	test/d.plus(0) % d
	test/d.multiplied_by(3) == Duration(3 * hour)
	test/d.multiplied_by(1) % d
	test/d.divided_by(2) == Duration(hour // 2)
	test/Duration(-7).divided_by(2) == Duration(-3)
	test/-d == Duration(-hour)
	test/abs(-d) == d
	test/abs(d) % d
	test/errors.Overflow ^ (lambda: Duration(constants.long_max).plus(1))

def test_duration_comparison(test):
	d = Duration.of_hours(1)
	test/d.is_longer_than(None) == True
	test/d.is_shorter_than(Duration.of_hours(2)) == True
	test/(d < Duration.of_hours(2)) == True
	test/(d >= Duration.of_hours(1)) == True
	test/hash(d) == hash(Duration.of_hours(1))
	test/(d == hour) == False
	test/repr(d) == 'Duration(3600000)'

def test_duration_conversion(test):
	test/Duration.of_hours(25).to_period(PeriodType.time()).hours == 25
	test/Duration.of_hours(49).to_standard_days() == Days(2)
	test/Duration.of_minutes(150).to_standard_hours() == Hours(2)
	test/Duration.of_seconds(150).to_standard_minutes().amount == 2
	test/Duration(2500).to_standard_seconds().amount == 2
	test/errors.Overflow ^ (lambda: Duration(constants.long_max).to_standard_seconds())

def test_datetime_fields(test):
	dt = DateTime.of(2021, 1, 31, 10, 30, zone=zones.UTC)
	test/dt.chronology == ISOChronology.utc()
	test/dt.zone % zones.UTC
	test/(dt.year, dt.month_of_year, dt.day_of_month) == (2021, 1, 31)
	test/(dt.hour_of_day, dt.minute_of_hour) == (10, 30)
	test/dt.day_of_week == constants.sunday
	test/dt.get(F.day_of_year) == 31
	test/dt.is_supported(F.hour_of_day) == True
	test/dt.is_supported(None) == False
	test/errors.InvalidConfiguration ^ (lambda: dt.get(None))
	test/repr(dt) == 'DateTime(2021-01-31T10:30:00.000 UTC)'

	test/errors.IllegalFieldValue ^ (lambda: DateTime.of(2021, 2, 29, zone=zones.UTC))
	test/errors.NonexistentLocalTime ^ (lambda: DateTime.of(2021, 3, 14, 2, 30, zone=eastern()))

def test_datetime_with(test):
	dt = DateTime.of(2021, 1, 31, 10, zone=zones.UTC)
	test/dt.with_field(F.month_of_year, 2).day_of_month == 28
	test/dt.with_field(F.hour_of_day, 10) % dt
	test/dt.with_date(2020, 2, 29).millis == instant(2020, 2, 29, 10)
	test/dt.with_time(0, 0, 0, 0).millis == instant(2021, 1, 31)
	test/errors.IllegalFieldValue ^ (lambda: dt.with_time(24, 0, 0, 0))
	test/errors.InvalidConfiguration ^ (lambda: dt.with_field(None, 1))
	test/dt.with_millis(dt.millis) % dt

def test_with_time_zoned(test):
	c = ISOChronology.instance(eastern())
	dt = DateTime(instant(2021, 3, 14, 12), c)
	test/dt.with_time(1, 30, 0, 0).millis == instant(2021, 3, 14, 6, 30)
	test/dt.with_time(3, 30, 0, 0).millis == instant(2021, 3, 14, 7, 30)

	with test/errors.NonexistentLocalTime as exc:
		dt.with_time(2, 30, 0, 0)
	test/exc().message.endswith("2021-03-14T02:30:00.000 (Test/Eastern)") == True
	test/errors.IllegalFieldValue ^ (lambda: dt.with_time(24, 0, 0, 0))

	m = dt.to_mutable_datetime()
	test/errors.NonexistentLocalTime ^ (lambda: m.set_time(2, 30, 0, 0))
	test/m.millis == instant(2021, 3, 14, 12)
	m.set_time(8, 0, 0, 0)
	test/m.hour_of_day == 8

def test_datetime_arithmetic(test):
	dt = DateTime.of(2021, 1, 31, zone=zones.UTC)
	test/dt.plus_months(1).millis == instant(2021, 2, 28)
	test/dt.minus_days(31).millis == instant(2020, 12, 31)
	test/dt.plus_hours(0) % dt
	test/dt.with_field_added(D.years, 1).year == 2022
	test/dt.plus(Period.of(months=1, days=1)).millis == instant(2021, 3, 1)
	test/dt.minus(Period.of(days=1)).millis == instant(2021, 1, 30)
	test/dt.plus(Duration.of_hours(2)).hour_of_day == 2
	test/dt.plus(hour).hour_of_day == 1
	test/dt.minus(Days(1)).day_of_month == 30

def test_datetime_across_gap(test):
	z = eastern()
	dt = DateTime.of(2021, 3, 14, 1, 30, zone=z)
	later = dt.plus_hours(1)
	test/later.millis == instant(2021, 3, 14, 7, 30)
	test/later.hour_of_day == 3

	noon = DateTime.of(2021, 3, 13, 12, zone=z)
	test/noon.plus_days(1).millis == instant(2021, 3, 14, 16)
	test/noon.plus_days(1).hour_of_day == 12
	test/noon.plus(Duration.of_days(1)).hour_of_day == 13

def test_datetime_overlap(test):
	z = eastern()
	daylight = DateTime(instant(2021, 11, 7, 5, 30), zone=z)
	standard = DateTime(instant(2021, 11, 7, 6, 30), zone=z)
	test/daylight.hour_of_day == standard.hour_of_day

	test/daylight.with_later_offset_at_overlap() == standard
	test/standard.with_earlier_offset_at_overlap() == daylight
	test/daylight.with_earlier_offset_at_overlap() % daylight
	test/standard.with_later_offset_at_overlap() % standard

	outside = DateTime(instant(2021, 6, 1), zone=z)
	test/outside.with_later_offset_at_overlap() % outside

def test_datetime_zones(test):
	z = eastern()
	dt = DateTime.of(2021, 6, 1, 12, zone=zones.UTC)
	moved = dt.with_zone(z)
	test/moved.millis == dt.millis
	test/moved.hour_of_day == 8
	test/moved.zone == z
	test/dt.with_zone(zones.UTC) % dt

	retained = dt.with_zone_retain_fields(z)
	test/retained.millis == instant(2021, 6, 1, 16)
	test/retained.hour_of_day == 12
	test/dt.with_zone_retain_fields(zones.UTC) % dt

	# Fields in the gap are moved forward.
	gap = DateTime.of(2021, 3, 14, 2, 30, zone=zones.UTC).with_zone_retain_fields(z)
	test/gap.hour_of_day == 3

	test/dt.to_datetime(z) == moved
	test/dt.to_mutable_datetime().millis == dt.millis
	test/dt.to_local_date().day_of_month == 1
	test/dt.to_local_time().hour_of_day == 12

def test_datetime_equality(test):
	dt = DateTime.of(2021, 6, 1, zone=zones.UTC)
	same = DateTime(dt.millis, ISOChronology.utc())
	test/dt == same
	test/hash(dt) == hash(same)
	test/(dt == dt.with_zone(eastern())) == False
	test/dt.is_equal(dt.with_zone(eastern())) == True
	test/pickle.loads(pickle.dumps(dt)) == dt

def test_datetime_now(test):
	system.set_default_zone(eastern())
	system.set_fixed_millis(instant(2021, 6, 1, 16))
	now = DateTime.now()
	test/now.zone == eastern()
	test/now.hour_of_day == 12
	test/DateTime.now(zones.UTC).hour_of_day == 16

def test_mutable_set(test):
	m = MutableDateTime(instant(2021, 6, 15, 10, 40), zone=zones.UTC)
	m.set_year(2020)
	m.set_month_of_year(2)
	m.set_day_of_month(29)
	test/m.millis == instant(2020, 2, 29, 10, 40)
	test/errors.IllegalFieldValue ^ (lambda: m.set_day_of_month(30))

	m.set_date(2021, 6, 30)
	m.set_time(1, 2, 0, 0)
	test/m.millis == instant(2021, 6, 30, 1, 2)
	m.set(F.minute_of_hour, 0)
	test/m.minute_of_hour == 0
	test/errors.InvalidConfiguration ^ (lambda: m.set(None, 0))

def test_mutable_add(test):
	m = MutableDateTime(instant(2021, 1, 31), zone=zones.UTC)
	m.add_months(1)
	test/m.millis == instant(2021, 2, 28)
	m.add(D.days, 1)
	test/m.millis == instant(2021, 3, 1)
	m.add(D.days, 0)
	m.add(Period.of(hours=2))
	test/m.hour_of_day == 2
	m.add(Period.of(hours=1), 2)
	test/m.hour_of_day == 4
	m.add(minute)
	test/m.minute_of_hour == 1
	m.add(Duration(minute), -1)
	test/m.millis == instant(2021, 3, 1, 4)

def test_mutable_rounding(test):
	m = MutableDateTime(instant(2021, 6, 15, 10, 40), zone=zones.UTC)
	m.set_rounding(F.hour_of_day)
	test/m.millis == instant(2021, 6, 15, 10)
	test/m.rounding_mode == 'floor'

	m.add_minutes(50)
	test/m.millis == instant(2021, 6, 15, 10)

	m.set_rounding(F.hour_of_day, 'half_ceiling')
	m.add_minutes(30)
	test/m.millis == instant(2021, 6, 15, 11)

	m.set_rounding(ISOChronology.utc().day_of_month(), 'ceiling')
	test/m.millis == instant(2021, 6, 16)

	m.set_rounding(None)
	test/m.rounding_field == None
	m.add_minutes(1)
	test/m.minute_of_hour == 1

	m.set_rounding(F.hour_of_day, 'none')
	test/m.rounding_mode == None
	test/errors.InvalidConfiguration ^ (lambda: m.set_rounding(F.hour_of_day, 'nearest'))

def test_mutable_zone(test):
	z = eastern()
	m = MutableDateTime(instant(2021, 6, 1, 12), zone=zones.UTC)
	m.set_zone(z)
	test/m.millis == instant(2021, 6, 1, 12)
	test/m.hour_of_day == 8

	m.set_zone_retain_fields(zones.UTC)
	test/m.millis == instant(2021, 6, 1, 8)
	m.set_zone_retain_fields(zones.UTC)
	test/m.millis == instant(2021, 6, 1, 8)

	m.set_chronology(ISOChronology.instance(z))
	test/m.zone == z

def test_mutable_copy(test):
	m = MutableDateTime(instant(2021, 6, 15, 10, 40), zone=zones.UTC)
	m.set_rounding(F.hour_of_day)
	c = m.copy()
	test/c == m
	test/c.rounding_mode == 'floor'
	c.add_hours(1)
	test/c.hour_of_day == 11
	test/m.hour_of_day == 10
	test/TypeError ^ (lambda: hash(m))

def test_interval(test):
	i = Interval(0, 10, ISOChronology.utc())
	test/i.start_millis == 0
	test/i.end_millis == 10
	test/i.start == DateTime(0, ISOChronology.utc())
	test/i.duration() == Duration(10)
	test/i.duration_millis() == 10
	test/Interval(5, 5).duration_millis() == 0

	with test/errors.InvalidConfiguration as exc:
		Interval(10, 0)
	test/str(exc()) == "The end instant must be greater than the start instant"

	start = DateTime.of(2021, 1, 1, zone=zones.UTC)
	test/Interval(start, start.plus_days(1)).chronology == ISOChronology.utc()

def test_interval_contains(test):
	i = Interval(0, 10, ISOChronology.utc())
	test/i.contains(0) == True
	test/i.contains(9) == True
	test/i.contains(10) == False
	test/i.contains(Instant(5)) == True
	test/i.contains(Interval(2, 5)) == True
	test/i.contains(Interval(5, 10)) == True
	test/i.contains(Interval(5, 11)) == False
	test/i.contains(Interval(10, 10)) == False

	system.set_fixed_millis(5)
	test/i.contains_now() == True
	test/i.overlaps() == True
	system.set_fixed_millis(10)
	test/i.contains_now() == False

def test_interval_relations(test):
	utc = ISOChronology.utc()
	i = Interval(0, 10, utc)
	after = Interval(10, 20, utc)
	test/i.overlaps(Interval(5, 15, utc)) == True
	test/i.overlaps(after) == False
	test/i.abuts(after) == True
	test/after.abuts(i) == True
	test/i.abuts(Interval(11, 20, utc)) == False

	test/i.overlap(Interval(5, 15, utc)) == Interval(5, 10, utc)
	test/i.overlap(after) == None
	test/i.gap(Interval(15, 20, utc)) == Interval(10, 15, utc)
	test/i.gap(Interval(-20, -5, utc)) == Interval(-5, 0, utc)
	test/i.gap(after) == None
	test/i.gap(Interval(5, 15, utc)) == None

	test/i.is_before(after) == True
	test/i.is_before(10) == True
	test/after.is_after(i) == True
	test/i.is_after(-1) == True

def test_interval_with(test):
	utc = ISOChronology.utc()
	i = Interval(0, 10, utc)
	test/i.with_start(5) == Interval(5, 10, utc)
	test/i.with_end(20) == Interval(0, 20, utc)
	test/errors.InvalidConfiguration ^ (lambda: i.with_start(11))
	test/i.with_chronology(ISOChronology.instance(eastern())).chronology.zone == eastern()
	test/hash(i) == hash(Interval(0, 10, utc))

def test_interval_period(test):
	start = DateTime.of(2020, 1, 31, zone=zones.UTC)
	end = DateTime.of(2021, 3, 15, 10, zone=zones.UTC)
	i = Interval(start, end)
	test/i.to_period() == Period.of(years=1, months=1, weeks=2, days=1, hours=10)
	test/i.to_period(PeriodType.day_time()).days == 409

def test_mutable_interval(test):
	utc = ISOChronology.utc()
	m = MutableInterval(0, 10, utc)
	m.set_start(5)
	m.set_end(20)
	test/m == Interval(5, 20, utc)

	# Rejected end points leave the interval unchanged.
	test/errors.InvalidConfiguration ^ (lambda: m.set_start(30))
	test/errors.InvalidConfiguration ^ (lambda: m.set_end(4))
	test/errors.InvalidConfiguration ^ (lambda: m.set_interval(4, 3))
	test/(m.start_millis, m.end_millis) == (5, 20)

	m.set_interval(Interval(1, 2, utc))
	test/(m.start_millis, m.end_millis) == (1, 2)
	m.set_interval(DateTime(3, utc), 4)
	test/(m.start_millis, m.end_millis) == (3, 4)

	c = m.copy()
	c.set_end(100)
	test/m.end_millis == 4
	test/c.end_millis == 100
	test/type(m.to_interval()) == Interval
	test/m.to_interval() == m
	test/TypeError ^ (lambda: hash(m))
	test/pickle.loads(pickle.dumps(m)) == m

def test_mutable_interval_amounts(test):
	z = eastern()
	m = MutableInterval(instant(2021, 3, 13, 5), instant(2021, 3, 13, 5), ISOChronology.utc())
	m.set_chronology(ISOChronology.instance(z))
	test/m.chronology.zone == z

	# Days are added in local time across the transition.
	m.set_period_after_start(Period.of(days=2))
	test/m.end_millis == instant(2021, 3, 15, 4)
	test/m.duration_millis() == 47 * hour
	m.set_duration_after_start(Duration.of_hours(48))
	test/m.end_millis == instant(2021, 3, 15, 5)

	m.set_period_before_end(Period.of(days=1))
	test/m.start_millis == instant(2021, 3, 14, 6)
	m.set_duration_before_end(Duration.of_hours(1))
	test/m.start_millis == instant(2021, 3, 15, 4)

	m.set_duration_before_end(None)
	test/m.duration_millis() == 0
	m.set_period_before_end(Period.of(days=1))
	m.set_period_after_start(None)
	test/m.duration_millis() == 0
	test/errors.InvalidConfiguration ^ (lambda: m.set_duration_after_start(-1))

def test_comparator(test):
	utc = ISOChronology.utc()
	morning = DateTime(instant(2021, 6, 15, 10), utc)
	night = DateTime(instant(2021, 6, 15, 22), utc)
	early = DateTime(instant(2021, 6, 16, 1), utc)

	full = DateTimeComparator()
	test/full.compare(morning, night) == -1
	test/full.compare(night, morning) == 1
	test/full(morning, morning) == 0

	dates = DateTimeComparator.date_only()
	test/dates.compare(morning, night) == 0
	test/dates.compare(morning, early) == -1
	test/dates.compare(early, night) == 1
	test/dates.key(night) == instant(2021, 6, 15)

	times = DateTimeComparator.time_only()
	test/times.compare(early, morning) == -1
	test/times.compare(DateTime(instant(2020, 1, 1, 10), utc), morning) == 0
	test/times.key(night) == 22 * hour
	test/sorted([night, morning, early], key=times.key) == [early, morning, night]

	hours = DateTimeComparator(F.hour_of_day, F.day_of_month)
	test/hours.compare(DateTime(instant(2021, 1, 1, 10, 59), utc), morning) == 0

	test/dates == DateTimeComparator(F.day_of_year)
	test/hash(times) == hash(DateTimeComparator(None, F.day_of_year))
	test/repr(dates) == 'DateTimeComparator[dayOfYear-]'
	test/repr(times) == 'DateTimeComparator[-dayOfYear]'
	test/repr(full) == 'DateTimeComparator[]'

if __name__ == '__main__':
	import sys
	from contention import library as libtest
	libtest.execute(sys.modules[__name__])
