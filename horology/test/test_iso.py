import pickle

from .. import errors
from .. import zones
from ..iso import ISOChronology, Calendar
from ..zoned import ZonedChronology
from ..period import Period
from ..periodtypes import PeriodType
from ..partial import Partial
from ..fieldtypes import DurationFieldType as D, DateTimeFieldType as F
from .test_zones import eastern

def test_instances(test):
	utc = ISOChronology.utc()
	test/ISOChronology.utc() % utc
	test/ISOChronology.instance(zones.UTC) % utc
	test/utc.zone % zones.UTC
	test/utc.with_utc() % utc
	test/repr(utc) == 'ISOChronology[UTC]'

	c = ISOChronology.instance(eastern())
	test/ISOChronology.instance(eastern()) % c
	test/c.zone == eastern()
	test/c.with_utc() % utc
	test/utc.with_zone(eastern()) % c
	test/c.with_zone(eastern()) % c
	test.isinstance(c.base, ZonedChronology)
	test/repr(c) == 'ISOChronology[Test/Eastern]'

def test_equality(test):
	utc = ISOChronology.utc()
	c = ISOChronology.instance(eastern())
	test/c != utc
	test/c == ISOChronology(ZonedChronology(utc, eastern()), eastern())
	test/hash(c) == hash(ISOChronology.instance(eastern()))
	test/pickle.loads(pickle.dumps(zones.UTC)) % zones.UTC

def test_calendar_minimum_days(test):
	test/Calendar(1).minimum_days == 1
	test/errors.IllegalFieldValue ^ (lambda: Calendar(0))
	test/errors.IllegalFieldValue ^ (lambda: Calendar(8))

def test_datetime_millis(test):
	c = ISOChronology.utc()
	test/c.datetime_millis(1970, 1, 1) == 0
	test/c.datetime_millis(1970, 1, 2, 0, 0, 0, 1) == 86400001
	test/c.date_time_millis(1970, 1, 2, 5) == 86400005
	test/c.datetime_millis(1969, 12, 31, 23, 59, 59, 999) == -1

	with test/errors.IllegalFieldValue as exc:
		c.datetime_millis(2021, 2, 29)
	test/exc().field_type == F.day_of_month

	test/errors.IllegalFieldValue ^ (lambda: c.datetime_millis(2021, 13, 1))
	test/errors.IllegalFieldValue ^ (lambda: c.datetime_millis(2021, 1, 1, 24))
	test/errors.IllegalFieldValue ^ (lambda: c.datetime_millis(2021, 1, 1, 0, 60))
	test/errors.IllegalFieldValue ^ (lambda: c.date_time_millis(2021, 1, 1, 86400000))

def test_time_millis(test):
	c = ISOChronology.utc()
	t = c.datetime_millis(2021, 6, 15, 13, 45)
	test/c.time_millis(t, 8, 30, 15, 5) == c.datetime_millis(2021, 6, 15, 8, 30, 15, 5)

def test_field_lookup(test):
	c = ISOChronology.utc()
	test/c.field(F.hour_of_day) % c.hour_of_day()
	test/c.field(D.days) % c.days()
	test/F.day_of_month.is_supported(c) == True
	test/D.eras.is_supported(c) == False

def test_get_period(test):
	c = ISOChronology.utc()
	start = c.datetime_millis(2020, 1, 31)
	end = c.datetime_millis(2021, 3, 15, 10, 0, 0, 5)
	values = c.get_period(PeriodType.standard(), start, end)
	test/values == [1, 1, 2, 1, 10, 0, 0, 5]

	values = c.get_period(PeriodType.day_time(), start, end)
	test/values[0] == 409
	test/c.get_period(PeriodType.standard(), start, start) == [0] * 8

	back = c.get_period(PeriodType.year_month_day(), end, start)
	test/back == [-1, -1, -15]

def test_get_period_duration(test):
	c = ISOChronology.utc()
	values = c.get_period_duration(PeriodType.standard(), 90061001)
	# Imprecise units are left at zero.
	test/values == [0, 0, 0, 1, 1, 1, 1, 1]

def test_add_period(test):
	c = ISOChronology.utc()
	start = c.datetime_millis(2021, 1, 31, 12)
	p = Period.of(months=1, days=1, hours=1)
	test/c.add_period(p, start) == c.datetime_millis(2021, 3, 1, 13)
	test/c.add_period(p, start, 0) == start
	test/c.add_period(None, start) == start
	test/c.add_duration(start, 1000, 3) == start + 3000

def test_partial_values(test):
	c = ISOChronology.utc()
	p = Partial([(F.year, 2021), (F.month_of_year, 6), (F.day_of_month, 15)])
	t = c.datetime_millis(2020, 2, 29, 10)
	test/c.get_partial(p, t) == [2020, 2, 29]
	test/c.set_partial(p, t) == c.datetime_millis(2021, 6, 15, 10)

	test/errors.IllegalFieldValue ^ (lambda: c.validate(p, [2021, 2, 29]))
	c.validate(p, [2020, 2, 29])

if __name__ == '__main__':
	import sys
	from contention import library as libtest
	libtest.execute(sys.modules[__name__])
