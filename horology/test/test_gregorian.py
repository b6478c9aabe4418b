import itertools

from .. import constants
from .. import gregorian
from .. import week

def test_year_is_leap(test):
	# hand picked years
	test/True == gregorian.year_is_leap(2000)
	test/False == gregorian.year_is_leap(1999)
	test/True == gregorian.year_is_leap(1996)
	test/True == gregorian.year_is_leap(1600)
	test/False == gregorian.year_is_leap(1900)
	test/False == gregorian.year_is_leap(1700)
	test/True == gregorian.year_is_leap(0)
	test/True == gregorian.year_is_leap(-4)
	test/False == gregorian.year_is_leap(-1)
	for x, i in zip(itertools.cycle((True, False, False, False)), range(1604, 1700)):
		test/x == gregorian.year_is_leap(i)

def test_days_in_month(test):
	test/gregorian.days_in_month(2020, 2) == 29
	test/gregorian.days_in_month(2021, 2) == 28
	test/gregorian.days_in_month(1900, 2) == 28
	test/gregorian.days_in_month(2021, 4) == 30
	test/gregorian.days_in_month(2021, 12) == 31
	test/sum(gregorian.days_in_month(2020, m) for m in range(1, 13)) == 366
	test/gregorian.days_in_year(2021) == 365

def test_days_before_month(test):
	test/gregorian.days_before_month(2021, 1) == 0
	test/gregorian.days_before_month(2021, 3) == 59
	test/gregorian.days_before_month(2020, 3) == 60
	test/gregorian.days_before_month(2020, 12) == 335

def test_epoch(test):
	test/gregorian.epoch_days(1970) == 0
	test/gregorian.epoch_date(0) == (1970, 1, 1)
	test/gregorian.epoch_days(1969, 12, 31) == -1
	test/gregorian.epoch_date(-1) == (1969, 12, 31)
	test/gregorian.epoch_days(2000, 3, 1) == 11017
	test/gregorian.epoch_days(2021, 3, 14) == 18700
	test/gregorian.days_from_date((1970, 1, 1)) == constants.epoch_days

def test_date_alignment(test):
	# Every day from 1899 through 2001 converts in both directions.
	start = gregorian.epoch_days(1899, 1, 1)
	end = gregorian.epoch_days(2002, 1, 1)
	expected = (1899, 1, 1)
	for days in range(start, end):
		date = gregorian.epoch_date(days)
		test/date == expected
		test/gregorian.epoch_days(*date) == days

		y, m, d = date
		if d < gregorian.days_in_month(y, m):
			expected = (y, m, d + 1)
		elif m < 12:
			expected = (y, m + 1, 1)
		else:
			expected = (y + 1, 1, 1)

def test_negative_years(test):
	days = gregorian.epoch_days(-1, 12, 31)
	test/gregorian.epoch_date(days) == (-1, 12, 31)
	test/gregorian.epoch_date(days + 1) == (0, 1, 1)
	test/gregorian.year_from_days(days) == -1

def test_day_of_week(test):
	test/week.day_of_week(0) == constants.thursday
	test/week.day_of_week(-1) == constants.wednesday
	test/week.day_of_week(gregorian.epoch_days(2021, 3, 14)) == constants.sunday
	test/week.day_of_week(gregorian.epoch_days(2000, 1, 3)) == constants.monday

def test_first_week_start(test):
	# 2021-01-01 is a friday; the first ISO week begins 2021-01-04.
	test/week.first_week_start(gregorian.epoch_days(2021), 4) == gregorian.epoch_days(2021, 1, 4)
	# 2020-01-01 is a wednesday; the first ISO week begins 2019-12-30.
	test/week.first_week_start(gregorian.epoch_days(2020), 4) == gregorian.epoch_days(2019, 12, 30)
	# With a single required day the week containing january first is the first.
	test/week.first_week_start(gregorian.epoch_days(2021), 1) == gregorian.epoch_days(2020, 12, 28)

if __name__ == '__main__':
	import sys
	from contention import library as libtest
	libtest.execute(sys.modules[__name__])
