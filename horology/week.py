"""
# Week based measures of time: days of seven, numbered from monday.
"""
from . import constants

def day_of_week(days, *, datum=constants.epoch_weekday - 1):
	"""
	# The ISO weekday, one through seven, of the day number relative to 1970-01-01.
	"""
	return ((days + datum) % 7) + 1

def first_week_start(year_start, minimum_days):
	"""
	# The day number of the first day of the first week of a week-based year.

	# [ Parameters ]
	# /year_start/
		# The day number of the first day of the calendar year.
	# /minimum_days/
		# The number of days of the calendar year that must fall within the first week.
	"""
	weekday = day_of_week(year_start)
	if weekday > (8 - minimum_days):
		# Partial week belongs to the prior weekyear.
		return year_start + (8 - weekday)
	return year_start - (weekday - 1)
