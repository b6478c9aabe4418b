"""
# Fixed quantities shared by the fields, chronologies, and zones.

# All instants are measured in milliseconds from 1970-01-01T00:00:00Z.
"""

millis_per_second = 1000
seconds_per_minute = 60
minutes_per_hour = 60
hours_per_day = 24
days_per_week = 7

millis_per_minute = millis_per_second * seconds_per_minute
millis_per_hour = millis_per_minute * minutes_per_hour
millis_per_day = millis_per_hour * hours_per_day
millis_per_week = millis_per_day * days_per_week
millis_per_halfday = millis_per_day // 2

seconds_per_hour = seconds_per_minute * minutes_per_hour
seconds_per_day = seconds_per_hour * hours_per_day
minutes_per_day = minutes_per_hour * hours_per_day
hours_per_halfday = hours_per_day // 2

#: Bounds of the signed 64-bit instant.
long_min = -(1 << 63)
long_max = (1 << 63) - 1

#: Bounds of the signed 32-bit field and period value.
int_min = -(1 << 31)
int_max = (1 << 31) - 1

#: The largest magnitude of a zone offset; exclusive of a whole day.
offset_max = millis_per_day - 1

# ISO weekdays; monday is one.
monday = 1
tuesday = 2
wednesday = 3
thursday = 4
friday = 5
saturday = 6
sunday = 7

january = 1
february = 2
december = 12

# Era values.
bce = 0
ce = 1

# Halfday values.
am = 0
pm = 1

#: The number of days between 0000-01-01 and 1970-01-01 in the proleptic gregorian calendar.
epoch_days = 719528

#: Weekday of the epoch, 1970-01-01.
epoch_weekday = thursday
