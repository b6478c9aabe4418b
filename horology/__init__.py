"""
# Calendar fields, periods, and zone offset resolution over millisecond instants.

# horology represents points in time as 64-bit counts of milliseconds from the Unix
# epoch and interprets them with a chronology: a table of fields for a calendar
# system bound to a time zone. Zones resolve local times to instants, reporting
# skipped local times in strict mode and choosing a documented instant in lenient
# mode.

# The primary surface is &.library:

#!python
	from horology import library as libhorology
	libhorology.LocalDate(2020, 1, 31).plus_months(1)

# Exceptions are defined by &.errors and configuration is held by &.system.
"""
