"""
# Primary public module.

# Provides access to the value types, the zone constructors, and the process-wide
# configuration.

#!python
	from horology import library as libhorology

	zone = libhorology.zone("America/New_York")
	dt = libhorology.DateTime.of(2021, 3, 14, 1, 30, zone=zone)
	dt.plus_hours(1).hour_of_day == 3
"""
from .errors import Error, IllegalFieldValue, UnsupportedField, NonexistentLocalTime, \
	Overflow, InvalidConfiguration, InternalInvariant, is_nonexistent
from .fieldtypes import DurationFieldType, DateTimeFieldType
from .periodtypes import PeriodType
from .iso import ISOChronology
from .zones import DateTimeZone, FixedZone, TransitionZone, UTC, \
	for_offset_millis, for_offset_hours, for_offset_hours_minutes, parse_offset, print_offset
from .partial import Partial
from .local import LocalDate, LocalTime, MonthDay
from .period import Period, MutablePeriod, Years, Months, Weeks, Days, Hours, Minutes, Seconds
from .types import Instant, Duration, DateTime, MutableDateTime, Interval, MutableInterval, DateTimeComparator
from .leniency import StrictChronology, LenientChronology
from .system import set_default_zone, set_provider, set_names, \
	set_fixed_millis, set_offset_millis, set_system_millis, current_millis, default_zone

__shortname__ = 'libhorology'

def zone(id:str=None) -> DateTimeZone:
	"""
	# Resolve the zone identified by &id; the default zone when &None.

	# Offset identifiers, `+05:30`, are accepted in addition to the identifiers
	# known by the configured provider.

	# [ Exceptions ]
	# /InvalidConfiguration/
		# The identifier is not known.
	"""
	from . import system, zones
	if id is None:
		return system.default_zone()
	return zones.for_id(id)

def now(zone=None) -> DateTime:
	"""
	# The current instant in &zone; the default zone when &None.
	"""
	return DateTime.now(zone)

def today(zone=None) -> LocalDate:
	"""
	# The current date in &zone.
	"""
	return LocalDate.now(zone)

def chronology(zone=None) -> ISOChronology:
	"""
	# The ISO chronology of &zone; `ISOChronology.utc()` for &UTC.
	"""
	return ISOChronology.instance(zone)

def between(start, end, period_type=None, chronology=None) -> Period:
	"""
	# The period between two instants or two partials in the units of &period_type.
	"""
	return Period.between(start, end, period_type, chronology)
