"""
# Identities of the duration units and calendar fields.

# &DurationFieldType and &DateTimeFieldType instances are singletons keyed by
# ordinal. They carry no magnitude; a chronology supplies the field that implements
# the identity through &DurationFieldType.get_field and &DateTimeFieldType.get_field.

# The dispatch from ordinal to chronology accessor is a closed table. An ordinal
# without an entry is an internal error rather than a caller error.

#!python
	from horology.fieldtypes import DateTimeFieldType as F
	F.month_of_year.get_field(chronology).get(instant)
"""
import operator

from . import errors

class DurationFieldType(object):
	"""
	# Identity of a unit of elapsed time.

	# [ Properties ]
	# /name/
		# The unit's name; `'days'`, `'hours'`, etc.
	# /ordinal/
		# The fixed position of the unit in the registry.
	"""
	__slots__ = ('name', 'ordinal')

	_registry = {}
	_names = {}
	_dispatch = {}

	def __init__(self, name:str, ordinal:int):
		self.name = name
		self.ordinal = ordinal

	@classmethod
	def define(Class, name, ordinal, accessor):
		t = Class(name, ordinal)
		Class._registry[ordinal] = t
		Class._names[name] = t
		Class._dispatch[ordinal] = operator.methodcaller(accessor)
		setattr(Class, name, t)
		return t

	@classmethod
	def for_ordinal(Class, ordinal):
		return Class._registry[ordinal]

	@classmethod
	def for_name(Class, name):
		"""
		# Resolve the singleton for the given unit name.
		"""
		try:
			return Class._names[name]
		except KeyError:
			raise errors.InvalidConfiguration("unknown duration field type: " + repr(name))

	@classmethod
	def types(Class):
		"""
		# All of the types in ordinal order.
		"""
		return tuple(Class._registry[x] for x in sorted(Class._registry))

	def get_field(self, chronology):
		"""
		# Resolve the duration field implementing this unit in &chronology.
		"""
		try:
			accessor = self._dispatch[self.ordinal]
		except KeyError:
			raise errors.InternalInvariant("unmapped duration field ordinal: %d" % (self.ordinal,))
		return accessor(chronology)

	def is_supported(self, chronology):
		return self.get_field(chronology).is_supported()

	def __eq__(self, ob):
		return type(ob) is type(self) and ob.ordinal == self.ordinal

	def __hash__(self):
		return hash((DurationFieldType, self.ordinal))

	def __reduce__(self):
		return (self.for_name, (self.name,))

	def __repr__(self):
		return '<DurationFieldType: %s>' % (self.name,)

	def __str__(self):
		return self.name

class DateTimeFieldType(object):
	"""
	# Identity of a calendar field.

	# [ Properties ]
	# /name/
		# The field's name; `'monthOfYear'`, `'hourOfDay'`, etc.
	# /identifier/
		# The name of the accessor that chronologies expose for the field; `'month_of_year'`.
	# /ordinal/
		# The fixed position of the field in the registry.
	# /duration_type/
		# The &DurationFieldType of the field's unit.
	# /range_duration_type/
		# The &DurationFieldType that the field's values cycle within, or &None when unbounded.
	"""
	__slots__ = ('name', 'identifier', 'ordinal', 'duration_type', 'range_duration_type')

	_registry = {}
	_names = {}
	_dispatch = {}

	def __init__(self, name, identifier, ordinal, duration_type, range_duration_type):
		self.name = name
		self.identifier = identifier
		self.ordinal = ordinal
		self.duration_type = duration_type
		self.range_duration_type = range_duration_type

	@classmethod
	def define(Class, name, identifier, ordinal, unit, range):
		t = Class(name, identifier, ordinal, unit, range)
		Class._registry[ordinal] = t
		Class._names[name] = t
		Class._dispatch[ordinal] = operator.methodcaller(identifier)
		setattr(Class, identifier, t)
		return t

	@classmethod
	def for_ordinal(Class, ordinal):
		return Class._registry[ordinal]

	@classmethod
	def for_name(Class, name):
		try:
			return Class._names[name]
		except KeyError:
			raise errors.InvalidConfiguration("unknown date time field type: " + repr(name))

	@classmethod
	def types(Class):
		return tuple(Class._registry[x] for x in sorted(Class._registry))

	def get_field(self, chronology):
		"""
		# Resolve the field implementing this type in &chronology.
		"""
		try:
			accessor = self._dispatch[self.ordinal]
		except KeyError:
			raise errors.InternalInvariant("unmapped date time field ordinal: %d" % (self.ordinal,))
		return accessor(chronology)

	def is_supported(self, chronology):
		return self.get_field(chronology).is_supported()

	def __eq__(self, ob):
		return type(ob) is type(self) and ob.ordinal == self.ordinal

	def __hash__(self):
		return hash((DateTimeFieldType, self.ordinal))

	def __reduce__(self):
		return (self.for_name, (self.name,))

	def __repr__(self):
		return '<DateTimeFieldType: %s>' % (self.name,)

	def __str__(self):
		return self.name

def _define_durations(define=DurationFieldType.define):
	define('eras', 1, 'eras')
	define('centuries', 2, 'centuries')
	define('weekyears', 3, 'weekyears')
	define('years', 4, 'years')
	define('months', 5, 'months')
	define('weeks', 6, 'weeks')
	define('days', 7, 'days')
	define('halfdays', 8, 'halfdays')
	define('hours', 9, 'hours')
	define('minutes', 10, 'minutes')
	define('seconds', 11, 'seconds')
	define('millis', 12, 'millis')

def _define_fields(define=DateTimeFieldType.define, D=DurationFieldType):
	define('era', 'era', 1, D.eras, None)
	define('yearOfEra', 'year_of_era', 2, D.years, D.eras)
	define('centuryOfEra', 'century_of_era', 3, D.centuries, D.eras)
	define('yearOfCentury', 'year_of_century', 4, D.years, D.centuries)
	define('year', 'year', 5, D.years, None)
	define('dayOfYear', 'day_of_year', 6, D.days, D.years)
	define('monthOfYear', 'month_of_year', 7, D.months, D.years)
	define('dayOfMonth', 'day_of_month', 8, D.days, D.months)
	define('weekyearOfCentury', 'weekyear_of_century', 9, D.weekyears, D.centuries)
	define('weekyear', 'weekyear', 10, D.weekyears, None)
	define('weekOfWeekyear', 'week_of_weekyear', 11, D.weeks, D.weekyears)
	define('dayOfWeek', 'day_of_week', 12, D.days, D.weeks)
	define('halfdayOfDay', 'halfday_of_day', 13, D.halfdays, D.days)
	define('hourOfHalfday', 'hour_of_halfday', 14, D.hours, D.halfdays)
	define('clockhourOfHalfday', 'clockhour_of_halfday', 15, D.hours, D.halfdays)
	define('clockhourOfDay', 'clockhour_of_day', 16, D.hours, D.days)
	define('hourOfDay', 'hour_of_day', 17, D.hours, D.days)
	define('minuteOfDay', 'minute_of_day', 18, D.minutes, D.days)
	define('minuteOfHour', 'minute_of_hour', 19, D.minutes, D.hours)
	define('secondOfDay', 'second_of_day', 20, D.seconds, D.days)
	define('secondOfMinute', 'second_of_minute', 21, D.seconds, D.minutes)
	define('millisOfDay', 'millis_of_day', 22, D.millis, D.days)
	define('millisOfSecond', 'millis_of_second', 23, D.millis, D.seconds)

_define_durations()
_define_fields()
del _define_durations, _define_fields
