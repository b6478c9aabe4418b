"""
# Chronology base classes.

# A chronology is the table of duration fields and calendar fields for a
# calendar system plus the generic algorithms that combine them:
# building an instant from field values, extracting the values of a partial or
# period, and adding a period to an instant.

# [ Elements ]
# /BaseChronology/
	# Every accessor returns an unsupported field; the generic algorithms
	# are implemented in terms of the accessors.
# /AssembledChronology/
	# A chronology whose accessors are filled by &AssembledChronology.assemble.
"""
from . import arithmetic
from . import errors
from . import durations
from . import fields
from .fieldtypes import DurationFieldType, DateTimeFieldType

#: Accessor names of the duration fields.
duration_accessors = tuple(t.name for t in DurationFieldType.types())

#: Accessor names of the calendar fields.
field_accessors = tuple(t.identifier for t in DateTimeFieldType.types())

class BaseChronology(object):
	"""
	# A chronology without any supported fields.

	# Subclasses override the accessors they support. The generic algorithms
	# only use the accessors so concrete chronologies override them for
	# performance rather than correctness.
	"""
	__slots__ = ()

	# Build the default accessors; one for each type in the registry.
	for _t in DurationFieldType.types():
		def _accessor(self, _t=_t):
			return durations.unsupported(_t)
		_accessor.__name__ = _t.name
		locals()[_t.name] = _accessor

	for _t in DateTimeFieldType.types():
		def _accessor(self, _t=_t):
			return fields.unsupported(_t, durations.unsupported(_t.duration_type))
		_accessor.__name__ = _t.identifier
		locals()[_t.identifier] = _accessor
	del _t, _accessor

	@property
	def zone(self):
		"""
		# The zone of the chronology; &None for zone independent chronologies.
		"""
		return None

	def with_utc(self):
		raise NotImplementedError

	def with_zone(self, zone):
		raise NotImplementedError

	def field(self, type):
		"""
		# The field or duration field of this chronology implementing &type.
		"""
		return type.get_field(self)

	# Instant construction.

	def date_time_millis(self, year, month, day, millis_of_day):
		"""
		# Build the instant of the date at &millis_of_day by setting each field,
		# largest first, starting from zero.
		"""
		instant = self.year().set(0, year)
		instant = self.month_of_year().set(instant, month)
		instant = self.day_of_month().set(instant, day)
		return self.millis_of_day().set(instant, millis_of_day)

	def datetime_millis(self, year, month, day, hour=0, minute=0, second=0, millis=0):
		"""
		# Build the instant of the given fields by setting each, largest first.
		"""
		instant = self.year().set(0, year)
		instant = self.month_of_year().set(instant, month)
		instant = self.day_of_month().set(instant, day)
		instant = self.hour_of_day().set(instant, hour)
		instant = self.minute_of_hour().set(instant, minute)
		instant = self.second_of_minute().set(instant, second)
		return self.millis_of_second().set(instant, millis)

	def time_millis(self, instant, hour, minute, second, millis):
		"""
		# Replace the time of day of &instant.
		"""
		instant = self.hour_of_day().set(instant, hour)
		instant = self.minute_of_hour().set(instant, minute)
		instant = self.second_of_minute().set(instant, second)
		return self.millis_of_second().set(instant, millis)

	# Partials

	def validate(self, partial, values):
		"""
		# Check &values against the fields of &partial.

		# The fixed bounds of each field are checked first so that the
		# partial aware bounds, which may read other values, see sane input.

		# [ Exceptions ]
		# /errors.IllegalFieldValue/
			# A value was out of range.
		"""
		size = len(partial)

		for i in range(size):
			value = values[i]
			field = partial.field(i)
			lower = field.minimum()
			if value < lower:
				raise errors.IllegalFieldValue(field.type, value, lower, None)
			upper = field.maximum()
			if value > upper:
				raise errors.IllegalFieldValue(field.type, value, None, upper)

		for i in range(size):
			value = values[i]
			field = partial.field(i)
			lower = field.minimum_for(partial, values)
			if value < lower:
				raise errors.IllegalFieldValue(field.type, value, lower, None)
			upper = field.maximum_for(partial, values)
			if value > upper:
				raise errors.IllegalFieldValue(field.type, value, None, upper)

	def get_partial(self, partial, instant):
		"""
		# Extract the values of the fields of &partial from &instant.
		"""
		return [
			partial.field_type(i).get_field(self).get(instant)
			for i in range(len(partial))
		]

	def set_partial(self, partial, instant):
		"""
		# Set the values of &partial onto &instant.
		"""
		for i in range(len(partial)):
			instant = partial.field_type(i).get_field(self).set(instant, partial.value(i))
		return instant

	# Periods

	def get_period(self, period, start, end):
		"""
		# Decompose the time between &start and &end into the units of &period.

		# Each unit, largest first, takes as many whole units as fit and the
		# remainder is left to the following units.
		"""
		size = len(period)
		values = [0] * size

		if start != end:
			for i in range(size):
				field = period.field_type(i).get_field(self)
				value = field.get_difference(end, start)
				if value != 0:
					start = field.add(start, value)
				values[i] = value

		return values

	def get_period_duration(self, period, duration):
		"""
		# Decompose &duration into the precise units of &period; imprecise units are zero.
		"""
		size = len(period)
		values = [0] * size

		if duration != 0:
			total = 0
			for i in range(size):
				field = period.field_type(i).get_field(self)
				if field.is_precise():
					value = field.get_difference(duration, total)
					total = field.add(total, value)
					values[i] = value

		return values

	def add_period(self, period, instant, scalar=1):
		"""
		# Add &scalar multiples of each amount of &period to &instant.
		"""
		if scalar != 0 and period is not None:
			for i in range(len(period)):
				value = period.value(i)
				if value != 0:
					field = period.field_type(i).get_field(self)
					instant = field.add(instant, arithmetic.multiply_int(value, scalar))
		return instant

	def add_duration(self, instant, duration, scalar=1):
		if duration == 0 or scalar == 0:
			return instant
		return arithmetic.add(instant, arithmetic.multiply(duration, scalar))

class AssembledChronology(BaseChronology):
	"""
	# A chronology whose fields are assembled from a base chronology and
	# the overrides of &assemble.

	# [ Properties ]
	# /base/
		# The chronology supplying the initial fields or &None.
	# /param/
		# Arbitrary data identifying the chronology; a zone.
	# /fields/
		# Dictionary of accessor names to fields.
	"""
	__slots__ = ('base', 'param', 'fields')

	def __init__(self, base, param):
		self.base = base
		self.param = param
		table = {}

		if base is not None:
			for name in duration_accessors + field_accessors:
				table[name] = getattr(base, name)()

		self.assemble(table)

		# Remaining names fall back to unsupported fields.
		for name in duration_accessors + field_accessors:
			if table.get(name) is None:
				table[name] = getattr(BaseChronology, name)(self)

		self.fields = table

	def assemble(self, fields):
		"""
		# Populate &fields with the chronology's fields.
		"""
		raise NotImplementedError

	for _name in duration_accessors + field_accessors:
		def _accessor(self, _name=_name):
			return self.fields[_name]
		_accessor.__name__ = _name
		locals()[_name] = _accessor
	del _name, _accessor

	@property
	def zone(self):
		base = self.base
		if base is not None:
			return base.zone
		return None
