"""
# Chronology wrapper applying a zone to every field of a UTC chronology.

# Fields of less than twelve hours operate on the instant shifted by the offset in
# effect at the instant; the offset is then removed again so that adding an hour is
# always an hour of elapsed time. Longer fields convert to local time, operate, and
# convert back leniently using the input instant to select the side of an overlap.

# [ Elements ]
# /ZonedChronology/
	# The chronology wrapper.
# /ZonedDurationField/
	# Duration field operating in local time.
# /ZonedDateTimeField/
	# Calendar field operating in local time.
"""
from . import arithmetic
from . import constants
from . import errors
from . import durations
from . import fields
from .chronology import AssembledChronology, duration_accessors, field_accessors

def use_time_arithmetic(field, limit=constants.millis_per_hour * 12):
	"""
	# Whether &field is small enough to be applied to UTC instants directly.
	"""
	return field is not None and field.unit_millis() < limit

def offset_to_add(zone, instant):
	offset = zone.offset(instant)
	arithmetic.check_long(instant + offset, "Adding time zone offset caused overflow")
	return offset

def offset_to_subtract(zone, local):
	offset = zone.offset_from_local(local)
	arithmetic.check_long(local - offset, "Subtracting time zone offset caused overflow")
	return offset

class ZonedDurationField(durations.DurationField):
	"""
	# A duration field whose arithmetic is performed in local time.
	"""
	__slots__ = ('field', 'zone', 'time_field')

	def __init__(self, field, zone):
		if not field.is_supported():
			raise errors.InvalidConfiguration("The field must be supported")
		super().__init__(field.type)
		self.field = field
		self.zone = zone
		self.time_field = use_time_arithmetic(field)

	def is_precise(self):
		if self.time_field:
			return self.field.is_precise()
		return self.field.is_precise() and self.zone.is_fixed()

	def unit_millis(self):
		return self.field.unit_millis()

	def _local(self, instant):
		if instant is None:
			return None
		return instant + offset_to_add(self.zone, instant)

	def get_value_long(self, duration, instant=None):
		return self.field.get_value_long(duration, self._local(instant))

	def get_millis(self, value, instant=None):
		return self.field.get_millis(value, self._local(instant))

	def add(self, instant, value):
		offset = offset_to_add(self.zone, instant)
		instant = self.field.add(instant + offset, value)
		if self.time_field:
			return instant - offset
		return instant - offset_to_subtract(self.zone, instant)

	def get_difference_long(self, minuend, subtrahend):
		zone = self.zone
		offset = offset_to_add(zone, subtrahend)
		if self.time_field:
			minuend_offset = offset
		else:
			minuend_offset = offset_to_add(zone, minuend)
		return self.field.get_difference_long(minuend + minuend_offset, subtrahend + offset)

	def __eq__(self, ob):
		return isinstance(ob, ZonedDurationField) and ob.field == self.field and ob.zone == self.zone

	def __hash__(self):
		return hash((self.field, self.zone))

class ZonedDateTimeField(fields.BaseField):
	"""
	# A calendar field reading and writing the local time of the zone.

	# [ Properties ]
	# /field/
		# The UTC field.
	# /zone/
		# The zone converting instants to local time.
	# /unit_field/
		# The zoned unit duration field.
	# /range_field/
		# The zoned range duration field or &None.
	# /leap_field/
		# The zoned leap duration field or &None.
	"""
	__slots__ = ('field', 'zone', 'unit_field', 'range_field', 'leap_field', 'time_field')

	def __init__(self, field, zone, unit_field, range_field, leap_field):
		if not field.is_supported():
			raise errors.InvalidConfiguration("The field must be supported")
		super().__init__(field.type)
		self.field = field
		self.zone = zone
		self.unit_field = unit_field
		self.range_field = range_field
		self.leap_field = leap_field
		self.time_field = use_time_arithmetic(unit_field)

	def is_lenient(self):
		return self.field.is_lenient()

	def get(self, instant):
		return self.field.get(self.zone.utc_to_local(instant))

	def _shift(self, instant, operation, *args):
		# Apply &operation in local time and return to UTC.
		zone = self.zone
		if self.time_field:
			offset = offset_to_add(zone, instant)
			return operation(instant + offset, *args) - offset

		local = zone.utc_to_local(instant)
		local = operation(local, *args)
		return zone.local_to_utc(local, False, instant)

	def add(self, instant, amount):
		return self._shift(instant, self.field.add, amount)

	def add_wrap_field(self, instant, amount):
		return self._shift(instant, self.field.add_wrap_field, amount)

	def set(self, instant, value):
		zone = self.zone
		local = self.field.set(zone.utc_to_local(instant), value)
		result = zone.local_to_utc(local, False, instant)

		if self.get(result) != value:
			cause = errors.NonexistentLocalTime(local, zone.id)
			raise errors.IllegalFieldValue(self.type, value, explanation=cause.message) from cause
		return result

	def get_difference_long(self, minuend, subtrahend):
		zone = self.zone
		offset = offset_to_add(zone, subtrahend)
		if self.time_field:
			minuend_offset = offset
		else:
			minuend_offset = offset_to_add(zone, minuend)
		return self.field.get_difference_long(minuend + minuend_offset, subtrahend + offset)

	def get_difference(self, minuend, subtrahend):
		return arithmetic.to_int(self.get_difference_long(minuend, subtrahend))

	def duration_field(self):
		return self.unit_field

	def range_duration_field(self):
		return self.range_field

	def leap_duration_field(self):
		return self.leap_field

	def is_leap(self, instant):
		return self.field.is_leap(self.zone.utc_to_local(instant))

	def leap_amount(self, instant):
		return self.field.leap_amount(self.zone.utc_to_local(instant))

	def minimum(self, instant=None):
		if instant is None:
			return self.field.minimum()
		return self.field.minimum(self.zone.utc_to_local(instant))

	def maximum(self, instant=None):
		if instant is None:
			return self.field.maximum()
		return self.field.maximum(self.zone.utc_to_local(instant))

	def minimum_for(self, partial, values=None):
		return self.field.minimum_for(partial, values)

	def maximum_for(self, partial, values=None):
		return self.field.maximum_for(partial, values)

	def round_floor(self, instant):
		return self._shift(instant, self.field.round_floor)

	def round_ceiling(self, instant):
		return self._shift(instant, self.field.round_ceiling)

	def remainder(self, instant):
		return self.field.remainder(self.zone.utc_to_local(instant))

	# Partials have no zone.

	def set_partial(self, partial, index, values, value):
		return self.field.set_partial(partial, index, values, value)

	def add_partial(self, partial, index, values, amount):
		return self.field.add_partial(partial, index, values, amount)

	def add_wrap_partial(self, partial, index, values, amount):
		return self.field.add_wrap_partial(partial, index, values, amount)

	def add_wrap_field_partial(self, partial, index, values, amount):
		return self.field.add_wrap_field_partial(partial, index, values, amount)

	def __eq__(self, ob):
		return isinstance(ob, ZonedDateTimeField) and ob.field == self.field and ob.zone == self.zone

	def __hash__(self):
		return hash((self.field, self.zone))

class ZonedChronology(AssembledChronology):
	"""
	# A UTC chronology, &base, presented in &zone.

	# [ Properties ]
	# /base/
		# The UTC chronology.
	# /param/
		# The zone.
	"""
	__slots__ = ()

	def __init__(self, base, zone):
		if base is None:
			raise errors.InvalidConfiguration("Must supply a chronology")
		if zone is None:
			raise errors.InvalidConfiguration("DateTimeZone must not be null")
		if base.zone is not None and base.zone.id != 'UTC':
			raise errors.InvalidConfiguration("UTC chronology must have UTC zone")
		super().__init__(base.with_utc(), zone)

	def assemble(self, table):
		zone = self.param
		converted = {}

		def convert_duration(field):
			if field is None or not field.is_supported():
				return field
			key = id(field)
			if key not in converted:
				converted[key] = ZonedDurationField(field, zone)
			return converted[key]

		for name in duration_accessors:
			table[name] = convert_duration(table[name])

		for name in field_accessors:
			field = table[name]
			if field is None or not field.is_supported():
				continue
			table[name] = ZonedDateTimeField(
				field, zone,
				convert_duration(field.duration_field()),
				convert_duration(field.range_duration_field()),
				convert_duration(field.leap_duration_field()),
			)

	@property
	def zone(self):
		return self.param

	def with_utc(self):
		return self.base

	def with_zone(self, zone):
		if zone is None:
			from . import system
			zone = system.default_zone()
		if zone == self.param:
			return self
		if zone.id == 'UTC' and zone.is_fixed():
			return self.base
		return ZonedChronology(self.base, zone)

	def local_to_utc(self, local):
		"""
		# Convert the local instant strictly; gaps raise &errors.NonexistentLocalTime.
		"""
		return self.param.local_to_utc(local, True)

	def date_time_millis(self, year, month, day, millis_of_day):
		return self.local_to_utc(self.base.date_time_millis(year, month, day, millis_of_day))

	def datetime_millis(self, year, month, day, hour=0, minute=0, second=0, millis=0):
		return self.local_to_utc(self.base.datetime_millis(year, month, day, hour, minute, second, millis))

	def time_millis(self, instant, hour, minute, second, millis):
		zone = self.param
		local = self.base.time_millis(zone.utc_to_local(instant), hour, minute, second, millis)
		return self.local_to_utc(local)

	def __eq__(self, ob):
		return isinstance(ob, ZonedChronology) and ob.base == self.base and ob.param == self.param

	def __hash__(self):
		return hash((self.base, self.param)) ^ 326565

	def __repr__(self):
		return 'ZonedChronology[%r, %s]' % (self.base, self.param.id)
