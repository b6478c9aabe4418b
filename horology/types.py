"""
# Instants, durations, date-times, and intervals.

# All of the types hold millisecond instants or spans and delegate field access and
# arithmetic to their chronology. Only &MutableDateTime may change after construction.

# [ Elements ]
# /Instant/
	# A point on the UTC time-line.
# /Duration/
	# An exact number of milliseconds.
# /DateTime/
	# An instant with a chronology and zone.
# /MutableDateTime/
	# A date-time whose instant is rewritten by each setter and optionally rounded.
# /Interval/
	# The half-open span between two instants.
# /MutableInterval/
	# An interval whose end points are replaced by its setters.
# /DateTimeComparator/
	# Comparison of instants limited to a range of fields.
"""
import operator

from . import arithmetic
from . import constants
from . import errors
from .fieldtypes import DurationFieldType, DateTimeFieldType

def _now():
	from . import system
	return system.current_millis()

def _millis(ob):
	# Milliseconds of an instant-like object.
	if isinstance(ob, int):
		return ob
	if ob is None:
		return _now()
	return ob.millis

def _chronology(chronology=None, zone=None):
	from . import iso
	if chronology is None:
		return iso.ISOChronology.instance(zone)
	if zone is not None:
		return chronology.with_zone(zone)
	return chronology

class AbstractInstant(object):
	"""
	# Comparison and conversion of objects with a &millis property.
	"""
	__slots__ = ()

	def to_instant(self):
		return Instant(self.millis)

	def is_before(self, ob=None):
		return self.millis < _millis(ob)

	def is_after(self, ob=None):
		return self.millis > _millis(ob)

	def is_equal(self, ob=None):
		return self.millis == _millis(ob)

	def is_before_now(self):
		return self.is_before(None)

	def is_after_now(self):
		return self.is_after(None)

	def __lt__(self, ob):
		return self.millis < _millis(ob)

	def __le__(self, ob):
		return self.millis <= _millis(ob)

	def __gt__(self, ob):
		return self.millis > _millis(ob)

	def __ge__(self, ob):
		return self.millis >= _millis(ob)

	def __int__(self):
		return self.millis

class Instant(AbstractInstant):
	"""
	# A point on the UTC time-line in milliseconds from 1970-01-01T00:00:00Z.
	"""
	__slots__ = ('millis',)

	def __init__(self, millis=None):
		self.millis = _now() if millis is None else arithmetic.check_long(millis)

	@property
	def chronology(self):
		from . import iso
		return iso.ISOChronology.utc()

	@classmethod
	def now(Class):
		return Class()

	def with_millis(self, millis):
		if millis == self.millis:
			return self
		return Instant(millis)

	def with_duration_added(self, duration, scalar=1):
		if scalar == 0:
			return self
		return self.with_millis(self.chronology.add_duration(self.millis, _millis(duration), scalar))

	def plus(self, duration):
		return self.with_duration_added(duration, 1)

	def minus(self, duration):
		return self.with_duration_added(duration, -1)

	def to_datetime(self, zone=None):
		return DateTime(self.millis, zone=zone)

	def __eq__(self, ob):
		return isinstance(ob, Instant) and ob.millis == self.millis

	def __hash__(self):
		return hash(self.millis)

	def __repr__(self):
		return 'Instant(%d)' % (self.millis,)

class Duration(object):
	"""
	# An exact span of milliseconds.
	"""
	__slots__ = ('millis',)

	def __init__(self, millis=0):
		self.millis = arithmetic.check_long(millis)

	@classmethod
	def between(Class, start, end):
		return Class(arithmetic.subtract(_millis(end), _millis(start)))

	@classmethod
	def of_days(Class, days):
		return Class(arithmetic.multiply(days, constants.millis_per_day))

	@classmethod
	def of_hours(Class, hours):
		return Class(arithmetic.multiply(hours, constants.millis_per_hour))

	@classmethod
	def of_minutes(Class, minutes):
		return Class(arithmetic.multiply(minutes, constants.millis_per_minute))

	@classmethod
	def of_seconds(Class, seconds):
		return Class(arithmetic.multiply(seconds, constants.millis_per_second))

	@classmethod
	def of_millis(Class, millis):
		return Class(millis)

	@property
	def standard_days(self):
		return arithmetic.quotient(self.millis, constants.millis_per_day)

	@property
	def standard_hours(self):
		return arithmetic.quotient(self.millis, constants.millis_per_hour)

	@property
	def standard_minutes(self):
		return arithmetic.quotient(self.millis, constants.millis_per_minute)

	@property
	def standard_seconds(self):
		return arithmetic.quotient(self.millis, constants.millis_per_second)

	def to_period(self, period_type=None, chronology=None):
		"""
		# The period of the precise units of &period_type equal to this duration.
		"""
		from .period import Period
		return Period.from_duration(self.millis, period_type, chronology)

	def to_standard_days(self):
		from .period import Days
		return Days(arithmetic.to_int(self.standard_days))

	def to_standard_hours(self):
		from .period import Hours
		return Hours(arithmetic.to_int(self.standard_hours))

	def to_standard_minutes(self):
		from .period import Minutes
		return Minutes(arithmetic.to_int(self.standard_minutes))

	def to_standard_seconds(self):
		from .period import Seconds
		return Seconds(arithmetic.to_int(self.standard_seconds))

	def with_duration_added(self, duration, scalar=1):
		amount = _millis(duration)
		if amount == 0 or scalar == 0:
			return self
		return Duration(arithmetic.add(self.millis, arithmetic.multiply(amount, scalar)))

	def plus(self, duration):
		return self.with_duration_added(duration, 1)

	def minus(self, duration):
		return self.with_duration_added(duration, -1)

	def multiplied_by(self, scalar):
		if scalar == 1:
			return self
		return Duration(arithmetic.multiply(self.millis, scalar))

	def divided_by(self, divisor):
		if divisor == 1:
			return self
		return Duration(arithmetic.quotient(self.millis, divisor))

	def negated(self):
		return Duration(arithmetic.negate(self.millis))

	def __abs__(self):
		return self if self.millis >= 0 else self.negated()

	def __neg__(self):
		return self.negated()

	def __add__(self, ob):
		return self.plus(ob)

	def __sub__(self, ob):
		return self.minus(ob)

	def is_longer_than(self, ob):
		return self.millis > _millis(ob or 0)

	def is_shorter_than(self, ob):
		return self.millis < _millis(ob or 0)

	def __eq__(self, ob):
		return isinstance(ob, Duration) and ob.millis == self.millis

	def __hash__(self):
		return hash(('duration', self.millis))

	def __lt__(self, ob):
		return self.millis < ob.millis

	def __le__(self, ob):
		return self.millis <= ob.millis

	def __gt__(self, ob):
		return self.millis > ob.millis

	def __ge__(self, ob):
		return self.millis >= ob.millis

	def __int__(self):
		return self.millis

	def __repr__(self):
		return 'Duration(%d)' % (self.millis,)

# Field accessors shared by the date-time classes; `dt.year`, `dt.hour_of_day`.
def _field_properties(Class):
	for t in DateTimeFieldType.types():
		def get(self, _accessor=operator.methodcaller(t.identifier)):
			return _accessor(self.chronology).get(self.millis)
		setattr(Class, t.identifier, property(get))
	return Class

class BaseDateTime(AbstractInstant):
	"""
	# An instant interpreted by a chronology.

	# [ Properties ]
	# /millis/
		# The UTC instant.
	# /chronology/
		# The chronology, and zone, interpreting the instant.
	"""
	__slots__ = ('millis', 'chronology')

	def __init__(self, millis=None, chronology=None, zone=None):
		self.chronology = _chronology(chronology, zone)
		self.millis = _now() if millis is None else arithmetic.check_long(millis)

	@classmethod
	def of(Class, year, month=1, day=1, hour=0, minute=0, second=0, millis=0, zone=None, chronology=None):
		"""
		# Construct from the local fields in &zone.

		# [ Exceptions ]
		# /errors.IllegalFieldValue/
			# A field was out of range.
		# /errors.NonexistentLocalTime/
			# The local time is in a gap of &zone.
		"""
		c = _chronology(chronology, zone)
		return Class(c.datetime_millis(year, month, day, hour, minute, second, millis), c)

	@classmethod
	def now(Class, zone=None):
		return Class(None, None, zone)

	@property
	def zone(self):
		return self.chronology.zone

	def get(self, type):
		"""
		# The value of the calendar field &type.

		# [ Exceptions ]
		# /errors.UnsupportedField/
			# The chronology lacks &type.
		"""
		if type is None:
			raise errors.InvalidConfiguration("The DateTimeFieldType must not be null")
		field = type.get_field(self.chronology)
		if not field.is_supported():
			raise errors.UnsupportedField(type.name, "Field is not supported")
		return field.get(self.millis)

	def is_supported(self, type):
		return type is not None and type.is_supported(self.chronology)

	def to_local_date(self):
		from .local import LocalDate
		return LocalDate.from_instant(self.millis, self.zone, self.chronology)

	def to_local_time(self):
		from .local import LocalTime
		return LocalTime.from_instant(self.millis, self.zone, self.chronology)

	def to_datetime(self, zone=None):
		if zone is None:
			return DateTime(self.millis, self.chronology)
		return DateTime(self.millis, self.chronology.with_zone(zone))

	def to_mutable_datetime(self):
		return MutableDateTime(self.millis, self.chronology)

	def __eq__(self, ob):
		return isinstance(ob, BaseDateTime) and (
			ob.millis == self.millis and ob.chronology == self.chronology
		)

	def __repr__(self):
		local = self.zone.utc_to_local(self.millis)
		return "%s(%s %s)" % (self.__class__.__name__, errors.format_local(local), self.zone.id)

class DateTime(BaseDateTime):
	"""
	# An immutable instant with a chronology.

	#!python
		from horology import zones
		from horology.types import DateTime
		dt = DateTime.of(2020, 11, 30, zone=zones.for_offset_hours(2))
		dt.with_field_added(DurationFieldType.months, 3).month_of_year == 2
	"""
	__slots__ = ()

	def __hash__(self):
		return hash((self.millis, self.chronology))

	def with_millis(self, millis):
		if millis == self.millis:
			return self
		return DateTime(millis, self.chronology)

	def with_chronology(self, chronology):
		chronology = _chronology(chronology)
		if chronology == self.chronology:
			return self
		return DateTime(self.millis, chronology)

	def with_zone(self, zone):
		"""
		# The same instant in &zone.
		"""
		return self.with_chronology(self.chronology.with_zone(zone))

	def with_zone_retain_fields(self, zone):
		"""
		# The instant in &zone having the same local fields; adjusted past gaps.
		"""
		from . import system
		if zone is None:
			zone = system.default_zone()
		if zone == self.zone:
			return self
		millis = self.zone.millis_keep_local(zone, self.millis)
		return DateTime(millis, self.chronology.with_zone(zone))

	def with_field(self, type, value):
		"""
		# Set the calendar field &type.
		"""
		if type is None:
			raise errors.InvalidConfiguration("Field must not be null")
		return self.with_millis(type.get_field(self.chronology).set(self.millis, value))

	def with_field_added(self, type, amount):
		"""
		# Add &amount of the unit &type.
		"""
		if type is None:
			raise errors.InvalidConfiguration("Field must not be null")
		if amount == 0:
			return self
		return self.with_millis(type.get_field(self.chronology).add(self.millis, amount))

	def with_date(self, year, month, day):
		c = self.chronology
		millis = c.year().set(self.millis, year)
		millis = c.month_of_year().set(millis, month)
		millis = c.day_of_month().set(millis, day)
		return self.with_millis(millis)

	def with_time(self, hour, minute, second, millis):
		return self.with_millis(self.chronology.time_millis(self.millis, hour, minute, second, millis))

	def with_period_added(self, period, scalar=1):
		if period is None or scalar == 0:
			return self
		return self.with_millis(self.chronology.add_period(period, self.millis, scalar))

	def with_duration_added(self, duration, scalar=1):
		amount = _millis(duration)
		if amount == 0 or scalar == 0:
			return self
		return self.with_millis(self.chronology.add_duration(self.millis, amount, scalar))

	def plus(self, amount):
		"""
		# Add a period, a duration, or a number of milliseconds.
		"""
		if hasattr(amount, 'field_type'):
			return self.with_period_added(amount, 1)
		return self.with_duration_added(amount, 1)

	def minus(self, amount):
		if hasattr(amount, 'field_type'):
			return self.with_period_added(amount, -1)
		return self.with_duration_added(amount, -1)

	def with_earlier_offset_at_overlap(self):
		"""
		# The earlier of the instants sharing this local time; unchanged outside of overlaps.
		"""
		return self.with_millis(self.zone.adjust_offset(self.millis, False))

	def with_later_offset_at_overlap(self):
		return self.with_millis(self.zone.adjust_offset(self.millis, True))

	for _t in DurationFieldType.types():
		def _plus(self, amount, _t=_t):
			return self.with_field_added(_t, amount)
		def _minus(self, amount, _t=_t):
			return self.with_field_added(_t, arithmetic.negate(amount))
		_plus.__name__ = 'plus_' + _t.name
		_minus.__name__ = 'minus_' + _t.name
		locals()[_plus.__name__] = _plus
		locals()[_minus.__name__] = _minus
	del _t, _plus, _minus

	def __reduce__(self):
		return (DateTime, (self.millis, self.chronology))

_field_properties(DateTime)

#: Rounding operations of &MutableDateTime.set_rounding.
rounding_modes = {
	'floor': 'round_floor',
	'ceiling': 'round_ceiling',
	'half_floor': 'round_half_floor',
	'half_ceiling': 'round_half_ceiling',
	'half_even': 'round_half_even',
}

class MutableDateTime(BaseDateTime):
	"""
	# A date-time whose instant is rewritten by each setter.

	# When a rounding field is configured every new instant is rounded by it.
	# Instances are not safe for concurrent mutation.

	# [ Properties ]
	# /rounding_field/
		# The field rounding new instants or &None.
	# /rounding_mode/
		# One of the keys of &rounding_modes or &None.
	"""
	__slots__ = ('rounding_field', 'rounding_mode')

	__hash__ = None

	def __init__(self, millis=None, chronology=None, zone=None):
		self.rounding_field = None
		self.rounding_mode = None
		super().__init__(millis, chronology, zone)

	def set_rounding(self, field, mode='floor'):
		"""
		# Round every subsequent instant with &field using &mode.

		# &field may be a &DateTimeFieldType or a field; &None, or a &mode of `'none'`,
		# disables rounding. The current instant is rounded immediately.
		"""
		if field is not None and mode not in rounding_modes and mode != 'none':
			raise errors.InvalidConfiguration("Illegal rounding mode: " + repr(mode))
		if field is None or mode == 'none':
			self.rounding_field = None
			self.rounding_mode = None
			return

		if isinstance(field, DateTimeFieldType):
			field = field.get_field(self.chronology)
		self.rounding_field = field
		self.rounding_mode = mode
		self.set_millis(self.millis)

	def set_millis(self, millis):
		"""
		# Replace the instant applying the rounding mode.
		"""
		field = self.rounding_field
		if field is not None:
			millis = getattr(field, rounding_modes[self.rounding_mode])(millis)
		self.millis = arithmetic.check_long(millis)

	def set_chronology(self, chronology):
		self.chronology = _chronology(chronology)

	def set_zone(self, zone):
		"""
		# Keep the instant and present it in &zone.
		"""
		self.chronology = self.chronology.with_zone(zone)

	def set_zone_retain_fields(self, zone):
		"""
		# Keep the local fields and move the instant to &zone.
		"""
		from . import system
		if zone is None:
			zone = system.default_zone()
		current = self.zone
		if zone == current:
			return
		millis = current.millis_keep_local(zone, self.millis)
		self.chronology = self.chronology.with_zone(zone)
		self.set_millis(millis)

	def set(self, type, value):
		if type is None:
			raise errors.InvalidConfiguration("Field must not be null")
		self.set_millis(type.get_field(self.chronology).set(self.millis, value))

	def add(self, amount, count=None):
		"""
		# Add &count of the unit &amount, or add &amount when it is a period,
		# duration, or number of milliseconds.
		"""
		if isinstance(amount, DurationFieldType):
			if count:
				self.set_millis(amount.get_field(self.chronology).add(self.millis, count))
		elif hasattr(amount, 'field_type'):
			self.set_millis(self.chronology.add_period(amount, self.millis, 1 if count is None else count))
		else:
			scalar = 1 if count is None else count
			self.set_millis(self.chronology.add_duration(self.millis, _millis(amount), scalar))

	def set_date(self, year, month, day):
		c = self.chronology
		millis = c.year().set(self.millis, year)
		millis = c.month_of_year().set(millis, month)
		self.set_millis(c.day_of_month().set(millis, day))

	def set_time(self, hour, minute, second, millis):
		self.set_millis(self.chronology.time_millis(self.millis, hour, minute, second, millis))

	for _t in DateTimeFieldType.types():
		def _set(self, value, _t=_t):
			self.set(_t, value)
		_set.__name__ = 'set_' + _t.identifier
		locals()[_set.__name__] = _set
	for _t in DurationFieldType.types():
		def _add(self, amount, _t=_t):
			self.add(_t, amount)
		_add.__name__ = 'add_' + _t.name
		locals()[_add.__name__] = _add
	del _t, _set, _add

	def copy(self):
		c = MutableDateTime(self.millis, self.chronology)
		c.rounding_field = self.rounding_field
		c.rounding_mode = self.rounding_mode
		return c

_field_properties(MutableDateTime)

def _check_interval(start, end):
	if end < start:
		raise errors.InvalidConfiguration("The end instant must be greater than the start instant")
	return start, end

class Interval(object):
	"""
	# The half-open interval `[start, end)` of two instants.

	# [ Properties ]
	# /start_millis/
		# The inclusive start.
	# /end_millis/
		# The exclusive end.
	# /chronology/
		# The chronology of the end points.
	"""
	__slots__ = ('start_millis', 'end_millis', 'chronology')

	def __init__(self, start, end, chronology=None):
		if chronology is None:
			chronology = getattr(start, 'chronology', None)
		self.chronology = _chronology(chronology)
		self.start_millis, self.end_millis = _check_interval(_millis(start), _millis(end))

	@property
	def start(self):
		return DateTime(self.start_millis, self.chronology)

	@property
	def end(self):
		return DateTime(self.end_millis, self.chronology)

	def duration_millis(self):
		return arithmetic.subtract(self.end_millis, self.start_millis)

	def duration(self):
		return Duration(self.duration_millis())

	def to_period(self, period_type=None):
		"""
		# The period of the interval in the units of &period_type.
		"""
		from .period import Period
		return Period.between(self.start_millis, self.end_millis, period_type, self.chronology)

	def contains(self, ob=None):
		"""
		# Whether the instant, or interval, &ob is within this interval.
		"""
		if isinstance(ob, Interval):
			s, e = ob.start_millis, ob.end_millis
			return self.start_millis <= s and s < self.end_millis and e <= self.end_millis
		m = _millis(ob)
		return self.start_millis <= m < self.end_millis

	def contains_now(self):
		return self.contains(None)

	def _other(self, ob):
		if ob is None:
			now = _now()
			return now, now
		return ob.start_millis, ob.end_millis

	def overlaps(self, ob=None):
		"""
		# Whether the intervals share any instant.
		"""
		s, e = self._other(ob)
		if ob is None:
			return self.start_millis < s < self.end_millis
		return self.start_millis < e and s < self.end_millis

	def abuts(self, ob=None):
		"""
		# Whether the intervals meet without overlapping.
		"""
		s, e = self._other(ob)
		return e == self.start_millis or self.end_millis == s

	def overlap(self, ob=None):
		"""
		# The interval shared by both intervals or &None.
		"""
		if not self.overlaps(ob):
			return None
		s, e = self._other(ob)
		return Interval(max(self.start_millis, s), min(self.end_millis, e), self.chronology)

	def gap(self, ob=None):
		"""
		# The interval between the two intervals or &None when they overlap or abut.
		"""
		s, e = self._other(ob)
		if s > self.end_millis:
			return Interval(self.end_millis, s, self.chronology)
		elif e < self.start_millis:
			return Interval(e, self.start_millis, self.chronology)
		return None

	def is_before(self, ob=None):
		if isinstance(ob, Interval):
			return self.end_millis <= ob.start_millis
		return self.end_millis <= _millis(ob)

	def is_after(self, ob=None):
		if isinstance(ob, Interval):
			return self.start_millis >= ob.end_millis
		return self.start_millis > _millis(ob)

	def with_start(self, start):
		return Interval(start, self.end_millis, self.chronology)

	def with_end(self, end):
		return Interval(self.start_millis, end, self.chronology)

	def with_chronology(self, chronology):
		return Interval(self.start_millis, self.end_millis, chronology)

	def __eq__(self, ob):
		return isinstance(ob, Interval) and (
			ob.start_millis == self.start_millis and
			ob.end_millis == self.end_millis and
			ob.chronology == self.chronology
		)

	def __hash__(self):
		return hash((self.start_millis, self.end_millis, self.chronology))

	def __repr__(self):
		return 'Interval(%r, %r)' % (self.start, self.end)

class MutableInterval(Interval):
	"""
	# An interval whose end points and chronology are replaced by its setters.

	# Every setter validates the new end points before changing the interval.
	# Instances are not safe for concurrent mutation.
	"""
	__slots__ = ()

	__hash__ = None

	def set_interval(self, start, end=None):
		"""
		# Replace both end points; &start may be an interval when &end is &None.
		"""
		if end is None and isinstance(start, Interval):
			start, end = start.start_millis, start.end_millis
		self.start_millis, self.end_millis = _check_interval(_millis(start), _millis(end))

	def set_start(self, start):
		self.start_millis, self.end_millis = _check_interval(_millis(start), self.end_millis)

	def set_end(self, end):
		self.start_millis, self.end_millis = _check_interval(self.start_millis, _millis(end))

	def set_chronology(self, chronology):
		self.chronology = _chronology(chronology)

	def set_duration_after_start(self, duration):
		"""
		# Move the end to &duration after the start.
		"""
		amount = 0 if duration is None else _millis(duration)
		self.set_end(self.chronology.add_duration(self.start_millis, amount))

	def set_duration_before_end(self, duration):
		"""
		# Move the start to &duration before the end.
		"""
		amount = 0 if duration is None else _millis(duration)
		self.set_start(self.chronology.add_duration(self.end_millis, amount, -1))

	def set_period_after_start(self, period):
		"""
		# Move the end to &period after the start using the interval's chronology.
		"""
		if period is None:
			self.set_end(self.start_millis)
		else:
			self.set_end(self.chronology.add_period(period, self.start_millis, 1))

	def set_period_before_end(self, period):
		if period is None:
			self.set_start(self.end_millis)
		else:
			self.set_start(self.chronology.add_period(period, self.end_millis, -1))

	def to_interval(self):
		return Interval(self.start_millis, self.end_millis, self.chronology)

	def copy(self):
		return MutableInterval(self.start_millis, self.end_millis, self.chronology)

	def __reduce__(self):
		return (MutableInterval, (self.start_millis, self.end_millis, self.chronology))

	def __repr__(self):
		return 'MutableInterval(%r, %r)' % (self.start, self.end)

class DateTimeComparator(object):
	"""
	# Comparison of instants considering only the fields between two limits.

	# Instants are floored by &lower_limit and reduced to the remainder of
	# &upper_limit in their own chronology before they are compared. Plain
	# millisecond integers are read in the ISO chronology of the default zone.

	#!python
		from horology.types import DateTimeComparator
		dates = sorted(datetimes, key=DateTimeComparator.date_only().key)

	# [ Properties ]
	# /lower_limit/
		# The smallest field compared or &None for all fields.
	# /upper_limit/
		# The field above the largest field compared or &None for all fields.
	"""
	__slots__ = ('lower_limit', 'upper_limit')

	def __init__(self, lower_limit=None, upper_limit=None):
		self.lower_limit = lower_limit
		self.upper_limit = upper_limit

	@classmethod
	def date_only(Class):
		return Class(DateTimeFieldType.day_of_year, None)

	@classmethod
	def time_only(Class):
		return Class(None, DateTimeFieldType.day_of_year)

	def key(self, ob):
		"""
		# The millisecond value of &ob compared by this comparator.
		"""
		millis = _millis(ob)
		chronology = getattr(ob, 'chronology', None) or _chronology()
		if self.lower_limit is not None:
			millis = self.lower_limit.get_field(chronology).round_floor(millis)
		if self.upper_limit is not None:
			millis = self.upper_limit.get_field(chronology).remainder(millis)
		return millis

	def compare(self, lhs, rhs):
		"""
		# Negative, zero, or positive as &lhs is before, equal to, or after &rhs.
		"""
		l = self.key(lhs)
		r = self.key(rhs)
		return (l > r) - (l < r)

	__call__ = compare

	def __eq__(self, ob):
		return isinstance(ob, DateTimeComparator) and (
			ob.lower_limit == self.lower_limit and ob.upper_limit == self.upper_limit
		)

	def __hash__(self):
		return hash((self.lower_limit, self.upper_limit))

	def __repr__(self):
		lower = '' if self.lower_limit is None else self.lower_limit.name
		upper = '' if self.upper_limit is None else self.upper_limit.name
		if self.lower_limit == self.upper_limit:
			return 'DateTimeComparator[%s]' % (lower,)
		return 'DateTimeComparator[%s-%s]' % (lower, upper)
