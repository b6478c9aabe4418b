"""
# Time zones as functions from UTC instant to offset.

# A zone answers &DateTimeZone.offset for any instant and locates the instants at
# which the offset changes. Conversion from local time to UTC is derived from
# those two operations and resolves the local times that a transition skips,
# gaps, or repeats, overlaps.

# [ Local to UTC ]

# &DateTimeZone.local_to_utc collects the offsets that could apply to a local
# time and keeps those that are consistent, `offset(local - o) == o`:

# - One consistent offset; the conversion is unambiguous.
# - None; the local time is in a gap. Strict conversions raise
  &.errors.NonexistentLocalTime. Lenient conversions use the offset in effect
  before the gap so the instant lands after the transition.
# - Two; the local time is in an overlap. The offset of the `original` instant
  is used when it is one of them, otherwise the earlier instant is selected
  unless the later one was requested.

# [ Elements ]
# /UTC/
	# The UTC zone.
# /DateTimeZone/
	# Base class implementing the conversions.
# /FixedZone/
	# A constant offset.
# /TransitionZone/
	# A precalculated table of transitions with an optional rule zone after it.
# /CachedZone/
	# Memoizes the periods of another zone.
"""
import bisect
import functools
import re

from . import abstract
from . import arithmetic
from . import constants
from . import errors

class DateTimeZone(object):
	"""
	# A zone identified by &id.

	# Subclasses implement &offset, &standard_offset, &name_key, &is_fixed,
	# &next_transition, and &previous_transition.
	"""
	__slots__ = ('id',)

	def __init__(self, id):
		if id is None:
			raise errors.InvalidConfiguration("Id must not be null")
		self.id = id

	def offset(self, instant):
		raise NotImplementedError

	def standard_offset(self, instant):
		raise NotImplementedError

	def name_key(self, instant):
		raise NotImplementedError

	def is_fixed(self):
		raise NotImplementedError

	def next_transition(self, instant):
		raise NotImplementedError

	def previous_transition(self, instant):
		raise NotImplementedError

	def is_standard_offset(self, instant):
		return self.offset(instant) == self.standard_offset(instant)

	def short_name(self, instant, names=None):
		"""
		# The abbreviation of the zone at &instant, or the printed offset when
		# the name provider has none.
		"""
		if names is None:
			from . import system
			names = system.names()
		key = self.name_key(instant)
		if key is not None:
			name = names.short_name(self.id, key, self.is_standard_offset(instant))
			if name is not None:
				return name
		return print_offset(self.offset(instant))

	def name(self, instant, names=None):
		if names is None:
			from . import system
			names = system.names()
		key = self.name_key(instant)
		if key is not None:
			name = names.name(self.id, key, self.is_standard_offset(instant))
			if name is not None:
				return name
		return print_offset(self.offset(instant))

	# Conversions

	def utc_to_local(self, instant):
		"""
		# The local milliseconds of the UTC &instant.

		# Every instant has exactly one local representation; only overflow is reported.
		"""
		offset = self.offset(instant)
		return arithmetic.check_long(instant + offset,
			"Adding time zone offset caused overflow")

	def offsets_at_local(self, local):
		"""
		# The offsets consistent with &local; empty in a gap, two in an overlap.

		# Returns `(offsets, offset_local, offset_adjusted)` where &offsets is a
		# sorted tuple.
		"""
		offset_of = self.offset
		offset_local = offset_of(local)
		candidate = local - offset_local
		offset_adjusted = offset_of(candidate)

		options = {offset_local, offset_adjusted}

		# Offsets on either side of the nearest transitions.
		prior = self.previous_transition(candidate)
		if prior != candidate:
			options.add(offset_of(prior))
		following = self.next_transition(candidate)
		if following != candidate:
			options.add(offset_of(following))

		valid = tuple(sorted(o for o in options if offset_of(local - o) == o))
		return valid, offset_local, offset_adjusted

	def local_to_utc(self, local, strict=False, original=None, later=False):
		"""
		# Convert the local milliseconds, &local, to a UTC instant.

		# [ Parameters ]
		# /local/
			# Milliseconds of the wall clock reading as if it were UTC.
		# /strict/
			# Raise &errors.NonexistentLocalTime for local times in a gap rather than
			# moving them past the gap.
		# /original/
			# An instant whose offset is preferred in an overlap; used to keep
			# calculations on the same side of an overlap as their input.
		# /later/
			# Select the later of two instants in an overlap when &original does not decide.
		"""
		if original is not None:
			offset_original = self.offset(original)
			if self.offset(local - offset_original) == offset_original:
				return arithmetic.check_long(local - offset_original)

		valid, offset_local, offset_adjusted = self.offsets_at_local(local)

		if len(valid) == 1:
			offset = valid[0]
		elif not valid:
			if strict:
				raise errors.NonexistentLocalTime(local, self.id)
			# Offset in effect before the gap.
			offset = min(offset_local, offset_adjusted)
		else:
			offset = valid[0] if later else valid[-1]

		return arithmetic.check_long(local - offset,
			"Subtracting time zone offset caused overflow")

	def offset_from_local(self, local):
		"""
		# The offset that lenient &local_to_utc applies to &local.
		"""
		return local - self.local_to_utc(local)

	def is_local_gap(self, local):
		"""
		# Whether &local does not occur in this zone.
		"""
		if self.is_fixed():
			return False
		return not self.offsets_at_local(local)[0]

	def adjust_offset(self, instant, later):
		"""
		# Select the earlier or later of the instants sharing the local time of &instant.

		# Instants outside of an overlap are returned unchanged.
		"""
		local = self.utc_to_local(instant)
		valid = self.offsets_at_local(local)[0]
		if len(valid) < 2:
			return instant
		return local - (valid[0] if later else valid[-1])

	def millis_keep_local(self, zone, instant):
		"""
		# The instant in &zone that has the same local time as &instant has in this zone.
		"""
		if zone is None:
			from . import system
			zone = system.default_zone()
		if zone == self:
			return instant
		local = self.utc_to_local(instant)
		return zone.local_to_utc(local, False, instant)

	def __str__(self):
		return self.id

	def __repr__(self):
		return '<%s: %s>' % (self.__class__.__name__, self.id)

class FixedZone(DateTimeZone):
	"""
	# A zone with a constant offset.
	"""
	__slots__ = ('key', 'wall', 'standard')

	def __init__(self, id, key, wall, standard=None):
		super().__init__(id)
		self.key = key
		self.wall = wall
		self.standard = wall if standard is None else standard

	def offset(self, instant):
		return self.wall

	def standard_offset(self, instant):
		return self.standard

	def name_key(self, instant):
		return self.key

	def is_fixed(self):
		return True

	def next_transition(self, instant):
		return instant

	def previous_transition(self, instant):
		return instant

	def local_to_utc(self, local, strict=False, original=None, later=False):
		return arithmetic.check_long(local - self.wall,
			"Subtracting time zone offset caused overflow")

	def __eq__(self, ob):
		return isinstance(ob, FixedZone) and (
			ob.id == self.id and ob.wall == self.wall and ob.standard == self.standard
		)

	def __hash__(self):
		return hash((self.id, self.wall, self.standard))

class UTCZone(FixedZone):
	__slots__ = ()

	def __init__(self):
		super().__init__('UTC', 'UTC', 0, 0)

	def __reduce__(self):
		return (for_id, ('UTC',))

UTC = UTCZone()

class TransitionZone(DateTimeZone):
	"""
	# A zone defined by a table of periods.

	# Entry `i` applies from `transitions[i]` up to `transitions[i+1]`. The first entry
	# also applies to every instant before it and is not itself a transition. After the
	# last entry, &tail, when present, decides.

	# [ Properties ]
	# /transitions/
		# Sorted UTC instants at which each period begins.
	# /wall_offsets/
		# The offset of each period.
	# /standard_offsets/
		# The standard offset of each period.
	# /name_keys/
		# The abbreviation of each period.
	# /tail/
		# A zone, usually a &.posix.RuleZone, describing the recurring transitions
		# after the table.
	"""
	__slots__ = ('transitions', 'wall_offsets', 'standard_offsets', 'name_keys', 'tail')

	def __init__(self, id, transitions, wall_offsets, standard_offsets, name_keys, tail=None):
		super().__init__(id)
		n = len(transitions)
		if not n or n != len(wall_offsets) or n != len(standard_offsets) or n != len(name_keys):
			raise errors.InvalidConfiguration("transition table columns must be non-empty and of equal length")
		if any(transitions[i] >= transitions[i+1] for i in range(n - 1)):
			raise errors.InvalidConfiguration("transitions must be strictly increasing")

		self.transitions = tuple(transitions)
		self.wall_offsets = tuple(wall_offsets)
		self.standard_offsets = tuple(standard_offsets)
		self.name_keys = tuple(name_keys)
		self.tail = tail

	def _index(self, instant, search=bisect.bisect_right):
		i = search(self.transitions, instant) - 1
		return i if i > 0 else 0

	def _in_tail(self, instant):
		return self.tail is not None and instant >= self.transitions[-1]

	def offset(self, instant):
		if self._in_tail(instant):
			return self.tail.offset(instant)
		return self.wall_offsets[self._index(instant)]

	def standard_offset(self, instant):
		if self._in_tail(instant):
			return self.tail.standard_offset(instant)
		return self.standard_offsets[self._index(instant)]

	def name_key(self, instant):
		if self._in_tail(instant):
			return self.tail.name_key(instant)
		return self.name_keys[self._index(instant)]

	def is_fixed(self):
		return False

	def next_transition(self, instant, search=bisect.bisect_right):
		transitions = self.transitions
		i = search(transitions, instant)
		if i < 1:
			i = 1
		if i < len(transitions):
			return transitions[i]

		if self.tail is None:
			return instant
		start = max(instant, transitions[-1])
		following = self.tail.next_transition(start)
		if following == start:
			return instant
		return following

	def previous_transition(self, instant, search=bisect.bisect_right):
		transitions = self.transitions
		i = search(transitions, instant) - 1

		if self.tail is not None and i == len(transitions) - 1:
			prior = self.tail.previous_transition(instant)
			if prior < instant and prior >= transitions[-1]:
				return prior

		if i >= 1:
			return transitions[i] - 1
		return instant

	def __eq__(self, ob):
		return isinstance(ob, TransitionZone) and (
			ob.id == self.id and
			ob.transitions == self.transitions and
			ob.wall_offsets == self.wall_offsets and
			ob.standard_offsets == self.standard_offsets and
			ob.name_keys == self.name_keys and
			ob.tail == self.tail
		)

	def __hash__(self):
		return hash((self.id, self.transitions[-1:], self.wall_offsets[-1:]))

	def __repr__(self):
		return '<%s: %s[%d]>' % (self.__class__.__name__, self.id, len(self.transitions))

class CachedZone(DateTimeZone):
	"""
	# Memoize the periods of &zone in blocks of 2**32 milliseconds.
	"""
	__slots__ = ('zone', 'cache', 'limit')

	shift = 32

	def __init__(self, zone, limit=512):
		super().__init__(zone.id)
		self.zone = zone
		self.cache = {}
		self.limit = limit

	def _periods(self, instant):
		key = instant >> self.shift
		try:
			return self.cache[key]
		except KeyError:
			pass

		zone = self.zone
		start = key << self.shift
		end = start + (1 << self.shift) - 1

		periods = []
		t = start
		while True:
			periods.append((t, zone.offset(t), zone.standard_offset(t), zone.name_key(t)))
			n = zone.next_transition(t)
			if n <= t or n > end:
				break
			t = n

		if len(self.cache) >= self.limit:
			self.cache.clear()
		return self.cache.setdefault(key, tuple(periods))

	def _period(self, instant):
		periods = self._periods(instant)
		selected = periods[0]
		for p in periods[1:]:
			if p[0] > instant:
				break
			selected = p
		return selected

	def offset(self, instant):
		return self._period(instant)[1]

	def standard_offset(self, instant):
		return self._period(instant)[2]

	def name_key(self, instant):
		return self._period(instant)[3]

	def is_fixed(self):
		return self.zone.is_fixed()

	def next_transition(self, instant):
		return self.zone.next_transition(instant)

	def previous_transition(self, instant):
		return self.zone.previous_transition(instant)

	def __eq__(self, ob):
		if isinstance(ob, CachedZone):
			return ob.zone == self.zone
		return self.zone == ob

	def __hash__(self):
		return hash(self.zone)

# Offset identifiers

offset_pattern = re.compile(r'^([+-])(\d{2})(?::?(\d{2})(?::?(\d{2})(?:\.(\d{3}))?)?)?$')

def parse_offset(text):
	"""
	# Parse an offset identifier of the form `[+-]hh[:mm[:ss[.SSS]]]` into milliseconds.

	# [ Exceptions ]
	# /errors.InvalidConfiguration/
		# The text is not an offset.
	"""
	m = offset_pattern.match(text)
	if m is None:
		raise errors.InvalidConfiguration("invalid offset: " + repr(text))

	sign, hours, minutes, seconds, millis = m.groups()
	hours = int(hours)
	minutes = int(minutes or 0)
	seconds = int(seconds or 0)
	millis = int(millis or 0)

	arithmetic.verify_bounds('hoursOffset', hours, 0, 23)
	arithmetic.verify_bounds('minutesOffset', minutes, 0, 59)
	arithmetic.verify_bounds('secondsOffset', seconds, 0, 59)

	offset = ((hours * 60 + minutes) * 60 + seconds) * 1000 + millis
	return -offset if sign == '-' else offset

def print_offset(offset):
	"""
	# Format the offset in milliseconds as `[+-]hh:mm`, adding seconds and milliseconds
	# only when present.
	"""
	sign = '+' if offset >= 0 else '-'
	offset = abs(offset)

	hours, offset = divmod(offset, constants.millis_per_hour)
	minutes, offset = divmod(offset, constants.millis_per_minute)
	text = '%s%02d:%02d' % (sign, hours, minutes)
	if offset == 0:
		return text

	seconds, millis = divmod(offset, constants.millis_per_second)
	text += ':%02d' % (seconds,)
	if millis == 0:
		return text
	return text + '.%03d' % (millis,)

@functools.lru_cache(maxsize=64)
def _fixed(offset):
	id = print_offset(offset)
	return FixedZone(id, None, offset, offset)

def for_offset_millis(offset):
	"""
	# The fixed zone with the given offset; UTC for zero.
	"""
	arithmetic.verify_bounds('millisOffset', offset, -constants.offset_max, constants.offset_max)
	if offset == 0:
		return UTC
	return _fixed(offset)

def for_offset_hours_minutes(hours, minutes=0):
	"""
	# The fixed zone offset by &hours and &minutes.

	# Negative zones may express the minutes with either sign: `(-2, 15)` and
	# `(-2, -15)` are both `-02:15`. Positive hours with negative minutes are rejected.
	"""
	if hours == 0 and minutes == 0:
		return UTC

	arithmetic.verify_bounds('hours', hours, -23, 23)
	arithmetic.verify_bounds('minutes', minutes, -59, 59)
	if hours > 0 and minutes < 0:
		raise errors.IllegalFieldValue('minutes', minutes, 0, 59,
			"Positive hours must not have negative minutes")

	total = hours * 60
	if total < 0:
		total -= abs(minutes)
	else:
		total += minutes

	return for_offset_millis(total * constants.millis_per_minute)

def for_offset_hours(hours):
	return for_offset_hours_minutes(hours, 0)

def for_id(id):
	"""
	# Resolve &id to a zone.

	# &None selects the default zone. `'UTC'` is always available; other identifiers
	# are looked up in the active provider and, failing that, parsed as offsets.
	"""
	from . import system
	return system.environment.zone(id)

abstract.Zone.register(DateTimeZone)
