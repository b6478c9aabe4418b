"""
# Zones described by POSIX TZ strings.

# A TZ string names a standard time, its offset, and optionally a daylight saving
# time with the rules selecting the day and local time at which each begins:

#!text
	EST5EDT,M3.2.0,M11.1.0
	<+0330>-3:30
	AEST-10AEDT,M10.1.0,M4.1.0/3

# Offsets in TZ strings are west of Greenwich; `EST5` is five hours *behind* UTC.
# TZif files close with such a string to describe the transitions after their table.

# [ Elements ]
# /Rule/
	# The day and local time of a recurring transition.
# /RuleZone/
	# A zone alternating between a standard and a daylight saving offset every year.
# /parse/
	# Construct a &.zones.FixedZone or &RuleZone from a TZ string.
"""
import re
import functools

from . import constants
from . import errors
from . import gregorian
from . import week
from . import zones

hour = constants.millis_per_hour
day = constants.millis_per_day

class Rule(tuple):
	"""
	# A transition date rule and the local time of the transition.

	# [ Elements ]
	# /kind/
		# `'M'` for month, week, and weekday; `'J'` for a day of the year excluding
		# February 29; `'D'` for a zero based day of the year including it.
	# /parameters/
		# The numbers of the rule; `(month, week, weekday)` or `(day,)`.
	# /time/
		# Milliseconds from local midnight; may be negative or exceed a day.
	"""
	__slots__ = ()

	kind = property(lambda self: self[0])
	parameters = property(lambda self: self[1])
	time = property(lambda self: self[2])

	@classmethod
	def create(Class, kind, parameters, time=2*hour):
		return Class((kind, tuple(parameters), time))

	def day(self, year):
		"""
		# The day number, relative to 1970-01-01, selected by the rule in &year.
		"""
		kind, p, time = self
		start = gregorian.epoch_days(year)

		if kind == 'J':
			n = p[0]
			if n >= 60 and gregorian.year_is_leap(year):
				n += 1
			return start + n - 1
		elif kind == 'D':
			return start + p[0]

		month, nth, weekday = p
		first = gregorian.epoch_days(year, month, 1)
		# POSIX weekdays start on sunday; zero.
		offset = (weekday - week.day_of_week(first) % 7) % 7
		d = offset + 1 + (nth - 1) * 7
		limit = gregorian.days_in_month(year, month)
		while d > limit:
			d -= 7
		return first + d - 1

	def local(self, year):
		"""
		# The local milliseconds of the transition in &year.
		"""
		return self.day(year) * day + self.time

@functools.lru_cache(maxsize=256)
def transitions(start, end, standard, daylight, year):
	"""
	# The UTC instants, `(start, end)`, of the &start and &end rules in &year.

	# &start is read in standard time and &end in daylight time.
	"""
	return (
		start.local(year) - standard,
		end.local(year) - daylight,
	)

class RuleZone(zones.DateTimeZone):
	"""
	# A zone observing daylight saving time between two yearly rules.

	# [ Properties ]
	# /standard_name/
		# Abbreviation of standard time.
	# /standard/
		# Standard offset in milliseconds east of UTC.
	# /daylight_name/
		# Abbreviation of daylight saving time.
	# /daylight/
		# Daylight saving offset in milliseconds east of UTC.
	# /start/
		# The &Rule entering daylight saving time; in standard local time.
	# /end/
		# The &Rule leaving daylight saving time; in daylight local time.
	"""
	__slots__ = ('standard_name', 'standard', 'daylight_name', 'daylight', 'start', 'end')

	def __init__(self, id, standard_name, standard, daylight_name, daylight, start, end):
		super().__init__(id)
		self.standard_name = standard_name
		self.standard = standard
		self.daylight_name = daylight_name
		self.daylight = daylight
		self.start = start
		self.end = end

	def transitions(self, year):
		"""
		# The UTC instants, `(start, end)`, at which daylight saving time begins and ends in &year.
		"""
		return transitions(self.start, self.end, self.standard, self.daylight, year)

	def _year(self, instant):
		return gregorian.year_from_days((instant + self.standard) // day)

	def _in_daylight(self, instant):
		start, end = self.transitions(self._year(instant))
		if start < end:
			return start <= instant < end
		# Southern hemisphere; daylight time spans the new year.
		return not (end <= instant < start)

	def offset(self, instant):
		return self.daylight if self._in_daylight(instant) else self.standard

	def standard_offset(self, instant):
		return self.standard

	def name_key(self, instant):
		return self.daylight_name if self._in_daylight(instant) else self.standard_name

	def is_fixed(self):
		return False

	def _around(self, instant):
		y = self._year(instant)
		for year in (y - 1, y, y + 1):
			yield from sorted(self.transitions(year))

	def next_transition(self, instant):
		for t in self._around(instant):
			if t > instant:
				return t
		return instant

	def previous_transition(self, instant):
		selected = None
		for t in self._around(instant):
			if t > instant:
				break
			selected = t
		if selected is None:
			return instant
		return selected - 1

	def __eq__(self, ob):
		return isinstance(ob, RuleZone) and (
			ob.id == self.id and
			ob.standard == self.standard and ob.daylight == self.daylight and
			ob.standard_name == self.standard_name and
			ob.daylight_name == self.daylight_name and
			ob.start == self.start and ob.end == self.end
		)

	def __hash__(self):
		return hash((self.id, self.standard, self.daylight, self.start, self.end))

# Parsing

name_pattern = r'(?:<([A-Za-z0-9+-]+)>|([A-Za-z]{3,}))'
offset_pattern = r'([+-]?\d{1,3}(?::\d{1,2}){0,2})'
rule_pattern = r'(J\d{1,3}|\d{1,3}|M\d{1,2}\.\d\.\d)(?:/' + offset_pattern + r')?'

tz_pattern = re.compile(
	'^' + name_pattern + offset_pattern +
	'(?:' + name_pattern + offset_pattern + '?' +
	'(?:,' + rule_pattern + ',' + rule_pattern + ')?)?$'
)

def parse_time(text, limit=167):
	"""
	# Parse `[+-]hh[:mm[:ss]]` into milliseconds.
	"""
	sign = 1
	if text[:1] in '+-':
		if text[0] == '-':
			sign = -1
		text = text[1:]

	parts = [int(x) for x in text.split(':')]
	parts.extend([0] * (3 - len(parts)))
	h, m, s = parts
	if h > limit or m > 59 or s > 59:
		raise errors.InvalidConfiguration("time out of range: " + repr(text))

	return sign * (((h * 60) + m) * 60 + s) * 1000

def parse_rule(text, time):
	if time is None:
		time = 2 * hour
	else:
		time = parse_time(time)

	if text[0] == 'M':
		month, nth, weekday = map(int, text[1:].split('.'))
		if not (1 <= month <= 12 and 1 <= nth <= 5 and 0 <= weekday <= 6):
			raise errors.InvalidConfiguration("invalid month rule: " + repr(text))
		return Rule.create('M', (month, nth, weekday), time)
	elif text[0] == 'J':
		n = int(text[1:])
		if not 1 <= n <= 365:
			raise errors.InvalidConfiguration("invalid julian day rule: " + repr(text))
		return Rule.create('J', (n,), time)
	else:
		n = int(text)
		if not 0 <= n <= 365:
			raise errors.InvalidConfiguration("invalid day rule: " + repr(text))
		return Rule.create('D', (n,), time)

default_rules = ('M3.2.0', 'M11.1.0')

def parse(text, id=None):
	"""
	# Construct the zone described by the POSIX TZ string, &text.

	# [ Parameters ]
	# /text/
		# The TZ string.
	# /id/
		# The identifier of the zone; defaults to &text.

	# [ Returns ]
	# &.zones.FixedZone when no daylight saving time is named, otherwise &RuleZone.
	# Daylight saving defaults to one hour ahead of standard time, and the rules to
	# those of the United States.
	"""
	m = tz_pattern.match(text)
	if m is None:
		raise errors.InvalidConfiguration("invalid TZ string: " + repr(text))

	(
		std_quoted, std_name, std_offset,
		dst_quoted, dst_name, dst_offset,
		start, start_time, end, end_time,
	) = m.groups()

	if id is None:
		id = text

	std_name = std_quoted or std_name
	standard = -parse_time(std_offset, 24)

	dst_name = dst_quoted or dst_name
	if dst_name is None:
		return zones.FixedZone(id, std_name, standard, standard)

	if dst_offset is None:
		daylight = standard + hour
	else:
		daylight = -parse_time(dst_offset, 24)

	if start is None:
		start, end = default_rules

	return RuleZone(id,
		std_name, standard, dst_name, daylight,
		parse_rule(start, start_time), parse_rule(end, end_time),
	)
