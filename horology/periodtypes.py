"""
# Period types: the ordered set of units a period is expressed in.

# A period type selects some of the eight standard units: years, months, weeks,
# days, hours, minutes, seconds, and millis. Its index table maps each standard
# slot to the position of the unit in the values of a period, or `-1` when the
# type does not support the unit. The table is the only record of support and
# position.

#!python
	from horology.periodtypes import PeriodType
	from horology.fieldtypes import DurationFieldType as D

	pt = PeriodType.for_fields([D.years, D.days]).with_years_removed()
	pt.is_supported(D.years) == False
	pt.index_of(D.days) == 0

# [ Elements ]
# /PeriodType/
	# The period type class.
# /slots/
	# The standard units in slot order.
"""
import functools

from . import arithmetic
from . import errors
from .fieldtypes import DurationFieldType as D

#: The units of the index table in slot order.
slots = (
	D.years, D.months, D.weeks, D.days,
	D.hours, D.minutes, D.seconds, D.millis,
)

years_index = 0
months_index = 1
weeks_index = 2
days_index = 3
hours_index = 4
minutes_index = 5
seconds_index = 6
millis_index = 7

def _slot(type, _map={t: i for i, t in enumerate(slots)}):
	return _map.get(type, -1)

class PeriodType(object):
	"""
	# The units of a period and the position of each in the period's values.

	# Period types are equal when their units are equal; the name is descriptive.

	# [ Properties ]
	# /name/
		# Name of the type; types derived by removal append `No<Unit>`.
	# /types/
		# The units, largest first.
	# /indices/
		# The position of each standard slot in &types or `-1`.
	"""
	__slots__ = ('name', 'types', 'indices')

	def __init__(self, name, types, indices):
		self.name = name
		self.types = tuple(types)
		self.indices = tuple(indices)

		if len(self.indices) != len(slots):
			raise errors.InvalidConfiguration("index table must have eight slots")

	@classmethod
	def from_slots(Class, name, selected):
		"""
		# Construct the type holding the standard slots in &selected.
		"""
		types = []
		indices = [-1] * len(slots)
		for slot in sorted(selected):
			indices[slot] = len(types)
			types.append(slots[slot])
		return Class(name, types, indices)

	def __len__(self):
		return len(self.types)

	def size(self):
		return len(self.types)

	def field_type(self, index):
		return self.types[index]

	def is_supported(self, type):
		return type in self.types

	def index_of(self, type):
		"""
		# The position of &type in the values of a period; `-1` when unsupported.
		"""
		try:
			return self.types.index(type)
		except ValueError:
			return -1

	# Indexed access used by the period implementations.

	def get_indexed_field(self, period, slot):
		"""
		# The value of the standard &slot in &period; zero when unsupported.
		"""
		i = self.indices[slot]
		return 0 if i == -1 else period.value(i)

	def set_indexed_field(self, values, slot, value):
		"""
		# Assign &value to the standard &slot of the list &values.

		# [ Exceptions ]
		# /errors.UnsupportedField/
			# The type does not have the slot.
		"""
		i = self.indices[slot]
		if i == -1:
			raise errors.UnsupportedField(slots[slot].name, "Field is not supported")
		values[i] = value
		return True

	def add_indexed_field(self, values, slot, amount):
		if amount == 0:
			return False
		i = self.indices[slot]
		if i == -1:
			raise errors.UnsupportedField(slots[slot].name, "Field is not supported")
		values[i] = arithmetic.add_int(values[i], amount)
		return True

	# Derived types

	def with_field_removed(self, slot, suffix):
		"""
		# Construct the type without the unit in the standard &slot.

		# The name is extended with &suffix and the positions following the removed
		# unit are decremented. The same instance is returned when the unit is absent.
		"""
		position = self.indices[slot]
		if position == -1:
			return self

		types = self.types[:position] + self.types[position+1:]
		indices = []
		for i, x in enumerate(self.indices):
			if i == slot or x == -1:
				indices.append(-1)
			elif x > position:
				indices.append(x - 1)
			else:
				indices.append(x)

		return self.__class__(self.name + suffix, types, indices)

	for _i, _t in enumerate(slots):
		def _remover(self, _i=_i, _suffix='No' + _t.name.capitalize()):
			return self.with_field_removed(_i, _suffix)
		_remover.__name__ = 'with_' + _t.name + '_removed'
		locals()[_remover.__name__] = _remover
	del _i, _t, _remover

	# Standard types

	@classmethod
	def standard(Class):
		"""
		# All eight units.
		"""
		return _standard('Standard', (0, 1, 2, 3, 4, 5, 6, 7))

	@classmethod
	def year_month_day_time(Class):
		return _standard('YearMonthDayTime', (0, 1, 3, 4, 5, 6, 7))

	@classmethod
	def year_month_day(Class):
		return _standard('YearMonthDay', (0, 1, 3))

	@classmethod
	def year_week_day_time(Class):
		return _standard('YearWeekDayTime', (0, 2, 3, 4, 5, 6, 7))

	@classmethod
	def year_week_day(Class):
		return _standard('YearWeekDay', (0, 2, 3))

	@classmethod
	def year_day_time(Class):
		return _standard('YearDayTime', (0, 3, 4, 5, 6, 7))

	@classmethod
	def year_day(Class):
		return _standard('YearDay', (0, 3))

	@classmethod
	def day_time(Class):
		return _standard('DayTime', (3, 4, 5, 6, 7))

	@classmethod
	def time(Class):
		return _standard('Time', (4, 5, 6, 7))

	@classmethod
	def for_unit(Class, type):
		"""
		# The single unit type of &type; `Years`, `Days`.
		"""
		slot = _slot(type)
		if slot == -1:
			raise errors.InvalidConfiguration("PeriodType does not support fields: " + type.name)
		return _standard(type.name.capitalize(), (slot,))

	@classmethod
	def for_fields(Class, types):
		"""
		# The type with the units &types.

		# The type is derived from &standard by removing the absent units and is cached
		# by its units so equivalent requests in any order share an instance.

		# [ Exceptions ]
		# /errors.InvalidConfiguration/
			# &types was empty, or contained a unit that is not one of the eight.
		"""
		if not types:
			raise errors.InvalidConfiguration("Types array must not be null or empty")
		if any(t is None for t in types):
			raise errors.InvalidConfiguration("Types array must not contain null")

		key = tuple(types)
		try:
			return _cache[key]
		except KeyError:
			pass

		remaining = list(types)
		pt = Class.standard()
		for i, t in enumerate(slots):
			if t in remaining:
				remaining.remove(t)
			else:
				pt = pt.with_field_removed(i, 'No' + t.name.capitalize())

		if remaining:
			raise errors.InvalidConfiguration(
				"PeriodType does not support fields: " + ', '.join(t.name for t in remaining)
			)

		# Requests in a different order share the instance of the first.
		pt = _cache.setdefault(pt.types, pt)
		return _cache.setdefault(key, pt)

	def __eq__(self, ob):
		return isinstance(ob, PeriodType) and ob.types == self.types

	def __hash__(self):
		return hash(self.types)

	def __reduce__(self):
		return (PeriodType, (self.name, self.types, self.indices))

	def __repr__(self):
		return 'PeriodType[%s]' % (self.name,)

_cache = {}

@functools.lru_cache(maxsize=None)
def _standard(name, selected):
	return PeriodType.from_slots(name, selected)
