"""
# Partials: date and time values holding a subset of the calendar fields.

# A partial is an ordered set of field types, largest first, with a value for each
# and the UTC chronology that interprets them. Updates are performed by the fields
# against the partial's own values, so a partial without a year can still hold a
# day of the month; the fields validate using the values that are present.

# [ Elements ]
# /AbstractPartial/
	# Operations common to all partials.
# /Partial/
	# A partial of arbitrary field types.
# /order_key/
	# The sort key used to order field types largest first.
"""
from . import abstract
from . import arithmetic
from . import constants
from . import errors
from . import fields

def order_key(chronology, type):
	"""
	# The key ordering &type among the fields of a partial; larger keys come first.

	# Fields are ordered by the size of their unit and then by the size of their
	# range. Fields without a range, such as the year, precede those with one.
	"""
	unit = type.duration_type.get_field(chronology)
	unit_millis = unit.unit_millis() if unit.is_supported() else 0

	range_type = type.range_duration_type
	if range_type is None:
		range_millis = constants.long_max
	else:
		rf = range_type.get_field(chronology)
		range_millis = rf.unit_millis() if rf.is_supported() else 0

	return (unit_millis, range_millis)

def _instant(ob):
	# Normalize instant-like objects to `(millis, chronology)`.
	from . import iso
	if isinstance(ob, int):
		return ob, iso.ISOChronology.instance()
	return ob.millis, getattr(ob, 'chronology', None) or iso.ISOChronology.instance()

class AbstractPartial(object):
	"""
	# Operations derived from the field types, values, and chronology of a partial.

	# Subclasses provide &chronology, &field_type, &values, and `__len__`.
	"""
	__slots__ = ()

	def size(self):
		return len(self)

	def field_type(self, index):
		raise NotImplementedError

	def values(self):
		raise NotImplementedError

	def value(self, index):
		return self.values()[index]

	def field(self, index):
		"""
		# The field of the chronology implementing the type at &index.
		"""
		return self.field_type(index).get_field(self.chronology)

	def field_types(self):
		return tuple(self.field_type(i) for i in range(len(self)))

	def fields(self):
		return tuple(self.field(i) for i in range(len(self)))

	def index_of(self, type):
		"""
		# The index of the calendar field &type; `-1` when absent.
		"""
		for i in range(len(self)):
			if self.field_type(i) == type:
				return i
		return -1

	def index_of_duration(self, type):
		"""
		# The index of the field whose unit is &type; `-1` when absent.
		"""
		for i in range(len(self)):
			if self.field_type(i).duration_type == type:
				return i
		return -1

	def index_of_supported(self, type):
		i = self.index_of(type)
		if i == -1:
			raise errors.UnsupportedField(type.name, "Field is not supported by the partial")
		return i

	def is_supported(self, type):
		return self.index_of(type) != -1 and type.is_supported(self.chronology)

	def get(self, type):
		"""
		# The value of &type.

		# [ Exceptions ]
		# /errors.UnsupportedField/
			# The partial does not hold &type.
		"""
		return self.values()[self.index_of_supported(type)]

	def is_contiguous(self):
		return fields.is_contiguous(self)

	def to_datetime(self, base=None):
		"""
		# Set the fields of the partial onto &base; the current time when &None.
		"""
		from . import types
		if base is None:
			base = types.DateTime.now()
		millis, chronology = _instant(base)
		resolved = chronology.set_partial(self, millis)
		return types.DateTime(resolved, chronology)

	def is_match(self, instant):
		"""
		# Whether the fields of &instant equal the values of this partial.
		"""
		millis, chronology = _instant(instant)
		values = self.values()
		for i in range(len(self)):
			if self.field_type(i).get_field(chronology).get(millis) != values[i]:
				return False
		return True

	def is_match_partial(self, partial):
		"""
		# Whether &partial holds the same values for each of the fields of this partial.
		"""
		values = self.values()
		for i in range(len(self)):
			t = self.field_type(i)
			j = partial.index_of(t)
			if j == -1 or partial.value(j) != values[i]:
				return False
		return True

	# Comparison

	def _compare(self, ob):
		if self.field_types() != ob.field_types():
			raise errors.InvalidConfiguration("ReadablePartial objects must have matching field types")
		a = self.values()
		b = ob.values()
		return (a > b) - (a < b)

	def is_equal(self, ob):
		return self._compare(ob) == 0

	def is_after(self, ob):
		return self._compare(ob) > 0

	def is_before(self, ob):
		return self._compare(ob) < 0

	def __lt__(self, ob):
		return self._compare(ob) < 0

	def __le__(self, ob):
		return self._compare(ob) <= 0

	def __gt__(self, ob):
		return self._compare(ob) > 0

	def __ge__(self, ob):
		return self._compare(ob) >= 0

	def __eq__(self, ob):
		if not isinstance(ob, AbstractPartial):
			return NotImplemented
		return (
			self.field_types() == ob.field_types() and
			list(self.values()) == list(ob.values()) and
			self.chronology == ob.chronology
		)

	def __hash__(self):
		return hash((self.field_types(), tuple(self.values()), self.chronology))

	def __repr__(self):
		return '%s(%s)' % (
			self.__class__.__name__,
			', '.join('%s=%d' % (t.name, v) for t, v in zip(self.field_types(), self.values()))
		)

class Partial(AbstractPartial):
	"""
	# An immutable partial holding any field types.

	#!python
		from horology.partial import Partial
		from horology.fieldtypes import DateTimeFieldType as F

		p = Partial([(F.month_of_year, 11), (F.day_of_month, 30)])
		p.with_field_added(F.month_of_year, 3).get(F.month_of_year) == 2

	# [ Properties ]
	# /chronology/
		# The UTC chronology interpreting the values.
	"""
	__slots__ = ('chronology', '_types', '_values')

	def __init__(self, pairs=(), chronology=None):
		if chronology is None:
			from . import iso
			chronology = iso.ISOChronology.utc()
		self.chronology = chronology = chronology.with_utc()

		pairs = list(pairs)
		types = tuple(p[0] for p in pairs)
		values = [p[1] for p in pairs]

		if any(t is None for t in types):
			raise errors.InvalidConfiguration("Types array must not contain null")

		last = None
		for i, t in enumerate(types):
			if t in types[:i]:
				raise errors.InvalidConfiguration(
					"Types array must not contain duplicate: %s" % (t.name,))
			key = order_key(chronology, t)
			if last is not None:
				if key == last:
					# Same unit and range; the types describe the same field.
					raise errors.InvalidConfiguration(
						"Types array must not contain duplicate: %s and %s" % (types[i-1].name, t.name))
				if key > last:
					raise errors.InvalidConfiguration(
						"Types array must be in order largest-smallest: %s < %s" % (types[i-1].name, t.name))
			last = key

		self._types = types
		self._values = values
		chronology.validate(self, values)
		self._values = tuple(values)

	@classmethod
	def _derive(Class, chronology, types, values):
		p = Class.__new__(Class)
		p.chronology = chronology
		p._types = tuple(types)
		p._values = list(values)
		chronology.validate(p, p._values)
		p._values = tuple(p._values)
		return p

	def __len__(self):
		return len(self._types)

	def field_type(self, index):
		return self._types[index]

	def values(self):
		return self._values

	def value(self, index):
		return self._values[index]

	def _replace(self, values):
		if list(values) == list(self._values):
			return self
		return self._derive(self.chronology, self._types, values)

	def with_field(self, type, value):
		"""
		# Set, or insert, the value of &type.
		"""
		if type is None:
			raise errors.InvalidConfiguration("The field type must not be null")

		index = self.index_of(type)
		if index == -1:
			key = order_key(self.chronology, type)
			position = len(self._types)
			for i, t in enumerate(self._types):
				k = order_key(self.chronology, t)
				if k == key:
					raise errors.InvalidConfiguration(
						"Types array must not contain duplicate: %s and %s" % (t.name, type.name))
				if k < key:
					position = i
					break

			types = self._types[:position] + (type,) + self._types[position:]
			values = list(self._values)
			values.insert(position, value)
			return self._derive(self.chronology, types, values)

		if value == self._values[index]:
			return self

		values = self.field(index).set_partial(self, index, list(self._values), value)
		return self._replace(values)

	def without(self, type):
		"""
		# Remove &type; the same instance when absent.
		"""
		index = self.index_of(type)
		if index == -1:
			return self

		types = self._types[:index] + self._types[index+1:]
		values = list(self._values)
		del values[index]
		return self._derive(self.chronology, types, values)

	def with_field_added(self, type, amount):
		"""
		# Add &amount to &type carrying into the larger fields.
		"""
		index = self.index_of_supported(type)
		if amount == 0:
			return self
		values = self.field(index).add_partial(self, index, list(self._values), amount)
		return self._replace(values)

	def with_field_add_wrapped(self, type, amount):
		"""
		# Add &amount to &type wrapping when the largest field overflows.
		"""
		index = self.index_of_supported(type)
		if amount == 0:
			return self
		values = self.field(index).add_wrap_partial(self, index, list(self._values), amount)
		return self._replace(values)

	def with_period_added(self, period, scalar=1):
		"""
		# Add &scalar multiples of the amounts of &period whose unit is present.
		"""
		if period is None or scalar == 0:
			return self

		values = list(self._values)
		for i in range(len(period)):
			index = self.index_of_duration(period.field_type(i))
			if index >= 0:
				amount = arithmetic.multiply_int(period.value(i), scalar)
				values = self.field(index).add_partial(self, index, values, amount)
		return self._replace(values)

	def plus(self, period):
		return self.with_period_added(period, 1)

	def minus(self, period):
		return self.with_period_added(period, -1)

	def __reduce__(self):
		return (Partial, (list(zip(self._types, self._values)), self.chronology))

abstract.Partial.register(AbstractPartial)
