"""
# Protocols describing the capabilities that fields, chronologies, zones, and providers
# present to the rest of the package.

# Primarily, this module exists to document the interfaces.
# The redundant method declarations are intentional.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class DurationFieldOps(typing.Protocol):
	"""
	# Elapsed time measured in a single unit.
	"""

	@property
	@abstractmethod
	def type(self):
		"""
		# The &.fieldtypes.DurationFieldType implemented by the field.
		"""

	@abstractmethod
	def is_supported(self) -> bool:
		"""
		# Whether the field performs arithmetic. Unsupported fields raise
		# &.errors.UnsupportedField for every other operation.
		"""

	@abstractmethod
	def is_precise(self) -> bool:
		"""
		# Whether every unit is exactly &unit_millis long.
		"""

	@abstractmethod
	def unit_millis(self) -> int:
		"""
		# The exact size of a unit for precise fields; an average otherwise.
		"""

	@abstractmethod
	def get_value(self, duration:int, instant:int=None) -> int:
		"""
		# The number of whole units in &duration measured from &instant.
		"""

	@abstractmethod
	def get_millis(self, value:int, instant:int=None) -> int:
		"""
		# The milliseconds of &value units measured from &instant.
		"""

	@abstractmethod
	def add(self, instant:int, value:int) -> int:
		"""
		# Add &value units to &instant.
		"""

	@abstractmethod
	def get_difference(self, minuend:int, subtrahend:int) -> int:
		"""
		# The number of whole units between the instants; fractions are dropped.
		"""

@typing.runtime_checkable
class DateTimeFieldOps(typing.Protocol):
	"""
	# A calendar field of a chronology operating on UTC millisecond instants.
	"""

	@property
	@abstractmethod
	def type(self):
		"""
		# The &.fieldtypes.DateTimeFieldType implemented by the field.
		"""

	@abstractmethod
	def is_supported(self) -> bool:
		"""
		# Whether the field can be used; checked before any other operation.
		"""

	@abstractmethod
	def get(self, instant:int) -> int:
		"""
		# Extract the field's value from &instant.
		"""

	@abstractmethod
	def set(self, instant:int, value:int) -> int:
		"""
		# Replace the field's value in &instant.

		# Raises &.errors.IllegalFieldValue when &value is out of range.
		"""

	@abstractmethod
	def add(self, instant:int, amount:int) -> int:
		"""
		# Add &amount units, carrying into larger fields.
		"""

	@abstractmethod
	def add_wrap_field(self, instant:int, amount:int) -> int:
		"""
		# Add &amount units wrapping within the field's own range; larger fields are unaffected.
		"""

	@abstractmethod
	def round_floor(self, instant:int) -> int:
		"""
		# The largest instant less than or equal to &instant aligned to the field's unit.
		"""

	@abstractmethod
	def round_ceiling(self, instant:int) -> int:
		"""
		# The smallest instant greater than or equal to &instant aligned to the field's unit.
		"""

	@abstractmethod
	def duration_field(self):
		"""
		# The &DurationFieldOps of the field's unit.
		"""

	@abstractmethod
	def range_duration_field(self):
		"""
		# The &DurationFieldOps the field's values cycle within, or &None.
		"""

	@abstractmethod
	def minimum(self, instant:int=None) -> int:
		"""
		# The smallest legal value; at &instant when given.
		"""

	@abstractmethod
	def maximum(self, instant:int=None) -> int:
		"""
		# The largest legal value; at &instant when given.
		"""

@typing.runtime_checkable
class Zone(typing.Protocol):
	"""
	# A function from instant to UTC offset.
	"""

	@property
	@abstractmethod
	def id(self) -> str:
		"""
		# The zone's identifier.
		"""

	@abstractmethod
	def offset(self, instant:int) -> int:
		"""
		# The milliseconds to add to &instant to get the local time.
		"""

	@abstractmethod
	def standard_offset(self, instant:int) -> int:
		"""
		# The offset at &instant excluding any daylight savings.
		"""

	@abstractmethod
	def next_transition(self, instant:int) -> int:
		"""
		# The next instant at which the offset changes or &instant itself
		# when there are no further transitions.
		"""

	@abstractmethod
	def previous_transition(self, instant:int) -> int:
		"""
		# The instant before the latest change prior to &instant or &instant itself
		# when there are no prior transitions.
		"""

	@abstractmethod
	def is_fixed(self) -> bool:
		"""
		# Whether the offset is constant.
		"""

@typing.runtime_checkable
class Provider(typing.Protocol):
	"""
	# A source of zones keyed by identifier.
	"""

	@abstractmethod
	def zone(self, id:str):
		"""
		# The zone for &id or &None when it is not known.
		"""

	@abstractmethod
	def ids(self) -> typing.Set[str]:
		"""
		# The set of identifiers the provider can resolve; always includes `'UTC'`.
		"""

@typing.runtime_checkable
class NameProvider(typing.Protocol):
	"""
	# Display names for zones.
	"""

	@abstractmethod
	def short_name(self, id:str, name_key:str, standard:bool=True) -> typing.Optional[str]:
		pass

	@abstractmethod
	def name(self, id:str, name_key:str, standard:bool=True) -> typing.Optional[str]:
		pass

@typing.runtime_checkable
class Partial(typing.Protocol):
	"""
	# A fixed set of field values without an instant.
	"""

	@property
	@abstractmethod
	def chronology(self):
		"""
		# The chronology providing the fields.
		"""

	@abstractmethod
	def __len__(self) -> int:
		"""
		# The number of fields.
		"""

	@abstractmethod
	def field_type(self, index:int):
		"""
		# The &.fieldtypes.DateTimeFieldType at &index. Types are ordered largest first.
		"""

	@abstractmethod
	def field(self, index:int):
		"""
		# The field of the chronology at &index.
		"""

	@abstractmethod
	def value(self, index:int) -> int:
		"""
		# The value at &index.
		"""

@typing.runtime_checkable
class Period(typing.Protocol):
	"""
	# Amounts of duration units selected by a period type.
	"""

	@property
	@abstractmethod
	def period_type(self):
		"""
		# The &.periodtypes.PeriodType selecting the units.
		"""

	@abstractmethod
	def __len__(self) -> int:
		pass

	@abstractmethod
	def field_type(self, index:int):
		pass

	@abstractmethod
	def value(self, index:int) -> int:
		pass
