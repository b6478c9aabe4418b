"""
# Chronologies that change how calendar fields accept out of range values.

# The fields of the ISO chronology are strict: &set rejects values outside of the
# field's range at the instant. &LenientChronology opts into leniency; a value
# outside of the range is applied as an addition of the difference from the
# current value, so the thirteenth month of a year is January of the next.
# &StrictChronology restores range checking over a lenient chronology.

#!python
	from horology import leniency
	from horology.iso import ISOChronology

	lenient = leniency.LenientChronology(ISOChronology.utc())
	lenient.datetime_millis(2021, 13, 1) == ISOChronology.utc().datetime_millis(2022, 1, 1)

# [ Elements ]
# /StrictField/
	# A field rejecting values outside of its range.
# /LenientField/
	# A field applying out of range values as additions.
# /StrictChronology/
	# A chronology whose lenient fields are made strict.
# /LenientChronology/
	# A chronology whose fields are made lenient.
"""
from . import arithmetic
from . import errors
from . import fields
from .chronology import AssembledChronology, field_accessors

class StrictField(fields.DecoratedField):
	"""
	# A field verifying the bounds of &set before delegating to the lenient &field.
	"""
	__slots__ = ()

	def is_lenient(self):
		return False

	def set(self, instant, value):
		arithmetic.verify_bounds(self.type, value, self.minimum(instant), self.maximum(instant))
		return self.field.set(instant, value)

class LenientField(fields.DecoratedField):
	"""
	# A field setting values by adding their difference from the current value.

	# [ Properties ]
	# /chronology/
		# The chronology that &field belongs to; its zone and UTC fields
		# perform the addition.
	"""
	__slots__ = ('chronology',)

	def __init__(self, field, chronology):
		super().__init__(field)
		self.chronology = chronology

	def is_lenient(self):
		return True

	def set(self, instant, value):
		difference = arithmetic.subtract(value, self.get(instant))
		utc = self.type.get_field(self.chronology.with_utc())
		zone = self.chronology.zone

		local = zone.utc_to_local(instant)
		local = utc.add(local, difference)
		return zone.local_to_utc(local, False, instant)

def strict(field):
	"""
	# The strict form of &field; lenient fields are unwrapped or decorated.
	"""
	if field is None:
		return None
	if isinstance(field, LenientField):
		field = field.field
	if not field.is_lenient():
		return field
	return StrictField(field)

def lenient(field, chronology):
	"""
	# The lenient form of &field read through &chronology.
	"""
	if field is None or not field.is_supported():
		return field
	if isinstance(field, StrictField):
		field = field.field
	if field.is_lenient():
		return field
	return LenientField(field, chronology)

class LeniencyChronology(AssembledChronology):
	"""
	# Common base of the chronologies converting the fields of &base.

	# [ Properties ]
	# /base/
		# The wrapped chronology.
	"""
	__slots__ = ()

	def __init__(self, base):
		if base is None:
			raise errors.InvalidConfiguration("Must supply a chronology")
		super().__init__(base, None)

	@property
	def zone(self):
		return self.base.zone

	def with_utc(self):
		zone = self.zone
		if zone is None or (zone.id == 'UTC' and zone.is_fixed()):
			return self
		return self.__class__(self.base.with_utc())

	def with_zone(self, zone):
		if zone is None:
			from . import system
			zone = system.default_zone()
		if zone == self.zone:
			return self
		if zone.id == 'UTC' and zone.is_fixed():
			return self.with_utc()
		return self.__class__(self.base.with_zone(zone))

	def __eq__(self, ob):
		return type(ob) is type(self) and ob.base == self.base

	def __hash__(self):
		return hash((self.__class__.__name__, self.base))

	def __reduce__(self):
		return (self.__class__, (self.base,))

	def __repr__(self):
		return '%s[%r]' % (self.__class__.__name__, self.base)

class StrictChronology(LeniencyChronology):
	"""
	# A chronology whose calendar fields reject values outside of their range.
	"""
	__slots__ = ()

	def assemble(self, table):
		for name in field_accessors:
			table[name] = strict(table[name])

class LenientChronology(LeniencyChronology):
	"""
	# A chronology whose calendar fields accept any value by adding the difference.
	"""
	__slots__ = ()

	def assemble(self, table):
		for name in field_accessors:
			table[name] = lenient(table[name], self.base)
