"""
# Exceptions raised by fields, chronologies, and zones.

# Each kind of failure is a subclass of &Error and of the builtin exception that
# most closely describes it so that generic handlers continue to work.

# [ Elements ]
# /IllegalFieldValue/
	# A field value outside of its legal bounds.
# /UnsupportedField/
	# An operation was requested of a field that the chronology or partial lacks.
# /NonexistentLocalTime/
	# A local time falling inside of a zone's offset gap during a strict conversion.
# /Overflow/
	# A result exceeding the 64-bit instant range or the 32-bit value range.
# /InvalidConfiguration/
	# Missing or contradictory construction parameters.
# /InternalInvariant/
	# A closed dispatch table was missing an entry.
"""
from . import constants
from . import gregorian

def format_local(millis, *, day=constants.millis_per_day, epoch=constants.epoch_days):
	"""
	# Render the local millisecond count as `yyyy-MM-ddTHH:mm:ss.SSS`.
	"""
	days, ms = divmod(millis, day)
	y, m, d = gregorian.date_from_days(days + epoch)
	seconds, ms = divmod(ms, 1000)
	minutes, seconds = divmod(seconds, 60)
	hours, minutes = divmod(minutes, 60)
	sign = '-' if y < 0 else ''
	return '%s%04d-%02d-%02dT%02d:%02d:%02d.%03d' % (
		sign, abs(y), m, d, hours, minutes, seconds, ms
	)

class Error(Exception):
	"""
	# Base class for all exceptions raised by horology.
	"""

class IllegalFieldValue(Error, ValueError):
	"""
	# A field value was outside of its legal bounds.

	# [ Properties ]
	# /field_type/
		# The &.fieldtypes.DateTimeFieldType or &.fieldtypes.DurationFieldType, if any.
	# /field_name/
		# The name of the field.
	# /value/
		# The rejected value.
	# /lower/
		# The lower bound, inclusive, or &None when unbounded.
	# /upper/
		# The upper bound, inclusive, or &None when unbounded.
	# /explanation/
		# Additional text describing the failure when the bounds are not the whole story.
	"""

	def __init__(self, field, value, lower=None, upper=None, explanation=None):
		if isinstance(field, str):
			self.field_type = None
			self.field_name = field
		else:
			self.field_type = field
			self.field_name = field.name

		self.value = value
		self.lower = lower
		self.upper = upper
		self.explanation = explanation
		self.message = self.create_message()
		super().__init__(self.message)

	def create_message(self):
		if isinstance(self.value, str):
			parts = ['Value "', self.value, '"']
		else:
			parts = ['Value ', str(self.value)]
		parts.append(' for ')
		parts.append(self.field_name)
		parts.append(' ')

		lower, upper = self.lower, self.upper
		if lower is None:
			if upper is None:
				parts.append('is not supported')
			else:
				parts.append('must not be larger than %d' % (upper,))
		elif upper is None:
			parts.append('must not be smaller than %d' % (lower,))
		else:
			parts.append('must be in the range [%d,%d]' % (lower, upper))

		if self.explanation:
			parts.append(': ')
			parts.append(self.explanation)

		return ''.join(parts)

	def prepend(self, message):
		"""
		# Add context to the front of the message.
		"""
		if message:
			self.message = message + ': ' + self.message
			self.args = (self.message,)
		return self

	def __str__(self):
		return self.message

class UnsupportedField(Error, TypeError):
	"""
	# An operation was requested of a field that is not supported.
	"""

	def __init__(self, field_name, explanation=None):
		self.field_name = field_name
		msg = field_name + ' field is unsupported'
		if explanation:
			msg += ': ' + explanation
		super().__init__(msg)

class NonexistentLocalTime(Error, ValueError):
	"""
	# The local time does not occur in the zone as the offset increased at a transition.

	# [ Properties ]
	# /local/
		# The local milliseconds that were requested.
	# /zone/
		# The identifier of the zone.
	"""

	def __init__(self, local, zone, message=None):
		self.local = local
		self.zone = zone
		if message is None:
			message = "Illegal instant due to time zone offset transition (daylight savings time 'gap')"
		self.message = '%s: %s (%s)' % (message, format_local(local), zone)
		super().__init__(self.message)

	def __str__(self):
		return self.message

class Overflow(Error, ArithmeticError):
	"""
	# A calculation exceeded the representable range.
	"""

class InvalidConfiguration(Error, ValueError):
	"""
	# Construction parameters were missing or contradictory.
	"""

class InternalInvariant(Error, AssertionError):
	"""
	# An ordinal was not present in a closed dispatch table.
	"""

def is_nonexistent(exc):
	"""
	# Whether &exc is, or was caused by, a &NonexistentLocalTime.
	"""
	seen = set()
	while exc is not None and id(exc) not in seen:
		if isinstance(exc, NonexistentLocalTime):
			return True
		seen.add(id(exc))
		exc = exc.__cause__ or exc.__context__
	return False
