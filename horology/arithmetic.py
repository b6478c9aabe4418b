"""
# Range checked integer arithmetic.

# Python integers do not overflow, so instants and field values are explicitly
# confined to the signed 64-bit and 32-bit ranges that the rest of the package
# depends on. Each function raises &.errors.Overflow rather than wrapping.
"""
from . import constants
from . import errors

def check_long(value, message="The calculation caused an overflow",
		minimum=constants.long_min, maximum=constants.long_max):
	if value < minimum or value > maximum:
		raise errors.Overflow(message)
	return value

def to_int(value, minimum=constants.int_min, maximum=constants.int_max):
	"""
	# Confine &value to the 32-bit range.
	"""
	if value < minimum or value > maximum:
		raise errors.Overflow("Value cannot fit in an int: %d" % (value,))
	return value

def add(a, b):
	return check_long(a + b, "The calculation caused an overflow: %d + %d" % (a, b))

def subtract(a, b):
	return check_long(a - b, "The calculation caused an overflow: %d - %d" % (a, b))

def multiply(a, b):
	return check_long(a * b, "Multiplication overflows a long: %d * %d" % (a, b))

def add_int(a, b):
	"""
	# Add within the 32-bit range.
	"""
	r = a + b
	if r < constants.int_min or r > constants.int_max:
		raise errors.Overflow("The calculation caused an overflow: %d + %d" % (a, b))
	return r

def multiply_int(a, b):
	r = a * b
	if r < constants.int_min or r > constants.int_max:
		raise errors.Overflow("Multiplication overflows an int: %d * %d" % (a, b))
	return r

def negate(value):
	"""
	# Negate the 32-bit &value; the minimum has no positive counterpart.
	"""
	if value == constants.int_min:
		raise errors.Overflow("Integer.MIN_VALUE cannot be negated")
	return -value

def quotient(dividend, divisor):
	"""
	# Integer division truncating toward zero.
	"""
	q = abs(dividend) // abs(divisor)
	if (dividend < 0) != (divisor < 0):
		q = -q
	return q

def divide(dividend, divisor):
	"""
	# Truncating 64-bit division.
	"""
	if divisor == 0:
		raise errors.Overflow("Division by zero")
	if dividend == constants.long_min and divisor == -1:
		raise errors.Overflow("Multiplication overflows a long: %d / %d" % (dividend, divisor))
	return quotient(dividend, divisor)

def verify_bounds(field, value, lower, upper):
	"""
	# Raise &errors.IllegalFieldValue when &value is not within `[lower, upper]`.

	# [ Parameters ]
	# /field/
		# The field, field type, or field name to report.
	"""
	if value < lower or value > upper:
		if not isinstance(field, str) and hasattr(field, 'type'):
			field = field.type
		raise errors.IllegalFieldValue(field, value, lower, upper)

def wrap(current, amount, minimum, maximum):
	"""
	# Add &amount to &current wrapping within `[minimum, maximum]`.

	# [ Parameters ]
	# /current/
		# A value within the range.
	# /amount/
		# The signed quantity to add.
	"""
	return wrap_value(current + amount, minimum, maximum)

def wrap_value(value, minimum, maximum):
	"""
	# Confine &value to `[minimum, maximum]` by wrapping.
	"""
	if minimum >= maximum:
		raise errors.InvalidConfiguration("MIN > MAX")

	span = maximum - minimum + 1
	return ((value - minimum) % span) + minimum
