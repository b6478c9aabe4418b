"""
# Address resolution for calendars whose leap rules repeat in a fixed cycle.

# A cycle is described as a tree of `(title, repeat, sub)` nodes whose leaves are
# month lengths. &aggregate totals the months and days of each node so that &resolve
# can descend the tree converting a count of one unit into a count of the other.

# Used by &.gregorian; the tables are built once at import.
"""
import itertools

def aggregate(node,
		chain=itertools.chain,
		accumulate=itertools.accumulate,
		isinstance=isinstance, int=int,
		tuple=tuple, range=range,
		len=len, sum=sum,
	):
	"""
	# Recursively total the months and days of &node.

	# Returns `(title, repeat, parts, (months, days), (months * repeat, days * repeat))`
	# where `parts` is either the accumulated month and day offsets of a leaf or the
	# aggregates of the inner nodes.
	"""
	title, repeat, sub = node

	if isinstance(sub[0], int):
		days = tuple(accumulate(chain((0,), sub)))
		months = tuple(range(len(sub) + 1))
		parts = (months, days)
		month_total = len(sub)
		day_total = days[-1]
	else:
		parts = tuple([aggregate(x) for x in sub])
		month_total = sum([x[-1][0] for x in parts])
		day_total = sum([x[-1][1] for x in parts])

	return (
		title, repeat, parts,
		(month_total, day_total),
		(repeat * month_total, repeat * day_total),
	)

def resolve(selectors, quantity, table,
		divmod=divmod, isinstance=isinstance,
		range=range, len=len, int=int,
	):
	"""
	# Convert &quantity into the other unit of the cycle described by &table.

	# Returns `(cycles, address, remainder, span)`:
	# the number of whole cycles, the converted quantity within the cycle,
	# the portion of &quantity that did not complete a month (the day of month),
	# and the size of the final month in the output unit.

	# [ Parameters ]
	# /selectors/
		# A pair of item getters selecting the input and output units from
		# the aggregated totals.
	# /quantity/
		# The count of input units since the start of the first cycle; may be negative.
	# /table/
		# The result of &aggregate.
	"""
	select_in, select_out = selectors
	address = 0

	cycles, quantity = divmod(quantity, select_in(table[-1]))

	current = table
	while not isinstance(current[2][0][0], int):
		for sub in current[2]:
			title, repeat, inner, single, total = sub
			size = select_in(total)
			if quantity >= size:
				quantity -= size
				address += select_out(total)
			else:
				count, quantity = divmod(quantity, select_in(single))
				address += count * select_out(single)
				current = sub
				break
		else:
			raise RuntimeError("calendar cycle exhausted")

	inputs = select_in(current[2])
	outputs = select_out(current[2])
	for i in range(len(inputs)):
		if inputs[i+1] > quantity:
			break

	return (cycles, address + outputs[i], quantity - inputs[i], outputs[i+1] - outputs[i])
