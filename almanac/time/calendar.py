"""
# Address resolution within a repeating calendar cycle.

# A cycle is described by a tree of `(title, repeat, sub)` nodes whose leaves
# are sequences of month lengths. &aggregate annotates the tree with the month
# and day totals of every node; &resolve walks the annotated tree to convert a
# month address into days, or a day address into months.
"""
import itertools

def aggregate(node, accumulate=itertools.accumulate, chain=itertools.chain):
	"""
	# Annotate &node with the totals needed by &resolve.

	# Returns `(title, repeat, inner, (months, days), (repeat * months, repeat * days))`
	# where `inner` is the annotated sub-nodes, or, for leaves, the pair of
	# cumulative month and day offsets.
	"""
	title, repeat, sub = node

	if isinstance(sub[0], int):
		days = tuple(accumulate(chain((0,), sub)))
		months = tuple(range(len(sub) + 1))
		inner = (months, days)
		totals = (len(sub), days[-1])
	else:
		inner = tuple([aggregate(x) for x in sub])
		totals = (
			sum([x[-1][0] for x in inner]),
			sum([x[-1][1] for x in inner]),
		)

	return (
		title, repeat, inner,
		totals,
		(repeat * totals[0], repeat * totals[1]),
	)

def resolve(selectors, address, cycle, divmod=divmod):
	"""
	# Resolve the &address within the annotated &cycle.

	# &selectors is a pair of item getters; the first selects the unit of the
	# given address from a `(months, days)` pair, and the second selects the
	# unit being produced.

	# Returns `(cycles, output, remainder, span)` where `cycles` is the count of
	# whole cycles consumed, `output` is the address in the produced unit at the
	# start of the leaf element, `remainder` is the part of the address not
	# consumed by the leaf element (the day of the month), and `span` is the size
	# of the leaf element in the produced unit (the days in the month).
	"""
	source, target = selectors
	output = 0

	cycles, address = divmod(address, source(cycle[-1]))

	node = cycle
	while not isinstance(node[2][0][0], int):
		for sub in node[2]:
			title, repeat, inner, unit, total = sub
			if address >= source(total):
				# Skip the whole node.
				address -= source(total)
				output += target(total)
			else:
				repetitions, address = divmod(address, source(unit))
				output += repetitions * target(unit)
				node = sub
				break
		else:
			raise RuntimeError("address exceeds cycle")

	offsets_in = source(node[2])
	offsets_out = target(node[2])
	for i in range(len(offsets_in) - 1):
		if offsets_in[i+1] > address:
			break

	return (
		cycles,
		output + offsets_out[i],
		address - offsets_in[i],
		offsets_out[i+1] - offsets_out[i],
	)
