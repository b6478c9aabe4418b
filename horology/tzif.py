"""
# Read TZif, time zone information, files as produced by zic(8).

# Versions one through three are supported. When a file carries the 64-bit block of
# versions two and three, the 32-bit block is skipped and the footer's TZ string
# becomes the rule zone applied after the last transition.

# [ Elements ]
# /parse/
	# Unpack the data of a TZif file into a &Data instance.
# /zone/
	# Construct a &.zones.DateTimeZone from the unpacked data.
# /load/
	# Read and construct the zone stored in a file.
"""
import struct
import collections

from . import constants
from . import zones
from . import posix

magic = b'TZif'

header_fields = (
	'ttisutcnt', # The number of UT/local indicators stored in the file.
	'ttisstdcnt', # The number of standard/wall indicators stored in the file.
	'leapcnt', # The number of leap seconds for which data is stored in the file.
	'timecnt', # The number of transition times for which data is stored in the file.
	'typecnt', # The number of local time types for which data is stored in the file (must not be zero).
	'charcnt', # The number of characters of time zone abbreviation strings stored in the file.
)
Header = collections.namedtuple('Header', header_fields)
prefix_struct = struct.Struct("!4sc15x")
header_struct = struct.Struct("!6l")
ttinfo_struct = struct.Struct("!lBB")

#: Transition time and leap second structures of each block; 32-bit and 64-bit.
transtime_structs = (struct.Struct("!l"), struct.Struct("!q"))
leappairs_structs = (struct.Struct("!ll"), struct.Struct("!ql"))

TimeType = collections.namedtuple('TimeType', ('abbreviation', 'offset', 'isdst'))

Data = collections.namedtuple('Data', (
	'version',
	'transitions',
	'indices',
	'types',
	'leaps',
	'isstd',
	'isut',
	'footer',
))

class FormatError(ValueError):
	"""
	# The data was not a well formed TZif file.
	"""

def block_size(header, wide):
	"""
	# The size of the data block following &header.
	"""
	time = 8 if wide else 4
	return (
		header.timecnt * time +
		header.timecnt +
		header.typecnt * ttinfo_struct.size +
		header.charcnt +
		header.leapcnt * (time + 4) +
		header.ttisstdcnt +
		header.ttisutcnt
	)

def parse_block(header, data, wide):
	"""
	# Unpack the data block described by &header.

	# [ Returns ]
	# `(transitions, indices, types, leaps, isstd, isut)`
	"""
	transtime = transtime_structs[wide]
	leappairs = leappairs_structs[wide]
	y = data

	end = header.timecnt * transtime.size
	transitions = tuple(x[0] for x in transtime.iter_unpack(bytes(y[:end])))
	y = y[end:]

	indices = tuple(bytes(y[:header.timecnt]))
	y = y[header.timecnt:]

	end = ttinfo_struct.size * header.typecnt
	ttinfo = list(ttinfo_struct.iter_unpack(bytes(y[:end])))
	y = y[end:]

	abbr = bytes(y[:header.charcnt])
	y = y[header.charcnt:]

	end = leappairs.size * header.leapcnt
	leaps = tuple(leappairs.iter_unpack(bytes(y[:end])))
	y = y[end:]

	isstd = tuple(bytes(y[:header.ttisstdcnt]))
	y = y[header.ttisstdcnt:]

	isut = tuple(bytes(y[:header.ttisutcnt]))

	# Append a NUL terminator to guarantee that abbr.find() will not return -1.
	abbr += b'\0'
	types = tuple(
		TimeType(abbr[i:abbr.find(b'\0', i)].decode('ascii', 'replace'), offset, bool(isdst))
		for offset, isdst, i in ttinfo
	)

	if any(i >= len(types) for i in indices):
		raise FormatError("transition type index out of range")

	return (transitions, indices, types, leaps, isstd, isut)

def read_header(data):
	if bytes(data[:len(magic)]) != magic:
		return None, None, data
	if len(data) < prefix_struct.size + header_struct.size:
		raise FormatError("truncated header")
	ident, version = prefix_struct.unpack(bytes(data[:prefix_struct.size]))
	data = data[prefix_struct.size:]
	header = Header(*header_struct.unpack(bytes(data[:header_struct.size])))
	return version, header, data[header_struct.size:]

def parse(data):
	"""
	# Given TZif data, identify the version and unpack the time zone information.

	# [ Returns ]
	# &Data or &None when &data is not TZif.
	"""
	data = memoryview(data)
	version, header, rest = read_header(data)
	if header is None:
		return None

	if version == b'\0':
		return Data(1, *parse_block(header, rest, False), None)

	# Skip the 32-bit block in favor of the 64-bit block.
	rest = rest[block_size(header, False):]
	v2version, header, rest = read_header(rest)
	if header is None:
		raise FormatError("missing 64-bit header")

	size = block_size(header, True)
	fields = parse_block(header, rest, True)

	footer = bytes(rest[size:]).strip(b'\n').decode('ascii') or None
	return Data(int(version.decode('ascii')), *fields, footer)

def zone(id, data):
	"""
	# Construct the zone described by the parsed TZif &data.

	# The first local time type applies before the first transition. The standard
	# offset of a daylight saving type is the offset of the standard type before it.
	"""
	types = data.types
	tail = None
	if data.footer:
		tail = posix.parse(data.footer, id)

	first = types[0]
	standard = first.offset * 1000 if not first.isdst else (first.offset - 3600) * 1000

	transitions = [constants.long_min]
	wall = [first.offset * 1000]
	std = [standard]
	names = [first.abbreviation]

	for seconds, i in zip(data.transitions, data.indices):
		t = types[i]
		offset = t.offset * 1000
		if not t.isdst:
			standard = offset
		elif standard == offset:
			standard = offset - constants.millis_per_hour

		if (offset, standard, t.abbreviation) == (wall[-1], std[-1], names[-1]):
			continue

		instant = seconds * 1000
		if instant <= transitions[-1]:
			continue

		transitions.append(instant)
		wall.append(offset)
		std.append(standard)
		names.append(t.abbreviation)

	if len(transitions) == 1 and (tail is None or tail.is_fixed()):
		return zones.FixedZone(id, names[0], wall[0], std[0])

	return zones.TransitionZone(id, transitions, wall, std, names, tail)

def is_tzif(path):
	"""
	# Whether the file at &path begins with the TZif magic.
	"""
	with open(path, 'rb') as f:
		return f.read(len(magic)) == magic

def load(path, id):
	"""
	# Read the zone stored at &path.

	# [ Returns ]
	# The zone or &None when the file is not TZif.
	"""
	with open(path, 'rb') as f:
		d = parse(f.read())
	if d is None:
		return None
	return zone(id, d)
