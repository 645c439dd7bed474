"""
# Read TZif, time zone information, files (zic output) and POSIX TZ rule strings.

# &parse unpacks the version 1 block of a TZif file, or the 64-bit block of
# version 2 and later files along with the footer rule that extends the zone
# past its last transition. &parse_rule reads the rule strings found in the
# footer and in the `TZ` environment variable, and &rule_transitions expands
# a rule into the transitions of a given year.

# All times in this module are unix timestamps in seconds and all offsets
# are seconds east of UTC.
"""
import re
import struct
import functools
import collections

from . import gregorian
from . import week

magic = b'TZif'
tzdir = '/usr/share/zoneinfo'
tzdefault = '/etc/localtime'
tzenviron = 'TZ'
tzdirenviron = 'TZDIR'

header_fields = (
	'tzh_ttisutcnt',  # The number of UT/local indicators stored in the file.
	'tzh_ttisstdcnt', # The number of standard/wall indicators stored in the file.
	'tzh_leapcnt',    # The number of leap seconds for which data is stored in the file.
	'tzh_timecnt',    # The number of transition times for which data is stored in the file.
	'tzh_typecnt',    # The number of local time types stored in the file (must not be zero).
	'tzh_charcnt',    # The number of characters of time zone abbreviation strings.
)
tzinfo_header = collections.namedtuple('tzinfo_header', header_fields)

# Magic, version, fifteen reserved bytes, then the counts.
header_struct = struct.Struct("!4sc15x6l")

ttinfo_fields = (
	'tt_utoff',
	'tt_isdst',
	'tt_desigidx',
)
tzinfo_ttinfo = collections.namedtuple('tzinfo_ttinfo', ttinfo_fields)
ttinfo_struct = struct.Struct("!lBB")

# Transition time and leap second record codes by block.
time_codes = {
	1: ('l', struct.Struct("!ll")),
	2: ('q', struct.Struct("!ql")),
}

tzinfo = collections.namedtuple('tzinfo', (
	'tz_abbrev',
	'tz_offset',
	'tz_isdst',
	'tz_isstd',
	'tz_isut',
))

Data = collections.namedtuple('Data', (
	'version',
	'types',
	'transitions',
	'leaps',
	'footer',
))

def parse_header(data, offset=0):
	"""
	# Unpack the header at &offset returning the version byte and the counts.
	"""
	if len(data) - offset < header_struct.size:
		raise ValueError("truncated TZif header")

	ident, version, *counts = header_struct.unpack_from(data, offset)
	if ident != magic:
		raise ValueError("not a TZif file")

	return version, tzinfo_header(*counts)

def parse_block(data, offset, header, block=1):
	"""
	# Unpack the data block following a header.

	# Returns the offset following the block and the tuple:
	# `(transtimes, types, timetypinfo, leaps, isstd, isut, abbr)`.
	# See tzfile(5) for information about the fields.
	"""
	code, leap_struct = time_codes[block]
	h = header

	times = struct.unpack_from("!%d%s" %(h.tzh_timecnt, code), data, offset)
	offset += struct.calcsize("!%d%s" %(h.tzh_timecnt, code))

	# unsigned chars
	types = tuple(bytes(data[offset:offset+h.tzh_timecnt]))
	offset += h.tzh_timecnt

	timetypinfo = []
	for i in range(h.tzh_typecnt):
		timetypinfo.append(tzinfo_ttinfo(*ttinfo_struct.unpack_from(data, offset)))
		offset += ttinfo_struct.size

	abbr = bytes(data[offset:offset+h.tzh_charcnt])
	offset += h.tzh_charcnt

	leaps = []
	for i in range(h.tzh_leapcnt):
		leaps.append(leap_struct.unpack_from(data, offset))
		offset += leap_struct.size

	isstd = tuple(bytes(data[offset:offset+h.tzh_ttisstdcnt]))
	offset += h.tzh_ttisstdcnt

	isut = tuple(bytes(data[offset:offset+h.tzh_ttisutcnt]))
	offset += h.tzh_ttisutcnt

	if offset > len(data):
		raise ValueError("truncated TZif data block")

	return offset, (times, types, timetypinfo, tuple(leaps), isstd, isut, abbr)

def structure(version, block, footer=None):
	"""
	# Given the fields produced by &parse_block, make a more accessible structure.
	"""
	(transtimes, types, timetypinfo, leaps, isstd, isut, abbr) = block

	# Resolve the desigidx. Append a NUL terminator to the
	# string to guarantee that abbr.find() will not return -1.
	abbr += b'\0'

	ltt = []
	for i, x in enumerate(timetypinfo):
		name = abbr[x.tt_desigidx:abbr.find(b'\0', x.tt_desigidx)]
		ltt.append(tzinfo(
			tz_abbrev = name.decode('ascii'),
			tz_offset = x.tt_utoff,
			tz_isdst = bool(x.tt_isdst),
			tz_isstd = bool(isstd[i]) if i < len(isstd) else False,
			tz_isut = bool(isut[i]) if i < len(isut) else False,
		))

	for i in types:
		if i >= len(ltt):
			raise ValueError("transition refers to undefined local time type")

	transitions = sorted(zip(transtimes, map(ltt.__getitem__, types)), key=lambda x: x[0])
	return Data(version, tuple(ltt), transitions, leaps, footer)

def parse(data):
	"""
	# Given TZif data, identify the appropriate version and unpack the time
	# zone information into a &Data instance.

	# Files of version 2 and later are read from their 64-bit block and
	# carry their footer rule string, if any, as &Data.footer.
	"""
	data = memoryview(data)
	version, header = parse_header(data)
	offset, block = parse_block(data, header_struct.size, header, 1)

	if version == b'\0':
		return structure(1, block)

	version, header = parse_header(data, offset)
	offset, block = parse_block(data, offset + header_struct.size, header, 2)

	footer = None
	if bytes(data[offset:offset+1]) == b'\n':
		end = bytes(data[offset+1:]).find(b'\n')
		if end > 0:
			footer = bytes(data[offset+1:offset+1+end]).decode('ascii')

	return structure(int(version), block, footer)

def get_timezone_data(filepath):
	"""
	# Get the structured time zone data out of the specified file.
	"""
	with open(filepath, 'rb') as f:
		return parse(f.read())

# POSIX TZ rule strings.

Rule = collections.namedtuple('Rule', (
	'std_offset',
	'std_abbrev',
	'dst_offset',
	'dst_abbrev',
	'start',
	'end',
))

_name = r'(?:<([^>]+)>|([A-Za-z]{3,}))'
_offset = r'([+-]?\d{1,3}(?::\d{1,2}){0,2})'
_date = r'(J\d{1,3}|\d{1,3}|M\d{1,2}\.\d\.\d)'
_time = r'(?:/([+-]?\d{1,3}(?::\d{1,2}){0,2}))?'

rule_pattern = re.compile(
	'^' + _name + _offset +
	'(?:' + _name + _offset + '?' +
	'(?:,' + _date + _time + ',' + _date + _time + ')?)?$'
)

#: The transition dates used when a rule names a daylight zone without them.
default_dates = ('M3.2.0', 'M11.1.0')

def parse_duration(string):
	"""
	# Convert a POSIX `[+-]hh[:mm[:ss]]` string into seconds.
	"""
	sign = 1
	if string[:1] in ('+', '-'):
		if string[0] == '-':
			sign = -1
		string = string[1:]

	parts = [int(x) for x in string.split(':')]
	parts.extend([0] * (3 - len(parts)))
	h, m, s = parts
	return sign * ((h * 3600) + (m * 60) + s)

def parse_date(string, time=None):
	"""
	# Convert a POSIX rule date and optional time into `(kind, a, b, c, seconds)`.
	"""
	seconds = 7200 if time is None else parse_duration(time)

	if string[0] == 'J':
		n = int(string[1:])
		if not 1 <= n <= 365:
			raise ValueError("julian day out of range: " + string)
		return ('J', n, 0, 0, seconds)
	elif string[0] == 'M':
		m, w, d = [int(x) for x in string[1:].split('.')]
		if not (1 <= m <= 12 and 1 <= w <= 5 and 0 <= d <= 6):
			raise ValueError("month rule out of range: " + string)
		return ('M', m, w, d, seconds)
	else:
		n = int(string)
		if not 0 <= n <= 365:
			raise ValueError("day of year out of range: " + string)
		return ('N', n, 0, 0, seconds)

def parse_rule(string):
	"""
	# Parse a POSIX TZ rule string such as `EST5EDT,M3.2.0,M11.1.0` into a &Rule.

	# Offsets in the string are west of Greenwich; the &Rule carries offsets
	# east of UTC. A rule naming a daylight zone without dates uses the
	# &default_dates.
	"""
	m = rule_pattern.match(string)
	if m is None:
		raise ValueError("invalid TZ rule string: " + repr(string))

	(sq, sp, so, dq, dp, do, start, start_time, end, end_time) = m.groups()
	std_offset = -parse_duration(so)
	std_abbrev = sq or sp

	dst_abbrev = dq or dp
	if dst_abbrev is None:
		return Rule(std_offset, std_abbrev, None, None, None, None)

	if do is None:
		dst_offset = std_offset + 3600
	else:
		dst_offset = -parse_duration(do)

	if start is None:
		start, end = default_dates

	return Rule(
		std_offset, std_abbrev,
		dst_offset, dst_abbrev,
		parse_date(start, start_time),
		parse_date(end, end_time),
	)

def rule_day(date, year):
	"""
	# The gregorian day count identified by the rule &date in &year.
	"""
	kind, a, b, c, seconds = date

	if kind == 'J':
		# Julian days never count February 29.
		d = gregorian.days_from_date((year, 1, a))
		if a >= 60 and gregorian.year_is_leap(year):
			d += 1
	elif kind == 'N':
		d = gregorian.days_from_date((year, 1, 1)) + a
	else:
		first = gregorian.days_from_date((year, a, 1))
		last = first + gregorian.days_in_month(year, a)
		d = week.next_weekday(first, c + 1) + ((b - 1) * week.days_in_week)
		while d >= last:
			d -= week.days_in_week

	return d

#: Gregorian day count of the unix epoch.
unix_days = gregorian.days_from_date((1970, 1, 1))

def year_of(timestamp):
	"""
	# The UTC gregorian year of the unix &timestamp.
	"""
	return gregorian.date_from_days(unix_days + (timestamp // 86400))[0]

@functools.lru_cache(maxsize=512)
def rule_transitions(rule, year):
	"""
	# The transitions of &rule in &year as ordered `(timestamp, is_dst)` pairs.
	# Rules without a daylight zone have no transitions.
	"""
	if rule.dst_abbrev is None:
		return ()

	start = rule_day(rule.start, year)
	end = rule_day(rule.end, year)

	# The start is given in standard time and the end in daylight time.
	start = ((start - unix_days) * 86400) + rule.start[-1] - rule.std_offset
	end = ((end - unix_days) * 86400) + rule.end[-1] - rule.dst_offset

	return tuple(sorted([(start, True), (end, False)]))

def rule_offset(rule, timestamp):
	"""
	# The `(offset, abbreviation, is_dst)` in effect at &timestamp according to &rule.
	"""
	std = (rule.std_offset, rule.std_abbrev, False)
	if rule.dst_abbrev is None:
		return std
	dst = (rule.dst_offset, rule.dst_abbrev, True)

	y = year_of(timestamp)
	current = None
	for year in (y - 1, y, y + 1):
		for t, isdst in rule_transitions(rule, year):
			if t > timestamp:
				break
			current = isdst
		else:
			continue
		break

	return dst if current else std
