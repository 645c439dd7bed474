import os
import os.path
import struct
import tempfile

from .. import core
from .. import gregorian
from .. import types
from .. import tzif
from .. import views

eastern_rule = 'EST5EDT,M3.2.0,M11.1.0'

def at(y, m, d, h=0, mi=0, s=0):
	days = gregorian.days_from_date((y, m, d)) - types.reference_days
	return types.Instant.of(day=days, hour=h, minute=mi, second=s)

def unix(y, m, d, h=0):
	return (gregorian.days_from_date((y, m, d)) - tzif.unix_days) * 86400 + (h * 3600)

def tzif_bytes(transitions, ttinfos, chars, footer=None, version=b'2'):
	"""
	# Construct TZif data holding &transitions, `(timestamp, type index)` pairs,
	# and &ttinfos, `(offset, isdst, abbreviation index)` triples.
	"""
	def block(code):
		header = tzif.header_struct.pack(
			tzif.magic, version, 0, 0, 0, len(transitions), len(ttinfos), len(chars)
		)
		return b''.join([
			header,
			struct.pack('!%d%s' %(len(transitions), code), *[x[0] for x in transitions]),
			bytes([x[1] for x in transitions]),
			b''.join(tzif.ttinfo_struct.pack(*x) for x in ttinfos),
			chars,
		])

	if version == b'\0':
		return block('l')

	data = block('l') + block('q')
	if footer is not None:
		data += b'\n' + footer.encode('ascii') + b'\n'
	return data

eastern_types = [(-18000, 0, 0), (-14400, 1, 4)]
eastern_chars = b'EST\0EDT\0'

def eastern_data():
	return tzif_bytes([
			(unix(2007, 3, 11, 7), 1),
			(unix(2007, 11, 4, 6), 0),
		],
		eastern_types, eastern_chars, footer=eastern_rule,
	)

def test_tzif_parse(test):
	d = tzif.parse(eastern_data())
	test/d.version == 2
	test/d.footer == eastern_rule
	test/len(d.types) == 2
	test/d.types[0].tz_abbrev == 'EST'
	test/d.types[1].tz_offset == -14400
	test/d.types[1].tz_isdst == True
	test/[x[0] for x in d.transitions] == [unix(2007, 3, 11, 7), unix(2007, 11, 4, 6)]
	test/d.transitions[0][1].tz_abbrev == 'EDT'
	test/d.leaps == ()

def test_tzif_parse_version_one(test):
	d = tzif.parse(tzif_bytes([], [(0, 0, 0)], b'UTC\0', version=b'\0'))
	test/d.version == 1
	test/d.footer == None
	test/d.transitions == []
	test/d.types[0].tz_abbrev == 'UTC'

def test_tzif_invalid(test):
	test/ValueError ^ (lambda: tzif.parse(b'TZxf' + bytes(60)))
	test/ValueError ^ (lambda: tzif.parse(b'TZif'))
	# Transition referring to a missing type.
	data = tzif_bytes([(0, 3)], [(0, 0, 0)], b'UTC\0', version=b'\0')
	test/ValueError ^ (lambda: tzif.parse(data))

def test_parse_rule(test):
	r = tzif.parse_rule(eastern_rule)
	test/r.std_offset == -18000
	test/r.std_abbrev == 'EST'
	test/r.dst_offset == -14400
	test/r.dst_abbrev == 'EDT'
	test/r.start == ('M', 3, 2, 0, 7200)
	test/r.end == ('M', 11, 1, 0, 7200)

	r = tzif.parse_rule('<+0530>-5:30')
	test/r.std_offset == 19800
	test/r.std_abbrev == '+0530'
	test/r.dst_abbrev == None

	r = tzif.parse_rule('CET-1CEST,M3.5.0,M10.5.0/3')
	test/r.std_offset == 3600
	test/r.dst_offset == 7200
	test/r.end == ('M', 10, 5, 0, 10800)

	# Daylight zones without dates use the defaults.
	test/tzif.parse_rule('CST6CDT').start == ('M', 3, 2, 0, 7200)

	test/ValueError ^ (lambda: tzif.parse_rule('America/New_York'))
	test/ValueError ^ (lambda: tzif.parse_rule('EST5EDT,M13.2.0,M11.1.0'))

def test_rule_transitions(test):
	r = tzif.parse_rule(eastern_rule)
	test/tzif.rule_transitions(r, 2024) == (
		(unix(2024, 3, 10, 7), True),
		(unix(2024, 11, 3, 6), False),
	)
	# The fifth week clamps to the last occurrence.
	cet = tzif.parse_rule('CET-1CEST,M3.5.0,M10.5.0/3')
	test/tzif.rule_transitions(cet, 2024) == (
		(unix(2024, 3, 31, 1), True),
		(unix(2024, 10, 27, 1), False),
	)
	test/tzif.rule_transitions(tzif.parse_rule('UTC0'), 2024) == ()

def test_rule_offset(test):
	r = tzif.parse_rule(eastern_rule)
	test/tzif.rule_offset(r, unix(2024, 3, 10, 7) - 1) == (-18000, 'EST', False)
	test/tzif.rule_offset(r, unix(2024, 3, 10, 7)) == (-14400, 'EDT', True)
	test/tzif.rule_offset(r, unix(2024, 7, 1)) == (-14400, 'EDT', True)
	test/tzif.rule_offset(r, unix(2024, 12, 25)) == (-18000, 'EST', False)
	test/tzif.rule_offset(r, unix(2025, 1, 1)) == (-18000, 'EST', False)

def test_offset(test):
	o = views.Zone.Offset((-18000, 'EST', 'std'))
	test/o.magnitude == -18000
	test/o.iso == '-05:00'
	test/o.is_dst == False
	test/views.Zone.Offset((19800, 'IST', 'std')).iso == '+05:30'
	test/views.Zone.Offset((0, 'UTC', 'std')).iso == '+00:00'
	test/o.measure == types.Measure.of(hour=-5)
	test/o == views.Zone.Offset((-18000, 'EST', 'std'))
	test/o != views.Zone.Offset((-18000, 'EST', 'dst'))

def test_fixed_zone(test):
	z = views.Zone.fixed(3600)
	test/z.is_fixed == True
	test/z.find(at(2024, 7, 1)).magnitude == 3600
	test/z.default.abbreviation == '+01:00'
	test/z.slice(at(2000, 1, 1), at(2030, 1, 1)) == []
	test/views.utc.find(types.Instant(0)).abbreviation == 'UTC'

def test_rule_zone_find(test):
	z = views.Zone.from_rule(eastern_rule)
	test/z.is_fixed == False
	test/z.find(at(2024, 3, 10, 6, 59, 59)).abbreviation == 'EST'
	test/z.find(at(2024, 3, 10, 7)).abbreviation == 'EDT'
	test/z.find(at(2024, 11, 3, 5, 59, 59)).abbreviation == 'EDT'
	test/z.find(at(2024, 11, 3, 6)).abbreviation == 'EST'

	# Standard only rules are fixed.
	test/views.Zone.from_rule('JST-9').is_fixed == True

def test_localize(test):
	z = views.Zone.from_rule(eastern_rule)
	wall, offset = z.localize(at(2024, 7, 4, 16))
	test/wall == at(2024, 7, 4, 12)
	test/offset.abbreviation == 'EDT'

def test_normalize(test):
	z = views.Zone.from_rule(eastern_rule)
	wall, offset = z.localize(at(2024, 3, 10, 6))
	test/offset.abbreviation == 'EST'

	# An hour later in EST is in daylight time.
	n_wall, n_offset = z.normalize(offset, types.Instant(wall).elapse(hour=1))
	test/n_offset.abbreviation == 'EDT'
	test/n_wall == at(2024, 3, 10, 3)

	same = types.Instant(wall).elapse(minute=1)
	test/z.normalize(offset, same) == (same, offset)

def test_candidates(test):
	z = views.Zone.from_rule(eastern_rule)

	# Regular
	c = z.candidates(at(2024, 7, 4, 12))
	test/c == [(at(2024, 7, 4, 16), views.Zone.Offset((-14400, 'EDT', 'dst')))]

	# Skipped
	test/z.candidates(at(2024, 3, 10, 2, 30)) == []

	# Repeated; earliest first.
	c = z.candidates(at(2024, 11, 3, 1, 30))
	test/[x[0] for x in c] == [at(2024, 11, 3, 5, 30), at(2024, 11, 3, 6, 30)]
	test/[x[1].abbreviation for x in c] == ['EDT', 'EST']

def test_gap(test):
	z = views.Zone.from_rule(eastern_rule)
	transition, before, after = z.gap(at(2024, 3, 10, 2, 30))
	test/transition == at(2024, 3, 10, 7)
	test/before.abbreviation == 'EST'
	test/after.abbreviation == 'EDT'

def test_rule_zone_slice(test):
	z = views.Zone.from_rule(eastern_rule)
	est = views.Zone.Offset((-18000, 'EST', 'std'))
	edt = views.Zone.Offset((-14400, 'EDT', 'dst'))
	test/z.slice(at(2024, 1, 1), at(2025, 1, 1)) == [
		(at(2023, 11, 5, 6), est),
		(at(2024, 3, 10, 7), edt),
		(at(2024, 11, 3, 6), est),
	]

def test_tzif_zone(test):
	z = views.Zone.from_tzif_data(tzif.parse(eastern_data()), name='Test/Eastern')
	test/z.name == 'Test/Eastern'
	test/z.rule.dst_abbrev == 'EDT'
	test/len(z.transitions) == 2

	# Before the first transition, the first type.
	test/z.find(at(2000, 7, 1)).abbreviation == 'EST'
	test/z.find(at(2007, 7, 1)).abbreviation == 'EDT'
	test/z.find(at(2007, 12, 1)).abbreviation == 'EST'
	# Past the last transition, the footer rule.
	test/z.find(at(2030, 7, 1)).abbreviation == 'EDT'
	test/z.find(at(2030, 12, 1)).abbreviation == 'EST'

	edt = views.Zone.Offset((-14400, 'EDT', 'dst'))
	est = views.Zone.Offset((-18000, 'EST', 'std'))
	test/z.slice(at(2007, 1, 1), at(2009, 1, 1)) == [
		(at(2007, 3, 11, 7), edt),
		(at(2007, 11, 4, 6), est),
		(at(2008, 3, 9, 7), edt),
		(at(2008, 11, 2, 6), est),
	]

def test_tzif_zone_unreadable_footer(test):
	data = tzif_bytes([], eastern_types, eastern_chars, footer='nonsense')
	z = views.Zone.from_tzif_data(tzif.parse(data), name='Broken')
	test/z.rule == None
	test/z.find(at(2024, 7, 1)).abbreviation == 'EST'

def zoneinfo(test):
	path = test.exits.enter_context(tempfile.TemporaryDirectory())
	os.mkdir(os.path.join(path, 'Test'))
	with open(os.path.join(path, 'Test', 'Eastern'), 'wb') as f:
		f.write(eastern_data())
	with open(os.path.join(path, 'Test', 'Corrupt'), 'wb') as f:
		f.write(b'not tzif data')
	return path

def test_directory(test):
	path = zoneinfo(test)
	d = views.Directory(path)
	test/d.path == path

	z = d.zone_by_name('Test/Eastern')
	test/z.name == 'Test/Eastern'
	test/z.find(at(2024, 7, 1)).abbreviation == 'EDT'
	test/(d.zone_by_name('Test/Eastern') is z) == True

def test_directory_builtin(test):
	d = views.Directory(zoneinfo(test))
	test/(d.zone_by_name('UTC') is views.utc) == True
	test/(d.zone_by_name('Z') is views.utc) == True
	test/d.zone_by_name('GMT').default.abbreviation == 'GMT'

def test_directory_rule_fallback(test):
	d = views.Directory(zoneinfo(test))
	z = d.zone_by_name(eastern_rule)
	test/z.rule.std_abbrev == 'EST'
	test/z.name == eastern_rule

def test_directory_unknown(test):
	d = views.Directory(zoneinfo(test))
	for name in ('Test/Missing', '../Test/Eastern', '/etc/passwd', '', 'Test/Corrupt'):
		with test/core.UnknownZoneOrLocale as exc:
			d.zone_by_name(name)
		test/exc().identifier == name

def test_directory_environment(test):
	path = zoneinfo(test)
	environ = {}
	d = views.Directory(environ=environ)
	test/d.path == tzif.tzdir

	environ['TZDIR'] = path
	test/d.path == path
	test/d.zone_by_name('Test/Eastern').name == 'Test/Eastern'

def test_directory_default(test):
	path = zoneinfo(test)
	test/(views.Directory(path, environ={'TZ': 'UTC'}).default() is views.utc) == True
	test/(views.Directory(path, environ={'TZ': ''}).default() is views.utc) == True

	d = views.Directory(path, environ={'TZ': ':Test/Eastern'})
	test/d.default().name == 'Test/Eastern'

	d = views.Directory(path, environ={'TZ': eastern_rule})
	test/d.default().rule.dst_abbrev == 'EDT'

	d = views.Directory(path, environ={'TZ': os.path.join(path, 'Test', 'Eastern')})
	test/d.default().find(at(2024, 1, 1)).abbreviation == 'EST'

	d = views.Directory(path, environ={'TZ': 'Nowhere/Zone'})
	test/core.UnknownZoneOrLocale ^ d.default

def test_system_zone(test):
	"""
	# Check the transition of America/Los_Angeles on 2019-11-03.
	# If this test fails, it *may* be due to timezone database changes.
	"""
	test.skip(not os.path.isfile(os.path.join(tzif.tzdir, 'America', 'Los_Angeles')))

	la = views.Directory(tzif.tzdir).zone_by_name('America/Los_Angeles')
	pit = at(2019, 11, 3, 9)
	test/la.find(pit.rollback(second=1)).is_dst == True
	test/la.find(pit).is_dst == False
	test/la.find(pit.elapse(second=1)).abbreviation == 'PST'

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
