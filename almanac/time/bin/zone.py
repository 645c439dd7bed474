"""
# Print the transitions of a zone within a range of years.

#!syntax/sh
	python -m almanac.time.bin.zone America/Los_Angeles 2006 2008
	python -m almanac.time.bin.zone 'EST5EDT,M3.2.0,M11.1.0' 2030

# The zone selected by the environment is used when no zone is named; the
# current year when no years are given.
"""
import sys
from .. import core
from .. import fields
from .. import sysclock
from .. import views
from .. import engine
from .. import calendars

def transitions(zone, start_year, stop_year):
	"""
	# The transitions of &zone occurring from the start of &start_year up to
	# the start of &stop_year.
	"""
	e = engine.Engine(calendars.CalendarSystem())
	start = e.to_instant(fields.FieldSet(year=start_year))
	stop = e.to_instant(fields.FieldSet(year=stop_year))
	return [x for x in zone.slice(start, stop) if x[0] >= start]

def print_zone_transitions(zone, start_year, stop_year, stdout=sys.stdout):
	for transition, offset in transitions(zone, start_year, stop_year):
		stdout.write("%s: %s %s\n" %(transition.iso(), offset.iso, offset.abbreviation))

def main(argv, stdout=sys.stdout, stderr=sys.stderr, clock=None, directory=views.directory):
	try:
		if argv and not argv[0].lstrip('-').isdigit():
			zone = directory.zone_by_name(argv[0])
			argv = argv[1:]
		else:
			zone = directory.default()
	except core.UnknownZoneOrLocale as err:
		stderr.write("unknown zone: %s\n" %(err.identifier,))
		return 1

	try:
		years = [int(x) for x in argv[:2]]
	except ValueError:
		stderr.write("years must be integers\n")
		return 2

	if not years:
		e = engine.Engine(calendars.CalendarSystem(zone=zone))
		years = [e.component('year', sysclock.now(clock))]
	if len(years) == 1:
		years.append(years[0] + 1)

	print_zone_transitions(zone, years[0], years[1], stdout)
	return 0

if __name__ == '__main__':
	sys.exit(main(sys.argv[1:]))
