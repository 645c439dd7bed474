"""
# Print the current date and time in a zone.

# With no arguments, the zone selected by the environment is used:

#!syntax/sh
	python -m almanac.time.bin.clock America/New_York
	python -m almanac.time.bin.clock --repeat UTC

# `--repeat` prints every 64 milliseconds using carriage returns to overwrite
# the previous display.
"""
import sys
import time
from .. import calendars
from .. import core
from .. import engine
from .. import format
from .. import sysclock
from .. import views

def local_timestamp(zone, clock=None):
	"""
	# The current time as an ISO-8601 string in &zone.
	"""
	f = format.Formatter(engine.Engine(calendars.CalendarSystem(zone=zone)))
	return f.format(sysclock.now(clock), 'iso8601')

def main(argv, stdout=sys.stdout, stderr=sys.stderr, clock=None, directory=views.directory):
	repeat = False
	if argv[:1] == ['--repeat']:
		repeat = True
		argv = argv[1:]

	try:
		if argv:
			zone = directory.zone_by_name(argv[0])
		else:
			zone = directory.default()
	except core.UnknownZoneOrLocale as err:
		stderr.write("unknown zone: %s\n" %(err.identifier,))
		return 1

	if not repeat:
		stdout.write(local_timestamp(zone, clock) + "\n")
		return 0

	try:
		while True:
			stdout.write("   " + local_timestamp(zone, clock) + "\r")
			stdout.flush()
			time.sleep(0.064)
	except KeyboardInterrupt:
		stdout.write("\r\n")
	return 0

if __name__ == '__main__':
	sys.exit(main(sys.argv[1:]))
