"""
# Primary public module.

# Provides access to the time types, &Instant, &Measure, and &Interval, the
# calendar &FieldSet, the &Engine performing calendar arithmetic, and the
# &Formatter, along with constructors for their common configurations.

#!syntax/python
	from almanac.time import library as libtime

	e = libtime.engine(libtime.calendar('Europe/Paris'))
	pit = e.to_instant(libtime.FieldSet(year=2024, month=7, day=14, hour=21))
	print(libtime.formatter(e).format(pit, date_style='full', time_style='short'))
"""
from . import core
from . import views

from .types import Order, Measure, Instant, Interval
from .fields import FieldSet
from .calendars import CalendarSystem, Current, current
from .engine import Engine
from .format import Formatter
from .locales import LocaleData, Catalog
from .locales import standard as locales
from .sysclock import now, since, SystemClock, FixedClock

__shortname__ = 'libtime'

Zone = views.Zone
Directory = views.Directory
utc = views.utc

def zone(name:str=None, directory=views.directory) -> views.Zone:
	"""
	# Return the Zone identified by &name; the zone selected by the environment
	# when &name is &None.
	"""
	if name is None:
		return directory.default()
	return directory.zone_by_name(name)

def calendar(zone=None, identifier='gregorian', **settings) -> CalendarSystem:
	"""
	# Construct a &CalendarSystem in the &zone, a &Zone or its name, or UTC
	# when &zone is &None.
	"""
	if zone is None:
		zone = utc
	elif isinstance(zone, str):
		zone = views.directory.zone_by_name(zone)

	if identifier == 'iso8601':
		return CalendarSystem.iso8601(zone).replace(**settings)
	return CalendarSystem(identifier, zone, **settings)

def engine(calendar=None, clock=None) -> Engine:
	"""
	# Construct an &Engine for the &calendar, a system or provider; the
	# &current calendar when &None.
	"""
	return Engine(calendar if calendar is not None else current, clock=clock)

def formatter(engine=None, locale=None) -> Formatter:
	"""
	# Construct a &Formatter using the builtin locales.
	"""
	return Formatter(engine, locales=locales, locale=locale)

def range(start, stop, step):
	"""
	# Construct an iterator producing instants between the given &start and
	# &stop separated by the &Measure, &step.

	#!syntax/python
		hours = list(libtime.range(start, start.elapse(day=1), Measure.of(hour=1)))
	"""
	return Interval.between(start, stop).points(step)

def business_days(pit, engine):
	"""
	# Return the starting instants of the days in the week of &pit that are not
	# weekend days of the &engine's calendar.
	"""
	week = engine.interval_of('week', pit)
	days = []
	day = week.start
	while day < week.end:
		if not engine.is_weekend(day):
			days.append(day)
		day = engine.add_fields(FieldSet(day=1), day)
	return days
