"""
[ About ]
---------

almanac.time is a date and time package based on the built-in Python &int.
Instants are nanosecond counts from the reference date, 2001-01-01T00:00:00
UTC, and measures are signed nanosecond durations. Calendars, zones, and
locales are interpreted only when an &.engine.Engine or &.format.Formatter
is asked to do so, and those are always given their configuration
explicitly.

Calendar Support:

	- Proleptic Gregorian
	- ISO-8601 week numbering

The APIs are *not* compatible with the standard library's datetime module.

&.library will be referred to as `libtime` throughout the examples in this documentation.

#!/pl/python
	from almanac.time import library as libtime

Current date and time as a &.types.Instant:

#!/pl/python
	now = libtime.now() # the system clock
	fixed = libtime.now(libtime.FixedClock(0)) # 2001-01-01T00:00:00Z

[ Calendar Representation ]
---------------------------

Dates are described with sparse field sets; unset fields are &None and do
not constrain.

#!/pl/python
	e = libtime.engine(libtime.calendar('UTC'))
	pit = e.to_instant(libtime.FieldSet(year=1982, month=4, day=17))
	assert e.component('day', pit) == 17

Field sets are validated when they are converted. Days that do not exist and
fields that contradict each other raise &.core.UnresolvableDate:

#!/pl/python
	e.to_instant(libtime.FieldSet(year=2023, month=2, day=31)) # raises

[ Datetime Math ]
-----------------

Calendar arithmetic is performed in wall time and the day is clamped to the
end of shorter months:

#!/pl/python
	jan31 = e.to_instant(libtime.FieldSet(year=2024, month=1, day=31))
	feb29 = e.add_fields(libtime.FieldSet(month=1), jan31)

Questions like, "When is the next Monday at nine?", are answered by
searching for the next occurrence of a pattern:

#!/pl/python
	monday = e.next_occurrence(libtime.FieldSet(weekday=2, hour=9), now)

The search is bounded to one 400 year gregorian cycle and raises
&.core.NoMatch when it is exhausted.

[ Time Zones ]
--------------

Zones are read from the system's TZif files, or constructed from POSIX TZ
rule strings:

#!/pl/python
	la = libtime.zone('America/Los_Angeles')
	eastern = libtime.Zone.from_rule('EST5EDT,M3.2.0,M11.1.0')
	local_pit, offset = eastern.localize(now)

Wall times skipped or repeated by a transition are resolved by the policies
documented in &.engine.

[ Formatting ]
--------------

#!/pl/python
	f = libtime.formatter(e)
	f.format(pit, 'iso8601')
	f.format(pit, "EEEE, MMMM d, y 'at' h:mm a")
	f.format(pit, date_style='medium', time_style='short', locale='en_GB')
	f.parse('Sat, 17 Apr 1982 00:00:00 GMT', 'http')
"""
__pkg_bottom__ = True
