from .. import library as libtime

eastern_rule = 'EST5EDT,M3.2.0,M11.1.0'

def test_zone(test):
	test/(libtime.zone('UTC') is libtime.utc) == True
	test/libtime.zone(eastern_rule).rule.dst_abbrev == 'EDT'

def test_calendar(test):
	test/(libtime.calendar().zone is libtime.utc) == True
	test/libtime.calendar(eastern_rule).zone.name == eastern_rule
	iso = libtime.calendar(identifier='iso8601')
	test/(iso.first_weekday, iso.minimum_days_in_first_week) == (2, 4)
	test/libtime.calendar(first_weekday=2).first_weekday == 2

def test_engine(test):
	e = libtime.engine(libtime.calendar())
	test/e.to_instant(libtime.FieldSet(year=2001)) == libtime.Instant(0)
	test/isinstance(libtime.engine().calendar, libtime.Current) == True

def test_formatter(test):
	f = libtime.formatter(libtime.engine(libtime.calendar()), locale='en_GB')
	test/f.format(libtime.Instant(0), date_style='medium') == '1 Jan 2001'

def test_range(test):
	start = libtime.Instant(0)
	hours = list(libtime.range(start, start.elapse(day=1), libtime.Measure.of(hour=1)))
	test/len(hours) == 24
	test/hours[-1] == start.elapse(hour=23)

def test_business_days(test):
	e = libtime.engine(libtime.calendar())
	days = libtime.business_days(libtime.Instant(0), e)
	test/len(days) == 5
	test/days[0] == libtime.Instant(0)
	test/days[-1] == libtime.Instant(0).elapse(day=4)

def test_now(test):
	test/libtime.now(libtime.FixedClock(0)) == libtime.Instant(0)

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
