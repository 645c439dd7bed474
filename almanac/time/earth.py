"""
# Earth-day based units of time and their nanosecond ratios.
"""
#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of days contained in a `week`.
days_in_week = 7

#: Number of nanoseconds contained in a `second`.
nanoseconds_in_second = 1000000000

#: Finite map of unit names to their size in nanoseconds.
nanoseconds = {
	'nanosecond': 1,
	'microsecond': 1000,
	'millisecond': 1000000,
	'second': nanoseconds_in_second,
}
nanoseconds['minute'] = nanoseconds['second'] * seconds_in_minute
nanoseconds['hour'] = nanoseconds['minute'] * minutes_in_hour
nanoseconds['day'] = nanoseconds['hour'] * hours_in_day
nanoseconds['week'] = nanoseconds['day'] * days_in_week

def timeofday(ns, divmod=divmod):
	"""
	# Split the nanoseconds elapsed since midnight into
	# `(hour, minute, second, nanosecond)`.
	"""
	s, n = divmod(ns, nanoseconds_in_second)
	m, s = divmod(s, seconds_in_minute)
	h, m = divmod(m, minutes_in_hour)
	return (h, m, s, n)

def nanoseconds_from_timeofday(hour, minute, second, nanosecond=0):
	"""
	# Combine the fields of a time of day into nanoseconds since midnight.
	"""
	return (
		hour * nanoseconds['hour'] +
		minute * nanoseconds['minute'] +
		second * nanoseconds['second'] +
		nanosecond
	)
