"""
# Week based measures of time: weekdays and week numbering.

# Weekdays are one-based starting with Sunday: `1` is Sunday and `7` is
# Saturday. Week numbering is parameterized by the first weekday of the week
# and the minimum number of days the first week of a year, or month, must
# have; `(1, 1)` is the common North American convention and `(2, 4)` is
# ISO-8601.
"""
#: English names of the days of the week.
weekday_names = (
	'sunday',
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = tuple(x[:3] for x in weekday_names)

#: Map of weekday names and abbreviations to a one-based weekday.
weekday_name_to_number = {
	weekday_names[i]: i + 1
	for i in range(len(weekday_names))
}
weekday_name_to_number.update([
	(k[:3], v) for (k,v) in weekday_name_to_number.items()
])

#: The zero-based weekday of day zero in &.gregorian, `(0, 1, 1)`: a Saturday.
datum = 6

def weekday(days):
	"""
	# The one-based weekday of the gregorian day count, &days.
	"""
	return ((days + datum) % days_in_week) + 1

def position(first_weekday, days):
	"""
	# Zero-based position of &days within a week starting on &first_weekday.
	"""
	return (weekday(days) - first_weekday) % days_in_week

def first_week_start(first_weekday, minimum_days, days):
	"""
	# The day that begins the first week of a period whose first day is &days.

	# The week containing &days is the first week when at least &minimum_days of
	# it fall within the period; otherwise, the first week is the following one.
	"""
	p = position(first_weekday, days)
	start = days - p
	if days_in_week - p < minimum_days:
		start += days_in_week
	return start

def week_of_period(first_weekday, minimum_days, period_start, days):
	"""
	# The one-based week of &days in the period beginning at &period_start.
	# Days preceding the first week are in week zero.
	"""
	start = first_week_start(first_weekday, minimum_days, period_start)
	return ((days - start) // days_in_week) + 1

def next_weekday(days, target):
	"""
	# The first day on or after &days whose weekday is &target.
	"""
	return days + ((target - weekday(days)) % days_in_week)

def previous_weekday(days, target):
	"""
	# The last day on or before &days whose weekday is &target.
	"""
	return days - ((weekday(days) - target) % days_in_week)
