"""
# Proleptic Gregorian calendar functions and data.

# Days are counted from the first day of year zero, `(0, 1, 1)`, with
# astronomical year numbering: year zero is 1 BC, year -1 is 2 BC.
# The count is resolved against the 400 year Gregorian cycle, so negative
# days and years are supported without special cases.
"""
import operator
from . import calendar as callib

#: Number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: Number of years in a century.
years_in_century = 100

#: Number of years in a gregorian cycle.
years_in_cycle = centuries_in_cycle * years_in_century

#: English names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: Number of months in a year.
months_in_year = len(month_names)

#: Number of months in a quarter.
months_in_quarter = 3

#: Abbreviations for the english names of the months of the year.
month_abbreviations = tuple(x[:3] for x in month_names)

#: Finite map associating the names and abbreviations of the months with a zero-based index.
month_name_to_number = {
	month_names[i] : i for i in range(len(month_names))
}
month_name_to_number.update([
	(k[:3], v) for (k,v) in month_name_to_number.items()
])

#: Month lengths of a common year.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Month lengths of a leap year.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:]

# (title, repetitions, sub-nodes or month lengths)
leap_cycle = (
	('leap', 1, calendar_leap),
	('years', 3, calendar_year),
)

cycle = (
	'gregorian-cycle', 1, (
		# The first century of the cycle leaps every fourth year.
		('first-century', 25, leap_cycle),

		# The following centuries skip the leap day on their first year.
		('centuries', 3, (
			('first-year-exception', 4, calendar_year),
			('regular-cycle', 24, leap_cycle),
		)),
	)
)

calendar = callib.aggregate(cycle)

def resolve_by_months(months,
		_select_months = operator.itemgetter(0),
		_select_days = operator.itemgetter(1),
		_calendar = calendar,
	):
	return callib.resolve((_select_months, _select_days), months, _calendar)

def resolve_by_days(days,
		_select_months = operator.itemgetter(0),
		_select_days = operator.itemgetter(1),
		_calendar = calendar,
	):
	return callib.resolve((_select_days, _select_months), days, _calendar)

#: Total number of months in a Gregorian cycle.
months_in_cycle = months_in_year * years_in_cycle

#: Total number of days in a Gregorian cycle.
days_in_cycle = calendar[-1][1]

def year_is_leap(y):
	"""
	# Whether the gregorian calendar year, &y, has a leap day.
	"""
	return y % 4 == 0 and (y % 400 == 0 or y % 100 != 0)

def days_in_month(year, month):
	"""
	# Number of days in the one-based &month of &year.
	"""
	if month == 2 and year_is_leap(year):
		return 29
	return calendar_year[month - 1]

def days_in_year(year):
	"""
	# Number of days in &year; 365 or 366.
	"""
	return 366 if year_is_leap(year) else 365

def maximum_days_in_month(month):
	"""
	# Largest number of days the one-based &month has in any year.
	"""
	return calendar_leap[month - 1]

def quarter_of_month(month):
	"""
	# One-based quarter containing the one-based &month.
	"""
	return ((month - 1) // months_in_quarter) + 1

def first_month_of_quarter(quarter):
	return ((quarter - 1) * months_in_quarter) + 1

def month_from_days(days, _resolver = resolve_by_days):
	"""
	# Convert the given number of days to the zero-based month count containing the day.
	"""
	cycles, months, day, _d = _resolver(days)
	return (cycles * months_in_cycle) + months

def days_from_month(months, _resolver=resolve_by_months):
	"""
	# Convert the given zero-based month count to the number of days leading up to the month.
	"""
	cycles, day_of_cycle, moy, _d = _resolver(months)
	return (cycles * days_in_cycle) + day_of_cycle

def date_from_days(days, _resolver=resolve_by_days):
	"""
	# Convert the given days into a date in the common form: `(year, month, day)`.
	"""
	cycles, months, day, _d = _resolver(days)
	year_of_cycle, moy = divmod(months, months_in_year)
	return ((cycles * years_in_cycle) + year_of_cycle, moy + 1, day + 1)

def days_from_date(date, _resolver=resolve_by_months):
	"""
	# Convert a date in the common form, `(year, month, day)`, to the number
	# of days leading up to the date.

	# The day is not validated against the month; excess days overflow into
	# the following months.
	"""
	year, month, day = date
	cycles, day_of_cycle, moy, _d = _resolver((month - 1) + (year * months_in_year))
	return (cycles * days_in_cycle) + day_of_cycle + (day - 1)

def era_from_year(year):
	"""
	# Convert an astronomical year into `(era, year_of_era)`.
	# Era `1` is AD and era `0` is BC.
	"""
	if year > 0:
		return (1, year)
	return (0, 1 - year)

def year_from_era(era, year):
	"""
	# Convert a year of an era into an astronomical year.
	"""
	if era:
		return year
	return 1 - year
