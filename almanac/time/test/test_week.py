from .. import gregorian
from .. import week

def days(y, m, d):
	return gregorian.days_from_date((y, m, d))

def test_weekday(test):
	test/week.weekday(0) == 7 # (0, 1, 1) is a Saturday
	test/week.weekday(days(2001, 1, 1)) == 2
	test/week.weekday(days(2024, 1, 1)) == 2
	test/week.weekday(days(2024, 1, 3)) == 4
	test/week.weekday(days(1969, 7, 20)) == 1
	test/week.weekday(-1) == 6

def test_weekday_names(test):
	test/week.weekday_name_to_number['sunday'] == 1
	test/week.weekday_name_to_number['sat'] == 7
	test/week.days_in_week == 7

def test_position(test):
	monday = days(2024, 1, 1)
	test/week.position(1, monday) == 1
	test/week.position(2, monday) == 0
	test/week.position(2, monday - 1) == 6

def test_first_week_start_iso(test):
	# 2021 begins on a Friday; its first ISO week starts on the fourth.
	test/week.first_week_start(2, 4, days(2021, 1, 1)) == days(2021, 1, 4)
	# 2020 begins on a Wednesday; the first week includes the end of 2019.
	test/week.first_week_start(2, 4, days(2020, 1, 1)) == days(2019, 12, 30)

def test_first_week_start_minimal(test):
	# With a one day minimum, the week containing the first is always the first.
	test/week.first_week_start(1, 1, days(2021, 1, 1)) == days(2020, 12, 27)
	test/week.first_week_start(1, 1, days(2023, 1, 1)) == days(2023, 1, 1)

def test_week_of_period(test):
	jan1 = days(2021, 1, 1)
	test/week.week_of_period(2, 4, jan1, jan1) == 0
	test/week.week_of_period(2, 4, jan1, days(2021, 1, 4)) == 1
	test/week.week_of_period(2, 4, jan1, days(2021, 1, 10)) == 1
	test/week.week_of_period(2, 4, jan1, days(2021, 1, 11)) == 2
	test/week.week_of_period(1, 1, jan1, jan1) == 1

def test_next_previous_weekday(test):
	wednesday = days(2024, 1, 3)
	test/week.next_weekday(wednesday, 2) == days(2024, 1, 8)
	test/week.next_weekday(wednesday, 4) == wednesday
	test/week.previous_weekday(wednesday, 2) == days(2024, 1, 1)
	test/week.previous_weekday(wednesday, 4) == wednesday

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
