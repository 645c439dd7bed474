"""
# Calendar system configuration.

# A &CalendarSystem selects the rules used to interpret instants as calendar
# fields: the zone, and the week numbering conventions. Systems are values;
# they are passed explicitly to &.engine.Engine and are never global.

# &Current is the provider of the "current" calendar. It reads the `TZ`
# environment variable each time it is queried so that the zone follows
# changes made while the process is running.
"""
import os
import dataclasses
from dataclasses import dataclass

from . import views

#: The supported calendar identifiers.
identifiers = ('gregorian', 'iso8601')

@dataclass(frozen=True)
class CalendarSystem(object):
	"""
	# The rules of a calendar: its zone and week conventions.

	# [ Properties ]
	# /identifier/
		# The calendar; `'gregorian'` or `'iso8601'`.
	# /zone/
		# The &views.Zone used to convert instants into wall time.
	# /first_weekday/
		# The weekday beginning a week; `1` is Sunday.
	# /minimum_days_in_first_week/
		# The number of days of a year, or month, that the week containing its
		# first day must have to be numbered as its first week.
	# /weekend/
		# The weekdays considered to be the weekend.
	"""

	identifier: (str) = 'gregorian'
	zone: (views.Zone) = views.utc
	first_weekday: (int) = 1
	minimum_days_in_first_week: (int) = 1
	weekend: (tuple) = (7, 1)

	def __post_init__(self):
		if self.identifier not in identifiers:
			raise ValueError("unknown calendar identifier: " + repr(self.identifier))
		if not 1 <= self.first_weekday <= 7:
			raise ValueError("first weekday must be within 1 and 7")
		if not 1 <= self.minimum_days_in_first_week <= 7:
			raise ValueError("minimum days in first week must be within 1 and 7")

	@classmethod
	def gregorian(Class, zone=views.utc, **settings):
		return Class('gregorian', zone, **settings)

	@classmethod
	def iso8601(Class, zone=views.utc):
		"""
		# The ISO-8601 calendar: weeks start on Monday and the first week of
		# a year is the one containing the year's first Thursday.
		"""
		return Class('iso8601', zone, first_weekday=2, minimum_days_in_first_week=4, weekend=(7, 1))

	def replace(self, **settings):
		"""
		# Create a new system with the given &settings changed.
		"""
		return dataclasses.replace(self, **settings)

	def system(self):
		# Systems provide themselves.
		return self

class Current(object):
	"""
	# Provider of the current calendar system whose zone is selected by the
	# environment at the time of each query.
	"""

	def __init__(self, identifier='gregorian', directory=None, environ=None, **settings):
		self.identifier = identifier
		self.settings = settings
		if directory is None:
			if environ is None:
				directory = views.directory
			else:
				directory = views.Directory(environ=environ)
		self.directory = directory

	def __repr__(self):
		return "%s(%r, %r)" %(self.__class__.__name__, self.identifier, self.directory)

	def system(self):
		"""
		# Construct the &CalendarSystem for the current environment.
		"""
		zone = self.directory.default()
		if self.identifier == 'iso8601':
			return CalendarSystem.iso8601(zone).replace(**self.settings)
		return CalendarSystem(self.identifier, zone, **self.settings)

#: The provider of the calendar selected by the process' environment.
current = Current()
