"""
# Protocols of the collaborators used by the time modules.

# Primarily, this module exists to document the interfaces that can be
# substituted: clocks, zone sources, locale sources, and calendar providers.
# The redundant method declarations are intentional.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class Clock(typing.Protocol):
	"""
	# Source of the current time.
	"""

	@abstractmethod
	def read(self) -> int:
		"""
		# The nanoseconds elapsed since the reference date, 2001-01-01T00:00:00 UTC.
		"""

@typing.runtime_checkable
class ZoneSource(typing.Protocol):
	"""
	# Source of time zone rules.
	"""

	@abstractmethod
	def zone_by_name(self, name:str):
		"""
		# Get the zone identified by &name.

		# Raises &.core.UnknownZoneOrLocale when the zone is not available.
		"""

@typing.runtime_checkable
class LocaleSource(typing.Protocol):
	"""
	# Source of locale display data.
	"""

	@abstractmethod
	def locale_data(self, identifier:str):
		"""
		# Get the &.locales.LocaleData identified by &identifier.

		# Raises &.core.UnknownZoneOrLocale when the locale is not available.
		"""

@typing.runtime_checkable
class CalendarProvider(typing.Protocol):
	"""
	# Source of a calendar system; queried once per engine operation.
	"""

	@abstractmethod
	def system(self):
		"""
		# The &.calendars.CalendarSystem in effect.
		"""
