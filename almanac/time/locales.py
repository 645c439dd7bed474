"""
# Locale display data for formatting.

# &LocaleData carries the names and style patterns used by &.format when a
# locale is requested. &Catalog is the locale source: a registry of
# &LocaleData by identifier with language fallback. &standard holds the
# builtin locales: `en_US_POSIX`, `en_US`, and `en_GB`.

# The pattern of &LocaleData.datetime_formats joins a time pattern, `{0}`,
# and a date pattern, `{1}`.
"""
import os
import logging
from dataclasses import dataclass, field

from . import core
from . import gregorian
from . import week

log = logging.getLogger(__name__)

#: The format styles in order of detail.
styles = ('none', 'short', 'medium', 'long', 'full')

_months = tuple(x.capitalize() for x in gregorian.month_names)
_weekdays = tuple(x.capitalize() for x in week.weekday_names)

@dataclass(frozen=True, eq=False)
class LocaleData(object):
	"""
	# Display names and style patterns of a locale.
	"""

	identifier: (str)
	month_names: (tuple) = _months
	month_abbreviations: (tuple) = tuple(x[:3] for x in _months)
	weekday_names: (tuple) = _weekdays
	weekday_abbreviations: (tuple) = tuple(x[:3] for x in _weekdays)
	quarter_names: (tuple) = ('1st quarter', '2nd quarter', '3rd quarter', '4th quarter')
	quarter_abbreviations: (tuple) = ('Q1', 'Q2', 'Q3', 'Q4')
	era_names: (tuple) = ('Before Christ', 'Anno Domini')
	era_abbreviations: (tuple) = ('BC', 'AD')
	am_pm: (tuple) = ('AM', 'PM')
	date_formats: (dict) = field(default_factory=dict)
	time_formats: (dict) = field(default_factory=dict)
	datetime_formats: (dict) = field(default_factory=dict)
	interval_separator: (str) = ' – '
	first_weekday: (int) = 1
	minimum_days_in_first_week: (int) = 1

	def pattern(self, date_style='none', time_style='none'):
		"""
		# The pattern for the given styles; an empty string when both are `'none'`.
		"""
		for style in (date_style, time_style):
			if style not in styles:
				raise ValueError("unknown format style: " + repr(style))

		date = self.date_formats.get(date_style, '')
		time = self.time_formats.get(time_style, '')

		if date and time:
			join = self.datetime_formats[date_style]
			return join.replace('{1}', date).replace('{0}', time)
		return date or time

en_US = LocaleData(
	'en_US',
	date_formats = {
		'short': 'M/d/yy',
		'medium': 'MMM d, y',
		'long': 'MMMM d, y',
		'full': 'EEEE, MMMM d, y',
	},
	time_formats = {
		'short': 'h:mm a',
		'medium': 'h:mm:ss a',
		'long': 'h:mm:ss a z',
		'full': 'h:mm:ss a zzzz',
	},
	datetime_formats = {
		'short': '{1}, {0}',
		'medium': '{1}, {0}',
		'long': "{1} 'at' {0}",
		'full': "{1} 'at' {0}",
	},
)

en_US_POSIX = LocaleData(
	'en_US_POSIX',
	date_formats = en_US.date_formats,
	time_formats = en_US.time_formats,
	datetime_formats = en_US.datetime_formats,
)

en_GB = LocaleData(
	'en_GB',
	am_pm = ('am', 'pm'),
	date_formats = {
		'short': 'dd/MM/y',
		'medium': 'd MMM y',
		'long': 'd MMMM y',
		'full': 'EEEE d MMMM y',
	},
	time_formats = {
		'short': 'HH:mm',
		'medium': 'HH:mm:ss',
		'long': 'HH:mm:ss z',
		'full': 'HH:mm:ss zzzz',
	},
	datetime_formats = {
		'short': '{1}, {0}',
		'medium': '{1}, {0}',
		'long': "{1} 'at' {0}",
		'full': "{1} 'at' {0}",
	},
	first_weekday = 2,
	minimum_days_in_first_week = 4,
)

def normalize(identifier):
	"""
	# Remove the codeset and modifier of a POSIX locale name and use
	# underscores as the separator: `en-GB.UTF-8` becomes `en_GB`.
	"""
	identifier = identifier.split('.', 1)[0].split('@', 1)[0]
	identifier = identifier.replace('-', '_')
	if identifier in ('C', 'POSIX', ''):
		return 'en_US_POSIX'
	return identifier

class Catalog(object):
	"""
	# Locale source of registered &LocaleData.

	# Lookups fall back from a territory specific identifier to its language
	# and from a language to its registered default.
	"""

	def __init__(self, locales=(), languages=None):
		self._locales = {}
		self.languages = dict(languages or {})
		for x in locales:
			self.register(x)

	def __repr__(self):
		return "%s(%r)" %(self.__class__.__name__, sorted(self._locales))

	def register(self, data):
		self._locales[data.identifier] = data

	def identifiers(self):
		return sorted(self._locales)

	def locale_data(self, identifier):
		"""
		# Get the &LocaleData identified by &identifier.

		# Raises &core.UnknownZoneOrLocale when neither the identifier nor its
		# language is registered.
		"""
		key = normalize(identifier)
		if key in self._locales:
			return self._locales[key]

		language = key.split('_', 1)[0]
		fallback = self.languages.get(language, language)
		if fallback in self._locales:
			log.debug("locale %r resolved to %r", identifier, fallback)
			return self._locales[fallback]

		raise core.UnknownZoneOrLocale(identifier, self)

#: Catalog of the builtin locales.
standard = Catalog([en_US_POSIX, en_US, en_GB], languages={'en': 'en_US'})

def default_identifier(environ=os.environ):
	"""
	# The locale identifier selected by `LC_ALL`, `LC_TIME`, or `LANG`;
	# `en_US_POSIX` when none are set.
	"""
	for name in ('LC_ALL', 'LC_TIME', 'LANG'):
		value = environ.get(name)
		if value:
			return normalize(value)
	return 'en_US_POSIX'
