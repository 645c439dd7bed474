from .. import abstract
from .. import core
from .. import locales

def test_normalize(test):
	test/locales.normalize('en_GB.UTF-8') == 'en_GB'
	test/locales.normalize('en-GB') == 'en_GB'
	test/locales.normalize('de_DE@euro') == 'de_DE'
	test/locales.normalize('C') == 'en_US_POSIX'
	test/locales.normalize('POSIX') == 'en_US_POSIX'
	test/locales.normalize('C.UTF-8') == 'en_US_POSIX'

def test_default_identifier(test):
	test/locales.default_identifier({}) == 'en_US_POSIX'
	test/locales.default_identifier({'LANG': 'en_GB.UTF-8'}) == 'en_GB'
	test/locales.default_identifier({'LANG': 'en_GB.UTF-8', 'LC_TIME': 'en_US.UTF-8'}) == 'en_US'
	test/locales.default_identifier({'LC_ALL': 'C', 'LC_TIME': 'en_GB'}) == 'en_US_POSIX'
	# Empty variables are skipped.
	test/locales.default_identifier({'LC_ALL': '', 'LANG': 'en_GB'}) == 'en_GB'

def test_standard(test):
	test/locales.standard.identifiers() == ['en_GB', 'en_US', 'en_US_POSIX']
	test/(locales.standard.locale_data('en_US') is locales.en_US) == True
	test/(locales.standard.locale_data('en_GB.UTF-8') is locales.en_GB) == True
	test/(locales.standard.locale_data('C') is locales.en_US_POSIX) == True
	test/isinstance(locales.standard, abstract.LocaleSource) == True

def test_fallback(test):
	test/(locales.standard.locale_data('en_CA') is locales.en_US) == True
	test/(locales.standard.locale_data('en') is locales.en_US) == True

	with test/core.UnknownZoneOrLocale as exc:
		locales.standard.locale_data('fr_FR')
	test/exc().identifier == 'fr_FR'

def test_catalog(test):
	c = locales.Catalog()
	test/c.identifiers() == []
	test/core.UnknownZoneOrLocale ^ (lambda: c.locale_data('en_GB'))

	c.register(locales.en_GB)
	test/(c.locale_data('en_GB') is locales.en_GB) == True
	# Without a language default, only the language itself is tried.
	test/core.UnknownZoneOrLocale ^ (lambda: c.locale_data('en_AU'))

	fr = locales.LocaleData('fr')
	c.register(fr)
	test/(c.locale_data('fr_CA') is fr) == True

def test_pattern(test):
	us = locales.en_US
	test/us.pattern('short', 'short') == 'M/d/yy, h:mm a'
	test/us.pattern('long', 'short') == "MMMM d, y 'at' h:mm a"
	test/us.pattern('medium', 'none') == 'MMM d, y'
	test/us.pattern('none', 'medium') == 'h:mm:ss a'
	test/us.pattern() == ''
	test/locales.en_GB.pattern('full', 'none') == 'EEEE d MMMM y'
	test/ValueError ^ (lambda: us.pattern('brief', 'none'))

def test_locale_data(test):
	gb = locales.en_GB
	test/gb.am_pm == ('am', 'pm')
	test/gb.first_weekday == 2
	test/locales.en_US.month_names[0] == 'January'
	test/locales.en_US.weekday_abbreviations[0] == 'Sun'
	test/locales.en_US.interval_separator == ' – '

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
