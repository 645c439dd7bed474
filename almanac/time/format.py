"""
# Format and parse date and time strings.

# Patterns use the letters of Unicode TR35 date format patterns; repeated
# letters form a token whose count selects the representation:

#!syntax/text
	G era           y year          Y week year     u extended year
	Q quarter       M month         d day           E weekday
	F weekday of month              w week of year  W week of month
	a period        h hour (1-12)   H hour (0-23)   m minute
	s second        S fraction      Z offset        z zone (format only)

# Text enclosed in single quotes is literal and `''` is a single quote.
# Other letters are reserved and patterns using them raise &core.InvalidPattern.

# Two named formats are builtin: `iso8601` and `rfc1123`; `iso` and `http`
# are their aliases. Parsing can result in a variety of errors; the parsers
# raise subclasses of &core.UnparsableInput chaining the underlying cause.
"""
import re
import functools

from . import core
from . import calendars
from . import engine as libengine
from . import fields
from . import gregorian
from . import locales as liblocales
from . import types
from . import views
from . import week

#: Allowed counts of the pattern letters.
counts = {
	'G': (1, 2, 3, 4),
	'y': tuple(range(1, 10)),
	'Y': tuple(range(1, 10)),
	'u': tuple(range(1, 10)),
	'Q': (1, 2, 3, 4),
	'M': (1, 2, 3, 4),
	'd': (1, 2),
	'E': (1, 2, 3, 4),
	'F': (1,),
	'w': (1, 2),
	'W': (1,),
	'a': (1,),
	'h': (1, 2),
	'H': (1, 2),
	'm': (1, 2),
	's': (1, 2),
	'S': tuple(range(1, 10)),
	'Z': (1, 2, 3, 4, 5),
	'z': (1, 2, 3, 4),
}

@functools.lru_cache(maxsize=64)
def compile(pattern):
	"""
	# Split &pattern into a tuple of literal strings and `(letter, count)` tokens.
	"""
	tokens = []
	literal = []
	i = 0
	n = len(pattern)

	while i < n:
		c = pattern[i]
		if c == "'":
			if pattern[i+1:i+2] == "'":
				literal.append("'")
				i += 2
				continue

			end = i + 1
			while True:
				end = pattern.find("'", end)
				if end == -1:
					raise core.InvalidPattern(pattern, pattern[i:], i)
				if pattern[end+1:end+2] == "'":
					end += 2
					continue
				break
			literal.append(pattern[i+1:end].replace("''", "'"))
			i = end + 1
		elif ('a' <= c <= 'z') or ('A' <= c <= 'Z'):
			j = i
			while j < n and pattern[j] == c:
				j += 1
			token = pattern[i:j]
			if c not in counts or len(token) not in counts[c]:
				raise core.InvalidPattern(pattern, token, i)

			if literal:
				tokens.append(''.join(literal))
				del literal[:]
			tokens.append((c, len(token)))
			i = j
		else:
			literal.append(c)
			i += 1

	if literal:
		tokens.append(''.join(literal))

	return tuple(tokens)

def offset_string(seconds, separator='', utc=None):
	"""
	# Represent the offset, &seconds, as `+HHMM`, or `+HH:MM` with a &separator.
	# &utc replaces the representation of a zero offset when given.
	"""
	if seconds == 0 and utc is not None:
		return utc

	sign = '+' if seconds >= 0 else '-'
	h, rest = divmod(abs(seconds), 3600)
	m = rest // 60
	return '%s%02d%s%02d' %(sign, h, separator, m)

def _number(value, count):
	if value < 0:
		return '-' + str(-value).rjust(count, '0')
	return str(value).rjust(count, '0')

def _year(value, count):
	if count == 2:
		return str(value % 100).rjust(2, '0')
	return _number(value, count)

def format_token(token, values, offset, locale):
	"""
	# Represent the field selected by the &token.
	"""
	c, n = token

	if c == 'G':
		if n == 4:
			return locale.era_names[values['era']]
		return locale.era_abbreviations[values['era']]
	elif c == 'y':
		return _year(values['year'], n)
	elif c == 'Y':
		return _year(values['year_for_week_of_year'], n)
	elif c == 'u':
		return _number(gregorian.year_from_era(values['era'], values['year']), n)
	elif c == 'Q':
		q = values['quarter']
		if n == 4:
			return locale.quarter_names[q-1]
		if n == 3:
			return locale.quarter_abbreviations[q-1]
		return _number(q, n)
	elif c == 'M':
		m = values['month']
		if n == 4:
			return locale.month_names[m-1]
		if n == 3:
			return locale.month_abbreviations[m-1]
		return _number(m, n)
	elif c == 'd':
		return _number(values['day'], n)
	elif c == 'E':
		if n == 4:
			return locale.weekday_names[values['weekday']-1]
		return locale.weekday_abbreviations[values['weekday']-1]
	elif c == 'F':
		return str(values['weekday_ordinal'])
	elif c == 'w':
		return _number(values['week_of_year'], n)
	elif c == 'W':
		return str(values['week_of_month'])
	elif c == 'a':
		return locale.am_pm[values['hour'] // 12]
	elif c == 'h':
		return _number((values['hour'] % 12) or 12, n)
	elif c == 'H':
		return _number(values['hour'], n)
	elif c == 'm':
		return _number(values['minute'], n)
	elif c == 's':
		return _number(values['second'], n)
	elif c == 'S':
		return str(values['nanosecond']).rjust(9, '0')[:n]
	elif c == 'Z':
		if n == 5:
			return offset_string(offset.magnitude, ':', 'Z')
		if n == 4:
			return 'GMT' + offset_string(offset.magnitude, ':', '')
		return offset_string(offset.magnitude)
	elif c == 'z':
		if n == 4:
			return 'GMT' + offset_string(offset.magnitude, ':', '')
		return offset.abbreviation

	raise core.InvalidPattern(None, c * n)

def _alternation(names):
	names = sorted(names, key=len, reverse=True)
	return '(' + '|'.join(re.escape(x) for x in names) + ')'

def expression(token, locale):
	"""
	# The regular expression matching the representation of &token.
	"""
	c, n = token

	if c == 'G':
		return _alternation(locale.era_names if n == 4 else locale.era_abbreviations)
	elif c in 'yY':
		if n == 2:
			return r'(\d{2})'
		return r'(-?\d{%d,})' %(n,)
	elif c == 'u':
		return r'(-?\d{%d,})' %(n,)
	elif c in 'QM':
		if n == 4:
			return _alternation(locale.quarter_names if c == 'Q' else locale.month_names)
		if n == 3:
			return _alternation(locale.quarter_abbreviations if c == 'Q' else locale.month_abbreviations)
		return r'(\d{2})' if n == 2 else r'(\d{1,2})'
	elif c == 'E':
		return _alternation(locale.weekday_names if n == 4 else locale.weekday_abbreviations)
	elif c in 'FW':
		return r'(-?\d)'
	elif c == 'a':
		return _alternation(locale.am_pm)
	elif c in 'dwhHms':
		return r'(\d{2})' if n == 2 else r'(\d{1,2})'
	elif c == 'S':
		return r'(\d{%d})' %(n,)
	elif c == 'Z':
		if n == 4:
			return r'(GMT(?:[+-]\d{2}:\d{2})?)'
		return r'(Z|[+-]\d{2}:?\d{2})'

	# Zone names are ambiguous; &z is format only.
	raise core.InvalidPattern(None, c * n)

@functools.lru_cache(maxsize=64)
def _regex(pattern, locale):
	tokens = compile(pattern)
	parts = []
	for t in tokens:
		if isinstance(t, str):
			parts.append(re.escape(t))
		else:
			try:
				parts.append(expression(t, locale))
			except core.InvalidPattern:
				raise core.InvalidPattern(pattern, t[0] * t[1])
	return tokens, re.compile(''.join(parts), re.IGNORECASE)

def two_digit_year(value):
	"""
	# Interpret a two digit year within 1950 and 2049.
	"""
	return value + (2000 if value < 50 else 1900)

def parse_offset(text):
	"""
	# Convert an ISO-8601 or GMT prefixed offset into seconds east of UTC.
	"""
	text = text.upper()
	if text.startswith('GMT'):
		text = text[3:]
	if text in ('', 'Z'):
		return 0

	sign = -1 if text[0] == '-' else 1
	digits = text[1:].replace(':', '')
	return sign * ((int(digits[:2]) * 3600) + (int(digits[2:4]) * 60))

def _index(names, text):
	text = text.lower()
	for i, x in enumerate(names):
		if x.lower() == text:
			return i
	raise ValueError("unrecognized name: " + repr(text))

def structure_tokens(matches, locale):
	"""
	# Convert the matched token texts into a &fields.FieldSet and an optional
	# offset in seconds.
	"""
	fs = fields.FieldSet()
	offset = None
	hour12 = None
	period = None

	for (c, n), text in matches:
		if c == 'G':
			fs.era = _index(locale.era_names if n == 4 else locale.era_abbreviations, text)
		elif c == 'y':
			fs.year = two_digit_year(int(text)) if n == 2 else int(text)
		elif c == 'Y':
			fs.year_for_week_of_year = two_digit_year(int(text)) if n == 2 else int(text)
		elif c == 'u':
			fs.year = int(text)
		elif c == 'Q':
			if n >= 3:
				fs.quarter = _index(locale.quarter_names if n == 4 else locale.quarter_abbreviations, text) + 1
			else:
				fs.quarter = int(text)
		elif c == 'M':
			if n >= 3:
				fs.month = _index(locale.month_names if n == 4 else locale.month_abbreviations, text) + 1
			else:
				fs.month = int(text)
		elif c == 'd':
			fs.day = int(text)
		elif c == 'E':
			fs.weekday = _index(locale.weekday_names if n == 4 else locale.weekday_abbreviations, text) + 1
		elif c == 'F':
			fs.weekday_ordinal = int(text)
		elif c == 'w':
			fs.week_of_year = int(text)
		elif c == 'W':
			fs.week_of_month = int(text)
		elif c == 'a':
			period = _index(locale.am_pm, text)
		elif c == 'h':
			hour12 = int(text)
			if not 1 <= hour12 <= 12:
				raise ValueError("hour out of range: " + text)
		elif c == 'H':
			fs.hour = int(text)
		elif c == 'm':
			fs.minute = int(text)
		elif c == 's':
			fs.second = int(text)
		elif c == 'S':
			fs.nanosecond = int(text.ljust(9, '0'))
		elif c == 'Z':
			offset = parse_offset(text)

	if hour12 is not None:
		fs.hour = (hour12 % 12) + (12 * (period or 0))

	return fs, offset

# Named formats.

rfc1123 = "{weekday}, {day:02} {month} {year:04} {hour:02}:{minute:02}:{second:02} GMT"

def parse_rfc1123(s):
	# be loose with the comma; don't break
	# if there's whitespace between the DOW and comma.
	comma = s.find(',')
	if comma == -1:
		raise ValueError('comma not found')
	weekday = s[:comma].strip()
	parts = s[comma+1:].strip().split()
	trail = parts[4:]
	day, month, year, time = parts[:4]
	hour, minute, second = time.split(':')

	timezone = None
	if trail:
		if len(trail) > 1:
			raise ValueError('unexpected data at end of string')
		timezone = trail[0]

	return (
		('weekday', weekday),
		('year', year),
		('month', month),
		('day', day),
		('hour', hour),
		('minute', minute),
		('second', second),
		('timezone', timezone),
	)

def parse_iso8601(s):
	s = s.strip().lower()
	if 't' in s:
		date, time = s.split('t', 1)
	elif ' ' in s:
		date, time = s.split(' ', 1)
	else:
		date = s
		time = ''

	zone = None
	if time.endswith('z'):
		time = time[:-1]
		zone = 'z'
	else:
		m = re.search(r'[+-]\d{2}(?::?\d{2})?$', time)
		if m is not None:
			zone = m.group(0)
			time = time[:m.start()]

	subsecond = ''
	if '.' in time:
		time, subsecond = time.split('.', 1)
	elif ',' in time:
		time, subsecond = time.split(',', 1)

	hms = time.split(':') if time else []
	if len(hms) > 3:
		raise ValueError("too many time fields")
	hms.extend(['0'] * (3 - len(hms)))

	sign = ''
	if date.startswith('-'):
		sign = '-'
		date = date[1:]
	ymd = date.split('-')
	if len(ymd) != 3:
		raise ValueError("date must have year, month, and day")

	return (
		('year', sign + ymd[0]),
		('month', ymd[1]),
		('day', ymd[2]),
		('hour', hms[0]),
		('minute', hms[1]),
		('second', hms[2]),
		('subsecond', subsecond),
		('timezone', zone),
	)

parsers = {
	'rfc1123': parse_rfc1123,
	'iso8601': parse_iso8601,
}

def _digits(text):
	if not text.lstrip('-').isdigit():
		raise ValueError("not a number: " + repr(text))
	return int(text)

def transform_iso8601(args):
	struct = args[1]
	sub = struct['subsecond']
	if sub and not sub.isdigit():
		raise ValueError("invalid fraction: " + repr(sub))

	fs = fields.FieldSet(
		year = _digits(struct['year']),
		month = _digits(struct['month']),
		day = _digits(struct['day']),
		hour = _digits(struct['hour']),
		minute = _digits(struct['minute']),
		second = _digits(struct['second']),
		nanosecond = int(sub[:9].ljust(9, '0')) if sub else 0,
	)

	zone = struct['timezone']
	offset = 0 if zone is None else parse_offset(zone)
	return args + ((fs, offset),)

def transform_rfc1123(args):
	struct = args[1]
	month = gregorian.month_name_to_number[struct['month'].lower()]

	fs = fields.FieldSet(
		year = _digits(struct['year']),
		month = month + 1, # for consistency with ISO.
		day = _digits(struct['day']),
		hour = _digits(struct['hour']),
		minute = _digits(struct['minute']),
		second = _digits(struct['second']),
	)
	return args + ((fs, 0),)

transformers = {
	'iso8601': transform_iso8601,
	'rfc1123': transform_rfc1123,
}

def validate_rfc1123(args, weekdays=week.weekday_name_to_number):
	# check the integrity of the parsed rfc1123 timestamp
	src, struct, (fs, offset) = args

	if (struct['timezone'] or '').strip().lower() not in ('zulu', 'z', 'gmt', 'utc'):
		raise ValueError("timezone not GMT")

	dow = struct['weekday'].lower()
	if dow not in weekdays:
		raise ValueError("invalid day of week: " + dow)
	fs.weekday = weekdays[dow]

	return args

validators = {
	'rfc1123': validate_rfc1123,
}

aliases = {
	'iso': 'iso8601',
	'http': 'rfc1123',
}

def _parse(fun, format):
	def EXCEPTION(src, fun=fun, format=format):
		try:
			return (src, fun(src))
		except core.ParseError:
			raise
		except Exception as e:
			raise core.ParseError(src, format=format) from e
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _structure(fun, format):
	def EXCEPTION(state):
		try:
			return fun(state)
		except core.StructureError:
			raise
		except Exception as e:
			raise core.StructureError(*state, format=format) from e
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _integrity(fun, format):
	def EXCEPTION(state):
		try:
			return fun(state)
		except core.IntegrityError:
			raise
		except Exception as e:
			raise core.IntegrityError(*state, format=format) from e
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _resolver(engine, validate=None):
	# Convert the structured fields into an instant; parsed offsets take
	# precedence over the engine's zone. Text naming no time of day is the
	# start of its day, even when local midnight is skipped.
	def resolve(state, engine=engine, validate=validate):
		if validate is not None:
			state = validate(state)
		fs, offset = state[-1]
		if offset is not None:
			fs.zone = views.Zone.fixed(offset)
		if any(fs.get(x) is not None for x in fields.time_fields):
			return engine.to_instant(fs, policy='strict')

		pit = engine.to_instant(fs, policy='next-time')
		if fs.zone is None:
			pit = engine.start_of_day(pit)
		return pit
	return resolve

def parser(fmt, engine=None, _deref=aliases.get):
	"""
	# Given a format identifier, return the function that can be used to parse
	# the formatted string into an &types.Instant.
	"""
	fmt = _deref(fmt, fmt)
	engine = engine or libengine.Engine(calendars.CalendarSystem())

	def parser_composition(
			x,
			integ = _integrity(_resolver(engine, validators.get(fmt)), fmt),
			struct = _structure(transformers[fmt], fmt),
			parse = _parse(lambda s: dict(parsers[fmt](s)), fmt),
		):
		return integ(struct(parse(x)))
	return parser_composition

def pattern_parser(pattern, engine, locale):
	"""
	# Return the function that parses strings formatted with &pattern.
	"""
	tokens, regex = _regex(pattern, locale)
	fields_of = [t for t in tokens if not isinstance(t, str)]

	def match(src):
		m = regex.fullmatch(src)
		if m is None:
			raise ValueError("text does not match the pattern")
		return list(zip(fields_of, m.groups()))

	def structure(state):
		return state + (structure_tokens(state[1], locale),)

	def parser_composition(
			x,
			integ = _integrity(_resolver(engine), pattern),
			struct = _structure(structure, pattern),
			parse = _parse(match, pattern),
		):
		return integ(struct(parse(x)))
	return parser_composition

def format_rfc1123(values, offset, _fmt=rfc1123.format):
	return _fmt(
		weekday = week.weekday_abbreviations[values['weekday']-1].capitalize(),
		day = values['day'],
		month = gregorian.month_abbreviations[values['month']-1].capitalize(),
		year = gregorian.year_from_era(values['era'], values['year']),
		hour = values['hour'],
		minute = values['minute'],
		second = values['second'],
	)

def format_iso8601(values, offset):
	year = gregorian.year_from_era(values['era'], values['year'])
	sub = str(values['nanosecond']).rjust(9, '0').rstrip('0')
	return "%s-%02d-%02dT%02d:%02d:%02d%s%s" %(
		_number(year, 4), values['month'], values['day'],
		values['hour'], values['minute'], values['second'],
		'.' + sub if sub else '',
		offset_string(offset.magnitude, ':', 'Z'),
	)

formatters = {
	'rfc1123': format_rfc1123,
	'iso8601': format_iso8601,
}

#: Zones the named formats are always represented in, if any.
format_zones = {
	'rfc1123': views.utc,
}

def formatter(fmt, _deref=aliases.get):
	"""
	# Given a format identifier, return the function that can be used to format
	# the fields of an instant.
	"""
	return formatters[_deref(fmt, fmt)]

def is_named(fmt):
	return aliases.get(fmt, fmt) in formatters

class Formatter(object):
	"""
	# Formatting and parsing of instants using patterns, styles, or named formats.

	# Patterns are locale independent, using the `en_US_POSIX` names, unless
	# a locale is explicitly given; styles use the locale selected by the
	# environment when none is given.

	# [ Properties ]
	# /engine/
		# The &libengine.Engine whose calendar system selects the zone.
	# /locales/
		# The locale source; &liblocales.standard by default.
	# /locale/
		# The default locale identifier for styles; &None to consult the
		# environment at the time of use.
	"""

	def __init__(self, engine=None, locales=None, locale=None):
		self.engine = engine or libengine.Engine(calendars.CalendarSystem())
		self.locales = locales or liblocales.standard
		self.locale = locale

	def __repr__(self):
		return "%s(%r, locale=%r)" %(self.__class__.__name__, self.engine, self.locale)

	def locale_data(self, locale=None, styled=True):
		if locale is None:
			if not styled:
				locale = 'en_US_POSIX'
			else:
				locale = self.locale or liblocales.default_identifier()
		return self.locales.locale_data(locale)

	def pattern(self, date_style='none', time_style='none', locale=None):
		"""
		# The pattern of the styles in the &locale.
		"""
		return self.locale_data(locale).pattern(date_style, time_style)

	def _select(self, pattern, date_style, time_style, locale):
		if pattern is not None:
			return pattern, self.locale_data(locale, styled=False)
		ld = self.locale_data(locale)
		return ld.pattern(date_style or 'none', time_style or 'none'), ld

	def format(self, instant, pattern=None, date_style=None, time_style=None, locale=None):
		"""
		# Represent &instant using the &pattern, a named format, or the
		# &date_style and &time_style of the &locale.
		"""
		if pattern is not None and is_named(pattern):
			name = aliases.get(pattern, pattern)
			zone = format_zones.get(name)
			fs = self.engine.to_field_set(instant, zone=zone)
			return formatters[name](dict(fs.items()), fs.zone.find(instant))

		pattern, ld = self._select(pattern, date_style, time_style, locale)
		tokens = compile(pattern)
		if all(isinstance(t, str) for t in tokens):
			return ''.join(tokens)

		fs = self.engine.to_field_set(instant)
		values = dict(fs.items())
		offset = fs.zone.find(instant)
		return ''.join([
			t if isinstance(t, str) else format_token(t, values, offset, ld)
			for t in tokens
		])

	def parse(self, text, pattern=None, date_style=None, time_style=None, locale=None):
		"""
		# Convert &text formatted with the &pattern, a named format, or styles
		# into an &types.Instant.

		# Raises a &core.UnparsableInput subclass when the text does not match
		# or does not denote a valid date.
		"""
		if pattern is not None and is_named(pattern):
			return parser(pattern, self.engine)(text)

		pattern, ld = self._select(pattern, date_style, time_style, locale)
		return pattern_parser(pattern, self.engine, ld)(text)

	def format_interval(self, interval, pattern=None, date_style=None, time_style=None, locale=None):
		"""
		# Represent the &types.Interval as its start and end joined by the
		# locale's interval separator. When both fall on the same day and both
		# styles are given, the end only shows its time.
		"""
		ld = self.locale_data(locale, styled=pattern is None)
		start = self.format(interval.start, pattern, date_style, time_style, locale)
		end = self.format(interval.end, pattern, date_style, time_style, locale)

		if start == end:
			return start

		styled = pattern is None and (date_style or 'none') != 'none' and (time_style or 'none') != 'none'
		if styled and self.engine.compare_granularity(interval.start, interval.end, 'day') == types.Order.same:
			end = self.format(interval.end, None, 'none', time_style, locale)

		return start + ld.interval_separator + end
