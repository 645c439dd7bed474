"""
# Calendar arithmetic over instants.

# The &Engine converts between &types.Instant and &fields.FieldSet under a
# &calendars.CalendarSystem, and performs the calendar-aware operations that
# depend on that conversion: field arithmetic, next occurrence searches, day
# boundaries, and granularity comparisons.

#!syntax/python
	from almanac.time import calendars, engine, fields, views

	ny = views.directory.zone_by_name('America/New_York')
	e = engine.Engine(calendars.CalendarSystem.gregorian(ny))
	pit = e.to_instant(fields.FieldSet(year=2024, month=1, day=31, hour=9))
	feb = e.add_fields(fields.FieldSet(month=1), pit) # 2024-02-29T09:00 local

# [ Local Time Policies ]

# Calendar units can produce wall times that a zone skips, or repeats.
# Operations resolving such times accept one of the &policies:

# /`'strict'`/
	# Skipped wall times are errors, or, when searching, not matches.
# /`'next-time'`/
	# The first instant following the skipped range.
# /`'next-time-preserving-smaller-fields'`/
	# The wall time moved forward by the length of the skipped range.
# /`'previous-time-preserving-smaller-fields'`/
	# The wall time moved backward by the length of the skipped range.

# Repeated wall times resolve to the later instant unless the offset in
# effect before the operation identifies one of them.
"""
import itertools
import logging

from . import core
from . import earth
from . import fields
from . import gregorian
from . import types
from . import week

log = logging.getLogger(__name__)

_day = earth.nanoseconds['day']
_second = earth.nanoseconds_in_second

policies = frozenset({
	'strict',
	'next-time',
	'next-time-preserving-smaller-fields',
	'previous-time-preserving-smaller-fields',
})

def check_policy(policy):
	if policy not in policies:
		raise ValueError("unknown policy: " + repr(policy))

#: Inclusive bounds of the fields that have them.
ranges = {
	'era': (0, 1),
	'quarter': (1, 4),
	'month': (1, 12),
	'week_of_year': (1, 53),
	'week_of_month': (0, 6),
	'weekday_ordinal': (-5, 5),
	'day': (1, 31),
	'weekday': (1, 7),
	'hour': (0, 23),
	'minute': (0, 59),
	'second': (0, 59),
	'nanosecond': (0, earth.nanoseconds_in_second - 1),
}

#: Years tried when validating field sets that do not name a year; every
#: combination of leap year and weekday of January first occurs in them.
validation_years = range(2000, 2028)

#: Duration fields applied as exact time.
exact_units = {
	'hour': earth.nanoseconds['hour'],
	'minute': earth.nanoseconds['minute'],
	'second': earth.nanoseconds['second'],
	'nanosecond': 1,
}

#: Duration fields applied as calendar units, and the units they count.
calendar_units = {
	'year': 'year',
	'year_for_week_of_year': 'year',
	'quarter': 'quarter',
	'month': 'month',
	'week_of_year': 'week',
	'week_of_month': 'week',
	'weekday_ordinal': 'week',
	'day': 'day',
	'weekday': 'day',
}

#: Granularity aliases for fields that share the boundaries of a unit.
granularities = {
	'weekday': 'day',
	'week_of_year': 'week',
	'week_of_month': 'week',
	'weekday_ordinal': 'day',
	'year_for_week_of_year': 'year',
}

_time_fields = ('hour', 'minute', 'second', 'nanosecond')
_time_limits = (24, 60, 60, earth.nanoseconds_in_second)

def wall(days, nanoseconds=0):
	"""
	# Combine a gregorian day count and the nanoseconds into the day into a
	# local time value.
	"""
	return ((days - types.reference_days) * _day) + nanoseconds

def split(local):
	"""
	# Split a local time value into the gregorian day count and the
	# nanoseconds into the day.
	"""
	days, ns = divmod(int(local), _day)
	return (days + types.reference_days, ns)

def week_of_year(first_weekday, minimum_days, year, days):
	"""
	# The `(year_for_week_of_year, week_of_year)` pair of the day, &days, that
	# is within the calendar &year.
	"""
	jan1 = gregorian.days_from_date((year, 1, 1))
	n = week.week_of_period(first_weekday, minimum_days, jan1, days)

	if n < 1:
		# Last week of the prior year.
		prior = gregorian.days_from_date((year - 1, 1, 1))
		return (year - 1, week.week_of_period(first_weekday, minimum_days, prior, days))

	following = week.first_week_start(
		first_weekday, minimum_days,
		gregorian.days_from_date((year + 1, 1, 1))
	)
	if days >= following:
		return (year + 1, 1)

	return (year, n)

def date_fields(system, days):
	"""
	# Derive the date fields of the gregorian day count, &days, under &system.
	"""
	y, m, d = gregorian.date_from_days(days)
	era, year = gregorian.era_from_year(y)
	fw = system.first_weekday
	md = system.minimum_days_in_first_week
	yw, woy = week_of_year(fw, md, y, days)

	return {
		'era': era,
		'year': year,
		'year_for_week_of_year': yw,
		'quarter': gregorian.quarter_of_month(m),
		'month': m,
		'week_of_year': woy,
		'week_of_month': week.week_of_period(fw, md, days - (d - 1), days),
		'weekday_ordinal': ((d - 1) // week.days_in_week) + 1,
		'day': d,
		'weekday': week.weekday(days),
	}

def _ordinal_from_end(y, m, d):
	return -(((gregorian.days_in_month(y, m) - d) // week.days_in_week) + 1)

def check_ranges(fs):
	"""
	# Raise &core.UnresolvableDate if a field of &fs is outside of its bounds.
	"""
	for name, value in fs.items():
		if not isinstance(value, int):
			raise core.UnresolvableDate(fs, "%s is not an integer" %(name,))

		bounds = ranges.get(name)
		if bounds is not None and not bounds[0] <= value <= bounds[1]:
			raise core.UnresolvableDate(fs, "%s out of range" %(name,))

	if fs.weekday_ordinal == 0:
		raise core.UnresolvableDate(fs, "weekday_ordinal cannot be zero")

	if fs.era is not None and fs.year is not None and fs.year < 1:
		raise core.UnresolvableDate(fs, "year of era must be positive")

def year_of(fs):
	"""
	# The astronomical year identified by &fs, defaulting to year one.
	"""
	if fs.year is not None:
		if fs.era is not None:
			return gregorian.year_from_era(fs.era, fs.year)
		return fs.year

	if fs.year_for_week_of_year is not None:
		return fs.year_for_week_of_year

	if fs.era is not None:
		return gregorian.year_from_era(fs.era, 1)

	return 1

class Engine(object):
	"""
	# Calendar operations under a calendar system.

	# [ Properties ]
	# /calendar/
		# The &calendars.CalendarSystem, or a provider of one such as
		# &calendars.Current, queried once per operation.
	# /clock/
		# The clock used to identify today; the system's real clock when &None.
	"""

	def __init__(self, calendar, clock=None):
		self.calendar = calendar
		self.clock = clock

	def __repr__(self):
		return "%s(%r)" %(self.__class__.__name__, self.calendar)

	def system(self):
		return self.calendar.system()

	# Date resolution.

	def _resolve(self, system, fs, year=None):
		"""
		# Identify the day denoted by the date fields of &fs.
		"""
		check_ranges(fs)
		if year is None:
			year = year_of(fs)

		fw = system.first_weekday
		md = system.minimum_days_in_first_week
		weekyear = False

		month = fs.month
		if month is None and fs.quarter is not None:
			month = gregorian.first_month_of_quarter(fs.quarter)
		if month is None:
			month = 1

		first = gregorian.days_from_date((year, month, 1))
		dim = gregorian.days_in_month(year, month)

		if fs.day is not None:
			if fs.day > dim:
				raise core.UnresolvableDate(fs, "day exceeds the days in the month")
			days = first + fs.day - 1
		elif fs.week_of_year is not None:
			if fs.year_for_week_of_year is not None:
				wy = fs.year_for_week_of_year
			else:
				wy = year
				weekyear = True

			start = week.first_week_start(fw, md, gregorian.days_from_date((wy, 1, 1)))
			start += (fs.week_of_year - 1) * week.days_in_week
			wd = fs.weekday if fs.weekday is not None else fw
			days = start + ((wd - fw) % week.days_in_week)
		elif fs.weekday_ordinal is not None:
			if fs.weekday is not None:
				wd = fs.weekday
			else:
				wd = week.weekday(first)

			n = fs.weekday_ordinal
			if n > 0:
				days = week.next_weekday(first, wd) + ((n - 1) * week.days_in_week)
			else:
				days = week.previous_weekday(first + dim - 1, wd) + ((n + 1) * week.days_in_week)

			if not first <= days < first + dim:
				raise core.UnresolvableDate(fs, "weekday_ordinal exceeds the month")
		elif fs.week_of_month is not None:
			start = week.first_week_start(fw, md, first)
			start += (fs.week_of_month - 1) * week.days_in_week

			if fs.weekday is not None:
				days = start + ((fs.weekday - fw) % week.days_in_week)
				if not first <= days < first + dim:
					raise core.UnresolvableDate(fs, "week_of_month exceeds the month")
			else:
				days = min(max(start, first), first + dim - 1)
		elif fs.weekday is not None:
			days = week.next_weekday(first, fs.weekday)
		else:
			days = first

		conflict = self._contradiction(system, fs, year, days, weekyear)
		if conflict is not None:
			raise core.UnresolvableDate(fs, "%s contradicts the date" %(conflict,))

		return days

	def _contradiction(self, system, fs, year, days, weekyear):
		derived = date_fields(system, days)
		y = gregorian.year_from_era(derived['era'], derived['year'])

		if weekyear and derived['year_for_week_of_year'] != year:
			return 'week_of_year'

		for name in fields.date_fields:
			value = fs.get(name)
			if value is None:
				continue

			if name == 'year':
				if not weekyear and y != year:
					return name
			elif name == 'era':
				if not weekyear and derived['era'] != value:
					return name
			elif name == 'weekday_ordinal' and value < 0:
				if _ordinal_from_end(y, derived['month'], derived['day']) != value:
					return name
			elif derived[name] != value:
				return name

		return None

	def _valid(self, system, fs):
		try:
			check_ranges(fs)
			if fs.year is None and fs.year_for_week_of_year is None:
				for candidate in validation_years:
					if fs.era is not None:
						candidate = gregorian.year_from_era(fs.era, candidate)
					try:
						self._resolve(system, fs, candidate)
						return True
					except core.UnresolvableDate:
						pass
				return False

			self._resolve(system, fs)
			return True
		except core.UnresolvableDate:
			return False

	def is_valid_date(self, fs):
		"""
		# Whether the field set denotes at least one real date. Field sets that
		# do not identify a year are valid when they are in any year.
		"""
		return self._valid(self.system(), fs)

	# Local time resolution.

	def _instants(self, zone, local, policy):
		"""
		# All instants for the &local time according to &policy.
		"""
		c = zone.candidates(local)
		if c:
			return [x[0] for x in c]

		if policy == 'strict':
			return []

		transition, before, after = zone.gap(local)
		if policy == 'next-time':
			return [transition]
		elif policy == 'next-time-preserving-smaller-fields':
			return [types.Instant(local - (before.magnitude * _second))]
		else:
			return [types.Instant(local - (after.magnitude * _second))]

	def _instant(self, zone, local, policy, prefer=None, earliest=False, error=None):
		"""
		# The single instant for the &local time according to &policy.
		"""
		check_policy(policy)
		c = zone.candidates(local)
		if c:
			if prefer is not None:
				for pit, offset in c:
					if offset == prefer:
						return pit
			return c[0][0] if earliest else c[-1][0]

		if policy == 'strict':
			raise error or core.UnresolvableDate(None, "wall time skipped by the zone")

		return self._instants(zone, local, policy)[0]

	# Conversions.

	def to_instant(self, fs, policy='next-time-preserving-smaller-fields'):
		"""
		# Resolve the field set, &fs, into an instant.

		# Unset fields default to their minimum: year one, the first month and
		# day, and midnight. Week and ordinal fields identify the day when
		# `day` is not set.

		# Raises &core.UnresolvableDate when the fields are out of range, name a
		# day that does not exist, or contradict each other.
		# With the `'strict'` &policy, a wall time skipped by the zone also
		# raises &core.UnresolvableDate.
		"""
		system = self.system()
		zone = fs.zone or system.zone
		days = self._resolve(system, fs)

		tod = earth.nanoseconds_from_timeofday(
			fs.hour or 0, fs.minute or 0, fs.second or 0, fs.nanosecond or 0
		)
		error = core.UnresolvableDate(fs, "wall time skipped by the zone")
		return self._instant(zone, wall(days, tod), policy, error=error)

	def to_field_set(self, instant, requested=None, zone=None):
		"""
		# Decompose &instant into all of its fields, or only the &requested
		# field names.
		"""
		system = self.system()
		zone = zone or system.zone
		local, offset = zone.localize(instant)
		days, tod = split(local)

		values = date_fields(system, days)
		h, m, s, n = earth.timeofday(tod)
		values.update(hour=h, minute=m, second=s, nanosecond=n)

		if requested is not None:
			requested = set(requested)
			for name in requested:
				if name not in values:
					raise KeyError(name)
			values = {k: v for k, v in values.items() if k in requested}

		return fields.FieldSet(calendar=system, zone=zone, **values)

	def component(self, field, instant):
		"""
		# The value of the single &field of &instant.
		"""
		return self.to_field_set(instant, (field,)).get(field)

	# Arithmetic.

	def add_fields(self, duration, instant, policy='next-time-preserving-smaller-fields'):
		"""
		# Add the calendar-unit &duration to &instant.

		# Years, then quarters and months, then weeks and days are applied to
		# the wall time of &instant, clamping the day to the last day of the
		# resulting month. Hours, minutes, seconds, and nanoseconds are then
		# added as exact time.

		# Raises &core.NonexistentResult when &policy is `'strict'` and the
		# calendar units land in a skipped wall time.
		"""
		check_policy(policy)
		system = self.system()
		zone = duration.zone or system.zone
		pit = types.Instant(instant)

		counts = {'year': 0, 'quarter': 0, 'month': 0, 'week': 0, 'day': 0}
		for name, unit in calendar_units.items():
			value = duration.get(name)
			if value:
				counts[unit] += value

		if any(counts.values()):
			local, offset = zone.localize(pit)
			days, tod = split(local)
			y, m, d = gregorian.date_from_days(days)

			y += counts['year']
			months = (counts['quarter'] * gregorian.months_in_quarter) + counts['month']
			if months:
				y, m = divmod((y * 12) + (m - 1) + months, 12)
				m += 1
			d = min(d, gregorian.days_in_month(y, m))

			days = gregorian.days_from_date((y, m, d))
			days += (counts['week'] * week.days_in_week) + counts['day']

			error = core.NonexistentResult(duration, instant, types.Instant(wall(days, tod)))
			pit = self._instant(zone, wall(days, tod), policy, prefer=offset, error=error)

		exact = 0
		for name, ns in exact_units.items():
			value = duration.get(name)
			if value:
				exact += value * ns

		return types.Instant(int(pit) + exact)

	def set_field(self, field, value, instant):
		"""
		# The instant with the single &field of &instant changed to &value.

		# Week fields keep the weekday; `weekday` moves within the same week.
		# Raises &core.UnresolvableDate when no valid date results.
		"""
		system = self.system()
		zone = system.zone
		current = self.to_field_set(instant)
		local, offset = zone.localize(instant)
		days = split(local)[0]

		times = {k: current.get(k) for k in _time_fields}
		fs = fields.FieldSet(zone=zone, **times)

		if field in ('era', 'year', 'month', 'day') or field in _time_fields:
			fs.era = current.era
			fs.year = current.year
			fs.month = current.month
			fs.day = current.day
		elif field == 'quarter':
			fs.era = current.era
			fs.year = current.year
			fs.day = current.day
			if isinstance(value, int) and 1 <= value <= 4:
				fs.month = gregorian.first_month_of_quarter(value) + ((current.month - 1) % 3)
		elif field == 'weekday':
			if isinstance(value, int) and 1 <= value <= 7:
				fw = system.first_weekday
				d = days - week.position(fw, days) + ((value - fw) % week.days_in_week)
				y, m, dd = gregorian.date_from_days(d)
				fs.year = y
				fs.month = m
				fs.day = dd
		elif field == 'weekday_ordinal':
			fs.era = current.era
			fs.year = current.year
			fs.month = current.month
			fs.weekday = current.weekday
		elif field in ('week_of_year', 'year_for_week_of_year'):
			fs.year_for_week_of_year = current.year_for_week_of_year
			fs.week_of_year = current.week_of_year
			fs.weekday = current.weekday
		elif field == 'week_of_month':
			fs.era = current.era
			fs.year = current.year
			fs.month = current.month
			fs.weekday = current.weekday
		else:
			raise KeyError(field)

		fs.set(field, value)
		return self._instant(
			zone, self._local_of(system, fs), 'next-time-preserving-smaller-fields', prefer=offset
		)

	def _local_of(self, system, fs):
		days = self._resolve(system, fs)
		return wall(days, earth.nanoseconds_from_timeofday(
			fs.hour or 0, fs.minute or 0, fs.second or 0, fs.nanosecond or 0
		))

	def set_time(self, hour, minute, second, instant, nanosecond=0):
		"""
		# The instant on the same local day as &instant at the given time of day.
		"""
		system = self.system()
		zone = system.zone
		current = self.to_field_set(instant)

		fs = fields.FieldSet(
			zone=zone,
			era=current.era, year=current.year, month=current.month, day=current.day,
			hour=hour, minute=minute, second=second, nanosecond=nanosecond,
		)
		return self._instant(zone, self._local_of(system, fs), 'next-time-preserving-smaller-fields')

	def difference(self, start, end, names=('year', 'month', 'day', 'hour', 'minute', 'second', 'nanosecond')):
		"""
		# The field set of calendar units that, added to &start, reaches &end.

		# The units are consumed from the largest to the smallest; all values
		# are negative when &end precedes &start.
		"""
		sign = 1 if end >= start else -1
		result = fields.FieldSet()
		cur = types.Instant(start)

		for name in fields.names:
			if name not in names:
				continue

			if name in exact_units:
				unit = exact_units[name]
				n = (abs(int(end) - int(cur)) // unit) * sign
				cur = types.Instant(int(cur) + (n * unit))
			elif name in ('year', 'quarter', 'month', 'week_of_year', 'day'):
				n = self._count(name, cur, end, sign)
				if n:
					cur = self.add_fields(fields.FieldSet(**{name: n}), cur)
			else:
				raise ValueError("cannot measure differences in " + repr(name))

			result.set(name, n)

		return result

	def _count(self, name, start, end, sign):
		zone = self.system().zone
		sd = split(zone.localize(start)[0])[0]
		ed = split(zone.localize(end)[0])[0]
		sy, sm, _ = gregorian.date_from_days(sd)
		ey, em, _ = gregorian.date_from_days(ed)
		months = ((ey * 12) + em) - ((sy * 12) + sm)

		if name == 'year':
			n = ey - sy
		elif name == 'quarter':
			n = int(months / 3)
		elif name == 'month':
			n = months
		elif name == 'week_of_year':
			n = int((ed - sd) / week.days_in_week)
		else:
			n = ed - sd

		def beyond(k):
			t = self.add_fields(fields.FieldSet(**{name: k}), start)
			return t > end if sign > 0 else t < end

		while n and beyond(n):
			n -= sign
		while not beyond(n + sign):
			n += sign
		return n

	# Searches.

	def _time_options(self, pattern, tod):
		"""
		# The ranges of hours, minutes, seconds, and nanoseconds to try.
		"""
		specified = [i for i, k in enumerate(_time_fields) if pattern.get(k) is not None]
		if not specified:
			return [range(x, x + 1) for x in earth.timeofday(tod)]

		smallest = max(specified)
		options = []
		for i, k in enumerate(_time_fields):
			v = pattern.get(k)
			if v is not None:
				options.append(range(v, v + 1))
			elif i > smallest:
				options.append(range(0, 1))
			else:
				options.append(range(0, _time_limits[i]))
		return options

	def _match(self, system, pattern, year, days, forward):
		"""
		# Whether the day matches the date fields of &pattern.

		# Returns &days when it does, the next day worth checking when it does
		# not, and &None when no later day, or earlier when searching
		# backwards, can match.
		"""
		y, m, d = gregorian.date_from_days(days)
		first = days - (d - 1)
		dim = gregorian.days_in_month(y, m)

		if year is not None and y != year:
			if (year > y) != forward:
				return None
			if forward:
				return gregorian.days_from_date((year, 1, 1))
			return gregorian.days_from_date((year + 1, 1, 1)) - 1

		if pattern.year is None:
			if pattern.era is not None and gregorian.era_from_year(y)[0] != pattern.era:
				# Eras change once: between year zero and year one.
				if (pattern.era == 1) != forward:
					return None
				return gregorian.days_from_date((1, 1, 1)) - (0 if forward else 1)

			yw = pattern.year_for_week_of_year
			if yw is not None:
				if forward:
					if y > yw + 1:
						return None
					if y < yw - 1:
						return gregorian.days_from_date((yw - 1, 12, 1))
				else:
					if y < yw - 1:
						return None
					if y > yw + 1:
						return gregorian.days_from_date((yw + 1, 2, 1)) - 1

		if (pattern.month is not None and pattern.month != m) or (
			pattern.quarter is not None and pattern.quarter != gregorian.quarter_of_month(m)):
			return first + dim if forward else first - 1

		if pattern.day is not None and pattern.day != d:
			if forward:
				if d < pattern.day <= dim:
					return first + pattern.day - 1
				return first + dim
			else:
				if pattern.day < d:
					return first + pattern.day - 1
				return first - 1

		step = 1 if forward else -1
		derived = None
		for name in ('year_for_week_of_year', 'week_of_year', 'week_of_month', 'weekday_ordinal', 'weekday'):
			value = pattern.get(name)
			if value is None:
				continue
			if derived is None:
				derived = date_fields(system, days)

			if name == 'weekday_ordinal' and value < 0:
				if _ordinal_from_end(y, m, d) != value:
					return days + step
			elif derived[name] != value:
				return days + step

		return days

	def _best(self, zone, days, options, after, policy, forward):
		"""
		# The instant nearest to &after, in the direction of the search, of
		# the time &options on the day.
		"""
		base = wall(days)
		offsets = [
			zone.find(types.Instant(base + x)).magnitude * _second
			for x in (-_day, 0, _day, 2 * _day)
		]
		hi = max(offsets)
		lo = min(offsets)
		after = int(after)

		if forward:
			sequence = itertools.product(*options)
		else:
			sequence = itertools.product(*[reversed(r) for r in options])

		best = None
		for parts in sequence:
			local = base + earth.nanoseconds_from_timeofday(*parts)

			# The instants of local are within [local - hi, local - lo].
			if forward:
				if local - lo <= after:
					continue
				if best is not None and local - hi > best:
					break
			else:
				if local - hi >= after:
					continue
				if best is not None and local - lo < best:
					break

			for pit in self._instants(zone, local, policy):
				if forward:
					if pit > after and (best is None or pit < best):
						best = pit
				else:
					if pit < after and (best is None or pit > best):
						best = pit

		return best

	def next_occurrence(self, pattern, after, policy='next-time', direction='forward'):
		"""
		# The earliest instant strictly after &after whose fields match
		# &pattern; the latest strictly before when &direction is `'backward'`.

		# When &pattern has no time fields, the time of day of &after is kept.
		# Otherwise, unset time fields smaller than the smallest set field are
		# zero and the larger ones are free. The search is bounded to one
		# gregorian cycle of days.

		# Raises &core.NoMatch when no instant is found or the pattern denotes
		# no date at all.
		"""
		check_policy(policy)
		if direction not in ('forward', 'backward'):
			raise ValueError("unknown direction: " + repr(direction))

		system = self.system()
		zone = pattern.zone or system.zone
		forward = direction == 'forward'
		step = 1 if forward else -1
		horizon = gregorian.days_in_cycle

		if not self._valid(system, pattern):
			raise core.NoMatch(pattern, after)

		if pattern.year is not None:
			year = year_of(pattern)
		else:
			year = None

		local, offset = zone.localize(after)
		origin, tod = split(local)
		options = self._time_options(pattern, tod)

		days = origin - step
		limit = origin + (step * horizon)
		while (days <= limit) if forward else (days >= limit):
			target = self._match(system, pattern, year, days, forward)
			if target is None:
				break
			if target != days:
				days = target
				continue

			pit = self._best(zone, days, options, after, policy, forward)
			if pit is not None:
				return pit
			days += step

		log.debug("no occurrence of %r %s %r within %d days", pattern, direction, after, horizon)
		raise core.NoMatch(pattern, after, horizon)

	def occurrences(self, pattern, after, policy='next-time', direction='forward', count=None):
		"""
		# Iterate the successive occurrences of &pattern after &after, at most
		# &count of them when given. The iterator ends when &next_occurrence
		# finds no match.
		"""
		pit = after
		n = 0
		while count is None or n < count:
			n += 1
			try:
				pit = self.next_occurrence(pattern, pit, policy, direction)
			except core.NoMatch:
				return
			yield pit

	# Boundaries and comparisons.

	def interval_of(self, unit, instant):
		"""
		# The &types.Interval of the local `'year'`, `'quarter'`, `'month'`,
		# `'week'`, `'day'`, `'hour'`, `'minute'`, or `'second'` containing &instant.
		"""
		system = self.system()
		zone = system.zone
		local, offset = zone.localize(instant)
		days, tod = split(local)

		if unit in ('hour', 'minute', 'second'):
			size = earth.nanoseconds[unit]
			start = self._instant(zone, wall(days, tod - (tod % size)), 'next-time', prefer=offset)
			return types.Interval(start, types.Measure(size))

		y, m, d = gregorian.date_from_days(days)
		if unit == 'day':
			first, last = days, days + 1
		elif unit == 'week':
			first = days - week.position(system.first_weekday, days)
			last = first + week.days_in_week
		elif unit == 'month':
			first = days - (d - 1)
			last = first + gregorian.days_in_month(y, m)
		elif unit == 'quarter':
			qm = gregorian.first_month_of_quarter(gregorian.quarter_of_month(m))
			first = gregorian.days_from_date((y, qm, 1))
			last = gregorian.days_from_date((y, qm + gregorian.months_in_quarter, 1))
		elif unit == 'year':
			first = gregorian.days_from_date((y, 1, 1))
			last = gregorian.days_from_date((y + 1, 1, 1))
		else:
			raise ValueError("unknown calendar unit: " + repr(unit))

		return types.Interval.between(
			self._instant(zone, wall(first), 'next-time', earliest=True),
			self._instant(zone, wall(last), 'next-time', earliest=True),
		)

	def start_of_day(self, instant):
		"""
		# The first instant of the local day containing &instant.
		"""
		return self.interval_of('day', instant).start

	def end_of_day(self, instant):
		"""
		# The last nanosecond of the local day containing &instant.
		"""
		return types.Instant(int(self.interval_of('day', instant).end) - 1)

	def compare_granularity(self, former, latter, unit):
		"""
		# Compare the instants by the local &unit containing them; instants
		# within the same day are the same at `'day'` granularity.
		"""
		unit = granularities.get(unit, unit)
		if unit == 'nanosecond':
			return types.Order.compare(int(former), int(latter))
		if unit == 'era':
			return types.Order.compare(self.component('era', former), self.component('era', latter))

		return types.Order.compare(
			self.interval_of(unit, former).start,
			self.interval_of(unit, latter).start,
		)

	def is_weekend(self, instant):
		"""
		# Whether &instant falls on one of the weekend days of the calendar.
		"""
		system = self.system()
		days = split(system.zone.localize(instant)[0])[0]
		return week.weekday(days) in system.weekend

	def next_weekend(self, after):
		"""
		# The &types.Interval of the first weekend starting after the day of &after.
		"""
		system = self.system()
		zone = system.zone
		weekend = system.weekend
		days = split(zone.localize(after)[0])[0]

		for d in range(days + 1, days + 1 + (2 * week.days_in_week)):
			if week.weekday(d) in weekend and week.weekday(d - 1) not in weekend:
				end = d
				while week.weekday(end) in weekend:
					end += 1
				return types.Interval.between(
					self._instant(zone, wall(d), 'next-time', earliest=True),
					self._instant(zone, wall(end), 'next-time', earliest=True),
				)

		raise core.NoMatch(fields.FieldSet(), after)

	def _day_distance(self, instant):
		zone = self.system().zone
		today = split(zone.localize(types.Instant.now(self.clock))[0])[0]
		return split(zone.localize(instant)[0])[0] - today

	def is_today(self, instant):
		return self._day_distance(instant) == 0

	def is_tomorrow(self, instant):
		return self._day_distance(instant) == 1

	def is_yesterday(self, instant):
		return self._day_distance(instant) == -1
