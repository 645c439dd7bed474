"""
# Time zone views for adjusting instants in and out of local forms.

# A &Zone is an ordered sequence of transition instants whose ranges
# correspond to a particular &Zone.Offset, optionally extended past its last
# transition by a POSIX TZ rule. &Directory is the zone source reading TZif
# files from the system's zoneinfo directory.

#!syntax/python
	from almanac.time import types, views
	z = views.directory.zone_by_name('America/Los_Angeles')
	wall, offset = z.localize(types.Instant.now())

# Local, wall clock, times are represented with &types.Instant values that
# have had the offset applied; they are only meaningful alongside the
# &Zone.Offset that produced them.
"""
import os
import os.path
import operator
import bisect
import logging
import threading
import functools

from . import core
from . import earth
from . import tzif
from . import types

log = logging.getLogger(__name__)

_second = earth.nanoseconds_in_second

class Zone(object):
	"""
	# An ordered sequence of transition times whose ranges correspond to a
	# particular offset.

	# [ Properties ]
	# /default/
		# The &Offset in effect before the first transition.
	# /rule/
		# The &tzif.Rule in effect after the last transition, or &None.
	"""

	class Offset(tuple):
		"""
		# A `(seconds, abbreviation, type)` triple describing the wall clock
		# of a zone during one of its periods. &type is `'dst'` for daylight
		# saving periods and `'std'` otherwise.
		"""
		__slots__ = ()

		magnitude = property(operator.itemgetter(0), doc="Seconds east of UTC.")
		abbreviation = property(operator.itemgetter(1), doc="Abbreviation such as EST or CET.")
		type = property(operator.itemgetter(2))

		@property
		def is_dst(self):
			return self[2] == 'dst'

		@property
		def measure(self):
			"""
			# The offset as a &types.Measure.
			"""
			return types.Measure.of(second=self[0])

		@property
		def iso(self):
			"""
			# The offset in the ISO-8601 form: `+HH:MM`, or `+HH:MM:SS` when
			# seconds are present.
			"""
			sign = '-' if self[0] < 0 else '+'
			hours, seconds = divmod(abs(self[0]), 3600)
			minutes, seconds = divmod(seconds, 60)
			if seconds:
				return '%s%02d:%02d:%02d' %(sign, hours, minutes, seconds)
			return '%s%02d:%02d' %(sign, hours, minutes)

		def __repr__(self):
			return '<%s %s %s%s>' %(
				self.__class__.__name__, self.iso, self[1], ' dst' if self.is_dst else ''
			)

		def __eq__(self, ob):
			return isinstance(ob, tuple) and tuple(self) == tuple(ob)

		def __ne__(self, ob):
			return not self.__eq__(ob)

		def __hash__(self):
			return hash(self[0])

		@classmethod
		def from_tzinfo(Class, info):
			"""
			# Construct an &Offset from a TZif local time type record.
			"""
			return Class((info.tz_offset, info.tz_abbrev, 'dst' if info.tz_isdst else 'std'))

	def __init__(self, transitions, offsets, default, leaps=(), name=None, rule=None):
		self.transitions = transitions
		self.offsets = offsets
		self.default = default
		self.leaps = leaps
		self.name = name
		self.rule = rule

		if rule is not None:
			self._rule_offsets = {
				False: self.Offset((rule.std_offset, rule.std_abbrev, 'std')),
				True: self.Offset((rule.dst_offset, rule.dst_abbrev, 'dst')),
			}
		else:
			self._rule_offsets = None

	def __repr__(self):
		return '<%s: %s[%d/%d]>' %(
			self.__class__.__name__,
			self.name,
			len(self.transitions),
			len(self.offsets),
		)

	@property
	def is_fixed(self):
		"""
		# Whether the zone has a single offset for all time.
		"""
		if self.transitions:
			return False
		return self.rule is None or self.rule.dst_abbrev is None

	def _rule_applies(self, pit):
		if self._rule_offsets is None:
			return False
		return not self.transitions or pit >= self.transitions[-1]

	def find(self, pit, search=bisect.bisect):
		"""
		# Get the appropriate offset in the zone for a given Point In Time, &pit.
		# If the &pit precedes all transitions, the &default will be returned.

		# [ Parameters ]
		# /pit/
			# The &types.Instant to use to find an offset with.
		"""
		if self._rule_applies(pit):
			timestamp = (int(pit) + types.unix_epoch_delta) // _second
			isdst = tzif.rule_offset(self.rule, timestamp)[2]
			return self._rule_offsets[isdst]

		idx = search(self.transitions, pit) - 1
		if idx < 0:
			return self.default
		return self.offsets[idx]

	def _rule_points(self, start, stop):
		if self._rule_offsets is None or self.rule.dst_abbrev is None:
			return

		if self.transitions:
			floor = self.transitions[-1]
		else:
			floor = None

		first = max(start, floor) if floor is not None else start
		first = tzif.year_of((int(first) + types.unix_epoch_delta) // _second) - 1
		last = tzif.year_of((int(stop) + types.unix_epoch_delta) // _second)

		for year in range(first, last + 1):
			for timestamp, isdst in tzif.rule_transitions(self.rule, year):
				pit = types.Instant.from_unix(timestamp)
				if floor is not None and pit <= floor:
					continue
				yield (pit, self._rule_offsets[isdst])

	def slice(self, start, stop, search=bisect.bisect):
		"""
		# Get a slice of transition points and time zone offsets
		# relative to a given &start and &stop.

		# Returns a list of the transition in effect at &start, if any, and the
		# transitions occurring before &stop paired with their &Offset.

		# [ Parameters ]
		# /start/
			# The start of the period.
		# /stop/
			# The end of the period.
		"""
		points = list(zip(self.transitions, self.offsets))
		points.extend(self._rule_points(start, stop))
		times = [x[0] for x in points]

		first_offset = max(search(times, start) - 1, 0)
		last_offset = search(times, stop)
		return points[first_offset:last_offset]

	def localize(self, pit):
		"""
		# Given &pit, return the localized version according to the zone's transitions.

		# Returns the local time and its &Offset in a tuple.
		"""
		offset = self.find(pit)
		return (types.Instant(int(pit) + (offset.magnitude * _second)), offset)

	def normalize(self, offset, pit):
		"""
		# Re-localize the local time &pit, that was produced with &offset, after
		# adjustments have been made to it.

		# If no change is necessary, the exact, given &pit will be returned.

		# Returns the re-localized &pit and its new &Offset in a tuple.
		"""
		p = types.Instant(int(pit) - (offset.magnitude * _second))

		new_offset = self.find(p)
		if offset == new_offset:
			# no adjustment necessary
			return (pit, offset)
		return (types.Instant(int(p) + (new_offset.magnitude * _second)), new_offset)

	def candidates(self, wall, day=earth.nanoseconds['day']):
		"""
		# The instants whose local time is &wall, paired with their &Offset.

		# Returns an empty list when &wall falls in a gap, one pair normally,
		# and two pairs, earliest first, when &wall is repeated by an overlap.
		"""
		wall = int(wall)

		offsets = []
		for sample in (wall - day, wall, wall + day):
			o = self.find(types.Instant(sample))
			if o not in offsets:
				offsets.append(o)

		results = []
		for o in offsets:
			pit = types.Instant(wall - (o.magnitude * _second))
			if self.find(pit) == o and pit not in [x[0] for x in results]:
				results.append((pit, o))

		results.sort(key=lambda x: x[0])
		return results

	def gap(self, wall, day=earth.nanoseconds['day']):
		"""
		# Identify the transition skipping the local time &wall.

		# Returns `(transition, before, after)` where `transition` is the first
		# instant whose local time follows &wall, and `before` and `after` are the
		# offsets in effect on either side of it.
		"""
		wall = int(wall)
		lo = wall - day
		hi = wall + day

		while hi - lo > 1:
			mid = (lo + hi) // 2
			if mid + (self.find(types.Instant(mid)).magnitude * _second) > wall:
				hi = mid
			else:
				lo = mid

		return (
			types.Instant(hi),
			self.find(types.Instant(lo)),
			self.find(types.Instant(hi)),
		)

	@classmethod
	def fixed(Class, seconds, abbreviation=None, name=None):
		"""
		# Construct a zone with a single offset, &seconds east of UTC.
		"""
		if abbreviation is None:
			if seconds == 0:
				abbreviation = 'UTC'
			else:
				abbreviation = Class.Offset((seconds, '', 'std')).iso

		offset = Class.Offset((seconds, abbreviation, 'std'))
		return Class([], [], offset, name=name or abbreviation)

	@classmethod
	def from_rule(Class, string, name=None):
		"""
		# Construct a zone from a POSIX TZ rule string such as `EST5EDT,M3.2.0,M11.1.0`.

		# Raises &ValueError when &string is not a rule.
		"""
		rule = tzif.parse_rule(string)
		default = Class.Offset((rule.std_offset, rule.std_abbrev, 'std'))
		return Class([], [], default, name=name or string, rule=rule)

	@classmethod
	def from_tzif_data(Class, tzd, name=None, lru_cache=functools.lru_cache):
		"""
		# Construct a zone from &tzif.Data.
		"""
		# Re-use prior created offsets.
		zb = lru_cache(maxsize=None)(Class.Offset.from_tzinfo)

		transition_offsets = [zb(x[1]) for x in tzd.transitions]
		transition_points = [types.Instant.from_unix(x[0]) for x in tzd.transitions]

		rule = None
		if tzd.footer:
			try:
				rule = tzif.parse_rule(tzd.footer)
			except ValueError:
				log.warning("ignoring unreadable TZ rule %r of zone %r", tzd.footer, name)

		return Class(
			transition_points, transition_offsets, zb(tzd.types[0]),
			leaps=tzd.leaps, name=name, rule=rule,
		)

	@classmethod
	def from_file(Class, filepath, name=None):
		return Class.from_tzif_data(
			tzif.get_timezone_data(filepath),
			name = name or filepath
		)

#: The zone of Coordinated Universal Time.
utc = Zone.fixed(0, 'UTC', name='UTC')

class Directory(object):
	"""
	# Zone source reading TZif files from a zoneinfo directory.

	# Loaded zones are cached; the cache is shared by threads.

	# [ Properties ]
	# /path/
		# The zoneinfo directory; `TZDIR` or `/usr/share/zoneinfo` by default.
	"""

	#: Zones available without a zoneinfo directory.
	builtin = {
		'UTC': utc,
		'GMT': Zone.fixed(0, 'GMT', name='GMT'),
		'Z': utc,
	}

	def __init__(self, path=None, environ=os.environ):
		self.environ = environ
		self._path = path
		self._cache = {}
		self._lock = threading.Lock()

	@property
	def path(self):
		return self._path or self.environ.get(tzif.tzdirenviron) or tzif.tzdir

	def __repr__(self):
		return "%s(%r)" %(self.__class__.__name__, self.path)

	def _load(self, name):
		if name in self.builtin:
			return self.builtin[name]

		parts = name.split('/')
		if not name or name.startswith('/') or '..' in parts or '' in parts:
			raise core.UnknownZoneOrLocale(name, self)

		filepath = os.path.join(self.path, *parts)
		if os.path.isfile(filepath):
			try:
				z = Zone.from_file(filepath, name=name)
			except (OSError, ValueError) as err:
				raise core.UnknownZoneOrLocale(name, self) from err
			log.debug("loaded zone %r from %r", name, filepath)
			return z

		try:
			z = Zone.from_rule(name)
		except ValueError as err:
			raise core.UnknownZoneOrLocale(name, self) from err
		log.debug("zone %r constructed from its rule", name)
		return z

	def zone_by_name(self, name):
		"""
		# Get the &Zone identified by &name: a zoneinfo path such as
		# `America/New_York`, a builtin name, or a POSIX TZ rule string.

		# Raises &core.UnknownZoneOrLocale when the zone cannot be found.
		"""
		with self._lock:
			key = (self.path, name)
			z = self._cache.get(key)
			if z is None:
				z = self._cache[key] = self._load(name)
		return z

	def default(self):
		"""
		# The zone selected by the `TZ` environment variable, falling back to
		# `/etc/localtime`, and then &utc.
		"""
		tz = self.environ.get(tzif.tzenviron)

		if tz is None:
			if os.path.isfile(tzif.tzdefault):
				return Zone.from_file(tzif.tzdefault, name='localtime')
			return utc

		if tz.startswith(':'):
			tz = tz[1:]
		if not tz:
			return utc

		if os.path.isabs(tz):
			try:
				return Zone.from_file(tz)
			except (OSError, ValueError) as err:
				raise core.UnknownZoneOrLocale(tz, self) from err

		return self.zone_by_name(tz)

#: The directory of the system's zoneinfo.
directory = Directory()
