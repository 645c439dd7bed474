"""
# Time domain classes for points in time, measures of time, and intervals.

#!syntax/python
	ref = types.Instant(0) # 2001-01-01T00:00:00Z
	two_hours = types.Measure.of(hour=2)

	later = ref.elapse(two_hours, minute=2)
	assert ref.leads(later)
	assert later.measure(ref) == -two_hours.increase(minute=2)

# Instants and measures are &int subclasses counting nanoseconds; instants
# count from the reference date, 2001-01-01T00:00:00 UTC.

# [ Elements ]

# /Order/
	# Result of a three-way comparison.
# /Measure/
	# The nanosecond precision, signed, exact duration.
# /Instant/
	# The nanosecond precision point in time.
# /Interval/
	# A non-negative span beginning at an &Instant.
"""
import enum
import fractions
from . import core
from . import earth
from . import gregorian

#: Gregorian day count of the reference date, 2001-01-01.
reference_days = gregorian.days_from_date((2001, 1, 1))

#: Gregorian day count of the unix epoch, 1970-01-01.
unix_days = gregorian.days_from_date((1970, 1, 1))

#: Nanoseconds between the unix epoch and the reference date.
unix_epoch_delta = (reference_days - unix_days) * earth.nanoseconds['day']

def nanoseconds_from_seconds(seconds, Fraction=fractions.Fraction, int=int):
	"""
	# Convert a quantity of seconds to nanoseconds, rounding to the nearest nanosecond.
	# &Measure instances are taken as already being nanoseconds.
	"""
	if isinstance(seconds, Measure):
		return int(seconds)
	return round(Fraction(seconds) * earth.nanoseconds_in_second)

class Order(enum.IntEnum):
	"""
	# Three-way comparison result.
	"""
	before = -1
	same = 0
	after = 1

	@classmethod
	def compare(Class, former, latter):
		if former < latter:
			return Class.before
		elif former > latter:
			return Class.after
		return Class.same

class Unit(int):
	__slots__ = ()

	@classmethod
	def construct(Class, units, parts, start=0, sign=1, ratios=earth.nanoseconds):
		total = fractions.Fraction(start)
		for x in units:
			total += sign * int(x)
		for unit, value in parts.items():
			if unit == 'subsecond':
				unit = 'second'
			total += sign * fractions.Fraction(value) * ratios[unit]
		return Class(round(total))

	@classmethod
	def of(Class, *units, **parts):
		"""
		# Create an instance from the sum of &units and &parts:

		#!syntax/python
			m = Measure.of(hour=33, microsecond=44)
		"""
		return Class.construct(units, parts)

	def select(self, part, of=None, ratios=earth.nanoseconds):
		"""
		# Extract the number of complete &part units after the last complete
		# &of unit.

		#!syntax/python
			h = m.select('hour', 'day')
			s = m.select('second', 'minute')
		"""
		n = int(self)
		if of is not None:
			n %= ratios[of]
		return n // ratios[part]

	def truncate(self, unit, ratios=earth.nanoseconds):
		"""
		# Remove the parts smaller than &unit.
		"""
		n = int(self)
		return self.__class__(n - (n % ratios[unit]))

class Measure(Unit):
	"""
	# An exact, signed, duration in nanoseconds.
	"""
	__slots__ = ()
	unit = 'nanosecond'

	@property
	def start(self):
		return self.__class__(0)

	@property
	def stop(self):
		return self

	@property
	def seconds(self):
		"""
		# The duration in seconds. An &int when whole, otherwise a &fractions.Fraction.
		"""
		r = fractions.Fraction(int(self), earth.nanoseconds_in_second)
		if r.denominator == 1:
			return r.numerator
		return r

	def __contains__(self, t):
		return 0 <= t < self

	def __neg__(self):
		return self.__class__(super().__neg__())

	def __abs__(self):
		return self.__class__(super().__abs__())

	def __add__(self, ob):
		if isinstance(ob, Instant):
			return ob.__add__(self)
		if isinstance(ob, Measure):
			return self.__class__(int(self) + int(ob))
		return super().__add__(ob)

	def __sub__(self, ob):
		if isinstance(ob, Measure):
			return self.__class__(int(self) - int(ob))
		return super().__sub__(ob)

	def __repr__(self):
		if self < 0:
			sign = '-'
			sub = -self
		else:
			sign = ''
			sub = self

		fields = [
			(u, sub.select(u, p)) for u, p in (
				('d', None), ('h', 'd'), ('m', 'h'), ('s', 'm'),
				('ms', 's'), ('us', 'ms'), ('ns', 'us'),
			)
		]
		units = '.'.join([str(v)+u for u, v in fields if v != 0]) or '0s'
		return "(time.measure@'%s%s')" %(sign, units)

	def select(self, part, of=None, _abbreviations={
			'd': 'day', 'h': 'hour', 'm': 'minute', 's': 'second',
			'ms': 'millisecond', 'us': 'microsecond', 'ns': 'nanosecond',
		}):
		part = _abbreviations.get(part, part)
		of = _abbreviations.get(of, of)
		return super().select(part, of)

	def increase(self, *units, **parts):
		return self.construct(units, parts, start=self)

	def decrease(self, *units, **parts):
		return self.construct(units, parts, start=self, sign=-1)

class Instant(Unit):
	"""
	# A point in time: nanoseconds elapsed since 2001-01-01T00:00:00 UTC.

	# Calendar interpretation is performed by &.engine.Engine; the instant
	# itself is independent of calendars and zones.
	"""
	__slots__ = ()
	unit = 'nanosecond'
	Measure = Measure

	@classmethod
	def now(Class, clock=None):
		"""
		# The current instant according to &clock; the system's real clock by default.
		"""
		if clock is None:
			from . import sysclock # Defer import until usage.
			clock = sysclock.system
		return Class(clock.read())

	@classmethod
	def from_epoch_offset(Class, seconds):
		"""
		# The instant &seconds after the reference date.
		"""
		return Class(nanoseconds_from_seconds(seconds))

	@classmethod
	def from_unix(Class, seconds, delta=unix_epoch_delta):
		"""
		# The instant &seconds after the unix epoch, 1970-01-01T00:00:00 UTC.
		"""
		return Class(nanoseconds_from_seconds(seconds) - delta)

	@property
	def epoch_offset(self):
		"""
		# Seconds since the reference date.
		"""
		return Measure(self).seconds

	@property
	def unix(self, delta=unix_epoch_delta):
		"""
		# Seconds since the unix epoch.
		"""
		return Measure(int(self) + delta).seconds

	@property
	def start(self):
		return self

	@property
	def stop(self):
		return self.__class__(int(self) + 1)

	def __add__(self, ob):
		if isinstance(ob, Instant) or not isinstance(ob, int):
			return NotImplemented
		return self.__class__(int(self) + int(ob))
	__radd__ = __add__

	def __sub__(self, ob):
		"""
		# The &Measure between two instants, or the instant &ob nanoseconds
		# before this one.
		"""
		if isinstance(ob, Instant):
			return Measure(int(self) - int(ob))
		if not isinstance(ob, int):
			return NotImplemented
		return self.__class__(int(self) - int(ob))

	def __repr__(self):
		return "(time.instant@'%s')" %(self.iso(),)

	def __str__(self):
		return self.iso()

	def iso(self):
		"""
		# ISO-8601 representation of the instant in UTC.
		"""
		days, ns = divmod(int(self), earth.nanoseconds['day'])
		y, m, d = gregorian.date_from_days(days + reference_days)
		h, mi, s, n = earth.timeofday(ns)

		if n:
			frac = '.' + str(n).rjust(9, '0').rstrip('0')
		else:
			frac = ''
		return "%04d-%02d-%02dT%02d:%02d:%02d%sZ" %(y, m, d, h, mi, s, frac)

	def add(self, seconds):
		"""
		# The instant &seconds after this one; negative values move backwards.
		"""
		return self.__class__(int(self) + nanoseconds_from_seconds(seconds))

	def subtract(self, pit):
		"""
		# The &Measure from &pit to this instant.
		"""
		return Measure(int(self) - int(pit))

	def compare(self, pit):
		"""
		# Whether this instant is before, the same as, or after &pit.
		"""
		return Order.compare(int(self), int(pit))

	def measure(self, pit):
		"""
		# The &Measure from this instant to &pit.
		"""
		return Measure(int(pit) - int(self))

	def elapse(self, *units, **parts):
		"""
		# The instant after the exact duration described by &units and &parts.
		"""
		return self.construct(units, parts, start=self)

	def rollback(self, *units, **parts):
		"""
		# The instant before the exact duration described by &units and &parts.
		"""
		return self.construct(units, parts, start=self, sign=-1)

	def leads(self, pit):
		"""
		# Whether this instant comes before &pit.
		"""
		return int(self) < int(pit)

	def follows(self, pit):
		"""
		# Whether this instant comes after &pit.
		"""
		return int(self) > int(pit)

class Interval(tuple):
	"""
	# A non-negative span of time: `(start, duration)`.

	# The span includes its &start and excludes its &end; an interval with a
	# zero duration contains exactly its start. Intervals order by start,
	# then duration.
	"""
	__slots__ = ()

	def __new__(Class, start, duration):
		if not isinstance(duration, Measure):
			# Plain numbers are seconds.
			duration = Measure(nanoseconds_from_seconds(duration))
		if duration < 0:
			raise core.InvalidInterval(start, duration)
		return super().__new__(Class, (Instant(start), duration))

	@classmethod
	def between(Class, start, end):
		"""
		# The interval from &start to &end; &end must not precede &start.
		"""
		return Class(start, Measure(int(end) - int(start)))

	def __repr__(self):
		return "%s(%r, %r)" %(self.__class__.__name__, self[0], self[1])

	@property
	def start(self):
		return self[0]

	@property
	def duration(self):
		return self[1]

	@property
	def end(self):
		return Instant(int(self[0]) + int(self[1]))

	@property
	def magnitude(self):
		return self[1]

	def contains(self, pit):
		"""
		# Whether &pit falls within the interval.
		"""
		start, duration = self
		if duration == 0:
			return pit == start
		return start <= pit < start + duration

	__contains__ = contains

	def overlaps(self, interval):
		"""
		# Whether the two intervals share an instant.
		"""
		if self.duration == 0:
			return interval.contains(self.start)
		if interval.duration == 0:
			return self.contains(interval.start)
		return self.start < interval.end and interval.start < self.end

	def intersection(self, interval):
		"""
		# The interval shared by both intervals, or &None when they do not overlap.
		"""
		if not self.overlaps(interval):
			return None
		start = max(self.start, interval.start)
		end = min(self.end, interval.end)
		return self.between(start, end)

	def points(self, step):
		"""
		# Iterate through the instants of the interval separated by &step.
		"""
		step = Measure(step)
		if step <= 0:
			raise ValueError("step must be positive")

		pos = self.start
		stop = self.end
		if pos == stop:
			yield pos
			return

		while pos < stop:
			yield pos
			pos = Instant(int(pos) + int(step))
