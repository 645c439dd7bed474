"""
# Typed clock access.

# Clocks are objects with a `read` method returning the nanoseconds elapsed
# since the reference date. &system reads the operating system's real time
# clock; &FixedClock is a manually advanced clock for deterministic use.
"""
import time
from . import types

class SystemClock(object):
	"""
	# The operating system's real time clock.
	"""

	def __init__(self, read=time.time_ns, delta=types.unix_epoch_delta):
		self._read = read
		self._delta = delta

	def __repr__(self):
		return "%s()" %(self.__class__.__name__,)

	def read(self):
		return self._read() - self._delta

class FixedClock(object):
	"""
	# A clock that only changes when it is told to.
	"""

	def __init__(self, instant=0):
		self.instant = types.Instant(instant)

	def __repr__(self):
		return "%s(%r)" %(self.__class__.__name__, self.instant)

	def read(self):
		return int(self.instant)

	def set(self, instant):
		self.instant = types.Instant(instant)

	def advance(self, *units, **parts):
		"""
		# Move the clock forward by the duration described by &units and &parts.
		"""
		self.instant = self.instant.elapse(*units, **parts)
		return self.instant

#: The system's real time clock.
system = SystemClock()

def now(clock=None, Instant=types.Instant) -> types.Instant:
	"""
	# Get the current point in time according to &clock, the system's real
	# clock by default.
	"""
	return Instant((clock or system).read())

def since(pit, clock=None) -> types.Measure:
	"""
	# The signed &types.Measure from now to &pit; negative when &pit is in the past.
	"""
	return now(clock).measure(pit)

def elapsed(Measure=types.Measure, read=time.monotonic_ns) -> types.Measure:
	"""
	# Snapshot of the system's monotonic clock. Returns a &types.Measure.
	"""
	return Measure(read())
