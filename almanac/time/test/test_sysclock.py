from .. import abstract
from .. import sysclock
from .. import types

def test_fixed_clock(test):
	clock = sysclock.FixedClock()
	test/clock.read() == 0
	test/sysclock.now(clock) == types.Instant(0)
	test/isinstance(sysclock.now(clock), types.Instant) == True

	test/clock.advance(hour=1) == types.Instant.of(hour=1)
	test/clock.read() == 3600 * 1000000000

	clock.set(types.Instant.of(day=1))
	test/sysclock.now(clock) == types.Instant.of(day=1)

def test_since(test):
	clock = sysclock.FixedClock(types.Instant.of(second=5))
	test/sysclock.since(types.Instant(0), clock) == types.Measure.of(second=-5)
	test/sysclock.since(types.Instant.of(second=7), clock) == types.Measure.of(second=2)

def test_system_clock(test):
	clock = sysclock.SystemClock(read=lambda: types.unix_epoch_delta + 7)
	test/clock.read() == 7

	# The real clock is past the reference date.
	test/sysclock.now() > types.Instant(0)
	test/isinstance(sysclock.now(), types.Instant) == True

def test_elapsed(test):
	a = sysclock.elapsed()
	b = sysclock.elapsed()
	test/isinstance(a, types.Measure) == True
	test/b >= a

def test_protocol(test):
	test/isinstance(sysclock.system, abstract.Clock) == True
	test/isinstance(sysclock.FixedClock(), abstract.Clock) == True

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
