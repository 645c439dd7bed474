"""
# Expose the harness &almanac.test.core.Test to pytest as the `test` fixture.

# Test functions are written against the harness, `def test_x(test)`; under
# pytest the fixture provides the same object so contentions raise
# &almanac.test.core.Absurdity and skipped fates become pytest skips.
"""
import pytest
from almanac.test import core

class Test(core.Test):
	__slots__ = ()

	def skip(self, condition):
		if condition:
			pytest.skip(str(condition))

@pytest.fixture
def test(request):
	t = Test(request.node.nodeid, request.function)
	with t.exits:
		yield t
