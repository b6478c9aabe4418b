"""
# Adapt contention style test subjects for pytest.

# Test functions taking a `test` parameter receive a &contention.core.Test whose
# skip and fail fates are mapped onto pytest's outcomes.
"""
import pytest

from contention import core

class Test(core.Test):
	__slots__ = ()

	def skip(self, condition):
		if condition:
			pytest.skip(str(condition))

	def fail(self, cause):
		pytest.fail(str(cause))

@pytest.fixture()
def test(request):
	t = Test(request.node.nodeid, request.function)
	with t.exits:
		yield t

@pytest.fixture(autouse=True)
def environment():
	# Tests may install providers, clocks, or default zones.
	from horology import system
	yield system.environment
	system.reset()
