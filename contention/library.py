"""
# Test collection and execution.
"""
import sys

from . import core

Test = core.Test

def test_index(subject):
	"""
	# The first line of the innermost wrapped function of &subject.
	"""
	while '__wrapped__' in subject.__dict__:
		subject = subject.__wrapped__
	try:
		return int(subject.__code__.co_firstlineno)
	except AttributeError:
		return 0

def gather(container, prefix='test_', getattr=getattr):
	"""
	# The `(identifier, subject)` pairs of the functions in &container whose name
	# starts with &prefix in the order of their definition.
	"""
	tests = [
		('#'.join((container.__name__, name)), getattr(container, name))
		for name in dir(container)
		if name.startswith(prefix) and callable(getattr(container, name))
	]
	tests.sort(key=lambda x: test_index(x[1]))
	return tests

def execute(module, Test=Test, stream=sys.stderr):
	"""
	# Run the tests of &module reporting each fate to &stream.

	# The cause of the first failure is raised after its fate is reported.
	"""
	for id, subject in gather(module):
		test = Test(id, subject)
		with test.exits:
			test.seal()

		fate = test.fate
		stream.write('%s: %s\n' % (id, fate.descriptors[fate.subtype][0]))
		if fate.negative:
			raise fate
