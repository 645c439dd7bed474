"""
# Collection and execution of test modules.
"""
import sys
from . import core

def source_line(subject):
	"""
	# The first line of the test function's code; zero when it has none.
	"""
	subject = getattr(subject, '__wrapped__', subject)
	code = getattr(subject, '__code__', None)
	if code is None:
		return 0
	return code.co_firstlineno

def gather(module, prefix='test_'):
	"""
	# The names of the test functions in &module ordered by their position
	# in the source.
	"""
	names = sorted(x for x in dir(module) if x.startswith(prefix))
	return sorted(names, key=(lambda x: source_line(getattr(module, x))))

def execute(module, stderr=sys.stderr):
	"""
	# Seal the fate of the tests in &module, reporting each conclusion to &stderr.
	# The fate of the first failure is raised after all tests have been run.
	"""
	failure = None

	for name in gather(module):
		test = core.Test(name, getattr(module, name))
		with test.exits:
			test.seal()

		stderr.write("%s: %s\n" %(name, test.fate.abstract))
		if test.fate.negative and failure is None:
			failure = test.fate

	if failure is not None:
		raise failure
