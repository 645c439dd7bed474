"""
# Test harness for the almanac projects.

# Test modules define `test_` prefixed functions taking a single &core.Test
# argument. Assertions are contentions formed with the true division operator:

#!syntax/python
	def test_feature(test):
		test/subject() == expectation
		with test/ValueError:
			subject(invalid)
"""
