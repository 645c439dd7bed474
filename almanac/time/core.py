"""
# Error taxonomy shared by the time modules.

# Every operation that can fail raises a subclass of &Error carrying the
# input that could not be processed. Nothing is replaced with a default.

# [ Elements ]
# /UnresolvableDate/
	# A field set denotes no real date, or its fields contradict each other.
# /NonexistentResult/
	# Calendar arithmetic produced a wall time that does not exist and the
	# policy in effect refused to adjust it.
# /NoMatch/
	# A bounded search for a matching date was exhausted.
# /InvalidInterval/
	# An interval would have a negative duration.
# /UnparsableInput/
	# A string did not match a format or named no valid date.
	# Refined by &ParseError, &StructureError, and &IntegrityError.
# /InvalidPattern/
	# A format pattern used an unknown token.
# /UnknownZoneOrLocale/
	# An identifier was not found in a zone or locale source.
"""

class Error(Exception):
	"""
	# Base class for the exceptions raised by &..time.
	"""

class UnresolvableDate(Error, ValueError):
	"""
	# The field set, &fields, does not denote a real date.
	"""

	def __init__(self, fields, reason):
		self.fields = fields
		self.reason = reason

	def __str__(self):
		return "%s: %r" %(self.reason, self.fields)

class NonexistentResult(Error, ValueError):
	"""
	# Adding &duration to &instant produced the wall time &wall, which is
	# skipped by the zone.
	"""

	def __init__(self, duration, instant, wall=None):
		self.duration = duration
		self.instant = instant
		self.wall = wall

	def __str__(self):
		return "no instant for %r added to %r" %(self.duration, self.instant)

class NoMatch(Error, LookupError):
	"""
	# No instant matching &pattern was found after &instant within the &horizon.
	"""

	def __init__(self, pattern, instant, horizon=None):
		self.pattern = pattern
		self.instant = instant
		self.horizon = horizon

	def __str__(self):
		return "no match for %r after %r" %(self.pattern, self.instant)

class InvalidInterval(Error, ValueError):
	"""
	# The interval starting at &start would end before it.
	"""

	def __init__(self, start, duration):
		self.start = start
		self.duration = duration

	def __str__(self):
		return "negative duration %r from %r" %(self.duration, self.start)

class InvalidPattern(Error, ValueError):
	"""
	# The &pattern contains an unrecognized &token.
	"""

	def __init__(self, pattern, token, position=None):
		self.pattern = pattern
		self.token = token
		self.position = position

	def __str__(self):
		return "unrecognized token %r in pattern %r" %(self.token, self.pattern)

class UnknownZoneOrLocale(Error, LookupError):
	"""
	# The &identifier was not available from the &source.
	"""

	def __init__(self, identifier, source=None):
		self.identifier = identifier
		self.source = source

	def __str__(self):
		if self.source is None:
			return repr(self.identifier)
		return "%r not found in %r" %(self.identifier, self.source)

class UnparsableInput(Error, ValueError):
	"""
	# The &source string could not be converted using &format.
	"""

	def __init__(self, source, *args, format=None):
		self.source = source
		self.args = args
		self.format = format

	def __str__(self):
		return "could not parse %r using %r" %(self.source, self.format)

class ParseError(UnparsableInput):
	"""
	# The &source string did not match the format.
	"""

class StructureError(UnparsableInput):
	"""
	# The matched text could not be converted into fields.
	"""

class IntegrityError(UnparsableInput):
	"""
	# The fields extracted from the text do not denote a valid date.
	"""
