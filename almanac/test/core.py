"""
# Harness primitives: &Test, &Contention, &Absurdity, and &Fate.

# A &Test wraps a single test function. The function receives the &Test and
# forms &Contention instances with the true division operator; a contention
# that does not hold raises &Absurdity.
"""
import operator
import contextlib

# Comparison methods of &Contention and the symbol used to report them.
comparisons = {
	'__eq__': ('==', operator.eq),
	'__ne__': ('!=', operator.ne),
	'__lt__': ('<', operator.lt),
	'__gt__': ('>', operator.gt),
	'__le__': ('<=', operator.le),
	'__ge__': ('>=', operator.ge),
	'__mod__': ('is', operator.is_),
}

class Absurdity(Exception):
	"""
	# Raised by a &Contention whose comparison did not hold.

	# [ Properties ]
	# /operator/
		# The name of the method that was applied; `'__eq__'` for `==`.
	# /former/
		# The subject of the contention.
	# /latter/
		# The operand the subject was compared with.
	# /inverse/
		# Whether the contention was negated with `//`.
	"""

	def __init__(self, operator, former, latter, inverse=False):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse

	def __str__(self, _symbols=comparisons):
		symbol = _symbols.get(self.operator, (self.operator,))[0]
		text = "%r %s %r" %(self.former, symbol, self.latter)
		if self.inverse:
			return 'not ' + text
		return text

	def __repr__(self):
		return "%s(%r, %r, %r, inverse=%r)" %(
			self.__class__.__name__, self.operator, self.former, self.latter, self.inverse
		)

def _comparison(name, compare):
	def contend(self, operand):
		x = self.object
		if bool(compare(x, operand)) is self.inverse:
			raise self.test.Absurdity(name, x, operand, inverse=self.inverse)
	contend.__name__ = name
	return contend

class Contention(object):
	"""
	# The subject of an assertion. Comparison operators applied to a contention
	# are applied to the subject, and an &Absurdity is raised when the result
	# is false.

	#!syntax/python
		test/engine.to_instant(fields) == expected
		test/interval.duration >= 0
		test//fields.is_valid_date(system) == True
		test/zone % views.utc

	# Used as a context manager, the contention traps the exception class it was
	# formed with and fails when nothing, or something else, was raised.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse
		self.storage = None

	for _name, (_symbol, _compare) in comparisons.items():
		locals()[_name] = _comparison(_name, _compare)
	del _name, _symbol, _compare

	def __enter__(self):
		return (lambda: self.storage)

	def __exit__(self, typ, val, tb):
		if isinstance(val, self.test.Fate):
			# Let conclusions pass through.
			return False

		self.storage = val
		if not isinstance(val, self.object):
			raise self.test.Absurdity('isinstance', self.object, val)
		return True

	def __xor__(self, subject):
		"""
		# Contend that calling &subject raises the exception class and return
		# the exception:

		#!syntax/python
			test/core.NoMatch ^ (lambda: engine.next_occurrence(pattern, pit))
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

	def __lshift__(self, item):
		"""
		# Contend that the subject contains &item.
		"""
		if (item in self.object) is self.inverse:
			raise self.test.Absurdity('__contains__', self.object, item, inverse=self.inverse)

class Fate(BaseException):
	"""
	# The conclusion of a &Test.

	# [ Properties ]
	# /content/
		# The value returned by the subject, or the reason given for the fate.
	# /subtype/
		# One of the keys of &outcomes.
	# /line/
		# The line of the subject where the fate was raised, when known.
	"""

	# Subtype to report text and whether it is a failure.
	outcomes = {
		'return': ("passed", False),
		'pass': ("passed", False),
		'skip': ("skipped", False),
		'fail': ("failed", True),
		'interrupt': ("interrupted", True),
	}

	def __init__(self, content, subtype='fail'):
		self.content = content
		self.subtype = subtype
		self.line = None

	@property
	def abstract(self):
		return self.outcomes[self.subtype][0]

	@property
	def negative(self):
		"""
		# Whether the fate should be considered a failure.
		"""
		return self.outcomes[self.subtype][1]

class Test(object):
	"""
	# A single test function and its &fate.

	# [ Properties ]
	# /identifier/
		# The name the function was collected under.
	# /subject/
		# The function performing the contentions.
	# /fate/
		# The &Fate assigned by &seal.
	# /exits/
		# A &contextlib.ExitStack for resources allocated by the subject.
	"""
	__slots__ = ('subject', 'identifier', 'fate', 'exits',)

	Absurdity = Absurdity
	Contention = Contention
	Fate = Fate

	def __init__(self, identifier, subject, ExitStack=contextlib.ExitStack):
		self.identifier = identifier
		self.subject = subject
		self.fate = None
		self.exits = ExitStack()

	def __truediv__(self, object):
		return self.Contention(self, object)
	__rtruediv__ = __truediv__

	def __floordiv__(self, object):
		return self.Contention(self, object, True)
	__rfloordiv__ = __floordiv__

	def seal(self):
		"""
		# Run the subject with the &Test as its only argument and assign the
		# resulting &Fate. Exceptions become failures; interrupts are noted and
		# re-raised.
		"""
		if self.fate is not None:
			raise RuntimeError("test has already been sealed")

		try:
			result = self.subject(self)
		except self.Fate as fate:
			self.fate = fate
			tb = fate.__traceback__.tb_next
		except Exception as err:
			self.fate = self.Fate('test raised exception', subtype='fail')
			self.fate.__cause__ = err
			tb = err.__traceback__.tb_next
		except BaseException as err:
			self.fate = self.Fate('test raised interrupt', subtype='interrupt')
			self.fate.__cause__ = err
			raise
		else:
			self.fate = self.Fate(result, subtype='return')
			return

		if tb is not None:
			self.fate.line = tb.tb_lineno

	def skip(self, condition):
		"""
		# Conclude the test as skipped when &condition is true.
		"""
		if condition:
			raise self.Fate(condition, subtype='skip')

	def fail(self, cause):
		raise self.Fate(cause, subtype='fail')
