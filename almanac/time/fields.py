"""
# Sparse sets of calendar fields.

# A &FieldSet names a date, or part of one, in terms of calendar fields. The
# same structure describes durations in calendar units when given to
# &.engine.Engine.add_fields. Fields that were never set are &None, which is
# distinct from zero: an unset field does not constrain, a set field is exact.

#!syntax/python
	feb_one = fields.FieldSet(month=2, day=1)
	duration = fields.FieldSet(hour=5, minute=4, second=3)

	assembly = fields.FieldSet()
	assembly.hour = 2
	assembly.minute = 10
	assert assembly.month is None

# Nothing validates the combination of fields as they are set; `day=31` and
# `month=2` can coexist until &FieldSet.is_valid_date, or a conversion, is
# performed.
"""

#: The field names in order of significance, largest first.
names = (
	'era',
	'year',
	'year_for_week_of_year',
	'quarter',
	'month',
	'week_of_year',
	'week_of_month',
	'weekday_ordinal',
	'day',
	'weekday',
	'hour',
	'minute',
	'second',
	'nanosecond',
)

#: Fields identifying a day.
date_fields = names[:names.index('hour')]

#: Fields identifying a time of day.
time_fields = names[names.index('hour'):]

class FieldSet(object):
	"""
	# A mapping of field names to optional integers with an optional calendar
	# system and zone.

	# [ Properties ]
	# /calendar/
		# The &.calendars.CalendarSystem the fields are relative to, if any.
	# /zone/
		# The &.views.Zone overriding the calendar's zone, if any.
	"""
	__slots__ = names + ('calendar', 'zone')

	def __init__(self, calendar=None, zone=None, **fields):
		self.calendar = calendar
		self.zone = zone
		for k in names:
			setattr(self, k, None)

		for k, v in fields.items():
			if k not in names:
				raise TypeError("unknown calendar field: " + repr(k))
			setattr(self, k, v)

	def __repr__(self):
		fields = ', '.join('%s=%r' %(k, v) for k, v in self.items())
		return "%s(%s)" %(self.__class__.__name__, fields)

	def __eq__(self, ob):
		if not isinstance(ob, FieldSet):
			return NotImplemented
		return (
			self.calendar == ob.calendar and
			self.zone is ob.zone and
			tuple(self.items()) == tuple(ob.items())
		)

	__hash__ = None

	def get(self, name):
		"""
		# The value of the field &name, or &None when it is not set.
		"""
		if name not in names:
			raise KeyError(name)
		return getattr(self, name)

	def set(self, name, value):
		"""
		# Assign &value to the field &name and return the field set.
		# &None clears the field.
		"""
		if name not in names:
			raise KeyError(name)
		setattr(self, name, value)
		return self

	def items(self):
		"""
		# Iterate the pairs of field names and values that are set.
		"""
		for k in names:
			v = getattr(self, k)
			if v is not None:
				yield (k, v)

	def specified(self):
		"""
		# The names of the fields that are set.
		"""
		return frozenset(k for k in names if getattr(self, k) is not None)

	def copy(self):
		return self.__class__(calendar=self.calendar, zone=self.zone, **dict(self.items()))

	def is_valid_date(self, system=None):
		"""
		# Whether the fields denote at least one real date in &system, or the
		# field set's own &calendar when &system is &None. Without either,
		# the fields cannot be interpreted and &False is returned.
		"""
		system = system or self.calendar
		if system is None:
			return False

		from . import engine # Defer import until usage.
		return engine.Engine(system).is_valid_date(self)
