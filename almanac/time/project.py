identity = 'http://almanac.example/python/time'
name = 'time'
abstract = 'Calendar arithmetic, zones, and formatting over nanosecond instants.'
icon = '📅'
study = 'horology'

version_info = (0, 1, 0)
version = '0.1.0'
