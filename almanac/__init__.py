"""
# Date and time projects.

# [ Projects ]

# /&.time/
	# Instants, calendar field sets, calendar arithmetic, zones, and formatting.
# /&.test/
	# The test harness used by the projects' test modules.
"""
