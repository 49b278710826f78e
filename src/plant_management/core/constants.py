"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LEAVES = 12
DEFAULT_ABSENCES = 0
