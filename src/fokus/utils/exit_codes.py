"""
Exit codes for fokus.

Scripts wrapping fokus can rely on these to tell a clean quit (0) from a
refused start.
"""

# Another fokus instance holds the lock
ERROR_ALREADY_RUNNING = 3
