"""fokus - a terminal stopwatch and focus timer with daily logging."""

__version__ = "0.1.0"
