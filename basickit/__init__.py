"""Classic programming exercises: dates, calendars, bases, big integers, arrays, lists, containers, text and patterns."""

__version__ = "0.1.0"