"""Command-line client for the PTV timetable API."""

__version__ = "0.1.0"
