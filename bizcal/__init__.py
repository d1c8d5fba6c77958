"""Holiday definitions, calendars, business-day arithmetic and date helpers."""

__version__ = "2.0.0"