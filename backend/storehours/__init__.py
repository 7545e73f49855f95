"""Weekly availability schedules evaluated across timezones."""

__version__ = "0.1.0"
