"""llmdoc: migrate project markdown documentation into typed records."""

__version__ = "0.1.0"
