"""ASCII Path Walker: walks ASCII path maps and collects letters."""

__version__ = "1.0.0"
