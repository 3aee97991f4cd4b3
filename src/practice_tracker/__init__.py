"""Practice Tracker - log practice sessions and total your practice time."""

__version__ = "0.1.0"
