"""Hotel reservations - room catalog, payments and reservation lifecycle."""

__version__ = "0.1.0"
