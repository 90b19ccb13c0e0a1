"""Building blocks for service-registry clients: UUIDs, models, request parameters and utilities."""

__version__ = "0.1.0"