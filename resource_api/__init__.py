"""Resource API - CRUD service for resource records."""

__version__ = "1.0.0"
