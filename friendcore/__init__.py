"""Settings, records, users, password and token helpers, database access, logging and
authentication middleware for a social platform backend."""

__version__ = "0.1.0"