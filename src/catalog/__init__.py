"""Product catalog: CRUD API server and client state store."""

__version__ = "1.0.0"
