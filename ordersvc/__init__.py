"""Order service: domain model, SQLite storage, shipping fees and a JSON over HTTP API."""

__version__ = "0.1.0"