"""In-memory key/value engine, UTF-8 validation, entity parsing, response constants and file locks."""

__version__ = "0.1.0"