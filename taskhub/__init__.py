"""User and task management: use cases over in-memory repositories and a Flask JSON API."""

__version__ = "0.1.0"