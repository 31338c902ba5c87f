"""userctl: validated user records persisted in a local JSON file."""

__version__ = "0.1.0"
