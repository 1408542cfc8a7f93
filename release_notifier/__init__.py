"""Push release information from merged pull requests into monday.com tasks."""

__version__ = "0.1.0"
