"""Package version shared by all taskmon packages."""

__version__ = "0.2.0"
