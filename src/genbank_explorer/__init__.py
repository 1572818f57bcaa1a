"""Parse GenBank flat files and query the references they cite."""

__version__ = "1.0.0"
