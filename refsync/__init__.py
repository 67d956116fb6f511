"""refsync — consolidated reference synchronizer."""

__version__ = "0.1.0"
