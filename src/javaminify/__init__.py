"""javaminify - Trim a Maven build environment down to a minimal set of classes."""

__version__ = "0.1.0"
