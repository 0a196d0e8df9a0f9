"""pkgdoc — package discovery and documentation for PSR-4 codebases."""

__version__ = "0.1.0"
