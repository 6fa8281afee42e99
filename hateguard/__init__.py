"""HateGuard -- demonstration interface for a hate speech classifier."""

__version__ = "0.1.0"
