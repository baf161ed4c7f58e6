"""authcore - minimal email/password authentication backend."""

__version__ = "0.1.0"
