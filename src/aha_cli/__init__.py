"""aha: connectivity checks for configured databases, caches, endpoints and topics."""

__version__ = "0.1.0"
