"""Rich rendering helpers."""
