"""Small parsing helpers."""
