"""Configuration loading and descriptor models."""
