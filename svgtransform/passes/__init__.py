"""Normalization passes. Modules here register themselves on import."""
