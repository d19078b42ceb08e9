"""Concrete résumé layouts."""
