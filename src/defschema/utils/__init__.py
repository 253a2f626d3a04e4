"""Utility helpers for defschema."""
