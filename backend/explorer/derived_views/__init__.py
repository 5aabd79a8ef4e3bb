"""Derived views: read-only views for UI consumption.

The UI renders ONLY these views, never the raw object record.
Owners are decoded, type labels normalized, fields classified.
"""
