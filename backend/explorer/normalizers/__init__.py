"""Normalizers: pure functions over raw ledger object records.

Nothing here performs I/O or keeps state between calls. Malformed input
degrades to None / empty results instead of raising.
"""
