"""Keyed containers, hash tables and a record index for genealogical data."""

__version__ = "0.1.0"
__all__ = ["block", "hashtable", "keyedlist", "keyedset", "recordindex", "sort", "tables"]