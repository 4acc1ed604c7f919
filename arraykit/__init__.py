"""List and integer algorithms: sorted set operations, rearrangements, searches, column titles and palindromes."""

__version__ = "0.1.0"
__all__ = ["columns", "digits", "rearrange", "search", "setops"]