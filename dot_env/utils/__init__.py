"""Small string helpers shared by the parser and backends."""

from .strings import equals_case_insensitive, strip_whitespace, WHITESPACE

__all__ = ["equals_case_insensitive", "strip_whitespace", "WHITESPACE"]
