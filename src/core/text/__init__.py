"""
Text-Stream Adapter: чтение/запись BigInteger в текстовые потоки.
"""

from src.core.text.stream_adapter import (
    format_big_integer,
    iter_big_integers,
    parse_token,
    read_big_integer,
    read_token,
    write_big_integer,
)

__all__ = [
    "format_big_integer",
    "iter_big_integers",
    "parse_token",
    "read_big_integer",
    "read_token",
    "write_big_integer",
]
