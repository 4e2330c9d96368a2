"""
Core arbitrary-precision integer arithmetic.

This package contains the BigInteger value type, base conversion
and the text-stream adapter. It has no dependencies on external
systems.
"""
