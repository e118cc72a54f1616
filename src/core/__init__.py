"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the converter:
exact arithmetic, radix conversion and record models. It does no I/O.
"""
