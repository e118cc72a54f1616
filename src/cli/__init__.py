"""
Command-line interface for the fractional radix converter.

Usage:
    python -m src.cli [BASE] VALUE... [options]
"""

__version__ = "0.1.0"
