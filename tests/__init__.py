"""
Test suite for fracradix

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
