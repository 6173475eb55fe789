"""
Test suite for algokit

Contains:
- tests/unit/          : Unit tests for sorting, matrix multiplication and bench
"""
