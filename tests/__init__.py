"""
Test suite for scripture_ranges

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/mocks.py       : Mock books and verses with fixed verse counts
"""
