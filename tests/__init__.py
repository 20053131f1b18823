"""
Test suite for decto

Contains:
- tests/unit/          : Unit tests for individual modules
"""
