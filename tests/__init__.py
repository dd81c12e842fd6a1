"""
Test suite for number-to-words

Contains:
- tests/unit/          : Unit tests for individual modules
"""
