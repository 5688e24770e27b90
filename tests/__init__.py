"""
Test suite for tempora

Contains:
- tests/unit/          : Unit tests for individual modules
"""
