"""
Test suite for the C-like type constraint engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
