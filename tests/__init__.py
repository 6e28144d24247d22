"""
Test suite for complexkit

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
