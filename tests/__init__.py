"""
Test suite for betterset

Contains:
- tests/unit/          : Unit tests for individual modules
"""
