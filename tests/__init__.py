"""
Test suite for the fulfillment engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
