"""
Test suite for tokenswap

Contains:
- tests/unit/          : Unit tests for individual modules
"""
