"""
Test suite for the Fibonacci engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
