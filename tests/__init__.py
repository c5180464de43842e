"""
Test suite for the string calculator

Contains:
- tests/unit/          : Unit tests for individual modules and the full pipeline
"""
