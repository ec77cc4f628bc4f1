"""
Test suite for chinese_format

Contains:
- tests/unit/          : Unit tests for individual modules
"""
