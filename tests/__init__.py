"""
Chronassert Test Suite

This directory contains the tests for Chronassert:
- Unit tests for parsing, normalization and comparison
- Tests for each assertion wrapper
- Tests for failure messages, reporting and settings
"""
