#!/usr/bin/env python3
"""
Test suite.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Only the scoring engine
    python -m pytest tests/unit/core/scorer -v

Database-backed tests use an in-memory SQLite database (see
tests/fixtures/database.py), so no external services are needed.
"""
