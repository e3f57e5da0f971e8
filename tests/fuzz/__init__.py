"""Intensive property tests for statewalk.

Excluded from normal runs by tests/conftest.py; run with ``pytest -m fuzz``
or under HypoFuzz.
"""
