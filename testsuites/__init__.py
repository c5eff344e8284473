"""
Test suites package.

Kept importable so `run_tests.py` and the unit tests can reach the UI
framework, page objects and support modules by absolute import.
"""
