"""Allure attachment helpers and run summaries."""
