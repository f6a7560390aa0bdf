"""Helpers shared across the unit and E2E suites."""
