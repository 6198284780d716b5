"""Configuration and injectable fixtures for Pytest."""

pytest_plugins = ["casesearch.testing.fixtures"]
