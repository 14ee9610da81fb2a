"""Credentials domain: stored analytics credentials."""
