"""Consent domain: the user's analytics opt-in choice."""
