"""Pronto analytics client."""
