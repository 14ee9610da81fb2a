"""Analytics SDK adapters."""
