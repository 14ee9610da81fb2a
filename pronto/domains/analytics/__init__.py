"""Analytics domain: SDK configuration and consent-gated screen and engagement tracking."""
