"""HTTP client for the trading backend."""
