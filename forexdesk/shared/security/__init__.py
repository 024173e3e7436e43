"""HTTP hardening: secure headers and rate limiting."""
