"""Command-line probes against a running trading backend."""
