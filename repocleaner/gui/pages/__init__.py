"""Top-level pages."""
