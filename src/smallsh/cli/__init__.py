"""Command-line surface for smallsh."""
