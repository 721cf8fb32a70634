"""Protocol definitions."""
