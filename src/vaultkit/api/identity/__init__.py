"""Identity secret engine."""
