"""Observability – logging for the client."""
