"""Auth method engines mounted under ``auth/{mount}``."""
