"""Core infrastructure shared by every layer."""
