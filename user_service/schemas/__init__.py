"""Wire schemas (request/response messages)."""
