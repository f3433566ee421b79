"""Presentation layer: request handling and HTTP transport."""
