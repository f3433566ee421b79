"""User management service.

CRUD operations over users with events published on every mutation.
"""
