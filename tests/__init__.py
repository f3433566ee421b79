"""Test suite for the user service.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic, service and handlers in isolation
- integration/: Integration tests - repository and flows against SQLite
- api/: API endpoint tests - HTTP request/response cycle with stub handlers
"""
