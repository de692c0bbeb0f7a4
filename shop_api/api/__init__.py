"""
API layer for the shop backend.

Exposes the account endpoints under /api/users (login, registration,
self-service profile and admin user management).
"""
