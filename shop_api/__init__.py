"""
Shop Backend Application — root package.

This package contains the FastAPI app entry point (main.py), the account
API routes, domain and application layers, MongoDB infrastructure, and the
catalog browsing view that consumes the product listing service.
"""
