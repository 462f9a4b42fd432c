"""
User Service Application: root package.

This package contains the FastAPI app entry point (main.py), API routes,
use cases, domain logic (models, validation, repository contracts) and
MongoDB infrastructure.
"""
