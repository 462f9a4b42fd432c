"""
API layer for the User Service.

Exposes the users HTTP endpoints under /v1/users and the global error
handlers that map use case outcomes to status codes.
"""
