"""
API layer for the Users Registration API.

Exposes the HTTP endpoints under /api (users registration, authentication,
profile retrieval, modification and unregistration).
"""
