"""
Users Registration API - root package.

This package contains the FastAPI app entry point (main.py), API routes,
the user domain (validators, sanitizers, errors), use cases and the MongoDB
infrastructure.
"""
