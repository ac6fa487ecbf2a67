"""
API package containing versioned routes.

A version subpackage exposes a top‑level ``router`` which includes all
of its domain‑specific endpoints.  ``deps`` holds the FastAPI
dependencies that hand services and the token verifier to handlers.
"""
