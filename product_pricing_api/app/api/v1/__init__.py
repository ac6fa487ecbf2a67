"""
Version 1 of the API.

Mounted under ``/api`` (without a version segment) because existing
clients call ``/api/login``, ``/api/products`` and so on.
"""
