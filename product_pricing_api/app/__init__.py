"""
Application package initializer.

The project is organised into logical pieces: ``core`` (configuration,
persistence, security), ``schemas`` (wire models), ``services``
(business logic) and ``api`` (HTTP routes).
"""

from .main import app, create_app  # noqa: F401
