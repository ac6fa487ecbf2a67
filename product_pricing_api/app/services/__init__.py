"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services are
plain classes constructed with the database handle (and, for
authentication, the settings) taken from the application context, so
API handlers never touch SQL directly.
"""
