"""
Core infrastructure: configuration, logging, persistence, security and
the application context that ties them together.
"""
