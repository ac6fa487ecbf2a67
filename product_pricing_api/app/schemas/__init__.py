"""
Pydantic schema definitions for API payloads.

Each domain (users, series, products) defines its own request and
response models.  Schemas are separated from the database layout to
decouple the wire representation (``_id``, camelCase prices) from
persistence.
"""
