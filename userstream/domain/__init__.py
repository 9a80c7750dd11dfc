"""
Domain layer - Core business entities and domain logic.

This layer contains the user entity and the error taxonomy,
independent of any infrastructure or transport concerns.
"""
