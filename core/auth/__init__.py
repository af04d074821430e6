"""Authentication and authorization for the matching service."""
