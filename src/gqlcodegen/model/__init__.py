"""Configuration, parsed definitions and data model types used by the mappers."""
