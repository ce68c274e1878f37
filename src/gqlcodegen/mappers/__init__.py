"""Mapping of schema definitions to render-ready data models."""
