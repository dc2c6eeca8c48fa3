"""Attribute schemas, value validators and a users API client for zero-trust network access configuration."""

__version__ = "0.1.0"