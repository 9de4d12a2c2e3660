"""
Items bounded context, domain layer.

This module contains all domain logic for the items context:
- Record entity and store outcomes
- Record store port
- Item failure hierarchy
"""
