"""
Shared error handling package.

Centralizes failure-to-HTTP mapping so that every intercepted
failure is rendered with the same error payload.
"""
