"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error normalization
- Security middleware
- Rate limiting
- Logging configuration
"""
