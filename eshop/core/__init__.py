"""
Core Module

Shared application components including:
- Configuration management
- Logging configuration
- Exceptions and FastAPI exception handling
- Dependency injection for FastAPI
"""
