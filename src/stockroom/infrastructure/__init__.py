"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- persistence/: SQLAlchemy async models and repositories
- cache/: Redis-backed expiring key-value store
- security/: JWT token service and bcrypt hashing
- logging/: structlog adapter
"""
