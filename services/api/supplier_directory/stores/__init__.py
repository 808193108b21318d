"""Data stores for persistence and caching.

Stores handle:
- PostgreSQL: DB session, catalog repository, ORM operations
- Redis: caching, locks, TTL policies

No business/ranking logic in stores - that belongs in services.
"""
