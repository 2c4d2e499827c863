"""Data stores for persistence.

Stores handle:
- PostgreSQL: DB session, transaction scope
- Repositories: ORM queries for stores, categories and reviews

No business logic in stores - that belongs in services.
"""
