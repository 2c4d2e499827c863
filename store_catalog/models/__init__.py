"""SQLAlchemy ORM models.

Models represent database tables:
- stores: Restaurant/store records (address embedded)
- categories: Reference list of store categories
- store_categories: Store <-> category join rows
- reviews: Customer reviews (rating + comment)
"""

from store_catalog.models.store import Address, Store
from store_catalog.models.category import Category, StoreCategory
from store_catalog.models.review import Review

__all__ = ["Address", "Store", "Category", "StoreCategory", "Review"]
