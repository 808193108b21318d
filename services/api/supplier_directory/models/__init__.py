"""SQLAlchemy ORM models.

Models represent database tables:
- suppliers (+ supplier_categories, supplier_lot_sizes): directory listings
- regions, categories, lot_sizes: taxonomy used by directory filters
- reviews: buyer reviews, aggregated at read time
- category_pages: landing pages with optional curated supplier selection
"""

from supplier_directory.models.taxonomy import Category, LotSize, Region
from supplier_directory.models.supplier import Supplier, supplier_categories, supplier_lot_sizes
from supplier_directory.models.review import Review
from supplier_directory.models.category_page import CategoryPage

__all__ = [
    "Category",
    "CategoryPage",
    "LotSize",
    "Region",
    "Review",
    "Supplier",
    "supplier_categories",
    "supplier_lot_sizes",
]
