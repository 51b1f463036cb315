"""
Catalog Component
Public course catalog and course preview
"""
from .routes import catalog_bp, init_catalog
from .service import CatalogService

__all__ = ['catalog_bp', 'init_catalog', 'CatalogService']
