"""
Category Management Component
"""
from .routes import category_management_bp, init_category_management
from .service import CategoryManagementService

__all__ = ['category_management_bp', 'init_category_management', 'CategoryManagementService']
