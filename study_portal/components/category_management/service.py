"""
Category Management Service
"""
import logging

from study_portal.components import ADMIN, register_component
from study_portal.core import ApiError, api_failure, failure, notify_error, notify_success
from study_portal.services import CategoryService

logger = logging.getLogger(__name__)


@register_component('category_management', access=ADMIN)
class CategoryManagementService:
    """Service for the admin category table"""

    def __init__(self, categories=None):
        self.categories = categories or CategoryService()

    def list_categories(self):
        """Every category, inactive ones included"""
        try:
            response, categories = self.categories.list_all()
        except ApiError as e:
            logger.error(f"Error loading categories: {e}")
            notify_error('Error loading categories')
            return {'categories': [], 'status_code': e.view_status}
        if not response.success:
            notify_error('Failed to load categories')
        return {'categories': [c.to_view() for c in categories]}

    def get_edit_form(self, category_id):
        try:
            _, category = self.categories.get_category(category_id)
        except ApiError as e:
            return api_failure(e, 'Error loading categories')
        if category is None:
            return failure('Category not found', 404)
        return {
            'categoryId': category.id,
            'values': {'name': category.name, 'description': category.description or ''},
        }

    def _mutate(self, action, verb, *args):
        """Run one create/update/delete call and reload the table on success"""
        gerund = verb[:-1] + 'ing'
        try:
            response = action(*args)
        except ApiError as e:
            logger.error(f"Error {gerund} category: {e}")
            return api_failure(e, f'Error {gerund} category')
        if not response.success:
            return failure(response.message or f'Failed to {verb} category', 400)
        notify_success(f'Category {verb}d successfully')
        return self.list_categories()

    def create_category(self, form):
        return self._mutate(self.categories.create, 'create', form.request_payload())

    def update_category(self, category_id, form):
        return self._mutate(self.categories.update, 'update', category_id, form.request_payload())

    def delete_category(self, category_id):
        """Soft delete; refused by the backend while courses use the category"""
        return self._mutate(self.categories.delete, 'delete', category_id)

    def delete_category_permanently(self, category_id):
        return self._mutate(self.categories.delete_permanently, 'delete', category_id)
