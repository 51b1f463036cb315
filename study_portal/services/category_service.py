"""
Category resource (/api/categories)
"""
from study_portal.models import Category, parse_list

from .base import ResourceService


class CategoryService(ResourceService):
    base_path = 'categories'

    def list_active(self):
        response = self.client.get(self.path())
        return response, parse_list(Category, response.data) if response.success else []

    def list_all(self):
        """Active and inactive categories (admin only)"""
        response = self.client.get(self.path('admin', 'all'))
        return response, parse_list(Category, response.data) if response.success else []

    def get_category(self, category_id):
        response = self.client.get(self.path(category_id))
        category = Category.model_validate(response.data) if response.success and response.data else None
        return response, category

    def create(self, payload):
        return self.client.post(self.path(), json=payload)

    def update(self, category_id, payload):
        return self.client.put(self.path(category_id), json=payload)

    def delete(self, category_id):
        """Soft delete; the backend refuses while courses still use the category"""
        return self.client.delete(self.path(category_id))

    def delete_permanently(self, category_id):
        return self.client.delete(self.path(category_id, 'permanent'))


def category_names(categories):
    return {category.id: category.name for category in categories}
