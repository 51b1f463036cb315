"""
Category Management API Routes
"""
from flask import Blueprint
from pydantic import ValidationError

from study_portal.core import admin_required, load_form, respond, validation_error
from study_portal.models.forms import CategoryForm

from .service import CategoryManagementService

category_management_bp = Blueprint('category_management', __name__, url_prefix='/api/admin/categories')

# Service instance
service = CategoryManagementService()


@category_management_bp.route('')
@admin_required
def api_categories():
    return respond(service.list_categories())


@category_management_bp.route('', methods=['POST'])
@admin_required
def api_create_category():
    try:
        form = load_form(CategoryForm)
    except ValidationError as e:
        return validation_error(e)
    return respond(service.create_category(form))


@category_management_bp.route('/<category_id>/edit')
@admin_required
def api_edit_category(category_id):
    return respond(service.get_edit_form(category_id))


@category_management_bp.route('/<category_id>', methods=['PUT'])
@admin_required
def api_update_category(category_id):
    try:
        form = load_form(CategoryForm)
    except ValidationError as e:
        return validation_error(e)
    return respond(service.update_category(category_id, form))


@category_management_bp.route('/<category_id>', methods=['DELETE'])
@admin_required
def api_delete_category(category_id):
    return respond(service.delete_category(category_id))


@category_management_bp.route('/<category_id>/permanent', methods=['DELETE'])
@admin_required
def api_delete_category_permanently(category_id):
    return respond(service.delete_category_permanently(category_id))


def init_category_management(app):
    """Initialize category management component with Flask app"""
    app.register_blueprint(category_management_bp)
    return category_management_bp
