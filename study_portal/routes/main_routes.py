"""
Main routes for the portal
"""
import logging

from flask import Blueprint, jsonify

from study_portal.components import registry
from study_portal.core import ApiError, respond
from study_portal.core.session import is_authenticated
from study_portal.services import CategoryService

logger = logging.getLogger(__name__)

# Create main blueprint
main_bp = Blueprint('main', __name__)


def home_category(category):
    return {
        'id': category.id,
        'name': category.name,
        'description': category.description or f'Explore courses in {category.name}',
        'courseCount': 0,
    }


@main_bp.route('/')
@main_bp.route('/home')
def home():
    """Landing page: the active categories"""
    try:
        _, categories = CategoryService().list_active()
    except ApiError as e:
        logger.error(f"Error loading categories: {e}")
        categories = []
    return respond({
        'categories': [home_category(c) for c in categories],
        'authenticated': is_authenticated(),
    })


@main_bp.route('/health')
def health():
    """Liveness plus the registered components"""
    return jsonify({
        'status': 'healthy',
        'components': registry.describe(),
    })


@main_bp.app_errorhandler(404)
def not_found(error):
    """Unknown paths send the browser back home"""
    return jsonify({'error': 'Not found', 'redirect': '/'}), 404
