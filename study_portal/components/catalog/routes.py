"""
Catalog API Routes
Public, no sign-in needed
"""
from flask import Blueprint, request

from study_portal.core import respond

from .service import CatalogService

catalog_bp = Blueprint('catalog', __name__, url_prefix='/api/catalog')

# Service instance
service = CatalogService()


@catalog_bp.route('/courses')
def api_catalog():
    """Courses filtered by category, difficulty and search text, sorted locally"""
    result = service.get_catalog(
        category=request.args.get('category'),
        difficulty=request.args.get('difficulty'),
        search=request.args.get('search'),
        sort_by=request.args.get('sort', 'latest'),
    )
    return respond(result)


@catalog_bp.route('/courses/<course_id>')
def api_course_preview(course_id):
    return respond(service.get_preview(course_id))


@catalog_bp.route('/courses/<course_id>/enroll', methods=['POST'])
def api_preview_enroll(course_id):
    return respond(service.request_enrollment(course_id))


def init_catalog(app):
    """Initialize catalog component with Flask app"""
    app.register_blueprint(catalog_bp)
    return catalog_bp
