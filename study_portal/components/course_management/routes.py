"""
Course Management API Routes
"""
from flask import Blueprint
from pydantic import ValidationError

from study_portal.core import admin_required, load_form, respond, validation_error
from study_portal.models.forms import CourseForm

from .service import CourseManagementService

course_management_bp = Blueprint('course_management', __name__, url_prefix='/api/admin/courses')

# Service instance
service = CourseManagementService()


@course_management_bp.route('/form-options')
@admin_required
def api_form_options():
    """Categories, difficulties and languages for the course form"""
    return respond(service.form_options())


@course_management_bp.route('', methods=['POST'])
@admin_required
def api_create_course():
    try:
        form = load_form(CourseForm)
    except ValidationError as e:
        return validation_error(e)
    return respond(service.create_course(form))


@course_management_bp.route('/<course_id>/edit')
@admin_required
def api_edit_course(course_id):
    return respond(service.get_edit_form(course_id.strip()))


@course_management_bp.route('/<course_id>', methods=['PUT'])
@admin_required
def api_update_course(course_id):
    try:
        form = load_form(CourseForm)
    except ValidationError as e:
        return validation_error(e)
    return respond(service.update_course(course_id, form))


def init_course_management(app):
    """Initialize course management component with Flask app"""
    app.register_blueprint(course_management_bp)
    return course_management_bp
