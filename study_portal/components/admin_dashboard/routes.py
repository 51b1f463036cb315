"""
Admin Dashboard API Routes
"""
from flask import Blueprint

from study_portal.core import admin_required, respond

from .service import AdminDashboardService

admin_dashboard_bp = Blueprint('admin_dashboard', __name__, url_prefix='/api/admin')

# Service instance
service = AdminDashboardService()


@admin_dashboard_bp.route('/dashboard')
@admin_required
def api_admin_dashboard():
    return respond(service.get_dashboard())


@admin_dashboard_bp.route('/courses/<course_id>', methods=['DELETE'])
@admin_required
def api_delete_course(course_id):
    return respond(service.delete_course(course_id))


def init_admin_dashboard(app):
    """Initialize admin dashboard component with Flask app"""
    app.register_blueprint(admin_dashboard_bp)
    return admin_dashboard_bp
