"""
User Dashboard API Routes
"""
from flask import Blueprint, current_app, request

from study_portal.core import login_required, respond
from study_portal.core.view_state import int_arg

from .service import UserDashboardService

user_dashboard_bp = Blueprint('user_dashboard', __name__, url_prefix='/api/dashboard')

# Service instance
service = UserDashboardService()


@user_dashboard_bp.route('')
@login_required
def api_dashboard():
    """Dashboard courses page

    Query: category, difficulty, search, sort, page (zero-based), page_size
    """
    config = current_app.config
    result = service.get_dashboard(
        category=request.args.get('category'),
        difficulty=request.args.get('difficulty'),
        search=request.args.get('search'),
        sort_by=request.args.get('sort', 'latest'),
        page=int_arg(request.args, 'page', 0),
        page_size=int_arg(request.args, 'page_size', config['DASHBOARD_PAGE_SIZE'],
                          minimum=1, maximum=config['MAX_PAGE_SIZE']),
    )
    return respond(result)


@user_dashboard_bp.route('/courses/<dialog_type>')
@login_required
def api_course_dialog(dialog_type):
    return respond(service.get_course_dialog(dialog_type))


@user_dashboard_bp.route('/enroll/<course_id>', methods=['POST'])
@login_required
def api_enroll(course_id):
    return respond(service.enroll(course_id))


def init_user_dashboard(app):
    """Initialize user dashboard component with Flask app"""
    app.register_blueprint(user_dashboard_bp)
    return user_dashboard_bp
