"""
Course Detail API Routes
"""
from flask import Blueprint, request

from study_portal.core import login_required, respond

from .service import CourseDetailService

course_detail_bp = Blueprint('course_detail', __name__, url_prefix='/api/courses')

# Service instance
service = CourseDetailService()


@course_detail_bp.route('/<course_id>')
@login_required
def api_course(course_id):
    """Course, ordered videos and the user's progress; ?video=<id> selects a video"""
    return respond(service.get_course(course_id, video_id=request.args.get('video')))


@course_detail_bp.route('/<course_id>/enroll', methods=['POST'])
@login_required
def api_enroll(course_id):
    return respond(service.enroll(course_id))


@course_detail_bp.route('/<course_id>/videos/<video_id>/complete', methods=['POST'])
@login_required
def api_complete_video(course_id, video_id):
    return respond(service.mark_video_complete(course_id, video_id))


def init_course_detail(app):
    """Initialize course detail component with Flask app"""
    app.register_blueprint(course_detail_bp)
    return course_detail_bp
