"""
Video Management API Routes
"""
from flask import Blueprint
from pydantic import ValidationError

from study_portal.core import admin_required, load_form, respond, validation_error
from study_portal.models.forms import ReorderForm, VideoForm

from .service import VideoManagementService

video_management_bp = Blueprint(
    'video_management', __name__, url_prefix='/api/admin/courses/<course_id>/videos'
)

# Service instance
service = VideoManagementService()


@video_management_bp.route('')
@admin_required
def api_videos(course_id):
    return respond(service.get_videos(course_id))


@video_management_bp.route('', methods=['POST'])
@admin_required
def api_create_video(course_id):
    try:
        form = load_form(VideoForm)
    except ValidationError as e:
        return validation_error(e)
    return respond(service.create_video(course_id, form))


@video_management_bp.route('/<video_id>/edit')
@admin_required
def api_edit_video(course_id, video_id):
    return respond(service.get_edit_form(course_id, video_id))


@video_management_bp.route('/<video_id>', methods=['PUT'])
@admin_required
def api_update_video(course_id, video_id):
    try:
        form = load_form(VideoForm)
    except ValidationError as e:
        return validation_error(e)
    return respond(service.update_video(course_id, video_id, form))


@video_management_bp.route('/<video_id>', methods=['DELETE'])
@admin_required
def api_delete_video(course_id, video_id):
    return respond(service.delete_video(course_id, video_id))


@video_management_bp.route('/reorder', methods=['POST'])
@admin_required
def api_reorder(course_id):
    """Drag-and-drop drop event: {previousIndex, currentIndex}"""
    try:
        form = load_form(ReorderForm)
    except ValidationError as e:
        return validation_error(e)
    return respond(service.reorder(course_id, form))


def init_video_management(app):
    """Initialize video management component with Flask app"""
    app.register_blueprint(video_management_bp)
    return video_management_bp
