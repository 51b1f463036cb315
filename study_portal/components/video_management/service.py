"""
Video Management Service
Videos of one course: create, edit, delete and drag-and-drop reordering
"""
import logging

from study_portal.components import ADMIN, register_component
from study_portal.core import ApiError, failure, notify_error, notify_success
from study_portal.services import CourseService, VideoService
from study_portal.services.video_service import youtube_embed_url, youtube_thumbnail_url

logger = logging.getLogger(__name__)


def _clamp(index, length):
    return max(0, min(index, length - 1))


def move_video(videos, previous_index, current_index):
    """Move one video inside the ordered list and renumber positions 1..n

    Returns the new list and the moved video, or None for the moved video when
    nothing changes (fewer than two videos, or the same slot).
    """
    if len(videos) < 2:
        return list(videos), None
    previous_index = _clamp(previous_index, len(videos))
    current_index = _clamp(current_index, len(videos))
    if previous_index == current_index:
        return list(videos), None

    reordered = list(videos)
    moved = reordered.pop(previous_index)
    reordered.insert(current_index, moved)
    reordered = [v.model_copy(update={'position': index + 1}) for index, v in enumerate(reordered)]
    return reordered, reordered[current_index]


def video_row(video):
    view = video.to_view()
    view['thumbnailUrl'] = youtube_thumbnail_url(video.video_url)
    view['embedUrl'] = youtube_embed_url(video.video_url) or video.video_url
    view['hasFiles'] = video.has_files
    return view


def video_form_values(video, index):
    """Edit-form values; an unpositioned video is shown at its list slot"""
    return {
        'title': video.title,
        'description': video.description or '',
        'videoUrl': video.video_url,
        'position': video.position or index + 1,
        'driveNotesFileLink': video.drive_notes_file_link or '',
        'driveNotesFileName': video.drive_notes_file_name or '',
        'codeFileLinks': list(video.drive_code_file_links),
        'codeFileNames': list(video.drive_code_file_names),
    }


@register_component('video_management', access=ADMIN)
class VideoManagementService:
    """Service for the admin video manager of a course"""

    def __init__(self, courses=None, videos=None):
        self.courses = courses or CourseService()
        self.videos = videos or VideoService()

    def _ordered_videos(self, course_id):
        """Ordered videos, or None when they could not be loaded"""
        try:
            response, videos = self.videos.list_course_videos(course_id)
        except ApiError as e:
            logger.error(f"Error loading videos of {course_id}: {e}")
            notify_error('Error loading videos')
            return None
        if not response.success:
            notify_error('Failed to load videos')
            return None
        return videos

    def get_videos(self, course_id):
        try:
            _, course = self.courses.get_course(course_id)
        except ApiError as e:
            logger.error(f"Error loading course {course_id}: {e}")
            return failure('Error loading course', e.view_status, redirect='/admin')
        if course is None:
            return failure('Course not found', 404, redirect='/admin')

        videos = self._ordered_videos(course_id) or []
        return {
            'course': course.to_view(),
            'videos': [video_row(v) for v in videos],
            'newVideo': {'position': len(videos) + 1},
        }

    def get_edit_form(self, course_id, video_id):
        videos = self._ordered_videos(course_id) or []
        for index, video in enumerate(videos):
            if video.id == video_id:
                return {'videoId': video.id, 'values': video_form_values(video, index)}
        return failure('Video not found', 404)

    def create_video(self, course_id, form):
        try:
            response = self.videos.create_video(form.request_payload(course_id))
        except ApiError as e:
            logger.error(f"Error creating video: {e}")
            return failure('Error creating video', e.view_status)
        if not response.success:
            return failure('Failed to create video', 400)
        notify_success('Video created successfully')
        return self.get_videos(course_id)

    def update_video(self, course_id, video_id, form):
        try:
            response = self.videos.update_video(video_id, form.request_payload(course_id))
        except ApiError as e:
            logger.error(f"Error updating video {video_id}: {e}")
            return failure('Error updating video', e.view_status)
        if not response.success:
            return failure('Failed to update video', 400)
        notify_success('Video updated successfully')
        return self.get_videos(course_id)

    def delete_video(self, course_id, video_id):
        try:
            response = self.videos.delete_video(video_id)
        except ApiError as e:
            logger.error(f"Error deleting video {video_id}: {e}")
            return failure('Error deleting video', e.view_status)
        if not response.success:
            return failure('Failed to delete video', 400)
        notify_success('Video deleted successfully')
        return self.get_videos(course_id)

    def reorder(self, course_id, form):
        """Persist only the moved video's new position; the backend shifts the rest"""
        videos = self._ordered_videos(course_id)
        if videos is None:
            return failure('Failed to update order', 502)

        reordered, moved = move_video(videos, form.previous_index, form.current_index)
        if moved is None:
            return {'videos': [video_row(v) for v in reordered], 'changed': False}

        try:
            self.videos.update_position(moved.id, moved.position)
        except ApiError as e:
            logger.error(f"Error moving video {moved.id} to {moved.position}: {e}")
            return failure('Failed to update order', e.view_status,
                           videos=[video_row(v) for v in videos], changed=False)

        notify_success('Order updated')
        return {'videos': [video_row(v) for v in reordered], 'changed': True}
