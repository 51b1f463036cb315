"""
Course Detail Service
Video playback, enrollment and per-video progress for one course
"""
import logging

from flask import current_app

from study_portal.components import SIGNED_IN, register_component
from study_portal.core import ApiError, api_failure, failure, notify_error, notify_success
from study_portal.core.view_state import linkedin_url, needs_read_more, truncate
from study_portal.services import CategoryService, CourseService, EnrollmentService, VideoService
from study_portal.services.enrollment_service import enrollment_status, progress_color
from study_portal.services.video_service import (
    is_valid_youtube_url,
    youtube_embed_url,
    youtube_thumbnail_url,
)

logger = logging.getLogger(__name__)


def progress_view(completion, videos):
    """Completed ids and totals; a missing total falls back to the number of videos"""
    if completion is None:
        return {'completedVideoIds': [], 'totalCompleted': 0, 'totalVideos': len(videos)}
    return {
        'completedVideoIds': list(completion.completed_video_ids),
        'totalCompleted': completion.total_completed or 0,
        'totalVideos': completion.total_videos or len(videos),
    }


def video_view(video, completed_ids):
    view = video.to_view()
    view['thumbnailUrl'] = youtube_thumbnail_url(video.video_url)
    view['completed'] = video.id in completed_ids
    view['hasFiles'] = video.has_files
    view['codeFiles'] = [
        {'link': link, 'name': name}
        for link, name in zip(video.drive_code_file_links, video.drive_code_file_names)
    ]
    return view


def enrollment_summary(enrollment):
    return {
        'enrollment': enrollment.to_view() if enrollment else None,
        'status': enrollment_status(enrollment),
        'progressColor': progress_color(enrollment.progress_percentage) if enrollment else 'basic',
    }


@register_component('course_detail', access=SIGNED_IN)
class CourseDetailService:
    """Service for the course player screen"""

    def __init__(self, courses=None, videos=None, enrollments=None, categories=None):
        self.courses = courses or CourseService()
        self.videos = videos or VideoService()
        self.enrollments = enrollments or EnrollmentService()
        self.categories = categories or CategoryService()

    def _category_name(self, category_id):
        if not category_id:
            return ''
        try:
            _, category = self.categories.get_category(category_id)
        except ApiError as e:
            logger.error(f"Error loading category {category_id}: {e}")
            return 'Unknown'
        return category.name if category else ''

    def _videos(self, course_id):
        try:
            _, videos = self.videos.list_course_videos(course_id)
        except ApiError as e:
            logger.error(f"Error loading videos of {course_id}: {e}")
            notify_error('Error loading videos')
            return []
        return videos

    def _enrollment(self, course_id):
        """(enrolled, enrollment); lookup failures read as not enrolled"""
        try:
            _, enrolled = self.enrollments.check_enrollment(course_id)
        except ApiError as e:
            logger.error(f"Error checking enrollment in {course_id}: {e}")
            return False, None
        if not enrolled:
            return False, None
        return True, self._load_enrollment(course_id)

    def _load_enrollment(self, course_id):
        try:
            _, enrollment = self.enrollments.get_enrollment_for_course(course_id)
        except ApiError as e:
            logger.error(f"Error loading enrollment in {course_id}: {e}")
            return None
        return enrollment

    def _progress(self, course_id):
        try:
            _, completion = self.enrollments.get_course_progress(course_id)
        except ApiError as e:
            logger.error(f"Error loading progress of {course_id}: {e}")
            return None
        return completion

    def get_course(self, course_id, video_id=None):
        try:
            _, course = self.courses.get_course(course_id)
        except ApiError as e:
            logger.error(f"Error loading course {course_id}: {e}")
            return failure('Error loading course', e.view_status, redirect='/dashboard')
        if course is None:
            return failure('Course not found', 404, redirect='/dashboard')

        videos = self._videos(course_id)
        enrolled, enrollment = self._enrollment(course_id)
        progress = progress_view(self._progress(course_id) if enrolled else None, videos)
        completed_ids = set(progress['completedVideoIds'])

        selected = None
        if videos:
            selected = next((v for v in videos if v.id == video_id), videos[0])

        config = current_app.config
        description_limit = config['DESCRIPTION_PREVIEW_LIMIT']
        bio_limit = config['TRAINER_BIO_PREVIEW_LIMIT']
        view = {
            'course': course.to_view(),
            'categoryName': self._category_name(course.category_id),
            'description': truncate(course.description, description_limit),
            'descriptionReadMore': needs_read_more(course.description, description_limit),
            'trainerBio': truncate(course.trainer_bio, bio_limit),
            'trainerBioReadMore': needs_read_more(course.trainer_bio, bio_limit),
            'linkedinUrl': linkedin_url(course.linkedin_profile),
            'videos': [video_view(v, completed_ids) for v in videos],
            'selectedVideo': None,
            'isEnrolled': enrolled,
            'progress': progress,
        }
        view.update(enrollment_summary(enrollment))
        if selected is not None:
            view['selectedVideo'] = video_view(selected, completed_ids)
            view['selectedVideo']['embedUrl'] = youtube_embed_url(selected.video_url) or selected.video_url
            view['selectedVideo']['playable'] = is_valid_youtube_url(selected.video_url)
        return view

    def enroll(self, course_id):
        try:
            _, enrollment = self.enrollments.enroll(course_id)
        except ApiError as e:
            if 'already enrolled' in e.backend_message('').lower():
                notify_error('You are already enrolled in this course')
                view = {'isEnrolled': True, 'status_code': e.view_status}
                view.update(enrollment_summary(self._load_enrollment(course_id)))
                return view
            return api_failure(e, 'Failed to enroll in course', isEnrolled=False)

        notify_success('Successfully enrolled in course!')
        try:
            _, accessed = self.enrollments.access_course(course_id)
            enrollment = accessed or enrollment
        except ApiError as e:
            logger.error(f"Error accessing course {course_id}: {e}")

        view = {'isEnrolled': True}
        view.update(enrollment_summary(enrollment))
        return view

    def mark_video_complete(self, course_id, video_id):
        try:
            _, enrolled = self.enrollments.check_enrollment(course_id)
        except ApiError as e:
            return api_failure(e, 'Failed to mark video as completed')
        if not enrolled:
            return failure('Please enroll in this course first', 403)

        try:
            _, completion = self.enrollments.mark_video_complete(course_id, video_id)
        except ApiError as e:
            logger.error(f"Error marking video {video_id} as completed: {e}")
            return api_failure(e, 'Failed to mark video as completed')

        try:
            _, videos = self.videos.list_course_videos(course_id)
        except ApiError as e:
            logger.error(f"Error loading videos of {course_id}: {e}")
            videos = []

        if completion is not None and completion.already_completed:
            notify_success('Already completed')
        else:
            notify_success('Video marked as completed!')

        view = {'videoId': video_id, 'isEnrolled': True, 'progress': progress_view(completion, videos)}
        view.update(enrollment_summary(self._load_enrollment(course_id)))
        return view
