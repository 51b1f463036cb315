"""
Enrollment resource (/api/enrollments) and per-video progress (/api/progress)
"""
import math
from datetime import datetime, timezone

from study_portal.models import Enrollment, EnrollmentStats, VideoCompletion, parse_list

from .base import ResourceService


class EnrollmentService(ResourceService):
    base_path = 'enrollments'
    progress_path = 'progress'

    def enroll(self, course_id):
        response = self.client.post(self.path(), json={'courseId': course_id})
        return response, _enrollment_or_none(response)

    def list_enrollments(self):
        """Enrollments of the current user; entries without a course are dropped"""
        response = self.client.get(self.path())
        enrollments = [e for e in parse_list(Enrollment, response.data) if e.course_id] if response.success else []
        return response, enrollments

    def get_enrollment_for_course(self, course_id):
        response = self.client.get(self.path('course', course_id))
        return response, _enrollment_or_none(response)

    def access_course(self, course_id):
        """Touch the enrollment's last-accessed time"""
        response = self.client.put(self.path('course', course_id, 'access'), json={})
        return response, _enrollment_or_none(response)

    def list_recent(self):
        response = self.client.get(self.path('recent'))
        return response, parse_list(Enrollment, response.data) if response.success else []

    def check_enrollment(self, course_id):
        response = self.client.get(self.path('check', course_id))
        return response, bool(response.data)

    def get_stats(self):
        response = self.client.get(self.path('stats'))
        stats = EnrollmentStats.model_validate(response.data) if response.success and response.data else None
        return response, stats

    def mark_video_complete(self, course_id, video_id):
        response = self.client.put(
            f'{self.progress_path}/courses/{course_id}/videos/{video_id}/complete', json={}
        )
        return response, _completion_or_none(response)

    def get_course_progress(self, course_id):
        response = self.client.get(f'{self.progress_path}/courses/{course_id}')
        return response, _completion_or_none(response)


def _enrollment_or_none(response):
    return Enrollment.model_validate(response.data) if response.success and response.data else None


def _completion_or_none(response):
    return VideoCompletion.model_validate(response.data) if response.success and response.data else None


def calculate_progress(completed_videos, total_videos):
    if not total_videos:
        return 0
    return math.floor(completed_videos / total_videos * 100 + 0.5)


def enrollment_status(enrollment):
    if enrollment is None:
        return 'Not Enrolled'
    if enrollment.is_completed:
        return 'Completed'
    if enrollment.progress_percentage > 0:
        return 'In Progress'
    return 'Not Started'


def progress_color(progress_percentage):
    if progress_percentage == 100:
        return 'primary'
    if progress_percentage >= 50:
        return 'accent'
    if progress_percentage > 0:
        return 'warn'
    return 'basic'


def time_since(moment, now=None):
    """Human-friendly age of an enrollment"""
    if moment is None:
        return ''
    if now is None:
        now = datetime.now(timezone.utc) if moment.tzinfo else datetime.now()
    days = (now - moment).days

    if days <= 0:
        return 'Today'
    if days == 1:
        return 'Yesterday'
    if days < 7:
        return f'{days} days ago'
    if days < 30:
        weeks = days // 7
        return f"{weeks} week{'s' if weeks > 1 else ''} ago"
    months = days // 30
    return f"{months} month{'s' if months > 1 else ''} ago"
