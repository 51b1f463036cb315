"""
Admin Dashboard Service
Platform statistics and the course list of the back office
"""
import logging

from study_portal.components import ADMIN, register_component
from study_portal.core import ApiError, failure, notify_error, notify_success
from study_portal.services import AdminService, CategoryService, CourseService
from study_portal.services.category_service import category_names

logger = logging.getLogger(__name__)


def stats_view(stats, courses):
    """Headline numbers; without backend stats the course count comes from the list"""
    if stats is None:
        return {
            'totalCourses': len(courses),
            'totalVideos': 0,
            'totalStudents': 0,
            'totalEnrollments': 0,
            'newUsersThisMonth': 0,
            'newEnrollmentsThisMonth': 0,
            'courseStats': [],
            'recentActivity': None,
        }
    view = stats.to_view()
    return {
        'totalCourses': stats.total_courses,
        'totalVideos': stats.total_videos,
        'totalStudents': stats.total_users,
        'totalEnrollments': stats.total_enrollments,
        'newUsersThisMonth': stats.new_users_this_month,
        'newEnrollmentsThisMonth': stats.new_enrollments_this_month,
        'courseStats': view['courseStats'],
        'recentActivity': view['recentActivity'],
    }


@register_component('admin_dashboard', access=ADMIN)
class AdminDashboardService:
    """Service for the admin dashboard"""

    def __init__(self, admin=None, courses=None, categories=None):
        self.admin = admin or AdminService()
        self.courses = courses or CourseService()
        self.categories = categories or CategoryService()

    def get_dashboard(self):
        try:
            _, categories = self.categories.list_active()
        except ApiError as e:
            logger.error(f"Error loading categories: {e}")
            categories = []
        category_map = category_names(categories)

        view = {}
        courses = []
        try:
            response, courses = self.courses.list_courses()
            if not response.success:
                notify_error('Failed to load courses')
        except ApiError as e:
            logger.error(f"Error loading courses: {e}")
            notify_error('Error loading courses')
            view['status_code'] = e.view_status

        stats = None
        try:
            response, stats = self.admin.get_stats()
            if stats is None:
                logger.error("Failed to load statistics")
        except ApiError as e:
            logger.error(f"Error loading statistics: {e}")

        course_views = []
        for course in courses:
            card = course.to_view()
            card['categoryName'] = category_map.get(course.category_id, 'Unknown')
            course_views.append(card)

        view.update({
            'stats': stats_view(stats, courses),
            'courses': course_views,
            'categories': [c.to_view() for c in categories],
        })
        return view

    def delete_course(self, course_id):
        try:
            response = self.courses.delete_course(course_id)
        except ApiError as e:
            logger.error(f"Error deleting course {course_id}: {e}")
            return failure('Error deleting course', e.view_status)
        if not response.success:
            return failure('Failed to delete course', 400)
        notify_success('Course deleted successfully')
        return {'deleted': course_id}
