"""
User Dashboard Service
Course browsing with filters, sort and pagination, plus the user's enrollments
"""
import logging

from flask import current_app, session

from study_portal.components import SIGNED_IN, register_component
from study_portal.core import ApiError, api_failure, failure, notify_error, notify_success
from study_portal.core.session import get_current_user
from study_portal.core.view_state import DEFAULT_SORT, course_card, paginate, sort_courses
from study_portal.services import CategoryService, CourseService, EnrollmentService
from study_portal.services.category_service import category_names
from study_portal.services.enrollment_service import progress_color, time_since

logger = logging.getLogger(__name__)

FILTERS_SESSION_KEY = 'dashboard_filters'

DIALOG_TITLES = {
    'enrolled': 'Your Enrolled Courses',
    'completed': 'Your Completed Courses',
}


def valid_enrollments(enrollments):
    """Enrollments whose course still exists (a deleted course loses its title)"""
    return [e for e in enrollments if e.course_id and e.course_title is not None]


def enrollment_view(enrollment):
    view = enrollment.to_view()
    view['progressColor'] = progress_color(enrollment.progress_percentage)
    view['enrolledSince'] = time_since(enrollment.enrolled_at)
    return view


def card_action(enrollment):
    if enrollment is None:
        return 'Enroll Now'
    if enrollment.finished:
        return 'View Course'
    return 'Continue Learning'


@register_component('user_dashboard', access=SIGNED_IN)
class UserDashboardService:
    """Service for the signed-in user's dashboard"""

    def __init__(self, courses=None, enrollments=None, categories=None):
        self.courses = courses or CourseService()
        self.enrollments = enrollments or EnrollmentService()
        self.categories = categories or CategoryService()

    def _category_map(self):
        try:
            _, categories = self.categories.list_active()
        except ApiError as e:
            logger.error(f"Error loading categories: {e}")
            return [], {}
        return categories, category_names(categories)

    def _load_enrollments(self):
        try:
            _, enrollments = self.enrollments.list_enrollments()
        except ApiError as e:
            logger.error(f"Error loading enrollments: {e}")
            return []
        return enrollments

    def _load_recent(self):
        try:
            _, recent = self.enrollments.list_recent()
        except ApiError as e:
            logger.error(f"Error loading recent enrollments: {e}")
            return []
        return recent

    def _resolve_page(self, filters, page):
        """A change of backend filters sends the user back to the first page"""
        previous = session.get(FILTERS_SESSION_KEY)
        session[FILTERS_SESSION_KEY] = filters
        if previous is not None and previous != filters:
            return 0
        return page

    def get_dashboard(self, category=None, difficulty=None, search=None,
                      sort_by=DEFAULT_SORT, page=0, page_size=None):
        config = current_app.config
        page_size = page_size or config['DASHBOARD_PAGE_SIZE']
        filters = {
            'category': category or '',
            'difficulty': difficulty or '',
            'search': (search or '').strip(),
        }
        page = self._resolve_page(filters, page)

        categories, category_map = self._category_map()
        enrollments = self._load_enrollments()
        by_course = {e.course_id: e for e in enrollments}
        valid = valid_enrollments(enrollments)

        view = {
            'user': get_current_user(),
            'categories': [c.to_view() for c in categories],
            'difficulties': config['COURSE_DIFFICULTIES'],
            'sortOptions': config['COURSE_SORT_OPTIONS'],
            'filters': dict(filters, sort=sort_by),
            'stats': {
                'enrolledCourses': sum(1 for e in valid if not e.finished),
                'completedCourses': sum(1 for e in valid if e.finished),
            },
            'recentEnrollments': [enrollment_view(e) for e in self._load_recent() if e.course_id],
        }

        try:
            response, courses = self.courses.list_courses(category, difficulty, search)
        except ApiError as e:
            logger.error(f"Error loading courses: {e}")
            notify_error('Error loading courses')
            courses = []
            view['status_code'] = e.view_status
        else:
            if not response.success:
                notify_error('Failed to load courses')

        cards = []
        for course in sort_courses(courses, sort_by):
            card = course_card(course, category_map, config['CATALOG_DESCRIPTION_LIMIT'])
            enrollment = by_course.get(course.id)
            card['enrolled'] = enrollment is not None
            card['enrollment'] = enrollment_view(enrollment) if enrollment else None
            card['action'] = card_action(enrollment)
            cards.append(card)

        pagination = paginate(cards, page, page_size)
        view['courses'] = pagination.pop('items')
        view['pagination'] = pagination
        return view

    def get_course_dialog(self, dialog_type):
        """Enrolled (unfinished) or completed courses of the user"""
        if dialog_type not in DIALOG_TITLES:
            return failure('Unknown course list', 404)
        valid = valid_enrollments(self._load_enrollments())
        if dialog_type == 'completed':
            selected = [e for e in valid if e.finished]
        else:
            selected = [e for e in valid if not e.finished]
        return {
            'type': dialog_type,
            'title': DIALOG_TITLES[dialog_type],
            'courses': [enrollment_view(e) for e in selected],
        }

    def enroll(self, course_id):
        try:
            _, enrollment = self.enrollments.enroll(course_id)
        except ApiError as e:
            return api_failure(e, 'Failed to enroll in course')

        title = enrollment.course_title if enrollment and enrollment.course_title else 'the course'
        notify_success(f'Successfully enrolled in {title}!')
        return {'courseId': course_id, 'redirect': f'/course/{course_id}'}
