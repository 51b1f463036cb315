"""
Catalog Service
Public course catalog and course preview
"""
import logging

from flask import current_app

from study_portal.components import register_component
from study_portal.core import ApiError, failure, notify_info
from study_portal.core.session import is_authenticated
from study_portal.core.view_state import (
    DEFAULT_SORT,
    course_card,
    linkedin_url,
    needs_read_more,
    sort_courses,
)
from study_portal.services import CategoryService, CourseService
from study_portal.services.category_service import category_names

logger = logging.getLogger(__name__)


@register_component('catalog')
class CatalogService:
    """Service for the public catalog and preview screens"""

    def __init__(self, courses=None, categories=None):
        self.courses = courses or CourseService()
        self.categories = categories or CategoryService()

    def load_category_map(self):
        """Active categories by id; a failure leaves course cards on 'Unknown'"""
        try:
            _, categories = self.categories.list_active()
        except ApiError as e:
            logger.error(f"Error loading categories: {e}")
            return [], {}
        return categories, category_names(categories)

    def get_catalog(self, category=None, difficulty=None, search=None, sort_by=DEFAULT_SORT):
        categories, category_map = self.load_category_map()
        filters = {
            'category': category or '',
            'difficulty': difficulty or '',
            'search': search or '',
            'sort': sort_by,
        }
        view = {
            'categories': [c.to_view() for c in categories],
            'difficulties': current_app.config['COURSE_DIFFICULTIES'],
            'sortOptions': current_app.config['COURSE_SORT_OPTIONS'],
            'filters': filters,
            'courses': [],
            'error': '',
        }

        try:
            response, courses = self.courses.list_courses(category, difficulty, search)
        except ApiError as e:
            logger.error(f"Error loading courses: {e}")
            view['error'] = 'Failed to load courses. Please try again later.'
            view['status_code'] = e.view_status
            return view

        if response.success:
            limit = current_app.config['CATALOG_DESCRIPTION_LIMIT']
            view['courses'] = [course_card(c, category_map, limit) for c in sort_courses(courses, sort_by)]
        return view

    def get_preview(self, course_id):
        try:
            response, course = self.courses.get_course(course_id)
        except ApiError as e:
            logger.error(f"Error loading course {course_id}: {e}")
            error = 'Course not found' if e.status_code == 404 else 'Failed to load course details'
            return {'course': None, 'error': error, 'status_code': e.view_status}
        if course is None:
            return {'course': None, 'error': 'Course not found', 'status_code': 404}

        category_name = ''
        if course.category_id:
            try:
                _, category = self.categories.get_category(course.category_id)
                category_name = category.name if category else ''
            except ApiError as e:
                logger.error(f"Error loading category {course.category_id}: {e}")
                category_name = 'Unknown'

        config = current_app.config
        return {
            'course': course.to_view(),
            'categoryName': category_name,
            'linkedinUrl': linkedin_url(course.linkedin_profile),
            'descriptionReadMore': needs_read_more(course.description, config['DESCRIPTION_PREVIEW_LIMIT']),
            'trainerBioReadMore': needs_read_more(course.trainer_bio, config['TRAINER_BIO_PREVIEW_LIMIT']),
            'error': '',
        }

    def request_enrollment(self, course_id):
        """Enroll button on the preview: visitors are sent to sign in first"""
        if not is_authenticated():
            notify_info('Please sign in to enroll in this course')
            return {'redirect': '/signin'}
        if not course_id:
            return failure('Course not found', 404)
        return {'redirect': f'/course/{course_id}'}
