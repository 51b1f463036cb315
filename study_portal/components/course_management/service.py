"""
Course Management Service
Create and edit courses from the back office
"""
import logging

from flask import current_app

from study_portal.components import ADMIN, register_component
from study_portal.core import ApiError, api_failure, failure, notify_error, notify_success
from study_portal.services import CategoryService, CourseService

logger = logging.getLogger(__name__)

FORM_FIELDS = [
    'title', 'description', 'categoryId', 'difficulty', 'thumbnailUrl',
    'trainerName', 'trainerBio', 'experience', 'linkedinProfile',
    'fieldOfWork', 'profilePictureUrl', 'language',
]


def course_form_values(course):
    """Pre-fill values for the edit form; absent optional fields become blank"""
    data = course.to_view()
    return {field: data.get(field) or '' for field in FORM_FIELDS}


@register_component('course_management', access=ADMIN)
class CourseManagementService:
    """Service for the create-course and edit-course screens"""

    def __init__(self, courses=None, categories=None):
        self.courses = courses or CourseService()
        self.categories = categories or CategoryService()

    def form_options(self):
        config = current_app.config
        options = {
            'categories': [],
            'difficulties': config['COURSE_DIFFICULTIES'],
            'languages': config['COURSE_LANGUAGES'],
        }
        try:
            response, categories = self.categories.list_active()
        except ApiError as e:
            logger.error(f"Error loading categories: {e}")
            notify_error('Error loading categories')
            return options
        if not response.success:
            notify_error('Failed to load categories')
        options['categories'] = [c.to_view() for c in categories]
        return options

    def create_course(self, form):
        try:
            response = self.courses.create_course(form.request_payload())
        except ApiError as e:
            logger.error(f"Error creating course: {e}")
            return api_failure(e, 'Error creating course')
        if not response.success:
            return failure(response.message or 'Failed to create course', 400)

        notify_success('Course created successfully!')
        return {'course': response.data, 'redirect': '/admin'}

    def get_edit_form(self, course_id):
        if not course_id:
            return failure('Invalid course id', 400, redirect='/admin')
        try:
            response, course = self.courses.get_course(course_id)
        except ApiError as e:
            logger.error(f"Error loading course {course_id}: {e}")
            return failure('Error loading course', e.view_status, redirect='/admin')
        if course is None:
            return failure(response.message or 'Failed to load course', 404, redirect='/admin')

        view = {'courseId': course.id, 'values': course_form_values(course)}
        view['options'] = self.form_options()
        return view

    def update_course(self, course_id, form):
        try:
            response = self.courses.update_course(course_id, form.request_payload())
        except ApiError as e:
            logger.error(f"Error updating course {course_id}: {e}")
            return api_failure(e, 'Error updating course')
        if not response.success:
            return failure(response.message or 'Failed to update course', 400)

        notify_success('Course updated successfully')
        return {'course': response.data, 'redirect': '/admin'}
