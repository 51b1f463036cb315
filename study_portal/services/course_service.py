"""
Course resource (/api/courses)
"""
from study_portal.models import Course, parse_list

from .base import ResourceService


class CourseService(ResourceService):
    base_path = 'courses'

    def list_courses(self, category=None, difficulty=None, search=None):
        """Courses filtered by the backend; empty filters are not sent"""
        response = self.client.get(self.path(), params={
            'category': category,
            'difficulty': difficulty,
            'search': search,
        })
        return response, parse_list(Course, response.data) if response.success else []

    def get_course(self, course_id):
        response = self.client.get(self.path(course_id))
        course = Course.model_validate(response.data) if response.success and response.data else None
        return response, course

    def create_course(self, payload):
        return self.client.post(self.path(), json=payload)

    def update_course(self, course_id, payload):
        return self.client.put(self.path(course_id), json=payload)

    def delete_course(self, course_id):
        return self.client.delete(self.path(course_id))
