"""
Course Management Component
"""
from .routes import course_management_bp, init_course_management
from .service import CourseManagementService

__all__ = ['course_management_bp', 'init_course_management', 'CourseManagementService']
