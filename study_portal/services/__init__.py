"""
Backend resource services, one per REST resource
"""
from .admin_service import AdminService
from .auth_service import AuthService
from .category_service import CategoryService
from .course_service import CourseService
from .enrollment_service import EnrollmentService
from .user_service import UserService
from .video_service import VideoService

__all__ = [
    'AdminService',
    'AuthService',
    'CategoryService',
    'CourseService',
    'EnrollmentService',
    'UserService',
    'VideoService',
]
