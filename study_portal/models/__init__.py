"""
Portal data models: backend DTOs and form validation
"""
from .dto import (
    AdminDashboardStats,
    AuthPayload,
    Category,
    Course,
    Enrollment,
    EnrollmentStats,
    User,
    UserProfile,
    Video,
    VideoCompletion,
    parse_list,
)

__all__ = [
    'AdminDashboardStats',
    'AuthPayload',
    'Category',
    'Course',
    'Enrollment',
    'EnrollmentStats',
    'User',
    'UserProfile',
    'Video',
    'VideoCompletion',
    'parse_list',
]
