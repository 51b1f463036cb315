"""
Course Detail Component
"""
from .routes import course_detail_bp, init_course_detail
from .service import CourseDetailService

__all__ = ['course_detail_bp', 'init_course_detail', 'CourseDetailService']
