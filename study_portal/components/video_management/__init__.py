"""
Video Management Component
"""
from .routes import init_video_management, video_management_bp
from .service import VideoManagementService

__all__ = ['video_management_bp', 'init_video_management', 'VideoManagementService']
