"""
User Dashboard Component
"""
from .routes import init_user_dashboard, user_dashboard_bp
from .service import UserDashboardService

__all__ = ['user_dashboard_bp', 'init_user_dashboard', 'UserDashboardService']
