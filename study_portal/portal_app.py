"""
Study Portal application
Component-based Flask front end over the course platform's REST backend
"""
import logging

from flask import Flask

from study_portal.components.admin_dashboard import init_admin_dashboard
from study_portal.components.auth import init_auth
from study_portal.components.catalog import init_catalog
from study_portal.components.category_management import init_category_management
from study_portal.components.course_detail import init_course_detail
from study_portal.components.course_management import init_course_management
from study_portal.components.user_dashboard import init_user_dashboard
from study_portal.components.user_profile import init_user_profile
from study_portal.components.video_management import init_video_management
from study_portal.config import get_config
from study_portal.core import init_http, limiter, pending_flows
from study_portal.routes.main_routes import main_bp

logger = logging.getLogger(__name__)


class PortalApp:
    """Main portal application class"""

    def __init__(self):
        self.app = None

    def create_app(self, config_name=None, http=None):
        """Create and configure Flask application

        http replaces the requests session used for backend calls (tests pass a fake).
        """
        self.app = Flask(__name__)

        # Load configuration
        self.app.config.from_object(get_config(config_name))

        logging.basicConfig(
            level=getattr(logging, self.app.config['LOG_LEVEL'].upper(), logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        )

        # Initialize extensions
        limiter.init_app(self.app)
        init_http(self.app, http)
        pending_flows.ttl_seconds = self.app.config['PENDING_FLOW_TTL']

        # Initialize components
        init_auth(self.app)
        init_catalog(self.app)
        init_user_dashboard(self.app)
        init_course_detail(self.app)
        init_user_profile(self.app)
        init_admin_dashboard(self.app)
        init_course_management(self.app)
        init_video_management(self.app)
        init_category_management(self.app)

        # Register main blueprint
        self.app.register_blueprint(main_bp)

        return self.app

    def run(self):
        """Start the portal"""
        config = self.app.config
        logger.info(f"Study Portal starting on http://{config['HOST']}:{config['PORT']}")
        logger.info(f"Backend API: {config['API_BASE_URL']}")
        self.app.run(host=config['HOST'], port=config['PORT'], debug=False)


def create_app(config_name=None, http=None):
    """Application factory for WSGI servers and tests"""
    return PortalApp().create_app(config_name, http)


def main():
    """Main entry point"""
    portal = PortalApp()
    portal.create_app()
    portal.run()


if __name__ == '__main__':
    main()
