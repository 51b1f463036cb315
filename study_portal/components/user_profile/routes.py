"""
User Profile API Routes
"""
from flask import Blueprint
from pydantic import ValidationError

from study_portal.core import load_form, login_required, respond, validation_error
from study_portal.models.forms import PasswordChangeForm, ProfileForm

from .service import UserProfileService

user_profile_bp = Blueprint('user_profile', __name__, url_prefix='/api/profile')

# Service instance
service = UserProfileService()


@user_profile_bp.route('')
@login_required
def api_profile():
    return respond(service.get_profile())


@user_profile_bp.route('', methods=['PUT'])
@login_required
def api_update_profile():
    """Update username and mobile number; email is read-only"""
    try:
        form = load_form(ProfileForm)
    except ValidationError as e:
        return validation_error(e)
    return respond(service.update_profile(form))


@user_profile_bp.route('/password', methods=['PUT'])
@login_required
def api_change_password():
    try:
        form = load_form(PasswordChangeForm)
    except ValidationError as e:
        return validation_error(e)
    return respond(service.change_password(form))


def init_user_profile(app):
    """Initialize user profile component with Flask app"""
    app.register_blueprint(user_profile_bp)
    return user_profile_bp
