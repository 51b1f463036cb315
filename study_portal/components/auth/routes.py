"""
Auth API Routes
"""
from flask import Blueprint, current_app
from pydantic import ValidationError

from study_portal.core import limiter, load_form, respond, validation_error
from study_portal.models.forms import (
    EmailForm,
    GoogleCredentialForm,
    OtpForm,
    ResetOtpForm,
    ResetPasswordForm,
    SignInForm,
    SignUpForm,
)

from .service import OTP_LOGIN, PASSWORD_RESET, SIGNIN, SIGNUP, AuthFlowService

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')

# Service instance
service = AuthFlowService()


def otp_rate_limit():
    return current_app.config['RATELIMIT_OTP']


def _submit(form_model, action):
    try:
        form = load_form(form_model)
    except ValidationError as e:
        return validation_error(e)
    return respond(action(form))


@auth_bp.route('/session')
def api_session():
    """Who is signed in, and which auth flows are half-way through"""
    return respond(service.session_state())


@auth_bp.route('/logout', methods=['POST'])
def api_logout():
    return respond(service.sign_out())


# Two-factor sign-in

@auth_bp.route('/signin', methods=['POST'])
@limiter.limit(otp_rate_limit)
def api_signin():
    return _submit(SignInForm, service.start_signin)


@auth_bp.route('/signin/otp', methods=['POST'])
def api_signin_otp():
    return _submit(OtpForm, service.verify_signin)


@auth_bp.route('/signin/resend', methods=['POST'])
@limiter.limit(otp_rate_limit)
def api_signin_resend():
    return respond(service.resend(SIGNIN))


@auth_bp.route('/signin/back', methods=['POST'])
def api_signin_back():
    return respond(service.back_to_signin())


# Sign-up

@auth_bp.route('/signup', methods=['POST'])
@limiter.limit(otp_rate_limit)
def api_signup():
    return _submit(SignUpForm, service.start_signup)


@auth_bp.route('/signup/otp', methods=['POST'])
def api_signup_otp():
    return _submit(OtpForm, service.verify_signup)


@auth_bp.route('/signup/resend', methods=['POST'])
@limiter.limit(otp_rate_limit)
def api_signup_resend():
    return respond(service.resend(SIGNUP))


@auth_bp.route('/signup/back', methods=['POST'])
def api_signup_back():
    return respond(service.back_to_signup())


# Passwordless sign-in

@auth_bp.route('/otp-login/start', methods=['POST'])
@limiter.limit(otp_rate_limit)
def api_otp_login_start():
    return _submit(EmailForm, service.start_otp_login)


@auth_bp.route('/otp-login/verify', methods=['POST'])
def api_otp_login_verify():
    return _submit(OtpForm, service.verify_otp_login)


@auth_bp.route('/otp-login/resend', methods=['POST'])
@limiter.limit(otp_rate_limit)
def api_otp_login_resend():
    return respond(service.resend(OTP_LOGIN))


@auth_bp.route('/google', methods=['POST'])
def api_google():
    """Exchange a Google ID token (the GIS credential) for a portal session"""
    return _submit(GoogleCredentialForm, service.google_signin)


# Forgot password

@auth_bp.route('/forgot-password', methods=['POST'])
@limiter.limit(otp_rate_limit)
def api_forgot_password():
    return _submit(EmailForm, service.start_password_reset)


@auth_bp.route('/forgot-password/verify-otp', methods=['POST'])
def api_forgot_password_verify():
    return _submit(ResetOtpForm, service.verify_reset_otp)


@auth_bp.route('/forgot-password/resend', methods=['POST'])
@limiter.limit(otp_rate_limit)
def api_forgot_password_resend():
    return respond(service.resend(PASSWORD_RESET))


@auth_bp.route('/forgot-password/reset', methods=['POST'])
def api_forgot_password_reset():
    return _submit(ResetPasswordForm, service.reset_password)


def init_auth(app):
    """Initialize auth component with Flask app"""
    app.register_blueprint(auth_bp)
    return auth_bp
