"""
Auth Service
Sign-in (password + OTP), sign-up, passwordless OTP sign-in, Google sign-in
and password reset. Each flow keeps its step in the session cookie; anything
secret (the pending registration, a verified reset OTP) stays server-side.
"""
import logging
import math
import time

from flask import current_app, session
from pydantic import ValidationError

from study_portal.components import register_component
from study_portal.core import ApiError, api_failure, failure, notify_success, pending_flows
from study_portal.core.session import get_current_user, is_admin, is_authenticated, logout, store_login
from study_portal.models import AuthPayload
from study_portal.services import AuthService

logger = logging.getLogger(__name__)

SIGNIN = 'signin'
SIGNUP = 'signup'
PASSWORD_RESET = 'password_reset'
OTP_LOGIN = 'otp_login'


def _auth_payload(response):
    """Token and user out of a login-type response, None when absent"""
    if not response.success or not isinstance(response.data, dict):
        return None
    try:
        return AuthPayload.model_validate(response.data)
    except ValidationError as e:
        logger.warning(f"Login response without usable token: {e}")
        return None


@register_component('auth')
class AuthFlowService:
    """Service for the sign-in, sign-up and password reset screens"""

    def __init__(self, auth=None, clock=time.time):
        self.auth = auth or AuthService()
        self.clock = clock

    # Flow state kept in the session

    def _start_flow(self, name, **state):
        state['resend_at'] = self.clock() + current_app.config['OTP_RESEND_COOLDOWN']
        session[name] = state
        return state

    def _flow(self, name):
        return session.get(name)

    def _end_flow(self, name):
        state = session.pop(name, None)
        if state and state.get('key'):
            pending_flows.discard(state['key'])

    def resend_countdown(self, state):
        if not state:
            return 0
        return max(0, math.ceil(state.get('resend_at', 0) - self.clock()))

    def _flow_view(self, name, **extra):
        state = self._flow(name)
        view = {
            'step': state.get('step') if state else 'form',
            'email': state.get('email') if state else None,
            'resend_countdown': self.resend_countdown(state),
        }
        view.update(extra)
        return view

    def _no_flow(self, name):
        return failure('Your verification session has expired. Please start again.', 409,
                       **self._flow_view(name))

    def _cooling_down(self, name, state):
        seconds = self.resend_countdown(state)
        if seconds:
            return failure(f'Please wait {seconds} seconds before requesting a new OTP', 429,
                           **self._flow_view(name))
        return None

    def _login(self, payload, remember=True):
        store_login(payload.token, payload.user.to_view(), remember=remember)
        logger.info(f"User {payload.user.email} signed in")

    # Two-factor sign-in

    def start_signin(self, form):
        """Check the password, then mail an OTP"""
        self._end_flow(SIGNIN)
        try:
            response = self.auth.verify_password(form.email, form.password)
        except ApiError as e:
            return api_failure(e, 'An error occurred during sign in', step='form')
        if not response.success:
            return failure(response.message or 'Invalid credentials', 401, step='form')

        try:
            sent = self.auth.send_otp(form.email)
        except ApiError as e:
            return api_failure(e, 'An error occurred while sending OTP', step='form')
        if not sent.success:
            return failure(sent.message or 'Failed to send OTP', 400, step='form')

        self._start_flow(SIGNIN, email=form.email, step='otp', remember=form.remember_me)
        notify_success('OTP sent to your email! Please verify to continue.')
        return self._flow_view(SIGNIN)

    def verify_signin(self, form):
        state = self._flow(SIGNIN)
        if not state:
            return self._no_flow(SIGNIN)
        try:
            response = self.auth.complete_login(state['email'], form.otp)
        except ApiError as e:
            return api_failure(e, 'OTP verification failed', **self._flow_view(SIGNIN))

        payload = _auth_payload(response)
        if payload is None:
            return failure(response.message or 'Invalid OTP', 400, **self._flow_view(SIGNIN))

        self._end_flow(SIGNIN)
        self._login(payload, remember=state.get('remember', True))
        notify_success('Sign in successful!')
        return {'step': 'done', 'redirect': '/dashboard'}

    def back_to_signin(self):
        self._end_flow(SIGNIN)
        return self._flow_view(SIGNIN)

    # Sign-up

    def start_signup(self, form):
        """Hold the registration server-side and mail an OTP to verify the address"""
        self._end_flow(SIGNUP)
        try:
            sent = self.auth.send_otp(form.email)
        except ApiError as e:
            return api_failure(e, 'An error occurred while sending OTP', step='form')
        if not sent.success:
            return failure(sent.message or 'Failed to send OTP', 400, step='form')

        key = pending_flows.put(form.registration_payload())
        self._start_flow(SIGNUP, email=form.email, step='otp', key=key)
        notify_success('OTP sent to your email!')
        return self._flow_view(SIGNUP)

    def verify_signup(self, form):
        state = self._flow(SIGNUP)
        registration = pending_flows.get(state.get('key')) if state else None
        if registration is None:
            self._end_flow(SIGNUP)
            return self._no_flow(SIGNUP)

        try:
            verified = self.auth.verify_otp(state['email'], form.otp)
        except ApiError as e:
            return api_failure(e, 'OTP verification failed', **self._flow_view(SIGNUP))
        if not verified.success:
            return failure(verified.message or 'Invalid OTP', 400, **self._flow_view(SIGNUP))

        try:
            response = self.auth.register(registration)
        except ApiError as e:
            return api_failure(e, 'An error occurred during registration', **self._flow_view(SIGNUP))

        payload = _auth_payload(response)
        if payload is None:
            return failure(response.message or 'Registration failed', 400, **self._flow_view(SIGNUP))

        self._end_flow(SIGNUP)
        self._login(payload)
        notify_success('Account created successfully!')
        return {'step': 'done', 'redirect': '/dashboard'}

    def back_to_signup(self):
        self._end_flow(SIGNUP)
        return self._flow_view(SIGNUP)

    # Passwordless sign-in

    def start_otp_login(self, form):
        self._end_flow(OTP_LOGIN)
        try:
            sent = self.auth.send_otp(form.email)
        except ApiError as e:
            return api_failure(e, 'An error occurred while sending OTP', step='form')
        if not sent.success:
            return failure(sent.message or 'Failed to send OTP', 400, step='form')

        self._start_flow(OTP_LOGIN, email=form.email, step='otp')
        notify_success('OTP sent to your email!')
        return self._flow_view(OTP_LOGIN)

    def verify_otp_login(self, form):
        state = self._flow(OTP_LOGIN)
        if not state:
            return self._no_flow(OTP_LOGIN)
        try:
            response = self.auth.login_with_otp(state['email'], form.otp)
        except ApiError as e:
            return api_failure(e, 'OTP verification failed', **self._flow_view(OTP_LOGIN))

        payload = _auth_payload(response)
        if payload is None:
            return failure(response.message or 'Invalid OTP', 400, **self._flow_view(OTP_LOGIN))

        self._end_flow(OTP_LOGIN)
        self._login(payload)
        notify_success('Sign in successful!')
        return {'step': 'done', 'redirect': '/dashboard'}

    # OTP resend, shared by every flow that mails a code

    def resend(self, name):
        state = self._flow(name)
        if not state or state.get('step') != 'otp':
            return self._no_flow(name)
        refused = self._cooling_down(name, state)
        if refused:
            return refused

        try:
            if name == PASSWORD_RESET:
                response = self.auth.forgot_password(state['email'])
            else:
                response = self.auth.resend_otp(state['email'])
        except ApiError as e:
            return api_failure(e, 'Error resending OTP', **self._flow_view(name))
        if not response.success:
            return failure(response.message or 'Failed to resend OTP', 400, **self._flow_view(name))

        state['resend_at'] = self.clock() + current_app.config['OTP_RESEND_COOLDOWN']
        session[name] = state
        notify_success('OTP resent successfully!')
        return self._flow_view(name)

    # Google

    def google_signin(self, form):
        try:
            response = self.auth.google_login(form.credential, current_app.config.get('GOOGLE_CLIENT_ID'))
        except ApiError as e:
            return api_failure(e, 'Google sign-in error')

        payload = _auth_payload(response)
        if payload is None:
            return failure(response.message or 'Google sign-in failed', 401)

        self._login(payload)
        notify_success('Signed in with Google')
        return {'redirect': '/dashboard'}

    # Password reset: email -> OTP -> new password

    def start_password_reset(self, form):
        self._end_flow(PASSWORD_RESET)
        try:
            response = self.auth.forgot_password(form.email)
        except ApiError as e:
            return api_failure(e, 'An error occurred. Please try again.', step='email')
        if not response.success:
            return failure(response.message or 'Failed to send OTP', 400, step='email')

        self._start_flow(PASSWORD_RESET, email=form.email, step='otp')
        notify_success('OTP sent successfully!')
        return self._flow_view(PASSWORD_RESET)

    def verify_reset_otp(self, form):
        state = self._flow(PASSWORD_RESET)
        if not state:
            return self._no_flow(PASSWORD_RESET)
        try:
            response = self.auth.verify_reset_otp(state['email'], form.otp)
        except ApiError as e:
            return api_failure(e, 'Invalid OTP', **self._flow_view(PASSWORD_RESET))
        if not response.success:
            return failure(response.message or 'Invalid OTP', 400, **self._flow_view(PASSWORD_RESET))

        # reset-password needs the verified code again
        state['key'] = pending_flows.put({'otp': form.otp})
        state['step'] = 'password'
        session[PASSWORD_RESET] = state
        notify_success('OTP verified successfully!')
        return self._flow_view(PASSWORD_RESET)

    def reset_password(self, form):
        state = self._flow(PASSWORD_RESET)
        held = pending_flows.get(state.get('key')) if state and state.get('step') == 'password' else None
        if held is None:
            return self._no_flow(PASSWORD_RESET)
        try:
            response = self.auth.reset_password(state['email'], held['otp'], form.new_password)
        except ApiError as e:
            return api_failure(e, 'An error occurred', **self._flow_view(PASSWORD_RESET))
        if not response.success:
            return failure(response.message or 'Password reset failed', 400, **self._flow_view(PASSWORD_RESET))

        self._end_flow(PASSWORD_RESET)
        notify_success('Password reset successfully!')
        return {'step': 'done', 'redirect': '/signin'}

    # Session

    def session_state(self):
        authenticated = is_authenticated()
        return {
            'authenticated': authenticated,
            'admin': is_admin() if authenticated else False,
            'user': get_current_user() if authenticated else None,
            'flows': {
                name: session[name].get('step')
                for name in (SIGNIN, SIGNUP, PASSWORD_RESET, OTP_LOGIN)
                if name in session
            },
        }

    def sign_out(self):
        for name in (SIGNUP, PASSWORD_RESET):
            self._end_flow(name)
        logout()
        return {'redirect': '/signin'}
