"""
Auth and OTP resource (/api/auth, /api/otp)
"""
from .base import ResourceService


class AuthService(ResourceService):
    """Token issuance, two-factor sign-in and password reset"""

    base_path = 'auth'
    otp_path = 'otp'

    def register(self, payload):
        return self.client.post(self.path('register'), json=payload)

    def google_login(self, id_token, client_id=None):
        payload = {'idToken': id_token}
        if client_id:
            payload['clientId'] = client_id
        return self.client.post(self.path('google'), json=payload)

    # OTP
    def send_otp(self, email):
        return self.client.post(f'{self.otp_path}/send', json={'email': email})

    def verify_otp(self, email, otp):
        return self.client.post(f'{self.otp_path}/verify', json={'email': email, 'otp': otp})

    def resend_otp(self, email):
        return self.client.post(f'{self.otp_path}/resend', json={'email': email})

    def login_with_otp(self, email, otp):
        return self.client.post(self.path('login-otp'), json={'email': email, 'otp': otp})

    # Two-factor sign-in: password first, then OTP
    def verify_password(self, email, password):
        return self.client.post(self.path('verify-password'), json={'email': email, 'password': password})

    def complete_login(self, email, otp):
        return self.client.post(self.path('complete-login'), json={'email': email, 'otp': otp})

    # Password reset
    def forgot_password(self, email):
        return self.client.post(self.path('forgot-password'), json={'email': email})

    def verify_reset_otp(self, email, otp):
        return self.client.post(self.path('verify-reset-otp'), json={'email': email, 'otp': otp})

    def reset_password(self, email, otp, new_password):
        return self.client.post(
            self.path('reset-password'),
            json={'email': email, 'otp': otp, 'newPassword': new_password},
        )
