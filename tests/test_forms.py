import pytest
from pydantic import ValidationError

from study_portal.models.forms import (
    CategoryForm,
    EmailForm,
    OtpForm,
    ResetOtpForm,
    SignUpForm,
    VideoForm,
)


def test_email_trimmed_and_checked():
    assert EmailForm.model_validate({'email': '  a@b.co '}).email == 'a@b.co'
    with pytest.raises(ValidationError):
        EmailForm.model_validate({'email': 'a@'})


@pytest.mark.parametrize('email', ['plainaddress', 'a@b', 'two@@signs.com', 'spaces in@mail.com'])
def test_invalid_email_rejected(email):
    with pytest.raises(ValidationError):
        EmailForm.model_validate({'email': email})


@pytest.mark.parametrize('otp', ['12345', '1234567', 'abcdef', ''])
def test_sign_in_otp_is_six_digits(otp):
    with pytest.raises(ValidationError):
        OtpForm.model_validate({'otp': otp})


def test_reset_otp_only_checks_length():
    assert ResetOtpForm.model_validate({'otp': 'A1B2C3'}).otp == 'A1B2C3'


@pytest.mark.parametrize('mobile, valid', [
    ('9876543210', True),
    ('6000000000', True),
    ('5876543210', False),
    ('987654321', False),
])
def test_signup_mobile_number(mobile, valid):
    data = {
        'username': 'asha',
        'email': 'a@b.co',
        'mobileNumber': mobile,
        'password': 'secret1',
        'confirmPassword': 'secret1',
        'agreeToTerms': True,
    }
    if valid:
        assert SignUpForm.model_validate(data).mobile_number == mobile
    else:
        with pytest.raises(ValidationError):
            SignUpForm.model_validate(data)


def test_snake_case_names_accepted():
    form = VideoForm.model_validate({'title': 'Intro', 'video_url': 'https://youtu.be/dQw4w9WgXcQ'})
    assert form.video_url == 'https://youtu.be/dQw4w9WgXcQ'


def test_video_position_must_be_positive():
    with pytest.raises(ValidationError):
        VideoForm.model_validate({'title': 'Intro', 'videoUrl': 'https://youtu.be/dQw4w9WgXcQ', 'position': 0})


def test_category_description_optional():
    form = CategoryForm.model_validate({'name': 'Cloud', 'description': 'Servers'})
    assert form.request_payload() == {'name': 'Cloud', 'description': 'Servers'}
