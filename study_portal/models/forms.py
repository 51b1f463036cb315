"""
Form models
Validation rules for every form the portal accepts; field names follow the
browser's camelCase payloads, snake_case attributes are accepted too.
"""
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

INDIAN_MOBILE_PATTERN = r'^[6-9]\d{9}$'
TEN_DIGIT_PATTERN = r'^[0-9]{10}$'
OTP_PATTERN = r'^\d{6}$'
YOUTUBE_URL_PATTERN = re.compile(r'^https?://(www\.)?(youtube\.com/watch\?v=|youtu\.be/)[a-zA-Z0-9_-]{11}.*$')


def _blank_to_none(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class FormModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')


class EmailForm(FormModel):
    email: EmailStr

    @field_validator('email', mode='before')
    @classmethod
    def strip_email(cls, value):
        return value.strip() if isinstance(value, str) else value


class SignInForm(EmailForm):
    password: str = Field(min_length=1)
    remember_me: bool = False


class OtpForm(FormModel):
    otp: str = Field(pattern=OTP_PATTERN)

    @field_validator('otp', mode='before')
    @classmethod
    def strip_otp(cls, value):
        return value.strip() if isinstance(value, str) else value


class ResetOtpForm(FormModel):
    otp: str = Field(min_length=6, max_length=6)


class SignUpForm(EmailForm):
    username: str = Field(min_length=3, max_length=20)
    mobile_number: str = Field(pattern=INDIAN_MOBILE_PATTERN)
    password: str = Field(min_length=6)
    confirm_password: str
    agree_to_terms: bool = False

    @field_validator('agree_to_terms')
    @classmethod
    def terms_accepted(cls, value):
        if not value:
            raise ValueError('You must accept the terms and conditions')
        return value

    @model_validator(mode='after')
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError('Passwords do not match')
        return self

    def registration_payload(self):
        return {
            'username': self.username,
            'email': self.email,
            'mobileNumber': self.mobile_number,
            'password': self.password,
        }


class ResetPasswordForm(FormModel):
    new_password: str = Field(min_length=6)
    confirm_password: str

    @model_validator(mode='after')
    def passwords_match(self):
        if self.new_password != self.confirm_password:
            raise ValueError('Passwords do not match')
        return self


class GoogleCredentialForm(FormModel):
    credential: str = Field(min_length=1)


class ProfileForm(FormModel):
    username: str = Field(min_length=3, max_length=50)
    mobile_number: Optional[str] = Field(default=None, pattern=TEN_DIGIT_PATTERN)

    @field_validator('mobile_number', mode='before')
    @classmethod
    def blank_mobile(cls, value):
        return _blank_to_none(value)


class PasswordChangeForm(FormModel):
    current_password: str = Field(min_length=6)
    new_password: str = Field(min_length=6)
    confirm_password: str

    @model_validator(mode='after')
    def passwords_match(self):
        if self.new_password != self.confirm_password:
            raise ValueError('Passwords do not match')
        return self


class CourseForm(FormModel):
    title: str = Field(min_length=3, max_length=100)
    description: str = Field(min_length=10)
    category_id: str = Field(min_length=1)
    difficulty: str = Field(min_length=1)
    thumbnail_url: Optional[str] = None

    trainer_name: str = Field(min_length=2, max_length=50)
    trainer_bio: str = Field(min_length=10)
    experience: str = Field(min_length=1)
    linkedin_profile: Optional[str] = None
    field_of_work: str = Field(min_length=1)
    profile_picture_url: Optional[str] = None
    language: str = Field(min_length=1)

    @field_validator('thumbnail_url', 'linkedin_profile', 'profile_picture_url', mode='before')
    @classmethod
    def blank_optional(cls, value):
        return _blank_to_none(value)

    def request_payload(self):
        """Backend request body; blank optional fields are left out"""
        return self.model_dump(by_alias=True, exclude_none=True)


class VideoForm(FormModel):
    title: str = Field(min_length=3, max_length=100)
    description: str = ''
    video_url: str
    position: Optional[int] = Field(default=None, ge=1)
    drive_notes_file_link: Optional[str] = None
    drive_notes_file_name: Optional[str] = None
    code_file_links: List[str] = Field(default_factory=list)
    code_file_names: List[str] = Field(default_factory=list)

    @field_validator('description', mode='before')
    @classmethod
    def none_description(cls, value):
        return value or ''

    @field_validator('video_url')
    @classmethod
    def youtube_url(cls, value):
        value = value.strip()
        if not value:
            raise ValueError('Video URL is required')
        if not YOUTUBE_URL_PATTERN.match(value):
            raise ValueError('Please enter a valid YouTube URL')
        return value

    @field_validator('drive_notes_file_link', 'drive_notes_file_name', mode='before')
    @classmethod
    def blank_optional(cls, value):
        return _blank_to_none(value)

    def code_files(self):
        """Pair code file links with names; blank links are dropped, missing names numbered"""
        entries = []
        for index, link in enumerate(self.code_file_links):
            link = (link or '').strip()
            if not link:
                continue
            name = self.code_file_names[index].strip() if index < len(self.code_file_names) and self.code_file_names[index] else ''
            entries.append((link, name or f'Code File {index + 1}'))
        return entries

    def request_payload(self, course_id):
        code_files = self.code_files()
        payload = {
            'title': self.title,
            'description': self.description,
            'courseId': course_id,
            'videoUrl': self.video_url,
            'driveCodeFileLinks': [link for link, _ in code_files],
            'driveCodeFileNames': [name for _, name in code_files],
        }
        if self.position is not None:
            payload['position'] = self.position
        if self.drive_notes_file_link:
            payload['driveNotesFileLink'] = self.drive_notes_file_link
        if self.drive_notes_file_name:
            payload['driveNotesFileName'] = self.drive_notes_file_name
        return payload


class CategoryForm(FormModel):
    name: str
    description: Optional[str] = None

    @field_validator('name', mode='before')
    @classmethod
    def trim_name(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator('name')
    @classmethod
    def name_length(cls, value):
        if len(value) < 2:
            raise ValueError('Name must be at least 2 characters')
        return value

    @field_validator('description', mode='before')
    @classmethod
    def blank_description(cls, value):
        return _blank_to_none(value)

    def request_payload(self):
        return self.model_dump(exclude_none=True)


class ReorderForm(FormModel):
    previous_index: int = Field(ge=0)
    current_index: int = Field(ge=0)
