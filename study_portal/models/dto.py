"""
Backend DTOs
Mirrors of the REST backend's JSON payloads; camelCase on the wire, snake_case in Python
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class BackendModel(BaseModel):
    """Base for every payload coming from the backend"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')

    @model_validator(mode='before')
    @classmethod
    def drop_nulls(cls, data):
        """Fields the backend leaves unset arrive as null and take their defaults"""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_view(self):
        """JSON-ready dict in the backend's camelCase shape"""
        return self.model_dump(mode='json', by_alias=True)


class User(BackendModel):
    id: str
    email: str
    username: Optional[str] = None
    roles: List[str] = Field(default_factory=list)
    mobile_number: Optional[str] = None


class UserProfile(User):
    verified: bool = False
    auth_provider: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AuthPayload(BackendModel):
    """data of a successful login / register / complete-login response"""
    token: str
    user: User


class Category(BackendModel):
    id: str
    name: str
    description: Optional[str] = None
    icon_url: Optional[str] = None
    active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Course(BackendModel):
    id: str
    title: str
    description: str = ''
    category_id: Optional[str] = None
    difficulty: Optional[str] = None
    thumbnail_url: Optional[str] = None
    video_ids: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Trainer information
    trainer_name: Optional[str] = None
    trainer_bio: Optional[str] = None
    experience: Optional[str] = None
    linkedin_profile: Optional[str] = None
    field_of_work: Optional[str] = None
    profile_picture_url: Optional[str] = None
    language: Optional[str] = None


class Video(BackendModel):
    id: str
    title: str
    description: Optional[str] = ''
    course_id: str
    video_url: str
    position: Optional[int] = None
    drive_notes_file_link: Optional[str] = None
    drive_notes_file_name: Optional[str] = None
    drive_code_file_links: List[str] = Field(default_factory=list)
    drive_code_file_names: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def has_files(self):
        return bool(self.drive_notes_file_link or self.drive_code_file_links)


class Enrollment(BackendModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    course_id: Optional[str] = None
    course_title: Optional[str] = None
    course_description: Optional[str] = None
    course_thumbnail: Optional[str] = None
    enrolled_at: Optional[datetime] = None
    last_accessed_at: Optional[datetime] = None
    is_completed: bool = False
    completed_at: Optional[datetime] = None
    progress_percentage: float = 0
    completed_videos: int = 0
    total_videos: int = 0

    @property
    def finished(self):
        return self.is_completed or self.progress_percentage == 100


class EnrollmentStats(BackendModel):
    total_enrollments: int = 0
    completed_enrollments: int = 0
    completion_rate: float = 0


class VideoCompletion(BackendModel):
    course_id: str
    video_id: Optional[str] = None
    already_completed: bool = False
    total_completed: int = 0
    total_videos: int = 0
    completed_video_ids: List[str] = Field(default_factory=list)


class CourseStats(BackendModel):
    course_id: str
    course_title: str
    total_enrollments: int = 0
    active_enrollments: int = 0
    completed_enrollments: int = 0
    total_videos: int = 0


class RecentActivity(BackendModel):
    new_users_today: int = 0
    new_enrollments_today: int = 0
    active_users_today: int = 0
    most_popular_course: Optional[str] = None
    most_popular_course_enrollments: int = 0


class AdminDashboardStats(BackendModel):
    total_users: int = 0
    total_courses: int = 0
    total_enrollments: int = 0
    total_videos: int = 0
    new_users_this_month: int = 0
    new_enrollments_this_month: int = 0
    course_stats: List[CourseStats] = Field(default_factory=list)
    recent_activity: Optional[RecentActivity] = None


def parse_list(model, items):
    """Validate a list payload, skipping null entries"""
    return [model.model_validate(item) for item in (items or []) if item]
