"""
Video resource (/api/videos) and YouTube helpers
"""
import re
import sys
from datetime import datetime

from study_portal.models import Video, parse_list
from study_portal.models.forms import YOUTUBE_URL_PATTERN

from .base import ResourceService

YOUTUBE_ID_PATTERNS = [
    re.compile(r'(?:youtube\.com/watch\?v=|youtu\.be/)([a-zA-Z0-9_-]{11})'),
    re.compile(r'youtube\.com/embed/([a-zA-Z0-9_-]{11})'),
]


class VideoService(ResourceService):
    base_path = 'videos'

    def create_video(self, payload):
        return self.client.post(self.path(), json=payload)

    def get_video(self, video_id):
        response = self.client.get(self.path(video_id))
        video = Video.model_validate(response.data) if response.success and response.data else None
        return response, video

    def list_course_videos(self, course_id):
        """Videos of a course, already in display order"""
        response = self.client.get(self.path('course', course_id))
        videos = order_videos(parse_list(Video, response.data)) if response.success else []
        return response, videos

    def update_video(self, video_id, payload):
        return self.client.put(self.path(video_id), json=payload)

    def delete_video(self, video_id):
        return self.client.delete(self.path(video_id))

    def update_position(self, video_id, position):
        """Move one video; the backend shifts its siblings"""
        return self.client.patch(self.path(video_id, 'position'), params={'position': position})


def _created_key(video):
    created = video.created_at
    if created is None:
        return float('inf')
    if created.tzinfo is None:
        return (created - datetime(1970, 1, 1)).total_seconds()
    return created.timestamp()


def order_videos(videos):
    """Position ascending with unpositioned videos last; creation time breaks ties"""
    return sorted(
        videos,
        key=lambda v: (v.position if v.position is not None else sys.maxsize, _created_key(v)),
    )


def is_valid_youtube_url(url):
    return bool(url) and bool(YOUTUBE_URL_PATTERN.match(url.strip()))


def youtube_video_id(url):
    if not url:
        return None
    for pattern in YOUTUBE_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def youtube_embed_url(url):
    video_id = youtube_video_id(url)
    return f'https://www.youtube.com/embed/{video_id}' if video_id else None


def youtube_thumbnail_url(url):
    video_id = youtube_video_id(url)
    return f'https://img.youtube.com/vi/{video_id}/hqdefault.jpg' if video_id else None
