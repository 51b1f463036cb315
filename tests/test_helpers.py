from datetime import datetime, timedelta

import pytest

from study_portal.core import PendingFlowStore
from study_portal.core.view_state import int_arg, linkedin_url, paginate, truncate
from study_portal.models import Enrollment, Video
from study_portal.services.enrollment_service import (
    calculate_progress,
    enrollment_status,
    progress_color,
    time_since,
)
from study_portal.services.video_service import (
    is_valid_youtube_url,
    order_videos,
    youtube_embed_url,
    youtube_video_id,
)


class TestPendingFlowStore:

    def test_entries_expire(self):
        now = [100.0]
        store = PendingFlowStore(ttl_seconds=10, clock=lambda: now[0])
        key = store.put({'email': 'a@b.co'})

        assert store.get(key) == {'email': 'a@b.co'}
        now[0] = 111.0
        assert store.get(key) is None
        assert len(store) == 0

    def test_put_replaces_and_discard_removes(self):
        store = PendingFlowStore()
        key = store.put({'step': 'otp'})

        assert store.put({'step': 'password'}, key=key) == key
        assert store.get(key) == {'step': 'password'}
        store.discard(key)
        assert store.get(key) is None
        assert len(store) == 0

    def test_returned_data_is_a_copy(self):
        store = PendingFlowStore()
        key = store.put({'otp': '123456'})
        store.get(key)['otp'] = 'changed'

        assert store.get(key) == {'otp': '123456'}


class TestViewState:

    def test_paginate_last_partial_page(self):
        page = paginate(list(range(25)), page=2, page_size=12)

        assert page['items'] == [24]
        assert page['total_pages'] == 3

    def test_truncate(self):
        assert truncate('abcdef', 3) == 'abc...'
        assert truncate('abc', 3) == 'abc'
        assert truncate(None, 3) == ''

    @pytest.mark.parametrize('profile, expected', [
        ('https://linkedin.com/in/ravi', 'https://linkedin.com/in/ravi'),
        ('www.linkedin.com/in/ravi', 'https://www.linkedin.com/in/ravi'),
        ('linkedin.com/in/ravi', 'https://linkedin.com/in/ravi'),
        ('ravi', 'https://www.linkedin.com/in/ravi'),
        ('in.linkedin.com/in/ravi', 'https://in.linkedin.com/in/ravi'),
        ('  ', ''),
    ])
    def test_linkedin_url(self, profile, expected):
        assert linkedin_url(profile) == expected

    def test_int_arg_tolerates_garbage(self):
        assert int_arg({'page': 'x'}, 'page', 0) == 0
        assert int_arg({'page': '-3'}, 'page', 0) == 0
        assert int_arg({'size': '500'}, 'size', 12, minimum=1, maximum=100) == 100


class TestEnrollmentHelpers:

    def test_calculate_progress(self):
        assert calculate_progress(1, 3) == 33
        assert calculate_progress(2, 3) == 67
        assert calculate_progress(1, 8) == 13
        assert calculate_progress(5, 8) == 63
        assert calculate_progress(0, 0) == 0

    def test_status(self):
        assert enrollment_status(None) == 'Not Enrolled'
        assert enrollment_status(Enrollment(is_completed=True)) == 'Completed'
        assert enrollment_status(Enrollment(progress_percentage=10)) == 'In Progress'
        assert enrollment_status(Enrollment()) == 'Not Started'

    def test_progress_color(self):
        assert [progress_color(p) for p in (100, 50, 1, 0)] == ['primary', 'accent', 'warn', 'basic']

    def test_time_since(self):
        now = datetime(2024, 6, 30, 12, 0)
        assert time_since(now - timedelta(hours=2), now) == 'Today'
        assert time_since(now - timedelta(days=1), now) == 'Yesterday'
        assert time_since(now - timedelta(days=3), now) == '3 days ago'
        assert time_since(now - timedelta(days=8), now) == '1 week ago'
        assert time_since(now - timedelta(days=21), now) == '3 weeks ago'
        assert time_since(now - timedelta(days=65), now) == '2 months ago'


class TestVideoHelpers:

    def test_youtube_ids(self):
        assert youtube_video_id('https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=1') == 'dQw4w9WgXcQ'
        assert youtube_video_id('https://youtu.be/dQw4w9WgXcQ') == 'dQw4w9WgXcQ'
        assert youtube_video_id('https://www.youtube.com/embed/dQw4w9WgXcQ') == 'dQw4w9WgXcQ'
        assert youtube_video_id('https://vimeo.com/1') is None
        assert youtube_embed_url('') is None

    def test_valid_youtube_url(self):
        assert is_valid_youtube_url('https://youtu.be/dQw4w9WgXcQ')
        assert not is_valid_youtube_url('https://www.youtube.com/embed/dQw4w9WgXcQ')
        assert not is_valid_youtube_url(None)

    def test_order_unpositioned_last_by_creation(self):
        videos = [
            Video(id='late', title='t', course_id='c', video_url='u', created_at=datetime(2024, 2, 1)),
            Video(id='early', title='t', course_id='c', video_url='u', created_at=datetime(2024, 1, 1)),
            Video(id='second', title='t', course_id='c', video_url='u', position=2),
            Video(id='first', title='t', course_id='c', video_url='u', position=1),
        ]

        assert [v.id for v in order_videos(videos)] == ['first', 'second', 'early', 'late']
