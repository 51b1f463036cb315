import pytest

from study_portal.components.video_management.service import move_video
from study_portal.models import Video

from conftest import notification_messages

VIDEOS = [
    {'id': f'v{n}', 'title': f'Lesson {n}', 'courseId': 'c1',
     'videoUrl': f'https://www.youtube.com/watch?v=VIDEO{n:06d}', 'position': n}
    for n in range(1, 4)
]

COURSE_FORM = {
    'title': 'Flask Basics',
    'description': 'Build web apps with Flask',
    'categoryId': 'cat-web',
    'difficulty': 'BEGINNER',
    'thumbnailUrl': '   ',
    'trainerName': 'Ravi',
    'trainerBio': 'Ten years of Python',
    'experience': '10 years',
    'linkedinProfile': '',
    'fieldOfWork': 'Backend',
    'language': 'ENGLISH',
}


@pytest.fixture
def admin(login):
    return login(roles=['USER', 'ADMIN'])


class TestMoveVideo:

    def videos(self):
        return [Video.model_validate(v) for v in VIDEOS]

    def test_moves_and_renumbers(self):
        reordered, moved = move_video(self.videos(), 0, 2)

        assert [v.id for v in reordered] == ['v2', 'v3', 'v1']
        assert [v.position for v in reordered] == [1, 2, 3]
        assert moved.id == 'v1'
        assert moved.position == 3

    def test_same_slot_is_noop(self):
        reordered, moved = move_video(self.videos(), 1, 1)

        assert moved is None
        assert [v.id for v in reordered] == ['v1', 'v2', 'v3']

    def test_single_video_is_noop(self):
        _, moved = move_video(self.videos()[:1], 0, 3)
        assert moved is None

    def test_out_of_range_index_clamped(self):
        reordered, moved = move_video(self.videos(), 2, 10)
        assert moved is None
        assert [v.id for v in reordered] == ['v1', 'v2', 'v3']


class TestVideoManagement:

    def test_list_defaults_new_position(self, admin, backend):
        backend.ok('GET', '/courses/c1', {'id': 'c1', 'title': 'Flask Basics'})
        backend.ok('GET', '/videos/course/c1', VIDEOS)

        body = admin.get('/api/admin/courses/c1/videos').get_json()

        assert [v['id'] for v in body['videos']] == ['v1', 'v2', 'v3']
        assert body['newVideo'] == {'position': 4}

    def test_reorder_persists_only_moved_video(self, admin, backend):
        backend.ok('GET', '/videos/course/c1', VIDEOS)
        backend.ok('PATCH', '/videos/v1/position')

        response = admin.post('/api/admin/courses/c1/videos/reorder', json={'previousIndex': 0, 'currentIndex': 2})

        body = response.get_json()
        assert [v['id'] for v in body['videos']] == ['v2', 'v3', 'v1']
        assert body['changed'] is True
        patches = [c for c in backend.calls if c.method == 'PATCH']
        assert len(patches) == 1
        assert patches[0].path == '/videos/v1/position'
        assert patches[0].params == {'position': 3}
        assert notification_messages(response, 'success') == ['Order updated']

    def test_reorder_same_index_sends_nothing(self, admin, backend):
        backend.ok('GET', '/videos/course/c1', VIDEOS)

        body = admin.post('/api/admin/courses/c1/videos/reorder',
                          json={'previousIndex': 1, 'currentIndex': 1}).get_json()

        assert body['changed'] is False
        assert not [c for c in backend.calls if c.method == 'PATCH']

    def test_reorder_failure(self, admin, backend):
        backend.ok('GET', '/videos/course/c1', VIDEOS)
        backend.fail('PATCH', '/videos/v3/position', status=500)

        response = admin.post('/api/admin/courses/c1/videos/reorder', json={'previousIndex': 2, 'currentIndex': 0})

        assert response.status_code == 502
        assert notification_messages(response, 'error') == ['Failed to update order']
        assert [v['id'] for v in response.get_json()['videos']] == ['v1', 'v2', 'v3']

    def test_create_video_pairs_code_files(self, admin, backend):
        backend.ok('POST', '/videos', {'id': 'v9'})
        backend.ok('GET', '/courses/c1', {'id': 'c1', 'title': 'Flask Basics'})
        backend.ok('GET', '/videos/course/c1', VIDEOS)

        response = admin.post('/api/admin/courses/c1/videos', json={
            'title': 'Blueprints',
            'videoUrl': 'https://youtu.be/ABCDEFGHIJK',
            'position': 4,
            'driveNotesFileLink': '',
            'codeFileLinks': ['https://drive/a', '  ', 'https://drive/c'],
            'codeFileNames': ['routes.py', 'unused.py'],
        })

        assert response.status_code == 200
        assert notification_messages(response, 'success') == ['Video created successfully']
        sent = backend.called('POST', '/videos')[0].json
        assert sent == {
            'title': 'Blueprints',
            'description': '',
            'courseId': 'c1',
            'videoUrl': 'https://youtu.be/ABCDEFGHIJK',
            'position': 4,
            'driveCodeFileLinks': ['https://drive/a', 'https://drive/c'],
            'driveCodeFileNames': ['routes.py', 'Code File 3'],
        }

    def test_video_url_must_be_youtube(self, admin, backend):
        response = admin.post('/api/admin/courses/c1/videos', json={
            'title': 'Blueprints',
            'videoUrl': 'https://vimeo.com/12345',
        })

        assert response.status_code == 400
        assert 'videoUrl' in response.get_json()['errors']
        assert backend.calls == []

    def test_edit_form_uses_list_slot_for_unpositioned_video(self, admin, backend):
        videos = [dict(v) for v in VIDEOS]
        videos.append({'id': 'v4', 'title': 'Extra', 'courseId': 'c1',
                       'videoUrl': 'https://youtu.be/ABCDEFGHIJK'})
        backend.ok('GET', '/videos/course/c1', videos)

        body = admin.get('/api/admin/courses/c1/videos/v4/edit').get_json()

        assert body['values']['position'] == 4
        assert body['values']['driveNotesFileLink'] == ''

    def test_delete_failure(self, admin, backend):
        backend.refuse('DELETE', '/videos/v1')

        response = admin.delete('/api/admin/courses/c1/videos/v1')

        assert response.status_code == 400
        assert notification_messages(response, 'error') == ['Failed to delete video']


class TestCourseManagement:

    def test_create_omits_blank_optional_fields(self, admin, backend):
        backend.ok('POST', '/courses', {'id': 'c1'})

        response = admin.post('/api/admin/courses', json=COURSE_FORM)

        assert response.get_json()['redirect'] == '/admin'
        assert notification_messages(response, 'success') == ['Course created successfully!']
        sent = backend.called('POST', '/courses')[0].json
        assert 'thumbnailUrl' not in sent
        assert 'linkedinProfile' not in sent
        assert sent['trainerName'] == 'Ravi'
        assert sent['categoryId'] == 'cat-web'

    def test_form_rules(self, admin, backend):
        response = admin.post('/api/admin/courses', json=dict(COURSE_FORM, title='Py', description='short'))

        assert response.status_code == 400
        assert {'title', 'description'} <= set(response.get_json()['errors'])

    def test_update_error_shows_backend_message(self, admin, backend):
        backend.fail('PUT', '/courses/c1', status=400, message='Category does not exist')

        response = admin.put('/api/admin/courses/c1', json=COURSE_FORM)

        assert response.status_code == 400
        assert notification_messages(response, 'error') == ['Category does not exist']

    def test_edit_form_prefill(self, admin, backend):
        backend.ok('GET', '/courses/c1', dict(COURSE_FORM, id='c1', thumbnailUrl=None))
        backend.ok('GET', '/categories', [{'id': 'cat-web', 'name': 'Web Development'}])

        body = admin.get('/api/admin/courses/c1/edit').get_json()

        assert body['values']['title'] == 'Flask Basics'
        assert body['values']['thumbnailUrl'] == ''
        assert body['options']['languages'] == ['ENGLISH', 'HINDI', 'TELUGU']
        assert body['options']['categories'][0]['name'] == 'Web Development'


class TestAdminDashboard:

    def test_stats_and_courses(self, admin, backend):
        backend.ok('GET', '/categories', [{'id': 'cat-web', 'name': 'Web Development'}])
        backend.ok('GET', '/courses', [{'id': 'c1', 'title': 'Flask Basics', 'categoryId': 'cat-web'}])
        backend.ok('GET', '/admin/stats', {
            'totalUsers': 40,
            'totalCourses': 1,
            'totalEnrollments': 75,
            'totalVideos': 12,
            'newUsersThisMonth': 5,
            'newEnrollmentsThisMonth': 9,
            'courseStats': [{'courseId': 'c1', 'courseTitle': 'Flask Basics', 'totalEnrollments': 75}],
        })

        body = admin.get('/api/admin/dashboard').get_json()

        assert body['stats']['totalStudents'] == 40
        assert body['stats']['courseStats'][0]['courseTitle'] == 'Flask Basics'
        assert body['courses'][0]['categoryName'] == 'Web Development'

    def test_stats_failure_falls_back_to_course_count(self, admin, backend):
        backend.ok('GET', '/categories', [])
        backend.ok('GET', '/courses', [{'id': 'c1', 'title': 'Flask Basics'}])
        backend.fail('GET', '/admin/stats', status=500)

        body = admin.get('/api/admin/dashboard').get_json()

        assert body['stats']['totalCourses'] == 1
        assert body['courses'][0]['categoryName'] == 'Unknown'

    def test_delete_course(self, admin, backend):
        backend.ok('DELETE', '/courses/c1')

        response = admin.delete('/api/admin/courses/c1')

        assert notification_messages(response, 'success') == ['Course deleted successfully']


class TestCategoryManagement:

    def test_lists_inactive_categories(self, admin, backend):
        backend.ok('GET', '/categories/admin/all', [
            {'id': 'a', 'name': 'Active'},
            {'id': 'b', 'name': 'Retired', 'active': False},
        ])

        body = admin.get('/api/admin/categories').get_json()

        assert [c['active'] for c in body['categories']] == [True, False]

    def test_create_trims_name(self, admin, backend):
        backend.ok('POST', '/categories', {'id': 'c'})
        backend.ok('GET', '/categories/admin/all', [])

        response = admin.post('/api/admin/categories', json={'name': '  Cloud  ', 'description': '  '})

        assert backend.called('POST', '/categories')[0].json == {'name': 'Cloud'}
        assert notification_messages(response, 'success') == ['Category created successfully']

    def test_name_too_short_after_trim(self, admin, backend):
        response = admin.post('/api/admin/categories', json={'name': ' a '})

        assert response.status_code == 400
        assert 'name' in response.get_json()['errors']

    def test_delete_in_use_shows_backend_message(self, admin, backend):
        backend.fail('DELETE', '/categories/a', status=400,
                     message='Cannot delete category that is used by courses')

        response = admin.delete('/api/admin/categories/a')

        assert response.status_code == 400
        assert notification_messages(response, 'error') == ['Cannot delete category that is used by courses']

    def test_permanent_delete(self, admin, backend):
        backend.ok('DELETE', '/categories/a/permanent')
        backend.ok('GET', '/categories/admin/all', [])

        response = admin.delete('/api/admin/categories/a/permanent')

        assert notification_messages(response, 'success') == ['Category deleted successfully']
        assert backend.called('DELETE', '/categories/a/permanent')
