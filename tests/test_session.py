from conftest import make_token, user_payload


def test_dashboard_requires_sign_in(client):
    response = client.get('/api/dashboard')

    assert response.status_code == 401
    assert response.get_json()['redirect'] == '/signin'


def test_admin_pages_refuse_plain_users(login):
    client = login(roles=['USER'])
    response = client.get('/api/admin/dashboard')

    assert response.status_code == 403
    assert response.get_json()['redirect'] == '/dashboard'


def test_admin_pages_require_sign_in(client):
    response = client.get('/api/admin/categories')

    assert response.status_code == 401
    assert response.get_json()['redirect'] == '/signin'


def test_expired_token_logs_out(client, login):
    login(token=make_token(exp_offset=-60))

    response = client.get('/api/profile')

    assert response.status_code == 401
    with client.session_transaction() as sess:
        assert 'token' not in sess
        assert 'user' not in sess


def test_malformed_token_logs_out(client, login):
    login(token='not-a-jwt')

    assert client.get('/api/auth/session').get_json()['authenticated'] is False
    with client.session_transaction() as sess:
        assert 'token' not in sess


def test_non_numeric_expiry_logs_out(client, login):
    login(token=make_token(exp='tomorrow'))

    response = client.get('/api/profile')

    assert response.status_code == 401
    with client.session_transaction() as sess:
        assert 'token' not in sess


def test_session_reports_admin(client, login):
    login(roles=['USER', 'ADMIN'])

    body = client.get('/api/auth/session').get_json()

    assert body['authenticated'] is True
    assert body['admin'] is True
    assert body['user']['email'] == user_payload()['email']


def test_logout_clears_session(client, login):
    login()

    response = client.post('/api/auth/logout')

    assert response.get_json()['redirect'] == '/signin'
    assert client.get('/api/auth/session').get_json()['authenticated'] is False
