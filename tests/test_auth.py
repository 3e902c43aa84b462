from clubsite.models import Event
from clubsite.services import events

from conftest import login


def _make_event():
    return events.add(title='Hack Night', date='2030-01-01', time='6 PM',
                      location='Lab 1', seats=20, description='Bring a laptop')


def test_unauthenticated_admin_routes_redirect_to_login(client):
    for path in ('/admin/', '/admin/dashboard', '/admin/events/add', '/admin/team/add',
                 '/admin/partners/add', '/admin/questions/add', '/admin/events/1/edit'):
        r = client.get(path)
        assert r.status_code in (301, 302), path
        assert '/admin/login' in r.headers['Location']


def test_unauthenticated_delete_changes_nothing(client):
    event = _make_event()
    r = client.post(f'/admin/events/{event.id}/delete')
    assert r.status_code in (301, 302)
    assert '/admin/login' in r.headers['Location']
    assert Event.query.count() == 1


def test_unauthenticated_add_and_status_change_nothing(client):
    r = client.post('/admin/events/add', data={'title': 'x', 'date': '2030-01-01', 'time': '1',
                                                'location': 'y', 'seats': '1', 'description': 'z'})
    assert '/admin/login' in r.headers['Location']
    assert Event.query.count() == 0

    r = client.post('/admin/members/1/status', data={'status': 'approved'})
    assert '/admin/login' in r.headers['Location']


def test_login_page_renders(client):
    r = client.get('/admin/login')
    assert r.status_code == 200
    assert 'Administrator Login' in r.get_data(as_text=True)


def test_login_sets_session_before_redirect(client):
    r = login(client)
    assert r.status_code in (301, 302)
    assert r.headers['Location'].endswith('/admin/dashboard')

    with client.session_transaction() as sess:
        assert sess.get('is_admin') is True

    r = client.get('/admin/dashboard')
    assert r.status_code == 200
    assert 'Admin Dashboard' in r.get_data(as_text=True)


def test_login_trims_whitespace(client):
    r = login(client, username='  admin ', password=' admin123  ')
    assert r.status_code in (301, 302)
    assert client.get('/admin/').status_code == 200


def test_wrong_credentials_give_generic_error(client):
    bad_user = login(client, username='root', password='admin123')
    bad_pass = login(client, username='admin', password='wrong')
    for r in (bad_user, bad_pass):
        assert r.status_code == 401
        body = r.get_data(as_text=True)
        assert 'Invalid administrator credentials.' in body
        assert 'username' not in body.split('alert-danger')[1].split('</div>')[0].lower()

    with client.session_transaction() as sess:
        assert not sess.get('is_admin')
    assert client.get('/admin/').status_code in (301, 302)


def test_credentials_are_case_sensitive(client):
    r = login(client, username='Admin', password='admin123')
    assert r.status_code == 401
    r = login(client, username='admin', password='ADMIN123')
    assert r.status_code == 401
    assert client.get('/admin/').status_code in (301, 302)


def test_empty_credentials_rejected(client):
    r = login(client, username='   ', password='')
    assert r.status_code == 400
    assert 'Please enter both username and password.' in r.get_data(as_text=True)


def test_credentials_come_from_config(app, client):
    app.config['ADMIN_USERNAME'] = 'president'
    app.config['ADMIN_PASSWORD'] = 's3cret'
    assert login(client).status_code == 401
    assert login(client, 'president', 's3cret').status_code in (301, 302)


def test_login_page_redirects_when_already_logged_in(admin_client):
    r = admin_client.get('/admin/login')
    assert r.status_code in (301, 302)
    assert r.headers['Location'].endswith('/admin/dashboard')


def test_logout_ends_session(admin_client):
    r = admin_client.post('/admin/logout')
    assert r.status_code in (301, 302)
    assert '/admin/login' in r.headers['Location']

    r = admin_client.get('/admin/')
    assert r.status_code in (301, 302)

    r = admin_client.get('/admin/login?success=logged-out')
    assert 'You have been logged out.' in r.get_data(as_text=True)


def test_logout_invalidates_replayed_cookie(client):
    login(client)
    stale = client.get_cookie('session').value

    client.post('/admin/logout')
    client.set_cookie('session', stale)

    r = client.get('/admin/')
    assert r.status_code in (301, 302)
    assert '/admin/login' in r.headers['Location']


def test_login_issues_new_session_id(client):
    with client.session_transaction() as sess:
        sess['visited'] = True
    before = client.get_cookie('session').value

    login(client)
    after = client.get_cookie('session').value
    assert after != before
