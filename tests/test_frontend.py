import pytest


@pytest.fixture
def assets(app, tmp_path):
    root = tmp_path / 'frontend'
    for folder, page in (('login_folder', 'login.html'),
                         ('home_folder', 'page1.html'),
                         ('faculty_folder', 'frontend.html')):
        (root / folder).mkdir(parents=True)
        (root / folder / page).write_text(f'<h1>{page}</h1>')
    (root / 'faculty_folder' / 'app.js').write_text('console.log(1)')
    return root


def test_root_serves_login_page(client, assets):
    rv = client.get('/')
    assert rv.status_code == 200
    assert b'login.html' in rv.data


@pytest.mark.parametrize('path,page', [
    ('/login', b'login.html'),
    ('/home/', b'page1.html'),
    ('/faculty', b'frontend.html'),
])
def test_section_entry_pages(client, assets, path, page):
    rv = client.get(path)
    assert rv.status_code == 200
    assert page in rv.data


def test_section_assets(client, assets):
    rv = client.get('/faculty/app.js')
    assert rv.status_code == 200
    assert rv.data == b'console.log(1)'
    assert client.get('/faculty/missing.js').status_code == 404


def test_login_post_still_routes_to_auth(client, assets):
    rv = client.post('/login', json={'username': 'x', 'password': 'y'})
    assert rv.status_code == 400
    assert rv.get_json() == {'message': 'Invalid username or password'}


def test_uploaded_photo_is_served(client, faculty_form):
    client.post('/api/faculty', data=faculty_form(photo=(b'pixels', 'p.jpg')),
                content_type='multipart/form-data')
    photo = client.get('/api/faculty').get_json()[0]['photo']
    rv = client.get(photo)
    assert rv.status_code == 200
    assert rv.data == b'pixels'
    assert client.get('/faculty_uploadss/nothing.jpg').status_code == 404


def test_cors_allows_frontend_origin(client):
    rv = client.get('/api/faculty', headers={'Origin': 'http://localhost:3000'})
    assert rv.headers.get('Access-Control-Allow-Origin') == 'http://localhost:3000'
    assert rv.headers.get('Access-Control-Allow-Credentials') == 'true'
