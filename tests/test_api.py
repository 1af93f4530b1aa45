"""End-to-end checks through the Flask test client."""
import pytest
from adoption_app.models import Role
from adoption_app.services import user_service


def _register(client, contact, role='Owner', password='secret1', name='Tester'):
    return client.post('/auth/register', json={
        'name': name, 'contact': contact, 'password': password, 'role': role
    })


def _auth(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def owner_token(client):
    response = _register(client, 'owner@example.com', role='Owner')
    assert response.status_code == 201
    return response.get_json()['access_token']


@pytest.fixture
def adopter_token(client):
    response = _register(client, 'adopter@example.com', role='Adopter')
    assert response.status_code == 201
    return response.get_json()['access_token']


@pytest.fixture
def admin_token(client, store):
    user_service.create_user(store, 'Admin', 'admin@example.com', Role.ADMIN, 'admin123')
    response = client.post('/auth/login', json={'contact': 'admin@example.com', 'password': 'admin123'})
    assert response.status_code == 200
    return response.get_json()['access_token']


def _create_pet(client, token, **overrides):
    body = {'name': 'Rex', 'species': 'Dog', 'breed': 'Beagle', 'age': 3}
    body.update(overrides)
    return client.post('/pets', json=body, headers=_auth(token))


# ─── auth ────────────────────────────────────────────────────────

def test_register_login_and_verify(client):
    registered = _register(client, 'ann@example.com', role='Shelter', name='Ann')
    assert registered.status_code == 201
    user = registered.get_json()['user']
    assert user['role'] == 'Shelter'
    assert 'password' not in user

    login = client.post('/auth/login', json={'contact': 'ann@example.com', 'password': 'secret1'})
    assert login.status_code == 200
    token = login.get_json()['access_token']

    verify = client.get('/auth/verify', headers=_auth(token))
    assert verify.status_code == 200
    assert verify.get_json()['user']['id'] == user['id']


def test_register_defaults_to_adopter(client):
    response = client.post('/auth/register', json={
        'name': 'Bo', 'contact': 'bo@example.com', 'password': 'secret1'
    })
    assert response.get_json()['user']['role'] == 'Adopter'


def test_admin_role_cannot_be_self_assigned(client):
    response = _register(client, 'sneaky@example.com', role='Admin')
    assert response.status_code == 403
    assert response.get_json()['error'] == 'FORBIDDEN'


def test_duplicate_contact_is_a_conflict(client):
    _register(client, 'dup@example.com')
    response = _register(client, 'dup@example.com')
    assert response.status_code == 409
    assert response.get_json()['error'] == 'CONTACT_TAKEN'


def test_bad_login_is_unauthenticated(client):
    _register(client, 'ann@example.com')
    response = client.post('/auth/login', json={'contact': 'ann@example.com', 'password': 'nope12345'})
    assert response.status_code == 401
    assert response.get_json()['error'] == 'UNAUTHENTICATED'


def test_missing_or_garbage_token_is_unauthenticated(client):
    assert client.get('/auth/verify').status_code == 401
    response = client.get('/auth/verify', headers=_auth('not-a-jwt'))
    assert response.status_code == 401


def test_roles_listing(client):
    assert client.get('/auth/roles').get_json() == {'roles': ['Owner', 'Shelter', 'Adopter', 'Admin']}


# ─── pets ────────────────────────────────────────────────────────

def test_owner_creates_a_pet_owned_by_themselves(client, owner_token):
    response = _create_pet(client, owner_token)
    assert response.status_code == 201
    pet = response.get_json()
    assert pet['status'] == 'Available'
    assert pet['description'] == ''

    me = client.get('/auth/verify', headers=_auth(owner_token)).get_json()['user']
    assert pet['ownerId'] == me['id']
    assert client.get(f"/pets/{pet['id']}").get_json()['name'] == 'Rex'


def test_adopters_cannot_create_pets(client, adopter_token):
    response = _create_pet(client, adopter_token)
    assert response.status_code == 403


def test_pet_validation_errors(client, owner_token):
    negative = _create_pet(client, owner_token, age=-2)
    assert negative.status_code == 400
    assert negative.get_json()['error'] == 'OUT_OF_RANGE'
    assert negative.get_json()['field'] == 'age'

    dangling = _create_pet(client, owner_token, ownerId='ghost')
    assert dangling.status_code == 400
    assert dangling.get_json()['error'] == 'INVALID_REFERENCE'
    assert dangling.get_json()['field'] == 'ownerId'

    missing = _create_pet(client, owner_token, name='')
    assert missing.status_code == 400
    assert missing.get_json()['error'] == 'VALIDATION_ERROR'

    listing = client.get('/pets').get_json()
    assert listing['total'] == 0


def test_unknown_pet_is_not_found(client):
    response = client.get('/pets/ghost')
    assert response.status_code == 404
    assert response.get_json()['error'] == 'NOT_FOUND'


def test_pet_update_ignores_status(client, owner_token):
    pet = _create_pet(client, owner_token).get_json()
    response = client.put(f"/pets/{pet['id']}", json={'age': 4, 'status': 'Adopted'}, headers=_auth(owner_token))
    assert response.status_code == 200
    assert response.get_json()['age'] == 4
    assert response.get_json()['status'] == 'Available'

    empty = client.put(f"/pets/{pet['id']}", json={'status': 'Adopted'}, headers=_auth(owner_token))
    assert empty.status_code == 400


def test_pet_listing_shape_and_filters(client, owner_token):
    for name, species in [('Rex', 'Dog'), ('Tom', 'Cat'), ('Max', 'Dog')]:
        _create_pet(client, owner_token, name=name, species=species)

    body = client.get('/pets?species=Dog&limit=1&page=2').get_json()
    assert set(body) == {'items', 'page', 'limit', 'total'}
    assert body['total'] == 2
    assert body['page'] == 2
    assert [p['name'] for p in body['items']] == ['Max']

    assert client.get('/pets?limit=1000').status_code == 400
    assert client.get('/pets?status=Sleeping').status_code == 400


# ─── adoption requests ───────────────────────────────────────────

def test_adoption_end_to_end(client, owner_token, adopter_token):
    pet = _create_pet(client, owner_token).get_json()

    submitted = client.post('/adoption-requests', json={'petId': pet['id']}, headers=_auth(adopter_token))
    assert submitted.status_code == 201
    request = submitted.get_json()
    assert request['status'] == 'Pending'
    assert request['approvedAt'] is None

    # adopters cannot decide requests
    denied = client.put(f"/adoption-requests/{request['id']}", json={'status': 'Approved'},
                        headers=_auth(adopter_token))
    assert denied.status_code == 403

    approved = client.put(f"/adoption-requests/{request['id']}", json={'status': 'Approved'},
                          headers=_auth(owner_token))
    assert approved.status_code == 200
    assert approved.get_json()['status'] == 'Approved'
    assert approved.get_json()['approvedAt'] is not None
    assert client.get(f"/pets/{pet['id']}").get_json()['status'] == 'Adopted'

    again = client.post('/adoption-requests', json={'petId': pet['id']}, headers=_auth(adopter_token))
    assert again.status_code == 409
    assert again.get_json()['error'] == 'PET_UNAVAILABLE'

    reopen = client.put(f"/adoption-requests/{request['id']}", json={'status': 'Rejected'},
                        headers=_auth(owner_token))
    assert reopen.status_code == 409
    assert reopen.get_json()['error'] == 'REQUEST_CLOSED'


def test_adoption_request_for_unknown_pet(client, adopter_token):
    response = client.post('/adoption-requests', json={'petId': 'ghost'}, headers=_auth(adopter_token))
    assert response.status_code == 400
    assert response.get_json()['field'] == 'petId'


def test_moving_a_request_back_to_pending_is_invalid(client, owner_token, adopter_token):
    pet = _create_pet(client, owner_token).get_json()
    request = client.post('/adoption-requests', json={'petId': pet['id']}, headers=_auth(adopter_token)).get_json()
    response = client.put(f"/adoption-requests/{request['id']}", json={'status': 'Pending'},
                          headers=_auth(owner_token))
    assert response.status_code == 400
    assert response.get_json()['error'] == 'INVALID_STATUS'


# ─── ledger ──────────────────────────────────────────────────────

def test_feedback_rating_out_of_range(client, adopter_token):
    response = client.post('/feedbacks', json={'feedback': 'Great', 'rating': 6}, headers=_auth(adopter_token))
    assert response.status_code == 400
    assert response.get_json()['error'] == 'OUT_OF_RANGE'

    ok = client.post('/feedbacks', json={'feedback': 'Great', 'rating': 5}, headers=_auth(adopter_token))
    assert ok.status_code == 201
    assert client.get('/feedbacks').get_json()['total'] == 1


def test_donations_require_login_and_a_positive_amount(client, adopter_token, admin_token):
    assert client.post('/donations', json={'amount': 10}).status_code == 401

    bad = client.post('/donations', json={'amount': 0}, headers=_auth(adopter_token))
    assert bad.status_code == 400
    assert bad.get_json()['error'] == 'OUT_OF_RANGE'

    donation = client.post('/donations', json={'amount': 12.5}, headers=_auth(adopter_token)).get_json()
    assert donation['amount'] == 12.5

    forbidden = client.put(f"/donations/{donation['id']}", json={'amount': 20}, headers=_auth(adopter_token))
    assert forbidden.status_code == 403
    fixed = client.put(f"/donations/{donation['id']}", json={'amount': 20}, headers=_auth(admin_token))
    assert fixed.get_json()['amount'] == 20


# ─── users ───────────────────────────────────────────────────────

def test_only_admins_change_roles(client, adopter_token, admin_token):
    me = client.get('/auth/verify', headers=_auth(adopter_token)).get_json()['user']

    self_promote = client.put(f"/users/{me['id']}", json={'role': 'Shelter'}, headers=_auth(adopter_token))
    assert self_promote.status_code == 403

    rename = client.put(f"/users/{me['id']}", json={'name': 'New Name'}, headers=_auth(adopter_token))
    assert rename.get_json()['name'] == 'New Name'

    promoted = client.put(f"/users/{me['id']}", json={'role': 'Shelter'}, headers=_auth(admin_token))
    assert promoted.get_json()['role'] == 'Shelter'


def test_deleted_user_token_stops_working(client, adopter_token, admin_token):
    me = client.get('/auth/verify', headers=_auth(adopter_token)).get_json()['user']
    assert client.delete(f"/users/{me['id']}", headers=_auth(admin_token)).status_code == 200
    assert client.get('/auth/verify', headers=_auth(adopter_token)).status_code == 401


# ─── limits and formats ──────────────────────────────────────────

def test_enormous_page_number_returns_an_empty_page(client, owner_token):
    _create_pet(client, owner_token)
    response = client.get('/pets?page=99999999999999999999&limit=10')
    assert response.status_code == 200
    body = response.get_json()
    assert body['items'] == []
    assert body['total'] == 1


def test_oversized_values_are_rejected_before_storage(client, owner_token):
    huge_age = _create_pet(client, owner_token, age=10 ** 20)
    assert huge_age.status_code == 400
    assert huge_age.get_json()['error'] == 'OUT_OF_RANGE'
    assert huge_age.get_json()['field'] == 'age'

    long_name = _create_pet(client, owner_token, name='R' * 101)
    assert long_name.status_code == 400
    assert long_name.get_json()['error'] == 'VALIDATION_ERROR'
    assert long_name.get_json()['field'] == 'name'

    assert client.get('/pets').get_json()['total'] == 0


def test_timestamps_carry_a_utc_offset(client, owner_token, adopter_token):
    pet = _create_pet(client, owner_token).get_json()
    assert pet['createdAt'].endswith('+00:00')

    request = client.post('/adoption-requests', json={'petId': pet['id']}, headers=_auth(adopter_token)).get_json()
    approved = client.put(f"/adoption-requests/{request['id']}", json={'status': 'Approved'},
                          headers=_auth(owner_token)).get_json()
    assert approved['requestedAt'].endswith('+00:00')
    assert approved['approvedAt'].endswith('+00:00')

    event = client.post('/pet-care-events', json={
        'title': 'Walk', 'description': 'Group walk', 'dateTime': '2026-05-01T12:00:00+02:00', 'location': 'Park'
    }, headers=_auth(owner_token)).get_json()
    assert event['dateTime'] == '2026-05-01T10:00:00+00:00'


def test_404_help_is_configured_with_the_restx_key(app):
    assert app.config['RESTX_ERROR_404_HELP'] is False
