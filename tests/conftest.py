"""Shared fixtures: a fresh app with an in-memory database per test."""
import itertools
import pytest
from adoption_app import create_app
from adoption_app.models import Role
from adoption_app.services import user_service, pet_service


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.services['store']


@pytest.fixture
def workflow(app):
    return app.services['adoptions']


@pytest.fixture
def ledger(app):
    return app.services['ledger']


@pytest.fixture
def queries(app):
    return app.services['queries']


@pytest.fixture
def make_user(store):
    counter = itertools.count(1)

    def _make(role=Role.OWNER, contact=None, password='secret1'):
        n = next(counter)
        return user_service.create_user(
            store, f'User {n}', contact or f'user{n}@example.com', role, password
        )
    return _make


@pytest.fixture
def make_pet(store, make_user):
    def _make(owner=None, name='Rex', species='Dog', breed='Mixed', age=2):
        owner = owner or make_user()
        return pet_service.create_pet(store, owner.id, name, species, breed, age, 'Friendly')
    return _make
