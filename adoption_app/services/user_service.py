# User service module for business logic
import logging
from dataclasses import replace
from adoption_app.errors import ContactTaken, Unauthenticated
from adoption_app.models import User, Role
from adoption_app.models.user_model import NAME_LENGTH, CONTACT_LENGTH
from adoption_app.utils.auth import hash_password, check_password
from adoption_app.utils.validators import require_text, parse_choice

logger = logging.getLogger(__name__)


def _normalize_contact(contact):
    return require_text(contact.strip() if isinstance(contact, str) else contact, 'contact', CONTACT_LENGTH)


def _check_contact_free(store, contact, user_id=None):
    # contact is the login key, so two users may never share one
    for existing in store.users.filter(contact=contact):
        if existing.id != user_id:
            raise ContactTaken(contact)


def create_user(store, name, contact, role, password):
    name = require_text(name, 'name', NAME_LENGTH)
    contact = _normalize_contact(contact)
    role = parse_choice(Role, role, 'role')
    _check_contact_free(store, contact)
    user = User(name=name, contact=contact, role=role, password=hash_password(password))
    store.create(store.users, user)
    logger.info(f"Created user {user.id} with role {role.value}")
    return user


def get_user(store, user_id):
    return store.users.get(user_id)


def update_user(store, user_id, patch):
    user = store.users.get(user_id)
    checked = {}
    if patch.name is not None:
        checked['name'] = require_text(patch.name, 'name', NAME_LENGTH)
    if patch.contact is not None:
        checked['contact'] = _normalize_contact(patch.contact)
        _check_contact_free(store, checked['contact'], user.id)
    if patch.role is not None:
        checked['role'] = parse_choice(Role, patch.role, 'role')
    return store.users.apply(user.id, replace(patch, **checked))


def delete_user(store, user_id):
    # Pets, requests and feedback keep their weak references to the user
    store.users.remove(user_id)
    logger.info(f"Deleted user {user_id}")


def authenticate(store, contact, password):
    user = None
    if isinstance(contact, str) and contact.strip():
        matches = store.users.filter(contact=contact.strip())
        user = matches[0] if matches else None
    if user is None or not check_password(user.password, password):
        logger.warning("Failed login attempt")
        raise Unauthenticated('Invalid contact or password.')
    return user
