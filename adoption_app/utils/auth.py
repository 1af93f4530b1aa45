"""Identity for the API: password hashing, token issuance and caller lookup."""
import logging
import re
from dataclasses import dataclass
from functools import wraps
from flask import current_app, g
from flask_jwt_extended import create_access_token, verify_jwt_in_request, get_jwt_identity
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from adoption_app import bcrypt
from adoption_app.errors import Unauthenticated, Forbidden, ValidationError
from adoption_app.models.user_model import Role

logger = logging.getLogger(__name__)

PASSWORD_REGEX = re.compile(r'^(?=.*[A-Za-z])(?=.*\d).{6,}$')


@dataclass(frozen=True)
class Caller:
    id: str
    role: Role

    @property
    def is_admin(self):
        return self.role is Role.ADMIN


def hash_password(password):
    if not isinstance(password, str) or not PASSWORD_REGEX.match(password):
        raise ValidationError(
            'password',
            'Password must be at least 6 characters and contain at least one letter and one number'
        )
    return bcrypt.generate_password_hash(password).decode('utf-8')


def check_password(password_hash, password):
    if not isinstance(password, str) or not password:
        return False
    return bcrypt.check_password_hash(password_hash, password)


def issue_token(user):
    return create_access_token(identity=user.id, additional_claims={'role': user.role.value})


def current_caller():
    """Resolve the bearer token to a Caller, re-reading the role from the store."""
    try:
        verify_jwt_in_request()
    except (JWTExtendedException, PyJWTError) as e:
        logger.debug(f"Token rejected: {e}")
        raise Unauthenticated(f'Invalid or missing token: {e}') from e
    user = current_app.services['store'].users.find(get_jwt_identity())
    if user is None:
        raise Unauthenticated('The user for this token no longer exists.')
    return Caller(id=user.id, role=user.role)


def role_required(*roles):
    """Require a valid token, and one of ``roles`` when any are given.

    The resolved caller is available as ``flask.g.caller``.
    """
    def wrapper(fn):
        @wraps(fn)
        def decorator(*args, **kwargs):
            caller = current_caller()
            if roles and caller.role not in roles:
                logger.warning(f"User {caller.id} with role {caller.role.value} denied access to {fn.__name__}")
                raise Forbidden(f"Access denied: requires one of {', '.join(r.value for r in roles)}")
            g.caller = caller
            return fn(*args, **kwargs)
        return decorator
    return wrapper


login_required = role_required()

STAFF_ROLES = (Role.OWNER, Role.SHELTER, Role.ADMIN)
