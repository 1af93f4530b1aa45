"""Typed failures raised by the store, the workflow and the auth layer.

Every error carries a stable ``code`` and the HTTP ``status_code`` the API
layer answers with; the core itself never formats responses.
"""


class AdoptionAppError(Exception):
    """Base class for every failure the API layer knows how to report."""

    code = 'INTERNAL_ERROR'
    status_code = 500

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_response(self):
        body = {'message': self.message, 'error': self.code}
        if self.field:
            body['field'] = self.field
        return body


class ValidationError(AdoptionAppError):
    code = 'VALIDATION_ERROR'
    status_code = 400

    def __init__(self, field, message=None):
        super().__init__(message or f"Invalid input: '{field}' is missing or has the wrong type.", field=field)


class InvalidReference(AdoptionAppError):
    code = 'INVALID_REFERENCE'
    status_code = 400

    def __init__(self, field, record_id=None):
        super().__init__(f"Invalid input: '{field}' does not reference an existing record.", field=field)
        self.record_id = record_id


class OutOfRange(AdoptionAppError):
    code = 'OUT_OF_RANGE'
    status_code = 400

    def __init__(self, field, message):
        super().__init__(message, field=field)


class InvalidStatus(AdoptionAppError):
    code = 'INVALID_STATUS'
    status_code = 400

    def __init__(self, message, field='status'):
        super().__init__(message, field=field)


class PetUnavailable(InvalidStatus):
    code = 'PET_UNAVAILABLE'
    status_code = 409


class RequestClosed(InvalidStatus):
    code = 'REQUEST_CLOSED'
    status_code = 409


class NotFound(AdoptionAppError):
    code = 'NOT_FOUND'
    status_code = 404

    def __init__(self, kind, record_id):
        super().__init__(f"{kind} '{record_id}' not found.")
        self.kind = kind
        self.record_id = record_id


class DuplicateKey(AdoptionAppError):
    code = 'DUPLICATE_KEY'
    status_code = 409

    def __init__(self, kind, key, field='id'):
        super().__init__(f"{kind} with {field} '{key}' already exists.", field=field)
        self.kind = kind
        self.key = key


class ContactTaken(DuplicateKey):
    code = 'CONTACT_TAKEN'

    def __init__(self, contact):
        super().__init__('user', contact, field='contact')


class Unauthenticated(AdoptionAppError):
    code = 'UNAUTHENTICATED'
    status_code = 401

    def __init__(self, message='Authentication required.'):
        super().__init__(message)


class Forbidden(AdoptionAppError):
    code = 'FORBIDDEN'
    status_code = 403

    def __init__(self, message='You do not have permission to perform this operation.'):
        super().__init__(message)


class StoreFault(AdoptionAppError):
    """The persistence layer failed in a way the caller cannot recover from."""

    code = 'STORE_FAULT'
    status_code = 500

    def __init__(self, message='Server error occurred while accessing the store.'):
        super().__init__(message)
