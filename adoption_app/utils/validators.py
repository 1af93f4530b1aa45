import math
from datetime import datetime, timezone
from dateutil.parser import isoparse
from adoption_app.errors import ValidationError, OutOfRange

RATING_MIN = 1
RATING_MAX = 5
# Largest value a 32-bit INTEGER column holds on every supported database
INT_MAX = 2 ** 31 - 1


def _check_length(value, field, max_length):
    if max_length is not None and len(value) > max_length:
        raise ValidationError(field, f"Invalid input: '{field}' must be at most {max_length} characters.")
    return value


def require_text(value, field, max_length=None):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, f"Invalid input: '{field}' must be a non-empty string.")
    return _check_length(value, field, max_length)


def optional_text(value, field, default='', max_length=None):
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError(field, f"Invalid input: '{field}' must be a string.")
    return _check_length(value, field, max_length)


def _is_number(value):
    # bool is an int subclass but never a valid quantity here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def require_int(value, field):
    if not _is_number(value) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(field, f"Invalid input: '{field}' must be an integer.")
    value = int(value)
    if abs(value) > INT_MAX:
        raise OutOfRange(field, f"'{field}' is too large.")
    return value


def require_number(value, field):
    if not _is_number(value):
        raise ValidationError(field, f"Invalid input: '{field}' must be a number.")
    try:
        value = float(value)
    except OverflowError:
        raise OutOfRange(field, f"'{field}' is too large.")
    if not math.isfinite(value):
        raise ValidationError(field, f"Invalid input: '{field}' must be a number.")
    return value


def require_non_negative_int(value, field, maximum=INT_MAX):
    value = require_int(value, field)
    if value < 0:
        raise OutOfRange(field, f"'{field}' must be zero or greater.")
    if value > maximum:
        raise OutOfRange(field, f"'{field}' must be at most {maximum}.")
    return value


def require_positive_number(value, field):
    value = require_number(value, field)
    if value <= 0:
        raise OutOfRange(field, f"'{field}' must be greater than zero.")
    return value


def require_rating(value, field='rating'):
    value = require_int(value, field)
    if not RATING_MIN <= value <= RATING_MAX:
        raise OutOfRange(field, f"'{field}' must be between {RATING_MIN} and {RATING_MAX}.")
    return value


def parse_datetime(value, field):
    """Accept a datetime or an ISO-8601 string and return it in UTC.

    Naive values are taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = isoparse(value)
        except (ValueError, OverflowError):
            raise ValidationError(field, f"Invalid input: '{field}' must be an ISO-8601 date-time.")
    else:
        raise ValidationError(field, f"Invalid input: '{field}' must be an ISO-8601 date-time.")
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        raise OutOfRange(field, f"'{field}' is outside the supported date range.")


def parse_choice(enum_cls, value, field, error=None):
    """Parse ``value`` into a member of ``enum_cls``.

    ``error`` builds the exception to raise; by default a ValidationError
    listing the accepted values.
    """
    try:
        return enum_cls.parse(value)
    except ValueError:
        message = f"Invalid {field}: {value!r}. Allowed values: {', '.join(enum_cls.values())}"
        if error is not None:
            raise error(message)
        raise ValidationError(field, message)
