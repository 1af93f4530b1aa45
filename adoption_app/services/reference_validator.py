# Foreign-key checks run before any record that references another is written
import logging
from adoption_app.errors import InvalidReference, ValidationError

logger = logging.getLogger(__name__)


def require_exists(records, record_id, field_name):
    if not isinstance(record_id, str) or not record_id.strip():
        raise ValidationError(field_name, f"Invalid input: '{field_name}' must be a non-empty string.")
    record = records.find(record_id)
    if record is None:
        logger.debug(f"Dangling {field_name}: no {records.kind} '{record_id}'")
        raise InvalidReference(field_name, record_id)
    return record


def require_optional(records, record_id, field_name):
    if record_id is None or record_id == '':
        return None
    return require_exists(records, record_id, field_name)
