import enum
from datetime import datetime, timezone
from adoption_app import db


def utcnow():
    return datetime.now(timezone.utc)


class LabeledEnum(enum.Enum):
    """Enum whose values are the labels used on the wire ('Available', 'Owner', ...)."""

    @classmethod
    def parse(cls, value):
        """Return the member matching ``value`` by value or name, ignoring case.

        Raises ``ValueError`` for anything else, including non-strings.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if wanted in (member.value.lower(), member.name.lower()):
                    return member
        raise ValueError(f"{value!r} is not a valid {cls.__name__}")

    @classmethod
    def values(cls):
        return [member.value for member in cls]


# Record ids are uuid4 strings
ID_LENGTH = 36


class RecordMixin:
    # Rows are listed by seq, which preserves insertion order
    seq = db.Column(db.Integer, primary_key=True, autoincrement=True)
    id = db.Column(db.String(ID_LENGTH), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
