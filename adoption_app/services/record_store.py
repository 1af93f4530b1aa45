"""Ordered record storage over one SQLAlchemy model.

Records are keyed by their string ``id`` and listed in insertion order (the
model's ``seq`` column). Filters are applied in the query, before any
offset/limit, so a page is always cut from the filtered listing.
"""
import logging
from sqlalchemy.exc import SQLAlchemyError
from adoption_app.errors import DuplicateKey, NotFound, StoreFault, ValidationError
from adoption_app.models.patch_model import merge_patch, snapshot

logger = logging.getLogger(__name__)

# Columns a full replace never touches
IMMUTABLE_COLUMNS = ('seq', 'id')


def check_page(page, limit):
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        raise ValidationError('page', "'page' must be an integer of at least 1.")
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValidationError('limit', "'limit' must be an integer of at least 1.")


def slice_page(items, page, limit):
    """Cut page ``page`` of size ``limit`` out of an in-memory sequence."""
    check_page(page, limit)
    start = (page - 1) * limit
    return list(items[start:start + limit])


def commit(session):
    try:
        session.commit()
    except (SQLAlchemyError, OverflowError) as e:
        session.rollback()
        logger.exception("Store commit failed")
        raise StoreFault() from e


def flush(session):
    try:
        session.flush()
    except (SQLAlchemyError, OverflowError) as e:
        session.rollback()
        logger.exception("Store flush failed")
        raise StoreFault() from e


class RecordStore:
    def __init__(self, model, session, kind=None, on_write=None):
        self.model = model
        self.session = session
        self.kind = kind or model.__tablename__
        # Called after each write; commits on its own when not given
        self._on_write = on_write

    def __repr__(self):
        return f'<RecordStore {self.kind}>'

    def _query(self, **criteria):
        return self.session.query(self.model).filter_by(**criteria).order_by(self.model.seq)

    def _written(self):
        if self._on_write is not None:
            self._on_write()
        else:
            commit(self.session)

    def find(self, record_id):
        if not isinstance(record_id, str):
            return None
        return self.session.query(self.model).filter_by(id=record_id).one_or_none()

    def exists(self, record_id):
        return self.find(record_id) is not None

    def insert(self, record_id, record):
        if self.exists(record_id):
            raise DuplicateKey(self.kind, record_id)
        record.id = record_id
        self.session.add(record)
        self._written()
        logger.debug(f"Inserted {self.kind} {record_id}")
        return record

    def get(self, record_id):
        record = self.find(record_id)
        if record is None:
            raise NotFound(self.kind, record_id)
        return record

    def update(self, record_id, record):
        """Replace the stored record's columns with ``record``'s, keeping id and seq."""
        stored = self.get(record_id)
        if record is not stored:
            for column in self.model.__table__.columns:
                if column.key not in IMMUTABLE_COLUMNS:
                    setattr(stored, column.key, getattr(record, column.key))
        self._written()
        return stored

    def apply(self, record_id, patch):
        """Merge a validated patch into the stored record and write it back."""
        record = self.get(record_id)
        for name, value in merge_patch(snapshot(record, type(patch)), patch).items():
            setattr(record, name, value)
        return self.update(record_id, record)

    def remove(self, record_id):
        record = self.get(record_id)
        self.session.delete(record)
        self._written()
        logger.debug(f"Removed {self.kind} {record_id}")

    def list(self):
        return self._query().all()

    def filter(self, predicate=None, **criteria):
        records = self._query(**criteria).all()
        if predicate is not None:
            records = [r for r in records if predicate(r)]
        return records

    def count(self, **criteria):
        return self.session.query(self.model).filter_by(**criteria).count()

    def paginate(self, page, limit, **criteria):
        check_page(page, limit)
        offset = (page - 1) * limit
        total = self.count(**criteria)
        # Offset and limit stay within the row count, so they always fit a SQL integer
        if offset >= total:
            return []
        return self._query(**criteria).offset(offset).limit(min(limit, total - offset)).all()
