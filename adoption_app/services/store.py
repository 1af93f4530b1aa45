import logging
import threading
from contextlib import contextmanager
from adoption_app.models import User, Pet, AdoptionRequest, PetCareEvent, Feedback, Donation
from adoption_app.services.record_store import RecordStore, commit, flush
from adoption_app.utils.ids import IdentifierGenerator

logger = logging.getLogger(__name__)


class Store:
    """The six record stores of the platform plus the unit of work around them.

    Built once per app and shared by every service. Writes commit one by one
    unless they run inside ``atomic()``, where the outermost block commits
    everything or rolls everything back.
    """

    def __init__(self, session, id_generator=None):
        self.session = session
        self.new_id = id_generator or IdentifierGenerator()
        # Serializes multi-record workflows across request threads
        self.lock = threading.RLock()
        self._local = threading.local()

        self.users = RecordStore(User, session, 'user', on_write=self._written)
        self.pets = RecordStore(Pet, session, 'pet', on_write=self._written)
        self.adoption_requests = RecordStore(AdoptionRequest, session, 'adoption request', on_write=self._written)
        self.events = RecordStore(PetCareEvent, session, 'pet care event', on_write=self._written)
        self.feedbacks = RecordStore(Feedback, session, 'feedback', on_write=self._written)
        self.donations = RecordStore(Donation, session, 'donation', on_write=self._written)

    @property
    def _depth(self):
        return getattr(self._local, 'depth', 0)

    def _written(self):
        if self._depth:
            flush(self.session)
        else:
            commit(self.session)

    @contextmanager
    def atomic(self):
        outermost = self._depth == 0
        self._local.depth = self._depth + 1
        try:
            yield self
            if outermost:
                commit(self.session)
        except Exception:
            if outermost:
                self.session.rollback()
                logger.debug("Rolled back atomic block")
            raise
        finally:
            self._local.depth -= 1

    def create(self, records, record):
        """Insert ``record`` into ``records`` under a freshly generated id."""
        return records.insert(self.new_id(), record)
