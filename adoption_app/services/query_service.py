import logging
from dataclasses import dataclass
from typing import Any, List
from adoption_app.errors import ValidationError
from adoption_app.models import PetStatus, AdoptionStatus
from adoption_app.services.record_store import check_page
from adoption_app.utils.validators import parse_choice

logger = logging.getLogger(__name__)


@dataclass
class Page:
    items: List[Any]
    page: int
    limit: int
    # Matching records before the page was cut
    total: int


class QueryFacade:
    """Paged listings. Filters narrow the listing first, then the page is cut."""

    def __init__(self, store, max_limit=100):
        self.store = store
        self.max_limit = max_limit

    def _page(self, records, page, limit, **criteria):
        check_page(page, limit)
        if limit > self.max_limit:
            raise ValidationError('limit', f"'limit' must not exceed {self.max_limit}.")
        criteria = {key: value for key, value in criteria.items() if value is not None}
        total = records.count(**criteria)
        if (page - 1) * limit >= total:
            items = []
        else:
            items = records.paginate(page, limit, **criteria)
        logger.debug(f"Listed {records.kind} page {page}/{limit}: {len(items)} of {total}")
        return Page(items=items, page=page, limit=limit, total=total)

    def list_users(self, page=1, limit=10):
        return self._page(self.store.users, page, limit)

    def list_pets(self, page=1, limit=10, species=None, status=None):
        if status is not None:
            status = parse_choice(PetStatus, status, 'status')
        return self._page(self.store.pets, page, limit, species=species or None, status=status)

    def list_adoption_requests(self, page=1, limit=10, status=None, pet_id=None):
        if status is not None:
            status = parse_choice(AdoptionStatus, status, 'status')
        return self._page(self.store.adoption_requests, page, limit, status=status, pet_id=pet_id or None)

    def list_events(self, page=1, limit=10):
        return self._page(self.store.events, page, limit)

    def list_feedbacks(self, page=1, limit=10, pet_id=None, event_id=None):
        return self._page(self.store.feedbacks, page, limit, pet_id=pet_id or None, event_id=event_id or None)

    def list_donations(self, page=1, limit=10):
        return self._page(self.store.donations, page, limit)
