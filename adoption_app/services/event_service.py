# Pet care event service module for business logic
import logging
from dataclasses import replace
from adoption_app.models import PetCareEvent
from adoption_app.models.event_model import TITLE_LENGTH, LOCATION_LENGTH
from adoption_app.services.reference_validator import require_exists
from adoption_app.utils.validators import require_text, parse_datetime

logger = logging.getLogger(__name__)

TEXT_LIMITS = {'title': TITLE_LENGTH, 'description': None, 'location': LOCATION_LENGTH}


def create_event(store, title, description, date_time, location, organizer_id):
    title = require_text(title, 'title', TITLE_LENGTH)
    description = require_text(description, 'description')
    date_time = parse_datetime(date_time, 'dateTime')
    location = require_text(location, 'location', LOCATION_LENGTH)
    require_exists(store.users, organizer_id, 'organizerId')
    event = PetCareEvent(
        title=title,
        description=description,
        date_time=date_time,
        location=location,
        organizer_id=organizer_id
    )
    store.create(store.events, event)
    logger.info(f"Created pet care event {event.id} on {date_time.isoformat()}")
    return event


def get_event(store, event_id):
    return store.events.get(event_id)


def update_event(store, event_id, patch):
    event = store.events.get(event_id)
    checked = {}
    for field, max_length in TEXT_LIMITS.items():
        if getattr(patch, field) is not None:
            checked[field] = require_text(getattr(patch, field), field, max_length)
    if patch.date_time is not None:
        checked['date_time'] = parse_datetime(patch.date_time, 'dateTime')
    return store.events.apply(event.id, replace(patch, **checked))


def delete_event(store, event_id):
    store.events.remove(event_id)
    logger.info(f"Deleted pet care event {event_id}")
