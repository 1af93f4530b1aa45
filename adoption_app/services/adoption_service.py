"""Adoption request lifecycle.

A request starts Pending and ends Approved or Rejected. Approving it marks
the pet Adopted in the same unit of work; rejecting it leaves the pet alone.
Requests against a pet that is already Adopted are refused at submission and
at approval, so at most one request per pet is ever Approved.
"""
import logging
from adoption_app.errors import InvalidStatus, PetUnavailable, RequestClosed
from adoption_app.models import AdoptionRequest, AdoptionStatus, PetStatus, utcnow
from adoption_app.services.reference_validator import require_exists
from adoption_app.utils.validators import parse_choice

logger = logging.getLogger(__name__)

# Pending is the only state a request can leave
ALLOWED_TRANSITIONS = {
    AdoptionStatus.PENDING: (AdoptionStatus.APPROVED, AdoptionStatus.REJECTED),
    AdoptionStatus.APPROVED: (),
    AdoptionStatus.REJECTED: (),
}


def parse_target_status(value):
    status = parse_choice(AdoptionStatus, value, 'status', error=InvalidStatus)
    if status is AdoptionStatus.PENDING:
        raise InvalidStatus("A request cannot be moved back to Pending. Allowed values: Approved, Rejected")
    return status


class AdoptionWorkflow:
    def __init__(self, store):
        self.store = store

    def get(self, request_id):
        return self.store.adoption_requests.get(request_id)

    def submit(self, pet_id, adopter_id):
        store = self.store
        with store.lock:
            pet = require_exists(store.pets, pet_id, 'petId')
            require_exists(store.users, adopter_id, 'adopterId')
            if pet.status is PetStatus.ADOPTED:
                logger.warning(f"Refused adoption request for already adopted pet {pet_id}")
                raise PetUnavailable(f"Pet '{pet_id}' has already been adopted.", field='petId')
            now = utcnow()
            request = AdoptionRequest(
                pet_id=pet_id,
                adopter_id=adopter_id,
                status=AdoptionStatus.PENDING,
                requested_at=now,
                created_at=now,
                approved_at=None
            )
            store.create(store.adoption_requests, request)
        logger.info(f"Adoption request {request.id} submitted for pet {pet_id} by {adopter_id}")
        return request

    def transition(self, request_id, new_status):
        target = parse_target_status(new_status)
        store = self.store
        with store.lock, store.atomic():
            request = store.adoption_requests.get(request_id)
            if request.status is target:
                logger.debug(f"Adoption request {request_id} already {target.value}")
                return request
            if target not in ALLOWED_TRANSITIONS[request.status]:
                raise RequestClosed(
                    f"Adoption request '{request_id}' is already {request.status.value} "
                    f"and cannot become {target.value}."
                )
            if target is AdoptionStatus.APPROVED:
                pet = require_exists(store.pets, request.pet_id, 'petId')
                if pet.status is PetStatus.ADOPTED:
                    raise PetUnavailable(f"Pet '{pet.id}' has already been adopted.", field='petId')
                pet.status = PetStatus.ADOPTED
                store.pets.update(pet.id, pet)
                request.approved_at = utcnow()
            request.status = target
            store.adoption_requests.update(request.id, request)
        logger.info(f"Adoption request {request_id} moved to {target.value}")
        return request

    def remove(self, request_id):
        # Deleting an approved request does not make the pet available again
        self.store.adoption_requests.remove(request_id)
        logger.info(f"Deleted adoption request {request_id}")
