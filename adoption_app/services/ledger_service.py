import logging
from dataclasses import replace
from adoption_app.models import Feedback, Donation, ID_LENGTH
from adoption_app.services.reference_validator import require_exists, require_optional
from adoption_app.utils.validators import require_text, require_rating, require_positive_number

logger = logging.getLogger(__name__)


class FeedbackAndDonationLedger:
    """Feedback on pets and events, and donations.

    Only the text/rating of feedback and the amount of a donation change after
    creation. The donor of a donation is recorded as given and not looked up.
    """

    def __init__(self, store):
        self.store = store

    def add_feedback(self, user_id, text, rating, pet_id=None, event_id=None):
        text = require_text(text, 'feedback')
        rating = require_rating(rating)
        store = self.store
        require_exists(store.users, user_id, 'userId')
        require_optional(store.pets, pet_id, 'petId')
        require_optional(store.events, event_id, 'eventId')
        feedback = Feedback(
            user_id=user_id,
            pet_id=pet_id or None,
            event_id=event_id or None,
            feedback=text,
            rating=rating
        )
        store.create(store.feedbacks, feedback)
        logger.info(f"Feedback {feedback.id} ({rating}/5) added by {user_id}")
        return feedback

    def get_feedback(self, feedback_id):
        return self.store.feedbacks.get(feedback_id)

    def update_feedback(self, feedback_id, patch):
        feedback = self.store.feedbacks.get(feedback_id)
        checked = {}
        if patch.feedback is not None:
            checked['feedback'] = require_text(patch.feedback, 'feedback')
        if patch.rating is not None:
            checked['rating'] = require_rating(patch.rating)
        return self.store.feedbacks.apply(feedback.id, replace(patch, **checked))

    def remove_feedback(self, feedback_id):
        self.store.feedbacks.remove(feedback_id)
        logger.info(f"Deleted feedback {feedback_id}")

    def add_donation(self, donor_id, amount):
        donor_id = require_text(donor_id, 'donorId', ID_LENGTH)
        amount = require_positive_number(amount, 'amount')
        donation = Donation(donor_id=donor_id, amount=amount)
        self.store.create(self.store.donations, donation)
        logger.info(f"Donation {donation.id} of {amount} recorded for {donor_id}")
        return donation

    def get_donation(self, donation_id):
        return self.store.donations.get(donation_id)

    def update_donation(self, donation_id, patch):
        donation = self.store.donations.get(donation_id)
        checked = {}
        if patch.amount is not None:
            checked['amount'] = require_positive_number(patch.amount, 'amount')
        return self.store.donations.apply(donation.id, replace(patch, **checked))

    def remove_donation(self, donation_id):
        self.store.donations.remove(donation_id)
        logger.info(f"Deleted donation {donation_id}")
