"""Feedback and donation ledger."""
import pytest
from adoption_app.errors import InvalidReference, OutOfRange, ValidationError
from adoption_app.models import DonationPatch, FeedbackPatch
from adoption_app.services import event_service


@pytest.mark.parametrize('rating', [1, 3, 5])
def test_ratings_inside_the_range_are_accepted(ledger, make_user, rating):
    user = make_user()
    feedback = ledger.add_feedback(user.id, 'Great shelter', rating)
    assert feedback.rating == rating
    assert feedback.pet_id is None
    assert feedback.event_id is None


@pytest.mark.parametrize('rating', [0, 6, -3])
def test_ratings_outside_the_range_are_out_of_range(ledger, store, make_user, rating):
    user = make_user()
    with pytest.raises(OutOfRange):
        ledger.add_feedback(user.id, 'Meh', rating)
    assert store.feedbacks.count() == 0


@pytest.mark.parametrize('rating', ['5', True, None, 4.5])
def test_non_integer_ratings_are_validation_errors(ledger, make_user, rating):
    user = make_user()
    with pytest.raises(ValidationError):
        ledger.add_feedback(user.id, 'Nice', rating)


def test_feedback_can_point_at_a_pet_and_an_event(ledger, store, make_user, make_pet):
    user = make_user()
    pet = make_pet()
    event = event_service.create_event(store, 'Adoption fair', 'Meet pets', '2026-07-04T12:00:00', 'Park', user.id)

    feedback = ledger.add_feedback(user.id, 'Lovely day', 5, pet_id=pet.id, event_id=event.id)

    assert feedback.pet_id == pet.id
    assert feedback.event_id == event.id


def test_feedback_references_are_checked(ledger, make_user):
    user = make_user()
    with pytest.raises(InvalidReference) as excinfo:
        ledger.add_feedback('ghost', 'Hi', 4)
    assert excinfo.value.field == 'userId'
    with pytest.raises(InvalidReference) as excinfo:
        ledger.add_feedback(user.id, 'Hi', 4, pet_id='ghost-pet')
    assert excinfo.value.field == 'petId'
    with pytest.raises(InvalidReference) as excinfo:
        ledger.add_feedback(user.id, 'Hi', 4, event_id='ghost-event')
    assert excinfo.value.field == 'eventId'


def test_update_feedback_changes_text_and_rating_only(ledger, make_user):
    user = make_user()
    feedback = ledger.add_feedback(user.id, 'Good', 3)

    updated = ledger.update_feedback(feedback.id, FeedbackPatch.from_payload({'rating': 4, 'userId': 'other'}))

    assert updated.rating == 4
    assert updated.feedback == 'Good'
    assert updated.user_id == user.id
    with pytest.raises(OutOfRange):
        ledger.update_feedback(feedback.id, FeedbackPatch(rating=9))


@pytest.mark.parametrize('amount', [0, -10, -0.01])
def test_non_positive_donations_are_out_of_range(ledger, store, amount):
    with pytest.raises(OutOfRange):
        ledger.add_donation('donor-1', amount)
    assert store.donations.count() == 0


@pytest.mark.parametrize('amount', ['50', None, True])
def test_non_numeric_donations_are_validation_errors(ledger, amount):
    with pytest.raises(ValidationError):
        ledger.add_donation('donor-1', amount)


def test_donor_is_recorded_without_a_lookup(ledger):
    donation = ledger.add_donation('not-a-registered-user', 25.5)
    assert donation.donor_id == 'not-a-registered-user'
    assert donation.amount == 25.5


def test_update_and_remove_donation(ledger, store):
    donation = ledger.add_donation('donor-1', 10)
    assert ledger.update_donation(donation.id, DonationPatch(amount=15)).amount == 15
    with pytest.raises(OutOfRange):
        ledger.update_donation(donation.id, DonationPatch(amount=0))
    assert ledger.get_donation(donation.id).amount == 15

    ledger.remove_donation(donation.id)
    assert store.donations.count() == 0


def test_huge_ratings_and_amounts_are_out_of_range(ledger, store, make_user):
    user = make_user()
    with pytest.raises(OutOfRange):
        ledger.add_feedback(user.id, 'Wow', 10 ** 20)
    with pytest.raises(OutOfRange):
        ledger.add_donation('donor-1', 10 ** 400)
    assert store.feedbacks.count() == 0
    assert store.donations.count() == 0


def test_large_integer_amount_is_stored_as_a_float(ledger):
    donation = ledger.add_donation('donor-1', 10 ** 20)
    assert ledger.get_donation(donation.id).amount == float(10 ** 20)


def test_donor_id_longer_than_a_record_id_is_rejected(ledger):
    with pytest.raises(ValidationError) as excinfo:
        ledger.add_donation('d' * 37, 5)
    assert excinfo.value.field == 'donorId'
