from .base_model import LabeledEnum, RecordMixin, ID_LENGTH, utcnow
from .user_model import User, Role
from .pet_model import Pet, PetStatus
from .adoption_model import AdoptionRequest, AdoptionStatus
from .event_model import PetCareEvent
from .feedback_model import Feedback
from .donation_model import Donation
from .patch_model import (
    UserPatch, PetPatch, PetCareEventPatch, FeedbackPatch, DonationPatch, merge_patch, snapshot
)
