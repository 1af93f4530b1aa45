from adoption_app import db
from adoption_app.models.base_model import LabeledEnum, RecordMixin


class AdoptionStatus(LabeledEnum):
    PENDING = 'Pending'
    APPROVED = 'Approved'
    REJECTED = 'Rejected'

    @property
    def is_terminal(self):
        return self is not AdoptionStatus.PENDING


class AdoptionRequest(RecordMixin, db.Model):
    __tablename__ = 'adoption_request'
    pet_id = db.Column(db.String(36), nullable=False, index=True)
    adopter_id = db.Column(db.String(36), nullable=False)
    status = db.Column(db.Enum(AdoptionStatus), nullable=False, default=AdoptionStatus.PENDING)
    requested_at = db.Column(db.DateTime(timezone=True), nullable=False)
    approved_at = db.Column(db.DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f'<AdoptionRequest {self.id} for Pet {self.pet_id} ({self.status})>'
