from adoption_app import db
from adoption_app.models.base_model import RecordMixin


TITLE_LENGTH = 200
LOCATION_LENGTH = 200


class PetCareEvent(RecordMixin, db.Model):
    __tablename__ = 'pet_care_event'
    title = db.Column(db.String(TITLE_LENGTH), nullable=False)
    description = db.Column(db.Text, nullable=False)
    date_time = db.Column(db.DateTime(timezone=True), nullable=False)
    location = db.Column(db.String(LOCATION_LENGTH), nullable=False)
    organizer_id = db.Column(db.String(36), nullable=False)

    def __repr__(self):
        return f'<PetCareEvent {self.title} at {self.location}>'
