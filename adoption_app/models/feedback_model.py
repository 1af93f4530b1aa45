from adoption_app import db
from adoption_app.models.base_model import RecordMixin


class Feedback(RecordMixin, db.Model):
    __tablename__ = 'feedback'
    user_id = db.Column(db.String(36), nullable=False)
    pet_id = db.Column(db.String(36), nullable=True, index=True)
    event_id = db.Column(db.String(36), nullable=True, index=True)
    feedback = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Integer, nullable=False)

    def __repr__(self):
        return f'<Feedback {self.id} by User {self.user_id} ({self.rating})>'
