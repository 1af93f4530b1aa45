from adoption_app import db
from adoption_app.models.base_model import RecordMixin, ID_LENGTH


class Donation(RecordMixin, db.Model):
    __tablename__ = 'donation'
    donor_id = db.Column(db.String(ID_LENGTH), nullable=False)
    amount = db.Column(db.Float, nullable=False)

    def __repr__(self):
        return f'<Donation {self.amount} from {self.donor_id}>'
