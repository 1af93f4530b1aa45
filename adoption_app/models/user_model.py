from adoption_app import db
from adoption_app.models.base_model import LabeledEnum, RecordMixin


NAME_LENGTH = 100
CONTACT_LENGTH = 120


class Role(LabeledEnum):
    OWNER = 'Owner'
    SHELTER = 'Shelter'
    ADOPTER = 'Adopter'
    ADMIN = 'Admin'


class User(RecordMixin, db.Model):
    __tablename__ = 'user'
    name = db.Column(db.String(NAME_LENGTH), nullable=False)
    contact = db.Column(db.String(CONTACT_LENGTH), unique=True, nullable=False)
    role = db.Column(db.Enum(Role), nullable=False, default=Role.ADOPTER)
    password = db.Column(db.String(200), nullable=False)

    def __repr__(self):
        return f'<User {self.name} ({self.role})>'
