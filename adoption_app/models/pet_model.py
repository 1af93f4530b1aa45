from adoption_app import db
from adoption_app.models.base_model import LabeledEnum, RecordMixin


# Column sizes, checked by the pet service before anything is written
NAME_LENGTH = 100
SPECIES_LENGTH = 50
BREED_LENGTH = 50
DESCRIPTION_LENGTH = 300
MAX_AGE = 100


class PetStatus(LabeledEnum):
    AVAILABLE = 'Available'
    ADOPTED = 'Adopted'


class Pet(RecordMixin, db.Model):
    __tablename__ = 'pet'
    owner_id = db.Column(db.String(36), nullable=False, index=True)
    name = db.Column(db.String(NAME_LENGTH), nullable=False)
    species = db.Column(db.String(SPECIES_LENGTH), nullable=False, index=True)
    breed = db.Column(db.String(BREED_LENGTH), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    description = db.Column(db.String(DESCRIPTION_LENGTH), nullable=False, default='')
    status = db.Column(db.Enum(PetStatus), nullable=False, default=PetStatus.AVAILABLE)

    def __repr__(self):
        return f'<Pet {self.name} ({self.species})>'
