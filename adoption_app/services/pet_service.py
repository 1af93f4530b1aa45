# Pet service module for business logic
import logging
from dataclasses import replace
from adoption_app.models import Pet, PetStatus
from adoption_app.models.pet_model import NAME_LENGTH, SPECIES_LENGTH, BREED_LENGTH, DESCRIPTION_LENGTH, MAX_AGE
from adoption_app.services.reference_validator import require_exists
from adoption_app.utils.validators import require_text, optional_text, require_non_negative_int

logger = logging.getLogger(__name__)

TEXT_LIMITS = {'name': NAME_LENGTH, 'species': SPECIES_LENGTH, 'breed': BREED_LENGTH}


def create_pet(store, owner_id, name, species, breed, age, description=None):
    # Field checks all run before the owner lookup so nothing is half-written
    name = require_text(name, 'name', NAME_LENGTH)
    species = require_text(species, 'species', SPECIES_LENGTH)
    breed = require_text(breed, 'breed', BREED_LENGTH)
    age = require_non_negative_int(age, 'age', MAX_AGE)
    description = optional_text(description, 'description', max_length=DESCRIPTION_LENGTH)
    require_exists(store.users, owner_id, 'ownerId')
    pet = Pet(
        owner_id=owner_id,
        name=name,
        species=species,
        breed=breed,
        age=age,
        description=description,
        status=PetStatus.AVAILABLE
    )
    store.create(store.pets, pet)
    logger.info(f"Created pet {pet.id} ({species}) for owner {owner_id}")
    return pet


def get_pet(store, pet_id):
    return store.pets.get(pet_id)


def update_pet(store, pet_id, patch):
    pet = store.pets.get(pet_id)
    checked = {}
    for field, max_length in TEXT_LIMITS.items():
        if getattr(patch, field) is not None:
            checked[field] = require_text(getattr(patch, field), field, max_length)
    if patch.age is not None:
        checked['age'] = require_non_negative_int(patch.age, 'age', MAX_AGE)
    if patch.description is not None:
        checked['description'] = optional_text(patch.description, 'description', max_length=DESCRIPTION_LENGTH)
    return store.pets.apply(pet.id, replace(patch, **checked))


def delete_pet(store, pet_id):
    store.pets.remove(pet_id)
    logger.info(f"Deleted pet {pet_id}")
