import logging
from flask import g
from flask_restx import Namespace, Resource, fields
from adoption_app.errors import ValidationError
from adoption_app.models import PetPatch
from adoption_app.services import pet_service
from adoption_app.utils.auth import role_required, STAFF_ROLES
from .common import UtcDateTime, EnumValue, page_model, pagination_parser, page_args, json_body, store, service

logger = logging.getLogger(__name__)

pet_ns = Namespace('pets', description='Pet operations', path='/pets')

pet_model = pet_ns.model('Pet', {
    'id': fields.String(readonly=True),
    'ownerId': fields.String(attribute='owner_id'),
    'name': fields.String(required=True),
    'species': fields.String(required=True),
    'breed': fields.String(required=True),
    'age': fields.Integer(required=True),
    'description': fields.String(),
    'status': EnumValue(readonly=True, description='Available or Adopted'),
    'createdAt': UtcDateTime(attribute='created_at', readonly=True)
})

pet_input = pet_ns.model('PetInput', {
    'ownerId': fields.String(description='Owner user ID (defaults to the caller)'),
    'name': fields.String(required=True),
    'species': fields.String(required=True),
    'breed': fields.String(required=True),
    'age': fields.Integer(required=True),
    'description': fields.String()
})

pet_page = page_model(pet_ns, 'PetPage', pet_model)

list_parser = pagination_parser()
list_parser.add_argument('species', type=str, location='args', help='Only pets of this species')
list_parser.add_argument('status', type=str, location='args', help='Available or Adopted')


@pet_ns.route('')
class PetList(Resource):
    @pet_ns.doc('list_pets')
    @pet_ns.expect(list_parser)
    @pet_ns.marshal_with(pet_page)
    def get(self):
        """List pets, optionally filtered by species and status"""
        args = list_parser.parse_args()
        return service('queries').list_pets(species=args['species'], status=args['status'], **page_args(args))

    @role_required(*STAFF_ROLES)
    @pet_ns.doc('create_pet', security='BearerAuth')
    @pet_ns.expect(pet_input)
    @pet_ns.marshal_with(pet_model, code=201)
    def post(self):
        """Register a pet for adoption"""
        data = json_body()
        pet = pet_service.create_pet(
            store(),
            owner_id=data.get('ownerId') or g.caller.id,
            name=data.get('name'),
            species=data.get('species'),
            breed=data.get('breed'),
            age=data.get('age'),
            description=data.get('description')
        )
        return pet, 201


@pet_ns.route('/<string:pet_id>')
class PetResource(Resource):
    @pet_ns.doc('get_pet')
    @pet_ns.marshal_with(pet_model)
    def get(self, pet_id):
        """Get a pet by ID"""
        return pet_service.get_pet(store(), pet_id)

    @role_required(*STAFF_ROLES)
    @pet_ns.doc('update_pet', security='BearerAuth')
    @pet_ns.expect(pet_input)
    @pet_ns.marshal_with(pet_model)
    def put(self, pet_id):
        """Update a pet's details (status changes go through adoption requests)"""
        patch = PetPatch.from_payload(json_body())
        if patch.is_empty():
            raise ValidationError('body', 'No valid fields to update.')
        return pet_service.update_pet(store(), pet_id, patch)

    @role_required(*STAFF_ROLES)
    @pet_ns.doc('delete_pet', security='BearerAuth')
    def delete(self, pet_id):
        """Delete a pet"""
        pet_service.delete_pet(store(), pet_id)
        logger.info(f"Pet {pet_id} deleted by user {g.caller.id}")
        return {'message': 'Pet deleted successfully'}, 200
