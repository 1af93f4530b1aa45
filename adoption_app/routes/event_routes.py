from flask import g
from flask_restx import Namespace, Resource, fields
from adoption_app.errors import ValidationError
from adoption_app.models import PetCareEventPatch
from adoption_app.services import event_service
from adoption_app.utils.auth import role_required, STAFF_ROLES
from .common import UtcDateTime, page_model, pagination_parser, page_args, json_body, store, service

event_ns = Namespace('pet-care-events', description='Pet care event operations', path='/pet-care-events')

event_model = event_ns.model('PetCareEvent', {
    'id': fields.String(readonly=True),
    'title': fields.String(required=True),
    'description': fields.String(required=True),
    'dateTime': UtcDateTime(attribute='date_time', required=True),
    'location': fields.String(required=True),
    'organizerId': fields.String(attribute='organizer_id'),
    'createdAt': UtcDateTime(attribute='created_at', readonly=True)
})

event_input = event_ns.model('PetCareEventInput', {
    'title': fields.String(required=True),
    'description': fields.String(required=True),
    'dateTime': fields.String(required=True, description='Date in ISO format'),
    'location': fields.String(required=True),
    'organizerId': fields.String(description='Organizer user ID (defaults to the caller)')
})

event_page = page_model(event_ns, 'PetCareEventPage', event_model)
list_parser = pagination_parser()


@event_ns.route('')
class PetCareEventList(Resource):
    @event_ns.expect(list_parser)
    @event_ns.marshal_with(event_page)
    def get(self):
        """List pet care events"""
        args = list_parser.parse_args()
        return service('queries').list_events(**page_args(args))

    @role_required(*STAFF_ROLES)
    @event_ns.doc(security='BearerAuth')
    @event_ns.expect(event_input)
    @event_ns.marshal_with(event_model, code=201)
    def post(self):
        """Create a pet care event"""
        data = json_body()
        event = event_service.create_event(
            store(),
            title=data.get('title'),
            description=data.get('description'),
            date_time=data.get('dateTime'),
            location=data.get('location'),
            organizer_id=data.get('organizerId') or g.caller.id
        )
        return event, 201


@event_ns.route('/<string:event_id>')
class PetCareEventResource(Resource):
    @event_ns.marshal_with(event_model)
    def get(self, event_id):
        """Get a pet care event by ID"""
        return event_service.get_event(store(), event_id)

    @role_required(*STAFF_ROLES)
    @event_ns.doc(security='BearerAuth')
    @event_ns.expect(event_input)
    @event_ns.marshal_with(event_model)
    def put(self, event_id):
        """Update a pet care event"""
        patch = PetCareEventPatch.from_payload(json_body())
        if patch.is_empty():
            raise ValidationError('body', 'No valid fields to update.')
        return event_service.update_event(store(), event_id, patch)

    @role_required(*STAFF_ROLES)
    @event_ns.doc(security='BearerAuth')
    def delete(self, event_id):
        """Delete a pet care event"""
        event_service.delete_event(store(), event_id)
        return {'message': 'Pet care event deleted successfully'}, 200
