from flask import g
from flask_restx import Namespace, Resource, fields
from adoption_app.models import Role
from adoption_app.utils.auth import login_required, role_required, STAFF_ROLES
from .common import UtcDateTime, EnumValue, page_model, pagination_parser, page_args, json_body, service

adoption_ns = Namespace('adoption-requests', description='Adoption request operations', path='/adoption-requests')

adoption_model = adoption_ns.model('AdoptionRequest', {
    'id': fields.String(readonly=True),
    'petId': fields.String(attribute='pet_id', required=True),
    'adopterId': fields.String(attribute='adopter_id'),
    'status': EnumValue(description='Pending, Approved or Rejected'),
    'requestedAt': UtcDateTime(attribute='requested_at', readonly=True),
    'approvedAt': UtcDateTime(attribute='approved_at', readonly=True),
    'createdAt': UtcDateTime(attribute='created_at', readonly=True)
})

adoption_input = adoption_ns.model('AdoptionRequestInput', {
    'petId': fields.String(required=True),
    'adopterId': fields.String(description='Adopter user ID (defaults to the caller)')
})

status_input = adoption_ns.model('AdoptionStatusInput', {
    'status': fields.String(required=True, description='Approved or Rejected')
})

adoption_page = page_model(adoption_ns, 'AdoptionRequestPage', adoption_model)

list_parser = pagination_parser()
list_parser.add_argument('status', type=str, location='args', help='Pending, Approved or Rejected')
list_parser.add_argument('petId', type=str, dest='pet_id', location='args', help='Only requests for this pet')


@adoption_ns.route('')
class AdoptionRequestList(Resource):
    @login_required
    @adoption_ns.doc('list_adoption_requests', security='BearerAuth')
    @adoption_ns.expect(list_parser)
    @adoption_ns.marshal_with(adoption_page)
    def get(self):
        """List adoption requests"""
        args = list_parser.parse_args()
        return service('queries').list_adoption_requests(
            status=args['status'], pet_id=args['pet_id'], **page_args(args)
        )

    @login_required
    @adoption_ns.doc('submit_adoption_request', security='BearerAuth')
    @adoption_ns.expect(adoption_input)
    @adoption_ns.marshal_with(adoption_model, code=201)
    def post(self):
        """Submit an adoption request for an available pet"""
        data = json_body()
        request = service('adoptions').submit(data.get('petId'), data.get('adopterId') or g.caller.id)
        return request, 201


@adoption_ns.route('/<string:request_id>')
class AdoptionRequestResource(Resource):
    @login_required
    @adoption_ns.doc('get_adoption_request', security='BearerAuth')
    @adoption_ns.marshal_with(adoption_model)
    def get(self, request_id):
        """Get an adoption request by ID"""
        return service('adoptions').get(request_id)

    @role_required(*STAFF_ROLES)
    @adoption_ns.doc('decide_adoption_request', security='BearerAuth')
    @adoption_ns.expect(status_input)
    @adoption_ns.marshal_with(adoption_model)
    def put(self, request_id):
        """Approve or reject a pending adoption request"""
        data = json_body()
        return service('adoptions').transition(request_id, data.get('status'))

    @role_required(Role.ADMIN)
    @adoption_ns.doc('delete_adoption_request', security='BearerAuth')
    def delete(self, request_id):
        """Delete an adoption request (Admin only)"""
        service('adoptions').remove(request_id)
        return {'message': 'Adoption request deleted successfully'}, 200
