from flask import g
from flask_restx import Namespace, Resource, fields
from adoption_app.errors import ValidationError
from adoption_app.models import Role, DonationPatch
from adoption_app.utils.auth import login_required, role_required
from .common import UtcDateTime, page_model, pagination_parser, page_args, json_body, service

donation_ns = Namespace('donations', description='Donation operations', path='/donations')

donation_model = donation_ns.model('Donation', {
    'id': fields.String(readonly=True),
    'donorId': fields.String(attribute='donor_id'),
    'amount': fields.Float(required=True),
    'createdAt': UtcDateTime(attribute='created_at', readonly=True)
})

donation_input = donation_ns.model('DonationInput', {
    'donorId': fields.String(description='Donor ID (defaults to the caller)'),
    'amount': fields.Float(required=True)
})

donation_page = page_model(donation_ns, 'DonationPage', donation_model)
list_parser = pagination_parser()


@donation_ns.route('')
class DonationList(Resource):
    @login_required
    @donation_ns.doc(security='BearerAuth')
    @donation_ns.expect(list_parser)
    @donation_ns.marshal_with(donation_page)
    def get(self):
        """List donations"""
        args = list_parser.parse_args()
        return service('queries').list_donations(**page_args(args))

    @login_required
    @donation_ns.doc(security='BearerAuth')
    @donation_ns.expect(donation_input)
    @donation_ns.marshal_with(donation_model, code=201)
    def post(self):
        """Record a donation"""
        data = json_body()
        donation = service('ledger').add_donation(data.get('donorId') or g.caller.id, data.get('amount'))
        return donation, 201


@donation_ns.route('/<string:donation_id>')
class DonationResource(Resource):
    @login_required
    @donation_ns.doc(security='BearerAuth')
    @donation_ns.marshal_with(donation_model)
    def get(self, donation_id):
        """Get a donation by ID"""
        return service('ledger').get_donation(donation_id)

    @role_required(Role.ADMIN)
    @donation_ns.doc(security='BearerAuth')
    @donation_ns.expect(donation_input)
    @donation_ns.marshal_with(donation_model)
    def put(self, donation_id):
        """Correct a donation amount (Admin only)"""
        patch = DonationPatch.from_payload(json_body())
        if patch.is_empty():
            raise ValidationError('body', 'No valid fields to update.')
        return service('ledger').update_donation(donation_id, patch)

    @role_required(Role.ADMIN)
    @donation_ns.doc(security='BearerAuth')
    def delete(self, donation_id):
        """Delete a donation (Admin only)"""
        service('ledger').remove_donation(donation_id)
        return {'message': 'Donation deleted successfully'}, 200
