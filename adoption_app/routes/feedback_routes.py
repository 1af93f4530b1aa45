from flask import g
from flask_restx import Namespace, Resource, fields
from adoption_app.errors import ValidationError
from adoption_app.models import Role, FeedbackPatch
from adoption_app.utils.auth import login_required, role_required
from .common import UtcDateTime, page_model, pagination_parser, page_args, json_body, service

feedback_ns = Namespace('feedbacks', description='Feedback operations', path='/feedbacks')

feedback_model = feedback_ns.model('Feedback', {
    'id': fields.String(readonly=True),
    'userId': fields.String(attribute='user_id'),
    'petId': fields.String(attribute='pet_id'),
    'eventId': fields.String(attribute='event_id'),
    'feedback': fields.String(required=True),
    'rating': fields.Integer(required=True, min=1, max=5),
    'createdAt': UtcDateTime(attribute='created_at', readonly=True)
})

feedback_input = feedback_ns.model('FeedbackInput', {
    'userId': fields.String(description='Author user ID (defaults to the caller)'),
    'petId': fields.String(),
    'eventId': fields.String(),
    'feedback': fields.String(required=True),
    'rating': fields.Integer(required=True, min=1, max=5)
})

feedback_page = page_model(feedback_ns, 'FeedbackPage', feedback_model)

list_parser = pagination_parser()
list_parser.add_argument('petId', type=str, dest='pet_id', location='args', help='Only feedback about this pet')
list_parser.add_argument('eventId', type=str, dest='event_id', location='args', help='Only feedback about this event')


@feedback_ns.route('')
class FeedbackList(Resource):
    @feedback_ns.expect(list_parser)
    @feedback_ns.marshal_with(feedback_page)
    def get(self):
        """List feedback"""
        args = list_parser.parse_args()
        return service('queries').list_feedbacks(
            pet_id=args['pet_id'], event_id=args['event_id'], **page_args(args)
        )

    @login_required
    @feedback_ns.doc(security='BearerAuth')
    @feedback_ns.expect(feedback_input)
    @feedback_ns.marshal_with(feedback_model, code=201)
    def post(self):
        """Leave feedback, optionally about a pet or an event"""
        data = json_body()
        feedback = service('ledger').add_feedback(
            user_id=data.get('userId') or g.caller.id,
            text=data.get('feedback'),
            rating=data.get('rating'),
            pet_id=data.get('petId'),
            event_id=data.get('eventId')
        )
        return feedback, 201


@feedback_ns.route('/<string:feedback_id>')
class FeedbackResource(Resource):
    @feedback_ns.marshal_with(feedback_model)
    def get(self, feedback_id):
        """Get feedback by ID"""
        return service('ledger').get_feedback(feedback_id)

    @login_required
    @feedback_ns.doc(security='BearerAuth')
    @feedback_ns.expect(feedback_input)
    @feedback_ns.marshal_with(feedback_model)
    def put(self, feedback_id):
        """Update feedback text or rating"""
        patch = FeedbackPatch.from_payload(json_body())
        if patch.is_empty():
            raise ValidationError('body', 'No valid fields to update.')
        return service('ledger').update_feedback(feedback_id, patch)

    @role_required(Role.ADMIN)
    @feedback_ns.doc(security='BearerAuth')
    def delete(self, feedback_id):
        """Delete feedback (Admin only)"""
        service('ledger').remove_feedback(feedback_id)
        return {'message': 'Feedback deleted successfully'}, 200
