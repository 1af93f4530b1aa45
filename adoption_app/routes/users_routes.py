from flask import g
from flask_restx import Namespace, Resource, fields
from adoption_app.errors import Forbidden, ValidationError
from adoption_app.models import Role, UserPatch
from adoption_app.services import user_service
from adoption_app.utils.auth import login_required, role_required
from .common import UtcDateTime, EnumValue, page_model, pagination_parser, page_args, json_body, store, service

users_ns = Namespace('users', description='Operations related to users', path='/users')

user_model = users_ns.model('User', {
    'id': fields.String(readonly=True),
    'name': fields.String(required=True),
    'contact': fields.String(required=True),
    'role': EnumValue(description='Owner, Shelter, Adopter or Admin'),
    'createdAt': UtcDateTime(attribute='created_at', readonly=True)
})

user_input = users_ns.model('UserInput', {
    'name': fields.String(required=True),
    'contact': fields.String(required=True),
    'role': fields.String(required=True, description='Owner, Shelter, Adopter or Admin'),
    'password': fields.String(required=True)
})

user_page = page_model(users_ns, 'UserPage', user_model)
list_parser = pagination_parser()


@users_ns.route('')
class UserList(Resource):
    @login_required
    @users_ns.doc(security='BearerAuth')
    @users_ns.expect(list_parser)
    @users_ns.marshal_with(user_page)
    def get(self):
        """List users"""
        args = list_parser.parse_args()
        return service('queries').list_users(**page_args(args))

    @role_required(Role.ADMIN)
    @users_ns.doc(security='BearerAuth')
    @users_ns.expect(user_input)
    @users_ns.marshal_with(user_model, code=201)
    def post(self):
        """Create a user with any role (Admin only)"""
        data = json_body()
        user = user_service.create_user(
            store(), data.get('name'), data.get('contact'), data.get('role'), data.get('password')
        )
        return user, 201


@users_ns.route('/<string:user_id>')
class UserResource(Resource):
    @login_required
    @users_ns.doc(security='BearerAuth')
    @users_ns.marshal_with(user_model)
    def get(self, user_id):
        """Get a user by ID"""
        return user_service.get_user(store(), user_id)

    @login_required
    @users_ns.doc(security='BearerAuth')
    @users_ns.expect(user_input)
    @users_ns.marshal_with(user_model)
    def put(self, user_id):
        """Update a user (self or Admin; role changes Admin only)"""
        caller = g.caller
        if not caller.is_admin and caller.id != user_id:
            raise Forbidden('Users can only update their own profile.')
        patch = UserPatch.from_payload(json_body())
        if patch.role is not None and not caller.is_admin:
            raise Forbidden('Only admins can change roles.')
        if patch.is_empty():
            raise ValidationError('body', 'No valid fields to update.')
        return user_service.update_user(store(), user_id, patch)

    @role_required(Role.ADMIN)
    @users_ns.doc(security='BearerAuth')
    def delete(self, user_id):
        """Delete a user (Admin only)"""
        if user_id == g.caller.id:
            raise ValidationError('id', 'You cannot delete your own account.')
        user_service.delete_user(store(), user_id)
        return {'message': 'User deleted successfully'}, 200
