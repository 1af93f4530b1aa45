from flask import g
from flask_restx import Namespace, Resource, fields
from adoption_app.errors import Forbidden
from adoption_app.models import Role
from adoption_app.services import user_service
from adoption_app.utils.auth import issue_token, login_required
from .common import json_body, store
from .users_routes import user_model

auth_ns = Namespace('auth', description='Authentication operations', path='/auth')

register_model = auth_ns.model('Register', {
    'name': fields.String(required=True, description='Display name'),
    'contact': fields.String(required=True, description='Login contact (email or phone)'),
    'password': fields.String(required=True, description='Password'),
    'role': fields.String(description='Owner, Shelter or Adopter (default Adopter)')
})

login_model = auth_ns.model('Login', {
    'contact': fields.String(required=True, description='Login contact'),
    'password': fields.String(required=True, description='Password')
})

token_model = auth_ns.model('Token', {
    'message': fields.String(),
    'access_token': fields.String(),
    'user': fields.Nested(user_model)
})


@auth_ns.route('/roles')
class Roles(Resource):
    def get(self):
        """List the available user roles"""
        return {'roles': Role.values()}, 200


@auth_ns.route('/register')
class Register(Resource):
    @auth_ns.expect(register_model)
    @auth_ns.marshal_with(token_model, code=201)
    def post(self):
        """Register a new user (default role Adopter)"""
        data = json_body()
        role = data.get('role') or Role.ADOPTER.value
        if isinstance(role, str) and role.strip().lower() == Role.ADMIN.value.lower():
            raise Forbidden('The Admin role cannot be self-assigned.')
        user = user_service.create_user(store(), data.get('name'), data.get('contact'), role, data.get('password'))
        return {
            'message': 'User registered successfully.',
            'access_token': issue_token(user),
            'user': user
        }, 201


@auth_ns.route('/login')
class Login(Resource):
    @auth_ns.expect(login_model)
    @auth_ns.marshal_with(token_model)
    def post(self):
        """Log in with contact and password"""
        data = json_body()
        user = user_service.authenticate(store(), data.get('contact'), data.get('password'))
        return {
            'message': 'Logged in successfully.',
            'access_token': issue_token(user),
            'user': user
        }, 200


@auth_ns.route('/verify')
class VerifyToken(Resource):
    @login_required
    @auth_ns.doc(security='BearerAuth')
    @auth_ns.marshal_with(token_model)
    def get(self):
        """Check that the token is valid"""
        return {
            'message': 'Token is valid.',
            'user': user_service.get_user(store(), g.caller.id)
        }, 200
