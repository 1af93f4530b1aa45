import enum
from datetime import timezone
from flask import current_app, request
from flask_restx import fields, reqparse
from adoption_app.errors import ValidationError


class EnumValue(fields.Raw):
    """Serializes an enum member as its label."""
    __schema_type__ = 'string'

    def format(self, value):
        return value.value if isinstance(value, enum.Enum) else value


class UtcDateTime(fields.DateTime):
    """ISO-8601 date-time with an explicit offset.

    SQLite hands timestamps back without tzinfo; they are stored as UTC.
    """

    def format(self, value):
        value = self.parse(value)
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return super().format(value)


def page_model(ns, name, item_model):
    return ns.model(name, {
        'items': fields.List(fields.Nested(item_model)),
        'page': fields.Integer(description='Page number, starting at 1'),
        'limit': fields.Integer(description='Page size'),
        'total': fields.Integer(description='Matching records across all pages')
    })


def pagination_parser():
    parser = reqparse.RequestParser()
    parser.add_argument('page', type=int, default=1, location='args', help='Page number, starting at 1')
    parser.add_argument('limit', type=int, location='args', help='Page size')
    return parser


def page_args(args):
    limit = args['limit']
    if limit is None:
        limit = current_app.config['DEFAULT_PAGE_LIMIT']
    return {'page': args['page'], 'limit': limit}


def json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('body', 'Invalid input: the request body must be a JSON object.')
    return data


def store():
    return current_app.services['store']


def service(name):
    return current_app.services[name]
