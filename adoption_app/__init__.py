import os
import logging
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager
from flask_cors import CORS
from flask_bcrypt import Bcrypt
from flask_restx import Api
from adoption_app.config import config_by_name

db = SQLAlchemy()
jwt = JWTManager()
bcrypt = Bcrypt()


def build_api(app):
    return Api(
        app,
        title='Pet Adoption API',
        version='1.0',
        description='Users, pets, adoption requests, care events, feedback and donations',
        doc='/docs',
        ui_config={
            'displayOperationId': True,
            'docExpansion': 'none',
            'filter': True,
            'defaultModelsExpandDepth': 1,
            'defaultModelExpandDepth': 1
        },
        security=[{'BearerAuth': []}],
        authorizations={
            'BearerAuth': {
                'type': 'apiKey',
                'in': 'header',
                'name': 'Authorization',
                'description': 'Enter your JWT token as "Bearer <token>"'
            }
        }
    )


def create_app(config_name=None, overrides=None):
    config_name = config_name or os.getenv('FLASK_ENV', 'development')
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    db.init_app(app)
    jwt.init_app(app)
    bcrypt.init_app(app)

    # Enable CORS
    CORS(app, resources={r"/*": {"origins": app.config.get('CORS_ORIGINS', '*')}},
         supports_credentials=app.config.get('CORS_SUPPORTS_CREDENTIALS', True),
         allow_headers=app.config.get('CORS_ALLOW_HEADERS', ["Content-Type", "Authorization"]),
         methods=app.config.get('CORS_METHODS', ["GET", "POST", "PUT", "DELETE", "OPTIONS"]))

    # One store, workflow, ledger and query facade per process
    from .services.store import Store
    from .services.adoption_service import AdoptionWorkflow
    from .services.ledger_service import FeedbackAndDonationLedger
    from .services.query_service import QueryFacade

    store = Store(db.session)
    app.services = {
        'store': store,
        'adoptions': AdoptionWorkflow(store),
        'ledger': FeedbackAndDonationLedger(store),
        'queries': QueryFacade(store, max_limit=app.config['MAX_PAGE_LIMIT']),
    }

    # Register API namespaces
    from .routes import register_namespaces
    from .routes.errors import register_error_handlers

    api = build_api(app)
    register_namespaces(api)
    register_error_handlers(api)

    with app.app_context():
        db.create_all()  # Create all tables

    logging.getLogger(__name__).info(f"Pet adoption app created for '{config_name}' environment")
    return app
