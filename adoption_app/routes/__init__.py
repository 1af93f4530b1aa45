# adoption_app/routes/__init__.py
from .auth_routes import auth_ns
from .users_routes import users_ns
from .pet_routes import pet_ns
from .adoption_routes import adoption_ns
from .event_routes import event_ns
from .feedback_routes import feedback_ns
from .donation_routes import donation_ns


def register_namespaces(api):
    api.add_namespace(auth_ns)
    api.add_namespace(users_ns)
    api.add_namespace(pet_ns)
    api.add_namespace(adoption_ns)
    api.add_namespace(event_ns)
    api.add_namespace(feedback_ns)
    api.add_namespace(donation_ns)
