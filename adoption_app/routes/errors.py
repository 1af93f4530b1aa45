import logging
from adoption_app.errors import AdoptionAppError

logger = logging.getLogger(__name__)


def register_error_handlers(api):
    @api.errorhandler(AdoptionAppError)
    def handle_app_error(error):
        if error.status_code >= 500:
            logger.error(f"{error.code}: {error.message}")
        else:
            logger.info(f"{error.code}: {error.message}")
        return error.to_response(), error.status_code
