import json
import logging

from hello_function.app import create_app
from hello_function.config import FunctionConfig
from hello_function.events import parse_event, to_proxy_result

# Configurar logging
config = FunctionConfig.from_env()
logger = logging.getLogger()
logger.setLevel(config.log_level)

# La app se compone una sola vez por contenedor (cold start)
app = create_app(config, logger=logger)


def handler(event, context):
    """Lambda entrypoint for GET|POST /hello."""
    try:
        request = parse_event(event)
        return to_proxy_result(app.dispatch(request))
    except Exception as e:
        logger.exception(f"Error inesperado: {e}")
        return {
            "statusCode": 500,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"error": "Internal server error", "message": str(e)}),
        }
