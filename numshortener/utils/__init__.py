from numshortener.utils.config import app_env, app_name, app_prefix, load_config
from numshortener.utils.helpers import require_environment, guarantee_500_response, request_body
from numshortener.utils.logging import initialize_logging
from numshortener.utils.validator import URLValidator, get_validator


__all__ = [
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'require_environment',
    'guarantee_500_response',
    'request_body',
    'initialize_logging',
    'URLValidator',
    'get_validator',
]
