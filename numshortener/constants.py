from enum import StrEnum


class Timeout:
    """Timeouts in seconds."""

    # Upper bound on a single hostname lookup during URL validation
    DNS_LOOKUP = 5.0
    # Local AppConfig agent request
    APPCONFIG_AGENT = 5


class Limits:
    """Registry limits."""

    # Compare-and-insert attempts before a registration gives up
    MAX_REGISTER_ATTEMPTS = 5


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        DNS_LOOKUP_TIMEOUT = 'DNS_LOOKUP_TIMEOUT'

    class Storage(StrEnum):
        URL = 'STORAGE_URL'  # e.g. redis://localhost:6379/0 or memory://

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


class Backend(StrEnum):
    """Supported storage backends."""

    MEMORY = 'memory'
    REDIS = 'redis'


# Client-facing error messages
INVALID_URL = 'invalid url'
SERVER_ERROR = 'server error'
BAD_REQUEST = 'bad request'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
