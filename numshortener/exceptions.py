"""Application-specific exceptions.

Every exception carries an `error_code`, which is logged but never sent to
clients. Clients only ever see the collapsed 'invalid url' / 'server error'
messages.

Classes:
    NumShortenerError:
        Base exception for all application-specific errors.

    ValidationError:
        A candidate string is not an acceptable URL.
        Subclasses: MalformedURLError, UnsupportedSchemeError, UnresolvableHostError.

    ResolutionError:
        An identifier can't be resolved to a URL.
        Subclasses: InvalidIdentifierError, IdentifierNotFoundError.

    ConfigurationError:
        The application is misconfigured.
        Subclasses: MissingEnvironmentVariableError, BadConfigurationError.

Data store exceptions live in `numshortener.dao.exceptions`.
"""


class NumShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:numshortener_error'


class ValidationError(NumShortenerError):
    """Base exception for rejected URL candidates."""

    error_code = 'validation:validation_error'


class MalformedURLError(ValidationError):
    """Raised when a candidate is not a parsable absolute URL."""

    error_code = 'validation:malformed_url'


class UnsupportedSchemeError(ValidationError):
    """Raised when a URL scheme is neither http nor https."""

    error_code = 'validation:unsupported_scheme'


class UnresolvableHostError(ValidationError):
    """Raised when a URL's hostname can't be resolved (or the lookup times out)."""

    error_code = 'validation:unresolvable_host'


class ResolutionError(NumShortenerError):
    """Base exception for identifiers which can't be resolved."""

    error_code = 'resolution:resolution_error'


class InvalidIdentifierError(ResolutionError):
    """Raised when an identifier is not a positive integer."""

    error_code = 'resolution:invalid_identifier'


class IdentifierNotFoundError(ResolutionError):
    """Raised when no URL was ever registered under an identifier."""

    error_code = 'resolution:identifier_not_found'


class ConfigurationError(NumShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError, KeyError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
