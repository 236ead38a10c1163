"""Helper utilities for AWS lambda functions.

Functions:
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler: Callable) -> Callable
        Decorator: Convert any uncaught handler exception into a 500 response
    request_body(event: dict) -> dict
        Decode an API Gateway request body (JSON or form-urlencoded)

Example:
    Typical usage inside a Lambda handler:

        >>> from numshortener.utils.helpers import request_body
        >>> request_body({'body': '{"url": "https://www.example.com"}'})
        {'url': 'https://www.example.com'}
        >>> request_body({'body': 'url=https%3A%2F%2Fwww.example.com',
        ...               'headers': {'Content-Type': 'application/x-www-form-urlencoded'}})
        {'url': 'https://www.example.com'}
"""

import os
import json
import base64
import binascii
import logging
import functools
from typing import Any
from urllib.parse import parse_qs
from collections.abc import Callable

from numshortener.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from numshortener.exceptions import MissingEnvironmentVariableError
from numshortener.utils.runtime import running_locally
from numshortener.utils.responses import response_500


logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: respond with 500 instead of letting an exception escape the handler

    When running locally the exception is re-raised instead, so the stack trace
    shows up in the SAM console.
    """

    @functools.wraps(handler)
    def wrapper(event: dict, context: Any) -> dict:
        try:
            return handler(event, context)
        except Exception as e:
            if running_locally():
                raise
            logger.exception(
                'Unhandled exception in lambda handler. Responding with 500.',
                extra={'errorCode': getattr(e, 'error_code', UNKNOWN_INTERNAL_SERVER_ERROR)},
            )
            return response_500()

    return wrapper


def _header(event: dict[str, Any], name: str) -> str:
    headers = event.get('headers') or {}
    for key, value in headers.items():
        if key.lower() == name.lower():
            return value or ''
    return ''


def request_body(event: dict[str, Any]) -> dict[str, Any]:
    """Decode the request body of an API Gateway event

    Form-urlencoded bodies are decoded when the Content-Type says so, JSON
    otherwise. Base64-encoded bodies (`isBase64Encoded`) are decoded first.
    For repeated form fields the first value wins.

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        dict: decoded body fields ({} for an empty body)

    Raises:
        ValueError:
            If the body is not valid base64, UTF-8 or JSON, or is JSON but not an object.
    """
    raw = event.get('body') or ''
    if event.get('isBase64Encoded') and raw:
        try:
            raw = base64.b64decode(raw, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValueError('Request body is not valid base64 encoded UTF-8') from e

    if not raw:
        return {}

    if _header(event, 'Content-Type').split(';')[0].strip().lower() == FORM_CONTENT_TYPE:
        return {key: values[0] for key, values in parse_qs(raw, keep_blank_values=True).items()}

    try:
        body = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError('Request body is not valid JSON') from e

    if not isinstance(body, dict):
        raise ValueError('Request body must be a JSON object')
    return body
