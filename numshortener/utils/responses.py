"""API Gateway (Lambda Proxy) response builders shared by all handlers.

Clients only ever see three JSON shapes besides a successful body:
    {"error": "invalid url"}   (200)
    {"error": "bad request"}   (400)
    {"error": "server error"}  (500)
"""

import json
from typing import Any

from numshortener.constants import INVALID_URL, SERVER_ERROR, BAD_REQUEST
from numshortener.types import LambdaResponse


CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET',
}


def response_json(body: dict[str, Any], status_code: int = 200) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **CORS_HEADERS},
        'body': json.dumps(body),
    }


def response_invalid_url() -> LambdaResponse:
    return response_json({'error': INVALID_URL})


def response_400() -> LambdaResponse:
    return response_json({'error': BAD_REQUEST}, status_code=400)


def response_500() -> LambdaResponse:
    return response_json({'error': SERVER_ERROR}, status_code=500)


def response_302(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 302,
        'headers': {'Location': location, **CORS_HEADERS},
        'body': '',  # no body needed for redirects
    }
