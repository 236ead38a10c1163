import logging

from numshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from numshortener.registry import get_registry
from numshortener.exceptions import ConfigurationError, ValidationError
from numshortener.dao.exceptions import DataStoreError
from numshortener.utils import get_validator, guarantee_500_response, request_body
from numshortener.utils.responses import response_json, response_invalid_url, response_400, response_500
from numshortener.lambdas.shorten_url.constants import (
    URL_SHORTENED,
    MISSING_URL,
    INVALID_URL,
    MALFORMED_BODY,
    STORAGE_FAILURE,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs (POST /api/shorturl)

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Extract the `url` field from the request body (JSON or form)
    - Step 2: Validate the URL (scheme and hostname lookup)
    - Step 3: Register the URL, reusing its identifier if it's already known
    - Step 4: Respond to user with 200 success

    HTTP responses:
        200: URL shortened (or already shortened)
            original_url: the submitted URL, unchanged
            short_url: its integer identifier
        200: Invalid URL
            error: 'invalid url' (missing, malformed, bad scheme or unresolvable host)
        400: Bad client request
            error: 'bad request' (body can't be decoded)
        500: Internal server error
            error: 'server error' (storage or configuration failure)

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object containing runtime information.

    Returns:
        LambdaResponse:
            JSON-serializable response following API Gateway Lambda Proxy
            output format.

    Example:
        >>> event = {'body': '{"url": "https://www.freecodecamp.org"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])
        {'original_url': 'https://www.freecodecamp.org', 'short_url': 1}
    """
    # 1- Extract original URL from request body
    try:
        body = request_body(event)
    except ValueError:
        logger.info('Undecodable request body. Responding with 400.', extra={'event': MALFORMED_BODY})
        return response_400()

    original_url = body.get('url')
    if not original_url or not isinstance(original_url, str):
        logger.info("Missing 'url' in request body. Responding with 200 (invalid url).", extra={'event': MISSING_URL})
        return response_invalid_url()

    # 2- Validate URL
    try:
        get_validator().validate(original_url)
    except ValidationError as e:
        logger.info(
            'URL failed validation. Responding with 200 (invalid url).',
            extra={'event': INVALID_URL, 'errorCode': e.error_code, 'reason': str(e)},
        )
        return response_invalid_url()

    # 3- Register URL (new or existing identifier)
    try:
        short_url = get_registry().register(original_url)
    except (DataStoreError, ConfigurationError):
        logger.exception('Failed to register URL. Responding with 500.', extra={'event': STORAGE_FAILURE})
        return response_500()

    # 4- Return successful response to user
    logger.info('Shortened URL. Responding with 200.', extra={'event': URL_SHORTENED, 'shortUrl': short_url})
    return response_json({'original_url': original_url, 'short_url': short_url})
