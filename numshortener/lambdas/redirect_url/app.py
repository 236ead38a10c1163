import logging

from numshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from numshortener.registry import get_registry
from numshortener.exceptions import ConfigurationError, InvalidIdentifierError, IdentifierNotFoundError
from numshortener.dao.exceptions import DataStoreError
from numshortener.utils import guarantee_500_response
from numshortener.utils.responses import response_302, response_invalid_url, response_500
from numshortener.lambdas.redirect_url.constants import (
    MISSING_SHORT_URL,
    INVALID_SHORT_URL,
    SHORT_URL_NOT_FOUND,
    STORAGE_FAILURE,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect URLs (GET /api/shorturl/{short_url})

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract the short URL identifier from the request path
    - Step 2: Resolve the identifier to its original URL
    - Step 3: Redirect client to the original URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: original URL
        200: Invalid URL
            error: 'invalid url' (missing, non-positive, non-integer or unknown identifier)
        500: Internal server error
            error: 'server error' (storage or configuration failure)

    Args:
        event (LambdaEvent):
            API Gateway event payload containing the short_url path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'short_url': '2'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://www.example.com'
    """
    # 1- Extract identifier from request's path
    identifier = (event.get('pathParameters') or {}).get('short_url')
    if identifier is None:
        logger.info("Missing 'short_url' in path. Responding with 200 (invalid url).", extra={'event': MISSING_SHORT_URL})
        return response_invalid_url()

    # 2- Resolve identifier to the original URL
    try:
        original_url = get_registry().resolve(identifier)
    except InvalidIdentifierError:
        logger.info(
            'Short URL is not a positive integer. Responding with 200 (invalid url).',
            extra={'shortUrl': identifier, 'event': INVALID_SHORT_URL},
        )
        return response_invalid_url()
    except IdentifierNotFoundError:
        logger.info(
            'Short URL record not found in database. Responding with 200 (invalid url).',
            extra={'shortUrl': identifier, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_invalid_url()
    except (DataStoreError, ConfigurationError):
        logger.exception(
            'Failed to resolve short URL. Responding with 500.',
            extra={'shortUrl': identifier, 'event': STORAGE_FAILURE},
        )
        return response_500()

    # 3- Redirect client to original URL
    logger.info(
        'Redirecting client to original URL. Responding with 302.',
        extra={'shortUrl': identifier, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=original_url)
