"""URL validation performed once, when a URL is registered.

A candidate is accepted when it:
    1. parses as an absolute URL with a scheme and a hostname,
    2. uses the http or https scheme (case-insensitive),
    3. has a hostname that resolves (DNS or equivalent) within a timeout.

The accepted string is returned exactly as given. Redirects never
re-validate, so a host that later disappears doesn't invalidate a link.

The hostname lookup is an injected callable so tests never touch the network:

    >>> validator = URLValidator(resolver=lambda hostname: None)
    >>> validator.validate('https://www.example.com')
    'https://www.example.com'
    >>> validator.validate('ftp://example.com')
    Traceback (most recent call last):
        ...
    numshortener.exceptions.UnsupportedSchemeError: Unsupported scheme 'ftp' in 'ftp://example.com'
"""

import socket
import logging
import functools
import threading
from typing import Any
from urllib.parse import urlsplit
from collections.abc import Callable
from concurrent.futures import Future, TimeoutError as FutureTimeoutError

from beartype import beartype

from numshortener.constants import Timeout
from numshortener.exceptions import MalformedURLError, UnsupportedSchemeError, UnresolvableHostError
from numshortener.utils.config import dns_lookup_timeout


logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = frozenset({'http', 'https'})

type HostResolver = Callable[[str], Any]


def dns_lookup(hostname: str) -> list:
    """Resolve a hostname with the system resolver. Raises OSError on failure."""
    return socket.getaddrinfo(hostname, None)


def _has_forbidden_characters(candidate: str) -> bool:
    return any(char.isspace() or ord(char) < 0x20 or ord(char) == 0x7F for char in candidate)


class URLValidator:
    """Validate candidate strings as resolvable http(s) URLs

    Every hostname lookup runs on a daemon thread of its own, so its timeout
    starts when the lookup does and a hung lookup never delays another
    request. A lookup that outlives `timeout` is abandoned, not interrupted.

    Attributes:
        resolver (Callable[[str], Any]):
            Hostname lookup; any OSError it raises means "unresolvable".
        timeout (float):
            Upper bound on a single lookup, in seconds.
    """

    def __init__(
        self,
        resolver: HostResolver = dns_lookup,
        timeout: float = Timeout.DNS_LOOKUP,
    ):
        self.resolver = resolver
        self.timeout = timeout

    def hostname(self, candidate: str) -> str:
        """Parse `candidate` and return its hostname

        Raises:
            MalformedURLError:
                If the candidate is empty, contains whitespace or control
                characters, can't be parsed, or lacks a scheme or a hostname.
            UnsupportedSchemeError:
                If the scheme is neither http nor https.
        """
        if not candidate or _has_forbidden_characters(candidate):
            raise MalformedURLError(f"Malformed URL '{candidate}'")

        try:
            components = urlsplit(candidate)
            components.port  # raises ValueError on a non-numeric or out of range port
        except ValueError as e:
            raise MalformedURLError(f"Malformed URL '{candidate}'") from e

        if not components.scheme:
            raise MalformedURLError(f"Missing scheme in '{candidate}'")
        if components.scheme.lower() not in ALLOWED_SCHEMES:
            raise UnsupportedSchemeError(f"Unsupported scheme '{components.scheme}' in '{candidate}'")
        if not components.hostname:
            raise MalformedURLError(f"Missing hostname in '{candidate}'")

        return components.hostname

    def _start_lookup(self, hostname: str) -> Future:
        future: Future = Future()
        future.set_running_or_notify_cancel()

        def lookup():
            try:
                result = self.resolver(hostname)
            except Exception as e:
                future.set_exception(e)
            else:
                future.set_result(result)

        threading.Thread(target=lookup, name=f'dns-lookup-{hostname}', daemon=True).start()
        return future

    def resolve_host(self, hostname: str) -> None:
        """Look `hostname` up, bounded by the validator's timeout

        Raises:
            UnresolvableHostError:
                If the lookup fails or doesn't complete in time.
        """
        future = self._start_lookup(hostname)
        try:
            future.result(timeout=self.timeout)
        except FutureTimeoutError as e:
            raise UnresolvableHostError(f"Lookup of '{hostname}' timed out after {self.timeout}s") from e
        except (OSError, UnicodeError) as e:
            raise UnresolvableHostError(f"Can't resolve host '{hostname}'") from e

    @beartype
    def validate(self, candidate: str) -> str:
        """Validate a candidate URL and return it unchanged

        Args:
            candidate (str):
                The string submitted for shortening.

        Returns:
            str: `candidate`, unmodified.

        Raises:
            MalformedURLError, UnsupportedSchemeError, UnresolvableHostError:
                All subclasses of ValidationError.

        Example:
            >>> validator.validate('https://www.freecodecamp.org')
            'https://www.freecodecamp.org'
        """
        hostname = self.hostname(candidate)
        self.resolve_host(hostname)
        logger.debug('Validated URL.', extra={'hostname': hostname})
        return candidate


@functools.cache
def get_validator() -> URLValidator:
    """Return the process-wide validator, using the system resolver"""
    return URLValidator(timeout=dns_lookup_timeout())
