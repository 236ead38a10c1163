"""Identifier assignment and resolution.

The Registry is the only component that creates URL records. Identifiers
are dense and monotonic: a new URL gets the highest stored identifier plus
one (1 for an empty store). The maximum is always read back from storage,
so a durable backend needs no separately persisted counter.

Classes:
    Registry:
        register(original_url) -> int and resolve(identifier) -> str over a DAO.

Functions:
    registry_from_config(config: dict) -> Registry
        Build a Registry over the DAO selected by `load_config()` output.
    get_registry() -> Registry
        Process-wide Registry shared by all handlers.

Example:
    >>> registry = Registry(ShortURLMemoryDAO())
    >>> registry.register('https://www.freecodecamp.org')
    1
    >>> registry.register('https://www.example.com')
    2
    >>> registry.register('https://www.freecodecamp.org')
    1
    >>> registry.resolve(2)
    'https://www.example.com'
"""

import logging
import functools
import threading
from typing import Any

from numshortener.constants import Backend, Limits
from numshortener.dao import ShortURLBaseDAO, ShortURLMemoryDAO, ShortURLRedisDAO
from numshortener.dao.exceptions import DataStoreError, ShortURLAlreadyExistsError, ShortURLNotFoundError
from numshortener.exceptions import BadConfigurationError, IdentifierNotFoundError, InvalidIdentifierError
from numshortener.models import ShortURLModel
from numshortener.types import LambdaConfiguration
from numshortener.utils.config import app_prefix, load_config


logger = logging.getLogger(__name__)


def parse_identifier(identifier: Any) -> int:
    """Return `identifier` as a positive int

    Accepts ints (but not bools) and strings of ASCII decimal digits.

    Raises:
        InvalidIdentifierError:
            If `identifier` is not a positive integer.

    Example:
        >>> parse_identifier('42')
        42
        >>> parse_identifier('-1')
        Traceback (most recent call last):
            ...
        numshortener.exceptions.InvalidIdentifierError: Invalid short URL '-1'
    """
    if isinstance(identifier, str) and identifier.isascii() and identifier.isdecimal():
        try:
            identifier = int(identifier)
        except ValueError as e:
            # more digits than int() converts (sys.get_int_max_str_digits())
            raise InvalidIdentifierError(f"Invalid short URL '{identifier[:20]}...'") from e

    if isinstance(identifier, bool) or not isinstance(identifier, int) or identifier <= 0:
        raise InvalidIdentifierError(f"Invalid short URL '{identifier}'")
    return identifier


class Registry:
    """Own the identifier-to-URL mapping stored behind a DAO

    Registrations are serialized by a lock, so within a process the sequence
    "look up URL, compute next id, insert" never interleaves. Across processes
    sharing a durable store, the DAO's compare-and-insert rejects the loser
    of a race with ShortURLAlreadyExistsError and the sequence is retried.

    Resolutions take no lock; the DAO guarantees a record is either fully
    visible or absent.

    Attributes:
        dao (ShortURLBaseDAO):
            Storage backend holding the records.
        max_attempts (int):
            How many compare-and-insert races a registration may lose
            before giving up with DataStoreError.
    """

    def __init__(self, dao: ShortURLBaseDAO, max_attempts: int = Limits.MAX_REGISTER_ATTEMPTS):
        self.dao = dao
        self.max_attempts = max_attempts
        self._lock = threading.Lock()

    def register(self, original_url: str) -> int:
        """Return the identifier for `original_url`, assigning the next one if it's new

        Args:
            original_url (str):
                An already validated URL; stored byte-for-byte.

        Returns:
            int: the existing or newly assigned identifier.

        Raises:
            DataStoreError:
                If the store fails, or the registration kept losing races
                against other writers.
        """
        existing = self.dao.find(original_url)
        if existing is not None:
            return existing.short_url

        with self._lock:
            for attempt in range(1, self.max_attempts + 1):
                existing = self.dao.find(original_url)
                if existing is not None:
                    return existing.short_url

                next_id = self.dao.max_id() + 1
                try:
                    self.dao.insert(ShortURLModel(original_url=original_url, short_url=next_id))
                except ShortURLAlreadyExistsError:
                    logger.debug(
                        'Lost a race for short URL %s (attempt %s/%s). Retrying.',
                        next_id,
                        attempt,
                        self.max_attempts,
                        extra={'shortUrl': next_id},
                    )
                    continue

                logger.debug('Assigned short URL %s.', next_id, extra={'shortUrl': next_id})
                return next_id

        raise DataStoreError(f'Gave up registering URL after {self.max_attempts} conflicting attempts.')

    def resolve(self, identifier: int | str) -> str:
        """Return the original URL stored under `identifier`

        Raises:
            InvalidIdentifierError:
                If `identifier` is not a positive integer.
            IdentifierNotFoundError:
                If no URL was ever registered under `identifier`.
            DataStoreError:
                If the store fails.
        """
        short_url = parse_identifier(identifier)
        try:
            return self.dao.get(short_url).original_url
        except ShortURLNotFoundError as e:
            raise IdentifierNotFoundError(f'Short URL {short_url} not found') from e


def registry_from_config(config: LambdaConfiguration) -> Registry:
    """Build a Registry over the backend named in `config`

    Args:
        config (dict):
            `{<backend>: <options>}` as returned by `load_config()`.

    Raises:
        BadConfigurationError:
            If the backend is unknown.
        DataStoreError:
            If the Redis backend is unreachable.
    """
    if len(config) != 1:
        raise BadConfigurationError(f'Expected exactly one storage backend (given: {list(config)})')

    backend, options = next(iter(config.items()))
    if backend == Backend.MEMORY:
        logger.debug('Using process memory as the backend for short URLs.')
        return Registry(ShortURLMemoryDAO())
    if backend == Backend.REDIS:
        logger.debug('Using Redis as the backend for short URLs.')
        redis_config = {f'redis_{k}': v for k, v in (options or {}).items()}
        return Registry(ShortURLRedisDAO(**redis_config, prefix=app_prefix()))

    raise BadConfigurationError(f"Unknown storage backend '{backend}'")


_build_lock = threading.Lock()


@functools.cache
def _build_registry() -> Registry:
    return registry_from_config(load_config())


def get_registry() -> Registry:
    """Return the process-wide Registry built from the application's configuration

    Concurrent first calls build a single Registry. Failed builds (bad
    configuration, unreachable store) are not cached.
    """
    with _build_lock:
        return _build_registry()
