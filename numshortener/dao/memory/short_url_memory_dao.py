"""Data Access Object (DAO) implementation keeping short URLs in process memory

Records live as long as the process does. This is the default backend when
no durable store is configured (local runs, tests, a single warm Lambda
container).

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving ShortURLModel in process memory.

Example:
    >>> from numshortener.models import ShortURLModel
    >>> from numshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> dao.insert(ShortURLModel(original_url='https://www.freecodecamp.org', short_url=1))
    <ShortURLMemoryDAO>
    >>> dao.max_id()
    1
    >>> dao.find('https://www.freecodecamp.org')
    ShortURLModel(original_url='https://www.freecodecamp.org', short_url=1)
"""

import logging
import threading

from beartype import beartype

from numshortener.models import ShortURLModel
from numshortener.dao.base import ShortURLBaseDAO
from numshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


logger = logging.getLogger(__name__)


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for short URL records

    Two hash maps index the records by identifier and by original URL, and the
    highest identifier is tracked as records are inserted. A single reentrant
    lock guards every read and write, so readers never observe a record that
    is present in one index but not the other.

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLMemoryDAO:
            Insert a record. Raises ShortURLAlreadyExistsError when its
            identifier or original URL is already stored.

        get(short_url: int, **kwargs) -> ShortURLModel:
            Retrieve a record by identifier. Raises ShortURLNotFoundError.

        find(original_url: str, **kwargs) -> ShortURLModel | None:
            Retrieve a record by original URL.

        max_id(**kwargs) -> int:
            Highest stored identifier (0 when empty).

        count(**kwargs) -> int:
            Number of stored records.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._urls_by_id: dict[int, str] = {}
        self._ids_by_url: dict[str, int] = {}
        self._max_id = 0

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLMemoryDAO':
        """Insert a record, refusing duplicates of either its identifier or its URL

        Args:
            short_url (ShortURLModel):
                Record to store.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLMemoryDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If the identifier or the original URL is already stored.
        """
        with self._lock:
            if short_url.short_url in self._urls_by_id:
                raise ShortURLAlreadyExistsError(f'Short URL {short_url.short_url} already exists.')
            if short_url.original_url in self._ids_by_url:
                raise ShortURLAlreadyExistsError(f"URL '{short_url.original_url}' is already shortened.")

            self._urls_by_id[short_url.short_url] = short_url.original_url
            self._ids_by_url[short_url.original_url] = short_url.short_url
            self._max_id = max(self._max_id, short_url.short_url)

        logger.debug('Stored short URL %s in memory.', short_url.short_url)
        return self

    @beartype
    def get(self, short_url: int, **kwargs) -> ShortURLModel:
        with self._lock:
            original_url = self._urls_by_id.get(short_url)

        if original_url is None:
            raise ShortURLNotFoundError(f'Short URL {short_url} not found.')

        return ShortURLModel(original_url=original_url, short_url=short_url)

    @beartype
    def find(self, original_url: str, **kwargs) -> ShortURLModel | None:
        with self._lock:
            short_url = self._ids_by_url.get(original_url)

        if short_url is None:
            return None

        return ShortURLModel(original_url=original_url, short_url=short_url)

    def max_id(self, **kwargs) -> int:
        with self._lock:
            return self._max_id

    def count(self, **kwargs) -> int:
        with self._lock:
            return len(self._urls_by_id)
