"""Data Access Object (DAO) implementation for managing short URL records in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO. Records
are durable and shared by every process pointed at the same Redis database,
so identifier assignment survives restarts without a separately persisted counter.

Responsibilities:
    - Atomically insert records (compare-and-insert via WATCH/MULTI/EXEC);
    - Retrieve records by identifier or by original URL;
    - Derive the highest stored identifier from the stored records;
    - Provide defensive error handling and raise appropriate DAO exceptions.

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving ShortURLModel in a Redis datastore.

Example:
    >>> from numshortener.models import ShortURLModel
    >>> from numshortener.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(redis_url='redis://localhost:6379/0', prefix='numshortener:dev')

    >>> dao.insert(ShortURLModel(original_url='https://www.example.com', short_url=1))
    <ShortURLRedisDAO>

    >>> dao.get(1).original_url
    'https://www.example.com'
    >>> dao.max_id()
    1
"""

import logging

import redis
from beartype import beartype

from numshortener.models import ShortURLModel
from numshortener.dao.base import ShortURLBaseDAO
from numshortener.dao.redis.mixins import RedisClientMixin
from numshortener.dao.redis.helpers import handle_redis_connection_error
from numshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


logger = logging.getLogger(__name__)


def _decode(value: str | bytes) -> str:
    return value.decode('utf-8') if isinstance(value, bytes) else value


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short URL records

    This class implements the ShortURLBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLRedisDAO:
            Insert a record into the id key, the URL index and the id set.
            Raises ShortURLAlreadyExistsError when the identifier or URL is taken
            (including when a concurrent writer touched them mid-transaction).
            Raises DataStoreError on connectivity issues with Redis.

        get(short_url: int, **kwargs) -> ShortURLModel:
            Retrieve a record by identifier.
            Raises ShortURLNotFoundError when the identifier doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.

        find(original_url: str, **kwargs) -> ShortURLModel | None:
            Retrieve a record by original URL via the URL index.
            Raises DataStoreError on connectivity issues with Redis.

        max_id(**kwargs) -> int:
            Highest identifier in the id set (0 when empty).
            Raises DataStoreError on connectivity issues with Redis.

        count(**kwargs) -> int:
            Number of identifiers in the id set.
            Raises DataStoreError on connectivity issues with Redis.
    """

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    @handle_redis_connection_error
    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLRedisDAO':
        """Insert a short URL record into Redis

        The id key and the URL index are WATCHed before the existence checks.
        If another client modifies either of them before EXEC, the transaction
        is aborted by Redis and nothing is written.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the record.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLRedisDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If the identifier or the original URL is already stored.
            DataStoreError:
                If a Redis connection issue occurs during the transaction.

        Example:
            >>> dao.insert(ShortURLModel(original_url='https://example.com', short_url=7))
            <ShortURLRedisDAO>
        """
        link_url_key = self.keys.link_url_key(short_url.short_url)
        url_index_key = self.keys.url_index_key()
        ids_key = self.keys.ids_key()

        # NOTE: The three writes are executed as one MULTI/EXEC transaction
        #       guarded by WATCH, so two writers racing for the same id can't
        #       both succeed:
        #
        #       (lambda 1): WATCH links:7:url links:index
        #                   EXISTS links:7:url => 0
        #                   ... interruption
        #       (lambda 2): WATCH, EXISTS => 0, MULTI, SET links:7:url ..., EXEC => OK
        #       (lambda 1): MULTI, SET links:7:url ..., EXEC => nil (WatchError)
        #
        #       lambda 1 then raises ShortURLAlreadyExistsError and the registry
        #       retries with a freshly computed id.
        with self.redis.pipeline(transaction=True) as pipe:
            try:
                pipe.watch(link_url_key, url_index_key)
                if pipe.exists(link_url_key):
                    raise ShortURLAlreadyExistsError(f'Short URL {short_url.short_url} already exists.')
                if pipe.hexists(url_index_key, short_url.original_url):
                    raise ShortURLAlreadyExistsError(f"URL '{short_url.original_url}' is already shortened.")

                pipe.multi()
                pipe.set(link_url_key, short_url.original_url)
                pipe.hset(url_index_key, short_url.original_url, short_url.short_url)
                pipe.zadd(ids_key, {str(short_url.short_url): short_url.short_url})
                pipe.execute()
            except redis.exceptions.WatchError as e:
                raise ShortURLAlreadyExistsError(f'Short URL {short_url.short_url} was claimed by a concurrent writer.') from e

        logger.debug('Stored short URL %s in Redis.', short_url.short_url, extra={'shortUrl': short_url.short_url})
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, short_url: int, **kwargs) -> ShortURLModel:
        """Retrieve a stored record by identifier

        Args:
            short_url (int):
                The record's identifier.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                The retrieved ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If the identifier does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get(7)
            ShortURLModel(original_url='https://example.com', short_url=7)
        """
        original_url = self.redis.get(self.keys.link_url_key(short_url))
        if original_url is None:
            raise ShortURLNotFoundError(f'Short URL {short_url} not found.')

        return ShortURLModel(original_url=_decode(original_url), short_url=short_url)

    @handle_redis_connection_error
    @beartype
    def find(self, original_url: str, **kwargs) -> ShortURLModel | None:
        short_url = self.redis.hget(self.keys.url_index_key(), original_url)
        if short_url is None:
            return None

        return ShortURLModel(original_url=original_url, short_url=int(short_url))

    @handle_redis_connection_error
    def max_id(self, **kwargs) -> int:
        """Retrieve the highest stored identifier

        Returns:
            int:
                Score of the top member of the id set, 0 when there are no records.

        Example:
            >>> dao.max_id()
            7
        """
        top = self.redis.zrevrange(self.keys.ids_key(), 0, 0, withscores=True)
        if not top:
            return 0

        _, score = top[0]
        return int(score)

    @handle_redis_connection_error
    def count(self, **kwargs) -> int:
        return int(self.redis.zcard(self.keys.ids_key()))
