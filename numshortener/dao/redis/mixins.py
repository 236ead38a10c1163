"""Client setup shared by Redis-backed DAOs.

`load_config()` hands the Redis backend either a connection string
(`{'url': 'rediss://...'}`, from STORAGE_URL) or discrete options from
AppConfig (`{'host': ..., 'port': ..., 'db': ...}`). `registry_from_config()`
passes them through as `redis_url` / `redis_host` / ... keyword arguments,
and this mixin turns whichever it gets into a client it has PINGed once.

    >>> dao = ShortURLRedisDAO(redis_url='redis://localhost:6379/0', prefix='numshortener:dev')
    >>> dao.keys.ids_key()
    'numshortener:dev:links:ids'
"""

import redis

from numshortener.dao.redis.redis_key_schema import RedisKeySchema
from numshortener.dao.exceptions import DataStoreError


class RedisClientMixin:
    """Give a DAO `self.redis` (a live client) and `self.keys` (its key names)

    A client passed in as `redis_client` is used as is. Otherwise `redis_url`
    wins over the discrete `redis_host`, `redis_port`, `redis_db`,
    `redis_username` and `redis_password` options. Construction fails with
    DataStoreError when the server doesn't answer the initial PING, so a
    misconfigured backend surfaces when the registry is built rather than on
    the first request.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int | str = 6379,
        redis_db: int | str = 0,
        redis_decode_responses: bool = True,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_url: str | None = None,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        if redis_client is None and redis_url is not None:
            redis_client = redis.Redis.from_url(redis_url, decode_responses=redis_decode_responses)
        elif redis_client is None:
            # AppConfig documents may carry port and db as strings
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING the server; False (or DataStoreError when `raise_error`) if it's unreachable"""
        try:
            self.redis.ping()
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            if not raise_error:
                return False
            target = self.redis.connection_pool.connection_kwargs
            raise DataStoreError(
                f"Can't connect to Redis at {target.get('host')}:{target.get('port')}/{target.get('db')}. "
                'Check the provided configuration parameters.'
            ) from e
        return True
