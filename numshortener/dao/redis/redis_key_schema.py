import functools
from collections.abc import Callable


__all__ = ['RedisKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Provide standardized Redis keys for storing data models.

    An optional prefix can be provided to namespace all generated keys.
    It is highly encouraged to set a custom prefix for each app and environment,
    e.g. "numshortener:prod" or "numshortener:dev".

    Keys:
        links:<id>:url   STRING   original URL of a record
        links:index      HASH     original URL -> id
        links:ids        ZSET     every stored id, scored by itself
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def link_url_key(self, short_url: int) -> str:
        return f'links:{short_url}:url'

    @prefix_key
    def url_index_key(self) -> str:
        return 'links:index'

    @prefix_key
    def ids_key(self) -> str:
        return 'links:ids'
