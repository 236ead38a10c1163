from numshortener.dao.redis.redis_key_schema import RedisKeySchema
from numshortener.dao.redis.short_url_redis_dao import ShortURLRedisDAO
from numshortener.dao.redis.mixins import RedisClientMixin


__all__ = [
    'RedisKeySchema',
    'ShortURLRedisDAO',
    'RedisClientMixin',
]
