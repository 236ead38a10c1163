from numshortener.dao.base import ShortURLBaseDAO
from numshortener.dao.memory import ShortURLMemoryDAO
from numshortener.dao.redis import ShortURLRedisDAO


__all__ = [
    'ShortURLBaseDAO',
    'ShortURLMemoryDAO',
    'ShortURLRedisDAO',
]
