import os

import redis
import redis.asyncio

from .aio import AsyncReJSON
from .client import ReJSON

DEFAULT_URL = 'redis://localhost:6379'
URL_ENV = 'REDISJSON_URL'


def resolve_url(url=None):
    """
    Returns ``url``, else ``$REDISJSON_URL``, else the local default server
    """
    return url or os.getenv(URL_ENV) or DEFAULT_URL


def connect(url=None, check_module=False, **kwargs):
    """
    Opens a ``redis.Redis`` on ``url`` and wraps it in ``ReJSON``

    Extra keyword arguments go to ``redis.Redis.from_url``.
    """
    return ReJSON(redis.Redis.from_url(resolve_url(url), **kwargs),
                  check_module=check_module)


def connect_async(url=None, **kwargs):
    return AsyncReJSON(redis.asyncio.Redis.from_url(resolve_url(url), **kwargs))
