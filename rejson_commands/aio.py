"""
asyncio flavour of ``ReJSON``, over ``redis.asyncio`` clients.

Arguments and reply coercion are the same as the synchronous wrapper's; the
only suspension point of each method is the ``execute_command`` round trip.
"""

import json
import logging

import redis
import redis.asyncio
from redis.asyncio.cluster import RedisCluster

from . import arguments
from .client import (MODULE_NAME, STRAPPEND_NOT_WORKING, deserialize_document,
                     module_loaded)
from .commands import (DEFAULT_ARRINDEX_START, DEFAULT_ARRINDEX_STOP,
                       DEFAULT_ARRPOP_INDEX, DEFAULT_STRAPPEND_JSON,
                       ROOT_PATH, SetOption)
from .exceptions import InvalidClientError, ModuleNotLoadedError

logger = logging.getLogger(__name__)


class AsyncReJSON(object):
    def __init__(self, client):
        if not isinstance(client, (redis.asyncio.Redis, RedisCluster)):
            raise InvalidClientError('Invalid asyncio Redis client: {!r}'.format(client))
        self._redis = client

    @property
    def client(self):
        return self._redis

    async def _execute(self, call):
        logger.debug('%s with %d argument(s)', call.name, len(call.args))
        return call.coerce(await self._redis.execute_command(call.name, *call.args))

    async def verify_module(self):
        try:
            modules = await self._redis.execute_command('MODULE', 'LIST')
        except redis.exceptions.ResponseError as e:
            logger.warning('MODULE LIST failed: %s', e)
            raise ModuleNotLoadedError(
                '\'MODULE LIST\' command erred - you need to use Redis v4 or above') from e

        if not module_loaded(modules):
            logger.warning('%s module is not loaded', MODULE_NAME)
            raise ModuleNotLoadedError('ReJSON module not loaded in Redis')
        logger.info('%s module is loaded', MODULE_NAME)

    async def delete(self, key, path=ROOT_PATH):
        return await self._execute(arguments.delete(key, path))

    async def forget(self, key, path=ROOT_PATH):
        return await self.delete(key, path)

    async def get(self, key, *paths, no_escape=True):
        return await self._execute(arguments.get(key, paths, no_escape))

    async def get_as(self, key, deserialize=json.loads):
        raw = await self.get(key)
        return deserialize_document(key, raw, deserialize)

    async def mget(self, keys, path=ROOT_PATH):
        return await self._execute(arguments.mget(keys, path))

    async def set(self, key, json_value, path=ROOT_PATH, option=SetOption.DEFAULT):
        return await self._execute(arguments.set_json(key, json_value, path, option))

    async def type(self, key, path=ROOT_PATH):
        return await self._execute(arguments.json_type(key, path))

    async def exists(self, key, path=ROOT_PATH):
        return await self._execute(arguments.exists(key, path))

    async def numincrby(self, key, path, number):
        return await self._execute(arguments.numincrby(key, path, number))

    async def nummultby(self, key, path, number):
        return await self._execute(arguments.nummultby(key, path, number))

    async def strappend(self, key, path=ROOT_PATH, json_string=DEFAULT_STRAPPEND_JSON):
        raise NotImplementedError(STRAPPEND_NOT_WORKING)

    async def strlen(self, key, path=ROOT_PATH):
        return await self._execute(arguments.strlen(key, path))

    async def arrappend(self, key, path, *json_values):
        return await self._execute(arguments.arrappend(key, path, json_values))

    async def arrindex(self, key, path, json_scalar, start=DEFAULT_ARRINDEX_START,
                       stop=DEFAULT_ARRINDEX_STOP):
        return await self._execute(
            arguments.arrindex(key, path, json_scalar, start, stop))

    async def arrinsert(self, key, path, index, *json_values):
        return await self._execute(
            arguments.arrinsert(key, path, index, json_values))

    async def arrlen(self, key, path=ROOT_PATH):
        return await self._execute(arguments.arrlen(key, path))

    async def arrpop(self, key, path=ROOT_PATH, index=DEFAULT_ARRPOP_INDEX):
        return await self._execute(arguments.arrpop(key, path, index))

    async def arrtrim(self, key, path, start, stop):
        return await self._execute(arguments.arrtrim(key, path, start, stop))

    async def objkeys(self, key, path=ROOT_PATH):
        return await self._execute(arguments.objkeys(key, path))

    async def objlen(self, key, path=ROOT_PATH):
        return await self._execute(arguments.objlen(key, path))

    async def debug_memory(self, key, path=ROOT_PATH):
        return await self._execute(arguments.debug_memory(key, path))

    async def resp(self, key, path=ROOT_PATH):
        return await self._execute(arguments.resp(key, path))
