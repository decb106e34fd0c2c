import json
import logging

import redis
from redis.cluster import RedisCluster

from . import arguments
from .commands import (DEFAULT_ARRINDEX_START, DEFAULT_ARRINDEX_STOP,
                       DEFAULT_ARRPOP_INDEX, DEFAULT_STRAPPEND_JSON,
                       ROOT_PATH, SetOption)
from .exceptions import (DeserializationError, InvalidClientError,
                         ModuleNotLoadedError)
from .reply import NullReply, as_text

logger = logging.getLogger(__name__)

MODULE_NAME = 'ReJSON'

STRAPPEND_NOT_WORKING = "JSON.STRAPPEND doesn't work, not sure what's wrong with it"


def _module_name(entry):
    if isinstance(entry, dict):
        name = entry.get('name', entry.get(b'name'))
    else:
        # [name, <name>, ver, <version>, ...]
        name = entry[1] if len(entry) > 1 else None
    if isinstance(name, bytes):
        name = name.decode('utf-8')
    return name


def module_loaded(modules):
    """
    Looks for ReJSON in a ``MODULE LIST`` reply
    """
    return any(_module_name(m) == MODULE_NAME for m in modules or ())


def deserialize_document(key, raw, deserialize):
    """
    Turns the reply of a root ``JSON.GET`` into the caller's object
    """
    if isinstance(raw, NullReply):
        raise DeserializationError('No JSON document stored at {!r}'.format(key))
    text = as_text(raw)
    try:
        return deserialize(text)
    except Exception as e:
        raise DeserializationError(
            'Could not deserialize the document at {!r}: {}'.format(key, e)) from e


class ReJSON(object):
    """A simple wrapper for ReJSON"""
    def __init__(self, client, check_module=False):
        # Be strict about the Redis client
        if not isinstance(client, (redis.Redis, RedisCluster)):
            raise InvalidClientError('Invalid Redis client: {!r}'.format(client))

        self._redis = client
        if check_module:
            self.verify_module()

    @property
    def client(self):
        return self._redis

    def _execute(self, call):
        logger.debug('%s with %d argument(s)', call.name, len(call.args))
        return call.coerce(self._redis.execute_command(call.name, *call.args))

    def verify_module(self):
        """
        Ensures that ReJSON is loaded in the server
        """
        try:
            modules = self._redis.execute_command('MODULE', 'LIST')
        except redis.exceptions.ResponseError as e:
            logger.warning('MODULE LIST failed: %s', e)
            raise ModuleNotLoadedError(
                '\'MODULE LIST\' command erred - you need to use Redis v4 or above') from e

        if not module_loaded(modules):
            logger.warning('%s module is not loaded', MODULE_NAME)
            raise ModuleNotLoadedError('ReJSON module not loaded in Redis')
        logger.info('%s module is loaded', MODULE_NAME)

    def delete(self, key, path=ROOT_PATH):
        """
        Deletes the value at ``path`` in ``key``

        Missing keys and paths are ignored and count as 0 deleted. Deleting the
        root deletes the key.
        """
        return self._execute(arguments.delete(key, path))

    def forget(self, key, path=ROOT_PATH):
        """
        An alias for JSON.del
        """
        return self.delete(key, path)

    def get(self, key, *paths, no_escape=True):
        """
        Gets the serialized value from the ReJSON key ``key``.

        Additional arguments are paths in the value. If none are given, root is
        returned.
        """
        return self._execute(arguments.get(key, paths, no_escape))

    def get_as(self, key, deserialize=json.loads):
        """
        Gets the whole document at ``key`` and hands its text to ``deserialize``
        """
        raw = self.get(key)
        return deserialize_document(key, raw, deserialize)

    def mget(self, keys, path=ROOT_PATH):
        """
        Gets the value at ``path`` from each of ``keys``, ``NullReply`` for
        keys or paths that don't exist
        """
        return self._execute(arguments.mget(keys, path))

    def set(self, key, json_value, path=ROOT_PATH, option=SetOption.DEFAULT):
        """
        Sets the ReJSON key ``key`` to the JSON text ``json_value`` at ``path``

        New keys can only be set at the root. ``option`` restricts the write to
        paths that don't exist yet (``IF_NOT_EXISTS``) or already do
        (``IF_EXISTS``).
        """
        return self._execute(arguments.set_json(key, json_value, path, option))

    def type(self, key, path=ROOT_PATH):
        """
        Gets the type of a value from key ``key`` at ``path``
        """
        return self._execute(arguments.json_type(key, path))

    def exists(self, key, path=ROOT_PATH):
        """
        Checks if the value in ``key`` at ``path`` exists
        """
        return self._execute(arguments.exists(key, path))

    def numincrby(self, key, path, number):
        """
        Increments the value in ``key`` at ``path`` by ``number``
        """
        return self._execute(arguments.numincrby(key, path, number))

    def nummultby(self, key, path, number):
        """
        Multiplies the value in ``key`` at ``path`` by ``number``
        """
        return self._execute(arguments.nummultby(key, path, number))

    def strappend(self, key, path=ROOT_PATH, json_string=DEFAULT_STRAPPEND_JSON):
        """
        Not implemented yet, always raises ``NotImplementedError``
        """
        raise NotImplementedError(STRAPPEND_NOT_WORKING)

    def strlen(self, key, path=ROOT_PATH):
        """
        Returns the length of the string in ``key`` at ``path``, None if either
        doesn't exist
        """
        return self._execute(arguments.strlen(key, path))

    def arrappend(self, key, path, *json_values):
        """
        Appends ``json_values`` at the end of the array in ``key`` at ``path``
        and returns its new length
        """
        return self._execute(arguments.arrappend(key, path, json_values))

    def arrindex(self, key, path, json_scalar, start=DEFAULT_ARRINDEX_START,
                 stop=DEFAULT_ARRINDEX_STOP):
        """
        Returns the first occurrence of ``json_scalar`` in the array in ``key``
        at ``path`` between ``start`` (inclusive) and ``stop`` (exclusive, 0 for
        the end of the array), or -1
        """
        return self._execute(
            arguments.arrindex(key, path, json_scalar, start, stop))

    def arrinsert(self, key, path, index, *json_values):
        """
        Inserts ``json_values`` in the array in ``key`` at ``path`` before
        ``index`` (right-shift) and returns its new length
        """
        return self._execute(
            arguments.arrinsert(key, path, index, json_values))

    def arrlen(self, key, path=ROOT_PATH):
        """
        Returns the length of the array in ``key`` at ``path``, None if either
        doesn't exist
        """
        return self._execute(arguments.arrlen(key, path))

    def arrpop(self, key, path=ROOT_PATH, index=DEFAULT_ARRPOP_INDEX):
        """
        Deletes and returns an element from the array in ``key`` at ``path`` at
        ``index``
        """
        return self._execute(arguments.arrpop(key, path, index))

    def arrtrim(self, key, path, start, stop):
        """
        Trim the array in ``key`` at ``path`` so it contains only the range
        between ``start`` and ``stop``
        """
        return self._execute(arguments.arrtrim(key, path, start, stop))

    def objkeys(self, key, path=ROOT_PATH):
        """
        Returns the names of keys in the object in ``key`` at ``path``

        None if ``key`` or ``path`` doesn't exist. An empty object gives an
        empty tuple, or None from servers that report it as null.
        """
        return self._execute(arguments.objkeys(key, path))

    def objlen(self, key, path=ROOT_PATH):
        """
        Returns the length of the object in ``key`` at ``path``
        """
        return self._execute(arguments.objlen(key, path))

    def debug_memory(self, key, path=ROOT_PATH):
        """
        Returns the size in bytes of the value in ``key`` at ``path``
        """
        return self._execute(arguments.debug_memory(key, path))

    def resp(self, key, path=ROOT_PATH):
        """
        Returns the RESP form of the value in ``key`` at ``path``
        """
        return self._execute(arguments.resp(key, path))
