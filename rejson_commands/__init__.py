import logging

from .aio import AsyncReJSON
from .client import ReJSON
from .commands import JsonCommand, ROOT_PATH, SetOption
from .config import connect, connect_async
from .exceptions import (DeserializationError, InvalidClientError,
                         ModuleNotLoadedError, ReJSONError, ReplyCastError)
from .reply import ArrayReply, IntegerReply, NullReply, Reply, TextReply

__version__ = '1.0.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'ReJSON',
    'AsyncReJSON',
    'JsonCommand',
    'SetOption',
    'ROOT_PATH',
    'connect',
    'connect_async',
    'Reply',
    'NullReply',
    'IntegerReply',
    'TextReply',
    'ArrayReply',
    'ReJSONError',
    'InvalidClientError',
    'ModuleNotLoadedError',
    'ReplyCastError',
    'DeserializationError',
]
