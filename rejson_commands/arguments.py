"""
Argument assembly for RedisJSON commands.

Every command is laid out as key, then path, then payload and options. An
optional argument the caller left out is written as ``OMITTED``; it keeps its
slot while the list is being built and is dropped when the list is rendered,
so the server falls back to its own default for it.
"""

import json
from collections import namedtuple

from .commands import (DEBUG_MEMORY, DEFAULT_ARRINDEX_START,
                       DEFAULT_ARRINDEX_STOP, DEFAULT_ARRPOP_INDEX,
                       JsonCommand, NOESCAPE, ROOT_PATH, SetOption)
from . import reply

# Placeholder for an optional argument the caller left out
OMITTED = object()


class Call(namedtuple('Call', ['command', 'args', 'coerce'])):
    """
    A single RedisJSON round trip: the command, its wire arguments and the
    coercion applied to the reply.
    """
    __slots__ = ()

    @property
    def name(self):
        return self.command.value


def _omitted(arg):
    return arg is OMITTED


def combine_arguments(*parts):
    """
    Flatten ``parts`` into a wire argument list

    Lists and tuples are spliced in place, ``OMITTED`` placeholders are
    dropped and everything else is passed as is.
    """
    args = []
    for part in parts:
        if isinstance(part, (list, tuple)):
            args.extend(a for a in part if not _omitted(a))
        elif _omitted(part):
            continue
        else:
            args.append(part)
    return args


def paths_or_default(paths, default=(ROOT_PATH,)):
    return list(paths) if paths else list(default)


def number_argument(number):
    """Render a number the way the server parses it, as a JSON number"""
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        raise TypeError('Expected a number, got {!r}'.format(number))
    return json.dumps(number)


def set_option_argument(option):
    option = SetOption(option)
    return OMITTED if option is SetOption.DEFAULT else option.value


# ----------------------------------------------------------------------------
# Per command builders, shared by the sync and asyncio wrappers

def delete(key, path=ROOT_PATH):
    return Call(JsonCommand.DEL, combine_arguments(key, path), reply.as_int)


def get(key, paths=(), no_escape=True):
    args = combine_arguments(key, NOESCAPE if no_escape else OMITTED,
                             paths_or_default(paths))
    return Call(JsonCommand.GET, args, reply.as_reply)


def mget(keys, path=ROOT_PATH):
    if isinstance(keys, (str, bytes)):
        keys = [keys]
    return Call(JsonCommand.MGET, combine_arguments(list(keys), path),
                reply.as_array)


def set_json(key, json_value, path=ROOT_PATH, option=SetOption.DEFAULT):
    args = combine_arguments(key, path, json_value, set_option_argument(option))
    return Call(JsonCommand.SET, args, reply.as_reply)


def json_type(key, path=ROOT_PATH):
    return Call(JsonCommand.TYPE, combine_arguments(key, path), reply.as_reply)


def exists(key, path=ROOT_PATH):
    return Call(JsonCommand.TYPE, combine_arguments(key, path),
                reply.is_not_null)


def numincrby(key, path, number):
    return Call(JsonCommand.NUMINCRBY,
                combine_arguments(key, path, number_argument(number)),
                reply.as_reply)


def nummultby(key, path, number):
    return Call(JsonCommand.NUMMULTBY,
                combine_arguments(key, path, number_argument(number)),
                reply.as_reply)


def strlen(key, path=ROOT_PATH):
    return Call(JsonCommand.STRLEN, combine_arguments(key, path),
                reply.as_optional_int)


def arrappend(key, path, json_values):
    return Call(JsonCommand.ARRAPPEND,
                combine_arguments(key, path, list(json_values)), reply.as_int)


def arrindex(key, path, json_scalar, start=DEFAULT_ARRINDEX_START,
             stop=DEFAULT_ARRINDEX_STOP):
    return Call(JsonCommand.ARRINDEX,
                combine_arguments(key, path, json_scalar, start, stop),
                reply.as_int)


def arrinsert(key, path, index, json_values):
    return Call(JsonCommand.ARRINSERT,
                combine_arguments(key, path, index, list(json_values)),
                reply.as_int)


def arrlen(key, path=ROOT_PATH):
    return Call(JsonCommand.ARRLEN, combine_arguments(key, path),
                reply.as_optional_int)


def arrpop(key, path=ROOT_PATH, index=DEFAULT_ARRPOP_INDEX):
    return Call(JsonCommand.ARRPOP, combine_arguments(key, path, index),
                reply.as_reply)


def arrtrim(key, path, start, stop):
    return Call(JsonCommand.ARRTRIM,
                combine_arguments(key, path, start, stop), reply.as_int)


def objkeys(key, path=ROOT_PATH):
    return Call(JsonCommand.OBJKEYS, combine_arguments(key, path),
                reply.as_optional_array)


def objlen(key, path=ROOT_PATH):
    return Call(JsonCommand.OBJLEN, combine_arguments(key, path),
                reply.as_optional_int)


def debug_memory(key, path=ROOT_PATH):
    return Call(JsonCommand.DEBUG, combine_arguments(DEBUG_MEMORY, key, path),
                reply.as_int)


def resp(key, path=ROOT_PATH):
    return Call(JsonCommand.RESP, combine_arguments(key, path), reply.as_array)
