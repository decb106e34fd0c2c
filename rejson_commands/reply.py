"""
Typed view over the raw replies returned by ``execute_command``.

A reply is exactly one of ``NullReply``, ``IntegerReply``, ``TextReply`` or
``ArrayReply``. The ``as_*`` helpers coerce a raw reply into the shape a
command declares and raise ``ReplyCastError`` when it does not fit.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .exceptions import ReplyCastError


class Reply(object):
    """Base class of the four reply cases"""
    is_null = False

    def to_python(self):
        raise NotImplementedError


@dataclass(frozen=True)
class NullReply(Reply):
    is_null = True

    def to_python(self):
        return None

    def __str__(self):
        return ''


@dataclass(frozen=True)
class IntegerReply(Reply):
    value: int

    def to_python(self):
        return self.value

    def __int__(self):
        return self.value

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class TextReply(Reply):
    """A bulk or simple string, kept as ``bytes`` or ``str`` as received"""
    value: Union[str, bytes]

    @property
    def text(self):
        if isinstance(self.value, bytes):
            return self.value.decode('utf-8')
        return self.value

    def to_python(self):
        return self.text

    def __float__(self):
        return float(self.text)

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class ArrayReply(Reply):
    items: Tuple[Reply, ...] = ()

    def to_python(self):
        return [item.to_python() for item in self.items]

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]


NULL = NullReply()


def from_raw(raw):
    """Wrap a value returned by redis-py in the matching ``Reply`` case"""
    if isinstance(raw, Reply):
        return raw
    if raw is None:
        return NULL
    # bool is an int subclass but never a RESP2 integer
    if isinstance(raw, int) and not isinstance(raw, bool):
        return IntegerReply(raw)
    if isinstance(raw, (str, bytes)):
        return TextReply(raw)
    if isinstance(raw, (list, tuple)):
        return ArrayReply(tuple(from_raw(item) for item in raw))
    raise ReplyCastError(raw, 'Reply')


def as_reply(raw):
    return from_raw(raw)


def as_int(raw):
    reply = from_raw(raw)
    if isinstance(reply, IntegerReply):
        return reply.value
    raise ReplyCastError(reply, 'int')


def as_optional_int(raw):
    reply = from_raw(raw)
    if isinstance(reply, NullReply):
        return None
    return as_int(reply)


def as_array(raw):
    reply = from_raw(raw)
    if isinstance(reply, ArrayReply):
        return reply.items
    raise ReplyCastError(reply, 'array')


def as_optional_array(raw):
    reply = from_raw(raw)
    if isinstance(reply, NullReply):
        return None
    return as_array(reply)


def as_text(raw):
    reply = from_raw(raw)
    if isinstance(reply, TextReply):
        return reply.text
    raise ReplyCastError(reply, 'text')


def is_not_null(raw):
    return not isinstance(from_raw(raw), NullReply)
