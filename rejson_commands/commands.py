from enum import Enum

# Path of the document root, used wherever a path is optional
ROOT_PATH = '.'

NOESCAPE = 'NOESCAPE'
DEBUG_MEMORY = 'MEMORY'

DEFAULT_ARRINDEX_START = 0
DEFAULT_ARRINDEX_STOP = 0  # 0 means "up to and including the last element"
DEFAULT_ARRPOP_INDEX = -1
DEFAULT_STRAPPEND_JSON = '{}'


class JsonCommand(str, Enum):
    """Literal RedisJSON command names"""
    DEL = 'JSON.DEL'
    GET = 'JSON.GET'
    MGET = 'JSON.MGET'
    SET = 'JSON.SET'
    TYPE = 'JSON.TYPE'
    NUMINCRBY = 'JSON.NUMINCRBY'
    NUMMULTBY = 'JSON.NUMMULTBY'
    STRAPPEND = 'JSON.STRAPPEND'
    STRLEN = 'JSON.STRLEN'
    ARRAPPEND = 'JSON.ARRAPPEND'
    ARRINDEX = 'JSON.ARRINDEX'
    ARRINSERT = 'JSON.ARRINSERT'
    ARRLEN = 'JSON.ARRLEN'
    ARRPOP = 'JSON.ARRPOP'
    ARRTRIM = 'JSON.ARRTRIM'
    OBJKEYS = 'JSON.OBJKEYS'
    OBJLEN = 'JSON.OBJLEN'
    DEBUG = 'JSON.DEBUG'
    RESP = 'JSON.RESP'

    def __str__(self):
        return self.value


class SetOption(Enum):
    """
    Condition for ``JSON.SET``

    ``DEFAULT`` overwrites, ``IF_NOT_EXISTS`` sets only when the path is absent
    (``NX``) and ``IF_EXISTS`` only when it is present (``XX``).
    """
    DEFAULT = ''
    IF_NOT_EXISTS = 'NX'
    IF_EXISTS = 'XX'
