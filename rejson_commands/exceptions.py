"Exceptions raised by the RedisJSON command layer"


class ReJSONError(Exception):
    pass


class InvalidClientError(ReJSONError):
    pass


class ModuleNotLoadedError(ReJSONError):
    pass


class ReplyCastError(ReJSONError, TypeError):
    """
    The reply returned by Redis does not have the shape the caller asked for,
    e.g. a null reply where an integer was expected.
    """
    def __init__(self, reply, expected):
        self.reply = reply
        self.expected = expected
        super().__init__('Cannot cast {!r} to {}'.format(reply, expected))


class DeserializationError(ReJSONError, ValueError):
    pass
