from dataclasses import asdict, dataclass
from includes import *

# Some basic documents to use in the tests
docs = {
    'greeting': {
        'hello': 'world',
        'goodnight': {
            'value': 'moon',
        },
    },
    'array': {
        'array': ['hi', 'world', '!'],
    },
    'numbers': {
        'integer': 1,
        'number': 1.1,
    },
    'types': {
        'string': 'hello world',
        'integer': 5,
        'boolean': True,
        'number': 4.7,
    },
}


def dumps(name):
    return json.dumps(docs[name])


@dataclass
class Address:
    city: str
    postcode: str


@dataclass
class Customer:
    id: int
    name: str
    registered_on: str
    corporate_address: Address

    def to_json(self):
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, text):
        d = json.loads(text)
        d['corporate_address'] = Address(**d['corporate_address'])
        return cls(**d)


class RecordingRedis(redis.Redis):
    """Captures every command and answers with queued raw replies"""
    def __init__(self, *replies):
        super().__init__()
        self.calls = []
        self.replies = list(replies)

    def reply_with(self, *replies):
        self.replies.extend(replies)

    def execute_command(self, *args, **options):
        self.calls.append(args)
        if not self.replies:
            return None
        r = self.replies.pop(0)
        if isinstance(r, Exception):
            raise r
        return r

    @property
    def last(self):
        return self.calls[-1]


class AsyncRecordingRedis(redis.asyncio.Redis):
    def __init__(self, *replies):
        super().__init__()
        self.calls = []
        self.replies = list(replies)

    def reply_with(self, *replies):
        self.replies.extend(replies)

    async def execute_command(self, *args, **options):
        self.calls.append(args)
        if not self.replies:
            return None
        r = self.replies.pop(0)
        if isinstance(r, Exception):
            raise r
        return r

    @property
    def last(self):
        return self.calls[-1]
