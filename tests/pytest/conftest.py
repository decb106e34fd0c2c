import uuid

from common import *
from rejson_commands.config import resolve_url


@pytest.fixture
def recorder():
    return RecordingRedis()


@pytest.fixture
def rj(recorder):
    return ReJSON(recorder)


@pytest.fixture
def async_recorder():
    return AsyncRecordingRedis()


@pytest.fixture
def arj(async_recorder):
    return AsyncReJSON(async_recorder)


@pytest.fixture
def env():
    """ReJSON over a live server with the module loaded, skipped without one"""
    client = redis.Redis.from_url(resolve_url(), decode_responses=True)
    try:
        client.ping()
        r = ReJSON(client, check_module=True)
    except (redis.exceptions.ConnectionError, ModuleNotLoadedError) as e:
        client.close()
        pytest.skip('No RedisJSON server available: {}'.format(e))
    yield r
    client.close()


@pytest.fixture
def keys(env):
    """Hands out fresh key names and deletes only those after the test"""
    made = []

    def make():
        made.append(uuid.uuid4().hex)
        return made[-1]

    yield make
    if made:
        env.client.delete(*made)


@pytest.fixture
def key(keys):
    return keys()
