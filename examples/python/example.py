import json

import redis
from rejson_commands import ReJSON, SetOption

# Here's a document
doc = {
    'foo':  'bar',
    'baz':  42,
    'arr':  [0, 1, 2],
    'sub':  {
        'k1':   'v1'
    }
}

# Open a connection to redis
client = redis.Redis(decode_responses=True)

# Set up the ReJSON class to use the Redis client
rj = ReJSON(client, check_module=True)

# Store the document
print(rj.set('doc', json.dumps(doc)))                 # prints OK
print(rj.set('doc', '{}', option=SetOption.IF_NOT_EXISTS).is_null)  # prints True

# Change some data
print(rj.numincrby('doc', '.baz', 6337))              # prints 6379
print(rj.delete('doc', '.arr[-1]'))                   # prints 1
print(rj.arrappend('doc', '.arr', '"more"'))          # prints 3
print(rj.set('doc', 'null', '.sub'))                  # prints OK
print(rj.strlen('doc', '.foo'))                       # prints 3
print(rj.objlen('nothing-here'))                      # prints None

# Retrieve it
doc = rj.get_as('doc')

# {'foo': 'bar', 'baz': 6379, 'arr': [0, 1, 'more'], 'sub': None}
print(doc)
