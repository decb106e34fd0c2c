from common import *
from rejson_commands import arguments
from rejson_commands.arguments import OMITTED, combine_arguments


def testCombineArgumentsFlattensAndDropsPlaceholders():
    assert combine_arguments('k', '.', ['1', '2'], OMITTED) == ['k', '.', '1', '2']
    assert combine_arguments('k', OMITTED, ('.a', '.b')) == ['k', '.a', '.b']
    assert combine_arguments('k', 0, 0) == ['k', 0, 0]
    assert combine_arguments('k', [], '.') == ['k', '.']


def testDefaultPathMatchesExplicitRoot():
    """Omitting a defaulted path sends the same arguments as passing the root"""
    for build in (arguments.delete, arguments.json_type, arguments.strlen,
                  arguments.arrlen, arguments.arrpop, arguments.objkeys,
                  arguments.objlen, arguments.debug_memory, arguments.resp,
                  arguments.exists):
        implicit = build('test')
        explicit = build('test', '.')
        assert implicit.command == explicit.command
        assert implicit.args == explicit.args, build.__name__

    assert arguments.set_json('test', '{}').args == \
        arguments.set_json('test', '{}', '.').args
    assert arguments.mget(['a', 'b']).args == arguments.mget(['a', 'b'], '.').args
    assert arguments.get('test').args == arguments.get('test', ('.',)).args


def testGetNoEscape():
    assert arguments.get('test').args == ['test', 'NOESCAPE', '.']
    assert arguments.get('test', no_escape=False).args == ['test', '.']
    assert arguments.get('test', ('.a', '.b'), False).args == ['test', '.a', '.b']


def testSetOptions():
    assert arguments.set_json('test', '{}').args == ['test', '.', '{}']
    assert arguments.set_json('test', '[]', '.foo', SetOption.IF_NOT_EXISTS).args == \
        ['test', '.foo', '[]', 'NX']
    assert arguments.set_json('test', '[]', '.foo', SetOption.IF_EXISTS).args == \
        ['test', '.foo', '[]', 'XX']
    assert arguments.set_json('test', '1', option='XX').args == ['test', '.', '1', 'XX']
    with pytest.raises(ValueError):
        arguments.set_json('test', '1', option='YY')


def testCommandNames():
    assert arguments.delete('k').name == 'JSON.DEL'
    assert arguments.debug_memory('k').name == 'JSON.DEBUG'
    assert arguments.exists('k').name == 'JSON.TYPE'
    assert str(JsonCommand.ARRAPPEND) == 'JSON.ARRAPPEND'


def testDebugMemoryLeadsWithSubcommand():
    assert arguments.debug_memory('test', '.goodnight').args == ['MEMORY', 'test', '.goodnight']


def testMultiGetKeys():
    assert arguments.mget(['a', 'b', 'c'], '.x').args == ['a', 'b', 'c', '.x']
    assert arguments.mget('a').args == ['a', '.']


def testNumbersAreRenderedAsJSON():
    assert arguments.numincrby('test', '.n', 1).args == ['test', '.n', '1']
    assert arguments.nummultby('test', '.n', 0.9).args == ['test', '.n', '0.9']
    with pytest.raises(TypeError):
        arguments.numincrby('test', '.n', '1')
    with pytest.raises(TypeError):
        arguments.numincrby('test', '.n', True)


def testArrayArguments():
    assert arguments.arrappend('test', '.array', ['"a"', '"b"']).args == \
        ['test', '.array', '"a"', '"b"']
    assert arguments.arrindex('test', '.array', '"world"').args == \
        ['test', '.array', '"world"', 0, 0]
    assert arguments.arrindex('test', '.array', '"world"', 2, 0).args == \
        ['test', '.array', '"world"', 2, 0]
    assert arguments.arrinsert('test', '.array', -1, ['"x"']).args == \
        ['test', '.array', -1, '"x"']
    assert arguments.arrpop('test').args == ['test', '.', -1]
    assert arguments.arrtrim('test', '.array', 0, 1).args == ['test', '.array', 0, 1]


def testEmptyStringsKeepTheirSlot():
    """Only left out optionals are dropped, an empty key, path or value is sent"""
    assert arguments.delete('').args == ['', '.']
    assert arguments.delete('k', '').args == ['k', '']
    assert arguments.arrindex('k', '.array', '', 2, 0).args == ['k', '.array', '', 2, 0]
    assert arguments.set_json('k', '', '.').args == ['k', '.', '']
    assert arguments.get('', ('',), False).args == ['', '']
    assert arguments.arrappend('k', '.array', ['', '"a"']).args == ['k', '.array', '', '"a"']
    assert combine_arguments('', ['', OMITTED], OMITTED) == ['', '']


def testDefaultSetOptionIsLeftOut():
    assert arguments.set_option_argument(SetOption.DEFAULT) is OMITTED
    assert arguments.set_option_argument('') is OMITTED
    assert arguments.set_option_argument(SetOption.IF_EXISTS) == 'XX'
