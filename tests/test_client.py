import asyncio
import pytest

import aerocmd
from aerocmd import operations
from aerocmd import status
from aerocmd.transport import TransportError

from fakeengine import Recorder


def test_async_always(client, engine, key):
    """ No callback may fire before the command that registered it has
        returned, even if the engine answers synchronously.
    """

    async def scenario():
        await client.connect()

        for synchronous in (False, True):
            engine.synchronous = synchronous
            checkpoints = list()
            recorder = Recorder()

            def callback(*args):
                checkpoints.append('callback')
                recorder(*args)

            client.get(key, callback)
            checkpoints.append('returned')

            await recorder.done
            assert checkpoints == ['returned', 'callback']

    asyncio.run(scenario())


def test_disconnected_guard(client, engine, key):

    async def scenario():
        recorder = Recorder()

        client.get(key, recorder)
        assert recorder.calls == []

        arguments = await recorder.done
        assert len(arguments) == 1

        error = arguments[0]
        assert isinstance(error, aerocmd.ClientError)
        assert error.code == status.ERR_CLIENT
        assert error.message == 'Not connected.'

        recorder = Recorder()
        client.put(key, {'a': 1}, recorder)
        client.operate(key, [operations.read('a')], recorder)
        await recorder.done

        with pytest.raises(aerocmd.ClientError) as caught:
            await client.get(key)

        assert caught.value.message == 'Not connected.'

    asyncio.run(scenario())
    assert engine.calls == []


def test_get_appends_key(client, engine, key):

    async def scenario():
        await client.connect()
        engine.reply('get', None, {'a': 1}, {'gen': 1, 'ttl': 100})

        bins, meta, returned = await client.get(key)
        assert bins == {'a': 1}
        assert meta == {'gen': 1, 'ttl': 100}
        assert returned is key

        recorder = Recorder()
        client.get(key, recorder)
        arguments = await recorder.done
        assert arguments == (None, {'a': 1}, {'gen': 1, 'ttl': 100}, key)

    asyncio.run(scenario())


def test_put_and_remove_resolve_to_key(client, engine, key):

    async def scenario():
        await client.connect()

        result = await client.put(key, {'a': 1})
        assert result is key

        result = await client.remove(key)
        assert result is key

    asyncio.run(scenario())

    command, args = engine.calls[1]
    assert command == 'put'
    assert args == {'key': key, 'bins': {'a': 1}, 'meta': None, 'policy': None}


def test_argument_normalization(client, engine, key):

    async def scenario():
        await client.connect()

        recorder = Recorder()
        client.put(key, {'a': 1}, recorder)
        await recorder.done

        recorder = Recorder()
        client.put(key, {'a': 1}, {'ttl': 10}, recorder)
        await recorder.done

        policy = aerocmd.policy.WritePolicy(timeout=50)
        recorder = Recorder()
        client.put(key, {'a': 1}, {'ttl': 10}, policy, recorder)
        await recorder.done

        policy = aerocmd.policy.ReadPolicy(timeout=10)
        recorder = Recorder()
        client.get(key, policy, recorder)
        await recorder.done

    asyncio.run(scenario())

    puts = [args for command, args in engine.calls if command == 'put']
    assert puts[0]['meta'] is None
    assert puts[0]['policy'] is None
    assert puts[1]['meta'] == {'ttl': 10}
    assert puts[1]['policy'] is None
    assert puts[2]['meta'] == {'ttl': 10}
    assert puts[2]['policy'] == aerocmd.policy.WritePolicy(timeout=50)

    command, args = engine.calls[-1]
    assert command == 'get'
    assert args['policy'] == aerocmd.policy.ReadPolicy(timeout=10)


def test_callback_must_be_callable(client, key):

    with pytest.raises(TypeError):
        client.get(key, callback='not a function')

    with pytest.raises(TypeError):
        client.put(key, {'a': 1}, None, None, 42)

    with pytest.raises(TypeError):
        client.connect(callback=1)


def test_shortcut_equivalence(client, engine, key):

    async def scenario():
        await client.connect()
        await client.incr(key, {'x': 5})
        await client.operate(key, [operations.incr('x', 5)])
        await client.add(key, {'x': 5})

    asyncio.run(scenario())

    operates = [args['operations'] for command, args in engine.calls if command == 'operate']
    assert len(operates) == 3
    assert operates[0] == operates[1]
    assert operates[1] == operates[2]


def test_append_and_prepend_build_one_operation_per_bin(client, engine, key):

    async def scenario():
        await client.connect()
        await client.append(key, {'a': 'x', 'b': 'y'})
        await client.prepend(key, {'a': 'z'}, {'ttl': 5})

    asyncio.run(scenario())

    appended = engine.calls[1][1]['operations']
    assert appended == [operations.append('a', 'x'), operations.append('b', 'y')]

    prepended = engine.calls[2][1]
    assert prepended['operations'] == [operations.prepend('a', 'z')]
    assert prepended['meta'] == {'ttl': 5}


def test_server_error(client, engine, key):

    async def scenario():
        await client.connect()
        engine.reply('get', {'code': status.ERR_RECORD_NOT_FOUND, 'message': 'AEROSPIKE_ERR_RECORD_NOT_FOUND'})

        recorder = Recorder()
        client.get(key, recorder)
        arguments = await recorder.done

        assert len(arguments) == 1
        error = arguments[0]
        assert isinstance(error, aerocmd.ServerError)
        assert error.is_server_error()
        assert error.code == status.ERR_RECORD_NOT_FOUND
        assert error.message == 'Record does not exist in database.'

        with pytest.raises(aerocmd.ServerError):
            await client.get(key)

    asyncio.run(scenario())


def test_transport_rejection(client, engine, key):

    async def scenario():
        await client.connect()
        engine.fail('get', TransportError('socket gone'))

        recorder = Recorder()
        client.get(key, recorder)
        assert recorder.calls == []

        error, = await recorder.done
        assert isinstance(error, aerocmd.ClientError)
        assert error.message == 'socket gone'

        with pytest.raises(aerocmd.ClientError):
            await client.get(key)

    asyncio.run(scenario())


def test_legacy_handler_per_client(engine, context, key):

    client = aerocmd.Client(engine=engine, context=context, callback_handler=aerocmd.callbacks.legacy_handler)
    raw = {'code': status.ERR_RECORD_NOT_FOUND, 'message': 'not found'}

    async def scenario():
        await client.connect()
        engine.reply('get', raw)

        recorder = Recorder()
        client.get(key, recorder)
        arguments = await recorder.done

        assert arguments == (raw, None, None, key)

    asyncio.run(scenario())
    assert context.callback_handler is aerocmd.callbacks.default_handler


def test_handler_captured_at_creation(client, engine, context, key):

    async def scenario():
        await client.connect()
        engine.reply('get', {'code': status.ERR_TIMEOUT, 'message': 'timed out'})

        recorder = Recorder()
        client.get(key, recorder)
        aerocmd.Client.set_callback_handler(aerocmd.callbacks.legacy_handler, context)

        error, = await recorder.done
        assert isinstance(error, aerocmd.CommandError)

        recorder = Recorder()
        client.get(key, recorder)
        arguments = await recorder.done
        assert arguments[0] == {'code': status.ERR_TIMEOUT, 'message': 'timed out'}

    asyncio.run(scenario())


def test_connect_and_close(client, engine, context):

    async def scenario():
        result = await client.connect()
        assert result is client

        assert client.is_connected()
        assert context.count == 1
        assert engine.registered == 1

        # A second connect is a no-op.

        recorder = Recorder()
        client.connect(recorder)
        arguments = await recorder.done
        assert arguments == (None, client)
        assert context.count == 1

    asyncio.run(scenario())

    client.close()
    assert client.is_connected() == False
    assert context.count == 0
    assert engine.deregistered == 1
    assert engine.closed == 1

    client.close()
    assert engine.closed == 1
    assert engine.deregistered == 1


def test_connect_failure_releases(client, engine, context):

    engine.connect_error = {'code': status.ERR_CLIENT, 'message': 'no route to gateway'}

    async def scenario():
        with pytest.raises(aerocmd.ClientError):
            await client.connect()

    asyncio.run(scenario())

    assert client.is_connected() == False
    assert context.count == 0
    assert engine.registered == 1
    assert engine.deregistered == 1


def test_overlapping_connects(client, engine, context):
    """ A connect issued while another is in flight joins it: the engine is
        contacted once and a single close releases the runtime context.
    """

    async def scenario():
        first = client.connect()
        second = client.connect()

        recorder = Recorder()
        client.connect(recorder)

        assert await first is client
        assert await second is client
        assert await recorder.done == (None, client)
        assert context.count == 1

    asyncio.run(scenario())

    assert engine.commands().count('connect') == 1
    assert client.connecting is None

    client.close()
    assert context.count == 0
    assert engine.registered == 1
    assert engine.deregistered == 1


def test_overlapping_connects_fail_together(client, engine, context):

    engine.connect_error = {'code': status.ERR_CLIENT, 'message': 'no route to gateway'}

    async def scenario():
        first = client.connect()
        recorder = Recorder()
        client.connect(recorder)

        with pytest.raises(aerocmd.ClientError):
            await first

        error, = await recorder.done
        assert isinstance(error, aerocmd.ClientError)

    asyncio.run(scenario())

    assert client.connecting is None
    assert context.count == 0
    assert engine.deregistered == 1


def test_connect_status_must_be_ok(client, engine, context):
    """ A reply that carries an error structure with an OK status is still
        a successful connection.
    """

    engine.connect_error = {'code': status.OK, 'message': 'ok'}

    async def scenario():
        recorder = Recorder()
        client.connect(recorder)
        error, connected = await recorder.done
        assert error is None
        assert connected is client

    asyncio.run(scenario())
    assert client.is_connected()


def test_is_connected_check_engine(client, engine):

    async def scenario():
        await client.connect()

    asyncio.run(scenario())

    engine.connected = False
    assert client.is_connected() == True
    assert client.is_connected(check_engine=True) == False


def test_exists_and_apply(client, engine, key):

    async def scenario():
        await client.connect()

        engine.reply('exists', None, {'gen': 3})
        meta, returned = await client.exists(key)
        assert meta == {'gen': 3}
        assert returned is key

        engine.reply('apply', None, 42)
        udf = {'module': 'math', 'funcname': 'answer', 'args': []}
        result, returned = await client.apply(key, udf)
        assert result == 42
        assert returned is key

    asyncio.run(scenario())

    command, args = engine.calls[-1]
    assert command == 'apply'
    assert args['udf'] == {'module': 'math', 'funcname': 'answer', 'args': []}


def test_select(client, engine, key):

    async def scenario():
        await client.connect()
        engine.reply('select', None, {'a': 1}, {'gen': 1})

        recorder = Recorder()
        client.select(key, ['a'], recorder)
        arguments = await recorder.done
        assert arguments == (None, {'a': 1}, {'gen': 1}, key)

    asyncio.run(scenario())
    assert engine.calls[-1][1]['bins'] == ['a']


def test_query_requires_connection(client):

    with pytest.raises(aerocmd.ClientError):
        client.query('test', 'demo')


def test_index_commands(client, engine):

    async def scenario():
        await client.connect()

        options = {'ns': 'test', 'set': 'demo', 'bin': 'age', 'index': 'age_idx'}
        task = await client.create_integer_index(options)
        assert isinstance(task, aerocmd.tasks.IndexTask)
        assert task.request == 'sindex/test/age_idx'

        # The caller's options are not modified.
        assert 'datatype' not in options

        await client.create_string_index(options)
        await client.create_geo2dsphere_index(options)
        await client.index_remove('test', 'age_idx')

    asyncio.run(scenario())

    creates = [args['options'] for command, args in engine.calls if command == 'index_create']
    assert creates[0]['datatype'] == aerocmd.filter.index_datatype.NUMERIC
    assert creates[0]['type'] == aerocmd.filter.index_type.DEFAULT
    assert creates[1]['datatype'] == aerocmd.filter.index_datatype.STRING
    assert creates[2]['datatype'] == aerocmd.filter.index_datatype.GEO2DSPHERE

    command, args = engine.calls[-1]
    assert command == 'index_remove'
    assert args == {'ns': 'test', 'index': 'age_idx', 'policy': None}


def test_udf_commands(client, engine):

    async def scenario():
        await client.connect()

        task = await client.udf_register('/tmp/udf/stats.lua')
        assert isinstance(task, aerocmd.tasks.UdfTask)
        assert task.module == 'stats.lua'
        assert task.command == task.REGISTER

        policy = aerocmd.policy.InfoPolicy(timeout=100)
        recorder = Recorder()
        client.udf_register('/tmp/udf/stats.lua', policy, recorder)
        error, task = await recorder.done
        assert error is None

        task = await client.udf_remove('stats.lua')
        assert task.command == task.UNREGISTER

    asyncio.run(scenario())

    registers = [args for command, args in engine.calls if command == 'udf_register']
    assert registers[0]['type'] == aerocmd.language.LUA
    assert registers[1]['policy'] == aerocmd.policy.InfoPolicy(timeout=100)
    assert registers[1]['type'] == aerocmd.language.LUA


def test_info(client, engine):

    responses = list()
    responses.append({'host': {'addr': 'db1', 'port': 3000}, 'info': 'build\t4.0.0\n'})
    responses.append({'host': {'addr': 'db2', 'port': 3000}, 'info': 'build\t4.0.1\n'})

    async def scenario():
        await client.connect()
        engine.reply('info', None, responses)

        received = list()
        done = asyncio.get_running_loop().create_future()

        def info_callback(error, info, host):
            received.append((error, info, host['addr']))

        client.info('build', info_callback, lambda: done.set_result(True))
        await done

        assert received == [(None, 'build\t4.0.0\n', 'db1'), (None, 'build\t4.0.1\n', 'db2')]

        recorder = Recorder()
        client.info('build', 'db1:3100', recorder)
        await recorder.done

        result = await client.info_all('build')
        assert result == responses

    asyncio.run(scenario())

    infos = [args for command, args in engine.calls if command == 'info']
    assert infos[0]['host'] is None
    assert infos[1]['host'] == {'addr': 'db1', 'port': 3100}


def test_info_any(client, engine):

    async def scenario():
        await client.connect()
        engine.reply('info_any', None, 'build\t4.0.0\n')

        response = await client.info_any('build')
        assert response == 'build\t4.0.0\n'

        recorder = Recorder()
        client.info_any(recorder)
        return await recorder.done

    assert asyncio.run(scenario()) == (None, 'build\t4.0.0\n')

    requests = [args for command, args in engine.calls if command == 'info_any']
    assert requests[0] == {'request': 'build', 'policy': None}
    assert requests[1]['request'] is None


def test_truncate(client, engine):

    async def scenario():
        await client.connect()

        assert await client.truncate('test', 'demo', 1500000000000000000) is None

        recorder = Recorder()
        client.truncate('test', recorder)
        assert await recorder.done == (None,)

        engine.reply('truncate', {'code': status.ERR_SERVER, 'message': 'truncate failed'})
        with pytest.raises(aerocmd.ServerError):
            await client.truncate('test', 'demo', 0, aerocmd.policy.InfoPolicy(timeout=10))

    asyncio.run(scenario())

    requests = [args for command, args in engine.calls if command == 'truncate']
    assert requests[0] == {'ns': 'test', 'set': 'demo', 'before_nanos': 1500000000000000000, 'policy': None}
    assert requests[1] == {'ns': 'test', 'set': None, 'before_nanos': 0, 'policy': None}
    assert requests[2]['policy'] == aerocmd.policy.InfoPolicy(timeout=10)


def test_info_done_callback_always_fires(client, engine):

    done = list()

    def finished():
        done.append(True)

    async def scenario():

        # Not connected, with and without an info callback.

        recorder = Recorder()
        client.info('build', recorder, finished)
        error, = await recorder.done
        await asyncio.sleep(0)
        assert isinstance(error, aerocmd.ClientError)
        assert done == [True]

        with pytest.raises(aerocmd.ClientError):
            await client.info('build', None, None, None, finished)
        await asyncio.sleep(0)
        assert len(done) == 2

        await client.connect()

        # Responses collected in a future.

        engine.reply('info', None, [{'host': {'addr': 'db1', 'port': 3000}, 'info': 'ok'}])
        responses = await client.info('statistics', None, None, None, finished)
        await asyncio.sleep(0)
        assert responses[0]['info'] == 'ok'
        assert len(done) == 3

        # Request refused by the transport.

        engine.fail('info', TransportError('refused'))
        with pytest.raises(aerocmd.ClientError):
            await client.info('statistics', None, None, None, finished)
        await asyncio.sleep(0)
        assert len(done) == 4

    asyncio.run(scenario())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
