import asyncio
import logging
import threading

import aerocmd
from aerocmd.runtime import RuntimeContext

from fakeengine import FakeEngine


class Hooks:
    def __init__(self):
        self.events = list()

    def register_event_loop(self):
        self.events.append('register')

    def deregister_event_loop(self):
        self.events.append('deregister')


def test_transitions():

    context = RuntimeContext()
    hooks = Hooks()

    context.acquire(hooks)
    context.acquire(hooks)
    context.acquire(hooks)
    assert context.count == 3
    assert hooks.events == ['register']

    context.release()
    context.release()
    assert hooks.events == ['register']

    context.release()
    assert context.count == 0
    assert hooks.events == ['register', 'deregister']

    context.acquire(hooks)
    assert hooks.events == ['register', 'deregister', 'register']


def test_deregister_uses_registered_hooks():
    """ Only the hooks supplied on the 0 to 1 transition are remembered; the
        same ones are deregistered, regardless of who releases last.
    """

    context = RuntimeContext()
    first = Hooks()
    second = Hooks()

    context.acquire(first)
    context.acquire(second)
    context.release()
    context.release()

    assert first.events == ['register', 'deregister']
    assert second.events == []


def test_threads_share_context():
    """ Registration and deregistration strictly alternate, however the
        acquire and release calls from several threads interleave.
    """

    context = RuntimeContext()
    hooks = Hooks()

    def cycle():
        for iteration in range(500):
            context.acquire(hooks)
            context.release()

    threads = [threading.Thread(target=cycle) for index in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert context.count == 0
    assert context.hooks is None
    assert len(hooks.events) % 2 == 0
    assert hooks.events[0::2] == ['register'] * (len(hooks.events) // 2)
    assert hooks.events[1::2] == ['deregister'] * (len(hooks.events) // 2)


def test_unpaired_release(caplog):

    context = RuntimeContext()

    with caplog.at_level(logging.WARNING, logger='aerocmd.runtime'):
        context.release()

    assert context.count == 0
    assert 'without a matching acquire' in caplog.text

    hooks = Hooks()
    context.acquire(hooks)
    assert context.count == 1
    assert hooks.events == ['register']


def test_default_context():

    assert isinstance(aerocmd.runtime.default_context, RuntimeContext)
    assert aerocmd.runtime.default_context.callback_handler is aerocmd.callbacks.default_handler


def test_shared_across_clients():
    """ The event loop registration is active if and only if more clients
        have connected than have closed.
    """

    context = RuntimeContext()
    engines = [FakeEngine() for index in range(3)]
    clients = [aerocmd.Client(engine=engine, context=context) for engine in engines]

    async def scenario():
        for client in clients:
            await client.connect()

    asyncio.run(scenario())

    assert context.count == 3
    registered = sum(engine.registered for engine in engines)
    assert registered == 1

    clients[0].close()
    clients[0].close()
    clients[1].close()
    assert context.count == 1

    deregistered = sum(engine.deregistered for engine in engines)
    assert deregistered == 0

    clients[2].close()
    assert context.count == 0

    deregistered = sum(engine.deregistered for engine in engines)
    assert deregistered == 1


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
