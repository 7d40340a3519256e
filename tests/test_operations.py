import aerocmd
from aerocmd import opcodes
from aerocmd import operations


def test_scalar_descriptors():

    assert operations.read('a').to_dict() == {'op': opcodes.READ, 'bin': 'a'}
    assert operations.write('a', 1).to_dict() == {'op': opcodes.WRITE, 'bin': 'a', 'value': 1}
    assert operations.incr('a', 5).to_dict() == {'op': opcodes.INCR, 'bin': 'a', 'value': 5}
    assert operations.append('a', 'x').to_dict() == {'op': opcodes.APPEND, 'bin': 'a', 'value': 'x'}
    assert operations.prepend('a', 'x').to_dict() == {'op': opcodes.PREPEND, 'bin': 'a', 'value': 'x'}


def test_touch_has_no_bin():

    touched = operations.touch(3600)
    assert touched.to_dict() == {'op': opcodes.TOUCH, 'ttl': 3600}
    assert touched.bin is None


def test_deterministic():
    """ Two descriptors built from the same arguments are equal, but not
        the same object.
    """

    first = operations.incr('x', 5)
    second = operations.incr('x', 5)

    assert first == second
    assert first is not second
    assert first.to_dict() == second.to_dict()

    assert operations.incr('x', 5) != operations.incr('x', 6)
    assert operations.incr('x', 5) != operations.append('x', 5)
    assert operations.add is operations.incr


def test_scalar_has_no_discriminant():
    assert 'cdt' not in operations.write('a', 1).to_dict()


def test_cdt_chaining():

    operation = aerocmd.maps.get_by_key('m', 'k').and_return(aerocmd.maps.return_type.VALUE)
    assert operation.return_type == aerocmd.maps.return_type.VALUE

    context = aerocmd.CdtContext().add_list_index(-1).add_map_key('inner')
    operation = aerocmd.lists.append('l', 1).with_context(context)
    assert operation.to_dict()['context'] is context


def test_context_populated_by_function():

    def populate(context):
        context.add_map_rank(0)
        context.add_list_value('x')

    operation = aerocmd.lists.size('l').with_context(populate)

    assert isinstance(operation.context, aerocmd.CdtContext)
    assert operation.context.to_list() == [[0x21, 0], [0x13, 'x']]
    assert len(operation.context) == 2


def test_context_equality():

    first = aerocmd.CdtContext().add_list_rank(1).add_map_index(2)
    second = aerocmd.CdtContext().add_list_rank(1).add_map_index(2)

    assert first == second
    assert first != aerocmd.CdtContext().add_list_rank(1)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
