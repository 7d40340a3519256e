import pytest

import aerocmd
from aerocmd import lists
from aerocmd import opcodes


def test_discriminant():

    operation = lists.append('l', 1)
    assert operation.cdt == 'list'
    assert operation.to_dict() == {'op': opcodes.LIST_APPEND, 'bin': 'l', 'cdt': 'list', 'value': 1}


def test_optional_arguments_omitted():
    """ Optional arguments that were not supplied are absent from the
        descriptor, not defaulted.
    """

    described = lists.get_range('l', 2).to_dict()
    assert 'count' not in described
    assert described['index'] == 2

    described = lists.get_range('l', 2, 3).to_dict()
    assert described['count'] == 3

    described = lists.append('l', 1).to_dict()
    assert 'policy' not in described

    policy = aerocmd.policy.ListPolicy(order=lists.order.ORDERED)
    described = lists.append('l', 1, policy).to_dict()
    assert described['policy'] is policy

    described = lists.remove_by_value('l', 5).to_dict()
    assert 'return_type' not in described


def test_negative_indexes_pass_through():

    assert lists.get('l', -1).index == -1
    assert lists.pop_range('l', -3, 2).index == -3
    assert lists.get_by_rank_range('l', -2, 5).rank == -2
    assert lists.trim('l', -5, 10).to_dict()['count'] == 10


def test_field_names():

    assert lists.append_items('l', [1, 2]).list == [1, 2]
    assert lists.insert('l', 0, 'x').to_dict()['value'] == 'x'
    assert lists.insert_items('l', 1, ['a']).to_dict()['list'] == ['a']
    assert lists.set('l', 2, 'v').to_dict() == {'op': opcodes.LIST_SET, 'bin': 'l', 'cdt': 'list', 'index': 2, 'value': 'v'}
    assert lists.sort('l', lists.sort_flags.DROP_DUPLICATES).flags == 2
    assert lists.set_order('l', lists.order.ORDERED).order == 1
    assert lists.remove_by_value_list('l', [1, 2]).values == [1, 2]
    assert lists.get_by_value_range('l', 1, 4).begin == 1
    assert lists.get_by_value_range('l', 1, 4).end == 4
    assert lists.increment('l', 0).to_dict() == {'op': opcodes.LIST_INCREMENT, 'bin': 'l', 'cdt': 'list', 'index': 0}
    assert lists.increment('l', 0, 5).value == 5
    assert lists.clear('l').op == opcodes.LIST_CLEAR
    assert lists.size('l').op == opcodes.LIST_SIZE


def test_return_type():

    operation = lists.get_by_index('l', 0, lists.return_type.VALUE)
    assert operation.return_type == lists.return_type.VALUE

    operation = lists.get_by_index('l', 0).and_return(lists.return_type.COUNT)
    assert operation.to_dict()['return_type'] == lists.return_type.COUNT


def test_invert_selection():

    invertible = (
        lists.remove_by_index_range('l', 0, 2),
        lists.remove_by_value('l', 1),
        lists.remove_by_value_list('l', [1]),
        lists.remove_by_value_range('l', 1, 2),
        lists.remove_by_rank_range('l', 0, 1),
        lists.get_by_index_range('l', 0),
        lists.get_by_value('l', 1),
        lists.get_by_value_list('l', [1]),
        lists.get_by_value_range('l', 1, 2),
        lists.get_by_rank_range('l', 0),
    )

    for operation in invertible:
        assert 'inverted' not in operation.to_dict()
        assert operation.invert_selection() is operation
        assert operation.to_dict()['inverted'] == True


def test_invert_unsupported():

    with pytest.raises(aerocmd.ClientError):
        lists.get_by_index('l', 0).invert_selection()

    with pytest.raises(aerocmd.ClientError):
        lists.append('l', 1).invert_selection()


def test_enumerations():

    assert lists.return_type.INVERTED == 0x10000
    assert lists.write_flags.ADD_UNIQUE == 1
    assert lists.write_flags.INSERT_BOUNDED == 2
    assert lists.write_flags.NO_FAIL == 4
    assert lists.write_flags.PARTIAL == 8


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
