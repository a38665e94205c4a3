import pytest

from automin import (mealy, moore, Machine, MalformedTable, UnknownStateReference,
                     EmptyStateSet, EmptyAlphabet, DuplicateState)


def simple_moore():
    return moore(['A', 'B'], ['a'], {'A': {'a': 'B'}, 'B': {'a': 'A'}}, {'A': '0', 'B': '1'})


def test_unknown_kind():
    with pytest.raises(ValueError):
        Machine('dfa', [], [], {})


def test_output_signature():
    m = mealy(['S0', 'S1'], ['x', 'y'], {
        'S0': {'x': ('S1', '0'), 'y': ('S0', '1')},
        'S1': {'x': ('S1', '1'), 'y': ('S0', '1')},
    })
    assert m.output_signature('S0') == ('0', '1')
    assert m.output_signature('S1') == ('1', '1')
    assert simple_moore().output_signature('B') == '1'


def test_run_moore_emits_entered_state_outputs():
    assert simple_moore().run(['a', 'a']) == ['1', '0']
    assert simple_moore().run(['a'], state='B') == ['0']
    assert simple_moore().run([]) == []


def test_validate_empty():
    with pytest.raises(EmptyStateSet):
        moore([], ['a'], {}, {}).validate()
    with pytest.raises(EmptyAlphabet):
        moore(['A'], [], {'A': {}}, {'A': '0'}).validate()


def test_validate_missing_transition():
    m = mealy(['S0', 'S1'], ['x'], {'S0': {'x': ('S1', '0')}, 'S1': {}})
    with pytest.raises(MalformedTable):
        m.validate()


def test_validate_dangling_reference():
    m = moore(['A'], ['a'], {'A': {'a': 'Z'}}, {'A': '0'})
    with pytest.raises(UnknownStateReference) as info:
        m.validate()
    assert info.value.state == 'Z'
    assert info.value.source == 'A'


def test_validate_duplicate_state():
    m = moore(['A', 'A'], ['a'], {'A': {'a': 'A'}}, {'A': '0'})
    with pytest.raises(DuplicateState):
        m.validate()


def test_restrict_keeps_order_and_columns():
    m = simple_moore()
    r = m.restrict({'B'})
    assert r.states == ['B']
    assert r.inputs == ['a']
    assert r.outputs == {'B': '1'}
    assert m.states == ['A', 'B']
