from automin import mealy, moore
from automin.visualize import to_digraph, save_dot


def test_moore_digraph():
    m = moore(['X0', 'X1'], ['a', 'b'],
              {'X0': {'a': 'X1', 'b': 'X1'}, 'X1': {'a': 'X0', 'b': 'X1'}},
              {'X0': '0', 'X1': '1'})
    g = to_digraph(m)
    assert type(g).__name__ == 'Digraph'
    src = g.source
    assert 'X0/0' in src
    assert 'X1/1' in src
    assert 'a, b' in src
    assert '__start -> X0' in src


def test_mealy_edge_labels():
    m = mealy(['S0'], ['x'], {'S0': {'x': ('S0', 'y1')}})
    assert 'x/y1' in to_digraph(m, name='m').source


def test_save_dot(tmp_path):
    m = mealy(['S0'], ['x'], {'S0': {'x': ('S0', '1')}})
    path = tmp_path / 'm.dot'
    save_dot(m, str(path))
    assert 'digraph' in path.read_text(encoding='utf-8')
