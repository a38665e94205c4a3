import pytest

from automin import mealy, moore

@pytest.fixture
def textbook_mealy():
    # Пример из методички: 9 состояний, 3 входа
    outputs = {
        1: (0, 1, 1), 2: (1, 0, 0), 3: (1, 0, 0),
        4: (0, 1, 1), 5: (1, 1, 0), 6: (0, 1, 1),
        7: (1, 1, 0), 8: (1, 0, 0), 9: (0, 1, 1),
    }
    next_state = {
        1: (2, 4, 4), 2: (1, 1, 5), 3: (1, 6, 5),
        4: (8, 1, 1), 5: (6, 4, 3), 6: (8, 9, 6),
        7: (6, 1, 3), 8: (4, 4, 7), 9: (7, 9, 7),
    }
    inputs = ['1', '2', '3']
    transitions = {
        str(s): {a: (str(next_state[s][i]), str(outputs[s][i])) for i, a in enumerate(inputs)}
        for s in outputs
    }
    return mealy([str(s) for s in range(1, 10)], inputs, transitions)

@pytest.fixture
def moore_with_unreachable():
    return moore(
        ['A', 'B', 'C', 'D'], ['a', 'b'],
        {
            'A': {'a': 'B', 'b': 'A'},
            'B': {'a': 'C', 'b': 'B'},
            'C': {'a': 'B', 'b': 'C'},
            'D': {'a': 'A', 'b': 'D'},
        },
        {'A': '0', 'B': '1', 'C': '0', 'D': '1'},
    )
