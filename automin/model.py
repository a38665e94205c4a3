"""
Представление автомата в памяти.

Один класс Machine описывает и автомат Мили, и автомат Мура; различие
задаётся полем kind:

  transitions[state][symbol] = (target, output)   # Мили
  transitions[state][symbol] = target             # Мура, outputs[state] = выход

Первое состояние в списке states всегда начальное.

>>> m = moore(['A', 'B'], ['a'], {'A': {'a': 'B'}, 'B': {'a': 'A'}}, {'A': '0', 'B': '1'})
>>> m.run(['a', 'a', 'a'])
['1', '0', '1']
"""

from .errors import MalformedTable, UnknownStateReference, EmptyStateSet, EmptyAlphabet, DuplicateState

MEALY = 'mealy'
MOORE = 'moore'
KINDS = (MEALY, MOORE)

class Machine:
    def __init__(self, kind, states, inputs, transitions, outputs=None):
        if kind not in KINDS:
            raise ValueError(f"unknown machine kind: {kind!r}")
        self.kind = kind
        self.states = list(states)
        self.inputs = list(inputs)
        self.transitions = transitions
        self.outputs = outputs if kind == MOORE else None

    def __repr__(self):
        return f"<Machine {self.kind} states={self.states!r} inputs={self.inputs!r}>"

    def __len__(self):
        return len(self.states)

    def __eq__(self, other):
        if not isinstance(other, Machine):
            return NotImplemented
        return (self.kind == other.kind and self.states == other.states and self.inputs == other.inputs
                and self.transitions == other.transitions and self.outputs == other.outputs)

    @property
    def is_mealy(self):
        return self.kind == MEALY

    @property
    def start(self):
        if not self.states:
            raise EmptyStateSet()
        return self.states[0]

    def target(self, state, symbol):
        move = self.transitions[state][symbol]
        return move[0] if self.is_mealy else move

    def edge_output(self, state, symbol):
        """Выход, выдаваемый при переходе из state по symbol."""
        if self.is_mealy:
            return self.transitions[state][symbol][1]
        return self.outputs[self.transitions[state][symbol]]

    def output_signature(self, state):
        """
        По этой подписи строится первичное (0-эквивалентное) разбиение:
        для автомата Мура это выход самого состояния, для автомата Мили
        вектор выходов по всем входным символам в порядке столбцов.
        """
        if self.is_mealy:
            return tuple(self.transitions[state][a][1] for a in self.inputs)
        return self.outputs[state]

    def validate(self):
        """
        Проверяет, что функция переходов полная и не ссылается
        на отсутствующие состояния.
        """
        if not self.states:
            raise EmptyStateSet()
        if not self.inputs:
            raise EmptyAlphabet()
        known = set()
        for s in self.states:
            if s in known:
                raise DuplicateState(s)
            known.add(s)
        for s in self.states:
            row = self.transitions.get(s, {})
            for a in self.inputs:
                if a not in row:
                    raise MalformedTable(f"нет перехода из {s!r} по {a!r}")
                dest = self.target(s, a)
                if dest not in known:
                    raise UnknownStateReference(dest, s, a)
            if not self.is_mealy and s not in self.outputs:
                raise MalformedTable(f"не задан выход состояния {s!r}")

    def restrict(self, keep):
        """Копия автомата только с состояниями из keep (порядок сохраняется)."""
        states = [s for s in self.states if s in keep]
        transitions = {s: dict(self.transitions[s]) for s in states}
        outputs = None
        if not self.is_mealy:
            outputs = {s: self.outputs[s] for s in states}
        return Machine(self.kind, states, self.inputs, transitions, outputs)

    def run(self, word, state=None):
        """
        Список выходов, выданных автоматом при чтении word. Для автомата Мура
        это выходы состояний, в которые он переходит; выход исходного
        состояния в список не входит.
        """
        if state is None:
            state = self.start
        result = []
        for a in word:
            result.append(self.edge_output(state, a))
            state = self.target(state, a)
        return result

def mealy(states, inputs, transitions):
    return Machine(MEALY, states, inputs, transitions)

def moore(states, inputs, transitions, outputs):
    return Machine(MOORE, states, inputs, transitions, outputs)
