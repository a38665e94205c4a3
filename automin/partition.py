"""
Разбиение состояний на классы эквивалентности.

Классы хранятся в массиве и адресуются целым номером (handle); состояние
ссылается на номер своего класса, поэтому дробление класса не портит
ссылки на остальные. Представитель класса: его первое состояние в
исходном порядке; оно никогда не покидает свой класс.

Алгоритм:
  1. первичное разбиение по подписи выходов (Machine.output_signature);
  2. на каждом проходе для каждого класса строим вектор классов, в которые
     ведут переходы представителя, и отделяем состояния с другим вектором
     (состояния с одинаковым отличающимся вектором попадают в общий новый класс);
  3. повторяем, пока проход не перестанет создавать новые классы.
"""

from .errors import EmptyAlphabet

class Partition:
    def __init__(self):
        self.groups = []
        self.origin = []
        self.owner = {}

    def __len__(self):
        return len(self.groups)

    def add_group(self, states, origin=None):
        handle = len(self.groups)
        self.groups.append([])
        self.origin.append(handle if origin is None else origin)
        for s in states:
            self.move(s, handle)
        return handle

    def move(self, state, handle):
        old = self.owner.get(state)
        if old is not None:
            self.groups[old].remove(state)
        self.groups[handle].append(state)
        self.owner[state] = handle

    def group_of(self, state):
        return self.owner[state]

    def representative(self, handle):
        return self.groups[handle][0]

    def blocks(self):
        return [list(g) for g in self.groups]

def initial_partition(machine):
    by_signature = {}
    for s in machine.states:
        by_signature.setdefault(machine.output_signature(s), []).append(s)
    partition = Partition()
    for block in by_signature.values():
        partition.add_group(block)
    return partition

def _target_groups(machine, owner, state):
    return tuple(owner[machine.target(state, a)] for a in machine.inputs)

def refine_once(machine, partition):
    """Один проход уточнения. Возвращает число созданных классов."""
    # Все векторы считаются по разбиению на начало прохода.
    owner = dict(partition.owner)
    created = 0
    for handle in range(len(partition)):
        group = partition.groups[handle]
        if len(group) <= 1:
            continue
        baseline = _target_groups(machine, owner, partition.representative(handle))
        split = {}
        for s in group[1:]:
            vector = _target_groups(machine, owner, s)
            if vector != baseline:
                split.setdefault(vector, []).append(s)
        for states in split.values():
            partition.add_group(states, origin=partition.origin[handle])
            created += 1
    return created

def refine(machine, report=None):
    """
    Строит самое грубое разбиение, в котором два состояния лежат в одном
    классе тогда и только тогда, когда они неразличимы никакой входной
    последовательностью.
    """
    if not machine.inputs:
        raise EmptyAlphabet()
    partition = initial_partition(machine)
    if report is not None:
        report(f"Проход 0: {len(partition)} класс(ов) {partition.blocks()}")
    step = 0
    while True:
        step += 1
        created = refine_once(machine, partition)
        if report is not None:
            report(f"Проход {step}: {len(partition)} класс(ов) {partition.blocks()}")
        if not created:
            return partition
