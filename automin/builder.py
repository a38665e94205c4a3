from .model import Machine

class Renaming:
    """
    Контекст переименования классов в новые состояния X0, X1, ...

    Класс, содержащий начальное состояние, всегда получает номер 0.
    Остальные нумеруются по возрастанию: сначала по первичному классу
    выходов, из которого они выделились, затем в порядке создания.
    """
    def __init__(self, prefix='X'):
        self.prefix = prefix
        self.names = {}
        self.order = []

    def assign(self, partition, initial_state):
        first = partition.group_of(initial_state)
        self.names = {first: self.prefix + '0'}
        rest = sorted((h for h in range(len(partition)) if h != first),
                      key=lambda h: (partition.origin[h], h))
        self.order = [first] + rest
        for index, handle in enumerate(rest, start=1):
            self.names[handle] = f"{self.prefix}{index}"
        return self.names

def _check_partition(machine, partition):
    seen = set()
    for handle, group in enumerate(partition.groups):
        if not group:
            raise ValueError(f"empty group {handle}")
        for s in group:
            if s in seen:
                raise ValueError(f"state {s!r} belongs to more than one group")
            if partition.owner.get(s) != handle:
                raise ValueError(f"state {s!r} is not owned by group {handle}")
            seen.add(s)
    if seen != set(machine.states):
        raise ValueError("partition does not cover the machine states")

def build_minimized(machine, partition, renaming=None):
    """
    Строит минимальный автомат по финальному разбиению.
    Переходы и выходы берутся у представителя каждого класса.
    Возвращает (новый автомат, отображение старое состояние -> новое).
    """
    _check_partition(machine, partition)
    if renaming is None:
        renaming = Renaming()
    names = renaming.assign(partition, machine.start)

    new_states = [names[h] for h in renaming.order]
    mapping = {s: names[partition.group_of(s)] for s in machine.states}

    new_transitions = {}
    new_outputs = {} if not machine.is_mealy else None
    for handle in renaming.order:
        rep = partition.representative(handle)
        new_state = names[handle]
        row = {}
        for a in machine.inputs:
            dest = mapping[machine.target(rep, a)]
            if machine.is_mealy:
                row[a] = (dest, machine.edge_output(rep, a))
            else:
                row[a] = dest
        new_transitions[new_state] = row
        if new_outputs is not None:
            new_outputs[new_state] = machine.outputs[rep]
    return Machine(machine.kind, new_states, machine.inputs, new_transitions, new_outputs), mapping
