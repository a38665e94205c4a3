from collections import deque

from .errors import EmptyStateSet

def reachable_states(machine):
    """Множество состояний, достижимых из начального (обход в ширину)."""
    if not machine.states:
        raise EmptyStateSet()
    reachable = set()
    queue = deque([machine.start])
    while queue:
        s = queue.popleft()
        if s in reachable:
            continue
        reachable.add(s)
        for a in machine.inputs:
            nxt = machine.target(s, a)
            if nxt not in reachable:
                queue.append(nxt)
    return reachable

# Удаление недостижимых состояний. Оставшиеся состояния сохраняют
# исходный относительный порядок, все входные столбцы остаются.
def remove_unreachable(machine):
    return machine.restrict(reachable_states(machine))
