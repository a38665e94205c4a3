from .reachability import remove_unreachable
from .partition import refine
from .builder import build_minimized, Renaming

def minimize(machine, report=None, prefix='X'):
    """
    Минимизация автомата Мили или Мура:
      проверка -> удаление недостижимых состояний -> уточнение разбиения -> сборка.
    Возвращает (минимальный автомат, отображение достижимых состояний в новые).
    """
    machine.validate()
    pruned = remove_unreachable(machine)
    if report is not None and len(pruned) != len(machine):
        kept = set(pruned.states)
        report(f"Удалены недостижимые состояния: {[s for s in machine.states if s not in kept]}")
    partition = refine(pruned, report)
    return build_minimized(pruned, partition, Renaming(prefix))
