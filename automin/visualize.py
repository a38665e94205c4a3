from graphviz import Digraph

from .errors import IoFailure

def to_digraph(machine, name=None):
    """
    Граф автомата для Graphviz. У автомата Мура выход пишется в вершине
    (состояние/выход), у автомата Мили на дуге (вход/выход).
    Параллельные дуги между одной парой состояний объединяются в одну.
    """
    dot = Digraph(name=name or machine.kind, graph_attr={'rankdir': 'LR'},
                  node_attr={'shape': 'circle'})
    dot.node('__start', label='', shape='none', width='0', height='0')
    for s in machine.states:
        label = s if machine.is_mealy else f"{s}/{machine.outputs[s]}"
        dot.node(s, label=label)
    dot.edge('__start', machine.start)

    edges = {}
    for s in machine.states:
        for a in machine.inputs:
            label = f"{a}/{machine.edge_output(s, a)}" if machine.is_mealy else a
            edges.setdefault((s, machine.target(s, a)), []).append(label)
    for (src, dest), labels in edges.items():
        dot.edge(src, dest, label=', '.join(labels))
    return dot

def save_dot(machine, filename):
    try:
        to_digraph(machine).save(filename)
    except OSError as e:
        raise IoFailure(filename, e) from e
