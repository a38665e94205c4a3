"""
Чтение и запись автоматов в виде таблиц с разделителем ';'.

Мили:
    ;S0;S1
    a;S1/y1;S0/y2

Мура:
    ;y1;y2
    ;S0;S1
    a;S1;S0
"""

import csv

from .errors import MalformedTable, IoFailure
from .model import MEALY, MOORE, mealy, moore

def read_csv(filename, delimiter=';'):
    try:
        with open(filename, newline='', encoding='utf-8') as csvfile:
            reader = csv.reader(csvfile, delimiter=delimiter)
            return [row for row in reader if any(cell.strip() for cell in row)]
    except OSError as e:
        raise IoFailure(filename, e) from e
    except UnicodeDecodeError as e:
        raise MalformedTable(f"файл {filename!r} не в кодировке UTF-8") from e
    except csv.Error as e:
        raise MalformedTable(f"не удалось разобрать файл {filename!r}: {e}") from e

def write_csv(filename, rows, delimiter=';'):
    try:
        with open(filename, mode='w', newline='', encoding='utf-8') as csvfile:
            writer = csv.writer(csvfile, delimiter=delimiter)
            writer.writerows(rows)
    except OSError as e:
        raise IoFailure(filename, e) from e

def detect_kind(rows):
    # Если во второй строке первая ячейка пустая – это автомат Мура
    if len(rows) >= 2 and rows[1] and rows[1][0].strip() == "":
        return MOORE
    return MEALY

def _cells(row, count, line):
    """Ровно count ячеек после первой; лишние пустые ячейки в конце допустимы."""
    cells = [cell.strip() for cell in row[1:]]
    while len(cells) > count and cells[-1] == "":
        cells.pop()
    if len(cells) != count:
        raise MalformedTable(f"ожидалось {count} ячеек, найдено {len(cells)}", line)
    for cell in cells:
        if not cell:
            raise MalformedTable("пустая ячейка", line)
    return cells

def _corner(row, line):
    if row and row[0].strip():
        raise MalformedTable(f"первая ячейка заголовка должна быть пустой, найдено {row[0].strip()!r}", line)

def _header(row, line):
    _corner(row, line)
    names = [cell.strip() for cell in row[1:]]
    while names and names[-1] == "":
        names.pop()
    return _cells(row, len(names), line)

def parse_mealy(rows):
    if not rows:
        raise MalformedTable("пустая таблица")
    state_names = _header(rows[0], 1)
    input_symbols = []
    transitions = {st: {} for st in state_names}
    for line, row in enumerate(rows[1:], start=2):
        inp = row[0].strip()
        if not inp:
            raise MalformedTable("не указан входной символ", line)
        if inp in input_symbols:
            raise MalformedTable(f"входной символ {inp!r} указан дважды", line)
        input_symbols.append(inp)
        for src, cell in zip(state_names, _cells(row, len(state_names), line)):
            if '/' not in cell:
                raise MalformedTable(f"некорректный формат ячейки: {cell!r}", line)
            target, out = cell.split('/', 1)
            transitions[src][inp] = (target.strip(), out.strip())
    machine = mealy(state_names, input_symbols, transitions)
    machine.validate()
    return machine

def parse_moore(rows):
    if len(rows) < 2:
        raise MalformedTable("неверный формат автомата Мура: нет строк выходов и состояний")
    _corner(rows[0], 1)
    state_names = _header(rows[1], 2)
    outputs = _cells(rows[0], len(state_names), 1)
    input_symbols = []
    transitions = {st: {} for st in state_names}
    for line, row in enumerate(rows[2:], start=3):
        inp = row[0].strip()
        if not inp:
            raise MalformedTable("не указан входной символ", line)
        if inp in input_symbols:
            raise MalformedTable(f"входной символ {inp!r} указан дважды", line)
        input_symbols.append(inp)
        for src, target in zip(state_names, _cells(row, len(state_names), line)):
            transitions[src][inp] = target
    machine = moore(state_names, input_symbols, transitions, dict(zip(state_names, outputs)))
    machine.validate()
    return machine

def export_mealy(machine):
    rows = [[''] + machine.states]
    for a in machine.inputs:
        row = [a]
        for st in machine.states:
            target, out = machine.transitions[st][a]
            row.append(f"{target}/{out}")
        rows.append(row)
    return rows

def export_moore(machine):
    rows = [[''] + [machine.outputs[st] for st in machine.states], [''] + machine.states]
    for a in machine.inputs:
        rows.append([a] + [machine.transitions[st][a] for st in machine.states])
    return rows

def load(kind, filename):
    rows = read_csv(filename)
    if kind == MEALY:
        return parse_mealy(rows)
    return parse_moore(rows)

def save(machine, filename):
    rows = export_mealy(machine) if machine.is_mealy else export_moore(machine)
    write_csv(filename, rows)
