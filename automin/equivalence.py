from collections import deque

def are_isomorphic(auto1, auto2):
    """
    Проверяет изоморфизм двух автоматов одного типа.

    Существует взаимно однозначное отображение между достижимыми
    состояниями (переименование), при котором:
      - выходы соответствующих состояний (Мура) или переходов (Мили) совпадают;
      - переходы по каждому входному символу согласованы.

    Обход в ширину запускается от начальных состояний; при первом
    расхождении возвращается False.
    """
    if auto1.kind != auto2.kind or auto1.inputs != auto2.inputs:
        return False

    def outputs_equal(s1, s2):
        if auto1.is_mealy:
            return True
        return auto1.outputs[s1] == auto2.outputs[s2]

    s1_init, s2_init = auto1.start, auto2.start
    if not outputs_equal(s1_init, s2_init):
        return False

    mapping = {s1_init: s2_init}
    used = {s2_init}
    queue = deque([(s1_init, s2_init)])
    while queue:
        state1, state2 = queue.popleft()
        for symbol in auto1.inputs:
            if auto1.edge_output(state1, symbol) != auto2.edge_output(state2, symbol):
                return False
            tgt1 = auto1.target(state1, symbol)
            tgt2 = auto2.target(state2, symbol)
            if tgt1 in mapping:
                if mapping[tgt1] != tgt2:
                    return False
            else:
                if tgt2 in used or not outputs_equal(tgt1, tgt2):
                    return False
                mapping[tgt1] = tgt2
                used.add(tgt2)
                queue.append((tgt1, tgt2))
    return True
