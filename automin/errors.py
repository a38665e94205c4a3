"""
Ошибки, которые поднимает минимизатор при некорректном автомате или таблице.
Все они фатальны для текущего запуска: ничего не исправляется молча.
"""

class AutomatonError(Exception):
    """Базовый класс для всех ошибок входных данных."""

class MalformedTable(AutomatonError):
    """Таблица не соответствует формату: не совпадает число столбцов,
    нет разделителя '/' в ячейке автомата Мили, не хватает перехода."""
    def __init__(self, message, line=None):
        AutomatonError.__init__(self, message)
        self.line = line

    def __str__(self):
        message = AutomatonError.__str__(self)
        if self.line is None:
            return message
        return f"строка {self.line}: {message}"

class DuplicateState(MalformedTable):
    def __init__(self, state, line=None):
        MalformedTable.__init__(self, f"состояние {state!r} указано дважды", line)
        self.state = state

class UnknownStateReference(AutomatonError):
    """Переход ведёт в состояние, которого нет в заголовке."""
    def __init__(self, state, source=None, symbol=None):
        if source is None:
            message = f"неизвестное состояние {state!r}"
        else:
            message = f"переход {source!r} по {symbol!r} ведёт в неизвестное состояние {state!r}"
        AutomatonError.__init__(self, message)
        self.state = state
        self.source = source
        self.symbol = symbol

class EmptyModel(AutomatonError):
    pass

class EmptyStateSet(EmptyModel):
    def __init__(self, message="автомат не содержит состояний"):
        EmptyModel.__init__(self, message)

class EmptyAlphabet(EmptyModel):
    def __init__(self, message="автомат не содержит входных символов"):
        EmptyModel.__init__(self, message)

class IoFailure(AutomatonError):
    """Файл не удалось открыть на чтение или запись."""
    def __init__(self, filename, cause):
        AutomatonError.__init__(self, f"не удалось открыть файл {filename!r}: {cause.strerror or cause}")
        self.filename = filename
        self.cause = cause
