"""
Ошибки доменного уровня scripture_ranges.

Все нарушения инвариантов (границы span, exclusion вне диапазона,
объединение разных книг, ошибки builder) сообщаются одним типом
исключения — RangeValidationError. Ошибки синхронные, операция
не применяется частично.
"""


class RangeValidationError(ValueError):
    """Нарушение инварианта диапазона или некорректный ввод."""

    pass
