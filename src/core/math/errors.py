"""
BigInteger Errors — Иерархия исключений арифметики произвольной точности

Все ошибки fail-fast: частичный результат или sentinel никогда не возвращается.
Каждое исключение также наследует соответствующий builtin-тип, чтобы
вызывающий код мог ловить их стандартными средствами Python.

Иерархия:
    BigIntegerError (база)
    ├── InvalidBaseError            (ValueError)
    ├── InvalidDigitCharacterError  (ValueError)
    ├── DivisionByZeroError         (ZeroDivisionError)
    ├── NarrowingOverflowError      (OverflowError)
    └── EmptyTokenError             (EOFError)
"""

from typing import Any, Dict, Optional


class BigIntegerError(Exception):
    """
    Базовое исключение для всех ошибок BigInteger.

    Поддерживает:
    - Сообщение об ошибке
    - Контекст (dict) для диагностики
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} | Context: {context_str}"


class InvalidBaseError(BigIntegerError, ValueError):
    """Основание вне диапазона [2, 36] при parse/render."""

    def __init__(self, base: int):
        super().__init__(f"Invalid base: {base}", context={"base": base})
        self.base = base


class InvalidDigitCharacterError(BigIntegerError, ValueError):
    """
    Символ не является допустимой цифрой в заданном основании.

    Атрибут index указывает позицию символа во входной строке.
    """

    def __init__(self, index: int, character: str, base: int):
        super().__init__(
            f"Invalid symbol at index {index}",
            context={"index": index, "character": character, "base": base},
        )
        self.index = index
        self.character = character
        self.base = base


class DivisionByZeroError(BigIntegerError, ZeroDivisionError):
    """Делитель равен нулю (деление или остаток)."""

    def __init__(self, dividend: Optional[str] = None):
        context = {"dividend": dividend} if dividend is not None else None
        super().__init__("Division by zero", context=context)


class NarrowingOverflowError(BigIntegerError, OverflowError):
    """Значение не помещается в native fixed-width integer."""

    def __init__(self, value: str, bits: int = 64):
        super().__init__(
            f"int{bits}_t overflow",
            context={"value": value, "bits": bits},
        )
        self.value = value
        self.bits = bits


class EmptyTokenError(BigIntegerError, EOFError):
    """Текстовый поток исчерпан до начала очередного токена."""

    def __init__(self):
        super().__init__("No token available: stream is exhausted")
