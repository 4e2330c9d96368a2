"""
FormatOptions — Явные флаги форматирования текстового канала

Заменяет ambient-состояние потока (текущее основание, показ префикса)
на immutable значение, передаваемое в read/write явно.
Ядро BigInteger остаётся referentially transparent.
"""

from pydantic import BaseModel, Field

from src.core.math.base_conversion import MAX_BASE, MIN_BASE


class FormatOptions(BaseModel):
    """
    Флаги форматирования для Text-Stream Adapter.

    Immutable Pydantic модель; основание ограничено [2, 36].
    """

    base: int = Field(10, ge=MIN_BASE, le=MAX_BASE, description="Основание текста")
    show_base: bool = Field(
        False, description="Показывать префикс основания (0 для 8, 0x для 16)"
    )

    model_config = {"frozen": True}

    @classmethod
    def decimal(cls) -> "FormatOptions":
        return cls(base=10)

    @classmethod
    def hexadecimal(cls, show_base: bool = False) -> "FormatOptions":
        return cls(base=16, show_base=show_base)

    @classmethod
    def octal(cls, show_base: bool = False) -> "FormatOptions":
        return cls(base=8, show_base=show_base)

    @property
    def is_hex(self) -> bool:
        return self.base == 16

    @property
    def is_oct(self) -> bool:
        return self.base == 8
