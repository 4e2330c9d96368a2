"""
Limbs — Представление и нормализация magnitude

Magnitude хранится как list[int] limbs, младший limb первым.
Каждый limb в диапазоне [0, INTERNAL_BASE).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (canonical form):
1. Нет старших нулевых limbs
2. Ноль представлен пустым списком
3. INTERNAL_BASE * INTERNAL_BASE = 10^18 < 2^63 (произведение двух limbs
   помещается в 64-битный знаковый аккумулятор)
"""

from typing import Final, Sequence

# =============================================================================
# CONSTANTS
# =============================================================================

# Внутреннее основание limb-представления
INTERNAL_BASE: Final[int] = 1_000_000_000

# Границы int64_t для narrowing-конверсии
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# NORMALIZATION
# =============================================================================


def trim_limbs(limbs: list[int]) -> list[int]:
    """
    Удаление старших нулевых limbs (in place).

    Args:
        limbs: Magnitude, младший limb первым

    Returns:
        Тот же список в canonical form (для chaining)
    """
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def limbs_from_int(value: int) -> list[int]:
    """
    Разложение abs(value) на limbs по INTERNAL_BASE.

    Examples:
        >>> limbs_from_int(0)
        []
        >>> limbs_from_int(1_000_000_001)
        [1, 1]
        >>> limbs_from_int(-5)
        [5]
    """
    value = abs(value)
    limbs: list[int] = []
    while value != 0:
        value, limb = divmod(value, INTERNAL_BASE)
        limbs.append(limb)
    return limbs


# =============================================================================
# COMPARATOR
# =============================================================================


def compare_magnitudes(lhs: Sequence[int], rhs: Sequence[int]) -> int:
    """
    Сравнение абсолютных значений двух magnitudes.

    Корректно только для canonical form: меньше limbs => меньше значение.
    При равной длине сравнение от старшего limb к младшему, первое
    различие решает.

    Returns:
        -1 если |lhs| < |rhs|, 0 если равны, 1 если |lhs| > |rhs|

    Examples:
        >>> compare_magnitudes([1], [0, 1])
        -1
        >>> compare_magnitudes([5, 2], [7, 1])
        1
        >>> compare_magnitudes([], [])
        0
    """
    if len(lhs) != len(rhs):
        return -1 if len(lhs) < len(rhs) else 1

    for i in range(len(lhs) - 1, -1, -1):
        if lhs[i] != rhs[i]:
            return -1 if lhs[i] < rhs[i] else 1

    return 0


# =============================================================================
# LIMB-SCALAR OPERATIONS
# =============================================================================


def multiply_limbs_by_short(limbs: Sequence[int], factor: int) -> list[int]:
    """
    Умножение magnitude на один limb с переносом: O(len(limbs)).

    Args:
        limbs: Magnitude
        factor: Множитель в [0, INTERNAL_BASE]

    Returns:
        Новый magnitude в canonical form
    """
    result: list[int] = []
    carry = 0
    i = 0

    while i < len(limbs) or carry != 0:
        digit = carry
        if i < len(limbs):
            digit += limbs[i] * factor
        result.append(digit % INTERNAL_BASE)
        carry = digit // INTERNAL_BASE
        i += 1

    return trim_limbs(result)


def shift_limbs(limbs: Sequence[int], positions: int) -> list[int]:
    """
    Сдвиг magnitude влево на positions limbs (умножение на B^positions).

    Ноль остаётся нулём: нули не добавляются к пустому списку.
    """
    if not limbs:
        return []
    return [0] * positions + list(limbs)
