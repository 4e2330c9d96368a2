"""
BigInteger — Знаковое целое произвольной точности

Значение = (-1 если negative иначе 1) * Σ limb[i] * INTERNAL_BASE^i

Модуль содержит:
- Представление и нормализацию (canonical form после каждой операции)
- Arithmetic Engine: сложение, вычитание, умножение, деление, остаток
- Comparator: полный порядок по знаку и абсолютному значению
- Narrowing-конверсию в int64

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет старших нулевых limbs; ноль хранится как пустой список
2. Ноль никогда не бывает отрицательным
3. Каждый экземпляр владеет своим списком limbs (копии не разделяют storage)
4. Деление усекает к нулю: |a / b| == floor(|a| / |b|), знак по XOR
5. Никакого молчаливого усечения или округления

Операнды типа int принимаются с обеих сторон каждого оператора
(native value продвигается до BigInteger).
"""

import re
from typing import Any, Dict, Optional, Sequence, Union

from src.core.math.errors import DivisionByZeroError, NarrowingOverflowError
from src.core.math.limbs import (
    INT64_MAX,
    INT64_MIN,
    INTERNAL_BASE,
    compare_magnitudes,
    limbs_from_int,
    multiply_limbs_by_short,
    shift_limbs,
    trim_limbs,
)

# Спецификатор формата: [#][d|o|x]
_FORMAT_SPEC_PATTERN = re.compile(r"^(?P<alternate>#)?(?P<kind>[dox])?$")

_FORMAT_KIND_TO_BASE: Dict[str, int] = {"d": 10, "o": 8, "x": 16}


class BigInteger:
    """
    Знаковое целое произвольной точности с value semantics.

    Экземпляр изменяем только через явные in-place методы
    (negate, increment, decrement, take); все операторы возвращают новые
    значения. Из-за изменяемости экземпляр не hashable.

    Оператор `/` (включая `int / BigInteger`) это целочисленное деление
    с усечением к нулю, а не float-деление Python; `//` не определён.
    `%` принимает только неотрицательный int и возвращает int в [0, m).

    Examples:
        >>> BigInteger(999_999_999) + 1
        BigInteger('1000000000')
        >>> BigInteger(-7) / 2
        BigInteger('-3')
        >>> BigInteger(-17) % 5
        3
    """

    __slots__ = ("_limbs", "_negative")

    # Изменяемое значение
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: int = 0):
        if not isinstance(value, int):
            raise TypeError(
                f"BigInteger expects int, got {type(value).__name__}"
            )
        self._limbs: list[int] = limbs_from_int(value)
        self._negative: bool = value < 0

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def _from_limbs(cls, limbs: list[int], negative: bool = False) -> "BigInteger":
        """Сборка из готового списка limbs без копирования (с нормализацией)."""
        result = cls.__new__(cls)
        result._limbs = trim_limbs(limbs)
        result._negative = negative and bool(result._limbs)
        return result

    @classmethod
    def from_limbs(cls, limbs: Sequence[int], negative: bool = False) -> "BigInteger":
        """
        Сборка из последовательности limbs (младший первым).

        Args:
            limbs: Limbs в диапазоне [0, INTERNAL_BASE)
            negative: Знак; игнорируется для нуля

        Raises:
            ValueError: Если limb вне диапазона [0, INTERNAL_BASE)
        """
        for position, limb in enumerate(limbs):
            if not 0 <= limb < INTERNAL_BASE:
                raise ValueError(
                    f"limb at position {position} must be in [0, {INTERNAL_BASE}), "
                    f"got {limb}"
                )
        return cls._from_limbs(list(limbs), negative)

    @classmethod
    def from_string(cls, text: str, base: int = 10) -> "BigInteger":
        """Разбор текста в основании base (см. base_conversion.parse_big_integer)."""
        from src.core.math.base_conversion import parse_big_integer

        return parse_big_integer(text, base)

    # =========================================================================
    # VALUE SEMANTICS
    # =========================================================================

    def copy(self) -> "BigInteger":
        """Глубокая копия: новый экземпляр с собственным списком limbs."""
        return BigInteger._from_limbs(list(self._limbs), self._negative)

    def __copy__(self) -> "BigInteger":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "BigInteger":
        return self.copy()

    def take(self) -> "BigInteger":
        """
        Передача владения (move).

        Возвращает новый экземпляр, владеющий limbs этого значения;
        сам источник сбрасывается в canonical zero.
        """
        moved = BigInteger._from_limbs(self._limbs, self._negative)
        self._limbs = []
        self._negative = False
        return moved

    def _assign(self, other: "BigInteger") -> None:
        # other всегда свежий результат операции, его storage не разделяется
        self._limbs = other._limbs
        self._negative = other._negative

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def sign(self) -> int:
        """-1, 0 или 1."""
        if not self._limbs:
            return 0
        return -1 if self._negative else 1

    @property
    def limb_count(self) -> int:
        """Количество limbs в canonical form (0 для нуля)."""
        return len(self._limbs)

    @property
    def limbs(self) -> tuple[int, ...]:
        """Read-only копия limbs, младший первым."""
        return tuple(self._limbs)

    def is_zero(self) -> bool:
        return not self._limbs

    def is_negative(self) -> bool:
        return self._negative and bool(self._limbs)

    def negate(self) -> None:
        """Смена знака in place. Для нуля no-op."""
        if self._limbs:
            self._negative = not self._negative

    def __bool__(self) -> bool:
        return bool(self._limbs)

    def __abs__(self) -> "BigInteger":
        return BigInteger._from_limbs(list(self._limbs), False)

    def __neg__(self) -> "BigInteger":
        result = self.copy()
        result.negate()
        return result

    def __pos__(self) -> "BigInteger":
        return self.copy()

    # =========================================================================
    # COMPARATOR
    # =========================================================================

    def _compare(self, rhs: "BigInteger") -> int:
        """
        Полный порядок: сначала знак (negative < zero < positive),
        затем абсолютные значения с учётом знака.
        """
        lhs_sign = self.sign
        rhs_sign = rhs.sign

        if lhs_sign != rhs_sign:
            return -1 if lhs_sign < rhs_sign else 1

        # Для отрицательных больший модуль означает меньшее значение
        return compare_magnitudes(self._limbs, rhs._limbs) * (lhs_sign or 1)

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) == 0

    def __ne__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) != 0

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) >= 0

    # =========================================================================
    # ADDITION / SUBTRACTION
    # =========================================================================

    def _add(self, rhs: "BigInteger") -> "BigInteger":
        """
        Сложение со знаковым представлением limbs.

        После делегирования гарантируется |self| >= |rhs| и self >= 0,
        поэтому смешанные знаки сводятся к вычитанию на неотрицательных
        limbs, а итоговый перенос никогда не уходит в минус.
        """
        if compare_magnitudes(self._limbs, rhs._limbs) == -1:
            return rhs._add(self)

        if self._negative:
            return -((-self)._add(-rhs))

        lhs_limbs = self._limbs
        rhs_limbs = rhs._limbs
        rhs_sign = rhs.sign

        result: list[int] = []
        carry = 0
        i = 0

        while i < len(lhs_limbs) or carry != 0:
            digit = carry
            if i < len(lhs_limbs):
                digit += lhs_limbs[i]
            if i < len(rhs_limbs):
                digit += rhs_sign * rhs_limbs[i]

            limb = digit % INTERNAL_BASE
            result.append(limb)
            carry = (digit - limb) // INTERNAL_BASE
            i += 1

        return BigInteger._from_limbs(result)

    def _sub(self, rhs: "BigInteger") -> "BigInteger":
        if self._negative:
            return -((-self)._add(rhs))
        return self._add(-rhs)

    def __add__(self, other: Union["BigInteger", int]) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._add(rhs)

    def __radd__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._add(self)

    def __sub__(self, other: Union["BigInteger", int]) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._sub(rhs)

    def __rsub__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._sub(self)

    def increment(self) -> "BigInteger":
        """Прибавление 1 in place. Возвращает self."""
        self._assign(self._add(BigInteger(1)))
        return self

    def decrement(self) -> "BigInteger":
        """Вычитание 1 in place. Возвращает self."""
        self._assign(self._sub(BigInteger(1)))
        return self

    # =========================================================================
    # MULTIPLICATION
    # =========================================================================

    def _mul(self, rhs: "BigInteger") -> "BigInteger":
        """
        Schoolbook умножение: O(len(self) * len(rhs)) limb-операций.

        Знак результата: XOR знаков операндов (ноль всегда положителен).
        """
        if self._negative:
            return -((-self)._mul(rhs))
        if rhs._negative:
            return -(self._mul(-rhs))

        result = BigInteger(0)
        for position, limb in enumerate(rhs._limbs):
            scaled = multiply_limbs_by_short(self._limbs, limb)
            result = result._add(BigInteger._from_limbs(shift_limbs(scaled, position)))

        return result

    def __mul__(self, other: Union["BigInteger", int]) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._mul(rhs)

    def __rmul__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._mul(self)

    # =========================================================================
    # DIVISION / REMAINDER
    # =========================================================================

    def _truediv(self, rhs: "BigInteger") -> "BigInteger":
        """
        Деление «уголком» с усечением к нулю.

        Trailing remainder накапливается от старшего limb делимого к младшему;
        очередной limb частного подбирается бисекцией (guess_quotient_limb).
        Частное строится в обратном порядке (O(1) append) и разворачивается
        один раз в конце.

        Стоимость: O(len(self) * log(INTERNAL_BASE) * len(rhs)).

        Raises:
            DivisionByZeroError: Если rhs == 0 (для любого делимого)
        """
        if rhs.is_zero():
            raise DivisionByZeroError(dividend=str(self))

        if self._negative:
            return -((-self)._truediv(rhs))
        if rhs._negative:
            return -(self._truediv(-rhs))

        reversed_quotient: list[int] = []
        trailing_remainder = BigInteger(0)

        for i in range(len(self._limbs) - 1, -1, -1):
            trailing_remainder._insert_least_significant(self._limbs[i])
            digit = guess_quotient_limb(trailing_remainder, rhs)
            reversed_quotient.append(digit)
            trailing_remainder = trailing_remainder._sub(multiply_by_short(rhs, digit))

        reversed_quotient.reverse()
        return BigInteger._from_limbs(reversed_quotient)

    def _insert_least_significant(self, limb: int) -> None:
        self._limbs.insert(0, limb)
        trim_limbs(self._limbs)

    def __truediv__(self, other: Union["BigInteger", int]) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._truediv(rhs)

    def __rtruediv__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._truediv(self)

    def remainder(self, other: Union["BigInteger", int]) -> "BigInteger":
        """
        Остаток усечённого деления: self - (self / other) * other.

        Знак остатка совпадает со знаком делимого.

        Raises:
            DivisionByZeroError: Если other == 0
        """
        return self.divmod_trunc(other)[1]

    def divmod_trunc(
        self, other: Union["BigInteger", int]
    ) -> tuple["BigInteger", "BigInteger"]:
        """
        Частное и остаток усечённого деления.

        Гарантия: quotient * other + remainder == self

        Raises:
            DivisionByZeroError: Если other == 0
            TypeError: Если other не BigInteger/int
        """
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(
                f"unsupported operand type for divmod_trunc: {type(other).__name__}"
            )
        quotient = self._truediv(rhs)
        return quotient, self._sub(quotient._mul(rhs))

    def __mod__(self, modulus: int) -> int:
        """
        Остаток по беззнаковому native модулю, всегда в [0, modulus).

        ((a - (a / m) * m) mod m + m) mod m

        Raises:
            DivisionByZeroError: Если modulus == 0
            ValueError: Если modulus < 0
        """
        if not isinstance(modulus, int):
            return NotImplemented
        if modulus < 0:
            raise ValueError(f"modulus must be non-negative, got {modulus}")
        if modulus == 0:
            raise DivisionByZeroError(dividend=str(self))

        rhs = BigInteger(modulus)
        truncated = self._sub(self._truediv(rhs)._mul(rhs))
        # truncated в (-modulus, modulus), знак по делимому
        return (truncated._exact_int() + modulus) % modulus

    # =========================================================================
    # NARROWING CONVERSION
    # =========================================================================

    def _exact_int(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = value * INTERNAL_BASE + limb
        return -value if self._negative else value

    def to_int64(self) -> int:
        """
        Явная narrowing-конверсия в диапазон int64_t.

        Raises:
            NarrowingOverflowError: Если значение вне [INT64_MIN, INT64_MAX]
        """
        if self > INT64_MAX or self < INT64_MIN:
            raise NarrowingOverflowError(str(self), bits=64)
        return self._exact_int()

    def __int__(self) -> int:
        return self.to_int64()

    # =========================================================================
    # TEXT
    # =========================================================================

    def to_string(self, base: int = 10, show_base: bool = False) -> str:
        """Текстовое представление в основании base (см. render_big_integer)."""
        from src.core.math.base_conversion import render_big_integer

        return render_big_integer(self, base, show_base)

    def __str__(self) -> str:
        return self.to_string(10)

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string(10)}')"

    def __format__(self, format_spec: str) -> str:
        """
        Поддержка format()/f-strings: "", "d", "o", "x" и флаг "#" (префикс).

        Examples:
            >>> f"{BigInteger(-255):#x}"
            '-0xff'
        """
        match = _FORMAT_SPEC_PATTERN.match(format_spec)
        if match is None:
            raise ValueError(
                f"Invalid format specifier {format_spec!r} for BigInteger"
            )
        base = _FORMAT_KIND_TO_BASE[match.group("kind") or "d"]
        return self.to_string(base, show_base=match.group("alternate") is not None)


# =============================================================================
# HELPERS
# =============================================================================


def _coerce(value: object) -> Optional[BigInteger]:
    """Продвижение native int до BigInteger; None для неподдерживаемых типов."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger(value)
    return None


def multiply_by_short(value: BigInteger, factor: int) -> BigInteger:
    """
    Умножение на один limb factor в [0, INTERNAL_BASE]: O(value.limb_count).

    Знак результата совпадает со знаком value.
    """
    return BigInteger._from_limbs(
        multiply_limbs_by_short(value._limbs, factor), value._negative
    )


def guess_quotient_limb(remainder: BigInteger, divisor: BigInteger) -> int:
    """
    Подбор limb частного бисекцией по [0, INTERNAL_BASE).

    Находит единственное q с q * divisor <= remainder < (q + 1) * divisor.
    Оба операнда неотрицательны, remainder < INTERNAL_BASE * divisor.

    Инвариант цикла: lower * divisor <= remainder < upper * divisor.
    Каждая проба: одно limb-scalar умножение и одно сравнение.
    """
    lower = 0
    upper = INTERNAL_BASE

    while lower + 1 < upper:
        middle = (lower + upper) // 2
        candidate = multiply_limbs_by_short(divisor._limbs, middle)
        if compare_magnitudes(candidate, remainder._limbs) > 0:
            upper = middle
        else:
            lower = middle

    return lower
