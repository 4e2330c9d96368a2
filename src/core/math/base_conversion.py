"""
Base Conversion — Текст ⇄ BigInteger в основаниях 2..36

Алфавит цифр: '0'-'9' → 0-9, 'a'-'z' → 10-35.
Заглавные буквы НЕ принимаются (явная политика, покрыта тестами).

Разбор:
- Необязательный '-' допускается только на позиции 0
- Каждый остальной символ обязан быть цифрой < base
- Значение накапливается с конца строки: value += digit * power,
  power *= base после каждого символа

Рендеринг:
- Работает с абсолютным значением, повторно делит на base
- Символы собираются от младшего к старшему, затем один разворот
- Префикс основания ("0" для 8, "0x" для 16) и знак добавляются до
  разворота, поэтому знак всегда стоит перед префиксом: "-0xff"
"""

from typing import Final

from src.core.math.big_integer import BigInteger, multiply_by_short
from src.core.math.errors import InvalidBaseError, InvalidDigitCharacterError

# =============================================================================
# CONSTANTS
# =============================================================================

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

_BASE_PREFIXES: Final[dict[int, str]] = {8: "0", 16: "0x"}


# =============================================================================
# DIGIT MAPPING
# =============================================================================


def validate_base(base: int) -> None:
    """
    Raises:
        InvalidBaseError: Если base вне [MIN_BASE, MAX_BASE]
    """
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBaseError(base)


def char_to_digit(character: str) -> int:
    """
    Значение цифры для символа или -1, если символ не из алфавита.

    Examples:
        >>> char_to_digit("7")
        7
        >>> char_to_digit("z")
        35
        >>> char_to_digit("F")
        -1
    """
    if "0" <= character <= "9":
        return ord(character) - ord("0")
    if "a" <= character <= "z":
        return ord(character) - ord("a") + 10
    return -1


def digit_to_char(digit: int) -> str:
    return DIGIT_ALPHABET[digit]


def base_prefix(base: int) -> str:
    """Префикс основания: "0" для 8, "0x" для 16, иначе пустая строка."""
    return _BASE_PREFIXES.get(base, "")


# =============================================================================
# PARSE
# =============================================================================


def parse_big_integer(text: str, base: int = 10) -> BigInteger:
    """
    Разбор текста в основании base.

    Args:
        text: Цифры в основании base, необязательный '-' на позиции 0
        base: Основание в [2, 36]

    Returns:
        BigInteger в canonical form. Пустая строка, "-" и строка из нулей
        дают canonical zero.

    Raises:
        InvalidBaseError: Если base вне [2, 36]
        InvalidDigitCharacterError: Если символ не является цифрой < base
            (атрибут index: позиция символа)

    Examples:
        >>> parse_big_integer("-ff", 16)
        BigInteger('-255')
        >>> parse_big_integer("", 10)
        BigInteger('0')
    """
    validate_base(base)

    # Полная валидация до накопления: ошибка всегда указывает первый дефект
    for index, character in enumerate(text):
        if index == 0 and character == "-":
            continue
        digit = char_to_digit(character)
        if digit == -1 or digit >= base:
            raise InvalidDigitCharacterError(index, character, base)

    negative = text.startswith("-")
    digits = text[1:] if negative else text

    result = BigInteger(0)
    power = BigInteger(1)

    for character in reversed(digits):
        result = result + multiply_by_short(power, char_to_digit(character))
        power = multiply_by_short(power, base)

    if negative:
        result.negate()

    return result


# =============================================================================
# RENDER
# =============================================================================


def render_big_integer(value: BigInteger, base: int = 10, show_base: bool = False) -> str:
    """
    Текстовое представление value в основании base.

    Args:
        value: Значение для рендеринга
        base: Основание в [2, 36]
        show_base: Добавить префикс основания ("0" для 8, "0x" для 16)

    Returns:
        Строка от старшей цифры к младшей; ноль рендерится как "0"

    Raises:
        InvalidBaseError: Если base вне [2, 36]

    Examples:
        >>> render_big_integer(BigInteger(-255), 16)
        '-ff'
        >>> render_big_integer(BigInteger(-255), 16, show_base=True)
        '-0xff'
        >>> render_big_integer(BigInteger(8), 8, show_base=True)
        '010'
    """
    validate_base(base)

    reversed_chars: list[str] = [] if value else ["0"]
    remaining = abs(value)

    while remaining:
        quotient = remaining / base
        digit = remaining - multiply_by_short(quotient, base)
        reversed_chars.append(digit_to_char(int(digit)))
        remaining = quotient

    if show_base:
        # Префикс добавляется развёрнутым, до финального разворота
        reversed_chars.append(base_prefix(base)[::-1])

    if value.is_negative():
        reversed_chars.append("-")

    return "".join(reversed_chars)[::-1]
