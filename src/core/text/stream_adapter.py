"""
Text-Stream Adapter — BigInteger ⇄ форматированный текстовый канал

Мост между BigInteger и произвольным текстовым потоком (TextIO).
Флаги канала (основание, показ префикса) передаются явно через
FormatOptions, а не читаются из изменяемого глобального состояния.

Чтение:
1. Пропуск пробельных символов, чтение одного токена до пробела/EOF
2. Снятие необязательного знака ('-' или '+')
3. Снятие префикса основания: "0x" в hex режиме, ведущий "0" в octal
4. Разбор остатка через parse_big_integer в options.base
5. Повторное применение знака

Запись:
- render_big_integer в options.base; знак всегда перед префиксом ("-0xff")
"""

import logging
from typing import Iterator, Optional, TextIO

from src.core.domain.format_options import FormatOptions
from src.core.math.base_conversion import parse_big_integer, render_big_integer
from src.core.math.big_integer import BigInteger
from src.core.math.errors import EmptyTokenError, InvalidDigitCharacterError

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = FormatOptions()


# =============================================================================
# READING
# =============================================================================


def read_token(stream: TextIO) -> str:
    """
    Чтение одного whitespace-delimited токена.

    Ведущие пробельные символы пропускаются; завершающий пробельный
    символ поглощается.

    Returns:
        Токен или пустая строка, если поток исчерпан
    """
    chars: list[str] = []

    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch.isspace():
            if chars:
                break
            continue
        chars.append(ch)

    return "".join(chars)


def parse_token(token: str, options: Optional[FormatOptions] = None) -> BigInteger:
    """
    Разбор одного токена с учётом флагов канала.

    Args:
        token: Токен без пробелов, например "-0xff"
        options: Флаги канала (default: десятичный без префикса)

    Returns:
        Разобранное значение

    Raises:
        InvalidDigitCharacterError: Если токен содержит недопустимый символ
            (index указывает позицию внутри исходного токена)

    Examples:
        >>> parse_token("-0xff", FormatOptions.hexadecimal())
        BigInteger('-255')
        >>> parse_token("017", FormatOptions.octal())
        BigInteger('15')
    """
    options = options or _DEFAULT_OPTIONS

    negative = False
    offset = 0
    if token[:1] in ("-", "+"):
        negative = token[0] == "-"
        offset = 1

    if options.is_hex and token.startswith("0x", offset):
        offset += 2
    elif options.is_oct and token.startswith("0", offset) and len(token) > offset + 1:
        offset += 1

    body = token[offset:]
    logger.debug(
        "Parsing token %r as base %d (stripped %d prefix chars)",
        token,
        options.base,
        offset,
    )

    # Второй знак после снятого префикса недопустим
    if body.startswith("-"):
        raise InvalidDigitCharacterError(offset, "-", options.base)

    try:
        value = parse_big_integer(body, options.base)
    except InvalidDigitCharacterError as e:
        raise InvalidDigitCharacterError(e.index + offset, e.character, e.base) from e

    if negative:
        value.negate()

    return value


def read_big_integer(stream: TextIO, options: Optional[FormatOptions] = None) -> BigInteger:
    """
    Чтение одного BigInteger из текстового потока.

    Raises:
        EmptyTokenError: Если поток исчерпан до начала токена
        InvalidDigitCharacterError: Если токен не является числом в options.base
    """
    token = read_token(stream)
    if not token:
        raise EmptyTokenError()
    return parse_token(token, options)


def iter_big_integers(
    stream: TextIO, options: Optional[FormatOptions] = None
) -> Iterator[BigInteger]:
    """
    Последовательное чтение всех токенов потока до EOF.

    Yields:
        BigInteger для каждого токена
    """
    while True:
        token = read_token(stream)
        if not token:
            return
        yield parse_token(token, options)


# =============================================================================
# WRITING
# =============================================================================


def format_big_integer(value: BigInteger, options: Optional[FormatOptions] = None) -> str:
    """
    Рендеринг значения по флагам канала.

    Examples:
        >>> format_big_integer(BigInteger(-255), FormatOptions.hexadecimal(show_base=True))
        '-0xff'
    """
    options = options or _DEFAULT_OPTIONS
    return render_big_integer(value, options.base, options.show_base)


def write_big_integer(
    stream: TextIO, value: BigInteger, options: Optional[FormatOptions] = None
) -> None:
    """Запись отрендеренного значения в поток (без разделителя)."""
    stream.write(format_big_integer(value, options))
