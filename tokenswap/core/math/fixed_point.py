"""
FixedPoint — Кодек масштабированных целых чисел

Единственное место, где десятичные строки и float-цены превращаются
в целые числа с неявным масштабом (value × 10^scale) и обратно.

Политика:
- Только усечение (truncation), никогда не округление вверх
- Никаких промежуточных float при разборе строк
- Невалидный ввод даёт 0, а не исключение

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. parse_units(s, scale) отбрасывает лишние дробные цифры
2. format_units(...) никогда не завышает отображаемое значение
3. float_to_scaled(...) — единственная граница float → fixed-point
"""

import logging
import math
import re
from decimal import Decimal
from typing import Final

logger = logging.getLogger(__name__)


# =============================================================================
# МАСШТАБЫ И ПАРАМЕТРЫ ОТОБРАЖЕНИЯ
# =============================================================================

# Масштаб по умолчанию для количеств токенов
DEFAULT_TOKEN_DECIMALS: Final[int] = 18

# Масштаб цен за единицу (USD за один целый токен)
PRICE_DECIMALS: Final[int] = 18

# Цифр после запятой при отображении USD
USD_DECIMALS: Final[int] = 2

# Цифр после запятой при отображении количеств токенов
TOKEN_DISPLAY_DECIMALS: Final[int] = 6

# Порог отображения: значения меньше 10^-6 показываются как MIN_DISPLAY_TEXT
MIN_DISPLAY_EXPONENT: Final[int] = 6
MIN_DISPLAY_TEXT: Final[str] = "< 0.000001"

# Максимум дробных цифр в пользовательском вводе
MAX_INPUT_DECIMALS: Final[int] = 18

# Максимум значащих цифр целой части при разборе (больше — аномалия, 0)
MAX_INPUT_WHOLE_DIGITS: Final[int] = 60

_NON_NUMERIC = re.compile(r"[^0-9.]")

# int → str порциями, ниже лимита CPython на длину преобразования
_STR_CHUNK_DIGITS: Final[int] = 1000
_STR_CHUNK: Final[int] = 10**_STR_CHUNK_DIGITS


def _check_scale(scale: int, name: str = "scale") -> None:
    if scale < 0:
        raise ValueError(f"{name} must be non-negative, got {scale}")


def _decimal_digits(value: int) -> str:
    """Десятичная запись неотрицательного int любой длины"""
    chunks = []
    while value >= _STR_CHUNK:
        value, low = divmod(value, _STR_CHUNK)
        chunks.append(str(low).rjust(_STR_CHUNK_DIGITS, "0"))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def _group_thousands(digits: str) -> str:
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i : i + 3] for i in range(head, len(digits), 3)]
    return ",".join(groups)


# =============================================================================
# РАЗБОР СТРОК
# =============================================================================


def sanitize_number_input(text: str) -> str:
    """
    Очистка пользовательского ввода суммы.

    Оставляет только цифры и десятичную точку, склеивает лишние точки
    в первую, обрезает дробную часть до MAX_INPUT_DECIMALS цифр.

    Examples:
        >>> sanitize_number_input("$1,234.5")
        '1234.5'
        >>> sanitize_number_input("1.2.3")
        '1.23'
    """
    cleaned = _NON_NUMERIC.sub("", text or "")

    whole, dot, fraction = cleaned.partition(".")
    if not dot:
        return whole

    fraction = fraction.replace(".", "")[:MAX_INPUT_DECIMALS]
    return f"{whole}.{fraction}"


def parse_units(text: str, scale: int = DEFAULT_TOKEN_DECIMALS) -> int:
    """
    Разбор десятичной строки в масштабированное целое.

    Все символы, кроме цифр и точки, удаляются. Дробные цифры сверх
    scale отбрасываются (не округляются). Результат равен
    value × 10^scale и считается только целочисленно.

    Args:
        text: Десятичная строка (например, "100.50")
        scale: Количество неявных дробных цифр

    Returns:
        Масштабированное целое >= 0. Пустой или некорректный ввод
        (несколько точек, нет цифр) даёт 0.

    Raises:
        ValueError: Если scale < 0

    Examples:
        >>> parse_units("12.5", 6)
        12500000
        >>> parse_units("1.23456789", 6)
        1234567
        >>> parse_units("abc", 6)
        0
    """
    _check_scale(scale)

    if not text:
        return 0

    cleaned = _NON_NUMERIC.sub("", text)
    parts = cleaned.split(".")
    if len(parts) > 2:
        logger.debug("Multiple decimal points in %r, clamped to zero", text)
        return 0

    whole = parts[0]
    fraction = parts[1] if len(parts) == 2 else ""
    if not whole and not fraction:
        return 0

    whole = whole.lstrip("0")
    if len(whole) > MAX_INPUT_WHOLE_DIGITS:
        logger.debug(
            "Whole part of %d digits exceeds %d, clamped to zero",
            len(whole),
            MAX_INPUT_WHOLE_DIGITS,
        )
        return 0

    # Усечение, не округление
    fraction = fraction[:scale]
    fraction_value = int(fraction) * 10 ** (scale - len(fraction)) if fraction else 0

    return int(whole or "0") * 10**scale + fraction_value


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_units(
    value: int,
    scale: int = DEFAULT_TOKEN_DECIMALS,
    display_digits: int = TOKEN_DISPLAY_DECIMALS,
) -> str:
    """
    Форматирование масштабированного целого в строку для отображения.

    Политика:
        value == 0                    → "0"
        0 < value < 10^(scale - 6)    → "< 0.000001"
        иначе                         → усечение до display_digits цифр,
                                        разделители тысяч, без хвостовых нулей

    Args:
        value: Масштабированное целое (отрицательное трактуется как 0)
        scale: Масштаб value
        display_digits: Максимум отображаемых дробных цифр

    Returns:
        Строка для отображения

    Raises:
        ValueError: Если scale < 0 или display_digits < 0

    Examples:
        >>> format_units(12500000, 6, 6)
        '12.5'
        >>> format_units(1234567891, 6, 2)
        '1,234.56'
        >>> format_units(1, 18, 6)
        '< 0.000001'
    """
    _check_scale(scale)
    _check_scale(display_digits, "display_digits")

    if value <= 0:
        return "0"

    # value / 10^scale < 10^-6  ⇔  value × 10^6 < 10^scale
    if value * 10**MIN_DISPLAY_EXPONENT < 10**scale:
        return MIN_DISPLAY_TEXT

    whole, remainder = divmod(value, 10**scale)
    fraction = _decimal_digits(remainder).rjust(scale, "0")[:display_digits].rstrip("0")
    grouped = _group_thousands(_decimal_digits(whole))

    if fraction:
        return f"{grouped}.{fraction}"
    return grouped


# =============================================================================
# ГРАНИЦА FLOAT → FIXED-POINT
# =============================================================================


def float_to_scaled(value: float, scale: int = PRICE_DECIMALS) -> int:
    """
    Конверсия float-цены в масштабированное целое с усечением.

    Float переводится в кратчайшее десятичное представление (repr),
    которое однозначно восстанавливает исходный float, и затем
    разбирается parse_units. Так усечение до scale цифр выполняется
    над десятичными цифрами, а не через float-умножение, которое
    может ошибиться на единицу в последнем разряде.

    Args:
        value: Цена из внешнего источника
        scale: Целевой масштаб (default: PRICE_DECIMALS)

    Returns:
        Масштабированное целое. NaN/Inf, отрицательные и нечисловые
        значения дают 0.

    Raises:
        ValueError: Если scale < 0

    Examples:
        >>> float_to_scaled(0.1)
        100000000000000000
        >>> float_to_scaled(2000.123456, 6)
        2000123456
        >>> float_to_scaled(float('nan'))
        0
    """
    _check_scale(scale)

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.debug("Non-numeric unit price %r, clamped to zero", value)
        return 0

    if isinstance(value, int):
        return value * 10**scale if value > 0 else 0

    if not math.isfinite(value) or value < 0:
        logger.debug("Invalid unit price %r, clamped to zero", value)
        return 0

    # Позиционная запись без экспоненты: 1e-20 → "0.00000000000000000001"
    text = format(Decimal(repr(value)), "f")
    return parse_units(text, scale)
