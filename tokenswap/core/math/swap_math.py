"""
SwapMath — Арифметика над масштабированными целыми

Расчёт количества токенов по сумме в USD, стоимости в USD по количеству
и курса обмена между двумя токенами.

Правила:
- Сначала умножение, потом деление (иначе теряется точность)
- Деление целочисленное, с округлением вниз (все значения >= 0)
- Нулевая цена — легитимное состояние «цена недоступна», результат 0
- Python int не переполняется, произведения вида usd × 10^18 безопасны

Масштабы:
    usd_amount, unit_price, exchange_rate — PRICE_DECIMALS (18)
    token_amount                          — token_decimals токена
"""

import logging

from tokenswap.core.math.fixed_point import DEFAULT_TOKEN_DECIMALS, PRICE_DECIMALS, _check_scale

logger = logging.getLogger(__name__)


def _non_negative(value: int) -> int:
    return value if value > 0 else 0


def calculate_token_amount(
    usd_amount: int,
    unit_price: int,
    token_decimals: int = DEFAULT_TOKEN_DECIMALS,
) -> int:
    """
    Количество токенов, покупаемое на сумму в USD.

    Формула: usd_amount × 10^token_decimals ÷ unit_price

    Args:
        usd_amount: Сумма в USD (масштаб 18)
        unit_price: Цена одного токена в USD (масштаб 18)
        token_decimals: Масштаб результата (decimals токена)

    Returns:
        Количество токенов (масштаб token_decimals), 0 при нулевой цене

    Raises:
        ValueError: Если token_decimals < 0

    Examples:
        >>> calculate_token_amount(100 * 10**18, 2 * 10**18, 6)
        50000000
    """
    _check_scale(token_decimals, "token_decimals")

    unit_price = _non_negative(unit_price)
    if unit_price == 0:
        logger.debug("Zero unit price, token amount clamped to zero")
        return 0

    return _non_negative(usd_amount) * 10**token_decimals // unit_price


def calculate_usd_value(
    token_amount: int,
    unit_price: int,
    token_decimals: int = DEFAULT_TOKEN_DECIMALS,
) -> int:
    """
    Стоимость количества токенов в USD.

    Формула: token_amount × unit_price ÷ 10^token_decimals

    Args:
        token_amount: Количество токенов (масштаб token_decimals)
        unit_price: Цена одного токена в USD (масштаб 18)
        token_decimals: Масштаб token_amount

    Returns:
        Стоимость в USD (масштаб 18), 0 при нулевой цене

    Raises:
        ValueError: Если token_decimals < 0
    """
    _check_scale(token_decimals, "token_decimals")

    unit_price = _non_negative(unit_price)
    if unit_price == 0:
        return 0

    return _non_negative(token_amount) * unit_price // 10**token_decimals


def calculate_exchange_rate(source_price: int, target_price: int) -> int:
    """
    Курс обмена: сколько целевых токенов даёт один исходный.

    Формула: source_price × 10^18 ÷ target_price

    Чем дороже исходный токен относительно целевого, тем больше курс.
    Курс токена к самому себе равен 10^18 (единица в масштабе 18).

    Args:
        source_price: Цена исходного токена (масштаб 18)
        target_price: Цена целевого токена (масштаб 18)

    Returns:
        Курс (масштаб 18), 0 при нулевой цене целевого токена
    """
    target_price = _non_negative(target_price)
    if target_price == 0:
        logger.debug("Zero target price, exchange rate clamped to zero")
        return 0

    return _non_negative(source_price) * 10**PRICE_DECIMALS // target_price
