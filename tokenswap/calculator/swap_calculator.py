"""Swap Calculator: USD amount → source/target token amounts

Собирает кодек и арифметику в один расчёт:
1. Разбор суммы в USD (масштаб 18)
2. Количество исходного и целевого токена по их ценам
3. Курс исходный → целевой
4. Форматирование (6 знаков для токенов, 2 для USD)

Два состояния результата:
- SwapCalculation — расчёт выполнен
- None — входы неполные (нет токена, пустая сумма, нулевая цена)

Расчёт stateless и идемпотентен: одинаковые входы дают равные результаты,
вызов безопасен из нескольких потоков без синхронизации.
"""

import logging
from datetime import datetime
from typing import Optional

from tokenswap.core.domain import SwapCalculation, Token, TokenAmount
from tokenswap.core.math import (
    PRICE_DECIMALS,
    TOKEN_DISPLAY_DECIMALS,
    USD_DECIMALS,
    calculate_exchange_rate,
    calculate_token_amount,
    format_units,
    parse_units,
)
from tokenswap.pricing import PriceCache

logger = logging.getLogger(__name__)


def _token_amount(usd_amount: int, unit_price: int, token: Token) -> TokenAmount:
    raw = calculate_token_amount(usd_amount, unit_price, token.decimals)

    # usd — введённая сумма, одинаковая для обеих сторон обмена
    return TokenAmount(
        raw=raw,
        formatted=format_units(raw, token.decimals, TOKEN_DISPLAY_DECIMALS),
        usd=usd_amount,
        usd_formatted=format_units(usd_amount, PRICE_DECIMALS, USD_DECIMALS),
    )


def compute_swap(
    source_token: Optional[Token],
    target_token: Optional[Token],
    source_price: int,
    target_price: int,
    usd_amount_text: str,
) -> Optional[SwapCalculation]:
    """Расчёт обмена по сумме в USD.

    Args:
        source_token: исходный токен (None, если не выбран)
        target_token: целевой токен (None, если не выбран)
        source_price: цена исходного токена в USD (масштаб 18)
        target_price: цена целевого токена в USD (масштаб 18)
        usd_amount_text: сумма в USD, введённая пользователем

    Returns:
        SwapCalculation или None, если считать пока нечего
    """
    if source_token is None or target_token is None or not usd_amount_text:
        return None

    usd_amount = parse_units(usd_amount_text, PRICE_DECIMALS)

    if usd_amount <= 0 or source_price <= 0 or target_price <= 0:
        logger.debug(
            "Swap not computable: usd_amount=%d source_price=%d target_price=%d",
            usd_amount,
            source_price,
            target_price,
        )
        return None

    exchange_rate = calculate_exchange_rate(source_price, target_price)

    return SwapCalculation(
        source_token=source_token,
        target_token=target_token,
        usd_amount=usd_amount,
        usd_amount_formatted=format_units(usd_amount, PRICE_DECIMALS, USD_DECIMALS),
        source_amount=_token_amount(usd_amount, source_price, source_token),
        target_amount=_token_amount(usd_amount, target_price, target_token),
        exchange_rate=exchange_rate,
        exchange_rate_formatted=format_units(
            exchange_rate, PRICE_DECIMALS, target_token.decimals
        ),
    )


class SwapCalculator:
    """Расчёт обмена по котировкам из PriceCache.

    Отсутствующая или устаревшая котировка трактуется как нулевая цена,
    то есть расчёт возвращает None.
    """

    def __init__(self, price_cache: PriceCache):
        self.price_cache = price_cache

    def calculate(
        self,
        source_token: Optional[Token],
        target_token: Optional[Token],
        usd_amount_text: str,
        now: Optional[datetime] = None,
    ) -> Optional[SwapCalculation]:
        """Расчёт по свежим котировкам на момент now.

        Args:
            source_token: исходный токен
            target_token: целевой токен
            usd_amount_text: сумма в USD
            now: текущий момент (default: сейчас, UTC)

        Returns:
            SwapCalculation или None
        """
        source_price = self.price_cache.price_for(source_token, now) if source_token else 0
        target_price = self.price_cache.price_for(target_token, now) if target_token else 0

        return compute_swap(
            source_token, target_token, source_price, target_price, usd_amount_text
        )
