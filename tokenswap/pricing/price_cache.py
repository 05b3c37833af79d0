"""
In-memory cache of token price quotes

Ключ кэша — идентичность токена (chain_id, symbol). Свежесть считается
от момента получения котировки (PriceQuote.last_updated), а не от момента
записи: устаревшая котировка не становится свежей после повторного put.

Кэш ничего не загружает сам. Загрузкой и повторами занимается владелец
кэша (клиент ценового API); кэш только хранит и отдаёт свежие котировки.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Dict, Final, Optional

from tokenswap.core.domain import PriceQuote, Token

logger = logging.getLogger(__name__)

# Окно свежести котировки по умолчанию
DEFAULT_PRICE_TTL_SECONDS: Final[float] = 60.0


class PriceCache:
    """
    Thread-safe кэш котировок с явным окном свежести.

    Просроченные записи удаляются при чтении.
    """

    def __init__(self, ttl_seconds: float = DEFAULT_PRICE_TTL_SECONDS):
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")

        self.ttl_seconds = ttl_seconds
        self._quotes: Dict[tuple[str, str], PriceQuote] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._quotes)

    def put(self, token: Token, quote: PriceQuote) -> None:
        """
        Сохранение котировки токена.

        Raises:
            ValueError: Если тикер котировки не совпадает с тикером токена
        """
        if quote.symbol != token.symbol:
            raise ValueError(f"Quote for {quote.symbol} cannot be stored under {token.symbol}")

        with self._lock:
            self._quotes[token.key] = quote

    def get(self, token: Token, now: Optional[datetime] = None) -> Optional[PriceQuote]:
        """
        Свежая котировка токена или None.

        Args:
            token: Токен
            now: Текущий момент (default: сейчас, UTC)

        Returns:
            PriceQuote, если запись есть и не старше ttl_seconds
        """
        now = now or datetime.now(timezone.utc)

        with self._lock:
            quote = self._quotes.get(token.key)
            if quote is None:
                return None

            if not quote.is_fresh(self.ttl_seconds, now):
                logger.debug("Price quote for %s/%s expired", *token.key)
                del self._quotes[token.key]
                return None

            return quote

    def price_for(self, token: Token, now: Optional[datetime] = None) -> int:
        """Цена токена (масштаб 18) или 0, если свежей котировки нет"""
        quote = self.get(token, now)
        return quote.price if quote is not None else 0

    def invalidate(self, token: Optional[Token] = None) -> None:
        """Удаление котировки токена или всего кэша (token=None)"""
        with self._lock:
            if token is None:
                self._quotes.clear()
            else:
                self._quotes.pop(token.key, None)
