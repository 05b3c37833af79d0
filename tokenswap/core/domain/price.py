"""
PriceQuote — Котировка цены токена в USD

Цена приходит из внешнего источника как float и сразу переводится
в масштабированное целое (масштаб 18) через float_to_scaled.
Дальше в расчётах участвует только целое значение.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from tokenswap.core.math.fixed_point import (
    PRICE_DECIMALS,
    USD_DECIMALS,
    float_to_scaled,
    format_units,
)


class PriceQuote(BaseModel):
    """
    Котировка: цена одного целого токена в USD с моментом получения.

    Immutable модель (frozen=True). Новая цена = новый экземпляр.
    """

    symbol: str = Field(..., min_length=1, description="Тикер токена")
    # Сырое значение источника, может быть NaN или отрицательным
    unit_price: float = Field(..., description="Цена из источника (float)")
    price: int = Field(..., ge=0, description="Цена в USD (масштаб 18)")
    last_updated: datetime = Field(..., description="Момент получения цены (UTC)")

    model_config = {"frozen": True}

    @field_validator("last_updated")
    @classmethod
    def validate_timezone(cls, v: datetime) -> datetime:
        """Naive datetime трактуется как UTC"""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @classmethod
    def from_unit_price(
        cls,
        symbol: str,
        unit_price: float,
        last_updated: Optional[datetime] = None,
    ) -> "PriceQuote":
        """
        Создание котировки из float-цены источника.

        Args:
            symbol: Тикер токена
            unit_price: Цена в USD за один токен
            last_updated: Момент получения (default: сейчас, UTC)

        Returns:
            PriceQuote с ценой, усечённой до 18 знаков
        """
        return cls(
            symbol=symbol,
            unit_price=unit_price,
            price=float_to_scaled(unit_price, PRICE_DECIMALS),
            last_updated=last_updated or datetime.now(timezone.utc),
        )

    @property
    def price_formatted(self) -> str:
        """Цена для отображения (2 знака, усечение)"""
        return format_units(self.price, PRICE_DECIMALS, USD_DECIMALS)

    def age(self, now: Optional[datetime] = None) -> timedelta:
        """Возраст котировки относительно now (naive now трактуется как UTC)"""
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now - self.last_updated

    def is_fresh(self, max_age_seconds: float, now: Optional[datetime] = None) -> bool:
        """
        Проверка свежести котировки.

        Args:
            max_age_seconds: Допустимый возраст в секундах
            now: Текущий момент (default: сейчас, UTC)

        Returns:
            True если возраст не превышает max_age_seconds
        """
        return self.age(now) <= timedelta(seconds=max_age_seconds)
