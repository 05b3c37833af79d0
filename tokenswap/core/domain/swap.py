"""
SwapCalculation — Результат расчёта обмена

Immutable Pydantic модели, которые собирает калькулятор обмена.
Каждый пересчёт создаёт новый экземпляр; результат является чистой
функцией входов (токены, две цены, сумма в USD).

Контракт для сериализации: contracts/schema/swap_calculation.json.
Масштабированные целые в контракте передаются десятичными строками,
так как значения с масштабом 18 выходят за пределы безопасных JSON-чисел.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

from tokenswap.core.domain.token import Token


# =============================================================================
# NESTED MODELS
# =============================================================================


class TokenAmount(BaseModel):
    """
    Количество токена вместе с суммой в USD, на которую оно рассчитано.

    raw имеет масштаб decimals токена, usd — масштаб 18.
    """

    raw: int = Field(..., ge=0, description="Количество (масштаб token decimals)")
    formatted: str = Field(..., description="Количество для отображения (6 знаков)")
    usd: int = Field(..., ge=0, description="Введённая сумма в USD (масштаб 18)")
    usd_formatted: str = Field(..., description="Сумма в USD для отображения (2 знака)")

    model_config = {"frozen": True}

    def to_contract(self) -> Dict[str, Any]:
        return {
            "raw": str(self.raw),
            "formatted": self.formatted,
            "usd": str(self.usd),
            "usd_formatted": self.usd_formatted,
        }


# =============================================================================
# SWAP CALCULATION MODEL
# =============================================================================


class SwapCalculation(BaseModel):
    """
    Полный результат конверсии USD → исходный токен / целевой токен.

    Immutable модель (frozen=True). Сравнение по значению: два расчёта
    с одинаковыми входами равны поле в поле.
    """

    source_token: Token = Field(..., description="Исходный токен")
    target_token: Token = Field(..., description="Целевой токен")

    usd_amount: int = Field(..., gt=0, description="Сумма в USD (масштаб 18)")
    usd_amount_formatted: str = Field(..., description="Сумма для отображения (2 знака)")

    source_amount: TokenAmount = Field(..., description="Количество исходного токена")
    target_amount: TokenAmount = Field(..., description="Количество целевого токена")

    exchange_rate: int = Field(
        ..., ge=0, description="Целевых токенов за один исходный (масштаб 18)"
    )
    exchange_rate_formatted: str = Field(
        ..., description="Курс для отображения (decimals целевого токена)"
    )

    model_config = {"frozen": True}

    def to_contract(self) -> Dict[str, Any]:
        """
        Сериализация в dict, совместимый со схемой swap_calculation.

        Returns:
            JSON-совместимый dict (целые как десятичные строки)
        """
        return {
            "source_token": self.source_token.model_dump(exclude_none=True),
            "target_token": self.target_token.model_dump(exclude_none=True),
            "usd_amount": str(self.usd_amount),
            "usd_amount_formatted": self.usd_amount_formatted,
            "source_amount": self.source_amount.to_contract(),
            "target_amount": self.target_amount.to_contract(),
            "exchange_rate": str(self.exchange_rate),
            "exchange_rate_formatted": self.exchange_rate_formatted,
        }
