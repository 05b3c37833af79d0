"""
Token — Модель торгуемого актива

Immutable Pydantic модель токена из статического реестра.
Соответствует схеме contracts/schema/token_registry.json.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Максимум decimals, который встречается у ERC-20 токенов на практике
MAX_TOKEN_DECIMALS = 36


class Token(BaseModel):
    """
    Модель токена.

    Immutable модель (frozen=True): создаётся один раз при загрузке
    реестра и никогда не изменяется. symbol уникален в пределах сети.
    """

    symbol: str = Field(..., min_length=1, description="Тикер (например, 'USDC')")
    name: str = Field(..., min_length=1, description="Отображаемое имя")
    chain_id: str = Field(..., pattern=r"^[0-9]+$", description="Идентификатор сети")
    decimals: int = Field(
        ..., ge=0, le=MAX_TOKEN_DECIMALS, description="Дробных цифр on-chain представления"
    )
    address: Optional[str] = Field(
        default=None, pattern=r"^0x[0-9a-fA-F]{40}$", description="Адрес контракта"
    )
    logo_uri: Optional[str] = Field(default=None, description="URI логотипа")

    model_config = {"frozen": True}

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """Тикер без пробелов по краям"""
        if v != v.strip():
            raise ValueError(f"symbol {v!r} has surrounding whitespace")
        return v

    @property
    def key(self) -> tuple[str, str]:
        """Уникальный ключ токена: (chain_id, symbol)"""
        return (self.chain_id, self.symbol)
