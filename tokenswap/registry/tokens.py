"""
Token Registry — Статический реестр поддерживаемых токенов

Реестр загружается один раз при импорте из tokens.json, проверяется
по схеме token_registry и превращается в immutable модели Token.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Optional

from tokenswap.core.contracts import validate_token_registry
from tokenswap.core.domain import Token

logger = logging.getLogger(__name__)

REGISTRY_PATH: Final[Path] = Path(__file__).parent / "tokens.json"


class TokenNotFoundError(KeyError):
    """Токен с указанным тикером отсутствует в реестре"""


def load_registry(path: Path = REGISTRY_PATH) -> tuple[Token, ...]:
    """
    Загрузка и валидация реестра токенов.

    Args:
        path: Путь к JSON файлу реестра

    Returns:
        Кортеж immutable Token в порядке файла

    Raises:
        jsonschema.ValidationError: Если файл не соответствует схеме
        ValueError: Если тикер повторяется в пределах одной сети
    """
    with open(path, "r", encoding="utf-8") as f:
        data: Dict[str, Any] = json.load(f)

    validate_token_registry(data)

    tokens = tuple(Token(**entry) for entry in data["tokens"])

    keys = [token.key for token in tokens]
    if len(set(keys)) != len(keys):
        raise ValueError(f"Duplicate (chain_id, symbol) in token registry {path}")

    logger.info("Loaded %d tokens from %s", len(tokens), path.name)
    return tokens


SUPPORTED_TOKENS: Final[tuple[Token, ...]] = load_registry()


def get_token_by_symbol(symbol: str) -> Optional[Token]:
    """Первый токен с указанным тикером или None"""
    return next((token for token in SUPPORTED_TOKENS if token.symbol == symbol), None)


def get_token(symbol: str) -> Token:
    """
    Строгий поиск токена по тикеру.

    Raises:
        TokenNotFoundError: Если токена нет в реестре
    """
    token = get_token_by_symbol(symbol)
    if token is None:
        raise TokenNotFoundError(symbol)
    return token


def get_tokens_by_chain(chain_id: str) -> list[Token]:
    """Все токены сети chain_id"""
    return [token for token in SUPPORTED_TOKENS if token.chain_id == chain_id]
