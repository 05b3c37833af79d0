"""
Юнит-тесты для Swap Calculator

Проверяет:
1. Состояние None при неполных входах
2. Сценарий USDC (6 decimals) / ETH (18 decimals)
3. Усечение количеств при отображении
4. Введённая сумма в USD на обеих сторонах обмена
5. Идемпотентность и безопасность параллельных вызовов
6. SwapCalculator поверх PriceCache
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest

from tokenswap.calculator import SwapCalculator, compute_swap
from tokenswap.core.domain import PriceQuote, SwapCalculation, Token
from tokenswap.core.math import calculate_exchange_rate, float_to_scaled, format_units
from tokenswap.pricing import PriceCache
from tokenswap.registry import get_token

ONE = 10**18
T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def usdc() -> Token:
    return get_token("USDC")


@pytest.fixture
def eth() -> Token:
    return get_token("ETH")


@pytest.fixture
def usdc_price() -> int:
    return float_to_scaled(1.00)


@pytest.fixture
def eth_price() -> int:
    return float_to_scaled(2000.123456)


# =============================================================================
# NOT COMPUTABLE
# =============================================================================


class TestNotComputable:
    """Тесты состояния None"""

    def test_missing_source_token(self, eth: Token) -> None:
        """Исходный токен не выбран"""
        assert compute_swap(None, eth, ONE, ONE, "100") is None

    def test_missing_target_token(self, usdc: Token) -> None:
        """Целевой токен не выбран"""
        assert compute_swap(usdc, None, ONE, ONE, "100") is None

    def test_empty_amount(self, usdc: Token, eth: Token) -> None:
        """Пустая сумма"""
        assert compute_swap(usdc, eth, ONE, ONE, "") is None

    @pytest.mark.parametrize("text", ["0", "0.00", "abc", "1.2.3", "."])
    def test_zero_amount(self, usdc: Token, eth: Token, text: str) -> None:
        """Сумма, разобранная в 0"""
        assert compute_swap(usdc, eth, ONE, ONE, text) is None

    def test_overlong_amount(self, usdc: Token, eth: Token) -> None:
        """Сумма из 5000 цифр разбирается в 0 и даёт None, а не исключение"""
        assert compute_swap(usdc, eth, ONE, ONE, "9" * 5000) is None

    def test_zero_source_price(self, usdc: Token, eth: Token, eth_price: int) -> None:
        """Нулевая цена исходного токена"""
        assert compute_swap(usdc, eth, 0, eth_price, "100") is None

    def test_zero_target_price(self, usdc: Token, eth: Token, usdc_price: int) -> None:
        """Нулевая цена целевого токена"""
        assert compute_swap(usdc, eth, usdc_price, 0, "100") is None

    def test_invalid_feed_price(self, usdc: Token, eth: Token, usdc_price: int) -> None:
        """NaN из источника превращается в 0 и даёт None"""
        assert compute_swap(usdc, eth, usdc_price, float_to_scaled(float("nan")), "100") is None


# =============================================================================
# SCENARIO
# =============================================================================


class TestUsdcEthScenario:
    """USD 100.50 → USDC (цена 1.00) и ETH (цена 2000.123456)"""

    @pytest.fixture
    def calculation(
        self, usdc: Token, eth: Token, usdc_price: int, eth_price: int
    ) -> SwapCalculation:
        result = compute_swap(usdc, eth, usdc_price, eth_price, "100.50")
        assert result is not None
        return result

    def test_usd_amount(self, calculation: SwapCalculation) -> None:
        """Сумма USD в масштабе 18"""
        assert calculation.usd_amount == 100_500_000_000_000_000_000
        assert calculation.usd_amount_formatted == "100.5"

    def test_source_amount(self, calculation: SwapCalculation) -> None:
        """100.5 USDC"""
        assert calculation.source_amount.raw == 100_500_000
        assert calculation.source_amount.formatted == "100.5"
        assert calculation.source_amount.usd == calculation.usd_amount
        assert calculation.source_amount.usd_formatted == "100.5"

    def test_target_amount_exact(self, calculation: SwapCalculation, eth_price: int) -> None:
        """Количество ETH: usd × 10^18 ÷ price"""
        assert eth_price == 2_000_123_456 * 10**12
        expected = 100_500_000_000_000_000_000 * 10**18 // eth_price
        assert calculation.target_amount.raw == expected

    def test_target_amount_truncated(self, calculation: SwapCalculation) -> None:
        """100.5 / 2000.123456 = 0.0502468... → '0.050246', не '0.050247'"""
        assert calculation.target_amount.formatted == "0.050246"

    def test_both_legs_show_entered_usd(self, calculation: SwapCalculation) -> None:
        """Обе стороны показывают введённую сумму, а не стоимость усечённого количества"""
        for amount in (calculation.source_amount, calculation.target_amount):
            assert amount.usd == calculation.usd_amount
            assert amount.usd_formatted == calculation.usd_amount_formatted == "100.5"

    def test_exchange_rate(
        self, calculation: SwapCalculation, usdc_price: int, eth_price: int
    ) -> None:
        """Курс USDC → ETH"""
        assert calculation.exchange_rate == calculate_exchange_rate(usdc_price, eth_price)
        assert calculation.exchange_rate == 10**36 // eth_price
        assert calculation.exchange_rate_formatted == format_units(
            calculation.exchange_rate, 18, 18
        )
        assert calculation.exchange_rate_formatted.startswith("0.00049996")

    def test_tokens_carried(self, calculation: SwapCalculation, usdc: Token, eth: Token) -> None:
        """Токены сохраняются в результате"""
        assert calculation.source_token == usdc
        assert calculation.target_token == eth


class TestCalculationProperties:
    """Свойства расчёта"""

    def test_idempotent(self, usdc: Token, eth: Token, usdc_price: int, eth_price: int) -> None:
        """Одинаковые входы — равные результаты"""
        first = compute_swap(usdc, eth, usdc_price, eth_price, "100.50")
        second = compute_swap(usdc, eth, usdc_price, eth_price, "100.50")
        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_concurrent_calls(
        self, usdc: Token, eth: Token, usdc_price: int, eth_price: int
    ) -> None:
        """Параллельные вызовы дают одинаковый результат"""
        expected = compute_swap(usdc, eth, usdc_price, eth_price, "12345.67")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(
                pool.map(
                    lambda _: compute_swap(usdc, eth, usdc_price, eth_price, "12345.67"),
                    range(64),
                )
            )

        assert all(result == expected for result in results)

    def test_same_token_rate_is_unity(self, eth: Token, eth_price: int) -> None:
        """Курс токена к самому себе — '1'"""
        calculation = compute_swap(eth, eth, eth_price, eth_price, "10")
        assert calculation.exchange_rate == ONE
        assert calculation.exchange_rate_formatted == "1"

    def test_tiny_amount_below_display_threshold(self) -> None:
        """Очень маленькое количество показывается порогом"""
        wbtc = get_token("WBTC")
        eth = get_token("ETH")
        calculation = compute_swap(
            eth, wbtc, float_to_scaled(2000.0), float_to_scaled(65000.0), "0.00000001"
        )
        assert calculation is not None
        assert calculation.target_amount.raw == 0
        assert calculation.target_amount.formatted == "0"
        assert calculation.source_amount.formatted == "< 0.000001"

    def test_large_amount(self, usdc: Token, eth: Token, usdc_price: int) -> None:
        """Большие суммы считаются точно"""
        calculation = compute_swap(usdc, eth, usdc_price, ONE, "1000000000000")
        assert calculation.source_amount.raw == 10**18
        assert calculation.target_amount.raw == 10**30
        assert calculation.target_amount.formatted == "1,000,000,000,000"

    def test_excess_fraction_digits_dropped(
        self, usdc: Token, eth: Token, usdc_price: int, eth_price: int
    ) -> None:
        """Цифры суммы за 18-м знаком не влияют на результат"""
        base = compute_swap(usdc, eth, usdc_price, eth_price, "1.000000000000000001")
        longer = compute_swap(usdc, eth, usdc_price, eth_price, "1.0000000000000000019")
        assert base == longer


# =============================================================================
# SWAP CALCULATOR
# =============================================================================


class TestSwapCalculator:
    """Тесты SwapCalculator поверх PriceCache"""

    @pytest.fixture
    def calculator(self, usdc: Token, eth: Token) -> SwapCalculator:
        cache = PriceCache(ttl_seconds=60)
        cache.put(usdc, PriceQuote.from_unit_price("USDC", 1.0, T0))
        cache.put(eth, PriceQuote.from_unit_price("ETH", 2000.123456, T0))
        return SwapCalculator(cache)

    def test_calculate_matches_compute_swap(
        self,
        calculator: SwapCalculator,
        usdc: Token,
        eth: Token,
        usdc_price: int,
        eth_price: int,
    ) -> None:
        """Результат совпадает с прямым расчётом"""
        result = calculator.calculate(usdc, eth, "100.50", now=T0 + timedelta(seconds=5))
        assert result == compute_swap(usdc, eth, usdc_price, eth_price, "100.50")

    def test_stale_quote(self, calculator: SwapCalculator, usdc: Token, eth: Token) -> None:
        """Устаревшая котировка — None"""
        assert calculator.calculate(usdc, eth, "100", now=T0 + timedelta(minutes=2)) is None

    def test_missing_quote(self, calculator: SwapCalculator, usdc: Token) -> None:
        """Нет котировки целевого токена — None"""
        assert calculator.calculate(usdc, get_token("WBTC"), "100", now=T0) is None

    def test_missing_token(self, calculator: SwapCalculator, usdc: Token) -> None:
        """Токен не выбран — None"""
        assert calculator.calculate(usdc, None, "100", now=T0) is None
