import math
from datetime import timedelta

import pytest

from src.simulation_layer.formulas import (
    MAX_BUSINESS_PRICE,
    calculate_business_breakdown,
    calculate_business_metrics,
    calculate_maus,
    calculate_time_status,
    clamp_price,
    daily_profit,
    monthly_operating_cost,
    monthly_profit,
    monthly_revenue,
    price_impact,
    validate_price,
)
from src.simulation_layer.models import Business, GameState

from tests.conftest import GAME_START


def make_business(**overrides) -> Business:
    fields = dict(
        id="b-1",
        name="QuickHub",
        description="QuickHub makes complex workflows simple and efficient",
        usefulness=60,
        fun=60,
        operating_cost=100,
        price=10,
        maus=108,
        created_at=GAME_START,
        is_active=True,
    )
    fields.update(overrides)
    return Business(**fields)


class TestMauFormula:
    def test_reference_scenario(self):
        assert calculate_maus(60, 60, 10, 0.2) == 108

    def test_price_impact_has_ten_percent_floor(self):
        assert price_impact(0) == 1
        assert price_impact(50) == pytest.approx(0.5)
        assert price_impact(90) == pytest.approx(0.1)
        assert price_impact(5_000) == 0.1
        assert price_impact(MAX_BUSINESS_PRICE) == 0.1

    def test_high_price_never_reaches_zero_growth(self):
        assert calculate_maus(100, 100, MAX_BUSINESS_PRICE, 1.0) == 100

    def test_zero_quality_yields_zero_maus(self):
        assert calculate_maus(80, 80, 10, 0) == 0


class TestClampPrice:
    @pytest.mark.parametrize(
        "requested, expected",
        [
            (-10, 1),
            (0, 1),
            (0.5, 1),
            (25, 25),
            (MAX_BUSINESS_PRICE, MAX_BUSINESS_PRICE),
            (MAX_BUSINESS_PRICE + 1000, MAX_BUSINESS_PRICE),
            (math.inf, MAX_BUSINESS_PRICE),
            (-math.inf, 1),
        ],
    )
    def test_bounds(self, requested, expected):
        assert clamp_price(requested) == expected

    def test_nan_falls_back_to_starting_price(self):
        assert clamp_price(math.nan) == 10


class TestSettlementAggregates:
    def test_only_active_businesses_count(self):
        active = make_business(id="a", maus=100, price=10, operating_cost=200)
        closed = make_business(id="b", maus=999, price=50, operating_cost=10, is_active=False)
        businesses = [active, closed]

        assert monthly_revenue(businesses) == 1000
        assert monthly_operating_cost(businesses) == 200
        assert monthly_profit(businesses) == 800
        assert daily_profit(businesses) == pytest.approx(800 / 30)

    def test_profit_may_be_negative(self):
        businesses = [make_business(maus=1, price=1, operating_cost=250)]
        assert monthly_profit(businesses) == -249
        assert daily_profit(businesses) == pytest.approx(-249 / 30)

    def test_empty_collection(self):
        assert daily_profit([]) == 0

    def test_accepts_generators(self):
        assert monthly_profit(b for b in [make_business(maus=10, price=10, operating_cost=50)]) == 50


class TestBreakdownAndMetrics:
    def test_breakdown_matches_formula(self):
        calc = calculate_business_breakdown(make_business(), 0.2)
        assert calc.base_growth_rate == 60
        assert calc.price_impact == pytest.approx(0.9)
        assert calc.target_maus == 108
        assert calc.monthly_revenue == 1080
        assert calc.monthly_profit == 980

    def test_metrics(self):
        metrics = calculate_business_metrics(make_business(), 0.2)
        assert metrics.revenue == 1080
        assert metrics.profit == 980
        assert metrics.growth_rate == pytest.approx(10.8)
        assert metrics.profit_margin == pytest.approx(980 / 1080)

    def test_zero_revenue_margin(self):
        metrics = calculate_business_metrics(make_business(maus=0), 0.2)
        assert metrics.profit == -100
        assert metrics.profit_margin == 0.0


class TestValidatePrice:
    def test_in_range(self):
        result = validate_price(25)
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []
        assert result.suggested_price == 25
        assert result.price_range == (1, MAX_BUSINESS_PRICE)

    def test_below_minimum(self):
        result = validate_price(-3)
        assert not result.is_valid
        assert result.suggested_price == 1
        assert result.errors

    def test_above_maximum(self):
        result = validate_price(MAX_BUSINESS_PRICE * 2)
        assert not result.is_valid
        assert result.suggested_price == MAX_BUSINESS_PRICE

    def test_nan(self):
        result = validate_price(math.nan)
        assert not result.is_valid
        assert result.suggested_price == 10

    def test_warns_at_growth_floor(self):
        result = validate_price(250)
        assert result.is_valid
        assert result.warnings


class TestTimeStatus:
    def test_fresh_game(self):
        state = GameState.initial(GAME_START, 40)
        status = calculate_time_status(state, GAME_START)
        assert status.days_since_start == 0
        assert status.days_since_last_payment == 0
        assert status.days_until_next_payment == 31
        assert status.can_generate
        assert status.cooldown_progress == 1.0

    def test_cooldown_progress(self):
        state = GameState.initial(GAME_START, 40)
        state.generation_cooldown = 45
        status = calculate_time_status(state, GAME_START + timedelta(days=3, hours=5))
        assert status.days_since_start == 3
        assert status.days_until_next_payment == 27
        assert not status.can_generate
        assert status.cooldown_remaining == 45
        assert status.cooldown_progress == pytest.approx(0.25)
