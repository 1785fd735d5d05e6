from __future__ import annotations

import numpy as np
import pytest

from bsm_pricing import (
    black_scholes_call,
    black_scholes_put,
    plot_price_ladder,
    price_ladder,
)


def test_price_ladder_columns_and_values():
    strikes = [80.0, 90.0, 100.0, 110.0, 120.0]
    df = price_ladder(100.0, strikes, 0.2, 0.05, 1.0, dividend_yield=0.01, conversion_ratio=2.0)

    assert list(df.columns) == ["strike", "call", "put", "warrant_call", "parity_residual"]
    assert len(df) == 5
    np.testing.assert_allclose(df["strike"], strikes)

    for row in df.itertuples(index=False):
        assert row.call == pytest.approx(black_scholes_call(100.0, row.strike, 0.2, 0.05, 1.0, 0.01))
        assert row.put == pytest.approx(black_scholes_put(100.0, row.strike, 0.2, 0.05, 1.0, 0.01))


def test_price_ladder_parity_residual_is_negligible():
    df = price_ladder(50.0, np.linspace(30.0, 70.0, 21), 0.3, 0.03, 0.5, dividend_yield=0.01)
    assert np.max(np.abs(df["parity_residual"])) < 1e-9


def test_price_ladder_warrant_without_dividends_matches_call():
    df = price_ladder(100.0, [95.0, 105.0], 0.25, 0.04, 1.5, conversion_ratio=1.0)
    np.testing.assert_allclose(df["warrant_call"], df["call"], rtol=1e-12)


def test_price_ladder_accepts_single_strike():
    df = price_ladder(100.0, 100.0, 0.2, 0.05, 1.0)
    assert len(df) == 1
    assert df["call"].iloc[0] == pytest.approx(10.450583572185565)


def test_price_ladder_rejects_empty_strikes():
    with pytest.raises(ValueError):
        price_ladder(100.0, [], 0.2, 0.05, 1.0)


def test_price_ladder_rejects_grid_of_strikes():
    with pytest.raises(ValueError):
        price_ladder(100.0, [[90.0, 100.0], [110.0, 120.0]], 0.2, 0.05, 1.0)


def test_plot_price_ladder_returns_figure():
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    df = price_ladder(100.0, np.linspace(60.0, 140.0, 9), 0.2, 0.05, 1.0)
    fig, ax = plot_price_ladder(df, title="Test ladder")

    assert ax.get_title() == "Test ladder"
    assert len(ax.get_lines()) == 3
    plt.close(fig)
