"""
Strike-ladder tabulation of Black-Scholes-Merton prices.

Prices a call, a put and a call warrant at every strike of a ladder and
collects them into a :class:`pandas.DataFrame`, alongside the put-call parity
residual, for quick inspection or plotting.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from .pricing import black_scholes_call, black_scholes_put, black_scholes_warrant_call


def price_ladder(
    spot: float,
    strikes: ArrayLike,
    volatility: float,
    rate: float,
    maturity: float,
    dividend_yield: float = 0.0,
    conversion_ratio: float = 1.0,
) -> pd.DataFrame:
    """
    Price calls, puts and call warrants over a ladder of strikes.

    Parameters
    ----------
    spot : float
        Spot price of the underlying asset.
    strikes : ArrayLike
        One-dimensional sequence of strikes.
    volatility : float
        Annualized implied volatility.
    rate : float
        Continuously compounded risk-free rate.
    maturity : float
        Time to expiry in years.
    dividend_yield : float, default=0.0
        Continuous dividend yield, applied to calls and puts only.
    conversion_ratio : float, default=1.0
        Warrant-to-share conversion ratio.

    Returns
    -------
    pandas.DataFrame
        DataFrame with columns:
        - strike: Strike of the row
        - call: European call price
        - put: European put price
        - warrant_call: Diluted call warrant price
        - parity_residual: ``call - put - (S e^{-dT} - K e^{-rT})``

    Raises
    ------
    ValueError
        If ``strikes`` is empty.

    Examples
    --------
    >>> df = price_ladder(100.0, [90.0, 100.0, 110.0], 0.2, 0.05, 1.0)
    >>> df[["strike", "call", "put"]]
    """
    strike_arr = np.atleast_1d(np.asarray(strikes, dtype=np.float64))
    if strike_arr.size == 0:
        raise ValueError("strikes cannot be empty.")
    if strike_arr.ndim != 1:
        raise ValueError("strikes must be one-dimensional.")

    call = np.atleast_1d(
        black_scholes_call(spot, strike_arr, volatility, rate, maturity, dividend_yield)
    )
    put = np.atleast_1d(
        black_scholes_put(spot, strike_arr, volatility, rate, maturity, dividend_yield)
    )
    warrant = np.atleast_1d(
        black_scholes_warrant_call(spot, strike_arr, volatility, rate, maturity, conversion_ratio)
    )

    forward_intrinsic = spot * np.exp(-dividend_yield * maturity) - strike_arr * np.exp(
        -rate * maturity
    )

    df = pd.DataFrame(
        {
            "strike": strike_arr,
            "call": call,
            "put": put,
            "warrant_call": warrant,
        }
    )
    df["parity_residual"] = df["call"] - df["put"] - forward_intrinsic

    return df


def plot_price_ladder(
    df: pd.DataFrame,
    title: str = "Black-Scholes-Merton Strike Ladder",
) -> tuple:
    """
    Plot call, put and warrant prices against strike.

    Parameters
    ----------
    df : pandas.DataFrame
        Results from price_ladder().
    title : str, default="Black-Scholes-Merton Strike Ladder"
        Title for the plot.

    Returns
    -------
    tuple
        (fig, ax) matplotlib figure and axes objects.

    Notes
    -----
    Requires matplotlib to be installed.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError as exc:
        raise ImportError(
            "matplotlib is required for plotting. Install with: pip install matplotlib"
        ) from exc

    fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot(df["strike"], df["call"], "o-", linewidth=2, markersize=5, label="Call")
    ax.plot(df["strike"], df["put"], "s-", linewidth=2, markersize=5, label="Put")
    ax.plot(
        df["strike"],
        df["warrant_call"],
        "--",
        linewidth=2,
        color="gray",
        label="Call warrant",
    )

    ax.set_xlabel("Strike", fontsize=12)
    ax.set_ylabel("Price", fontsize=12)
    ax.set_title(title, fontsize=13)
    ax.legend(fontsize=11)
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    return fig, ax
