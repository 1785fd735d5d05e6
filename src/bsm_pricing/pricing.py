"""
Closed-form Black-Scholes-Merton valuations implemented with NumPy.

The module exposes the normal cumulative distribution function together with
European call, put and call-warrant prices. Every function accepts scalars or
array-likes and broadcasts them with NumPy rules; calls made only with
scalars return a plain ``float``.

Inputs are not validated. Zero volatility, zero maturity, a zero conversion
ratio or a non-positive spot/strike ratio yield ``nan`` or ``inf`` according
to IEEE-754 arithmetic instead of raising.
"""

from __future__ import annotations

from typing import Literal, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.special import erfc

OptionType = Literal["call", "put"]
PriceLike = Union[float, NDArray[np.float64]]

_SQRT_2 = np.sqrt(2.0)


def _as_float_array(value: ArrayLike) -> NDArray[np.float64]:
    return np.asarray(value, dtype=np.float64)


def _to_result(values: ArrayLike) -> PriceLike:
    array = np.asarray(values, dtype=np.float64)
    if array.ndim == 0:
        return float(array)
    return array


def normal_cdf(x: ArrayLike, mu: ArrayLike = 0.0, sigma: ArrayLike = 1.0) -> PriceLike:
    """
    Evaluate the cumulative distribution function of ``Normal(mu, sigma**2)``.

    Uses ``Phi(x) = 0.5 * (1 - erf((mu - x) / (sqrt(2) * sigma)))``, evaluated
    through the complementary error function to keep precision in the left tail.

    Parameters
    ----------
    x : ArrayLike
        Scalar or array of evaluation points.
    mu : ArrayLike, default=0.0
        Mean of the distribution.
    sigma : ArrayLike, default=1.0
        Standard deviation. A zero value is not rejected: the result saturates
        to ``0`` or ``1`` on either side of ``mu`` and is ``nan`` at ``mu``.

    Returns
    -------
    float or numpy.ndarray
        CDF values in ``[0, 1]``.

    Examples
    --------
    >>> normal_cdf(0.0)
    0.5
    >>> round(normal_cdf(1.0), 6)
    0.841345
    """

    x_arr = _as_float_array(x)
    mu_arr = _as_float_array(mu)
    sigma_arr = _as_float_array(sigma)

    with np.errstate(divide="ignore", invalid="ignore"):
        values = 0.5 * erfc((mu_arr - x_arr) / (_SQRT_2 * sigma_arr))

    return _to_result(values)


def _moneyness(
    spot: NDArray[np.float64],
    strike: NDArray[np.float64],
    volatility: NDArray[np.float64],
    drift: NDArray[np.float64],
    maturity: NDArray[np.float64],
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    # Caller holds the errstate; sigma * sqrt(t) == 0 is allowed through.
    vol_sqrt_t = volatility * np.sqrt(maturity)
    d1 = (np.log(spot / strike) + (drift + 0.5 * volatility**2) * maturity) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return d1, d2


def black_scholes_call(
    spot: ArrayLike,
    strike: ArrayLike,
    volatility: ArrayLike,
    rate: ArrayLike,
    maturity: ArrayLike,
    dividend_yield: ArrayLike = 0.0,
) -> PriceLike:
    """
    Price a European call under a continuous dividend yield.

    Parameters
    ----------
    spot : ArrayLike
        Spot price(s) of the underlying asset.
    strike : ArrayLike
        Strike price(s).
    volatility : ArrayLike
        Annualized implied volatility.
    rate : ArrayLike
        Continuously compounded risk-free rate.
    maturity : ArrayLike
        Time to expiry in years.
    dividend_yield : ArrayLike, default=0.0
        Continuous dividend yield of the underlying.

    Returns
    -------
    float or numpy.ndarray
        ``S e^{-dT} N(d1) - K e^{-rT} N(d2)``.

    Examples
    --------
    >>> round(black_scholes_call(100.0, 100.0, 0.2, 0.05, 1.0), 4)
    10.4506
    """

    spot_arr = _as_float_array(spot)
    strike_arr = _as_float_array(strike)
    sigma = _as_float_array(volatility)
    rate_arr = _as_float_array(rate)
    maturity_arr = _as_float_array(maturity)
    dividend_arr = _as_float_array(dividend_yield)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        d1, d2 = _moneyness(spot_arr, strike_arr, sigma, rate_arr - dividend_arr, maturity_arr)
        price = (
            spot_arr * np.exp(-dividend_arr * maturity_arr) * normal_cdf(d1)
            - strike_arr * np.exp(-rate_arr * maturity_arr) * normal_cdf(d2)
        )

    return _to_result(price)


def black_scholes_put(
    spot: ArrayLike,
    strike: ArrayLike,
    volatility: ArrayLike,
    rate: ArrayLike,
    maturity: ArrayLike,
    dividend_yield: ArrayLike = 0.0,
) -> PriceLike:
    """
    Price a European put under a continuous dividend yield.

    Parameters are identical to :func:`black_scholes_call`.

    Returns
    -------
    float or numpy.ndarray
        ``K e^{-rT} N(-d2) - S e^{-dT} N(-d1)``.

    Examples
    --------
    >>> round(black_scholes_put(100.0, 100.0, 0.2, 0.05, 1.0), 4)
    5.5735
    """

    spot_arr = _as_float_array(spot)
    strike_arr = _as_float_array(strike)
    sigma = _as_float_array(volatility)
    rate_arr = _as_float_array(rate)
    maturity_arr = _as_float_array(maturity)
    dividend_arr = _as_float_array(dividend_yield)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        d1, d2 = _moneyness(spot_arr, strike_arr, sigma, rate_arr - dividend_arr, maturity_arr)
        price = (
            strike_arr * np.exp(-rate_arr * maturity_arr) * normal_cdf(-d2)
            - spot_arr * np.exp(-dividend_arr * maturity_arr) * normal_cdf(-d1)
        )

    return _to_result(price)


def black_scholes_warrant_call(
    spot: ArrayLike,
    strike: ArrayLike,
    volatility: ArrayLike,
    rate: ArrayLike,
    maturity: ArrayLike,
    conversion_ratio: ArrayLike = 1.0,
) -> PriceLike:
    """
    Price a call warrant, diluted by its warrant-to-share conversion ratio.

    Warrant holders receive no dividends before conversion, so the spot leg is
    not dividend-discounted and the drift carries no yield term.

    Parameters
    ----------
    spot, strike, volatility, rate, maturity : ArrayLike
        As in :func:`black_scholes_call`.
    conversion_ratio : ArrayLike, default=1.0
        Number of warrants required to acquire one share. Zero gives ``inf``.

    Returns
    -------
    float or numpy.ndarray
        ``(S N(d1) - K e^{-rT} N(d2)) / q``.
    """

    spot_arr = _as_float_array(spot)
    strike_arr = _as_float_array(strike)
    sigma = _as_float_array(volatility)
    rate_arr = _as_float_array(rate)
    maturity_arr = _as_float_array(maturity)
    ratio = _as_float_array(conversion_ratio)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        d1, d2 = _moneyness(spot_arr, strike_arr, sigma, rate_arr, maturity_arr)
        price = (
            spot_arr * normal_cdf(d1)
            - strike_arr * np.exp(-rate_arr * maturity_arr) * normal_cdf(d2)
        ) / ratio

    return _to_result(price)


def black_scholes_price(
    spot: ArrayLike,
    strike: ArrayLike,
    volatility: ArrayLike,
    rate: ArrayLike,
    maturity: ArrayLike,
    option_type: OptionType = "call",
    dividend_yield: ArrayLike = 0.0,
) -> PriceLike:
    """
    Price a European call or put using the Black-Scholes-Merton model.

    Parameters
    ----------
    spot, strike, volatility, rate, maturity : ArrayLike
        As in :func:`black_scholes_call`.
    option_type : {"call", "put"}, default="call"
        Selects the payoff to price.
    dividend_yield : ArrayLike, default=0.0
        Continuous dividend yield of the underlying.

    Returns
    -------
    float or numpy.ndarray
        Option value(s) broadcast from the provided inputs.

    Raises
    ------
    ValueError
        If the option type is invalid.
    """

    if option_type == "call":
        return black_scholes_call(spot, strike, volatility, rate, maturity, dividend_yield)
    if option_type == "put":
        return black_scholes_put(spot, strike, volatility, rate, maturity, dividend_yield)
    raise ValueError("option_type must be either 'call' or 'put'.")
