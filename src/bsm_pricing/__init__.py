"""
Public API for the bsm_pricing package.
"""

from .pricing import (
    OptionType,
    black_scholes_call,
    black_scholes_price,
    black_scholes_put,
    black_scholes_warrant_call,
    normal_cdf,
)

from .ladder import plot_price_ladder, price_ladder

__all__ = [
    # Closed-form pricing
    "OptionType",
    "black_scholes_call",
    "black_scholes_price",
    "black_scholes_put",
    "black_scholes_warrant_call",
    "normal_cdf",
    # Strike ladders
    "plot_price_ladder",
    "price_ladder",
]

__version__ = "0.1.0"
