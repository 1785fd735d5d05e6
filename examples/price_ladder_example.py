#!/usr/bin/env python3
"""
Strike Ladder Example
=====================

This script demonstrates the bsm_pricing package by pricing a European call,
a European put and a call warrant, then tabulating all three across a ladder
of strikes.

To run this example:
    python examples/price_ladder_example.py

With custom parameters:
    python examples/price_ladder_example.py --spot 100 --strike 100 --expiry 1.0 \
        --rate 0.05 --volatility 0.2 --dividend_yield 0.01 --conversion_ratio 2

The script will:
1. Price a single call, put and call warrant
2. Check put-call parity for that strike
3. Print the strike ladder table
4. Plot the ladder (saved to file)
"""

import argparse

import matplotlib.pyplot as plt
import numpy as np

from bsm_pricing import (
    black_scholes_call,
    black_scholes_put,
    black_scholes_warrant_call,
    plot_price_ladder,
    price_ladder,
)


def parse_args():
    parser = argparse.ArgumentParser(
        description="Strike ladder example for the bsm_pricing package.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--spot", type=float, default=100.0, help="Current stock price")
    parser.add_argument("--strike", type=float, default=100.0, help="Strike price")
    parser.add_argument("--expiry", type=float, default=1.0, help="Time to expiry in years")
    parser.add_argument("--rate", type=float, default=0.05, help="Risk-free interest rate")
    parser.add_argument("--volatility", type=float, default=0.2, help="Annualized volatility")
    parser.add_argument("--dividend_yield", type=float, default=0.0, help="Continuous dividend yield")
    parser.add_argument("--conversion_ratio", type=float, default=1.0, help="Warrants per share")
    parser.add_argument("--n_strikes", type=int, default=9, help="Number of strikes in the ladder")
    parser.add_argument("--width", type=float, default=0.4, help="Ladder half-width as a fraction of spot")
    parser.add_argument("--output", type=str, default="examples/price_ladder.png", help="Output file for the plot")
    parser.add_argument("--no-plot", action="store_true", help="Skip plotting entirely")
    return parser.parse_args()


def main():
    args = parse_args()

    spot = args.spot
    strike = args.strike
    expiry = args.expiry
    rate = args.rate
    volatility = args.volatility
    dividend_yield = args.dividend_yield
    conversion_ratio = args.conversion_ratio

    # ==========================================================================
    # Part 1: Single-strike pricing
    # ==========================================================================
    print("=" * 60)
    print("Black-Scholes-Merton Pricing")
    print("=" * 60)

    call_price = black_scholes_call(spot, strike, volatility, rate, expiry, dividend_yield)
    put_price = black_scholes_put(spot, strike, volatility, rate, expiry, dividend_yield)
    warrant_price = black_scholes_warrant_call(spot, strike, volatility, rate, expiry, conversion_ratio)

    print(f"Spot:             {spot:.2f}")
    print(f"Strike:           {strike:.2f}")
    print(f"Expiry:           {expiry:.2f} years")
    print(f"Rate:             {rate:.2%}")
    print(f"Volatility:       {volatility:.2%}")
    print(f"Dividend yield:   {dividend_yield:.2%}")
    print(f"Conversion ratio: {conversion_ratio:g}")
    print()
    print(f"Call Price:    {call_price:.4f}")
    print(f"Put Price:     {put_price:.4f}")
    print(f"Warrant Price: {warrant_price:.4f}")

    # ==========================================================================
    # Part 2: Put-call parity
    # ==========================================================================
    forward_intrinsic = spot * np.exp(-dividend_yield * expiry) - strike * np.exp(-rate * expiry)
    print()
    print(f"C - P:                  {call_price - put_price:+.6f}")
    print(f"S e^(-dT) - K e^(-rT):  {forward_intrinsic:+.6f}")

    # ==========================================================================
    # Part 3: Strike ladder
    # ==========================================================================
    print()
    print("=" * 60)
    print("Strike Ladder")
    print("=" * 60)

    strikes = np.linspace(spot * (1.0 - args.width), spot * (1.0 + args.width), args.n_strikes)
    df = price_ladder(
        spot=spot,
        strikes=strikes,
        volatility=volatility,
        rate=rate,
        maturity=expiry,
        dividend_yield=dividend_yield,
        conversion_ratio=conversion_ratio,
    )
    print(df.to_string(index=False, float_format=lambda value: f"{value:.4f}"))

    if args.no_plot:
        return

    # ==========================================================================
    # Part 4: Visualization
    # ==========================================================================
    fig, _ = plot_price_ladder(
        df,
        title=f"Strike Ladder (S={spot}, vol={volatility:.0%}, T={expiry:g}y, q={conversion_ratio:g})",
    )
    fig.savefig(args.output, dpi=150)
    print()
    print(f"Plot saved to: {args.output}")
    plt.close(fig)


if __name__ == "__main__":
    main()
