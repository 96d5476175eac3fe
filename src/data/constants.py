"""Fixed-point scales and protocol constants."""

# FixedU128 — 18 decimal places over an unsigned 128-bit mantissa
DIV = 10**18
MAX_INNER = 2**128 - 1

# Rate curve parameters are percentages with two decimals (8051 = 80.51%)
PERCENT_SCALE = 10_000

# Elapsed accrual periods must fit in a u32
MAX_ACCRUAL_PERIODS = 2**32 - 1

# USD dust threshold below which a position is fully closable
DEFAULT_CLOSE_MINIMAL_AMOUNT = 100

# Asset symbols
KONO = "KONO"
DOT = "DOT"
ETH = "ETH"
BTC = "BTC"
DORA = "DORA"
LIT = "LIT"
