"""Routing constants.

Centralizes numeric widths and protocol parameters shared by the pricing
model, the route search and the route record.
"""

# Hard ceiling on the number of pools in a route
MAX_ROUTE_HOPS = 5

# Hop budget used when the caller does not supply one
DEFAULT_MAX_HOPS = 3

# Fees are expressed in basis points (30 = 0.3%)
FEE_DENOMINATOR = 10_000

# Amounts and reserves are 64-bit; intermediate products are 128-bit
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1
