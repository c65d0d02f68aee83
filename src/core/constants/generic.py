"""Generic constants for DeFi protocol calculations.

These constants are protocol-agnostic and can be used across different protocols.
"""

# Time constants (Aave compounds over a 365 day year)
SECONDS_PER_YEAR = 31_536_000

# Precision constants
WAD = 10**18  # Standard 18 decimal precision
RAY = 10**27  # 27 decimal precision (used in Aave)
HALF_RAY = RAY // 2
RAY_DECIMALS = 27

# Chainlink-style USD feeds use 8 decimals
USD_DECIMALS = 8

# LTV, liquidation threshold/bonus and reserve factor are expressed in basis points
LTV_PRECISION = 4
