"""Fixed-point helpers mirroring Aave's on-chain RAY math.

All arguments and results are integers in RAY (1e27) unless noted.
Divisions round down, except ray_mul which rounds half up like
the WadRayMath library.
"""

from decimal import Decimal

from src.core.constants import HALF_RAY, RAY, SECONDS_PER_YEAR


def ray_mul(a: int, b: int) -> int:
    return (a * b + HALF_RAY) // RAY


def ray_pow(x: int, n: int) -> int:
    """Exponentiation by squaring in RAY precision."""
    z = x if n % 2 else RAY
    n //= 2
    while n:
        x = ray_mul(x, x)
        if n % 2:
            z = ray_mul(z, x)
        n //= 2
    return z


def rate_to_apy(rate: int) -> int:
    """Convert a per-year RAY rate (APR) to a RAY APY compounded every second."""
    return ray_pow(rate // SECONDS_PER_YEAR + RAY, SECONDS_PER_YEAR) - RAY


def calculate_compounded_interest(
    rate: int,
    last_update_timestamp: int,
    current_timestamp: int,
) -> int:
    """Compounded interest factor between two timestamps.

    Uses the three-term binomial approximation of (1 + rate/year)^dt, the
    same one the Pool uses to accrue variable debt.
    """
    exp = current_timestamp - last_update_timestamp
    if exp <= 0:
        return RAY

    rate_per_second = rate // SECONDS_PER_YEAR
    base_power_two = ray_mul(rate_per_second, rate_per_second)
    base_power_three = ray_mul(base_power_two, rate_per_second)

    second_term = exp * (exp - 1) * base_power_two // 2
    third_term = exp * (exp - 1) * (exp - 2) * base_power_three // 6

    return RAY + rate_per_second * exp + second_term + third_term


def normalize(value: int, decimals: int) -> Decimal:
    """Scale an integer amount down by 10**decimals."""
    return Decimal(int(value)).scaleb(-int(decimals))
