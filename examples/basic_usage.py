"""Basic usage — classify three curves, wrap one in Verified, serialize it.

Run with: python examples/basic_usage.py
"""

import logging
import math

from antifragile.config import get_settings
from antifragile.core.classify_convexity import classify
from antifragile.core.payoff_protocols import Antifragile, PayoffFunction
from antifragile.core.triad import Triad
from antifragile.core.verified import Verified
from antifragile.infrastructure.observability import setup_logging
from antifragile.schemas.classification import dump_triad

logger = logging.getLogger("basic_usage")


class OptionsPortfolio(Antifragile[float, float]):
    """Long volatility position: P&L grows with the square of volatility."""

    def __init__(self, vega_exposure: float):
        self.vega_exposure = vega_exposure

    def payoff(self, volatility: float) -> float:
        return self.vega_exposure * volatility * volatility


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    at, delta = 10.0, 1.0
    systems = {
        "convex (x²)": PayoffFunction(lambda x: x * x),
        "concave (√x)": PayoffFunction(lambda x: math.sqrt(abs(x))),
        "linear (2x + 5)": PayoffFunction(lambda x: 2.0 * x + 5.0),
    }
    for name, system in systems.items():
        logger.info(f"{name} at {at} ± {delta}: {classify(system, at, delta)}")

    verified = Verified.check(OptionsPortfolio(vega_exposure=1.0), 0.2, 0.05)
    logger.info(
        f"Options portfolio: {verified.classification}, "
        f"gains from stress: {verified.gains_from_stress()}",
    )

    ranked = sorted([Triad.ANTIFRAGILE, Triad.FRAGILE, Triad.ROBUST])
    logger.info(f"Ordering: {[t.as_str() for t in ranked]}")
    logger.info(f"Triad.parse('ROBUST') -> {Triad.parse('ROBUST')!r}")
    logger.info(f"Triad.from_byte(2) -> {Triad.from_byte(2)!r}")

    if settings.serialization_enabled:
        logger.info(f"Serialized: {dump_triad(verified.classification)}")


if __name__ == "__main__":
    main()
