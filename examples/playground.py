"""Protocol-based math playground.

Demonstrates:
- Same-type addition and scaling of sizes
- Scalars on either side of `*`
- Cross-type addition with an explicitly named result type
- Division by a scalar
- Negation, and why unsigned pairs refuse it
"""

import argparse
import logging
from dataclasses import dataclass
from typing import Any, Self

from pairmath import (
    PairArithmetic,
    Point,
    Size,
    UInt8,
    UnsupportedCapabilityError,
    Vector,
    add_as,
    configure_logging,
)

logger = logging.getLogger("pairmath.examples.playground")


@dataclass(frozen=True, slots=True)
class Velocity[E](PairArithmetic):
    """A pair type defined outside the library: two functions buy all operators."""

    vx: E
    vy: E

    @classmethod
    def from_pair(cls, pair: tuple[E, E], /) -> Self:
        vx, vy = pair
        return cls(vx=vx, vy=vy)

    def to_pair(self) -> tuple[E, E]:
        return (self.vx, self.vy)


def run() -> dict[str, Any]:
    """Evaluate every playground expression.

    Returns:
        Mapping of expression text to its result.
    """
    size = Size(1.0, 2.0)
    size2 = size + size
    point = Point(1.5, 20.3)
    result: Point[float] = add_as(Point, point, size) * 3

    results: dict[str, Any] = {
        "size + size": size2,
        "size2 * 4": size2 * 4,
        "point * 3": point * 3,
        "4 * point": 4 * point,
        "(point + size) * 3 as Point": result,
        "size2 / 3": size2 / 3,
        "-Vector(3.0, -4.0)": -Vector(3.0, -4.0),
        "Velocity(2, 5) * 10": Velocity(2, 5) * 10,
    }

    unsigned = Size(UInt8(3), UInt8(4))
    try:
        -unsigned  # type: ignore[operator, misc]
    except UnsupportedCapabilityError as e:
        logger.info("negation refused: %s", e)
        results["-Size[UInt8]"] = e
    return results


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pairmath-playground",
        description="Protocol-based math playground",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-json", action="store_true", help="Log JSON lines to stderr")
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, log_json=args.log_json)

    for expression, value in run().items():
        print(f"{expression:<30} {value}")
    print("✅")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
