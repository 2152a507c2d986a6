import argparse
import json
import logging
from typing import List, Optional, Sequence

from quartic_pappus import (
    SolveOptions,
    format_result,
    parameter_from_polar,
    result_to_dict,
    run_construction,
    sweep_uniform,
)
from quartic_pappus.solver import DENOMINATOR_POLICIES, UPDATE_SCHEMES

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Solve x^4 + m x^3 + m^2 x^2 + m^3 x + m^4 and run the cross construction on its roots"
    )
    parser.add_argument("--magnitude", type=float, default=1.0, help="|m| (default: 1)")
    parser.add_argument("--angle", type=float, default=0.0, help="arg(m) in radians (default: 0)")
    parser.add_argument("--max-iter", type=int, default=200, help="Durand-Kerner pass cap (default: 200)")
    parser.add_argument("--tol", type=float, default=1e-12, help="Convergence tolerance (default: 1e-12)")
    parser.add_argument("--update", choices=UPDATE_SCHEMES, default="sequential")
    parser.add_argument("--denominator", choices=DENOMINATOR_POLICIES, default="guarded")
    parser.add_argument(
        "--sweep",
        type=int,
        metavar="N",
        help="Sweep N evenly spaced angles at the given magnitude instead of a single angle",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        options = SolveOptions(
            max_iter=args.max_iter,
            tol=args.tol,
            update=args.update,
            denominator=args.denominator,
        )
        if args.sweep is not None:
            results = sweep_uniform(args.magnitude, args.sweep, options)
        else:
            m = parameter_from_polar(args.magnitude, args.angle)
            results = [run_construction(m, options)]
    except ValueError as exc:
        parser.error(str(exc))

    logger.info("Computed %d construction(s)", len(results))

    if args.json:
        payload: List[dict] = [result_to_dict(result) for result in results]
        print(json.dumps(payload if args.sweep is not None else payload[0], indent=2))
        return

    print("\n\n".join(format_result(result) for result in results))


if __name__ == "__main__":
    main()
