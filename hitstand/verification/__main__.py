"""
Command line shuffle check.

    python -m hitstand.verification --trials 10000 --seed 7
"""

import argparse
import json
import logging
import random
import sys

from hitstand.verification.shuffle import check_uniformity

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Test deck shuffling for uniformity with a chi-square test"
    )
    parser.add_argument(
        "--trials", type=int, default=5000, help="Number of decks to shuffle"
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible results")
    parser.add_argument(
        "--alpha", type=float, default=0.001, help="Significance level of the test"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    logger.debug("Shuffling %d decks (seed=%s)", args.trials, args.seed)
    report = check_uniformity(args.trials, rng=rng, alpha=args.alpha)

    print(json.dumps(report.to_dict(), indent=2))
    if not report.is_uniform:
        logger.warning(
            "Shuffle failed uniformity test: p=%.6f < alpha=%s", report.p_value, args.alpha
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
