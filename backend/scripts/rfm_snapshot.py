"""Generate a synthetic dataset and print its RFM grid."""
import argparse
import pathlib
import random
import sys

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from rfm_api.analytics.generator import generate_customers
from rfm_api.analytics.grid import bucketize, describe_score, filter_scores, summarize_grid
from rfm_api.analytics.scoring import score_customers
from rfm_api.core.config import settings
from rfm_api.schemas.rfm import FilterCriteria


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=settings.DEFAULT_GENERATE_COUNT)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--min-r", type=int, default=1)
    parser.add_argument("--min-f", type=int, default=1)
    parser.add_argument("--min-m", type=int, default=1)
    args = parser.parse_args()

    rng = random.Random(args.seed) if args.seed is not None else None
    records = generate_customers(args.count, rng)
    scores = score_customers(records)
    criteria = FilterCriteria(recency=args.min_r, frequency=args.min_f, monetary=args.min_m)
    filtered = filter_scores(scores, criteria)
    grid = bucketize(filtered)
    summary = summarize_grid(grid)

    print(f"Customers: {len(filtered)} of {len(scores)} after filter")
    print("Monetary (rows) vs Frequency (columns):")
    for y in range(5, 0, -1):
        row = "  ".join(f"{grid[f'{x}-{y}'].count:4d}" for x in range(1, 6))
        print(f"  M={y} {describe_score(y):>9}  {row}")
    print(f"Populated cells: {summary.populated_cells}")
    print(f"Max customers per cell: {summary.max_cell_count}")


if __name__ == "__main__":
    main()
