"""Review aggregation service.

Reduces one supplier's approved reviews into display statistics:
- count
- average of rating_overall (full precision; rounding is a presentation concern)
- distribution of reviews per star value 1..5
- per-aspect averages over the reviews that rated that aspect

Aggregation is read-time only: nothing here is persisted or cached.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from supplier_directory.schemas import AspectAverages, ReviewSummaryOut, StarDistribution

ASPECTS = ("accuracy", "logistics", "value", "communication")
STAR_VALUES = (1, 2, 3, 4, 5)


class RatedReview(Protocol):
    rating_overall: int
    rating_accuracy: int | None
    rating_logistics: int | None
    rating_value: int | None
    rating_communication: int | None


def _empty_distribution() -> dict[int, int]:
    return {star: 0 for star in STAR_VALUES}


def _empty_aspects() -> dict[str, float | None]:
    return {aspect: None for aspect in ASPECTS}


@dataclass(frozen=True)
class ReviewSummary:
    """Aggregated review statistics (derived, never persisted)."""

    count: int = 0
    average: float | None = None
    distribution: dict[int, int] = field(default_factory=_empty_distribution)
    aspects: dict[str, float | None] = field(default_factory=_empty_aspects)


def _star_bucket(rating: int) -> int:
    # Ratings are validated 1-5 integers at creation; clamp anything else.
    return min(5, max(1, round(rating)))


def summarize_reviews(reviews: Iterable[RatedReview]) -> ReviewSummary:
    """Summarize reviews for one supplier.

    Args:
        reviews: Approved reviews (any order).

    Returns:
        ReviewSummary; an empty input yields count=0, average=None,
        an all-zero distribution and all-None aspects.
    """
    count = 0
    overall_total = 0
    distribution = _empty_distribution()
    aspect_totals = {aspect: 0 for aspect in ASPECTS}
    aspect_counts = {aspect: 0 for aspect in ASPECTS}

    for review in reviews:
        count += 1
        overall_total += review.rating_overall
        distribution[_star_bucket(review.rating_overall)] += 1

        for aspect in ASPECTS:
            value = getattr(review, f"rating_{aspect}", None)
            if value is None:
                continue
            aspect_totals[aspect] += value
            aspect_counts[aspect] += 1

    if count == 0:
        return ReviewSummary()

    aspects: dict[str, float | None] = {
        aspect: (aspect_totals[aspect] / aspect_counts[aspect]) if aspect_counts[aspect] else None
        for aspect in ASPECTS
    }
    return ReviewSummary(
        count=count,
        average=overall_total / count,
        distribution=distribution,
        aspects=aspects,
    )


def _round(value: float | None, digits: int) -> float | None:
    return round(value, digits) if value is not None else None


def to_review_summary_out(summary: ReviewSummary, digits: int = 2) -> ReviewSummaryOut:
    """Convert a ReviewSummary into its API schema, rounding averages."""
    d = summary.distribution
    return ReviewSummaryOut(
        average=_round(summary.average, digits),
        count=summary.count,
        distribution=StarDistribution(
            one_star=d[1],
            two_star=d[2],
            three_star=d[3],
            four_star=d[4],
            five_star=d[5],
        ),
        aspects=AspectAverages(
            **{aspect: _round(avg, digits) for aspect, avg in summary.aspects.items()}
        ),
    )
