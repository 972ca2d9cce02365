"""ScoringPolicy: how predictions without matching ground truth are scored."""

from enum import StrEnum


class ScoringPolicy(StrEnum):
    """LENIENT drops unmatched predictions from every metric.

    STRICT counts each unmatched prediction as an incorrect prediction of its
    predicted type, so false positives lower accuracy and precision.
    """

    LENIENT = "lenient"
    STRICT = "strict"
