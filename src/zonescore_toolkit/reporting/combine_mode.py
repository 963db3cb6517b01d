"""
Module: reporting.combine_mode

Purpose:
    Enum defining how per-snapshot zone averages are combined into one
    cross-snapshot score for the principal report.

Key Classes:
    - CombineMode: UNWEIGHTED / WEIGHTED

Used By:
    - reporting.ranking.principal
    - reporting.config
"""

from enum import Enum


class CombineMode(Enum):
    """
    Controls how a zone's per-snapshot scores are combined.

    Attributes:
        UNWEIGHTED: Mean of per-snapshot means. A snapshot with 2 answered
                    questions counts as much as one with 200. Default.
        WEIGHTED: Per-snapshot means weighted by their answered question
                  count, approximating a mean over all answered questions.

    Example:
        >>> CombineMode("weighted") is CombineMode.WEIGHTED
        True
    """

    UNWEIGHTED = "unweighted"
    WEIGHTED = "weighted"
