"""Reviewer assignment engine — pure selection, no DB access."""

from prreview.engines.reviewer_assignment.selector import (
    MAX_INITIAL_REVIEWERS,
    Member,
    ReviewerSelector,
)

__all__ = [
    "MAX_INITIAL_REVIEWERS",
    "Member",
    "ReviewerSelector",
]
