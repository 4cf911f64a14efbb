from __future__ import annotations

"""
Advisory checks for fundraiser parameters.

The Graph API enforces these limits itself; the client never blocks a call
on them. Callers can run the checks up front to catch a request that is
certain to be rejected. All rules execute in order with no side effects.
"""
from dataclasses import dataclass
from datetime import datetime, timezone

from fb_fundraisers.models.fundraiser import CreateFundraiserParams

TITLE_MAX_LENGTH = 70
DESCRIPTION_MAX_LENGTH = 50_000
END_TIME_MAX_YEARS = 5


@dataclass(frozen=True)
class AdvisoryIssue:
    code: str
    message: str


def check_fundraiser_params(
    params: CreateFundraiserParams,
    now: datetime | None = None,
) -> list[AdvisoryIssue]:
    """
    Run all advisory rules in order.

    Args:
        params: The fundraiser parameters to check.
        now: The reference time; defaults to the current UTC time.

    Returns:
        Every issue found, in rule order. Empty when the parameters look acceptable.
    """
    now = now or datetime.now(timezone.utc)
    issues: list[AdvisoryIssue] = []
    issues.extend(_check_title(params))
    issues.extend(_check_description(params))
    issues.extend(_check_end_time(params, now))
    return issues


def _check_title(params: CreateFundraiserParams) -> list[AdvisoryIssue]:
    """Rule 1: Title can be up to 70 characters long."""
    if len(params.title) > TITLE_MAX_LENGTH:
        return [AdvisoryIssue(
            code="TITLE_TOO_LONG",
            message=f"Title is {len(params.title)} characters; the limit is {TITLE_MAX_LENGTH}",
        )]
    return []


def _check_description(params: CreateFundraiserParams) -> list[AdvisoryIssue]:
    """Rule 2: Description can be up to 50k characters long."""
    if len(params.description) > DESCRIPTION_MAX_LENGTH:
        return [AdvisoryIssue(
            code="DESCRIPTION_TOO_LONG",
            message=(
                f"Description is {len(params.description)} characters; "
                f"the limit is {DESCRIPTION_MAX_LENGTH}"
            ),
        )]
    return []


def _check_end_time(params: CreateFundraiserParams, now: datetime) -> list[AdvisoryIssue]:
    """Rule 3: End time must be in the future and within 5 years from now."""
    if params.end_time <= now:
        return [AdvisoryIssue(
            code="END_TIME_NOT_IN_FUTURE",
            message=f"End time {params.end_time.isoformat()} is not in the future",
        )]
    if params.end_time > _add_years(now, END_TIME_MAX_YEARS):
        return [AdvisoryIssue(
            code="END_TIME_TOO_FAR",
            message=f"End time {params.end_time.isoformat()} is more than 5 years from now",
        )]
    return []


def _add_years(moment: datetime, years: int) -> datetime:
    """Same calendar date `years` later; Feb 29 maps to Feb 28 in a non-leap year."""
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, day=28)
