"""
DORA and SPACE metric derivation.

`derive_dora_metrics` is a pure mapping from deployment aggregate counts to
four rated indicators. Thresholds:

    deployment_frequency    Elite >= 7/week, High >= 1/week, else Low
    lead_time_for_changes   Elite < 60s average duration, else High
    change_failure_rate     Elite < 15% failed, else Medium
    time_to_restore         fixed 15 minutes, High

The SPACE snapshot is static until survey and review data are collected.
"""
import math
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field


DEFAULT_LEAD_TIME_SECONDS = 60.0
TIME_TO_RESTORE_MINUTES = 15


class Rating(str, Enum):
    ELITE = "Elite"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class DeploymentStats(BaseModel):
    """Aggregate counts over all recorded deployments."""

    total: int = Field(0, ge=0)
    success: int = Field(0, ge=0)
    failed: int = Field(0, ge=0)
    avg_duration: Optional[float] = Field(None, description="Average duration in seconds")


class Indicator(BaseModel):
    value: int
    unit: str
    rating: Rating


class DoraMetrics(BaseModel):
    deployment_frequency: Indicator
    lead_time_for_changes: Indicator
    change_failure_rate: Indicator
    time_to_restore: Indicator


class SpaceDimension(BaseModel):
    score: float
    max: Optional[float] = None
    label: Optional[str] = None
    trend: Literal["up", "down", "stable"]


class SpaceMetrics(BaseModel):
    satisfaction: SpaceDimension
    performance: SpaceDimension
    activity: SpaceDimension
    communication: SpaceDimension
    efficiency: SpaceDimension


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def _frequency_rating(total: int) -> Rating:
    if total >= 7:
        return Rating.ELITE
    if total >= 1:
        return Rating.HIGH
    return Rating.LOW


def derive_dora_metrics(stats: DeploymentStats) -> DoraMetrics:
    """
    Map deployment aggregates to the four DORA indicators.

    A missing or zero average duration is treated as the 60 second default,
    and an empty deployment table counts as one deployment, so the
    frequency never drops below 1 and the failure ratio never divides by zero.

    Example:
        >>> m = derive_dora_metrics(DeploymentStats(total=10, success=7, failed=3))
        >>> m.change_failure_rate.value
        30
    """
    total = stats.total or 1
    lead_time = stats.avg_duration or DEFAULT_LEAD_TIME_SECONDS
    failure_ratio = stats.failed / total

    return DoraMetrics(
        deployment_frequency=Indicator(
            value=total,
            unit="per week",
            rating=_frequency_rating(total),
        ),
        lead_time_for_changes=Indicator(
            value=round_half_up(lead_time),
            unit="seconds",
            rating=Rating.ELITE if lead_time < 60 else Rating.HIGH,
        ),
        change_failure_rate=Indicator(
            value=round_half_up(failure_ratio * 100),
            unit="%",
            rating=Rating.ELITE if failure_ratio < 0.15 else Rating.MEDIUM,
        ),
        time_to_restore=Indicator(
            value=TIME_TO_RESTORE_MINUTES,
            unit="minutes",
            rating=Rating.HIGH,
        ),
    )


def space_metrics() -> SpaceMetrics:
    """Current SPACE framework snapshot."""
    return SpaceMetrics(
        satisfaction=SpaceDimension(score=4.2, max=5, trend="up"),
        performance=SpaceDimension(score=87, max=100, trend="up"),
        activity=SpaceDimension(score=156, label="PRs merged this week", trend="stable"),
        communication=SpaceDimension(score=92, max=100, trend="up"),
        efficiency=SpaceDimension(score=78, max=100, trend="down"),
    )
