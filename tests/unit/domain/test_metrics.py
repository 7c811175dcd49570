# tests/unit/domain/test_metrics.py
"""Tests for DORA derivation and the SPACE snapshot."""

import pytest

from idp_service.domain.metrics import (
    DeploymentStats,
    Rating,
    derive_dora_metrics,
    round_half_up,
    space_metrics,
)


pytestmark = pytest.mark.unit


def test_failure_rate_and_frequency_from_counts():
    metrics = derive_dora_metrics(DeploymentStats(total=10, success=7, failed=3))

    assert metrics.change_failure_rate.value == 30
    assert metrics.change_failure_rate.unit == "%"
    assert metrics.change_failure_rate.rating == Rating.MEDIUM
    assert metrics.deployment_frequency.value == 10
    assert metrics.deployment_frequency.rating == Rating.ELITE


@pytest.mark.parametrize(
    "total, expected",
    [(1, Rating.HIGH), (6, Rating.HIGH), (7, Rating.ELITE)],
)
def test_deployment_frequency_rating(total, expected):
    metrics = derive_dora_metrics(DeploymentStats(total=total))

    assert metrics.deployment_frequency.rating == expected
    assert metrics.deployment_frequency.unit == "per week"


def test_zero_deployments_count_as_one():
    metrics = derive_dora_metrics(DeploymentStats())

    assert metrics.deployment_frequency.value == 1
    assert metrics.deployment_frequency.rating == Rating.HIGH
    assert metrics.change_failure_rate.value == 0
    assert metrics.change_failure_rate.rating == Rating.ELITE


@pytest.mark.parametrize("avg_duration", [None, 0.0])
def test_lead_time_defaults_to_sixty_seconds(avg_duration):
    metrics = derive_dora_metrics(DeploymentStats(total=3, avg_duration=avg_duration))

    assert metrics.lead_time_for_changes.value == 60
    assert metrics.lead_time_for_changes.unit == "seconds"
    assert metrics.lead_time_for_changes.rating == Rating.HIGH


def test_fast_lead_time_is_elite():
    metrics = derive_dora_metrics(DeploymentStats(total=3, avg_duration=42.5))

    assert metrics.lead_time_for_changes.value == 43
    assert metrics.lead_time_for_changes.rating == Rating.ELITE


def test_failure_rate_below_fifteen_percent_is_elite():
    metrics = derive_dora_metrics(DeploymentStats(total=20, success=18, failed=2))

    assert metrics.change_failure_rate.value == 10
    assert metrics.change_failure_rate.rating == Rating.ELITE


def test_failure_rate_exactly_fifteen_percent_is_medium():
    metrics = derive_dora_metrics(DeploymentStats(total=20, success=17, failed=3))

    assert metrics.change_failure_rate.value == 15
    assert metrics.change_failure_rate.rating == Rating.MEDIUM


def test_time_to_restore_is_fixed():
    metrics = derive_dora_metrics(DeploymentStats(total=50, failed=25, avg_duration=300))

    assert metrics.time_to_restore.value == 15
    assert metrics.time_to_restore.unit == "minutes"
    assert metrics.time_to_restore.rating == Rating.HIGH


@pytest.mark.parametrize(
    "value, expected",
    [(2.5, 3), (3.5, 4), (2.4, 2), (12.5, 13), (0.0, 0)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_failure_rate_rounds_half_up():
    # 1/8 = 12.5%
    metrics = derive_dora_metrics(DeploymentStats(total=8, success=7, failed=1))

    assert metrics.change_failure_rate.value == 13


def test_space_snapshot():
    space = space_metrics()

    assert space.satisfaction.score == 4.2
    assert space.satisfaction.max == 5
    assert space.satisfaction.trend == "up"
    assert space.activity.score == 156
    assert space.activity.label == "PRs merged this week"
    assert space.activity.trend == "stable"
    assert space.efficiency.trend == "down"
