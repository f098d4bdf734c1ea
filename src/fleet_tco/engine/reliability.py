"""Reliability model — Weibull failure curves and replacement intervals.

Weibull with shape β and scale η:

  F(t) = 1 − exp(−(t/η)^β)                 cumulative failure probability
  R(t) = exp(−(t/η)^β)                     reliability (survival)
  f(t) = (β/η)·(t/η)^(β−1)·exp(−(t/η)^β)   density
  β < 1 → infant mortality,  β = 1 → exponential,  β > 1 → wear-out.

Catalogs give a *mean* life, so the scale is derived from it:

  mean = η·Γ(1 + 1/β)   ⇒   η = mean / Γ(1 + 1/β)

Γ is computed with a self-contained Lanczos approximation (g = 7) and the
reflection formula below 0.5.

Characteristic lives:

  B10 = η·(0.1054)^(1/β)     (−ln 0.90, 10% failed)
  B50 = η·(0.6931)^(1/β)     (ln 2, median)

Every public function fails fast with ``ReliabilityDomainError`` when the
mean life or shape is not a positive finite number.
"""

from __future__ import annotations

import math

import numpy as np

from fleet_tco.config.lifecycle import DEFAULT_WEIBULL_SHAPE, ComponentLifecycle
from fleet_tco.config.pricing import PriceList
from fleet_tco.errors import ReliabilityDomainError
from fleet_tco.models.results import (
    CurvePoint,
    DueReplacement,
    FailureCurve,
    ReplacementIntervalResult,
    ReplacementYear,
    WeibullParameters,
)

_LANCZOS_G = 7
_LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

_B10_FACTOR = 0.1054
_B50_FACTOR = 0.6931

MIN_SEARCH_STEPS = 100


# ═══════════════════════════════════════════════════════════════════════════
# Gamma function
# ═══════════════════════════════════════════════════════════════════════════

def lanczos_gamma(z: float) -> float:
    """Γ(z) for any real z except the poles 0, −1, −2, …"""
    if z <= 0 and float(z).is_integer():
        raise ReliabilityDomainError(f"Gamma function has a pole at {z}")

    if z < 0.5:
        # Reflection: Γ(z)·Γ(1 − z) = π / sin(πz)
        return math.pi / (math.sin(math.pi * z) * lanczos_gamma(1 - z))

    z -= 1
    x = _LANCZOS_COEFFICIENTS[0]
    for i in range(1, _LANCZOS_G + 2):
        x += _LANCZOS_COEFFICIENTS[i] / (z + i)
    t = z + _LANCZOS_G + 0.5
    try:
        return math.sqrt(2 * math.pi) * t ** (z + 0.5) * math.exp(-t) * x
    except OverflowError as exc:
        raise ReliabilityDomainError(f"Gamma function overflows at {z + 1}") from exc


# ═══════════════════════════════════════════════════════════════════════════
# Weibull primitives
# ═══════════════════════════════════════════════════════════════════════════

def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ReliabilityDomainError(f"{name} must be a positive finite number, got {value!r}")


def weibull_scale(mean_life: float, shape: float = DEFAULT_WEIBULL_SHAPE) -> float:
    """η from the mean life and shape."""
    _require_positive("mean life", mean_life)
    _require_positive("Weibull shape", shape)
    try:
        gamma = lanczos_gamma(1 + 1 / shape)
    except OverflowError as exc:
        raise ReliabilityDomainError(f"Weibull shape {shape!r} is too small to derive a scale") from exc
    if not math.isfinite(gamma) or gamma <= 0:
        raise ReliabilityDomainError(f"Weibull shape {shape!r} is too small to derive a scale")
    return mean_life / gamma


def _unwrap(values: np.ndarray) -> np.ndarray | float:
    return values if values.ndim else float(values)


def weibull_cdf(t, beta: float, eta: float) -> np.ndarray | float:
    """Cumulative failure probability F(t); F = 0 for t ≤ 0."""
    z = np.clip(np.asarray(t, dtype=np.float64), 0.0, None) / eta
    return _unwrap(-np.expm1(-(z ** beta)))


def weibull_reliability(t, beta: float, eta: float) -> np.ndarray | float:
    """Survival probability R(t) = 1 − F(t)."""
    z = np.clip(np.asarray(t, dtype=np.float64), 0.0, None) / eta
    return _unwrap(np.exp(-(z ** beta)))


def weibull_pdf(t, beta: float, eta: float) -> np.ndarray | float:
    """Weibull density f(t); reported as 0 at t ≤ 0."""
    t = np.asarray(t, dtype=np.float64)
    z = np.clip(t, 0.0, None) / eta
    with np.errstate(divide="ignore", invalid="ignore"):
        density = (beta / eta) * z ** (beta - 1) * np.exp(-(z ** beta))
    return _unwrap(np.where(t > 0, density, 0.0))


def weibull_parameters(
    mean_life: float,
    shape: float = DEFAULT_WEIBULL_SHAPE,
    scale: float | None = None,
) -> WeibullParameters:
    """Scale and characteristic lives of a component.

    An explicit ``scale`` (from field data) overrides the one derived from
    the mean life.
    """
    if scale is None:
        eta = weibull_scale(mean_life, shape)
    else:
        _require_positive("mean life", mean_life)
        _require_positive("Weibull shape", shape)
        _require_positive("Weibull scale", scale)
        eta = scale

    return WeibullParameters(
        beta=shape,
        eta=eta,
        mean_life=mean_life,
        b10_life=eta * _B10_FACTOR ** (1 / shape),
        b50_life=eta * _B50_FACTOR ** (1 / shape),
    )


# ═══════════════════════════════════════════════════════════════════════════
# Failure curve
# ═══════════════════════════════════════════════════════════════════════════

def failure_curve(
    mean_life_hours: float,
    shape: float = DEFAULT_WEIBULL_SHAPE,
    points: int = 50,
    scale: float | None = None,
) -> FailureCurve:
    """Sample F, R and f at ``points + 1`` evenly spaced ages over [0, 2×mean]."""
    if points < 1:
        raise ReliabilityDomainError(f"points must be at least 1, got {points}")

    params = weibull_parameters(mean_life_hours, shape, scale)
    hours = np.linspace(0.0, 2.0 * mean_life_hours, points + 1)

    cdf = weibull_cdf(hours, params.beta, params.eta)
    rel = weibull_reliability(hours, params.beta, params.eta)
    pdf = weibull_pdf(hours, params.beta, params.eta)

    curve = [
        CurvePoint(
            hours=float(h),
            failure_probability=float(f),
            reliability=float(r),
            failure_rate=float(d),
        )
        for h, f, r, d in zip(hours, cdf, rel, pdf)
    ]
    return FailureCurve(points=curve, parameters=params)


# ═══════════════════════════════════════════════════════════════════════════
# Optimal replacement interval
# ═══════════════════════════════════════════════════════════════════════════

def optimal_replacement_interval(
    mean_life: float,
    shape: float,
    planned_cost: float,
    unplanned_multiplier: float = 3.0,
    steps: int = MIN_SEARCH_STEPS,
    scale: float | None = None,
) -> ReplacementIntervalResult:
    """Age-replacement interval minimising expected cost per operating hour.

    Candidates are k × mean/steps for k = 1 … 1.5·steps.  At age t:

      expected cost   = C·R(t) + m·C·F(t)
      expected length ≈ t·R(t) + (t/2)·F(t)

    The t/2 failure-branch length is a shortcut, not the renewal-reward
    integral ∫R, so the result is a heuristic.
    """
    if steps < MIN_SEARCH_STEPS:
        raise ReliabilityDomainError(f"steps must be at least {MIN_SEARCH_STEPS}, got {steps}")
    if planned_cost < 0 or unplanned_multiplier < 0:
        raise ValueError("planned cost and unplanned multiplier must be non-negative")

    params = weibull_parameters(mean_life, shape, scale)

    step = mean_life / steps
    t = step * np.arange(1, int(1.5 * steps) + 1, dtype=np.float64)
    pf = weibull_cdf(t, params.beta, params.eta)
    ps = 1.0 - pf

    expected_cost = planned_cost * ps + unplanned_multiplier * planned_cost * pf
    expected_length = t * ps + (t / 2.0) * pf
    cost_rate = expected_cost / expected_length

    best = int(np.argmin(cost_rate))
    best_interval = float(t[best])

    return ReplacementIntervalResult(
        optimal_interval_hours=best_interval,
        cost_per_hour=float(cost_rate[best]),
        pct_of_oem_life=best_interval / mean_life * 100.0,
        steps=steps,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Fleet replacement schedule (per-year view)
# ═══════════════════════════════════════════════════════════════════════════

def replacement_schedule(
    components: list[ComponentLifecycle],
    total_units: int,
    avg_annual_hours: float,
    period_years: int,
    labor_rate: float,
    price_list: PriceList | None = None,
) -> list[ReplacementYear]:
    """Which components fall due in each year of the period.

    A component is due in year y when floor(y·H / life) exceeds
    floor((y−1)·H / life), H being the average annual hours.  More than one
    increment in a year (life shorter than a year of running) counts as that
    many events.
    """
    for comp in components:
        _require_positive(f"expected life of {comp.component_name}", comp.expected_life_hours)

    schedule: list[ReplacementYear] = []
    for year in range(1, period_years + 1):
        hours_at_year = year * avg_annual_hours
        due: list[DueReplacement] = []

        for comp in components:
            life = comp.expected_life_hours
            replacement_number = math.floor(hours_at_year / life)
            previous = math.floor((year - 1) * avg_annual_hours / life)
            events = replacement_number - previous
            if events <= 0:
                continue

            part_price = price_list.unit_price(comp.catalog_key) if price_list else None
            cost_per_unit = (part_price or 0.0) + comp.replacement_labor_hours * labor_rate
            due.append(DueReplacement(
                component_name=comp.component_name,
                category=comp.category,
                replacement_number=replacement_number,
                events=events,
                units_affected=total_units,
                cost_per_unit=round(cost_per_unit, 2),
                total_cost=round(cost_per_unit * events * total_units, 2),
                part_priced=part_price is not None,
            ))

        schedule.append(ReplacementYear(
            year=year,
            cumulative_hours=hours_at_year,
            replacements=due,
            total_cost=round(sum(d.total_cost for d in due), 2),
        ))

    return schedule
