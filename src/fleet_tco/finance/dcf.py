"""Time value of money — inflation and discounting on an annual grid.

Costs are projected in whole years.  Conventions used throughout:

  inflation multiplier for recurring costs in year y  = (1 + i)^(y − 1)
  (year 1 is priced at today's rates)

  discount factor for a cost booked in year y         = 1 / (1 + r)^y
  (end-of-year convention)

  NPV = Σ cost_y × discount_factor(r, y)
"""

from __future__ import annotations


def inflation_multiplier(annual_rate: float, year: int) -> float:
    """Price level of year ``year`` relative to year 1."""
    return (1 + annual_rate) ** (year - 1)


def escalate(amount: float, annual_rate: float, years: int) -> float:
    """Grow ``amount`` at ``annual_rate`` for ``years`` full years."""
    return amount * (1 + annual_rate) ** years


def discount_factor(annual_rate: float, year: int) -> float:
    """Present-value factor of an amount booked at the end of ``year``."""
    return 1 / (1 + annual_rate) ** year


def compute_npv(annual_costs: list[float], annual_rate: float) -> float:
    """Net present value of a yearly cost stream.

    Parameters
    ----------
    annual_costs : list[float]
        Cost per year. Index 0 = year 1.
    annual_rate : float
        Annual discount rate (e.g. 0.05 for 5%).
    """
    if not annual_costs:
        return 0.0

    npv = 0.0
    for year, cost in enumerate(annual_costs, start=1):
        npv += cost * discount_factor(annual_rate, year)
    return npv
