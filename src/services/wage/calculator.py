"""Employment Act wage and overtime arithmetic."""

import math
from dataclasses import dataclass, field

from src.config.constants import (
    OVERTIME_CITATION,
    OVERTIME_MULTIPLIER,
    WORKING_DAYS_PER_MONTH,
    WORKING_HOURS_PER_DAY,
)


@dataclass
class WageCalculation:
    """Step-by-step wage breakdown."""

    steps: list[str] = field(default_factory=list)
    citation: str = OVERTIME_CITATION
    total_overtime_pay: float | None = None  # unrounded; None without overtime

    def to_dict(self) -> dict:
        return {
            "steps": list(self.steps),
            "citation": self.citation,
            "totalOvertimePay": self.total_overtime_pay,
        }


def _format_hours(hours: float) -> str:
    return str(int(hours)) if float(hours).is_integer() else str(hours)


def calculate_wage(monthly_salary: float, overtime_hours: float = 0) -> WageCalculation:
    """
    Derive daily, hourly and overtime pay from a monthly salary.

    Daily wage is the monthly salary over 26 working days, hourly wage is
    daily over 8 hours, and overtime is paid at 1.5 times the hourly rate.

    Args:
        monthly_salary: Monthly salary in RM, must be positive
        overtime_hours: Overtime hours worked, must be non-negative

    Returns:
        WageCalculation with display steps rounded to 2 decimal places

    Raises:
        ValueError: If an input is out of range or not finite
    """
    if not math.isfinite(monthly_salary) or monthly_salary <= 0:
        raise ValueError(f"monthly_salary must be positive, got {monthly_salary}")
    if not math.isfinite(overtime_hours) or overtime_hours < 0:
        raise ValueError(f"overtime_hours must be non-negative, got {overtime_hours}")

    daily = monthly_salary / WORKING_DAYS_PER_MONTH
    hourly = daily / WORKING_HOURS_PER_DAY

    result = WageCalculation()
    result.steps.append(
        f"Daily wage = RM {monthly_salary:.2f} ÷ {WORKING_DAYS_PER_MONTH} = RM {daily:.2f}"
    )
    result.steps.append(
        f"Hourly wage = RM {daily:.2f} ÷ {WORKING_HOURS_PER_DAY} = RM {hourly:.2f}"
    )

    if overtime_hours > 0:
        rate = hourly * OVERTIME_MULTIPLIER
        total = rate * overtime_hours
        result.steps.append(
            f"Overtime rate = RM {hourly:.2f} × {OVERTIME_MULTIPLIER} = RM {rate:.2f}"
        )
        result.steps.append(
            f"Total overtime pay = RM {rate:.2f} × {_format_hours(overtime_hours)} hours = RM {total:.2f}"
        )
        result.total_overtime_pay = total

    return result
