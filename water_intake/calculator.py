import math
from decimal import ROUND_HALF_UP, Decimal

from .models import WaterIntakeInput, WaterIntakeResult


PAL_MULTIPLIERS = {
    "sedentary": 1.2,     # little or no exercise
    "light": 1.375,       # exercise 1-3 days/week
    "moderate": 1.55,     # exercise 3-5 days/week
    "active": 1.725,      # exercise 6-7 days/week
    "very_active": 1.9,   # intense exercise daily or physical job
}

BASELINE_ML_PER_KCAL = 1.0
RECOMMENDED_ML_PER_KCAL = 1.5


def round_half_away(value: float, ndigits: int = 0) -> float:
    """
    Round to ndigits decimals, halves going away from zero (2.5 -> 3, -2.5 -> -3).
    The builtin round() rounds halves to even, which is not what we display.
    """
    if not math.isfinite(value):
        return value
    step = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(step, rounding=ROUND_HALF_UP))


def calculate_bmr(weight: float, height: float, age: float, gender: str) -> float:
    """Mifflin-St Jeor, unrounded."""
    if gender == "male":
        return 10 * weight + 6.25 * height - 5 * age + 5
    return 10 * weight + 6.25 * height - 5 * age - 161


def calculate_tdee(bmr: float, activity_level: str) -> float:
    return bmr * PAL_MULTIPLIERS[activity_level]


def calculate_water_intake(data: WaterIntakeInput) -> WaterIntakeResult:
    """
    BMR -> TDEE -> daily water volume.

    Water volumes are derived from the raw TDEE, not the rounded one shown to
    the user. Inputs are not validated here: see forms.parse_form.
    """
    bmr = calculate_bmr(data.weight, data.height, data.age, data.gender)
    tdee = calculate_tdee(bmr, data.activity_level)

    baseline_ml = tdee * BASELINE_ML_PER_KCAL
    recommended_ml = tdee * RECOMMENDED_ML_PER_KCAL

    return WaterIntakeResult(
        bmr=int(round_half_away(bmr)),
        tdee=int(round_half_away(tdee)),
        baseline_water_intake=int(round_half_away(baseline_ml)),
        recommended_water_intake=int(round_half_away(recommended_ml)),
        liters_baseline=round_half_away(baseline_ml / 1000, 1),
        liters_recommended=round_half_away(recommended_ml / 1000, 1),
    )


class WaterIntakeCalculator:
    """
    Object seam used by the web layer. Stateless, safe to share between requests.
    """

    def calculate(self, data: WaterIntakeInput) -> WaterIntakeResult:
        return calculate_water_intake(data)
