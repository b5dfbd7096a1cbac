from dataclasses import dataclass
from typing import Dict, Literal, Optional, get_args


Gender = Literal["male", "female"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]

GENDERS = get_args(Gender)
ACTIVITY_LEVELS = get_args(ActivityLevel)


@dataclass(frozen=True)
class WaterIntakeInput:
    weight: float              # kg
    height: float              # cm
    age: int                   # years
    gender: Gender
    activity_level: ActivityLevel


@dataclass(frozen=True)
class WaterIntakeResult:
    bmr: int                   # kcal/day
    tdee: int                  # kcal/day

    baseline_water_intake: int     # ml/day, 1.0 ml/kcal
    recommended_water_intake: int  # ml/day, 1.5 ml/kcal

    liters_baseline: float
    liters_recommended: float


@dataclass
class FormState:
    """
    Per-request state of the calculator page.
    values holds the raw submitted strings so the form can be re-rendered as typed.
    """

    values: Dict[str, str]
    touched: bool = False
    error: Optional[str] = None
    result: Optional[WaterIntakeResult] = None

    @classmethod
    def blank(cls) -> "FormState":
        return cls(
            values={
                "weight": "",
                "height": "",
                "age": "",
                "gender": "male",
                "activity_level": "sedentary",
            }
        )
