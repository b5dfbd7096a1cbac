import logging
from typing import Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from .calculator import WaterIntakeCalculator
from .models import ActivityLevel, FormState, Gender, WaterIntakeInput


logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "weight": "Weight",
    "height": "Height",
    "age": "Age",
}

CHOICE_MESSAGES = {
    "gender": "Please choose a valid gender.",
    "activity_level": "Please choose a valid activity level.",
}


class InvalidInputError(ValueError):
    """Raised when submitted form values cannot be passed to the calculator."""


class WaterIntakeForm(BaseModel):
    weight: float = Field(..., gt=0, allow_inf_nan=False, description="Weight in kilograms.")
    height: float = Field(..., gt=0, allow_inf_nan=False, description="Height in centimeters.")
    age: float = Field(..., gt=0, allow_inf_nan=False, description="Age in whole years.")
    gender: Gender
    activity_level: ActivityLevel

    @field_validator("age")
    @classmethod
    def whole_years(cls, value: float) -> int:
        if not value.is_integer():
            raise ValueError("Age must be a whole number of years.")
        return int(value)


def _message(error: dict) -> str:
    field = error["loc"][0]
    if field in CHOICE_MESSAGES:
        return CHOICE_MESSAGES[field]

    label = FIELD_LABELS[field]
    kind = error["type"]
    if kind == "missing":
        return f"{label} is required."
    if kind in ("float_parsing", "float_type"):
        return f"{label} must be a number."
    if kind == "value_error":
        return str(error["ctx"]["error"])
    return f"{label} must be greater than zero."


def parse_form(raw: Mapping[str, str]) -> WaterIntakeInput:
    """
    Turn raw form strings into a calculator input.
    Blank fields count as missing. Weight, height and age must be strictly positive.
    """
    cleaned = {}
    for key, value in raw.items():
        text = str(value).strip()
        if text:
            cleaned[key] = text

    try:
        form = WaterIntakeForm.model_validate(cleaned)
    except ValidationError as e:
        raise InvalidInputError(_message(e.errors()[0])) from None

    return WaterIntakeInput(
        weight=form.weight,
        height=form.height,
        age=int(form.age),
        gender=form.gender,
        activity_level=form.activity_level,
    )


def handle_submission(
    raw: Mapping[str, str], calculator: WaterIntakeCalculator
) -> FormState:
    state = FormState.blank()
    state.values.update({k: str(v) for k, v in raw.items() if k in state.values})
    state.touched = True

    try:
        data = parse_form(raw)
    except InvalidInputError as e:
        logger.info("Rejected submission: %s", e)
        state.error = str(e)
        return state

    state.result = calculator.calculate(data)
    return state
