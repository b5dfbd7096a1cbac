import logging

import uvicorn
from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from . import config
from .calculator import WaterIntakeCalculator
from .forms import handle_submission
from .models import FormState


logger = logging.getLogger(__name__)

app = FastAPI(title="Water Intake Calculator")
templates = Jinja2Templates(directory=config.TEMPLATES_DIR)

app.mount("/static", StaticFiles(directory=config.STATIC_DIR), name="static")

calculator = WaterIntakeCalculator()

ACTIVITY_LABELS = {
    "sedentary": "Sedentary (little or no exercise)",
    "light": "Light (exercise 1-3 days/week)",
    "moderate": "Moderate (exercise 3-5 days/week)",
    "active": "Active (exercise 6-7 days/week)",
    "very_active": "Very Active (intense exercise daily)",
}


def render_page(request: Request, state: FormState, status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "form.html",
        {
            "form": state,
            "activity_labels": ACTIVITY_LABELS,
        },
        status_code=status_code,
    )


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return render_page(request, FormState.blank())


@app.post("/", response_class=HTMLResponse)
async def calculate_view(
    request: Request,
    weight: str = Form(""),
    height: str = Form(""),
    age: str = Form(""),
    gender: str = Form(""),
    activity_level: str = Form(""),
):
    state = handle_submission(
        {
            "weight": weight,
            "height": height,
            "age": age,
            "gender": gender,
            "activity_level": activity_level,
        },
        calculator,
    )
    if state.error:
        return render_page(request, state, status_code=400)
    return render_page(request, state)


def run() -> None:
    config.configure_logging()
    logger.info("Water intake calculator running on http://%s:%s", config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=(config.log_level() or "INFO").lower())


if __name__ == "__main__":
    run()
