from fastapi.testclient import TestClient

from water_intake.main import app


client = TestClient(app)


def test_home_renders_empty_form():
    response = client.get("/")
    assert response.status_code == 200
    assert "Enter your details" in response.text
    assert "per day" not in response.text


def test_calculate_shows_result():
    response = client.post(
        "/",
        data={
            "weight": "70",
            "height": "175",
            "age": "30",
            "gender": "male",
            "activity_level": "sedentary",
        },
    )
    assert response.status_code == 200
    assert "3.0L per day" in response.text
    assert "Baseline: 2.0L" in response.text
    assert "1979 kcal/day" in response.text


def test_calculate_female_moderate():
    response = client.post(
        "/",
        data={
            "weight": "60",
            "height": "165",
            "age": "25",
            "gender": "female",
            "activity_level": "moderate",
        },
    )
    assert response.status_code == 200
    assert "3.1L per day" in response.text
    assert "Baseline: 2.1L" in response.text
    assert "2085 kcal/day" in response.text


def test_zero_weight_shows_validation_message():
    response = client.post(
        "/",
        data={"weight": "0", "height": "175", "age": "30", "gender": "male", "activity_level": "light"},
    )
    assert response.status_code == 400
    assert "Weight must be greater than zero." in response.text
    assert "per day" not in response.text


def test_missing_fields_show_validation_message():
    response = client.post("/", data={"height": "175"})
    assert response.status_code == 400
    assert "Weight is required." in response.text


def test_unknown_activity_level_is_rejected():
    response = client.post(
        "/",
        data={"weight": "70", "height": "175", "age": "30", "gender": "male", "activity_level": "couch"},
    )
    assert response.status_code == 400
    assert "valid activity level" in response.text


def test_static_assets_are_served():
    response = client.get("/static/style.css")
    assert response.status_code == 200
    assert "text/css" in response.headers["content-type"]


def test_missing_gender_is_rejected():
    response = client.post("/", data={"weight": "70", "height": "175", "age": "30", "activity_level": "light"})
    assert response.status_code == 400
    assert "Please choose a valid gender." in response.text
    assert "per day" not in response.text


def test_missing_activity_level_is_rejected():
    response = client.post("/", data={"weight": "70", "height": "175", "age": "30", "gender": "female"})
    assert response.status_code == 400
    assert "Please choose a valid activity level." in response.text


def test_health_route_is_not_served():
    assert client.get("/health").status_code == 404
