import inspect
import json
from datetime import date
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_planner, get_weight_log
from app.routes import progress
from app.services.planner import PlanGenerator
from app.utils.errors import ConfigurationError, DesiFitException, ValidationRejection

PROFILE_PAYLOAD = {
    "age": 25,
    "gender": "Male",
    "height": 175,
    "weight": 70,
    "goal": "Muscle Gain",
    "experience": "Intermediate",
    "location": "Gym",
    "timeAvailable": "45 min",
    "injuries": "",
}

GENERIC_FAILURE = (
    "Something went wrong while generating your plan. "
    "Please check your connection and try again."
)


@pytest.fixture()
def provider(make_provider, sample_plan):
    return make_provider(text=json.dumps(sample_plan))


@pytest.fixture()
def client(weight_log, provider):
    from main import app

    app.dependency_overrides[get_weight_log] = lambda: weight_log
    app.dependency_overrides[get_planner] = lambda: PlanGenerator(provider)

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.pop(get_weight_log, None)
    app.dependency_overrides.pop(get_planner, None)


def test_health(client: TestClient):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_generate_plan(client: TestClient, sample_plan):
    r = client.post("/plan/generate", json=PROFILE_PAYLOAD)
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["intro"] == sample_plan["intro"]
    assert data["diet"]["proteinTarget"] == "140g"
    exercise = data["schedule"][0]["exercises"][0]
    assert exercise["youtubeQuery"] == "Bench Press correct form"
    assert exercise["postureTips"]


def test_generate_plan_rejects_invalid_profile(client: TestClient, provider):
    r = client.post("/plan/generate", json={**PROFILE_PAYLOAD, "experience": "Expert"})
    assert r.status_code == 422
    assert provider.calls == []


def test_generate_plan_provider_failure_is_generic(client: TestClient, provider):
    provider.text = '{"intro": "half a plan"}'
    r = client.post("/plan/generate", json=PROFILE_PAYLOAD)
    assert r.status_code == 502
    assert r.json() == {"detail": GENERIC_FAILURE}


def test_generate_plan_missing_key_is_generic(client: TestClient, provider):
    provider.error = ConfigurationError()
    r = client.post("/plan/generate", json=PROFILE_PAYLOAD)
    assert r.status_code == 503
    assert r.json() == {"detail": GENERIC_FAILURE}


def test_progress_empty(client: TestClient):
    r = client.get("/progress/weight")
    assert r.status_code == 200
    assert r.json() == {
        "entries": [],
        "chart": None,
        "insight": "Start logging your weight weekly to see your progress graph!",
        "placeholder": "No data yet. Log your weight to start tracking!",
    }


def test_log_weight_flow(client: TestClient):
    r = client.post("/progress/weight", json={"weight": 80, "date": "2025-01-01"})
    assert r.status_code == 200
    assert r.json()["accepted"] is True
    assert r.json()["placeholder"] == "80 kg\nFirst entry logged. Keep going!"
    assert r.json()["chart"] is None

    r = client.post("/progress/weight", json={"weight": 78, "date": "2025-01-08"})
    data = r.json()
    assert data["entries"] == [
        {"date": "2025-01-01", "weight": 80.0},
        {"date": "2025-01-08", "weight": 78.0},
    ]
    assert data["insight"] == "Great job! You've lost 2.0kg since starting."
    assert data["placeholder"] is None
    assert data["chart"]["polyline"] == "40,96.6667 760,153.333"
    assert [m["label"] for m in data["chart"]["markers"]] == ["01-01", "01-08"]

    r = client.get("/progress/weight/history")
    assert [e["date"] for e in r.json()] == ["2025-01-08", "2025-01-01"]


def test_log_weight_defaults_to_today(client: TestClient):
    r = client.post("/progress/weight", json={"weight": 72.5})
    assert r.json()["entries"] == [{"date": date.today().isoformat(), "weight": 72.5}]


def test_out_of_range_weight_is_silent_noop(client: TestClient):
    client.post("/progress/weight", json={"weight": 70, "date": "2025-01-01"})

    for weight in (0, -5, 501):
        r = client.post("/progress/weight", json={"weight": weight, "date": "2025-01-02"})
        assert r.status_code == 200
        assert r.json()["accepted"] is False
        assert r.json()["entries"] == [{"date": "2025-01-01", "weight": 70.0}]


def test_delete_weight(client: TestClient):
    client.post("/progress/weight", json={"weight": 70, "date": "2025-01-01"})

    r = client.delete("/progress/weight/2025-01-01")
    assert r.status_code == 200
    assert r.json()["deleted"] is True
    assert r.json()["entries"] == []

    r = client.delete("/progress/weight/2025-01-01")
    assert r.json()["deleted"] is False


@pytest.mark.parametrize("handler", [
    progress.get_progress,
    progress.log_weight,
    progress.delete_weight,
    progress.get_history,
])
def test_progress_handlers_run_off_event_loop(handler):
    # blocking store I/O must go through the threadpool
    assert not inspect.iscoroutinefunction(handler)


@pytest.mark.asyncio
@pytest.mark.parametrize("exc,status,detail", [
    (ValidationRejection(), 422, "Weight out of range"),
    (DesiFitException("Storage unavailable", status_code=500), 500, "Storage unavailable"),
])
async def test_non_plan_errors_keep_their_message(exc, status, detail):
    from main import desifit_exception_handler

    request = SimpleNamespace(url=SimpleNamespace(path="/progress/weight"))
    response = await desifit_exception_handler(request, exc)

    assert response.status_code == status
    assert json.loads(response.body) == {"detail": detail}
