from __future__ import annotations
import pytest
from fastapi.testclient import TestClient
from crema_backend.app.main import app
from crema_backend.app.models.shot import ShotSummary

# --- API client ---
@pytest.fixture(scope="session")
def client():
    return TestClient(app)

# --- Shot builder: 18 g in, 36 g / 30 s target; override per test ---
@pytest.fixture
def make_shot():
    def _make(**overrides) -> ShotSummary:
        base = {
            "dose_g": 18,
            "target_yield_g": 36,
            "actual_yield_g": 36,
            "target_time_s": 30,
            "actual_time_s": 30,
            "has_scale": True,
        }
        base.update(overrides)
        return ShotSummary(**base)
    return _make

# --- Same recipe in the camelCase shape the web UI posts ---
@pytest.fixture
def shot_json():
    return {
        "dose_g": 18,
        "targetYield_g": 36,
        "actualYield_g": 36.5,
        "targetTime_s": 30,
        "actualTime_s": 29,
        "hasScale": True,
    }
