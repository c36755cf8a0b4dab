# tests/test_roast_and_diagnostics.py
# Purpose:
# Roast tolerance table + the fallback-only advanced diagnostics rules.
import pytest

from crema_backend.app.models.shot import AdvancedShotMetrics, RoastLevel, ShotSummary
from crema_backend.app.services.shot_feedback.diagnostics import (
    CHANNELING_DETAIL,
    CHOKING_DETAIL,
    EARLY_DRIP_DETAIL,
    build_advanced_detail,
)
from crema_backend.app.services.shot_feedback.roast import DEFAULT_PARAMS, roast_aware_params

@pytest.mark.parametrize("roast,tol,needle", [
    (RoastLevel.LIGHT, 0.15, "Light roasts"),
    (RoastLevel.MEDIUM, 0.10, "Medium roasts"),
    (RoastLevel.DARK, 0.08, "Dark roasts"),
])
def test_roast_table(roast, tol, needle):
    p = roast_aware_params(roast)
    assert p.tol_time == p.tol_ratio == tol
    assert needle in p.roast_note

def test_no_roast_uses_defaults_without_note():
    p = roast_aware_params(None)
    assert p == DEFAULT_PARAMS
    assert (p.tol_time, p.tol_ratio, p.roast_note) == (0.10, 0.10, None)


def _shot(**kw):
    base = {"dose_g": 18, "actual_yield_g": 36, "target_time_s": 30, "actual_time_s": 40, "has_scale": True}
    base.update(kw)
    return ShotSummary(**base)

def test_no_advanced_metrics_means_no_detail():
    assert build_advanced_detail(None, _shot(), 0.10) is None
    assert build_advanced_detail(AdvancedShotMetrics(), _shot(), 0.10) is None

def test_choking_needs_high_pressure_and_long_shot():
    assert build_advanced_detail(AdvancedShotMetrics(peak_pressure_bar=11), _shot(), 0.10) == CHOKING_DETAIL
    # exactly 10 bar is not "high"
    assert build_advanced_detail(AdvancedShotMetrics(peak_pressure_bar=10), _shot(), 0.10) is None
    # 33 s is not past 30 * 1.1
    assert build_advanced_detail(AdvancedShotMetrics(peak_pressure_bar=11), _shot(actual_time_s=33), 0.10) is None
    # no target time -> rule cannot fire
    assert build_advanced_detail(AdvancedShotMetrics(peak_pressure_bar=11), _shot(target_time_s=None), 0.10) is None

def test_choking_respects_tolerance_passed_in():
    adv = AdvancedShotMetrics(peak_pressure_bar=12)
    assert build_advanced_detail(adv, _shot(actual_time_s=34), 0.10) == CHOKING_DETAIL
    assert build_advanced_detail(adv, _shot(actual_time_s=34), 0.15) is None

def test_early_first_drip():
    adv = AdvancedShotMetrics(time_to_first_drip_s=2.5)
    assert build_advanced_detail(adv, _shot(), 0.10) == EARLY_DRIP_DETAIL
    assert build_advanced_detail(AdvancedShotMetrics(time_to_first_drip_s=3), _shot(), 0.10) is None
    assert build_advanced_detail(adv, _shot(target_time_s=None), 0.10) is None

def test_channeling_is_last_resort():
    adv = AdvancedShotMetrics(suspected_channeling=True, time_to_first_drip_s=1)
    assert build_advanced_detail(adv, _shot(), 0.10) == EARLY_DRIP_DETAIL
    assert build_advanced_detail(AdvancedShotMetrics(suspected_channeling=True), _shot(), 0.10) == CHANNELING_DETAIL
    assert build_advanced_detail(AdvancedShotMetrics(suspected_channeling=False), _shot(), 0.10) is None
