"""Feasibility and usefulness scoring rules."""

from __future__ import annotations

import itertools

from conftest import make_submission
from core.form_options import (
    AI_FEATURES,
    CLINICAL_FEATURES,
    PEER_FEATURES,
    SELF_MANAGEMENT_FEATURES,
)
from core.scoring import (
    COMPLEX_AI_FEATURE,
    clamp_score,
    explain_scores,
    feasibility_score,
    usefulness_score,
)


class TestFeasibility:
    def test_base_submission_scores_three(self):
        assert feasibility_score(make_submission()) == 3

    def test_many_self_management_and_clinical_features_reach_five(self):
        data = make_submission(
            self_management_features=SELF_MANAGEMENT_FEATURES[:4],
            clinical_features=CLINICAL_FEATURES[:3],
        )
        assert feasibility_score(data) == 5

    def test_digital_twin_costs_a_point(self):
        data = make_submission(ai_features=[COMPLEX_AI_FEATURE])
        assert feasibility_score(data) == 2

    def test_thresholds_are_strict(self):
        data = make_submission(
            self_management_features=SELF_MANAGEMENT_FEATURES[:3],
            clinical_features=CLINICAL_FEATURES[:2],
        )
        assert feasibility_score(data) == 3

    def test_other_ai_features_do_not_penalize(self):
        data = make_submission(ai_features=["Automated insights", "Predictive alerts"])
        assert feasibility_score(data) == 3


class TestUsefulness:
    def test_base_submission_scores_three(self):
        assert usefulness_score(make_submission()) == 3

    def test_peer_features_need_more_than_one(self):
        assert usefulness_score(make_submission(peer_features=PEER_FEATURES[:1])) == 3
        assert usefulness_score(make_submission(peer_features=PEER_FEATURES[:2])) == 4

    def test_combined_categories_bonus(self):
        data = make_submission(
            self_management_features=SELF_MANAGEMENT_FEATURES[:1],
            ai_features=AI_FEATURES[:1],
            clinical_features=CLINICAL_FEATURES[:1],
        )
        assert usefulness_score(data) == 4

    def test_combined_bonus_requires_all_three(self):
        data = make_submission(
            self_management_features=SELF_MANAGEMENT_FEATURES[:1],
            ai_features=AI_FEATURES[:1],
        )
        assert usefulness_score(data) == 3

    def test_capped_at_five(self):
        data = make_submission(
            self_management_features=SELF_MANAGEMENT_FEATURES[:4],
            ai_features=AI_FEATURES[:1],
            clinical_features=CLINICAL_FEATURES[:1],
            peer_features=PEER_FEATURES[:2],
        )
        assert usefulness_score(data) == 5


def test_clamp_score_bounds():
    assert clamp_score(-4) == 1
    assert clamp_score(0) == 1
    assert clamp_score(3) == 3
    assert clamp_score(9) == 5


def test_scores_always_within_range():
    ai_choices = [[], AI_FEATURES[:1], [COMPLEX_AI_FEATURE], list(AI_FEATURES)]
    for sm, ai, clinical, peer in itertools.product(
        range(len(SELF_MANAGEMENT_FEATURES) + 1),
        ai_choices,
        range(len(CLINICAL_FEATURES) + 1),
        range(len(PEER_FEATURES) + 1),
    ):
        data = make_submission(
            self_management_features=SELF_MANAGEMENT_FEATURES[:sm],
            ai_features=ai,
            clinical_features=CLINICAL_FEATURES[:clinical],
            peer_features=PEER_FEATURES[:peer],
        )
        assert 1 <= feasibility_score(data) <= 5
        assert 1 <= usefulness_score(data) <= 5


def test_explain_scores_lists_fired_rules():
    data = make_submission(ai_features=[COMPLEX_AI_FEATURE])
    text = explain_scores(data)
    assert "Feasibility 2/5" in text
    assert f"-1 '{COMPLEX_AI_FEATURE}' selected" in text
    assert "Usefulness 3/5 (base 3)" in text
