# core/scoring.py
from typing import List

from models import StartupSubmission

BASE_SCORE = 3
MIN_SCORE = 1
MAX_SCORE = 5

# Feature tag that signals heavy engineering effort
COMPLEX_AI_FEATURE = "Digital twin or simulation modeling"


def clamp_score(value: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, int(value)))


def _feasibility_rules(data: StartupSubmission) -> List[tuple[str, int]]:
    rules = []
    if len(data.self_management_features) > 3:
        rules.append(("more than 3 self-management features", 1))
    if len(data.clinical_features) > 2:
        rules.append(("more than 2 clinical features", 1))
    if COMPLEX_AI_FEATURE in data.ai_features:
        rules.append((f"'{COMPLEX_AI_FEATURE}' selected", -1))
    return rules


def _usefulness_rules(data: StartupSubmission) -> List[tuple[str, int]]:
    rules = []
    if len(data.self_management_features) > 2:
        rules.append(("more than 2 self-management features", 1))
    if len(data.peer_features) > 1:
        rules.append(("more than 1 peer feature", 1))
    if data.self_management_features and data.ai_features and data.clinical_features:
        rules.append(("self-management, AI and clinical features combined", 1))
    return rules


def feasibility_score(data: StartupSubmission) -> int:
    """
    Score de faisabilité (1-5) basé sur l'étendue des fonctionnalités choisies.
    """
    return clamp_score(BASE_SCORE + sum(delta for _, delta in _feasibility_rules(data)))


def usefulness_score(data: StartupSubmission) -> int:
    """
    Score d'utilité pour le patient (1-5).
    """
    return clamp_score(BASE_SCORE + sum(delta for _, delta in _usefulness_rules(data)))


def explain_scores(data: StartupSubmission) -> str:
    """
    Retourne une explication lisible du calcul, utile pour les logs ou le PDF.
    """

    def _describe(label: str, rules: List[tuple[str, int]], score: int) -> str:
        if not rules:
            return f"{label} {score}/5 (base {BASE_SCORE})"
        parts = [f"{delta:+d} {reason}" for reason, delta in rules]
        return f"{label} {score}/5 (base {BASE_SCORE}, " + ", ".join(parts) + ")"

    return " | ".join(
        [
            _describe("Feasibility", _feasibility_rules(data), feasibility_score(data)),
            _describe("Usefulness", _usefulness_rules(data), usefulness_score(data)),
        ]
    )
