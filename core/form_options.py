from typing import Dict, List, Literal, get_args

DiabetesType = Literal[
    "Type 1 Diabetes (T1D)",
    "Type 2 Diabetes (T2D)",
    "Gestational Diabetes",
    "Prediabetes",
    "Monogenic Diabetes",
    "Secondary Diabetes",
    "Other / Not Sure",
]

SelfManagementFeature = Literal[
    "Blood glucose tracker",
    "Medication tracker/reminder",
    "Carb counting tool",
    "Insulin dosage calculator",
    "A1C trend monitoring",
    "Physical activity tracker",
    "Food diary / nutrition logging",
    "Sleep tracker",
    "Weight tracker",
    "Mood/emotion tracker",
]

AiFeature = Literal[
    "Personalized coaching",
    "Chatbot for patient Q&A",
    "Predictive alerts",
    "Automated insights",
    "Symptom checker",
    "Digital twin or simulation modeling",
    "Behavior nudges",
]

ClinicalFeature = Literal[
    "Data sharing with provider",
    "Virtual visits / telehealth",
    "Remote patient monitoring",
    "Clinical decision support",
    "Smart insulin pen or CGM integration",
    "Care team messaging",
]

PeerFeature = Literal[
    "Community forum",
    "Peer support / mentorship",
    "Goal sharing",
    "Rewards or gamification",
    "Family/caregiver access",
]

DIABETES_TYPES: List[str] = list(get_args(DiabetesType))
SELF_MANAGEMENT_FEATURES: List[str] = list(get_args(SelfManagementFeature))
AI_FEATURES: List[str] = list(get_args(AiFeature))
CLINICAL_FEATURES: List[str] = list(get_args(ClinicalFeature))
PEER_FEATURES: List[str] = list(get_args(PeerFeature))


def form_options() -> Dict[str, List[str]]:
    """
    Option sets served to the intake form, keyed the way the client expects.
    """
    return {
        "diabetesTypes": list(DIABETES_TYPES),
        "selfManagementFeatures": list(SELF_MANAGEMENT_FEATURES),
        "aiFeatures": list(AI_FEATURES),
        "clinicalFeatures": list(CLINICAL_FEATURES),
        "peerFeatures": list(PEER_FEATURES),
    }
