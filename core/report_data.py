from models import FailureCase, PatientTheme, SentimentTheme

# Sample research data shown in every report. It is not tied to the
# submitted startup.

PATIENT_THEMES = [
    PatientTheme(
        theme="Trust & Data Privacy",
        quote="I don't like sharing my health data with apps.",
        insight="Patients are concerned about how their data is used and need transparency.",
    ),
    PatientTheme(
        theme="App Navigation",
        quote="It took me too long to find what I needed.",
        insight="Poor user interface can reduce engagement.",
    ),
    PatientTheme(
        theme="Alert Fatigue",
        quote="If it notifies me for everything, I'll just turn it off.",
        insight="Selective, meaningful notifications increase long-term engagement.",
    ),
]

FAILURE_CASES = [
    FailureCase(
        startup="HealthLoop",
        year=2021,
        sector="Patient Monitoring",
        reason="Low user retention",
        theme="Adoption",
    ),
    FailureCase(
        startup="VidaWell",
        year=2022,
        sector="Chronic Care",
        reason="Complex onboarding",
        theme="UX",
    ),
    FailureCase(
        startup="DiaBuddy",
        year=2020,
        sector="Diabetes Coaching",
        reason="Poor provider integration",
        theme="Clinical Workflow",
    ),
]

SENTIMENT_THEMES = [
    SentimentTheme(
        theme="App Fatigue",
        quote="I already have 3 health apps—I'm not using another.",
        implication="Consider integrating with existing systems to reduce app overload.",
    ),
    SentimentTheme(
        theme="Accessibility",
        quote="It was hard to use on my phone.",
        implication="Optimize UI for low-tech and mobile users.",
    ),
    SentimentTheme(
        theme="Data Interpretation",
        quote="I have all this data but don't know what it means.",
        implication="Provide actionable insights, not just data collection.",
    ),
]

DESIGN_RECOMMENDATIONS = [
    "Involve patients early in prototyping and usability testing",
    "Ensure onboarding is intuitive and designed for digital literacy gaps",
    "Address transparency and consent upfront in app flow",
    "Minimize cognitive load—start with core features and build iteratively",
    "Design for integration with existing health apps and devices",
    "Focus on actionable insights rather than just data collection",
    "Create clear pathways for sharing data with healthcare providers",
]

NEXT_STEPS_RESOURCES = [
    "HCD Guide: Diabetes Management Applications",
    "COMPASS Personas (in development)",
    "Interview Protocol (available on request)",
    "Diabetes App UX Best Practices",
]
