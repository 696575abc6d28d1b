"""
Condition matcher: ranks named conditions by how many of their
keywords show up in the reported symptom text.
"""

from typing import List, NamedTuple

DEFAULT_CATEGORY = "General"
MAX_POSSIBLE_CONDITIONS = 3


class Condition(NamedTuple):
    name: str
    category: str
    keywords: tuple[str, ...]


class ConditionMatch(NamedTuple):
    condition: Condition
    hits: int
    coverage: float


# Declaration order is the final tiebreak, keep the more serious entries first.
CONDITION_TABLE: tuple[Condition, ...] = (
    Condition(
        "Acute Coronary Syndrome", "Cardiovascular",
        ("chest pain", "shortness of breath", "sweating", "arm pain", "nausea"),
    ),
    Condition(
        "Stroke", "Neurological",
        ("severe headache", "numbness", "slurred speech", "confusion", "loss of consciousness"),
    ),
    Condition(
        "Pneumonia", "Respiratory",
        ("fever", "cough", "difficulty breathing", "chest pain", "chills"),
    ),
    Condition(
        "Asthma", "Respiratory",
        ("difficulty breathing", "wheezing", "cough", "chest tightness"),
    ),
    Condition(
        "Migraine", "Neurological",
        ("headache", "nausea", "light sensitivity", "blurred vision"),
    ),
    Condition(
        "Influenza", "Infectious Disease",
        ("fever", "chills", "body aches", "fatigue", "cough"),
    ),
    Condition(
        "Gastroenteritis", "Gastrointestinal",
        ("vomiting", "diarrhea", "nausea", "stomach pain"),
    ),
    Condition(
        "Urinary Tract Infection", "Urological",
        ("painful urination", "frequent urination", "lower abdominal pain", "fever"),
    ),
    Condition(
        "Allergic Reaction", "Immunological",
        ("rash", "itching", "swelling", "hives", "sneezing"),
    ),
    Condition(
        "Common Cold", "Respiratory",
        ("runny nose", "sneezing", "sore throat", "cough"),
    ),
)


def match_conditions(
    symptoms: str,
    table: tuple[Condition, ...] = CONDITION_TABLE,
) -> List[ConditionMatch]:
    """
    Return every condition with at least one keyword hit.
    Sort: most hits first, then better coverage; Python's stable sort
    keeps declaration order for anything still tied.
    """
    lowered = symptoms.lower()
    matches = []

    for condition in table:
        hits = sum(1 for kw in condition.keywords if kw in lowered)
        if hits:
            matches.append(ConditionMatch(condition, hits, hits / len(condition.keywords)))

    matches.sort(key=lambda m: (m.hits, m.coverage), reverse=True)
    return matches


def possible_conditions(matches: List[ConditionMatch]) -> List[str]:
    return [m.condition.name for m in matches[:MAX_POSSIBLE_CONDITIONS]]


def disease_category(matches: List[ConditionMatch]) -> str:
    if not matches:
        return DEFAULT_CATEGORY
    return matches[0].condition.category
