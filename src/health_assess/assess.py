import logging
from typing import Optional

from health_assess.classifier import TextClassifier, load_classifier
from health_assess.schema import AssessmentResult, IntakeRecord
from health_assess.scoring import analyze, calculate_risk_score, get_table
from health_assess.settings import get_settings

logger = logging.getLogger(__name__)


def assess_intake(record: IntakeRecord, variant: Optional[str] = None) -> AssessmentResult:
    variant = variant or get_settings().scoring_variant
    table = get_table(variant)
    if table.name == "extended":
        return analyze_with_model(record)
    return calculate_risk_score(record, table)


def analyze_with_model(
    record: IntakeRecord,
    classifier: Optional[TextClassifier] = None,
) -> AssessmentResult:
    """
    Extended analysis with the optional text classifier consulted on the side.
    The returned result is always the rule-based one; the classifier
    label is logged for comparison only.
    """
    result = analyze(record)

    clf = classifier or load_classifier()
    if clf is None:
        return result

    try:
        label, confidence = clf.classify(record.symptoms)
    except Exception as e:
        # any classifier fault only costs the side label
        logger.warning("Text classifier failed, keeping rule-based result: %s", e)
        return result

    logger.info(
        "Classifier label=%s confidence=%.2f rule_category=%s",
        label, confidence, result.disease_category,
    )
    return result
