"""Safety classifier: observation in, verdict and advisories out."""

from beachwatch.models.observation import Observation
from beachwatch.models.safety import RuleResult, SafetyAssessment, Verdict
from beachwatch.safety.rules import (
    ADVISORY_RULES,
    SEVERITY_RULES,
    AdvisoryRule,
    SeverityRule,
)
from beachwatch.safety.uv import uv_advisory


def evaluate_severity(
    observation: Observation, rules: list[SeverityRule] = SEVERITY_RULES
) -> tuple[Verdict, list[RuleResult]]:
    """Run every severity rule and return the most severe matching tier.

    Never short-circuits, so the results form a full audit trail.
    """
    results: list[RuleResult] = []
    verdict = Verdict.GOOD
    for rule in rules:
        matched = bool(rule.predicate(observation))
        results.append(
            RuleResult(
                rule_name=rule.name,
                matched=matched,
                tier=rule.tier,
                detail=rule.description if matched else "ok",
            )
        )
        if matched and rule.tier.severity > verdict.severity:
            verdict = rule.tier
    return verdict, results


def build_recommendations(
    observation: Observation, rules: list[AdvisoryRule] = ADVISORY_RULES
) -> list[str]:
    """Collect advisory lines in table order, one per exclusive group."""
    recommendations: list[str] = []
    fired_groups: set[str] = set()
    for rule in rules:
        if rule.group is not None and rule.group in fired_groups:
            continue
        if rule.predicate(observation):
            recommendations.append(rule.text)
            if rule.group is not None:
                fired_groups.add(rule.group)
    return recommendations


def classify(
    observation: Observation, evaluation_hour: int | None = None
) -> SafetyAssessment:
    """Classify swimming safety for one observation.

    Args:
        observation: Normalized, unrounded observation.
        evaluation_hour: Local hour for the UV advisory; defaults to the
            hour recorded on the observation.
    """
    hour = evaluation_hour
    if hour is None:
        hour = observation.observed_at_local_hour
    verdict, results = evaluate_severity(observation)
    return SafetyAssessment(
        verdict=verdict,
        recommendations=tuple(build_recommendations(observation)),
        uv_advisory=uv_advisory(observation, hour),
        rule_results=tuple(results),
    )
