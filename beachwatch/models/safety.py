"""Swimming safety verdict and assessment models."""

from dataclasses import dataclass
from enum import StrEnum


class Verdict(StrEnum):
    GOOD = "GOOD"
    CAUTION = "CAUTION"
    POOR = "POOR"
    DANGEROUS = "DANGEROUS"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_SEVERITY = {
    Verdict.GOOD: 0,
    Verdict.CAUTION: 1,
    Verdict.POOR: 2,
    Verdict.DANGEROUS: 3,
}

_LABELS = {
    Verdict.GOOD: "GOOD - Safe for swimming",
    Verdict.CAUTION: "CAUTION - Be careful, check with lifeguards",
    Verdict.POOR: "POOR - Swimming not recommended",
    Verdict.DANGEROUS: "DANGEROUS - DO NOT SWIM",
}


@dataclass(frozen=True)
class RuleResult:
    rule_name: str
    matched: bool
    tier: Verdict
    detail: str


@dataclass(frozen=True)
class SafetyAssessment:
    verdict: Verdict
    recommendations: tuple[str, ...]
    uv_advisory: str | None
    rule_results: tuple[RuleResult, ...] = ()

    @property
    def triggered_rules(self) -> list[str]:
        return [r.rule_name for r in self.rule_results if r.matched]
