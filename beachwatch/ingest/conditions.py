"""Map provider condition text onto the closed condition vocabulary."""

from beachwatch.models.observation import ConditionCategory

# Checked in order; the first category with a matching cue wins.
# Thunderstorm comes first so text like "thunderstorm with light rain"
# is never shadowed by a broader match.
CONDITION_CUES: list[tuple[ConditionCategory, tuple[str, ...]]] = [
    (ConditionCategory.THUNDERSTORM, ("thunderstorm", "storm")),
    (ConditionCategory.RAIN, ("rain",)),
    (ConditionCategory.DRIZZLE, ("drizzle",)),
    (ConditionCategory.CLOUDS, ("cloud",)),
    (ConditionCategory.CLEAR, ("clear",)),
]


def categorize_condition(text: str) -> ConditionCategory:
    """Case-insensitive substring match of condition text, in priority order."""
    lowered = text.lower()
    for category, cues in CONDITION_CUES:
        if any(cue in lowered for cue in cues):
            return category
    return ConditionCategory.OTHER
