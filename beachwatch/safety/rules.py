"""Ordered rule tables for swimming severity and advisories.

Severity rules are all evaluated (no short-circuit) and the most severe
matching tier wins. Advisory rules are evaluated in table order; rules
sharing a group are mutually exclusive and the first match in the group
wins. Output order always follows table order.
"""

from collections.abc import Callable
from dataclasses import dataclass

from beachwatch.models.observation import METERS_PER_MILE, ConditionCategory, Observation
from beachwatch.models.safety import Verdict

# Thresholds, imperial units
ROUGH_WIND_MPH = 15.0
BREEZY_WIND_MPH = 10.0
SEVERE_GUST_MPH = 20.0
COLD_AIR_F = 60.0
COOL_AIR_F = 70.0
HYPOTHERMIA_AIR_F = 65.0
WETSUIT_AIR_F = 75.0
EXTREME_HEAT_FEELS_F = 90.0
HOT_FEELS_F = 85.0
MUGGY_HUMIDITY_PCT = 80.0
MUGGY_AIR_F = 80.0
EXCELLENT_AIR_F = 75.0
OVERCAST_CLOUD_PCT = 80.0
# 1000 m expressed in miles, so the boundary matches the provider's meters
LOW_VISIBILITY_MILES = 1000 / METERS_PER_MILE

Predicate = Callable[[Observation], bool]


@dataclass(frozen=True)
class SeverityRule:
    name: str
    tier: Verdict
    predicate: Predicate
    description: str


@dataclass(frozen=True)
class AdvisoryRule:
    name: str
    predicate: Predicate
    text: str
    group: str | None = None


def _is(category: ConditionCategory) -> Predicate:
    return lambda o: o.condition_category == category


def _low_visibility(o: Observation) -> bool:
    return o.visibility_miles < LOW_VISIBILITY_MILES


SEVERITY_RULES: list[SeverityRule] = [
    SeverityRule(
        "thunderstorm", Verdict.DANGEROUS,
        _is(ConditionCategory.THUNDERSTORM), "thunderstorm in the area",
    ),
    SeverityRule(
        "rough_wind", Verdict.POOR,
        lambda o: o.wind_speed_mph > ROUGH_WIND_MPH,
        f"wind above {ROUGH_WIND_MPH:g} mph",
    ),
    SeverityRule(
        "cold_air", Verdict.POOR,
        lambda o: o.air_temperature_f < COLD_AIR_F,
        f"air below {COLD_AIR_F:g}F",
    ),
    SeverityRule("rain", Verdict.POOR, _is(ConditionCategory.RAIN), "raining"),
    SeverityRule(
        "low_visibility", Verdict.POOR, _low_visibility, "visibility under 1000 m",
    ),
    SeverityRule(
        "breezy", Verdict.CAUTION,
        lambda o: o.wind_speed_mph > BREEZY_WIND_MPH,
        f"wind above {BREEZY_WIND_MPH:g} mph",
    ),
    SeverityRule(
        "cool_air", Verdict.CAUTION,
        lambda o: o.air_temperature_f < COOL_AIR_F,
        f"air below {COOL_AIR_F:g}F",
    ),
    SeverityRule("drizzle", Verdict.CAUTION, _is(ConditionCategory.DRIZZLE), "drizzle"),
    SeverityRule(
        "overcast", Verdict.CAUTION,
        lambda o: o.cloud_cover_pct > OVERCAST_CLOUD_PCT,
        f"cloud cover above {OVERCAST_CLOUD_PCT:g}%",
    ),
]


LIFEGUARD_REMINDER = (
    "🏊 Swim only when lifeguards are on duty (10 AM - 6 PM during beach season)"
)

ADVISORY_RULES: list[AdvisoryRule] = [
    AdvisoryRule("lifeguard_hours", lambda o: True, LIFEGUARD_REMINDER),
    AdvisoryRule(
        "exit_water",
        _is(ConditionCategory.THUNDERSTORM),
        "⚠️ DANGER: Exit water immediately - lightning and severe weather risk",
    ),
    AdvisoryRule(
        "rainy",
        _is(ConditionCategory.RAIN),
        "🌧️ Rainy conditions - poor visibility and potential water quality issues",
    ),
    AdvisoryRule(
        "severe_gusts",
        lambda o: o.wind_gust_mph is not None and o.wind_gust_mph > SEVERE_GUST_MPH,
        "💨 Very strong wind gusts - dangerous wave conditions likely",
        group="wind",
    ),
    AdvisoryRule(
        "rip_currents",
        lambda o: o.wind_speed_mph > ROUGH_WIND_MPH,
        "🌊 High winds create dangerous rip currents - extreme caution advised",
        group="wind",
    ),
    AdvisoryRule(
        "moderate_wind",
        lambda o: o.wind_speed_mph > BREEZY_WIND_MPH,
        "🌬️ Moderate winds may create strong currents - stay alert",
        group="wind",
    ),
    AdvisoryRule(
        "hypothermia",
        lambda o: o.air_temperature_f < HYPOTHERMIA_AIR_F,
        "🧥 Cold air temperature - water will be very cold, hypothermia risk",
        group="temperature",
    ),
    AdvisoryRule(
        "wetsuit",
        lambda o: o.air_temperature_f < WETSUIT_AIR_F,
        "🌡️ Cool conditions - water may feel cold, consider wetsuit",
        group="temperature",
    ),
    AdvisoryRule(
        "extreme_heat",
        lambda o: o.feels_like_f > EXTREME_HEAT_FEELS_F,
        "🔥 Very hot conditions - frequent water breaks and shade essential",
        group="heat",
    ),
    AdvisoryRule(
        "sun_and_hydration",
        lambda o: o.feels_like_f > HOT_FEELS_F,
        "☀️ Hot day - apply sunscreen frequently, stay hydrated",
        group="heat",
    ),
    AdvisoryRule(
        "poor_visibility",
        _low_visibility,
        "👁️ Poor visibility - difficulty seeing hazards in water",
    ),
    AdvisoryRule(
        "heat_exhaustion",
        lambda o: (
            o.humidity_pct > MUGGY_HUMIDITY_PCT and o.air_temperature_f > MUGGY_AIR_F
        ),
        "💧 High humidity - heat exhaustion risk, take frequent breaks",
    ),
    AdvisoryRule(
        "excellent",
        lambda o: (
            o.condition_category == ConditionCategory.CLEAR
            and o.air_temperature_f > EXCELLENT_AIR_F
            and o.wind_speed_mph < BREEZY_WIND_MPH
        ),
        "✅ Excellent beach conditions - perfect for swimming and beach activities",
    ),
]
