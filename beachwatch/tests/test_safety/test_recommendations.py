"""Tests for ordered advisory generation."""

from beachwatch.models.observation import ConditionCategory
from beachwatch.safety.classifier import build_recommendations
from beachwatch.safety.rules import ADVISORY_RULES, LIFEGUARD_REMINDER

C = ConditionCategory


def _texts(*names: str) -> list[str]:
    by_name = {r.name: r.text for r in ADVISORY_RULES}
    return [by_name[n] for n in names]


def _has(recs: list[str], name: str) -> bool:
    return _texts(name)[0] in recs


WIND_RULES = ("severe_gusts", "rip_currents", "moderate_wind")


class TestBuildRecommendations:
    def test_lifeguard_always_first(self, make_observation):
        for obs in (
            make_observation(),
            make_observation(condition_category=C.THUNDERSTORM),
            make_observation(air_temperature_f=40.0, wind_speed_mph=30.0),
        ):
            recs = build_recommendations(obs)
            assert recs[0] == LIFEGUARD_REMINDER

    def test_benign_excellent_day(self, make_observation):
        recs = build_recommendations(make_observation())
        assert recs == _texts("lifeguard_hours", "excellent")

    def test_thunderstorm_exit_second(self, make_observation):
        recs = build_recommendations(make_observation(condition_category=C.THUNDERSTORM))
        assert recs[1] == _texts("exit_water")[0]

    def test_rain(self, make_observation):
        recs = build_recommendations(make_observation(condition_category=C.RAIN))
        assert recs[1] == _texts("rainy")[0]
        assert not _has(recs, "excellent")

    def test_gust_precedence_over_light_wind(self, make_observation):
        recs = build_recommendations(
            make_observation(wind_speed_mph=8.0, wind_gust_mph=25.0)
        )
        wind_lines = [n for n in WIND_RULES if _has(recs, n)]
        assert wind_lines == ["severe_gusts"]

    def test_gust_precedence_over_high_wind(self, make_observation):
        recs = build_recommendations(
            make_observation(wind_speed_mph=18.0, wind_gust_mph=30.0)
        )
        wind_lines = [n for n in WIND_RULES if _has(recs, n)]
        assert wind_lines == ["severe_gusts"]

    def test_gust_at_threshold_falls_through(self, make_observation):
        recs = build_recommendations(
            make_observation(wind_speed_mph=12.0, wind_gust_mph=20.0)
        )
        wind_lines = [n for n in WIND_RULES if _has(recs, n)]
        assert wind_lines == ["moderate_wind"]

    def test_zero_gust_is_not_absent_but_harmless(self, make_observation):
        recs = build_recommendations(
            make_observation(wind_speed_mph=16.0, wind_gust_mph=0.0)
        )
        wind_lines = [n for n in WIND_RULES if _has(recs, n)]
        assert wind_lines == ["rip_currents"]

    def test_temperature_group_exclusive(self, make_observation):
        cold = build_recommendations(make_observation(air_temperature_f=60.0))
        assert _has(cold, "hypothermia")
        assert not _has(cold, "wetsuit")

        cool = build_recommendations(make_observation(air_temperature_f=70.0))
        assert _has(cool, "wetsuit")
        assert not _has(cool, "hypothermia")

    def test_heat_group_exclusive(self, make_observation):
        very_hot = build_recommendations(make_observation(feels_like_f=95.0))
        assert _has(very_hot, "extreme_heat")
        assert not _has(very_hot, "sun_and_hydration")

        hot = build_recommendations(make_observation(feels_like_f=88.0))
        assert _has(hot, "sun_and_hydration")
        assert not _has(hot, "extreme_heat")

    def test_heat_exhaustion_needs_both(self, make_observation):
        muggy = make_observation(humidity_pct=85.0, air_temperature_f=82.0)
        assert _has(build_recommendations(muggy), "heat_exhaustion")
        humid_cool = make_observation(humidity_pct=85.0, air_temperature_f=78.0)
        assert not _has(build_recommendations(humid_cool), "heat_exhaustion")

    def test_poor_visibility(self, make_observation):
        recs = build_recommendations(make_observation(visibility_miles=0.3))
        assert _has(recs, "poor_visibility")

    def test_excellent_requires_clear_warm_calm(self, make_observation):
        assert not _has(
            build_recommendations(make_observation(condition_category=C.CLOUDS)),
            "excellent",
        )
        assert not _has(
            build_recommendations(make_observation(air_temperature_f=75.0)),
            "excellent",
        )
        assert not _has(
            build_recommendations(make_observation(wind_speed_mph=10.0)),
            "excellent",
        )

    def test_order_follows_table(self, make_observation):
        obs = make_observation(
            condition_category=C.THUNDERSTORM,
            wind_speed_mph=18.0,
            wind_gust_mph=32.0,
            air_temperature_f=62.0,
            feels_like_f=92.0,
            visibility_miles=0.4,
        )
        recs = build_recommendations(obs)
        assert recs == _texts(
            "lifeguard_hours",
            "exit_water",
            "severe_gusts",
            "hypothermia",
            "extreme_heat",
            "poor_visibility",
        )

    def test_no_duplicates(self, make_observation):
        recs = build_recommendations(
            make_observation(condition_category=C.RAIN, wind_speed_mph=16.0)
        )
        assert len(recs) == len(set(recs))
