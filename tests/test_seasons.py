# tests/test_seasons.py

import pytest
from datetime import date, timedelta

from litcal.core.types import SeasonKind
from litcal.engines.movable import movable_feasts_for_year
from litcal.engines.seasons import SeasonResolver, resolve_season


@pytest.fixture(scope="module")
def resolver():
    return SeasonResolver(movable_feasts_for_year)


def _kind(resolver, d):
    return resolver.resolve(d)[0].kind


def test_advent_boundary_2025(resolver):
    season, week = resolver.resolve(date(2025, 11, 29))
    assert season.name == "Ordinary Time"
    assert season.kind is SeasonKind.ORDINARY_TIME_II

    season, week = resolver.resolve(date(2025, 11, 30))
    assert season.name == "Advent"
    assert week.number == 1
    assert week.display_label == "1st Week of Advent"


def test_liturgical_year_rollover(resolver):
    assert resolver.liturgical_year(date(2025, 11, 29)) == 2025
    assert resolver.liturgical_year(date(2025, 11, 30)) == 2026
    assert resolver.liturgical_year(date(2025, 12, 31)) == 2026
    assert resolver.liturgical_year(date(2026, 1, 1)) == 2026


@pytest.mark.parametrize("d, kind, number, label", [
    (date(2025, 12, 21), SeasonKind.ADVENT, 4, "4th Week of Advent"),
    (date(2025, 12, 24), SeasonKind.ADVENT, 4, "4th Week of Advent"),
    (date(2025, 12, 25), SeasonKind.CHRISTMAS, 1, "Octave of Christmas"),
    (date(2026, 1, 1), SeasonKind.CHRISTMAS, 2, "Octave of Christmas"),
    (date(2026, 1, 2), SeasonKind.CHRISTMAS, 2, "Christmas Season"),
    (date(2026, 1, 11), SeasonKind.CHRISTMAS, 4, "Christmas Season"),
    (date(2026, 1, 12), SeasonKind.ORDINARY_TIME_I, 1, "1st Week of Ordinary Time"),
    (date(2025, 3, 4), SeasonKind.ORDINARY_TIME_I, 8, "8th Week of Ordinary Time"),
    (date(2025, 3, 5), SeasonKind.LENT, 1, "Ash Wednesday"),
    (date(2025, 3, 8), SeasonKind.LENT, 1, "Days after Ash Wednesday"),
    (date(2025, 3, 9), SeasonKind.LENT, 1, "1st Week of Lent"),
    (date(2025, 3, 30), SeasonKind.LENT, 4, "4th Week of Lent"),
    (date(2025, 4, 13), SeasonKind.LENT, 6, "Holy Week"),
    (date(2025, 4, 17), SeasonKind.LENT, 6, "Holy Week"),
    (date(2025, 4, 18), SeasonKind.EASTER, 0, "Easter Triduum"),
    (date(2025, 4, 19), SeasonKind.EASTER, 0, "Easter Triduum"),
    (date(2025, 4, 20), SeasonKind.EASTER, 1, "Octave of Easter"),
    (date(2025, 4, 27), SeasonKind.EASTER, 2, "Octave of Easter"),
    (date(2025, 4, 28), SeasonKind.EASTER, 2, "2nd Week of Easter"),
    (date(2025, 6, 7), SeasonKind.EASTER, 7, "7th Week of Easter"),
    (date(2025, 6, 8), SeasonKind.EASTER, 8, "Pentecost Sunday"),
    (date(2025, 6, 9), SeasonKind.ORDINARY_TIME_II, 1, "1st Week of Ordinary Time"),
    (date(2025, 6, 15), SeasonKind.ORDINARY_TIME_II, 2, "2nd Week of Ordinary Time"),
    (date(2025, 7, 8), SeasonKind.ORDINARY_TIME_II, 5, "5th Week of Ordinary Time"),
])
def test_known_weeks(resolver, d, kind, number, label):
    season, week = resolver.resolve(d)
    assert season.kind is kind
    assert week.number == number
    assert week.display_label == label


def test_baptism_on_monday_keeps_christmas(resolver):
    # 2024: Epiphany Jan 7, Baptism Monday Jan 8.
    assert _kind(resolver, date(2024, 1, 8)) is SeasonKind.CHRISTMAS
    assert _kind(resolver, date(2024, 1, 9)) is SeasonKind.ORDINARY_TIME_I
    _, week = resolver.resolve(date(2024, 1, 14))
    assert week.number == 2


def test_continuous_ordinary_time_ends_at_34():
    r = SeasonResolver(movable_feasts_for_year, ordinary_time_numbering="continuous")
    assert r.resolve(date(2025, 11, 29))[1].number == 34
    assert r.resolve(date(2025, 11, 23))[1].number == 34   # Christ the King
    assert r.resolve(date(2025, 11, 22))[1].number == 33
    # reset numbering leaves Ordinary Time I untouched
    assert r.resolve(date(2025, 3, 4))[1].number == 8


def test_invalid_numbering_rejected():
    with pytest.raises(ValueError):
        SeasonResolver(movable_feasts_for_year, ordinary_time_numbering="weekly")


@pytest.mark.parametrize("lit_year", [1584, 1700, 1818, 1943, 2000, 2024, 2025, 2026, 2100, 2400])
def test_segments_contiguous_and_exhaustive(resolver, lit_year):
    spans = resolver.segments(lit_year)
    start, end = resolver.bounds(lit_year)
    assert [s.season.ordinal_index for s in spans] == list(range(6))
    assert spans[0].start == start
    assert spans[-1].end == end
    for prev, cur in zip(spans, spans[1:]):
        assert prev.end + timedelta(days=1) == cur.start
    for s in spans:
        assert s.days >= 1
    assert sum(s.days for s in spans) == (end - start).days + 1


def test_every_date_of_a_year_maps_to_exactly_one_season(resolver):
    d = date(2024, 1, 1)
    while d <= date(2024, 12, 31):
        lit = resolver.liturgical_year(d)
        hits = [s for s in resolver.segments(lit) if d in s]
        assert len(hits) == 1
        d += timedelta(days=1)


def test_resolve_season_function_matches_resolver(resolver):
    d = date(2026, 2, 18)   # Ash Wednesday 2026
    assert resolve_season(d, movable_feasts_for_year) == resolver.resolve(d)
    assert resolver.resolve(d)[0].color.value == "violet"


def test_weeks_start_on_sunday(resolver):
    # every Sunday outside the Triduum either bumps the week or starts a span
    d = date(2025, 1, 13)
    prev = resolver.resolve(d - timedelta(days=1))
    while d <= date(2025, 3, 4):
        cur = resolver.resolve(d)
        if d.weekday() == 6:
            assert cur[1].number == prev[1].number + 1
        else:
            assert cur[1].number == prev[1].number or cur[0] != prev[0]
        prev = cur
        d += timedelta(days=1)
