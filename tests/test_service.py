# tests/test_service.py

import pytest
from datetime import date, datetime
from unittest.mock import patch

import litcal
from litcal.calendars.proper import PROPER_FIXED
from litcal.calendars.records import fixed
from litcal.calendars.universal import UNIVERSAL_FIXED
from litcal.core.types import CacheInfo, CalendarOrigin, CelebrationRank, LiturgicalColor, SeasonKind
from litcal.engines import precedence


def test_plain_ordinary_weekday_is_ferial(service):
    day = service.get_liturgical_day("2025-07-08")
    assert day.celebrations == ()
    assert day.primary is None
    assert day.is_ferial
    assert day.season.kind is SeasonKind.ORDINARY_TIME_II
    assert day.day_of_week == 1
    assert day.iso == "2025-07-08"


def test_accepts_date_datetime_and_string(service):
    a = service.get_liturgical_day(date(2025, 8, 8))
    b = service.get_liturgical_day(datetime(2025, 8, 8, 23, 59))
    c = service.get_liturgical_day("2025-08-08")
    assert a is b is c
    assert a.primary.id == "dominic"


@pytest.mark.parametrize("bad", ["2025-02-30", "2025-2-3", "yesterday", "", 20250808, None])
def test_invalid_dates(service, bad):
    with pytest.raises(litcal.InvalidDateError):
        service.get_liturgical_day(bad)


@pytest.mark.parametrize("d", [date(1582, 12, 31), date(1000, 1, 1), date(9999, 1, 1)])
def test_unsupported_years(service, d):
    with pytest.raises(litcal.UnsupportedYearError):
        service.get_liturgical_day(d)


def test_range_edges_are_supported(service):
    assert service.get_liturgical_day(date(1583, 1, 1)).season.kind is SeasonKind.CHRISTMAS
    last = service.get_liturgical_day(date(9998, 12, 31))
    assert last.liturgical_year == 9999
    assert last.season.kind is SeasonKind.CHRISTMAS


def test_last_liturgical_year_has_segments(service):
    last = service.get_liturgical_day(date(9998, 12, 31))
    spans = service.segments(last.liturgical_year)
    assert any(last.date in s for s in spans)
    start, end = service.liturgical_year_bounds(last.liturgical_year)
    assert start <= last.date <= end
    assert start.year == 9998

    with pytest.raises(litcal.UnsupportedYearError):
        service.segments(last.liturgical_year + 1)
    with pytest.raises(litcal.UnsupportedYearError):
        service.movable_feasts(last.liturgical_year)


def test_idempotent_and_cached(fresh_service):
    assert fresh_service.cache_info() == CacheInfo(0, 0, 0)
    a = fresh_service.get_liturgical_day("2025-04-20")
    b = fresh_service.get_liturgical_day(date(2025, 4, 20))
    assert a is b
    assert fresh_service.cache_info() == CacheInfo(hits=1, misses=1, size=1)

    fresh_service.clear_cache()
    assert fresh_service.cache_info() == CacheInfo(0, 0, 0)
    c = fresh_service.get_liturgical_day("2025-04-20")
    assert c == a


def test_cache_hit_skips_precedence(fresh_service):
    with patch("litcal.api.resolve_celebrations", wraps=precedence.resolve_celebrations) as spy:
        fresh_service.get_liturgical_day("2025-12-25")
        fresh_service.get_liturgical_day("2025-12-25")
        fresh_service.get_liturgical_day("2025-12-25", attributes=("weekday",))
    assert spy.call_count == 1


def test_cache_miss_logged(fresh_service, caplog):
    with caplog.at_level("DEBUG", logger="litcal.api"):
        fresh_service.get_liturgical_day("2025-01-01")
    assert "Cache miss for 2025-01-01" in caplog.text


def test_known_days(service):
    easter = service.get_liturgical_day("2025-04-20")
    assert easter.primary.id == "easter"
    assert easter.season.color is LiturgicalColor.WHITE

    ash = service.get_liturgical_day("2025-03-05")
    assert ash.primary.id == "ash-wednesday"
    assert ash.primary.rank is CelebrationRank.SOLEMNITY
    assert ash.season.kind is SeasonKind.LENT

    xmas = service.get_liturgical_day("2025-12-25")
    assert xmas.primary.id == "nativity-of-the-lord"
    assert xmas.liturgical_year == 2026


def test_advent_boundary(service):
    assert service.season_for("2025-11-29").name == "Ordinary Time"
    day = service.get_liturgical_day("2025-11-30")
    assert day.season.name == "Advent"
    assert day.week.number == 1
    assert day.liturgical_year == 2026


def test_movable_and_fixed_coincide(service):
    # 2025: Immaculate Heart (Easter + 69) falls on June 28.
    ids = [c.id for c in service.celebrations_for("2025-06-28")]
    assert "immaculate-heart" in ids


def test_helpers(service):
    assert service.easter(2027) == date(2027, 3, 28)
    assert service.movable_feasts(2025).pentecost == date(2025, 6, 8)
    assert service.is_feast_day("2025-08-08")
    assert not service.is_feast_day("2025-07-08")
    spans = service.segments(2026)
    assert len(spans) == 6
    assert service.liturgical_year_bounds(2026) == (date(2025, 11, 30), date(2026, 11, 28))
    with pytest.raises(litcal.UnsupportedYearError):
        service.segments(1500)


def test_range_queries(service):
    found = service.celebrations_in_range("2025-08-01", "2025-08-10")
    ids = [c.id for _, c in found]
    assert ids == ["transfiguration", "dominic", "lawrence"]
    assert [d for d, _ in found] == sorted(d for d, _ in found)

    upcoming = service.upcoming_celebrations("2025-08-06", days=3)
    assert [c.id for _, c in upcoming] == ["transfiguration", "dominic"]
    assert service.upcoming_celebrations("2025-08-06", days=0) == []

    assert service.next_celebration("2025-07-08") == (date(2025, 7, 11), service.celebration_by_id("benedict"))

    with pytest.raises(litcal.InvalidDateError):
        service.celebrations_in_range("2025-08-10", "2025-08-01")


def test_calendar_month_and_year(service):
    assert len(service.calendar_month(2024, 2)) == 29
    assert len(service.calendar_month(2025, 2)) == 28
    assert len(service.calendar_year(2025)) == 365
    with pytest.raises(litcal.InvalidDateError):
        service.calendar_month(2025, 13)


def test_search_by_name(service):
    hits = list(service.find_dates_by_celebration_name("dominic", year=2025))
    assert [(d, c.id) for d, c in hits] == [
        (date(2025, 5, 24), "translation-of-dominic"),
        (date(2025, 8, 8), "dominic"),
        (date(2025, 12, 20), "dominic-of-silos"),
    ]


def test_search_merges_fixed_and_movable_in_date_order(service):
    hits = list(service.find_dates_by_celebration_name("EASTER", year=2025))
    dates = [d for d, _ in hits]
    assert dates == sorted(dates)
    assert hits[0] == (date(2025, 4, 19), service.celebration_by_id("holy-saturday"))
    assert (date(2025, 4, 20), service.celebration_by_id("easter")) in hits


def test_search_is_restartable(service):
    search = service.find_dates_by_celebration_name("St.", year=2026)
    first = list(search)
    assert first
    assert list(search) == first


def test_search_no_match(service):
    assert list(service.find_dates_by_celebration_name("zzz", year=2025)) == []


def test_search_default_year_is_current(service):
    assert service.find_dates_by_celebration_name("x").year == date.today().year


def test_search_round_trip(service):
    feasts = service.movable_feasts(2025)
    for rec in list(service.registry):
        month, day = (int(x) for x in rec.month_day.split("-"))
        hits = list(service.find_dates_by_celebration_name(rec.celebration.name, year=2025))
        assert (date(2025, month, day), rec.celebration) in hits
    for m in service.movable:
        hits = list(service.find_dates_by_celebration_name(m.celebration.name, year=2025))
        assert (feasts.observances[m.observance], m.celebration) in hits


def test_search_skips_leap_day_in_common_years():
    leap = fixed("02-29", "leap-day-saint", "Leap Day Saint", CelebrationRank.OPTIONAL_MEMORIAL,
                 LiturgicalColor.WHITE, CalendarOrigin.UNIVERSAL)
    svc = litcal.build_service("dominican", fixed=list(UNIVERSAL_FIXED) + list(PROPER_FIXED) + [leap])
    assert list(svc.find_dates_by_celebration_name("Leap Day", year=2025)) == []
    assert [d for d, _ in svc.find_dates_by_celebration_name("Leap Day", year=2024)] == [date(2024, 2, 29)]
    assert svc.celebrations_for("2024-02-29")[0].id == "leap-day-saint"


def test_celebration_catalog(service):
    everything = service.all_celebrations()
    assert len(everything) == len(service.registry) + len(service.movable)
    order = service.order_celebrations()
    assert all(c.is_order_member for c in order)
    assert {"dominic", "thomas-aquinas", "vincent-ferrer"} <= {c.id for c in order}
    assert service.celebration_by_id("pentecost").color is LiturgicalColor.RED
    with pytest.raises(KeyError):
        service.celebration_by_id("nobody")


def test_roman_calendar_has_no_proper_celebrations():
    roman = litcal.build_service("roman")
    ids = {c.id for c in roman.order_celebrations()}
    assert "dominic" in ids
    assert "vincent-ferrer" not in ids
    assert roman.celebrations_for("2025-11-07") == ()


def test_transferred_calendar():
    svc = litcal.build_service("dominican-transferred")
    assert svc.movable_feasts(2025).ascension == date(2025, 6, 1)
    assert "ascension" in [c.id for c in svc.celebrations_for("2025-06-01")]
    assert "corpus-christi" in [c.id for c in svc.celebrations_for("2025-06-22")]


def test_spec_tweak_continuous_numbering():
    svc = litcal.build_service(litcal.CalendarSpec.like("dominican").tweak(ordinary_time_numbering="continuous"))
    assert svc.get_liturgical_day("2025-11-29").week.number == 34


def test_unknown_spec():
    with pytest.raises(KeyError):
        litcal.build_service("sarum")


def test_info_and_explain(service):
    info = service.info()
    assert info["spec"]["name"] == "dominican"
    assert info["fixed_celebrations"] == len(service.registry)

    ex = service.explain("2025-04-20")
    assert ex["season"]["name"] == "Easter"
    assert ex["observances"] == ["easter_sunday"]
    assert ex["ranking"][0]["id"] == "easter"
    assert ex["ranking"][0]["rank"] == "Solemnity"


def test_build_logs_table_sizes(caplog):
    with caplog.at_level("INFO", logger="litcal.bootstrap"):
        litcal.build_service("roman")
    assert "Built 'roman' calendar" in caplog.text


@pytest.mark.parametrize("iso, cid", [
    ("2025-03-03", "katharine-drexel"),
    ("2025-08-25", "louis-of-france"),
    ("2025-12-20", "dominic-of-silos"),
])
def test_general_calendar_optional_memorials(service, iso, cid):
    c = service.celebration_by_id(cid)
    assert c.rank is CelebrationRank.OPTIONAL_MEMORIAL
    assert c.origin is CalendarOrigin.UNIVERSAL
    assert cid in [x.id for x in service.celebrations_for(iso)]


def test_optional_memorial_yields_to_order_memorial(service):
    ids = [c.id for c in service.celebrations_for("2025-11-08")]
    assert ids == ["anniversary-of-deceased-dominicans", "elizabeth-of-the-trinity"]
    roman = litcal.build_service("roman")
    assert [c.id for c in roman.celebrations_for("2025-11-08")] == ["elizabeth-of-the-trinity"]
