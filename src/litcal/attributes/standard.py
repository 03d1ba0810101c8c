from __future__ import annotations
from typing import Any, Dict

from ..core.time import WEEKDAY_NAMES
from ..core.types import CelebrationRank, LiturgicalDay, SeasonKind
from .registry import register_attribute, season_kind

SUNDAY = 6


def _weekday_name(day: LiturgicalDay) -> str:
    return WEEKDAY_NAMES[day.day_of_week]


def weekday(day) -> Dict[str, Any]:
    # Convention: 0=Mon..6=Sun (ISO-like).
    return {"weekday": _weekday_name(day)}


def describe_day(day: LiturgicalDay) -> str:
    """Human name of the liturgical day, e.g. "Tuesday of the 10th Week of Ordinary Time"."""
    wd = _weekday_name(day)
    label = day.week.display_label
    d = day.date

    if label == "Octave of Christmas":
        if (d.month, d.day) == (12, 25):
            return "Christmas Day"
        if (d.month, d.day) == (1, 1):
            return "Solemnity of Mary, Mother of God"
        return f"{wd} within the Octave of Christmas"
    if label == "Octave of Easter":
        if day.day_of_week == SUNDAY and day.week.number == 1:
            return "Easter Sunday"
        return f"{wd} within the Octave of Easter"
    if label == "Easter Triduum":
        return "Holy Saturday" if day.day_of_week == 5 else "Good Friday"
    if label in ("Pentecost Sunday", "Ash Wednesday"):
        return label
    if label == "Days after Ash Wednesday":
        return f"{wd} after Ash Wednesday"
    if label == "Holy Week":
        return "Palm Sunday" if day.day_of_week == SUNDAY else f"{wd} of Holy Week"
    if label == "Christmas Season":
        return f"{wd} of the Christmas Season"
    if day.day_of_week == SUNDAY:
        return label.replace(" Week of ", " Sunday of ", 1)
    return f"{wd} of the {label}"


def day_name(day) -> Dict[str, Any]:
    return {"day_name": describe_day(day)}


def octave(day) -> Dict[str, Any]:
    label = day.week.display_label
    return {"octave": label if label in ("Octave of Easter", "Octave of Christmas") else None}


def season_class(day) -> Dict[str, Any]:
    kind = season_kind(day)
    if kind is SeasonKind.LENT:
        cls = "lent"
    elif kind is SeasonKind.EASTER:
        cls = "pentecost" if day.week.display_label == "Pentecost Sunday" else "easter"
    else:
        cls = ""
    return {"season_class": cls}


def primary(day) -> Dict[str, Any]:
    c = day.primary
    if c is None:
        return {"primary": {"id": None, "name": describe_day(day), "rank": CelebrationRank.FERIAL.label}}
    return {"primary": {"id": c.id, "name": c.name, "rank": c.rank.label}}


register_attribute("weekday", weekday)
register_attribute("day_name", day_name)
register_attribute("octave", octave)
register_attribute("season_class", season_class)
register_attribute("primary", primary)
