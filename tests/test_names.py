from dataclasses import dataclass
from typing import Any

import pytest

from datewise import (
    CalendarNames,
    EnglishCalendarNames,
    UnsupportedLocaleError,
    format_month_string,
    get_calendar_names,
    parse_date_string,
    register_calendar_names,
)
from datewise import names as names_mod
from datewise.names import ENGLISH, NameForm


@dataclass(frozen=True)
class FrenchNames:
    months: tuple[str, ...] = (
        "Janvier",
        "Février",
        "Mars",
        "Avril",
        "Mai",
        "Juin",
        "Juillet",
        "Août",
        "Septembre",
        "Octobre",
        "Novembre",
        "Décembre",
    )

    def month_name(self, month: int, form: NameForm = "long") -> str:
        name = self.months[month - 1]
        return name if form == "long" else name[:3]

    def month_number(self, name: str) -> int | None:
        lowered = name.lower()
        for idx, month in enumerate(self.months, start=1):
            if lowered in (month.lower(), month[:3].lower()):
                return idx
        return None

    def weekday_name(self, index: int, form: NameForm = "long") -> str:
        return ("dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi")[index]

    def weekday_number(self, name: str) -> int | None:
        return None


@pytest.fixture
def isolated_registry(monkeypatch: Any) -> None:
    monkeypatch.setattr(names_mod, "_REGISTRY", dict(names_mod._REGISTRY))


def test_month_names() -> None:
    assert ENGLISH.month_name(1) == "January"
    assert ENGLISH.month_name(12, "short") == "Dec"
    assert ENGLISH.month_name(9, "short") == "Sep"


@pytest.mark.parametrize("month", [0, 13, -1])
def test_month_name_out_of_range(month: int) -> None:
    with pytest.raises(ValueError, match="between 1 and 12"):
        ENGLISH.month_name(month)


@pytest.mark.parametrize(
    "name,expected",
    [("December", 12), ("dec", 12), ("DECEMBER", 12), ("Sep.", 9), (" may ", 5), ("Decembor", None), ("", None)],
)
def test_month_number(name: str, expected: int | None) -> None:
    assert ENGLISH.month_number(name) == expected


def test_weekdays() -> None:
    assert ENGLISH.weekday_name(0) == "Sunday"
    assert ENGLISH.weekday_name(6, "short") == "Sat"
    assert ENGLISH.weekday_number("sat") == 6
    assert ENGLISH.weekday_number("Monday") == 1
    assert ENGLISH.weekday_number("Someday") is None
    with pytest.raises(ValueError, match="between 0 and 6"):
        ENGLISH.weekday_name(7)


def test_english_satisfies_protocol() -> None:
    assert isinstance(EnglishCalendarNames(), CalendarNames)
    assert isinstance(FrenchNames(), CalendarNames)


def test_locale_lookup() -> None:
    assert get_calendar_names() is ENGLISH
    assert get_calendar_names("en_US") is ENGLISH
    assert get_calendar_names("EN-gb") is ENGLISH
    with pytest.raises(UnsupportedLocaleError, match="xx"):
        get_calendar_names("xx")


@pytest.mark.usefixtures("isolated_registry")
def test_register_locale() -> None:
    french = FrenchNames()
    register_calendar_names("fr", french)
    assert get_calendar_names("fr_CA") is french


def test_injected_names_drive_parsing_and_formatting() -> None:
    french = FrenchNames()
    result = parse_date_string("Décembre 2023", names=french)
    assert [i.format for i in result] == ["Mf Y"]
    assert result[0].months == 647
    assert format_month_string(647, "Mf Y", names=french) == "Décembre 2023"
    assert format_month_string(647, "Msu Y", names=french) == "DÉC 2023"
    assert [i.format for i in parse_date_string("déc 2023", names=french)] == ["Msl Y"]
