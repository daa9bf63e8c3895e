from dataclasses import FrozenInstanceError

import pytest

from creator_calendar import ConfigurationError, DomainRangeError, PartOfDay, generate_year, resolve_day


def test_first_day():
    d = resolve_day(1)
    assert (d.month, d.day_of_month, d.week_day) == (1, 1, 1)
    assert not d.is_sabbath
    assert d.man_day == 362
    assert d.is_feast and d.feast_name == "New Year"
    assert d.part_of_day is None


def test_seventh_day_is_sabbath():
    d = resolve_day(7)
    assert d.week_day == 7
    assert d.is_sabbath
    assert not d.is_high_sabbath


def test_yom_kippur_is_high_sabbath_on_a_weekday():
    d = resolve_day(192)
    assert (d.month, d.day_of_month) == (7, 10)
    assert d.is_feast
    assert d.feast_name == "Yom Kippur"
    assert d.is_high_sabbath
    assert d.week_day == 3
    assert not d.is_sabbath


def test_last_regular_day():
    d = resolve_day(364)
    assert (d.month, d.day_of_month) == (12, 31)
    assert d.is_intercalary
    assert not d.is_day_out_of_time
    assert d.week_day == 7
    assert d.is_sabbath
    assert d.man_day == 361


def test_single_day_out_of_time():
    d = resolve_day(365, tequfah_day=2)
    assert d.is_day_out_of_time
    assert d.man_day == 363
    assert d.is_intercalary
    assert (d.month, d.day_of_month) == (12, 29)
    assert d.week_day == 1


def test_two_days_out_of_time():
    first = resolve_day(365, tequfah_day=3)
    second = resolve_day(366, tequfah_day=3)
    assert not first.is_intercalary
    assert second.is_intercalary
    assert (first.man_day, second.man_day) == (363, 364)
    assert (first.day_of_month, second.day_of_month) == (29, 30)
    assert second.week_day == 2
    for d in (first, second):
        assert d.is_day_out_of_time
        assert d.month == 12
        assert not (d.is_sabbath or d.is_feast or d.is_high_sabbath or d.is_tequfah)
        assert d.feast_name is None


@pytest.mark.parametrize(
    "creator_day, man_day",
    [(1, 362), (2, 363), (3, 364), (4, 1), (5, 2), (100, 97), (364, 361)],
)
def test_mans_count(creator_day, man_day):
    assert resolve_day(creator_day).man_day == man_day


def test_mans_count_is_bijective_over_regular_days():
    assert sorted(resolve_day(n).man_day for n in range(1, 365)) == list(range(1, 365))


def test_month_day_bijection():
    pairs = [(d.month, d.day_of_month) for d in (resolve_day(n) for n in range(1, 365))]
    assert len(set(pairs)) == 364


@pytest.mark.parametrize("tequfah_day", [2, 3])
def test_week_cycle_never_pauses(tequfah_day):
    for d in generate_year(tequfah_day):
        assert d.week_day == (d.creator_day - 1) % 7 + 1
        if not d.is_day_out_of_time:
            assert d.is_sabbath == (d.week_day == 7)


def test_sabbath_count():
    assert sum(d.is_sabbath for d in generate_year(3)) == 52


def test_intercalary_days():
    assert [d.creator_day for d in generate_year(2) if d.is_intercalary] == [91, 182, 303, 364, 365]
    assert [d.creator_day for d in generate_year(3) if d.is_intercalary] == [91, 182, 303, 364, 366]


def test_tequfah_days():
    assert [d.creator_day for d in generate_year() if d.is_tequfah] == [184, 185]


def test_high_sabbath_independent_of_week():
    highs = [d for d in generate_year() if d.is_high_sabbath]
    assert highs and any(d.week_day != 7 for d in highs)


def test_resolve_is_pure():
    assert resolve_day(200, 3) == resolve_day(200, 3)
    assert resolve_day(200, 3) is not resolve_day(200, 3)


def test_descriptor_is_frozen():
    d = resolve_day(10)
    with pytest.raises(FrozenInstanceError):
        d.month = 2
    filled = d.with_part_of_day(PartOfDay.EVENING)
    assert filled.part_of_day is PartOfDay.EVENING
    assert d.part_of_day is None
    assert filled.creator_day == d.creator_day


@pytest.mark.parametrize("tequfah_day, length", [(2, 365), (3, 366)])
def test_generate_year_matches_resolve_day(tequfah_day, length):
    days = generate_year(tequfah_day)
    assert len(days) == length
    assert [d.creator_day for d in days] == list(range(1, length + 1))
    for n, d in enumerate(days, 1):
        assert d == resolve_day(n, tequfah_day)


def test_generate_year_returns_independent_lists():
    a = generate_year()
    b = generate_year()
    assert a == b
    assert a is not b
    a.pop()
    assert len(b) == 365


@pytest.mark.parametrize("creator_day", [0, -1, 366, 1000])
def test_out_of_range_with_one_day_out_of_time(creator_day):
    with pytest.raises(DomainRangeError) as exc:
        resolve_day(creator_day, tequfah_day=2)
    assert exc.value.details["max_day"] == 365


def test_out_of_range_with_two_days_out_of_time():
    resolve_day(366, tequfah_day=3)
    with pytest.raises(DomainRangeError):
        resolve_day(367, tequfah_day=3)


@pytest.mark.parametrize("creator_day", [1.5, "3", None, True])
def test_non_integer_day(creator_day):
    with pytest.raises(DomainRangeError):
        resolve_day(creator_day)


def test_bad_selector_rejected_before_day():
    with pytest.raises(ConfigurationError):
        resolve_day(0, tequfah_day=5)
    with pytest.raises(ConfigurationError):
        generate_year(1)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        resolve_day(400)
