"""Tests for the field presence check."""

import pytest

from kelp.common.validation import field_check


class _Field:
    def __init__(self, values):
        self.values = values

    def is_empty(self) -> bool:
        return not self.values


class _Entity:
    def __init__(self, **fields):
        self.fields = {name: _Field(values) for name, values in fields.items()}
        self.checked: list[str] = []

    def has_field(self, field_name: str) -> bool:
        self.checked.append(field_name)
        return field_name in self.fields

    def get(self, field_name: str) -> _Field:
        return self.fields[field_name]


@pytest.fixture
def article() -> _Entity:
    return _Entity(field_title=["Kelp forests"], field_image=[], field_body=["..."])


def test_field_check_single_name(article: _Entity) -> None:
    assert field_check(article, "field_title") is True


@pytest.mark.parametrize("name", ["field_image", "field_missing"])
def test_field_check_single_name_fails_for_empty_or_missing(article, name) -> None:
    assert field_check(article, name) is False


def test_field_check_all_populated(article: _Entity) -> None:
    assert field_check(article, ["field_title", "field_body"]) is True


def test_field_check_short_circuits_on_first_failure(article: _Entity) -> None:
    assert field_check(article, ["field_title", "field_missing", "field_body"]) is False
    assert article.checked == ["field_title", "field_missing"]


def test_field_check_empty_list_is_vacuously_true(article: _Entity) -> None:
    assert field_check(article, []) is True
    assert article.checked == []


def test_field_check_accepts_tuple(article: _Entity) -> None:
    assert field_check(article, ("field_body", "field_image")) is False
