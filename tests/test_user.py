"""Tests for user management."""

import pytest

from farmledger.domain.errors import ConflictError, NotFoundError
from farmledger.domain.user import parse_occupations


def test_create_user(user_service):
    user_id = user_service.create_user(name="bob", occupations=["Poultry"])

    user = user_service.get_user(user_id)
    assert user.name == "bob"
    assert user.occupations == ("Poultry",)


def test_create_duplicate_user(user_service, sample_user):
    with pytest.raises(ConflictError, match="already exists"):
        user_service.create_user(name="alice")


def test_list_users_sorted_by_name(user_service):
    user_service.create_user(name="zed")
    user_service.create_user(name="amy")

    assert [u.name for u in user_service.list_users()] == ["amy", "zed"]


def test_resolve_user_by_name_and_id(user_service, sample_user):
    assert user_service.resolve_user("alice") == sample_user
    assert user_service.resolve_user(str(sample_user.id)) == sample_user
    assert user_service.resolve_user(sample_user.id) == sample_user


def test_resolve_missing_user(user_service):
    with pytest.raises(NotFoundError, match="User 'nobody' not found"):
        user_service.resolve_user("nobody")
    with pytest.raises(NotFoundError, match="User 99 not found"):
        user_service.resolve_user("99")


def test_set_occupations_accepts_array_literal(user_service, sample_user):
    stored = user_service.set_occupations(sample_user.id, '{Fishery,"Poultry"}')

    assert stored == ["Fishery", "Poultry"]
    assert user_service.get_user(sample_user.id).occupations == ("Fishery", "Poultry")


def test_add_occupation_skips_duplicates(user_service, sample_user):
    assert user_service.add_occupation(sample_user.id, "Fishery") == [
        "Poultry",
        "Apiculture",
        "Fishery",
    ]
    assert user_service.add_occupation(sample_user.id, "Poultry") == [
        "Poultry",
        "Apiculture",
        "Fishery",
    ]


def test_set_occupations_missing_user(user_service):
    with pytest.raises(NotFoundError):
        user_service.set_occupations(42, ["Poultry"])


@pytest.mark.parametrize(
    "raw,expected",
    [
        (["Poultry", "Apiculture"], ["Poultry", "Apiculture"]),
        ('{Poultry,"Apiculture"}', ["Poultry", "Apiculture"]),
        ("{}", []),
        ("Poultry, ,Fishery", ["Poultry", "Fishery"]),
        ([" Poultry ", None, "Poultry"], ["Poultry"]),
        (None, []),
        (42, []),
    ],
)
def test_parse_occupations(raw, expected):
    assert parse_occupations(raw) == expected
