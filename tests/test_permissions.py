import pytest

from fbgraphkit.permissions import Permissions


def test_from_string_splits_on_commas():
    perms = Permissions.from_string("public_profile,email,user_friends")
    assert perms.values == ("public_profile", "email", "user_friends")


def test_str_round_trip():
    text = "public_profile,email,user_friends"
    assert str(Permissions.from_string(text)) == text


def test_trailing_comma_yields_empty_entry():
    assert Permissions.from_string("a,b,").values == ("a", "b", "")


def test_empty_string_yields_single_empty_entry():
    assert Permissions.from_string("").values == ("",)


def test_overlong_permission_rejected():
    with pytest.raises(ValueError):
        Permissions.from_string("x" * 64)


def test_constructor_accepts_any_iterable():
    perms = Permissions(p for p in ["email", "user_posts"])
    assert list(perms) == ["email", "user_posts"]
    assert len(perms) == 2


def test_difference_removes_subtrahend():
    a = Permissions(["public_profile", "email", "user_friends"])
    b = Permissions(["email"])
    assert Permissions.difference(a, b).values == ("public_profile", "user_friends")


def test_difference_removes_one_occurrence_per_entry():
    a = Permissions(["email", "email", "user_posts"])
    b = Permissions(["email", "missing"])
    assert Permissions.difference(a, b).values == ("email", "user_posts")


def test_difference_leaves_operands_unchanged():
    a = Permissions(["email", "user_posts"])
    b = Permissions(["email"])
    Permissions.difference(a, b)
    assert a.values == ("email", "user_posts")
    assert b.values == ("email",)