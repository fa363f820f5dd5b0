import pytest

from src.student_affairs.student_affairs.core.enums import StudentStatus
from src.student_affairs.student_affairs.core.exceptions import ValidationError
from src.student_affairs.student_affairs.database.query import Eq, ILike, IsNull, OrderBy, where_clause


def test_where_clause_renders_parameters_in_order():
    sql, params = where_clause([IsNull("user_id"), ILike.contains("nis", "10"), Eq("status", StudentStatus.ACTIVE)])

    assert sql == "`user_id` IS NULL AND LOWER(`nis`) LIKE LOWER(%s) AND `status` = %s"
    assert params == ("%10%", "active")


def test_eq_none_renders_is_null():
    assert Eq("user_id", None).to_sql() == ("`user_id` IS NULL", ())


def test_contains_escapes_like_wildcards():
    f = ILike.contains("full_name", "50%_off")
    assert f.pattern == "%50\\%\\_off%"
    assert f.matches({"full_name": "Diskon 50%_off"})
    assert not f.matches({"full_name": "Diskon 50 off"})


def test_ilike_underscore_wildcard_and_null():
    f = ILike("nis", "10_1")
    assert f.matches({"nis": "1001"})
    assert not f.matches({"nis": None})


def test_enum_values_compare_by_value():
    assert Eq("status", StudentStatus.ACTIVE).matches({"status": "active"})


@pytest.mark.parametrize("bad", ["user id", "1abc", "nis;--", "Name", ""])
def test_identifiers_are_validated(bad):
    with pytest.raises(ValidationError):
        IsNull(bad)


def test_order_by_sql():
    assert OrderBy("created_at", descending=True).to_sql() == "`created_at` DESC"
