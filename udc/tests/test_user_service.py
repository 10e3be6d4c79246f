"""
Tests for UserService.find_user
"""

import pytest

from udc.core.exceptions import InvalidArgumentError, UserDirectoryError
from udc.services.users import UserService


class TestCompanyRequired:
    """A blank company is rejected whatever the other criteria are"""

    @pytest.mark.parametrize("company", [None, "", "   ", "\t\n"])
    @pytest.mark.parametrize("name, job", [("Mark", None), (None, "manager"), (None, None)])
    def test_blank_company_raises(self, user_service, name, job, company):
        with pytest.raises(InvalidArgumentError) as exc_info:
            user_service.find_user(name=name, job=job, company=company)

        assert exc_info.value.param_name == "company"
        assert str(exc_info.value) == "Company name is required. (Parameter 'company')"

    def test_error_is_a_value_error(self, user_service):
        with pytest.raises(ValueError, match="company"):
            user_service.find_user(name="Alex", company="")

        with pytest.raises(UserDirectoryError):
            user_service.find_user(name="Alex", company="")

    def test_company_checked_before_source_is_read(self):
        calls = []

        def source():
            calls.append(1)
            return []

        with pytest.raises(InvalidArgumentError):
            UserService(source).find_user(company=None)

        assert calls == []


class TestAndLogic:
    """Every non-blank criterion must match"""

    @pytest.mark.parametrize("name, job, company, expected_ids", [
        ("Mark", None, "*bx", [1]),
        (None, "manager", "*bx", [2]),
        (None, None, "*bx", [1, 2]),
        ("Alex", None, "Barrels-r-Us", [3]),
        ("Alex", "cooper", "Barrels-r-Us", [3]),
        ("Alex", None, "*bx", []),
        ("Borne", None, "ABC", [4]),
        ("Mark", "manager", "*bx", []),
    ])
    def test_find_user(self, user_service, name, job, company, expected_ids):
        result = user_service.find_user(name=name, job=job, company=company)

        assert result is not None
        assert [user.id for user in result] == expected_ids

    @pytest.mark.parametrize("blank", [None, "", "  "])
    def test_blank_name_and_job_are_ignored(self, user_service, blank):
        result = user_service.find_user(name=blank, job=blank, company="*bx")

        assert [user.name for user in result] == ["Mark", "Jane"]

    def test_results_keep_source_order(self, user_service, fixture_users):
        result = user_service.find_user(company="*bx")

        assert result == [fixture_users[0], fixture_users[1]]


class TestMatching:
    """Suffix match on name, exact match elsewhere"""

    @pytest.mark.parametrize("name, company, count", [
        ("Alex", "*ABC", 0),
        ("Borne", "ABC", 1),
        ("Jason", "ABC", 0),
        ("son Borne", "ABC", 1),
        ("Jason Borne", "ABC", 1),
    ])
    def test_name_matches_end_of_string(self, user_service, name, company, count):
        assert len(user_service.find_user(name=name, company=company)) == count

    def test_comparisons_are_case_sensitive(self, user_service):
        assert user_service.find_user(name="borne", company="ABC") == []
        assert user_service.find_user(company="abc") == []
        assert user_service.find_user(job="Manager", company="*bx") == []

    def test_job_is_not_a_partial_match(self, user_service):
        assert user_service.find_user(job="manage", company="*bx") == []
        assert user_service.find_user(job="ager", company="*bx") == []

    def test_company_is_not_a_partial_match(self, user_service):
        assert user_service.find_user(company="bx") == []
        assert user_service.find_user(company="Barrels") == []

    def test_filter_values_are_not_trimmed(self, user_service):
        assert user_service.find_user(company=" *bx") == []
        assert user_service.find_user(name="Mark ", company="*bx") == []


class TestSourceInteraction:

    def test_empty_source_returns_empty_list(self, empty_source):
        service = UserService(empty_source)

        assert service.find_user(company="*bx") == []
        assert service.find_user(name="Mark", job="barista", company="*bx") == []

    def test_source_called_once_per_call(self, fixture_users):
        calls = []

        def source():
            calls.append(1)
            return list(fixture_users)

        service = UserService(source)
        service.find_user(company="*bx")
        service.find_user(name="Jane", company="*bx")

        assert len(calls) == 2

    def test_repeated_calls_return_equal_results(self, user_service):
        first = user_service.find_user(job="manager", company="*bx")
        second = user_service.find_user(job="manager", company="*bx")

        assert first == second
        assert [u.model_dump() for u in first] == [u.model_dump() for u in second]

    def test_accepts_any_sequence(self, fixture_users):
        service = UserService(lambda: tuple(fixture_users))

        assert [u.id for u in service.find_user(company="*bx")] == [1, 2]
