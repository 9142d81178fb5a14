"""
Tests for PasswordCheckRouter.

Collaborators are replaced by small spies recording what they receive.
Every failure path must come back as a response, never as an exception.
"""

import asyncio

import pytest

from passcheck.interfaces.http.envelopes import HttpRequest, HttpResponse
from passcheck.interfaces.password.password_check_router import PasswordCheckRouter
from passcheck.shared.errors.kinds import (
    InvalidParamError,
    MissingParamError,
    ServerError,
)


# ══════════════════════════════════════════════════════════════════════
# Spies
# ══════════════════════════════════════════════════════════════════════


class PasswordCheckUseCaseSpy:
    def __init__(self, is_valid_password: bool = True) -> None:
        self.is_valid_password = is_valid_password
        self.password = None
        self.calls: list[str] = []

    async def check(self, password: str) -> bool:
        self.password = password
        self.calls.append("check")
        return self.is_valid_password


class FailingPasswordCheckUseCase:
    async def check(self, password: str) -> bool:
        raise RuntimeError("storage offline")


class PasswordValidatorSpy:
    def __init__(self, is_password_valid: bool = True) -> None:
        self.is_password_valid = is_password_valid
        self.password = None

    def is_valid(self, password: str) -> bool:
        self.password = password
        return self.is_password_valid


class FailingPasswordValidator:
    def is_valid(self, password: str) -> bool:
        raise ValueError("bad rule set")


class Sut:
    def __init__(self) -> None:
        self.use_case = PasswordCheckUseCaseSpy()
        self.validator = PasswordValidatorSpy()
        self.router = PasswordCheckRouter(self.use_case, self.validator)


@pytest.fixture
def sut() -> Sut:
    return Sut()


def _request(password: str = "any_password") -> HttpRequest:
    return HttpRequest(body={"password": password})


# ══════════════════════════════════════════════════════════════════════
# Request shape
# ══════════════════════════════════════════════════════════════════════


class TestRequestShape:
    """Malformed calls and missing fields."""

    @pytest.mark.asyncio
    async def test_empty_password_returns_400(self, sut: Sut) -> None:
        response = await sut.router.route(_request(""))
        assert response.status_code == 400
        assert response.body == MissingParamError("password")

    @pytest.mark.asyncio
    async def test_absent_password_returns_400(self, sut: Sut) -> None:
        response = await sut.router.route(HttpRequest(body={"email": "a@b.c"}))
        assert response.status_code == 400
        assert response.body == MissingParamError("password")

    @pytest.mark.asyncio
    async def test_no_request_returns_500(self, sut: Sut) -> None:
        response = await sut.router.route()
        assert response.status_code == 500
        assert response.body == ServerError()

    @pytest.mark.asyncio
    async def test_request_without_body_returns_500(self, sut: Sut) -> None:
        response = await sut.router.route(HttpRequest())
        assert response.status_code == 500
        assert response.body == ServerError()

    @pytest.mark.asyncio
    async def test_plain_mapping_request_is_accepted(self, sut: Sut) -> None:
        response = await sut.router.route({"body": {"password": "valid_password"}})
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_plain_mapping_without_body_returns_500(self, sut: Sut) -> None:
        response = await sut.router.route({})
        assert response.status_code == 500
        assert response.body == ServerError()

    @pytest.mark.asyncio
    async def test_non_mapping_body_has_no_password(self, sut: Sut) -> None:
        response = await sut.router.route(HttpRequest(body=["any_password"]))
        assert response.status_code == 400
        assert response.body == MissingParamError("password")

    @pytest.mark.asyncio
    async def test_body_access_raising_returns_500(self, sut: Sut) -> None:
        class BrokenRequest:
            @property
            def body(self):
                raise RuntimeError("stream closed")

        response = await sut.router.route(BrokenRequest())
        assert response.status_code == 500
        assert response.body == ServerError()
        assert sut.use_case.calls == []

    @pytest.mark.asyncio
    async def test_body_lookup_raising_returns_500(self, sut: Sut) -> None:
        class BrokenBody(dict):
            def get(self, key, default=None):
                raise KeyError(key)

        response = await sut.router.route(HttpRequest(body=BrokenBody()))
        assert response.status_code == 500
        assert response.body == ServerError()

    @pytest.mark.asyncio
    async def test_missing_field_skips_collaborators(self, sut: Sut) -> None:
        await sut.router.route(_request(""))
        assert sut.validator.password is None
        assert sut.use_case.calls == []


# ══════════════════════════════════════════════════════════════════════
# Validator
# ══════════════════════════════════════════════════════════════════════


class TestPasswordValidator:
    """Validator capability checks and outcomes."""

    @pytest.mark.asyncio
    async def test_called_with_request_password(self, sut: Sut) -> None:
        request = _request("valid_password")
        await sut.router.route(request)
        assert sut.validator.password == request.body["password"]

    @pytest.mark.asyncio
    async def test_invalid_password_returns_400(self, sut: Sut) -> None:
        sut.validator.is_password_valid = False
        response = await sut.router.route(_request())
        assert response.status_code == 400
        assert response.body == InvalidParamError("password")

    @pytest.mark.asyncio
    async def test_invalid_password_does_not_reach_use_case(self, sut: Sut) -> None:
        sut.validator.is_password_valid = False
        await sut.router.route(_request())
        assert sut.use_case.calls == []

    @pytest.mark.asyncio
    async def test_falsy_result_counts_as_invalid(self, sut: Sut) -> None:
        sut.validator.is_password_valid = None
        response = await sut.router.route(_request())
        assert response.status_code == 400
        assert response.body == InvalidParamError("password")

    @pytest.mark.asyncio
    async def test_no_validator_returns_500(self) -> None:
        router = PasswordCheckRouter(PasswordCheckUseCaseSpy())
        response = await router.route(_request())
        assert response.status_code == 500
        assert response.body == ServerError()

    @pytest.mark.asyncio
    async def test_validator_without_is_valid_returns_500(self) -> None:
        router = PasswordCheckRouter(PasswordCheckUseCaseSpy(), object())
        response = await router.route(_request())
        assert response.status_code == 500
        assert response.body == ServerError()

    @pytest.mark.asyncio
    async def test_validator_with_non_callable_is_valid_returns_500(self) -> None:
        class NotCallable:
            is_valid = True

        router = PasswordCheckRouter(PasswordCheckUseCaseSpy(), NotCallable())
        response = await router.route(_request())
        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_validator_raising_returns_500(self) -> None:
        router = PasswordCheckRouter(
            PasswordCheckUseCaseSpy(), FailingPasswordValidator()
        )
        response = await router.route(_request())
        assert response.status_code == 500
        assert response.body == ServerError()


# ══════════════════════════════════════════════════════════════════════
# Use case
# ══════════════════════════════════════════════════════════════════════


class TestPasswordCheckUseCase:
    """Use case capability checks and outcomes."""

    @pytest.mark.asyncio
    async def test_called_with_request_password(self, sut: Sut) -> None:
        request = _request("any_password")
        await sut.router.route(request)
        assert sut.use_case.password == request.body["password"]

    @pytest.mark.asyncio
    async def test_no_collaborators_returns_500(self) -> None:
        response = await PasswordCheckRouter().route(_request())
        assert response.status_code == 500
        assert response.body == ServerError()

    @pytest.mark.asyncio
    async def test_no_use_case_returns_500(self) -> None:
        router = PasswordCheckRouter(None, PasswordValidatorSpy())
        response = await router.route(_request())
        assert response.status_code == 500
        assert response.body == ServerError()

    @pytest.mark.asyncio
    async def test_use_case_without_check_returns_500(self) -> None:
        router = PasswordCheckRouter(object(), PasswordValidatorSpy())
        response = await router.route(_request())
        assert response.status_code == 500
        assert response.body == ServerError()

    @pytest.mark.asyncio
    async def test_router_passed_as_use_case_returns_500(self) -> None:
        router = PasswordCheckRouter(PasswordCheckRouter(), PasswordValidatorSpy())
        response = await router.route(_request())
        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_use_case_raising_returns_500(self) -> None:
        router = PasswordCheckRouter(
            FailingPasswordCheckUseCase(), PasswordValidatorSpy()
        )
        response = await router.route(_request())
        assert response.status_code == 500
        assert response.body == ServerError()

    @pytest.mark.asyncio
    async def test_synchronous_check_result_is_used(self) -> None:
        class SyncUseCase:
            def check(self, password: str) -> bool:
                return True

        router = PasswordCheckRouter(SyncUseCase(), PasswordValidatorSpy())
        response = await router.route(_request())
        assert response.status_code == 200
        assert response.body == {"isValidPassword": True}

    @pytest.mark.asyncio
    async def test_validator_runs_before_use_case(self) -> None:
        order: list[str] = []

        class Validator:
            def is_valid(self, password: str) -> bool:
                order.append("is_valid")
                return True

        class UseCase:
            async def check(self, password: str) -> bool:
                order.append("check")
                return True

        await PasswordCheckRouter(UseCase(), Validator()).route(_request())
        assert order == ["is_valid", "check"]


# ══════════════════════════════════════════════════════════════════════
# Success
# ══════════════════════════════════════════════════════════════════════


class TestSuccess:
    """Full pipeline success."""

    @pytest.mark.asyncio
    async def test_valid_password_returns_200(self, sut: Sut) -> None:
        response = await sut.router.route(_request("valid_password"))
        assert response == HttpResponse(200, {"isValidPassword": True})

    @pytest.mark.asyncio
    async def test_rejected_password_still_returns_200(self, sut: Sut) -> None:
        sut.use_case.is_valid_password = False
        response = await sut.router.route(_request("valid_password"))
        assert response.status_code == 200
        assert response.body["isValidPassword"] is False

    @pytest.mark.asyncio
    async def test_repeated_calls_give_equal_responses(self, sut: Sut) -> None:
        first = await sut.router.route(_request("valid_password"))
        second = await sut.router.route(_request("valid_password"))
        assert first == second
        assert first is not second

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self) -> None:
        class EchoUseCase:
            async def check(self, password: str) -> bool:
                await asyncio.sleep(0)
                return password.startswith("good")

        router = PasswordCheckRouter(EchoUseCase(), PasswordValidatorSpy())
        responses = await asyncio.gather(
            router.route(_request("good_one")),
            router.route(_request("bad_one")),
            router.route(_request("good_two")),
        )
        assert [r.body["isValidPassword"] for r in responses] == [True, False, True]
