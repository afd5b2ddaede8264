import pytest

from remotesupport.exceptions import (
    AuthorizationError,
    BusinessError,
    ResourceNotFoundError,
    StateTransitionError,
    ValidationError,
)


def test_business_error_with_operation():
    err = BusinessError("bad input", "create")
    assert err.full_message() == "Operation 'create': bad input"
    assert err.message == "bad input"
    assert err.operation == "create"


def test_business_error_without_operation():
    err = BusinessError("bad input")
    assert err.full_message() == "bad input"
    assert str(err) == "bad input"


def test_validation_error_prefixes_field():
    err = ValidationError("too short", "title", "check")
    assert err.full_message() == "Field 'title': Operation 'check': too short"
    assert err.field == "title"


def test_validation_error_without_field():
    err = ValidationError("too short")
    assert err.full_message() == "too short"


def test_authorization_error_positive_user():
    err = AuthorizationError("denied", 5)
    assert err.full_message() == "User 5: denied"
    assert err.user_id == 5


def test_authorization_error_default_user_omitted():
    err = AuthorizationError("denied", operation="close")
    assert err.user_id == -1
    assert err.full_message() == "Operation 'close': denied"


def test_resource_not_found_with_details():
    err = ResourceNotFoundError("Ticket", "42")
    assert err.full_message() == "Ticket '42' not found"
    assert err.message == "Resource not found"


def test_resource_not_found_missing_id_falls_back():
    err = ResourceNotFoundError("Ticket", "", "lookup")
    assert err.full_message() == "Operation 'lookup': Resource not found"


def test_state_transition_message():
    err = StateTransitionError("open", "closed")
    assert err.full_message() == "Cannot transition from 'open' to 'closed'"
    assert err.message == "Invalid state transition"


def test_state_transition_missing_target_falls_back():
    err = StateTransitionError("open", "")
    assert err.full_message() == "Invalid state transition"


@pytest.mark.parametrize(
    "err",
    [
        ValidationError("x", "f"),
        AuthorizationError("x", 3),
        ResourceNotFoundError("T", "1"),
        StateTransitionError("a", "b"),
    ],
)
def test_subclasses_caught_as_business_error(err):
    with pytest.raises(BusinessError) as info:
        raise err
    assert str(info.value) == err.full_message()