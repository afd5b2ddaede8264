import logging

import pytest

from remotesupport import workorder_validator as wv
from remotesupport.exceptions import StateTransitionError, ValidationError


def _operations(caplog):
    return [getattr(r, "operation", None) for r in caplog.records]


@pytest.mark.parametrize("title", ["", "abcd", "x" * 201])
def test_bad_titles(title):
    with pytest.raises(ValidationError) as info:
        wv.validate_title(title)
    assert info.value.field == "title"


def test_title_limits_accepted(caplog):
    with caplog.at_level(logging.DEBUG, logger="remotesupport"):
        assert wv.validate_title("abcde") is None
        assert wv.validate_title("x" * 200) is None
    assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []


def test_title_empty_message():
    with pytest.raises(ValidationError) as info:
        wv.validate_title("")
    assert info.value.message == "Title cannot be empty"


@pytest.mark.parametrize("description", ["", "x" * 9, "x" * 2001])
def test_bad_descriptions(description):
    with pytest.raises(ValidationError) as info:
        wv.validate_description(description)
    assert info.value.field == "description"


def test_category_limits():
    with pytest.raises(ValidationError) as info:
        wv.validate_category("x" * 101)
    assert info.value.message == "Category cannot exceed 100 characters"
    with pytest.raises(ValidationError) as info:
        wv.validate_category("")
    assert info.value.field == "category"


@pytest.mark.parametrize(
    "value, message",
    [("", "Status cannot be empty"), ("pending", "Invalid status value")],
)
def test_bad_status(value, message):
    with pytest.raises(ValidationError) as info:
        wv.validate_status(value)
    assert info.value.message == message
    assert info.value.field == "status"


def test_valid_transition_logs_success(caplog):
    with caplog.at_level(logging.DEBUG, logger="remotesupport"):
        wv.validate_status_transition("open", "processing")
    assert "Validation Success" in _operations(caplog)


def test_backward_transition_raises_state_error():
    with pytest.raises(StateTransitionError) as info:
        wv.validate_status_transition("processing", "open")
    assert info.value.current_state == "processing"
    assert info.value.target_state == "open"


def test_transition_with_unknown_status_is_validation_error(caplog):
    with caplog.at_level(logging.DEBUG, logger="remotesupport"):
        with pytest.raises(ValidationError) as info:
            wv.validate_status_transition("open", "bogus")
    assert info.value.field == "status"
    assert "Validation Failed" in _operations(caplog)


@pytest.mark.parametrize(
    "ids, field",
    [
        ((0, 2, 3), "workOrderId"),
        ((1, 0, 3), "assigneeId"),
        ((1, 2, -1), "assignerId"),
        ((1, 2, 2), "assigneeId"),
    ],
)
def test_bad_assignment(ids, field):
    with pytest.raises(ValidationError) as info:
        wv.validate_assignment(*ids)
    assert info.value.field == field


def test_good_assignment_logs_success(caplog):
    with caplog.at_level(logging.DEBUG, logger="remotesupport"):
        wv.validate_assignment(1, 2, 3)
    assert "Validation Success" in _operations(caplog)


def test_close_closed_order_rejected():
    with pytest.raises(ValidationError) as info:
        wv.validate_work_order_close(1, 1, "closed")
    assert info.value.message == "Cannot close work order in current status"


@pytest.mark.parametrize("current", ["open", "processing", "refused"])
def test_close_allowed(caplog, current):
    with caplog.at_level(logging.DEBUG, logger="remotesupport"):
        wv.validate_work_order_close(1, 1, current)
    assert "Validation Success" in _operations(caplog)


def test_close_bad_user():
    with pytest.raises(ValidationError) as info:
        wv.validate_work_order_close(1, 0, "open")
    assert info.value.field == "userId"