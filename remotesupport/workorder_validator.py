"""Validation rules for work orders."""

from __future__ import annotations

from remotesupport import business_log
from remotesupport import status as status_rules
from remotesupport.exceptions import StateTransitionError, ValidationError


def validate_title(title: str) -> None:
    op = "Title Validation"
    if not title:
        raise ValidationError("Title cannot be empty", "title", op)
    if len(title) < 5:
        raise ValidationError("Title must be at least 5 characters long", "title", op)
    if len(title) > 200:
        raise ValidationError("Title cannot exceed 200 characters", "title", op)


def validate_description(description: str) -> None:
    op = "Description Validation"
    if not description:
        raise ValidationError("Description cannot be empty", "description", op)
    if len(description) < 10:
        raise ValidationError(
            "Description must be at least 10 characters long", "description", op
        )
    if len(description) > 2000:
        raise ValidationError(
            "Description cannot exceed 2000 characters", "description", op
        )


def validate_category(category: str) -> None:
    op = "Category Validation"
    if not category:
        raise ValidationError("Category cannot be empty", "category", op)
    if len(category) > 100:
        raise ValidationError("Category cannot exceed 100 characters", "category", op)


def validate_status(status: str) -> None:
    op = "Status Validation"
    if not status:
        raise ValidationError("Status cannot be empty", "status", op)
    if not status_rules.is_valid_status(status):
        raise ValidationError("Invalid status value", "status", op)


def validate_status_transition(current_status: str, new_status: str) -> None:
    """Check that both statuses exist and that the move between them is allowed."""
    name = "Work Order Status Transition"
    business_log.operation_start(f"{name} Validation")
    try:
        validate_status(current_status)
        validate_status(new_status)
    except ValidationError as exc:
        business_log.validation_failed(name, exc.field, exc.message)
        raise
    if not status_rules.is_valid_transition(current_status, new_status):
        raise StateTransitionError(current_status, new_status, name)
    business_log.validation_success(
        name,
        f"Status transition from '{current_status}' to '{new_status}' is valid",
    )


def validate_assignment(work_order_id: int, assignee_id: int, assigner_id: int) -> None:
    """Check the ids taking part in assigning a work order."""
    op = "Work Order Assignment"
    business_log.operation_start(f"{op} Validation")
    try:
        if work_order_id <= 0:
            raise ValidationError("Work order ID must be positive", "workOrderId", op)
        if assignee_id <= 0:
            raise ValidationError("Assignee ID must be positive", "assigneeId", op)
        if assigner_id <= 0:
            raise ValidationError("Assigner ID must be positive", "assignerId", op)
        if assignee_id == assigner_id:
            raise ValidationError(
                "Assignee cannot be the same as assigner", "assigneeId", op
            )
    except ValidationError as exc:
        business_log.validation_failed(op, exc.field, exc.message)
        raise
    business_log.validation_success(op, "Assignment data validated successfully")


def validate_work_order_close(work_order_id: int, user_id: int, current_status: str) -> None:
    """Check that a work order in ``current_status`` may be closed."""
    op = "Work Order Close"
    business_log.operation_start(f"{op} Validation")
    try:
        if work_order_id <= 0:
            raise ValidationError("Work order ID must be positive", "workOrderId", op)
        if user_id <= 0:
            raise ValidationError("User ID must be positive", "userId", op)
        validate_status(current_status)
        if not status_rules.can_close(current_status):
            raise ValidationError(
                "Cannot close work order in current status", "status", op
            )
    except ValidationError as exc:
        business_log.validation_failed(op, exc.field, exc.message)
        raise
    business_log.validation_success(op, "Work order close data validated successfully")