"""Exceptions raised by the business layer."""

from __future__ import annotations


class BusinessError(Exception):
    """Base class for business rule failures."""

    def __init__(self, message: str, operation: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation

    def full_message(self) -> str:
        if self.operation:
            return f"Operation '{self.operation}': {self.message}"
        return self.message

    def __str__(self) -> str:
        return self.full_message()


class ValidationError(BusinessError):
    """Input data broke a validation rule."""

    def __init__(self, message: str, field: str = "", operation: str = "") -> None:
        super().__init__(message, operation)
        self.field = field

    def full_message(self) -> str:
        text = super().full_message()
        if self.field:
            text = f"Field '{self.field}': {text}"
        return text


class AuthorizationError(BusinessError):
    """A user attempted something they may not do."""

    def __init__(self, message: str, user_id: int = -1, operation: str = "") -> None:
        super().__init__(message, operation)
        self.user_id = user_id

    def full_message(self) -> str:
        text = super().full_message()
        if self.user_id > 0:
            text = f"User {self.user_id}: {text}"
        return text


class ResourceNotFoundError(BusinessError):
    """A referenced resource does not exist."""

    def __init__(self, resource_type: str, resource_id: str, operation: str = "") -> None:
        super().__init__("Resource not found", operation)
        self.resource_type = resource_type
        self.resource_id = resource_id

    def full_message(self) -> str:
        if self.resource_type and self.resource_id:
            return f"{self.resource_type} '{self.resource_id}' not found"
        return super().full_message()


class StateTransitionError(BusinessError):
    """A status change that the workflow does not allow."""

    def __init__(self, current_state: str, target_state: str, operation: str = "") -> None:
        super().__init__("Invalid state transition", operation)
        self.current_state = current_state
        self.target_state = target_state

    def full_message(self) -> str:
        if self.current_state and self.target_state:
            return (
                f"Cannot transition from '{self.current_state}' "
                f"to '{self.target_state}'"
            )
        return super().full_message()