"""Logging helpers for the business layer.

Every helper writes one record through the standard :mod:`logging` package
to a logger named ``remotesupport.<module>``. Records carry the extra
attributes ``log_module``, ``layer``, ``operation`` and ``detail``.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

LAYER = "business"


class LogModule(str, Enum):
    SYSTEM = "system"
    USER = "user"
    WORKORDER = "workorder"


def _emit(level: int, module: LogModule, operation: str, message: str) -> None:
    logger = logging.getLogger(f"remotesupport.{module.value}")
    logger.log(
        level,
        "[%s] %s: %s",
        LAYER,
        operation,
        message,
        extra={
            "log_module": module.value,
            "layer": LAYER,
            "operation": operation,
            "detail": message,
        },
    )


def _suffixed(message: str, extra: str) -> str:
    return f"{message}: {extra}" if extra else message


def _user_info(username: str, user_type: int) -> str:
    kind = "Factory" if user_type == 0 else "Expert"
    return f"'{username}' ({kind})"


def _work_order_info(ticket_id: str, user_id: int) -> str:
    info = f"'{ticket_id}'"
    if user_id > 0:
        info += f" (User: {user_id})"
    return info


def _session_info(session_id: str, user_id: int, room_id: str) -> str:
    info = f"'{session_id}' (User: {user_id})"
    if room_id:
        info += f" (Room: {room_id})"
    return info


def error(operation: str, message: str) -> None:
    _emit(logging.ERROR, LogModule.SYSTEM, operation, message)


def warning(operation: str, message: str) -> None:
    _emit(logging.WARNING, LogModule.SYSTEM, operation, message)


def info(operation: str, message: str) -> None:
    _emit(logging.INFO, LogModule.SYSTEM, operation, message)


def debug(operation: str, message: str) -> None:
    _emit(logging.DEBUG, LogModule.SYSTEM, operation, message)


def operation_start(operation: str, context: str = "") -> None:
    message = f"Operation: {operation}"
    if context:
        message += f", Context: {context}"
    _emit(logging.INFO, LogModule.SYSTEM, "Operation Start", message)


def operation_success(operation: str, result: str = "") -> None:
    message = _suffixed(f"Operation '{operation}' completed successfully", result)
    _emit(logging.INFO, LogModule.SYSTEM, "Operation Success", message)


def operation_failed(operation: str, reason: str = "") -> None:
    message = _suffixed(f"Operation '{operation}' failed", reason)
    _emit(logging.ERROR, LogModule.SYSTEM, "Operation Failed", message)


def user_login(username: str, user_type: int, success: bool, reason: str = "") -> None:
    user = _user_info(username, user_type)
    if success:
        _emit(logging.INFO, LogModule.USER, "User Login",
              f"User {user} logged in successfully")
    else:
        _emit(logging.WARNING, LogModule.USER, "User Login Failed",
              _suffixed(f"User {user} login failed", reason))


def user_logout(username: str) -> None:
    _emit(logging.INFO, LogModule.USER, "User Logout", f"User '{username}' logged out")


def user_registration(username: str, user_type: int, success: bool, reason: str = "") -> None:
    user = _user_info(username, user_type)
    if success:
        _emit(logging.INFO, LogModule.USER, "User Registration",
              f"User {user} registered successfully")
    else:
        _emit(logging.ERROR, LogModule.USER, "User Registration Failed",
              _suffixed(f"User {user} registration failed", reason))


def user_authentication(username: str, success: bool, reason: str = "") -> None:
    if success:
        _emit(logging.INFO, LogModule.USER, "User Authentication",
              f"User '{username}' authenticated successfully")
    else:
        _emit(logging.WARNING, LogModule.USER, "User Authentication Failed",
              _suffixed(f"User '{username}' authentication failed", reason))


def work_order_created(ticket_id: str, creator_id: int, success: bool, reason: str = "") -> None:
    order = _work_order_info(ticket_id, creator_id)
    if success:
        _emit(logging.INFO, LogModule.WORKORDER, "Work Order Created",
              f"Work order {order} created successfully")
    else:
        _emit(logging.ERROR, LogModule.WORKORDER, "Work Order Creation Failed",
              _suffixed(f"Work order {order} creation failed", reason))


def work_order_updated(ticket_id: str, changes: str, success: bool, reason: str = "") -> None:
    order = _work_order_info(ticket_id, 0)
    if success:
        _emit(logging.INFO, LogModule.WORKORDER, "Work Order Updated",
              _suffixed(f"Work order {order} updated successfully", changes))
    else:
        _emit(logging.ERROR, LogModule.WORKORDER, "Work Order Update Failed",
              _suffixed(f"Work order {order} update failed", reason))


def work_order_status_changed(
    ticket_id: str, old_status: str, new_status: str, success: bool
) -> None:
    order = _work_order_info(ticket_id, 0)
    if success:
        _emit(logging.INFO, LogModule.WORKORDER, "Work Order Status Changed",
              f"Work order {order} status changed from '{old_status}' to '{new_status}'")
    else:
        _emit(logging.ERROR, LogModule.WORKORDER, "Work Order Status Change Failed",
              f"Failed to change work order {order} status from "
              f"'{old_status}' to '{new_status}'")


def work_order_assigned(ticket_id: str, assignee_id: int, success: bool, reason: str = "") -> None:
    order = _work_order_info(ticket_id, assignee_id)
    if success:
        _emit(logging.INFO, LogModule.WORKORDER, "Work Order Assigned",
              f"Work order {order} assigned successfully")
    else:
        _emit(logging.ERROR, LogModule.WORKORDER, "Work Order Assignment Failed",
              _suffixed(f"Work order {order} assignment failed", reason))


def work_order_closed(ticket_id: str, user_id: int, success: bool, reason: str = "") -> None:
    order = _work_order_info(ticket_id, user_id)
    if success:
        _emit(logging.INFO, LogModule.WORKORDER, "Work Order Closed",
              f"Work order {order} closed successfully")
    else:
        _emit(logging.ERROR, LogModule.WORKORDER, "Work Order Close Failed",
              _suffixed(f"Work order {order} close failed", reason))


def session_created(session_id: str, user_id: int, room_id: str) -> None:
    _emit(logging.INFO, LogModule.SYSTEM, "Session Created",
          f"Session {_session_info(session_id, user_id, room_id)} created")


def session_joined(session_id: str, user_id: int, room_id: str) -> None:
    _emit(logging.INFO, LogModule.SYSTEM, "Session Joined",
          f"User joined session {_session_info(session_id, user_id, room_id)}")


def session_left(session_id: str, user_id: int, room_id: str) -> None:
    _emit(logging.INFO, LogModule.SYSTEM, "Session Left",
          f"User left session {_session_info(session_id, user_id, room_id)}")


def session_expired(session_id: str, user_id: int) -> None:
    _emit(logging.WARNING, LogModule.SYSTEM, "Session Expired",
          f"Session '{session_id}' for user {user_id} expired")


def permission_check(operation: str, user_id: int, granted: bool, reason: str = "") -> None:
    if granted:
        _emit(logging.DEBUG, LogModule.SYSTEM, "Permission Granted",
              f"User {user_id} granted permission for operation '{operation}'")
    else:
        _emit(logging.WARNING, LogModule.SYSTEM, "Permission Denied",
              _suffixed(f"User {user_id} denied permission for operation '{operation}'",
                        reason))


def authorization_failed(operation: str, user_id: int, reason: str) -> None:
    message = _suffixed(
        f"Authorization failed for user {user_id} on operation '{operation}'", reason
    )
    _emit(logging.ERROR, LogModule.SYSTEM, "Authorization Failed", message)


def validation_failed(operation: str, field: str, reason: str) -> None:
    _emit(logging.WARNING, LogModule.SYSTEM, "Validation Failed",
          f"Operation '{operation}' validation failed for field '{field}': {reason}")


def validation_success(operation: str, context: str = "") -> None:
    _emit(logging.DEBUG, LogModule.SYSTEM, "Validation Success",
          _suffixed(f"Operation '{operation}' validation successful", context))


def event_triggered(event_type: str, context: str, data: dict[str, Any] | None = None) -> None:
    message = f"Event '{event_type}' triggered in context '{context}'"
    if data:
        rendered = json.dumps(data, indent=4, sort_keys=True, ensure_ascii=False)
        message += f" with data: {rendered}\n"
    _emit(logging.INFO, LogModule.SYSTEM, "Event Triggered", message)


def event_handled(event_type: str, success: bool, result: str = "") -> None:
    if success:
        _emit(logging.INFO, LogModule.SYSTEM, "Event Handled",
              _suffixed(f"Event '{event_type}' handled successfully", result))
    else:
        _emit(logging.ERROR, LogModule.SYSTEM, "Event Handling Failed",
              f"Failed to handle event '{event_type}': {result}")