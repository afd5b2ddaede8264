"""Work order statuses and the rules for moving between them."""

from __future__ import annotations

from enum import Enum

from remotesupport import business_log


class WorkOrderStatus(str, Enum):
    OPEN = "open"
    PROCESSING = "processing"
    REFUSED = "refused"
    CLOSED = "closed"


_LEVELS = {
    WorkOrderStatus.OPEN: 0,
    WorkOrderStatus.REFUSED: 3,
    WorkOrderStatus.PROCESSING: 6,
    WorkOrderStatus.CLOSED: 9,
}

_DESCRIPTIONS = {
    WorkOrderStatus.OPEN: "待处理",
    WorkOrderStatus.PROCESSING: "处理中",
    WorkOrderStatus.REFUSED: "已拒绝",
    WorkOrderStatus.CLOSED: "已关闭",
}

_NEXT = {
    WorkOrderStatus.OPEN: [
        WorkOrderStatus.PROCESSING,
        WorkOrderStatus.REFUSED,
        WorkOrderStatus.CLOSED,
    ],
    WorkOrderStatus.PROCESSING: [WorkOrderStatus.REFUSED, WorkOrderStatus.CLOSED],
    WorkOrderStatus.REFUSED: [WorkOrderStatus.OPEN, WorkOrderStatus.CLOSED],
    WorkOrderStatus.CLOSED: [],
}


def _coerce(status: object) -> WorkOrderStatus | None:
    try:
        return WorkOrderStatus(status)
    except ValueError:
        return None


def status_level(status: str) -> int:
    """Rank of a status; -1 for an unknown one."""
    member = _coerce(status)
    return _LEVELS[member] if member is not None else -1


def is_valid_transition(from_status: str, to_status: str) -> bool:
    """A status may only move to one of strictly higher rank."""
    from_level = status_level(from_status)
    to_level = status_level(to_status)
    if from_level == -1 or to_level == -1:
        business_log.warning(
            "Status Transition",
            f"Invalid status: from '{from_status}' (level: {from_level}) "
            f"to '{to_status}' (level: {to_level})",
        )
        return False
    if to_level <= from_level:
        business_log.warning(
            "Status Transition",
            f"Invalid transition: cannot go from '{from_status}' (level: {from_level}) "
            f"to '{to_status}' (level: {to_level})",
        )
        return False
    return True


def valid_statuses() -> list[WorkOrderStatus]:
    return [
        WorkOrderStatus.OPEN,
        WorkOrderStatus.REFUSED,
        WorkOrderStatus.PROCESSING,
        WorkOrderStatus.CLOSED,
    ]


def is_valid_status(status: str) -> bool:
    return status_level(status) != -1


def status_description(status: str) -> str:
    member = _coerce(status)
    return _DESCRIPTIONS[member] if member is not None else "未知状态"


def next_possible_statuses(current_status: str) -> list[WorkOrderStatus]:
    member = _coerce(current_status)
    return list(_NEXT[member]) if member is not None else []


def can_close(current_status: str) -> bool:
    return _coerce(current_status) in (
        WorkOrderStatus.OPEN,
        WorkOrderStatus.PROCESSING,
        WorkOrderStatus.REFUSED,
    )


def can_refuse(current_status: str) -> bool:
    return _coerce(current_status) in (WorkOrderStatus.OPEN, WorkOrderStatus.PROCESSING)


def can_start_processing(current_status: str) -> bool:
    return _coerce(current_status) is WorkOrderStatus.OPEN