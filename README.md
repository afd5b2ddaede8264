# remotesupport

Building blocks for a remote technical support system in which factory users
open work orders (tickets) and experts pick them up. It has no third-party
dependencies.

## Modules

- `remotesupport.protocol`: length-prefixed packet framing.
  `build_packet(msg_type, json_obj, binary)` produces
  `[uint32 length][uint16 type][uint32 jsonSize][json][binary]`, all big
  endian, with the JSON encoded compactly as UTF-8. `drain_packets(buffer)`
  takes every complete frame out of a `bytearray` and returns a list of
  `Packet` objects (`msg_type`, `data`, `binary`); a trailing partial frame
  stays in the buffer. A frame declaring a length too small for its header
  clears the buffer; a frame whose JSON size exceeds its payload is dropped.
  Known message types are in `MsgType`; `to_json_bytes` and `from_json_bytes`
  are the JSON helpers (anything that is not a JSON object decodes to `{}`).
- `remotesupport.status`: the work-order life cycle. `WorkOrderStatus` has
  `open`, `refused`, `processing` and `closed`, ranked in that order.
  `is_valid_transition` allows a move only to a higher rank; there are also
  `status_level`, `valid_statuses`, `is_valid_status`, `status_description`,
  `next_possible_statuses`, `can_close`, `can_refuse` and
  `can_start_processing`.
- `remotesupport.exceptions`: `BusinessError` and its subclasses
  `ValidationError`, `AuthorizationError`, `ResourceNotFoundError` and
  `StateTransitionError`, each with a `full_message()` that is also its
  `str()`.
- `remotesupport.user_validator`: `validate_username`, `validate_password`
  (at least 6 characters with a letter and a digit), `validate_email`,
  `validate_phone`, `validate_user_type` (`UserType.FACTORY` or
  `UserType.EXPERT`), plus `validate_registration` and `validate_login`. They
  raise `ValidationError` naming the failing field.
- `remotesupport.workorder_validator`: `validate_title`,
  `validate_description`, `validate_category`, `validate_status`,
  `validate_status_transition` (raises `StateTransitionError` for a move the
  life cycle forbids), `validate_assignment` and `validate_work_order_close`.
- `remotesupport.business_log`: business-level log messages (user logins,
  work-order changes, sessions, permissions, validation, events) written
  through the standard `logging` module to loggers named
  `remotesupport.system`, `remotesupport.user` and
  `remotesupport.workorder`.
- `remotesupport.tickets`: `TicketStore`, a small SQLite ticket table
  (`add`, `get`, `title`, `ids_for`, `delete`, `random_id`), usable as a
  context manager, and the `Ticket` record with `can_connect()`.
- `remotesupport.forms`: the login and registration form rules.
  `check_login` and `check_registration` raise `FormError` with the message
  to show the user; `check_registration` returns a `Registration`.
  `is_registration_ready`, `login_title` and `page_for_button` cover the
  remaining form behaviour.

## Examples

```python
from remotesupport.protocol import MsgType, build_packet, drain_packets

buffer = bytearray(build_packet(MsgType.TEXT, {"roomId": "R1", "text": "hi"}))
for packet in drain_packets(buffer):
    print(packet.msg_type, packet.data, packet.binary)
```

```python
from remotesupport.tickets import TicketStore

with TicketStore(":memory:") as store:
    sid = store.add("factory-a", "expert-b", "Pump stalls", "Stops after ten minutes")
    ticket = store.get(sid)
    print(ticket.status, ticket.can_connect())
```

```python
from remotesupport import status
from remotesupport.workorder_validator import validate_status_transition

print(status.next_possible_statuses("open"))
validate_status_transition("open", "processing")
```

## What it does not do

The package has no network server or client, no socket handling, no
graphical screens and no user account storage. It provides the framing,
rules, validation, logging and local ticket table that such programs would
build on.

## Tests

```
pip install -e .[test]
pytest
```