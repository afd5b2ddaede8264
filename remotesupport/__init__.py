"""Packet framing, work-order status rules, validators, business logging, form rules and SQLite ticket storage for remote technical support."""

__version__ = "0.1.0"