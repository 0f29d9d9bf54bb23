"""Strongly typed identifiers for forum entities.

Identifiers are opaque strings assigned by the backend. NewType keeps
item, user and discussion ids from being mixed up.
"""

from typing import NewType

QAItemId = NewType("QAItemId", str)
UserId = NewType("UserId", str)
ContextId = NewType("ContextId", str)
