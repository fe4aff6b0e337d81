"""Protocol interfaces for destination member capabilities.

Structural typing, no inheritance required: any class with a matching
``set`` method is picked up by the binder.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Settable capability
# ---------------------------------------------------------------------------

@runtime_checkable
class Settable(Protocol):
    """A member type that parses and validates its own raw form value.

    The binder constructs the type with no arguments and calls ``set`` with
    the raw string. Any exception raised is reported as the field error and
    no bound checking is applied.
    """

    def set(self, raw: str) -> None: ...
