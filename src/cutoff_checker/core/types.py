"""Type aliases used across the cutoff checker."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
BankId = str
RailId = str
Minutes = int  # minutes since midnight, Eastern Time
