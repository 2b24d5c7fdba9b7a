"""
BalanceInfo DTO for account balances fetched from a provider.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class BalanceInfo:
    """Account balance as read through a ``BalanceSpec``.

    Unresolved paths come back as ``None``.

    Attributes:
        provider: Provider id the balance belongs to.
        raw: Payload at ``response_path`` (the whole body when unset).
        balance: Value at ``balance_path``.
        currency: Value at ``currency_path``.
        is_available: Value at ``available_path``.
        fields: Values of ``response_fields`` keyed by field path.
    """

    provider: str
    raw: Any = None
    balance: Any = None
    currency: Any = None
    is_available: Any = None
    fields: Dict[str, Any] = field(default_factory=dict)

    def get(self, field_path: str) -> Optional[Any]:
        """Return a configured field value by path (``None`` when absent)."""
        return self.fields.get(field_path)


__all__ = ["BalanceInfo"]
