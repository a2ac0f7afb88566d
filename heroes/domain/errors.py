# heroes/domain/errors.py
from __future__ import annotations

from typing import Sequence


class ProfileNotFound(LookupError):
    """Unknown profile id. Carries the valid ids so callers can point the client at them."""

    def __init__(self, profile_id: str, available_ids: Sequence[str] = ()) -> None:
        self.profile_id = profile_id
        self.available_ids = list(available_ids)
        super().__init__(f"No missionary profile found with ID: {profile_id}")
