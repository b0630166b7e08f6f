# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""In-memory store of standing permission grants.

Only `AlwaysAllow` decisions are kept. One-time decisions are consumed by the
caller and never reach the store. Records are keyed by the pair
(`principal_name`, `principal_type`), so a tool and an extension that share a
name never share a grant.

The store does no locking. Callers that check and record permissions for the
same principal concurrently must serialize those calls themselves.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from .permission_codec import decode_confirmation
from .permission_codec import decode_principal_type
from .permission_codec import encode_confirmation
from .permission_config import PermissionWireConfig
from .permission_confirmation import PermissionConfirmation
from .permission_confirmation import PrincipalType

logger = logging.getLogger(__name__)

PrincipalKey = tuple[str, PrincipalType]


class InMemoryPermissionStore(object):
  """Keeps `AlwaysAllow` records for reuse across requests."""

  def __init__(self):
    self._records: dict[PrincipalKey, PermissionConfirmation] = {}

  def __len__(self) -> int:
    return len(self._records)

  def __contains__(self, key: object) -> bool:
    if not isinstance(key, tuple) or len(key) != 2:
      return False
    return self._key(*key) in self._records

  def record(self, confirmation: PermissionConfirmation) -> bool:
    """Stores `confirmation` if it is a standing grant.

    A newer record for the same principal replaces the older one.

    Args:
        confirmation: The decision just made.

    Returns:
        True if the record was stored, False for one-time decisions.
    """
    if not confirmation.permission.is_persistent:
      logger.debug(
          f"Not storing {confirmation.permission.value} for"
          f" {confirmation.principal_type.name.lower()}"
          f" '{confirmation.principal_name}'"
      )
      return False
    self._records[confirmation.principal_key] = confirmation
    logger.info(
        f"Stored {confirmation.permission.value} for"
        f" {confirmation.principal_type.name.lower()}"
        f" '{confirmation.principal_name}'"
    )
    return True

  def _key(self, principal_name: str, principal_type: Any) -> PrincipalKey:
    return (principal_name, decode_principal_type(principal_type))

  def lookup(
      self, principal_name: str, principal_type: PrincipalType | str
  ) -> Optional[PermissionConfirmation]:
    """Returns the standing grant of a principal, or None.

    `principal_type` may be a member or any tag `decode_principal_type`
    accepts.

    Raises:
        MalformedRecordError: If `principal_type` is not a principal type.
    """
    return self._records.get(self._key(principal_name, principal_type))

  def is_always_allowed(
      self, principal_name: str, principal_type: PrincipalType | str
  ) -> bool:
    return self.lookup(principal_name, principal_type) is not None

  def revoke(
      self, principal_name: str, principal_type: PrincipalType | str
  ) -> Optional[PermissionConfirmation]:
    """Removes the standing grant of a principal.

    Returns:
        The removed record, or None if the principal had no grant.
    """
    removed = self._records.pop(self._key(principal_name, principal_type), None)
    if removed is not None:
      logger.info(
          f"Revoked {removed.permission.value} for"
          f" {removed.principal_type.name.lower()}"
          f" '{removed.principal_name}'"
      )
    return removed

  def list_records(self) -> list[PermissionConfirmation]:
    return list(self._records.values())

  def export_records(
      self, config: Optional[PermissionWireConfig] = None
  ) -> list[dict[str, str]]:
    """Encodes every stored record for hand-off to a persistence layer."""
    return [
        encode_confirmation(confirmation, config)
        for confirmation in self._records.values()
    ]

  def import_records(self, data: Iterable[Any]) -> int:
    """Loads records previously produced by `export_records`.

    Every entry is decoded before the store changes, so a malformed entry
    leaves the store untouched. Entries that are not standing grants are
    skipped.

    Args:
        data: Encoded records.

    Returns:
        The number of distinct principals given a standing grant.

    Raises:
        MalformedRecordError: If any entry is not a valid record.
    """
    confirmations = [decode_confirmation(entry) for entry in data]
    return len({
        confirmation.principal_key
        for confirmation in confirmations
        if self.record(confirmation)
    })
