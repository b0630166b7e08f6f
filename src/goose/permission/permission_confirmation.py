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

"""Defines the data structures for recording a permission decision.

This module includes classes for:
- `Permission`: Enumerates the outcomes of a decision (always allow, allow once, deny once).
- `PrincipalType`: Enumerates the kinds of principal a decision can apply to.
- `PermissionConfirmation`: Ties a principal identity to the decision made about it.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic import BeforeValidator
from pydantic import ConfigDict
from pydantic import StrictStr
from typing_extensions import Annotated


class Permission(str, Enum):
  """The outcome of a permission decision.

  There is intentionally no persistent deny: a denied principal is asked again
  on its next request.
  """

  ALWAYS_ALLOW = "AlwaysAllow"
  """The grant persists; future identical requests are not prompted again."""
  ALLOW_ONCE = "AllowOnce"
  """The grant is valid for the current request only."""
  DENY_ONCE = "DenyOnce"
  """The denial is valid for the current request only."""

  @property
  def is_allowed(self) -> bool:
    return self is not Permission.DENY_ONCE

  @property
  def is_persistent(self) -> bool:
    """Whether the decision should be kept beyond the current request."""
    return self is Permission.ALWAYS_ALLOW

  @classmethod
  def from_confirmed(cls, confirmed: bool) -> Permission:
    """Maps a plain yes/no tool call confirmation to a one-time decision.

    Args:
        confirmed: The `confirmed` flag of a tool call confirmation reply.

    Returns:
        `Permission.ALLOW_ONCE` if confirmed, `Permission.DENY_ONCE` otherwise.
    """
    return cls.ALLOW_ONCE if confirmed else cls.DENY_ONCE


EXTENSION_TAG = "Extention"
"""Wire tag of `PrincipalType.EXTENSION` as emitted by existing peers (sic)."""
EXTENSION_TAG_CORRECTED = "Extension"
"""Corrected spelling of the extension tag, accepted wherever a tag is read."""


class PrincipalType(str, Enum):
  """The kind of entity a permission decision applies to."""

  EXTENSION = EXTENSION_TAG
  """A loaded extension acting as principal."""
  TOOL = "Tool"
  """An individual tool, usually exposed by an extension, acting as principal."""


def _normalize_principal_tag(value: Any) -> Any:
  if value == EXTENSION_TAG_CORRECTED:
    return PrincipalType.EXTENSION
  return value


PrincipalTypeField = Annotated[
    PrincipalType, BeforeValidator(_normalize_principal_tag)
]
"""`PrincipalType` that also accepts the corrected extension spelling."""


class PermissionConfirmation(BaseModel):
  """Principal `principal_name` of kind `principal_type` was given `permission`.

  Records are immutable. A changed decision is a new record.
  """

  model_config = ConfigDict(frozen=True)

  principal_name: StrictStr
  """The extension or tool name. Not checked for emptiness or format."""
  principal_type: PrincipalTypeField
  """Which kind of principal `principal_name` refers to."""
  permission: Permission
  """The decision made about the principal."""

  @property
  def principal_key(self) -> tuple[str, PrincipalType]:
    """The identity of the principal; names alone may collide across kinds."""
    return (self.principal_name, self.principal_type)
