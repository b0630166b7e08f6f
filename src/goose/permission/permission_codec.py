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

"""Explicit wire mapping for permission records.

Records travel as a JSON object with the fields `principal_name`,
`principal_type` and `permission`. Enum members travel as their literal tags:
`AlwaysAllow`, `AllowOnce`, `DenyOnce` for `Permission`, and `Extention` (or
`Extension`) and `Tool` for `PrincipalType`.

Every decode failure raises `MalformedRecordError`. Input is never coerced to
a default member.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import TypeAdapter
from pydantic import ValidationError

from .permission_config import PermissionWireConfig
from .permission_confirmation import Permission
from .permission_confirmation import PermissionConfirmation
from .permission_confirmation import PrincipalType
from .permission_confirmation import PrincipalTypeField

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = PermissionWireConfig()

_PERMISSION_ADAPTER = TypeAdapter(Permission)
_PRINCIPAL_TYPE_ADAPTER = TypeAdapter(PrincipalTypeField)


class MalformedRecordError(ValueError):
  """Raised when external input is not a valid permission record or tag."""

  def __init__(self, message: str, errors: Optional[list[Any]] = None):
    super().__init__(message)
    self.errors = list(errors or [])


def _malformed(what: str, e: ValidationError) -> MalformedRecordError:
  errors = e.errors(include_url=False)
  logger.warning(f"Rejected malformed {what}: {errors}")
  return MalformedRecordError(f"Malformed {what}: {e}", errors)


def encode_permission(permission: Permission) -> str:
  return permission.value


def decode_permission(tag: Any) -> Permission:
  """Reads a `Permission` from its wire tag.

  Raises:
      MalformedRecordError: If `tag` is not one of the three permission tags.
  """
  try:
    return _PERMISSION_ADAPTER.validate_python(tag)
  except ValidationError as e:
    raise _malformed("permission", e) from e


def encode_principal_type(
    principal_type: PrincipalType,
    config: Optional[PermissionWireConfig] = None,
) -> str:
  """Writes the wire tag of `principal_type`.

  The extension tag follows `config.extension_tag`.
  """
  config = config or _DEFAULT_CONFIG
  if principal_type is PrincipalType.EXTENSION:
    return config.extension_tag
  return principal_type.value


def decode_principal_type(tag: Any) -> PrincipalType:
  """Reads a `PrincipalType` from its wire tag, accepting both extension spellings.

  Raises:
      MalformedRecordError: If `tag` is not a principal type tag.
  """
  try:
    return _PRINCIPAL_TYPE_ADAPTER.validate_python(tag)
  except ValidationError as e:
    raise _malformed("principal type", e) from e


def encode_confirmation(
    confirmation: PermissionConfirmation,
    config: Optional[PermissionWireConfig] = None,
) -> dict[str, str]:
  """Writes a record as a field map ready for JSON encoding.

  Args:
      confirmation: The record to encode.
      config: Wire options. Defaults to `PermissionWireConfig()`.

  Returns:
      A dict with the keys `principal_name`, `principal_type` and `permission`.
  """
  return {
      "principal_name": confirmation.principal_name,
      "principal_type": encode_principal_type(
          confirmation.principal_type, config
      ),
      "permission": encode_permission(confirmation.permission),
  }


def decode_confirmation(data: Any) -> PermissionConfirmation:
  """Reads a record from a field map.

  Unknown keys are ignored. Missing keys, values of the wrong type and
  unknown tags are errors.

  Args:
      data: A mapping, typically the result of `json.loads`.

  Returns:
      The decoded `PermissionConfirmation`.

  Raises:
      MalformedRecordError: If `data` is not a valid record.
  """
  if not isinstance(data, Mapping):
    logger.warning(
        f"Rejected malformed permission record of type {type(data).__name__}"
    )
    raise MalformedRecordError(
        "Malformed permission record: expected a mapping, got"
        f" {type(data).__name__}"
    )
  try:
    return PermissionConfirmation.model_validate(dict(data))
  except ValidationError as e:
    raise _malformed("permission record", e) from e


def confirmation_to_json(
    confirmation: PermissionConfirmation,
    config: Optional[PermissionWireConfig] = None,
) -> str:
  return json.dumps(encode_confirmation(confirmation, config))


def confirmation_from_json(text: str | bytes) -> PermissionConfirmation:
  """Reads a record from JSON text.

  Raises:
      MalformedRecordError: If `text` is not valid JSON or not a valid record.
  """
  try:
    data = json.loads(text)
  except (json.JSONDecodeError, UnicodeDecodeError) as e:
    logger.warning(f"Rejected permission record that is not JSON: {e}")
    raise MalformedRecordError(f"Malformed permission record: {e}") from e
  return decode_confirmation(data)
