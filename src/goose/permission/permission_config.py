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

"""Configuration of the permission record wire format."""

from __future__ import annotations

import os
from typing import Literal, Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

EXTENSION_TAG_ENV_VAR = "GOOSE_PERMISSION_EXTENSION_TAG"


class PermissionWireConfig(BaseModel):
  """Controls how permission records are written to the wire.

  Reading is unaffected: every supported spelling is always accepted.
  """

  model_config = ConfigDict(frozen=True)

  extension_tag: Literal["Extention", "Extension"] = Field(
      default="Extention",
      description=(
          "Tag written for extension principals. 'Extention' is the spelling"
          " existing peers produce and expect; 'Extension' is the corrected"
          " spelling and is only safe once every reader accepts it."
      ),
  )

  @classmethod
  def from_env(cls, default: Optional[PermissionWireConfig] = None):
    """Builds a config from `GOOSE_PERMISSION_EXTENSION_TAG`.

    Args:
        default: Config whose values are kept for unset variables.

    Returns:
        A `PermissionWireConfig`.

    Raises:
        pydantic.ValidationError: If the variable holds an unsupported tag.
    """
    base = default or cls()
    extension_tag = os.getenv(EXTENSION_TAG_ENV_VAR) or base.extension_tag
    return cls(extension_tag=extension_tag)
