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

"""Permission decisions about extensions and tools."""

from .permission_codec import confirmation_from_json
from .permission_codec import confirmation_to_json
from .permission_codec import decode_confirmation
from .permission_codec import decode_permission
from .permission_codec import decode_principal_type
from .permission_codec import encode_confirmation
from .permission_codec import encode_permission
from .permission_codec import encode_principal_type
from .permission_codec import MalformedRecordError
from .permission_config import PermissionWireConfig
from .permission_confirmation import Permission
from .permission_confirmation import PermissionConfirmation
from .permission_confirmation import PrincipalType
from .permission_store import InMemoryPermissionStore

__all__ = [
    "confirmation_from_json",
    "confirmation_to_json",
    "decode_confirmation",
    "decode_permission",
    "decode_principal_type",
    "encode_confirmation",
    "encode_permission",
    "encode_principal_type",
    "InMemoryPermissionStore",
    "MalformedRecordError",
    "Permission",
    "PermissionConfirmation",
    "PermissionWireConfig",
    "PrincipalType",
]
