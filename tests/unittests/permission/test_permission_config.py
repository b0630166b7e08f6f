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

import pytest
from pydantic import ValidationError

from goose.permission.permission_config import EXTENSION_TAG_ENV_VAR
from goose.permission.permission_config import PermissionWireConfig


def test_default_keeps_existing_spelling():
  assert PermissionWireConfig().extension_tag == "Extention"


def test_rejects_unknown_tag():
  with pytest.raises(ValidationError):
    PermissionWireConfig(extension_tag="Plugin")


def test_from_env__unset(monkeypatch):
  monkeypatch.delenv(EXTENSION_TAG_ENV_VAR, raising=False)
  assert PermissionWireConfig.from_env().extension_tag == "Extention"


def test_from_env__empty_keeps_default(monkeypatch):
  monkeypatch.setenv(EXTENSION_TAG_ENV_VAR, "")
  default = PermissionWireConfig(extension_tag="Extension")
  assert PermissionWireConfig.from_env(default).extension_tag == "Extension"


def test_from_env__corrected_spelling(monkeypatch):
  monkeypatch.setenv(EXTENSION_TAG_ENV_VAR, "Extension")
  assert PermissionWireConfig.from_env().extension_tag == "Extension"


def test_from_env__invalid(monkeypatch):
  monkeypatch.setenv(EXTENSION_TAG_ENV_VAR, "extension")
  with pytest.raises(ValidationError):
    PermissionWireConfig.from_env()


def test_is_immutable():
  config = PermissionWireConfig()
  with pytest.raises(ValidationError):
    config.extension_tag = "Extension"
