# SPDX-License-Identifier: Apache-2.0
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

from sxbootdat import bootdat


@pytest.fixture
def payload():
    return bytes([0x0a, 0x0b, 0x0c])


@pytest.fixture
def payload_file(tmp_path, payload):
    path = tmp_path / "payload.bin"
    path.write_bytes(payload)
    return path


@pytest.fixture(params=[*bootdat.VARIANTS])
def variant(request):
    return bootdat.VARIANTS[request.param]
