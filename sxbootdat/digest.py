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

"""
SHA-256 digest helper used for the boot.dat integrity fields.
"""

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes

SHA256_DIGEST_SIZE = 32


def sha256_digest(data):
    """Return the 32 byte SHA-256 digest of `data`."""
    sha = hashes.Hash(hashes.SHA256(), backend=default_backend())
    sha.update(bytes(data))
    return sha.finalize()
