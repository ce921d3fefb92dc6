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
Build boot.dat containers for the SX Pro loader.
"""

from .bootdat import (
    BootDatError, BootDatHeader, HashError, TruncationError, Variant,
    VariantError, VARIANTS, CTCAER, INSANE, build, build_header)

sxbootdat_version = "1.0.0"


def get_version():
    """Return the release tag of this package."""
    return sxbootdat_version
