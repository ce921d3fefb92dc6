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
Describe a freshly built boot.dat header and save it in YAML format.
"""
import yaml

HEADER_ITEMS = ("variant", "ident", "vers", "sha2_s2", "s2_dst", "s2_size",
                "s2_enc", "s3_size", "sha2_hdr")


def _text(field):
    return field.rstrip(b"\x00").decode("ascii")


def header_info(header):
    """Return the header fields as an ordered dictionary."""
    values = {
        "variant": header.variant.name,
        "ident": _text(header.ident),
        "vers": _text(header.vers),
        "sha2_s2": header.sha2_s2.hex(),
        "s2_dst": header.s2_dst,
        "s2_size": header.s2_size,
        "s2_enc": header.s2_enc,
        "s3_size": header.s3_size,
        "sha2_hdr": header.sha2_hdr.hex(),
    }
    return {key: values[key] for key in HEADER_ITEMS}


def dump_manifest(header, outfile):
    with open(outfile, "w") as outf:
        # sort_keys - from pyyaml 5.1
        yaml.dump({"header": header_info(header)}, outf, sort_keys=False)
