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
boot.dat header construction.

A boot.dat is a 256 byte header followed by the stage-2 payload.  The header
carries two SHA-256 digests: one over the payload and one over the first 0xe0
bytes of the header itself, which in turn include the payload digest.
"""

import struct
from collections import namedtuple

from .digest import sha256_digest, SHA256_DIGEST_SIZE

BOOT_DAT_HEADER_SIZE = 0x100
HEADER_PREFIX_SIZE = 0xe0
IDENT_SIZE = 0x0c
VERS_SIZE = 0x04
S2_DST = 0x40010000
MAX_PAYLOAD_SIZE = 0xffffffff

Variant = namedtuple('Variant', ['name', 'ident', 'vers'])

INSANE = Variant('insane', b'Insane BOOT\x00', b'V1.0')
CTCAER = Variant('ctcaer', b'CTCaer BOOT\x00', b'V2.5')

VARIANTS = {v.name: v for v in (INSANE, CTCAER)}


class BootDatError(Exception):
    """Base class for errors raised while building a boot.dat."""
    pass


class TruncationError(BootDatError):
    """The payload length does not fit in the 32-bit size field."""
    pass


class HashError(BootDatError):
    """A digest of unexpected length was produced."""
    pass


class VariantError(BootDatError):
    """The variant is unknown or its ident/vers fields are malformed."""
    pass


def get_variant(variant):
    """Resolve a preset name or a Variant, checking its ident and vers."""
    if isinstance(variant, str):
        try:
            return VARIANTS[variant.lower()]
        except KeyError:
            raise VariantError("Unknown variant '{}', expected one of: {}"
                               .format(variant, ', '.join(VARIANTS)))
    for field, size in (("ident", IDENT_SIZE), ("vers", VERS_SIZE)):
        value = getattr(variant, field)
        if not isinstance(value, bytes):
            raise VariantError("{} must be bytes, got {}".format(
                field, type(value).__name__))
        if len(value) != size:
            raise VariantError("{} must be {} bytes, got {}".format(
                field, size, len(value)))
        if not value.isascii():
            raise VariantError("{} must be ASCII, got {!r}".format(
                field, value))
    return variant


def _digest(data):
    digest = sha256_digest(data)
    if len(digest) != SHA256_DIGEST_SIZE:
        raise HashError("Expected a {} byte digest, got {} bytes".format(
            SHA256_DIGEST_SIZE, len(digest)))
    return digest


class BootDatHeader():
    def __init__(self, variant=INSANE):
        self.variant = get_variant(variant)
        self.ident = self.variant.ident
        self.vers = self.variant.vers
        self.sha2_s2 = bytes(SHA256_DIGEST_SIZE)
        self.s2_dst = S2_DST
        self.s2_size = 0
        # Encrypted stage-2 and stage-3 are not supported by this tool.
        self.s2_enc = 0
        self.s3_size = 0
        self.sha2_hdr = bytes(SHA256_DIGEST_SIZE)

    def __repr__(self):
        return ("<BootDatHeader variant={}, s2_dst=0x{:08x}, s2_size=0x{:x}, "
                "sha2_s2={}, sha2_hdr={}>").format(
                    self.variant.name,
                    self.s2_dst,
                    self.s2_size,
                    self.sha2_s2.hex(),
                    self.sha2_hdr.hex())

    def set_payload(self, payload):
        """Fill in the stage-2 digest and size for the given payload."""
        if len(payload) > MAX_PAYLOAD_SIZE:
            raise TruncationError(
                "Payload size 0x{:x} does not fit in 32 bits".format(
                    len(payload)))
        self.sha2_s2 = _digest(payload)
        self.s2_size = len(payload)

    def prefix(self):
        """Serialize every field preceding sha2_hdr."""
        fmt = ('<' +
               # typedef struct boot_dat_hdr {
               '12s' +   # ident    unsigned char[0x0c]
               '4s' +    # vers     unsigned char[0x04]
               '32s' +   # sha2_s2  unsigned char[0x20]
               'I' +     # s2_dst   uint32
               'I' +     # s2_size  uint32
               'I' +     # s2_enc   uint32
               '16x' +   # pad      unsigned char[0x10]
               'I' +     # s3_size  uint32
               '144x'    # pad2     unsigned char[0x90]
               )  # }
        assert struct.calcsize(fmt) == HEADER_PREFIX_SIZE
        return struct.pack(fmt,
                           self.ident,
                           self.vers,
                           self.sha2_s2,
                           self.s2_dst,
                           self.s2_size,
                           self.s2_enc,
                           self.s3_size)

    def seal(self):
        """Compute sha2_hdr over the serialized prefix."""
        self.sha2_hdr = _digest(self.prefix())

    def to_bytes(self):
        header = self.prefix() + self.sha2_hdr
        assert len(header) == BOOT_DAT_HEADER_SIZE
        return header


def build_header(payload, variant=INSANE):
    """Return a filled and sealed header for `payload`."""
    header = BootDatHeader(variant)
    # The payload digest must be in place before the header is digested.
    header.set_payload(payload)
    header.seal()
    return header


def build(payload, variant=INSANE):
    """Generate a boot.dat for the given stage-2 payload.

    Returns the 256 byte header followed by the payload. Raises
    TruncationError if the payload is larger than 4 GiB - 1 and HashError
    if a digest of the wrong size was produced.
    """
    header = build_header(payload, variant)
    return header.to_bytes() + bytes(payload)
