#! /usr/bin/env python3
#
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

import os.path
import sys

import click
from intelhex import IntelHex

from sxbootdat import bootdat, sxbootdat_version
from sxbootdat.manifest import dump_manifest

MIN_PYTHON_VERSION = (3, 7)
if sys.version_info < MIN_PYTHON_VERSION:
    sys.exit("Python %s.%s or newer is required by sxbootdat."
             % MIN_PYTHON_VERSION)

INTEL_HEX_EXT = "hex"
DEFAULT_OUTFILE = "boot.dat"
valid_variants = [*bootdat.VARIANTS]


def load_payload(path):
    """Read a stage-2 payload, from Intel HEX if the extension says so"""
    ext = os.path.splitext(path)[1][1:].lower()
    try:
        if ext == INTEL_HEX_EXT:
            ih = IntelHex(path)
            return bytes(ih.tobinarray())
        with open(path, 'rb') as f:
            return f.read()
    except FileNotFoundError:
        raise click.UsageError("Input file not found")


def save_boot_dat(path, data):
    with open(path, 'wb') as f:
        f.write(data)


@click.argument('outfile', default=DEFAULT_OUTFILE, required=False)
@click.argument('infile')
@click.option('-s', '--silent', default=False, is_flag=True,
              help='Do not print boot.dat information to output')
@click.option('-o', '--manifest', metavar='filename', required=False,
              help='Save the header fields to this file in YAML format')
@click.option('-V', '--variant', type=click.Choice(valid_variants),
              default=bootdat.INSANE.name,
              help='Header ident/version preset. '
                   'Valid variants: {}'.format(', '.join(valid_variants)))
@click.command(help='''Create a boot.dat from a stage-2 payload\n
               INFILE is parsed as Intel HEX if it has a .hex extension,
               otherwise binary format is used. OUTFILE defaults to
               boot.dat''')
def create(variant, manifest, silent, infile, outfile):
    payload = load_payload(infile)
    try:
        header = bootdat.build_header(payload, variant)
    except bootdat.BootDatError as e:
        raise click.ClickException(str(e))
    save_boot_dat(outfile, header.to_bytes() + payload)

    if manifest is not None:
        dump_manifest(header, manifest)

    if silent:
        return
    print("Created {} ({})".format(outfile, variant))
    print("Payload size: {:#x}".format(header.s2_size))
    print("Payload digest: {}".format(header.sha2_s2.hex()))
    print("Header digest: {}".format(header.sha2_hdr.hex()))


class AliasesGroup(click.Group):

    _aliases = {
        "sign": "create",
    }

    def list_commands(self, ctx):
        cmds = [k for k in self.commands]
        aliases = [k for k in self._aliases]
        return sorted(cmds + aliases)

    def get_command(self, ctx, cmd_name):
        rv = click.Group.get_command(self, ctx, cmd_name)
        if rv is not None:
            return rv
        if cmd_name in self._aliases:
            return click.Group.get_command(self, ctx, self._aliases[cmd_name])
        return None


@click.command(help='Print sxbootdat version information')
def version():
    print(sxbootdat_version)


@click.command(cls=AliasesGroup,
               context_settings=dict(help_option_names=['-h', '--help']))
def sxbootdat():
    pass


sxbootdat.add_command(create)
sxbootdat.add_command(version)


if __name__ == '__main__':
    sxbootdat()
