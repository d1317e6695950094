# cfxaddress - Conflux base32 address codec
# Copyright (C) 2024 The cfxaddress Developers
#
# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Command line converter between hex and base32 addresses."""

import argparse

from . import networks, util
from .address import Address
from .errors import AddressError
from .rpc import RpcNetworkIdProvider
from .version import PACKAGE_VERSION


def cmd_tobase32(args):
    if args.rpc is not None:
        addr = Address.from_hex(args.hex)
        addr.complete_by_network_lookup(RpcNetworkIdProvider(args.rpc or None))
    else:
        network_id = args.network_id if args.network_id is not None else networks.net.NETWORK_ID
        addr = Address.from_hex(args.hex, network_id)
    print(addr.to_base32(verbose=args.verbose_format))


def cmd_tohex(args):
    addr = Address.from_base32(args.address)
    hex_string, network_id = addr.to_hex()
    print('0x' + hex_string, network_id)


def cmd_validate(args):
    addr = Address.from_base32(args.address)
    if not addr.is_valid():
        raise AddressError('address {} has invalid type'.format(args.address), args.address)
    print(addr.address_type)


def get_parser():
    parser = argparse.ArgumentParser(prog='cfxaddress', description='Convert Conflux account addresses.')
    parser.add_argument('--version', action='version', version='%(prog)s ' + PACKAGE_VERSION)
    parser.add_argument('-v', '--verbose', action='store_true', help='print diagnostics to stderr')
    parser.add_argument('--testnet', action='store_true', help='use testnet defaults')
    subparsers = parser.add_subparsers(dest='cmd', metavar='<command>')
    subparsers.required = True

    p = subparsers.add_parser('tobase32', help='convert a hex address to base32')
    p.add_argument('hex', help='hex address, optionally 0x prefixed')
    group = p.add_mutually_exclusive_group()
    group.add_argument('--network-id', type=int, help='numeric network id (default: selected network)')
    group.add_argument('--rpc', nargs='?', const='', metavar='URL',
                       help='ask a node for the network id (default URL: selected network)')
    p.add_argument('--verbose-format', action='store_true',
                   help='print the uppercase form with the address type label')
    p.set_defaults(func=cmd_tobase32)

    p = subparsers.add_parser('tohex', help='convert a base32 address to hex and network id')
    p.add_argument('address')
    p.set_defaults(func=cmd_tohex)

    p = subparsers.add_parser('validate', help='check a base32 address')
    p.add_argument('address')
    p.set_defaults(func=cmd_validate)
    return parser


def main(argv=None):
    args = get_parser().parse_args(argv)
    util.set_verbosity(args.verbose)
    if args.testnet:
        networks.set_testnet()
    else:
        networks.set_mainnet()
    try:
        args.func(args)
    except AddressError as e:
        util.print_stderr('error:', e)
        return 1
    return 0
