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

"""CIP-37 base32 account addresses.

An address is rendered as ``<network>:[<type>:]<body><checksum>``. The
network prefix is part of the checksum input, so a string that is valid on
one network never validates on another.
"""

import binascii
import json
import re
from collections import namedtuple
from enum import Enum

from . import networks
from .base32 import (ADDRESS_LENGTH, CHECKSUM_LENGTH, VERSION_BYTE, create_checksum, decode_quintets,
                     encode_quintets, pack_body, unpack_body)
from .errors import (AddressError, AddressTypeMismatchError, BodyTooShortError, ChecksumMismatchError,
                     InvalidHexError, MalformedAddressError, MixedCaseError, NetworkLookupError, NetworkUnavailable,
                     PayloadTooLongError, UnknownAddressTypeError, UnrecognizedNetworkError,
                     UnresolvedNetworkError)
from .util import PrintError, to_bytes


class NetworkType(namedtuple("NetworkTypeTuple", "network_id")):
    """The network an address belongs to, identified by its numeric id.

    Mainnet and testnet have reserved prefixes, every other network is
    written as ``net<id>``. Id 0 means the network is not known yet."""

    UNSET_ID = 0
    MAX_NETWORK_ID = 0xffffffff

    _CUSTOM_RE = re.compile(r'([0-9]+)')

    @classmethod
    def from_network_id(cls, network_id):
        if (not isinstance(network_id, int) or isinstance(network_id, bool)
                or not cls.UNSET_ID <= network_id <= cls.MAX_NETWORK_ID):
            raise UnrecognizedNetworkError('invalid network id {!r}'.format(network_id), network_id)
        return cls(network_id)

    @classmethod
    def parse(cls, prefix):
        """Parse a lowercase network prefix."""
        for net in networks.KNOWN_NETS:
            if prefix == net.ADDRESS_PREFIX:
                return cls(net.NETWORK_ID)
        custom = networks.AbstractNet.CUSTOM_PREFIX
        if prefix.startswith(custom):
            digits = prefix[len(custom):]
            # Canonical decimal only: no sign, no leading zeros
            if cls._CUSTOM_RE.fullmatch(digits) and not digits.startswith('0'):
                network_id = int(digits)
                if network_id <= cls.MAX_NETWORK_ID and network_id not in _known_network_ids():
                    return cls(network_id)
        raise UnrecognizedNetworkError('unrecognized network prefix {!r}'.format(prefix), prefix)

    @property
    def is_unset(self):
        return self.network_id == self.UNSET_ID

    @property
    def is_mainnet(self):
        return self.network_id == networks.MainNet.NETWORK_ID

    @property
    def is_testnet(self):
        return self.network_id == networks.TestNet.NETWORK_ID

    def to_network_id(self):
        if self.is_unset:
            raise UnresolvedNetworkError('network type is not set', self)
        return self.network_id

    def format(self):
        for net in networks.KNOWN_NETS:
            if self.network_id == net.NETWORK_ID:
                return net.ADDRESS_PREFIX
        return networks.AbstractNet.CUSTOM_PREFIX + str(self.network_id)

    def __str__(self):
        return self.format()

    def __repr__(self):
        return '<NetworkType {}>'.format(self.format())


def _known_network_ids():
    return {net.NETWORK_ID for net in networks.KNOWN_NETS}


UNSET_NETWORK = NetworkType(NetworkType.UNSET_ID)


class AddressType(Enum):
    NULL = "null"
    BUILTIN = "builtin"
    USER = "user"
    CONTRACT = "contract"
    INVALID = "invalid"

    @classmethod
    def classify(cls, hex_address):
        """Address type of a binary address.

        The all-zero address is the null address, everything else is decided
        by the high nibble of the first byte."""
        if not hex_address:
            return cls.INVALID
        if len(hex_address) == ADDRESS_LENGTH and not any(hex_address):
            return cls.NULL
        return _TYPE_BY_NIBBLE.get(hex_address[0] & 0xf0, cls.INVALID)

    def is_routable(self):
        return self is not AddressType.INVALID

    @property
    def label(self):
        return self.value

    def __str__(self):
        return self.value


_TYPE_BY_NIBBLE = {
    0x00: AddressType.BUILTIN,
    0x10: AddressType.USER,
    0x80: AddressType.CONTRACT,
}

# Verbose strings written by other tools spell the label "type.user"
_LABEL_PREFIX = "type."


class Body(namedtuple("BodyTuple", "text")):
    """The version byte and address bytes as lowercase base32 text."""

    @classmethod
    def from_string(cls, text):
        unpack_body(text)
        return cls(text)

    @classmethod
    def from_hex_address(cls, version_byte, hex_address):
        return cls(encode_quintets(pack_body(version_byte, hex_address)))

    @property
    def quintets(self):
        return decode_quintets(self.text)

    def to_hex_address(self):
        """Returns (version_byte, address_bytes)."""
        return unpack_body(self.text)

    def __str__(self):
        return self.text


class Checksum(namedtuple("ChecksumTuple", "text")):

    @classmethod
    def calculate(cls, network_type, body):
        return cls(encode_quintets(create_checksum(network_type.format(), body.quintets)))

    @classmethod
    def verify(cls, expected, network_type, body):
        return str(expected) == cls.calculate(network_type, body).text

    def __str__(self):
        return self.text


class Address(PrintError):
    """A Conflux account address.

    Construct with one of the from_* classmethods. Instances are values and
    compare equal only when every field matches, network included. The one
    mutation is completing an address whose network is still unset, see
    complete_by_network_id(); callers sharing an instance across threads
    must serialize that call themselves."""

    __slots__ = ("network_type", "address_type", "body", "checksum", "_hex", "_network_id")

    def __init__(self, network_type: NetworkType, body: Body):
        self.network_type = network_type
        self.body = body
        _, hex_address = body.to_hex_address()
        self.address_type = AddressType.classify(hex_address)
        self.checksum = Checksum.calculate(network_type, body)
        self._set_cache()

    def _set_cache(self):
        _, self._hex = self.body.to_hex_address()
        self._network_id = self.network_type.network_id

    @classmethod
    def from_base32(cls, string):
        """Construct from a base32 string, with or without the type label."""
        if not isinstance(string, str):
            raise TypeError('base32 address must be str, not {}'.format(type(string)))
        if string.lower() != string and string.upper() != string:
            raise MixedCaseError('mixed lowercase and uppercase in {}'.format(string), string)
        original, string = string, string.lower()

        parts = string.split(':')
        if len(parts) not in (2, 3):
            raise MalformedAddressError('invalid address format: {}'.format(original), original)

        network_type = NetworkType.parse(parts[0])

        body_with_checksum = parts[-1]
        if len(body_with_checksum) < CHECKSUM_LENGTH:
            raise BodyTooShortError('body with checksum must be at least {} characters, got {!r}'
                                    .format(CHECKSUM_LENGTH, body_with_checksum), original)
        body = Body.from_string(body_with_checksum[:-CHECKSUM_LENGTH])
        addr = cls(network_type, body)

        if len(parts) == 3:
            label = parts[1]
            if label.startswith(_LABEL_PREFIX):
                label = label[len(_LABEL_PREFIX):]
            if label != addr.address_type.label:
                raise AddressTypeMismatchError('invalid address type, expected {} got {}'
                                               .format(addr.address_type, parts[1]), original)

        supplied = body_with_checksum[-CHECKSUM_LENGTH:]
        if not Checksum.verify(supplied, network_type, body):
            raise ChecksumMismatchError('invalid checksum, expected {} got {}'
                                        .format(addr.checksum, supplied), original)
        return addr

    @classmethod
    def from_bytes(cls, hex_address, network_id=NetworkType.UNSET_ID):
        """Construct from the 20 address bytes. Without a network id the
        network stays unset until completed."""
        hex_address = to_bytes(hex_address)
        network_type = NetworkType.from_network_id(network_id)
        body = Body.from_hex_address(VERSION_BYTE, hex_address)
        if not AddressType.classify(hex_address).is_routable():
            raise UnknownAddressTypeError('invalid address type for {}'.format(hex_address.hex()), hex_address)
        return cls(network_type, body)

    @classmethod
    def from_hex(cls, hex_string, network_id=NetworkType.UNSET_ID):
        if not isinstance(hex_string, str):
            raise TypeError('hex address must be str, not {}'.format(type(hex_string)))
        text = hex_string
        if text[:2] in ('0x', '0X'):
            text = text[2:]
        try:
            hex_address = binascii.unhexlify(text)
        except (binascii.Error, ValueError) as e:
            raise InvalidHexError('failed to decode hex address {}: {}'.format(hex_string, e), hex_string) from None
        return cls.from_bytes(hex_address, network_id)

    # The must_* constructors are for input that is valid by construction,
    # such as literals in code. Do not use them on user input.

    @classmethod
    def must_from_base32(cls, string):
        try:
            return cls.from_base32(string)
        except AddressError as e:
            raise RuntimeError('invalid base32 address {}: {}'.format(string, e)) from e

    @classmethod
    def must_from_hex(cls, hex_string, network_id=NetworkType.UNSET_ID):
        try:
            return cls.from_hex(hex_string, network_id)
        except AddressError as e:
            raise RuntimeError('invalid hex address {} (network id {}): {}'.format(hex_string, network_id, e)) from e

    @classmethod
    def must_from_bytes(cls, hex_address, network_id=NetworkType.UNSET_ID):
        try:
            return cls.from_bytes(hex_address, network_id)
        except AddressError as e:
            raise RuntimeError('invalid address bytes {} (network id {}): {}'
                               .format(bytes(hex_address).hex(), network_id, e)) from e

    @classmethod
    def is_valid_base32(cls, string):
        """Returns True if string parses and names a routable address."""
        try:
            return cls.from_base32(string).is_valid()
        except (AddressError, TypeError):
            return False

    @property
    def hex_address(self):
        return self._hex

    @property
    def network_id(self):
        return self._network_id

    def get_network_id(self):
        """Like the network_id property but raises if the network is unset."""
        return self.network_type.to_network_id()

    def to_hex(self):
        """Returns (hex_string, network_id)."""
        return self._hex.hex(), self._network_id

    def to_common(self):
        """Returns the address as exactly 20 bytes, plus the network id."""
        # Bodies are 20 bytes today; wider version bytes would land here
        if len(self._hex) > ADDRESS_LENGTH:
            raise PayloadTooLongError('cannot convert {} to a {} byte address'
                                      .format(self._hex.hex(), ADDRESS_LENGTH), self._hex)
        return bytes(ADDRESS_LENGTH - len(self._hex)) + self._hex, self._network_id

    def to_base32(self, verbose=False):
        if verbose:
            return ':'.join([self.network_type.format(), self.address_type.label,
                             self.body.text + self.checksum.text]).upper()
        return ':'.join([self.network_type.format(), self.body.text + self.checksum.text])

    def to_verbose_base32(self):
        return self.to_base32(verbose=True)

    def is_valid(self):
        return self.address_type.is_routable()

    def complete_by_network_id(self, network_id):
        """Bind an address whose network is unset to network_id.

        Does nothing if the network is already known or network_id is the
        unset id 0. Mutates in place."""
        if not self.network_type.is_unset:
            return
        network_type = NetworkType.from_network_id(network_id)
        if network_type.is_unset:
            return
        checksum = Checksum.calculate(network_type, self.body)
        self.network_type, self.checksum = network_type, checksum
        self._set_cache()
        self.print_error('bound', self._hex.hex(), 'to network', network_type)

    def complete_by_network_lookup(self, provider):
        """Like complete_by_network_id but asks provider.get_network_id()."""
        if not self.network_type.is_unset:
            return
        try:
            network_id = provider.get_network_id()
            network_type = NetworkType.from_network_id(network_id)
        except (NetworkUnavailable, UnrecognizedNetworkError) as e:
            raise NetworkLookupError('failed to get network id: {}'.format(e), self._hex) from e
        if network_type.is_unset:
            raise NetworkLookupError('provider returned the unset network id {}'.format(network_id), self._hex)
        self.complete_by_network_id(network_id)

    def to_json(self):
        """Text form used in JSON documents (unquoted)."""
        return self.to_verbose_base32()

    @classmethod
    def from_json(cls, data):
        """Parse a JSON encoded address. Returns None for JSON null."""
        if isinstance(data, (bytes, bytearray)):
            try:
                data = bytes(data).decode('utf-8')
            except UnicodeDecodeError as e:
                raise MalformedAddressError('address JSON is not valid utf-8: {}'.format(e), bytes(data)) from None
        if data == 'null':
            return None
        if len(data) < 2 or data[0] != '"' or data[-1] != '"':
            raise MalformedAddressError('expected a quoted address string, got {}'.format(data), data)
        return cls.from_base32(data[1:-1])

    def __eq__(self, other):
        if not isinstance(other, Address):
            return NotImplemented
        return ((self.network_type, self.address_type, self.body, self.checksum, self._hex, self._network_id)
                == (other.network_type, other.address_type, other.body, other.checksum, other._hex,
                    other._network_id))

    __hash__ = None

    def __str__(self):
        return self.to_base32()

    def __repr__(self):
        return '<Address {}>'.format(self.to_base32())


class AddressJSONEncoder(json.JSONEncoder):
    """json.dumps(obj, cls=AddressJSONEncoder) writes addresses as verbose base32 strings."""

    def default(self, o):
        if isinstance(o, Address):
            return o.to_json()
        return super().default(o)
