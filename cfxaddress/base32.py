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

"""Low level CIP-37 base32 primitives.

The address body is the version byte followed by the 20 address bytes,
regrouped into 5-bit values ("quintets") and written with CHARSET. The
checksum is the cashaddr BCH code, computed over the expanded network prefix
and the body quintets.
"""

from .errors import InvalidAlphabetError, InvalidPaddingError, UnsupportedPayloadLengthError

CHARSET = "abcdefghjkmnprstuvwxyz0123456789"
_CHARSET_MAP = {c: n for n, c in enumerate(CHARSET)}
assert len(CHARSET) == 32 and len(_CHARSET_MAP) == 32

ADDRESS_LENGTH = 20
# Version byte for a 160 bit hash: reserved bit 0, type bits 0, size bits 0
VERSION_BYTE = 0x00
CHECKSUM_LENGTH = 8

_GENERATORS = (0x98f2bc8e61, 0x79b76d99e2, 0xf33e5fb3c4, 0xae2eabe2a8, 0x1e4f43e470)


def _polymod(values):
    """Internal function that computes the checksum polynomial remainder."""
    c = 1
    for d in values:
        c0 = c >> 35
        c = ((c & 0x07ffffffff) << 5) ^ d
        for i, generator in enumerate(_GENERATORS):
            if (c0 >> i) & 1:
                c ^= generator
    return c ^ 1


def _prefix_expand(prefix):
    """Expand the network prefix into values for checksum computation."""
    ret = [ord(c) & 0x1f for c in prefix]
    # Append null separator
    ret.append(0)
    return ret


def create_checksum(prefix, quintets):
    """Compute the 8 checksum quintets given the prefix and body quintets."""
    values = _prefix_expand(prefix) + list(quintets)
    polymod = _polymod(values + [0] * CHECKSUM_LENGTH)
    return [(polymod >> 5 * (CHECKSUM_LENGTH - 1 - i)) & 31 for i in range(CHECKSUM_LENGTH)]


def verify_checksum(prefix, quintets_with_checksum):
    return _polymod(_prefix_expand(prefix) + list(quintets_with_checksum)) == 0


def convertbits(data, frombits, tobits, pad=True):
    """General power-of-2 base conversion.

    With pad=False the leftover bits must be fewer than frombits and all zero."""
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or (value >> frombits):
            raise ValueError('value {} does not fit in {} bits'.format(value, frombits))
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            ret.append((acc >> bits) & maxv)

    if pad:
        if bits:
            ret.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits:
        raise InvalidPaddingError('excess padding')
    elif (acc << (tobits - bits)) & maxv:
        raise InvalidPaddingError('non-zero padding')

    return ret


def encode_quintets(quintets):
    return ''.join(CHARSET[d] for d in quintets)


def decode_quintets(text):
    """Map lowercase base32 text to quintets."""
    try:
        return [_CHARSET_MAP[c] for c in text]
    except KeyError as e:
        raise InvalidAlphabetError('invalid base32 character {!r} in {}'.format(e.args[0], text), text) from None


def pack_body(version_byte, address_bytes):
    """Returns the quintets for a version byte and 20 address bytes."""
    if len(address_bytes) != ADDRESS_LENGTH:
        raise UnsupportedPayloadLengthError('address must be {} bytes, got {}'
                                            .format(ADDRESS_LENGTH, len(address_bytes)),
                                            bytes(address_bytes))
    return convertbits(bytes([version_byte]) + bytes(address_bytes), 8, 5)


def unpack_body(text):
    """Decode body text into (version_byte, address_bytes)."""
    quintets = decode_quintets(text)
    try:
        payload = convertbits(quintets, 5, 8, False)
    except InvalidPaddingError as e:
        raise InvalidPaddingError('{} in body {}'.format(e, text), text) from None
    if len(payload) != ADDRESS_LENGTH + 1:
        raise UnsupportedPayloadLengthError('body {} decodes to {} bytes, expected {}'
                                            .format(text, len(payload), ADDRESS_LENGTH + 1), text)
    version_byte, address_bytes = payload[0], bytes(payload[1:])
    if version_byte != VERSION_BYTE:
        raise UnsupportedPayloadLengthError('unsupported version byte 0x{:02x} in body {}'
                                            .format(version_byte, text), text)
    return version_byte, address_bytes
