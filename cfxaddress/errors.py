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

"""Exceptions raised by the address codec.

Every failure names one kind of problem and keeps the offending input in
``.value`` so wallets can show the user exactly what was wrong.
"""


class AddressError(Exception):
    """Exception used for Address errors."""

    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value


class MixedCaseError(AddressError):
    """The base32 string mixes upper and lower case letters."""


class MalformedAddressError(AddressError):
    """The base32 string does not have 2 or 3 colon separated parts."""


class UnrecognizedNetworkError(AddressError):
    """Unknown network prefix or out of range network id."""


class UnresolvedNetworkError(AddressError):
    """The network is still unset and has no numeric id."""


class BodyTooShortError(AddressError):
    """The last segment cannot even hold the checksum."""


class InvalidAlphabetError(AddressError):
    """A character outside the base32 alphabet."""


class InvalidPaddingError(AddressError):
    """Non-zero or excess padding bits at the end of the body."""


class UnsupportedPayloadLengthError(AddressError):
    """The payload is not a version byte followed by 20 address bytes."""


class UnknownAddressTypeError(AddressError):
    """The payload cannot be classified into a routable address type."""


class AddressTypeMismatchError(AddressError):
    """The verbose type label disagrees with the decoded payload."""


class ChecksumMismatchError(AddressError):
    """The supplied checksum does not match the network and body."""


class InvalidHexError(AddressError):
    """Hex text with bad characters or odd length."""


class PayloadTooLongError(AddressError):
    """The payload is wider than the fixed size target."""


class NetworkUnavailable(AddressError):
    """A network id provider could not answer."""


class NetworkLookupError(AddressError):
    """Completing an address by network lookup failed."""
