from .version import PACKAGE_VERSION
from .errors import (AddressError, AddressTypeMismatchError, BodyTooShortError, ChecksumMismatchError,
                     InvalidAlphabetError, InvalidHexError, InvalidPaddingError, MalformedAddressError,
                     MixedCaseError, NetworkLookupError, NetworkUnavailable, PayloadTooLongError,
                     UnknownAddressTypeError, UnrecognizedNetworkError, UnresolvedNetworkError,
                     UnsupportedPayloadLengthError)
from .address import Address, AddressJSONEncoder, AddressType, Body, Checksum, NetworkType
from .rpc import NetworkIdProvider, RpcNetworkIdProvider
