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

"""Network id lookup over a node's JSON-RPC endpoint.

Address.complete_by_network_lookup() only needs an object with a
get_network_id() method; RpcNetworkIdProvider is the one that talks to a
live node.
"""

from typing import Optional

import requests
from jsonrpcclient import Error as rpc_Error, Ok as rpc_Ok, parse as rpc_parse, request

from . import networks
from .errors import NetworkUnavailable
from .util import PrintError


class NetworkIdProvider:
    """Interface for anything that knows which network it is connected to."""

    def get_network_id(self) -> int:
        raise NotImplementedError


class RpcNetworkIdProvider(NetworkIdProvider, PrintError):
    """Asks a Conflux node for its network id with cfx_getStatus."""

    METHOD = "cfx_getStatus"

    def __init__(self, url: Optional[str] = None, *, timeout: Optional[float] = None):
        self.url = url or networks.net.DEFAULT_RPC_URL
        self.timeout = networks.net.RPC_TIMEOUT if timeout is None else timeout

    def diagnostic_name(self):
        return 'rpc/' + str(self.url)

    def get_network_id(self) -> int:
        try:
            resp = requests.post(self.url, json=request(self.METHOD), timeout=self.timeout)
            resp.raise_for_status()
            parsed = rpc_parse(resp.json())
        except (requests.exceptions.RequestException, ValueError, KeyError) as e:
            self.print_error(self.METHOD, 'failed:', repr(e))
            raise NetworkUnavailable('{} request to {} failed: {}'.format(self.METHOD, self.url, e), self.url) from e

        if isinstance(parsed, rpc_Error):
            self.print_error(self.METHOD, 'returned error', parsed.code, parsed.message)
            raise NetworkUnavailable('{} returned error {}: {}'.format(self.METHOD, parsed.code, parsed.message),
                                     self.url)
        if not isinstance(parsed, rpc_Ok):
            raise NetworkUnavailable('unexpected {} response from {}'.format(self.METHOD, self.url), self.url)

        try:
            network_id = int(parsed.result['networkId'], 16)
        except (KeyError, TypeError, ValueError) as e:
            raise NetworkUnavailable('malformed {} result from {}: {!r}'.format(self.METHOD, self.url, parsed.result),
                                     self.url) from e
        self.print_error('network id', network_id)
        return network_id
