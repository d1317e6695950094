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

class AbstractNet:
    TESTNET = False
    NETWORK_ID = 0
    ADDRESS_PREFIX = ""
    # Prefix for networks that have no name of their own, followed by the decimal id
    CUSTOM_PREFIX = "net"
    DEFAULT_RPC_URL = None
    RPC_TIMEOUT = 10


class MainNet(AbstractNet):
    TESTNET = False
    NETWORK_ID = 1029
    ADDRESS_PREFIX = "cfx"
    TITLE = 'Conflux Mainnet'
    DEFAULT_RPC_URL = "https://main.confluxrpc.com"


class TestNet(AbstractNet):
    TESTNET = True
    NETWORK_ID = 1
    ADDRESS_PREFIX = "cfxtest"
    TITLE = 'Conflux Testnet'
    DEFAULT_RPC_URL = "https://test.confluxrpc.com"


# Networks with a reserved address prefix
KNOWN_NETS = (MainNet, TestNet)

# All new code should access this to get the current network config.
net = MainNet


def set_mainnet():
    global net
    net = MainNet


def set_testnet():
    global net
    net = TestNet
