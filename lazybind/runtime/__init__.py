# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""One-time process setup that runs before any benchmark work."""
