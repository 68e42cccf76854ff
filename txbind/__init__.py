##
# Copyright (c) 2005-2017 Apple Inc. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
##

"""
WebDAV binding (RFC 5842) request body support.

This package provides a small WebDAV XML element model and the codec for
the REBIND request body.

See RFC 4918: http://www.ietf.org/rfc/rfc4918.txt (WebDAV)
See RFC 5842: http://www.ietf.org/rfc/rfc5842.txt (WebDAV Bind)
"""

__all__ = [
    "base",
    "element",
    "parser",
    "rebind",
]

import txbind.rfc4918
import txbind.rfc5842

txbind # Shhh pyflakes
