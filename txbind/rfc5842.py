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
RFC 5842 (Binding Extensions to WebDAV) XML Elements

This module provides XML element definitions for use with WebDAV.

See RFC 5842: http://www.ietf.org/rfc/rfc5842.txt
"""

__all__ = []


from txbind.base import WebDAVTextElement, WebDAVElement
from txbind.element import registerElement, registerElementClass


@registerElement
@registerElementClass
class Segment (WebDAVTextElement):
    """
    Name of a binding within a collection (RFC 5842, section 3.2)
    """
    name = "segment"



@registerElement
@registerElementClass
class RebindRequest (WebDAVElement):
    """
    Request body for a REBIND request (RFC 5842, section 6.1)
    """
    name = "rebind"

    # DAV:href and DAV:segment, each exactly once, are checked by
    # txbind.rebind.RebindPayload.fromElement
    allowed_children = {}
