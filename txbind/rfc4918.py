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
RFC 4918 (WebDAV) XML Elements

This module provides the RFC 4918 element definitions shared by the
binding extensions.

See RFC 4918: http://www.ietf.org/rfc/rfc4918.txt
"""

__all__ = []


from txbind.base import WebDAVTextElement
from txbind.element import registerElement, registerElementClass


@registerElement
@registerElementClass
class HRef (WebDAVTextElement):
    """
    Refers to a URI. (RFC 4918, section 14.7)
    """
    name = "href"
