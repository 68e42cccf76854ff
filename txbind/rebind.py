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
REBIND request body (RFC 5842, section 6).

A REBIND request body names the resource to move (C{DAV:href}) and the
new binding name for it in the request-URI collection (C{DAV:segment})::

    <D:rebind xmlns:D="DAV:">
      <D:href>/a/b</D:href>
      <D:segment>c</D:segment>
    </D:rebind>

L{RebindPayload.fromElement} validates such a body and returns the
corresponding L{RebindPayload}; L{RebindPayload.toElement} goes the other
way.  Both work on any element tree for which an L{IElementTreeAdapter} is
available.
"""

__all__ = [
    "MalformedRequestBody",
    "RebindPayload",
]

from twisted.logger import Logger
from twisted.web.http import BAD_REQUEST

from txbind.adapter import WebDAVElementAdapter
from txbind.element import HRef, RebindRequest, Segment
from txbind.parser import WebDAVDocument


class MalformedRequestBody(ValueError):
    """
    Request body is not acceptable for the request method.

    @ivar code: HTTP status code to respond with.
    @ivar reason: a human-readable description of the problem.
    """
    code = BAD_REQUEST

    def __init__(self, reason):
        ValueError.__init__(self, reason)
        self.reason = reason


    def __repr__(self):
        return "<%s %d: %r>" % (self.__class__.__name__, self.code, self.reason)



_defaultAdapter = WebDAVElementAdapter()


class RebindPayload(object):
    """
    Contents of a REBIND request body.

    Instances are immutable.

    @ivar href: the URI of the resource to rebind.
    @type href: C{str}
    @ivar segment: the name of the new binding.
    @type segment: C{str}
    """
    log = Logger()

    __slots__ = ("href", "segment")

    def __init__(self, href, segment):
        if not isinstance(href, str) or not isinstance(segment, str):
            raise TypeError(
                "href and segment must be strings, not %r and %r"
                % (type(href).__name__, type(segment).__name__)
            )
        object.__setattr__(self, "href", href)
        object.__setattr__(self, "segment", segment)


    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % (self.__class__.__name__,))


    def __delattr__(self, name):
        raise AttributeError("%s is immutable" % (self.__class__.__name__,))


    def _cmpval(self):
        """
        Return a value to use for hashing and comparisons.
        """
        return (self.href, self.segment)


    def __hash__(self):
        return hash(self._cmpval())


    def __eq__(self, other):
        if not isinstance(other, RebindPayload):
            return NotImplemented
        return self._cmpval() == other._cmpval()


    def __ne__(self, other):
        if not isinstance(other, RebindPayload):
            return NotImplemented
        return self._cmpval() != other._cmpval()


    def __repr__(self):
        return "<%s: href=%r segment=%r>" % (
            self.__class__.__name__, self.href, self.segment
        )


    @classmethod
    def fromElement(cls, root, adapter=None):
        """
        Build a L{RebindPayload} from the root element of a REBIND request
        body.

        The C{DAV:href} and C{DAV:segment} children may appear in any order,
        each exactly once, and no other child element is allowed.  Their
        text is used verbatim.

        @param root: the root element of the request body.
        @param adapter: the L{IElementTreeAdapter} for C{root}; the WebDAV
            element model is assumed if C{None}.

        @raise MalformedRequestBody: if the body is not a valid
            C{DAV:rebind} element.
        """
        if adapter is None:
            adapter = _defaultAdapter

        if not adapter.matches(root, RebindRequest.name, RebindRequest.namespace):
            cls.log.warn("{rebind} element expected", rebind=RebindRequest.sname())
            raise MalformedRequestBody("rebind element expected")

        href = None
        segment = None

        for child in adapter.children(root):
            if adapter.matches(child, Segment.name, Segment.namespace):
                if segment is None:
                    segment = adapter.text(child)
                else:
                    cls.log.warn("Unexpected multiple occurrence of {segment} element", segment=Segment.sname())
                    raise MalformedRequestBody("duplicate segment element")
            elif adapter.matches(child, HRef.name, HRef.namespace):
                if href is None:
                    href = adapter.text(child)
                else:
                    cls.log.warn("Unexpected multiple occurrence of {href} element", href=HRef.sname())
                    raise MalformedRequestBody("duplicate href element")
            else:
                cls.log.warn("Unexpected element {element!r} in {rebind}", element=child, rebind=RebindRequest.sname())
                raise MalformedRequestBody("unexpected element")

        if href is None:
            cls.log.warn("{href} element expected", href=HRef.sname())
            raise MalformedRequestBody("href element expected")
        if segment is None:
            cls.log.warn("{segment} element expected", segment=Segment.sname())
            raise MalformedRequestBody("segment element expected")

        return cls(href, segment)


    @classmethod
    def fromDocument(cls, document):
        """
        Build a L{RebindPayload} from a parsed L{WebDAVDocument}.
        """
        return cls.fromElement(document.root_element)


    @classmethod
    def fromString(cls, source):
        """
        Parse and validate a REBIND request body.

        @param source: the XML request body.
        @type source: C{bytes} or C{str}

        @raise MalformedRequestBody: if C{source} is not well-formed XML, or
            is not a valid C{DAV:rebind} element.
        """
        try:
            document = WebDAVDocument.fromString(source)
        except ValueError as e:
            cls.log.warn("Invalid XML in REBIND request body: {error}", error=e)
            raise MalformedRequestBody("invalid XML body")

        return cls.fromDocument(document)


    def toElement(self, document=None, adapter=None):
        """
        Create a C{DAV:rebind} element for this payload, with a C{DAV:href}
        child followed by a C{DAV:segment} child.

        @param document: the document the elements are created in, for
            adapters that need one.
        @param adapter: the L{IElementTreeAdapter} to create elements with;
            the WebDAV element model is used if C{None}.

        @return: the new element.
        """
        if adapter is None:
            adapter = _defaultAdapter

        rebind = adapter.createElement(document, RebindRequest.name, RebindRequest.namespace)
        adapter.appendChild(rebind, adapter.createElement(document, HRef.name, HRef.namespace, self.href))
        adapter.appendChild(rebind, adapter.createElement(document, Segment.name, Segment.namespace, self.segment))
        return rebind


    def toxml(self, pretty=True):
        """
        Return the XML text of the C{DAV:rebind} element for this payload.
        """
        return self.toElement().toxml(pretty)
