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
WebDAV XML base classes.

This module provides the in-memory element model used for WebDAV request
and response bodies.

See RFC 4918: http://www.ietf.org/rfc/rfc4918.txt (WebDAV)
"""

__all__ = [
    "dav_namespace",
    "encodeXMLName",
    "WebDAVElement",
    "PCDATAElement",
    "WebDAVUnknownElement",
    "WebDAVTextElement",
]

import io
import string

from twisted.logger import Logger

log = Logger()

##
# Base XML elements
##

dav_namespace = "DAV:"

# Registry of element classes by (namespace, name); see txbind.element
_elements_by_qname = {}


def encodeXMLName(namespace, name):
    """
    Encodes an XML namespace and name into a string.
    If namespace is None, returns "name", otherwise, returns
    "{namespace}name".
    """
    if not namespace:
        return name
    else:
        return "{%s}%s" % (namespace, name)



class WebDAVElement (object):
    """
    WebDAV XML element. (RFC 4918, section 14)
    """
    namespace          = dav_namespace # Element namespace (class variable)
    name               = None          # Element name (class variable)
    allowed_children   = None          # Child types kept by __init__; PCDATA only if listed

    def __init__(self, *children):
        super(WebDAVElement, self).__init__()

        if self.allowed_children is None:
            raise NotImplementedError(
                "WebDAVElement subclass %s is not implemented."
                % (self.__class__.__name__,)
            )

        my_children = []

        allowPCDATA = PCDATAElement in self.allowed_children

        for child in children:
            if child is None:
                continue

            if isinstance(child, (str, bytes)):
                child = PCDATAElement(child)

            if isinstance(child, PCDATAElement) and not allowPCDATA:
                if not child.isWhitespace():
                    log.debug(
                        "Character data is unexpected and therefore ignored in {element} element",
                        element=self.sname(),
                    )
                continue

            my_children.append(child)

        self.children = tuple(my_children)

        self.attributes = {}


    @classmethod
    def qname(cls):
        return (cls.namespace, cls.name)


    @classmethod
    def sname(cls):
        return encodeXMLName(cls.namespace, cls.name)


    def __str__(self):
        return self.sname()


    def __repr__(self):
        if hasattr(self, "attributes") and hasattr(self, "children"):
            return "<%s %r: %r>" % (self.sname(), self.attributes, self.children)
        else:
            return "<%s>" % (self.sname())


    def __eq__(self, other):
        if isinstance(other, WebDAVElement):
            return (
                self.name       == other.name       and
                self.namespace  == other.namespace  and
                self.attributes == other.attributes and
                self.children   == other.children
            )
        else:
            return NotImplemented


    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result


    __hash__ = None


    def writeXML(self, output, pretty=True):
        output.write("<?xml version='1.0' encoding='UTF-8'?>" + ("\n" if pretty else ""))
        self._writeToStream(output, "", 0, pretty)


    def _writeToStream(self, output, ns, level, pretty):
        """
        Fast XML output.

        @param output: C{stream} to write to.
        @param ns: C{str} containing the namespace of the enclosing element.
        @param level: C{int} containing the element nesting level (starts at 0).
        @param pretty: C{bool} whether to use 'pretty' formatted output or not.
        """

        # Do pretty indent
        if pretty and level:
            output.write("  " * level)

        # Check for empty element (one with either no children or a single PCDATA that is itself empty)
        if (len(self.children) == 0 or
            (len(self.children) == 1 and isinstance(self.children[0], PCDATAElement) and len(str(self.children[0])) == 0)):

            # Write out any attributes or the namespace if difference from enclosing element.
            if self.attributes or (ns != self.namespace):
                output.write("<%s" % (self.name,))
                for name, value in self.attributes.items():
                    self._writeAttributeToStream(output, name, value)
                if ns != self.namespace:
                    output.write(" xmlns='%s'" % (self.namespace or "",))
                output.write("/>")
            else:
                output.write("<%s/>" % (self.name,))
        else:
            # Write out any attributes or the namespace if difference from enclosing element.
            if self.attributes or (ns != self.namespace):
                output.write("<%s" % (self.name,))
                for name, value in self.attributes.items():
                    self._writeAttributeToStream(output, name, value)
                if ns != self.namespace:
                    output.write(" xmlns='%s'" % (self.namespace or "",))
                    ns = self.namespace
                output.write(">")
            else:
                output.write("<%s>" % (self.name,))

            # Determine nature of children when doing pretty print: we do
            # not want to insert CRLFs or any other whitespace in PCDATA.
            hasPCDATA = False
            for child in self.children:
                if isinstance(child, PCDATAElement):
                    hasPCDATA = True
                    break

            # Write out the children.
            if pretty and not hasPCDATA:
                output.write("\r\n")
            for child in self.children:
                child._writeToStream(output, ns, level + 1, pretty)

            # Close the element.
            if pretty and not hasPCDATA and level:
                output.write("  " * level)
            output.write("</%s>" % (self.name,))

        if pretty and level:
            output.write("\r\n")


    def _writeAttributeToStream(self, output, name, value):

        # Quote any single quotes and ampersands. We do not need to be any smarter than this.
        value = value.replace("&", "&amp;").replace("'", "&apos;").replace("<", "&lt;")

        output.write(" %s='%s'" % (name, value,))


    def toxml(self, pretty=True):
        output = io.StringIO()
        self.writeXML(output, pretty)
        return output.getvalue()



class PCDATAElement (object):
    def __init__(self, data):
        super(PCDATAElement, self).__init__()

        if data is None:
            data = ""
        elif isinstance(data, bytes):
            data = data.decode("utf-8")
        else:
            assert isinstance(data, str), ("PCDATA must be a string: %r" % (data,))

        self.data = data


    @classmethod
    def qname(cls):
        return (None, "#PCDATA")


    @classmethod
    def sname(cls):
        return "#PCDATA"


    def __str__(self):
        return self.data


    def __repr__(self):
        return "<%s: %r>" % (self.__class__.__name__, self.data)


    def __eq__(self, other):
        if isinstance(other, PCDATAElement):
            return self.data == other.data
        elif isinstance(other, str):
            return self.data == other
        else:
            return NotImplemented


    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result


    __hash__ = None


    def isWhitespace(self):
        for char in self.data:
            if char not in string.whitespace:
                return False
        return True


    def _writeToStream(self, output, ns, level, pretty):
        # Do escaping/CDATA behavior. A CR would be read back as LF, so
        # data with one is always escaped, with the CR as a character reference.
        if "\n" in self.data and "\r" not in self.data:
            # Do CDATA; a "]]>" in the data has to be split across sections
            cdata = "<![CDATA[%s]]>" % (self.data.replace("]]>", "]]]]><![CDATA[>"),)
        else:
            cdata = self.data
            if "&" in cdata:
                cdata = cdata.replace("&", "&amp;")
            if "<" in cdata:
                cdata = cdata.replace("<", "&lt;")
            if ">" in cdata:
                cdata = cdata.replace(">", "&gt;")
            if "\r" in cdata:
                cdata = cdata.replace("\r", "&#13;")

        output.write(cdata)



class WebDAVUnknownElement (WebDAVElement):
    """
    Placeholder for unknown element tag names.
    """
    allowed_children = {
        WebDAVElement: (0, None),
        PCDATAElement: (0, None),
    }

    @classmethod
    def withName(cls, namespace, name):
        child = cls()
        child.namespace = namespace
        child.name = name
        return child


    def qname(self):
        return (self.namespace, self.name)


    def sname(self):
        return encodeXMLName(self.namespace, self.name)



class WebDAVTextElement (WebDAVElement):
    """
    WebDAV element containing PCDATA.
    """
    allowed_children = {PCDATAElement: (0, None)}

    def __str__(self):
        return "".join([c.data for c in self.children])


    def __repr__(self):
        content = str(self)
        if content:
            return "<%s: %r>" % (self.sname(), content)
        else:
            return "<%s>" % (self.sname(),)


    def __eq__(self, other):
        if isinstance(other, WebDAVTextElement):
            return self.qname() == other.qname() and str(self) == str(other)
        elif isinstance(other, str):
            return str(self) == other
        else:
            return NotImplemented


    __hash__ = None
