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
ElementTree implementation of XML parser/generator for WebDAV documents.
"""

__all__ = [
    "WebDAVDocument",
    "QNameSplit",
]

from xml.etree.ElementTree import XMLParser, ParseError, _namespace_map

from txbind.base import WebDAVUnknownElement, PCDATAElement
from txbind.base import _elements_by_qname
from txbind.parser_base import AbstractWebDAVDocument


def QNameSplit(qname):
    return tuple(qname[1:].split("}", 1)) if "}" in qname else ("", qname,)



class WebDAVContentHandler (object):
    """
    L{XMLParser} target which builds a tree of WebDAV elements, using the
    registered element class for each known qname.
    """

    def __init__(self):
        self._characterBuffer = None

        self.startDocument()


    def doctype(self, name, pubid, system):
        """
        Doctype declaration is ignored.
        """


    def startDocument(self):
        self.stack = [{
            "name"       : None,
            "class"      : None,
            "attributes" : None,
            "children"   : [],
        }]

        # Keep a cache of the factories we create for unknown XML
        # elements, so that we don't create multiple factories for the
        # same element; it's fairly typical for elements to appear
        # multiple times in a document.
        self.unknownElementClasses = {}


    def close(self):
        top = self.stack[-1]

        assert top["name"] is None
        assert top["class"] is None
        assert top["attributes"] is None
        assert len(top["children"]) == 1, "Must have exactly one root element, got %d" % len(top["children"])

        self.dom = WebDAVDocument(top["children"][0])
        del(self.unknownElementClasses)
        return self.dom


    def data(self, data):
        # Stash character data away in a list that we will "".join() when done
        if self._characterBuffer is None:
            self._characterBuffer = []
        self._characterBuffer.append(data)


    def _flushCharacters(self):
        if self._characterBuffer is not None:
            pcdata = PCDATAElement("".join(self._characterBuffer))
            self.stack[-1]["children"].append(pcdata)
            self._characterBuffer = None


    def start(self, tag, attrs):
        name = QNameSplit(tag)

        self._flushCharacters()

        # Need to convert a "full" namespace in an attribute QName to the form
        # "%s:%s".
        attributes_dict = {}
        for aname, avalue in attrs.items():
            anamespace, aname = QNameSplit(aname)
            if anamespace:
                anamespace = _namespace_map.get(anamespace, anamespace)
                aname = "%s:%s" % (anamespace, aname,)
            attributes_dict[aname] = avalue

        tag_namespace, tag_name = name

        if name in _elements_by_qname:
            element_class = _elements_by_qname[name]
        elif name in self.unknownElementClasses:
            element_class = self.unknownElementClasses[name]
        else:
            def element_class(*args):
                element = WebDAVUnknownElement(*args)
                element.namespace = tag_namespace
                element.name      = tag_name
                return element
            self.unknownElementClasses[name] = element_class

        self.stack.append({
            "name"       : name,
            "class"      : element_class,
            "attributes" : attributes_dict,
            "children"   : [],
        })


    def end(self, tag):
        name = QNameSplit(tag)

        self._flushCharacters()

        # Pop the current element from the stack...
        top = self.stack[-1]
        del(self.stack[-1])

        assert top["name"] == name, "Last item on stack is %s while closing %s" % (top["name"], name)

        # ...then instantiate the element and add it to the parent's list of
        # children.  Attribute names come from the document and are not
        # valid keyword arguments in general, so they are set afterwards.
        element = top["class"](*top["children"])
        element.attributes = top["attributes"]

        self.stack[-1]["children"].append(element)



class WebDAVDocument(AbstractWebDAVDocument):
    @classmethod
    def fromStream(cls, source):
        parser = XMLParser(target=WebDAVContentHandler())
        try:
            while 1:
                data = source.read(65536)
                if not data:
                    break
                parser.feed(data)
            return parser.close()
        except ParseError as e:
            raise ValueError(e)


    def writeXML(self, output):
        self.root_element.writeXML(output)
