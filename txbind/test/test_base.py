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
Tests for L{txbind.base}.
"""

from twisted.trial.unittest import TestCase

from txbind.base import encodeXMLName
from txbind.base import PCDATAElement, WebDAVUnknownElement
from txbind.element import HRef, RebindRequest, Segment
from txbind.parser import WebDAVDocument


class NameEncodeTests(TestCase):
    """
    Name encoding tests.
    """
    def test_encodeXMLName(self):
        # No namespace
        self.assertEqual(encodeXMLName(None, "name"), "name")
        self.assertEqual(encodeXMLName("", "name"), "name")

        # Normal case
        self.assertEqual(encodeXMLName("namespace", "name"), "{namespace}name")



class WebDAVElementTestsMixin:
    """
    Mixin for L{TestCase}s which test a L{WebDAVElement} subclass.
    """
    def test_fromString(self):
        """
        The XML representation of L{WebDAVDocument} can be parsed into a
        L{WebDAVDocument} instance using L{WebDAVDocument.fromString}.
        """
        doc = WebDAVDocument.fromString(self.serialized)
        self.assertEqual(doc, WebDAVDocument(self.element))


    def test_toxml(self):
        """
        L{WebDAVDocument.toxml} returns a C{str} giving the XML representation
        of the L{WebDAVDocument} instance.
        """
        document = WebDAVDocument(self.element)
        self.assertEqual(
            document,
            WebDAVDocument.fromString(document.toxml()))



class WebDAVUnknownElementTests(WebDAVElementTestsMixin, TestCase):
    """
    Tests for L{WebDAVUnknownElement}.
    """
    serialized = (
        """<?xml version="1.0" encoding="utf-8" ?>"""
        """<T:foo xmlns:T="http://twistedmatrix.com/"/>"""
    )

    element = WebDAVUnknownElement.withName(
        "http://twistedmatrix.com/",
        "foo"
    )



class RebindRequestTests(WebDAVElementTestsMixin, TestCase):
    """
    Tests for L{RebindRequest}.
    """
    serialized = (
        """<?xml version="1.0" encoding="utf-8" ?>"""
        """<D:rebind xmlns:D="DAV:">"""
        """  <D:segment>c</D:segment>"""
        """  <D:href>/a/b</D:href>"""
        """</D:rebind>"""
    )

    element = RebindRequest(Segment("c"), HRef("/a/b"))


    def test_childrenKeepDocumentOrder(self):
        """
        Parsed children are kept in document order, and character data
        between them is dropped.
        """
        doc = WebDAVDocument.fromString(self.serialized)
        self.assertEqual(
            [child.qname() for child in doc.root_element.children],
            [("DAV:", "segment"), ("DAV:", "href")],
        )


    def test_unknownChild(self):
        """
        Unregistered children are parsed as L{WebDAVUnknownElement}s with
        their own qname.
        """
        doc = WebDAVDocument.fromString(
            """<rebind xmlns="DAV:"><foo xmlns="urn:x">bar</foo></rebind>"""
        )
        (child,) = doc.root_element.children
        self.assertIsInstance(child, WebDAVUnknownElement)
        self.assertEqual(child.qname(), ("urn:x", "foo"))
        self.assertEqual(child.children, (PCDATAElement("bar"),))



class TextElementTests(TestCase):
    """
    Tests for L{WebDAVTextElement}.
    """
    def test_equalityUsesName(self):
        """
        Text elements with the same text but different names are not equal.
        """
        self.assertEqual(HRef("x"), HRef("x"))
        self.assertNotEqual(HRef("x"), Segment("x"))
        self.assertEqual(HRef("x"), "x")


    def test_escaping(self):
        """
        Markup characters in text survive serialization and parsing.
        """
        for text in ("a & <b>", "line1\nline2 ]]> done", "cr\rhere", "crlf\r\n]]>", ""):
            document = WebDAVDocument(RebindRequest(HRef(text), Segment("s")))
            parsed = WebDAVDocument.fromString(document.toxml())
            self.assertEqual(str(parsed.root_element.children[0]), text)


    def test_emptyText(self):
        """
        A text element with empty text is written as an empty element.
        """
        self.assertEqual(HRef("").toxml(pretty=False), "<?xml version='1.0' encoding='UTF-8'?><href xmlns='DAV:'/>")



class ParserTests(TestCase):
    """
    Tests for L{WebDAVDocument} parsing.
    """
    def test_notWellFormed(self):
        """
        Malformed XML raises L{ValueError}.
        """
        self.assertRaises(ValueError, WebDAVDocument.fromString, b"<rebind xmlns='DAV:'>")
        self.assertRaises(ValueError, WebDAVDocument.fromString, b"")


    def test_bytes(self):
        """
        UTF-8 encoded sources are decoded.
        """
        doc = WebDAVDocument.fromString(
            u"<href xmlns='DAV:'>/café</href>".encode("utf-8")
        )
        self.assertEqual(doc.root_element, HRef(u"/café"))



    def test_attributes(self):
        """
        Attributes are kept on the parsed element whatever their names,
        including names which are not Python identifiers or which clash
        with constructor arguments.
        """
        doc = WebDAVDocument.fromString(
            """<rebind xmlns="DAV:" self="x" children="y">"""
            """<foo self="1" xmlns:x="urn:x" x:bar="2"/>"""
            """</rebind>"""
        )
        self.assertIsInstance(doc.root_element, RebindRequest)
        self.assertEqual(doc.root_element.attributes, {"self": "x", "children": "y"})
        (child,) = doc.root_element.children
        self.assertEqual(child.qname(), ("DAV:", "foo"))
        self.assertEqual(child.attributes, {"self": "1", "urn:x:bar": "2"})
