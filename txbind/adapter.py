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
L{IElementTreeAdapter} implementations for the WebDAV element model, the
W3C DOM (L{xml.dom.minidom}) and L{xml.etree.ElementTree}.
"""

__all__ = [
    "WebDAVElementAdapter",
    "DOMAdapter",
    "ElementTreeAdapter",
]

from xml.dom import Node, XMLNS_NAMESPACE
from xml.etree.ElementTree import Element

from zope.interface import implementer

from txbind.base import PCDATAElement, WebDAVElement, WebDAVUnknownElement
from txbind.base import encodeXMLName
from txbind.element import lookupElement
from txbind.ixml import IElementTreeAdapter
from txbind.parser_etree import QNameSplit


@implementer(IElementTreeAdapter)
class WebDAVElementAdapter(object):
    """
    Adapter for trees of L{WebDAVElement}s, as produced by
    L{txbind.parser.WebDAVDocument}.

    WebDAV elements are not owned by a document, so the C{document}
    argument of L{createElement} is ignored and may be C{None}.
    """

    def matches(self, element, name, namespace):
        elementNamespace, elementName = element.qname()
        return (
            elementName == name and
            (elementNamespace or None) == (namespace or None)
        )


    def children(self, element):
        return [c for c in element.children if isinstance(c, WebDAVElement)]


    def text(self, element):
        return "".join([c.data for c in element.children if isinstance(c, PCDATAElement)])


    def createElement(self, document, name, namespace, text=None):
        try:
            elementClass = lookupElement((namespace, name))
        except KeyError:
            element = WebDAVUnknownElement.withName(namespace, name)
            if text is not None:
                element.children = (PCDATAElement(text),)
            return element

        if text is None:
            return elementClass()
        else:
            return elementClass(PCDATAElement(text))


    def appendChild(self, parent, child):
        parent.children = parent.children + (child,)



@implementer(IElementTreeAdapter)
class DOMAdapter(object):
    """
    Adapter for namespace-aware DOM trees, such as those returned by
    L{xml.dom.minidom.parseString}.

    Created elements declare their namespace as the default namespace; the
    declaration is dropped when the element is appended to a parent in the
    same namespace, so that serialized output stays free of redundant
    declarations.
    """

    def matches(self, element, name, namespace):
        return (
            element.localName == name and
            (element.namespaceURI or None) == (namespace or None)
        )


    def children(self, element):
        return [n for n in element.childNodes if n.nodeType == Node.ELEMENT_NODE]


    def text(self, element):
        return "".join([
            n.data for n in element.childNodes
            if n.nodeType in (Node.TEXT_NODE, Node.CDATA_SECTION_NODE)
        ])


    def createElement(self, document, name, namespace, text=None):
        element = document.createElementNS(namespace, name)
        element.setAttributeNS(XMLNS_NAMESPACE, "xmlns", namespace or "")
        if text is not None:
            element.appendChild(document.createTextNode(text))
        return element


    def appendChild(self, parent, child):
        if (
            child.hasAttributeNS(XMLNS_NAMESPACE, "xmlns") and
            child.getAttributeNS(XMLNS_NAMESPACE, "xmlns") == (child.namespaceURI or "") and
            (parent.namespaceURI or None) == (child.namespaceURI or None)
        ):
            child.removeAttributeNS(XMLNS_NAMESPACE, "xmlns")
        parent.appendChild(child)



@implementer(IElementTreeAdapter)
class ElementTreeAdapter(object):
    """
    Adapter for L{xml.etree.ElementTree} elements.

    ElementTree elements are not owned by a document, so the C{document}
    argument of L{createElement} is ignored and may be C{None}.
    """

    def matches(self, element, name, namespace):
        # Comments and processing instructions have non-string tags
        if not isinstance(element.tag, str):
            return False
        return QNameSplit(element.tag) == (namespace or "", name)


    def children(self, element):
        return [c for c in element if isinstance(c.tag, str)]


    def text(self, element):
        # Direct character data is the element's text plus the tails of its children
        return "".join([element.text or ""] + [c.tail or "" for c in element])


    def createElement(self, document, name, namespace, text=None):
        element = Element(encodeXMLName(namespace, name))
        element.text = text
        return element


    def appendChild(self, parent, child):
        parent.append(child)
