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
XML element-tree interfaces
"""

__all__ = [
    "IElementTreeAdapter",
]

from zope.interface import Interface


class IElementTreeAdapter(Interface):
    """
    The handful of element-tree operations that request body codecs need,
    so that a codec can be used with any XML library.
    """

    def matches(element, name, namespace): #@NoSelf
        """
        Determine whether an element has the given qualified name.

        @param element: the element to check.
        @param name: the expected local name.
        @type name: C{str}
        @param namespace: the expected namespace URI.
        @type namespace: C{str}

        @return: C{True} if both the local name and the namespace of
            C{element} are the given ones, C{False} otherwise.
        """

    def children(element): #@NoSelf
        """
        Iterate the child elements of an element in document order.
        Character data, comments and processing instructions are skipped.

        @return: an iterable of elements.
        """

    def text(element): #@NoSelf
        """
        Return the text content of an element: the concatenation of its
        direct character data children, verbatim.

        @return: a C{str}; C{""} if the element has no character data.
        """

    def createElement(document, name, namespace, text=None): #@NoSelf
        """
        Create a new element.

        @param document: the document the element is created in. Libraries
            without owner documents ignore it.
        @param name: the local name.
        @param namespace: the namespace URI.
        @param text: if not C{None}, the element is created with a single
            character data child with this value.

        @return: the new element, not yet attached to a parent.
        """

    def appendChild(parent, child): #@NoSelf
        """
        Append C{child} as the last child of C{parent}.
        """
