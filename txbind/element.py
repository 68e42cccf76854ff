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
WebDAV XML elements.
"""

__all__ = [
    "WebDAVDocument",
    "dav_namespace",
    "WebDAVElement",
    "PCDATAElement",
    "WebDAVUnknownElement",
    "WebDAVTextElement",
    "registerElement",
    "registerElementClass",
    "lookupElement",
]

from txbind.parser import WebDAVDocument
from txbind.base import dav_namespace
from txbind.base import WebDAVElement
from txbind.base import PCDATAElement, WebDAVUnknownElement
from txbind.base import WebDAVTextElement
from txbind.base import _elements_by_qname


##
# XML element registration
##

def registerElement(elementClass):
    """
    Register an XML element class with the parser and add to this module's namespace.
    """
    assert issubclass(elementClass, WebDAVElement), "Not a WebDAVElement: %s" % (elementClass,)
    assert elementClass.namespace, "Element has no namespace: %s" % (elementClass,)
    assert elementClass.name, "Element has no name: %s" % (elementClass,)

    qname = elementClass.namespace, elementClass.name

    if qname in _elements_by_qname:
        raise AssertionError(
            "Attempting to register element %s multiple times: (%r, %r)"
            % (elementClass.sname(), _elements_by_qname[qname], elementClass)
        )

    _elements_by_qname[qname] = elementClass

    return elementClass


def registerElementClass(elementClass):
    """
    Add an XML element class to this module's namespace.
    """
    env = globals()
    name = elementClass.__name__

    if name in env:
        raise AssertionError(
            "Attempting to register element class %s multiple times: (%r, %r)"
            % (name, env[name], elementClass)
        )

    env[name] = elementClass
    __all__.append(name)

    return elementClass


def lookupElement(qname):
    """
    Return the element class for the element with the given qname.

    @raise KeyError: if no class is registered for C{qname}.
    """
    return _elements_by_qname[qname]
