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

__all__ = [
    "AbstractWebDAVDocument",
]

from io import BytesIO, StringIO

from txbind.base import WebDAVElement


class AbstractWebDAVDocument(object):
    """
    WebDAV XML document.
    """
    @classmethod
    def fromStream(cls, source):
        raise NotImplementedError()


    @classmethod
    def fromString(cls, source):
        if isinstance(source, bytes):
            source = BytesIO(source)
        else:
            source = StringIO(source)
        try:
            return cls.fromStream(source)
        finally:
            source.close()


    def __init__(self, root_element):
        """
        root_element must be a WebDAVElement instance.
        """
        super(AbstractWebDAVDocument, self).__init__()

        if not isinstance(root_element, WebDAVElement):
            raise ValueError("Not a WebDAVElement: %r" % (root_element,))

        self.root_element = root_element


    def __eq__(self, other):
        if isinstance(other, AbstractWebDAVDocument):
            return self.root_element == other.root_element
        else:
            return NotImplemented


    __hash__ = None


    def writeXML(self, output):
        raise NotImplementedError()


    def toxml(self):
        output = StringIO()
        self.writeXML(output)
        return output.getvalue()
