#!/usr/bin/env python

##
# Copyright (c) 2006-2017 Apple Inc. All rights reserved.
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

from __future__ import print_function

from os.path import dirname, abspath, join as joinpath
from setuptools import setup, find_packages as setuptools_find_packages
import errno
import os
import subprocess

base_version = "1.0"
base_project = "txbind"


#
# Utilities
#
def find_packages():
    modules = []

    def is_package(path):
        return (
            os.path.isdir(path) and
            os.path.isfile(os.path.join(path, "__init__.py"))
        )

    for pkg in filter(is_package, os.listdir(".")):
        modules.extend([pkg, ] + [
            "{}.{}".format(pkg, subpkg)
            for subpkg in setuptools_find_packages(pkg)
        ])
    return modules


def git_output(*args):
    """
    Run a git command and return its stripped output, or C{None} if git is
    not available or the command fails.
    """
    try:
        output = subprocess.check_output(
            ("git",) + args,
            stderr=subprocess.STDOUT,
        )
    except OSError as e:
        if e.errno == errno.ENOENT:
            return None
        raise
    except subprocess.CalledProcessError:
        return None

    return output.decode("utf-8").strip()


def git_info(wc_path):
    """
    Look up info on a GIT working copy.
    """
    branch = git_output("-C", wc_path, "rev-parse", "--abbrev-ref", "HEAD")
    if branch is None:
        return None

    revision = git_output("-C", wc_path, "rev-parse", "--verify", "HEAD")
    if revision is None:
        return None

    tags = git_output("-C", wc_path, "describe", "--exact-match", "HEAD")
    if tags:
        tag = tags.split()[0]
    else:
        tag = None

    return dict(
        project=base_project,
        branch=branch,
        revision=revision,
        tag=tag,
    )


def version():
    """
    Compute the version number.
    """
    source_root = dirname(abspath(__file__))

    info = git_info(source_root)

    if info is None:
        # We don't have GIT info...
        return "{}a1+unknown".format(base_version)

    if info["tag"]:
        project_version = info["tag"]
        try:
            project, version = project_version.rsplit("-", 1)
        except ValueError:
            project = project_version
            version = "Unknown"

        # Only process tags with our project name prefix
        if project == project_name:
            assert version == base_version, (
                "Tagged version {!r} != {!r}".format(version, base_version)
            )
            # This is a correctly tagged release of this project.
            return base_version

    if info["branch"] == "master":
        # This is master.
        # Designate this as beta1, dev version based on git revision.
        return "{}b1.dev0+{}".format(base_version, info["revision"])

    # This is some unknown branch or tag...
    return "{}a1.dev0+{}.{}".format(
        base_version,
        info["revision"],
        info["branch"].replace("/", ".").replace("-", ".").lower(),
    )


#
# Options
#

project_name = "txbind"

description = "WebDAV binding (RFC 5842) request body support"

with open(joinpath(dirname(__file__), "README.rst")) as f:
    long_description = f.read()

classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Twisted",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: Apache Software License",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Text Processing :: Markup :: XML",
]

author = "Apple Inc."

license = "Apache License, Version 2.0"

platforms = ["all"]


#
# Dependencies
#

setup_requirements = []

install_requirements = [
    # Core frameworks
    "zope.interface",
    "Twisted",
]

extras_requirements = {}


#
# Run setup
#

def doSetup():
    setup(
        name=project_name,
        version=version(),
        description=description,
        long_description=long_description,
        classifiers=classifiers,
        author=author,
        license=license,
        platforms=platforms,
        packages=find_packages(),
        setup_requires=setup_requirements,
        install_requires=install_requirements,
        extras_require=extras_requirements,
        python_requires=">=3.8",
    )


#
# Main
#

if __name__ == "__main__":
    doSetup()
