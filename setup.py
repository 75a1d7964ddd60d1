#!/usr/bin/env python

# Copyright (C) 2024 web2print contributors
#
# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation
# files (the "Software"), to deal in the Software without
# restriction, including without limitation the rights to use,
# copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES
# OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY,
# WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.

from setuptools import setup

py_modules=['pdfreactor', 'gotenberg']

setup(name='web2print',
      version='1.0.0',
      description="Clients for the PDFreactor and Gotenberg rendering services.",
      license="License :: OSI Approved :: MIT License",
      author='web2print contributors',
      long_description="""
Thin clients that delegate HTML-to-PDF/image rendering to the PDFreactor
Web Service and to Gotenberg, plus a web-to-print processor for Gotenberg.
""",
      py_modules=py_modules,
      python_requires='>=3.8',
      extras_require={'test': ['pytest']},
      entry_points={
          'console_scripts': [
              'pdfreactor=pdfreactor:_console',
              'gotenberg=gotenberg:_console',
          ],
      },
      classifiers=["License :: OSI Approved :: MIT License",
                   "Operating System :: MacOS",
                   "Operating System :: Microsoft",
                   "Operating System :: POSIX",
                   "Operating System :: Unix",
                   "Intended Audience :: Developers",
                   "Topic :: Software Development :: Libraries"])
