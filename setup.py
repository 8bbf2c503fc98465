#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

TREEPATCH_PATH = HERE / "treepatch"


def get_version(path):
    "Read __version__ from a file without importing the package."
    text = path.read_text(encoding='utf-8')
    return re.search(r'^__version__ = "([^"]+)"', text, re.MULTILINE).group(1)


VERSION = get_version(TREEPATCH_PATH / '_version.py')

with open(HERE / 'README.md', encoding='utf-8') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='treepatch',
      version=VERSION,
      description='Diff, patch and merge json documents (RFC 6902, RFC 6901, RFC 7396)',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      author='Jupyter Development Team',
      license='BSD',
      packages=find_packages(include=['treepatch', 'treepatch.*']),
      package_data={
          'treepatch': ['*.schema.json'],
          'treepatch.tests': ['files/*.json'],
      },
      python_requires='>=3.8',
      install_requires=[
          'colorama',
          'jupyter_core',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
              'jsonschema',
          ],
      },
      entry_points={
          'console_scripts': [
              'treepatch = treepatch.__main__:main_dispatch',
              'tpdiff = treepatch.diffapp:main',
              'tppatch = treepatch.patchapp:main',
              'tpmerge = treepatch.mergeapp:main',
          ],
      },
      classifiers=[
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
      ],
    )
