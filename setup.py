#!/usr/bin/env python3
from __future__ import annotations

import re
import pathlib
import setuptools

__minver__ = '3.8'
__slogan__ = 'Convert text read from a binary stream to uppercase.'
__topics__ = [
    'Development Status :: 3 - Alpha',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Text Processing',
    'Topic :: Utilities',
]

__test_requires__ = [
    'flake8',
    'pycodestyle',
    'pyflakes',
    'pytest',
]


def get_version() -> str:
    init = pathlib.Path(__file__).parent.joinpath('upcase', '__init__.py')
    match = re.search(R'''^__version__\s*=\s*['"]([^'"]+)['"]''', init.read_text('UTF8'), re.MULTILINE)
    if match is None:
        raise RuntimeError('unable to determine the package version')
    return match[1]


def get_setup_readme(filename: str | pathlib.Path | None = None):
    if filename is None:
        filename = pathlib.Path(__file__).parent.joinpath('README.md')
    with open(filename, 'r', encoding='UTF8') as README:
        return README.read()


def get_config():
    return dict(
        name='upcase',
        version=get_version(),
        description=__slogan__,
        long_description=get_setup_readme(),
        long_description_content_type='text/markdown',
        python_requires=F'>={__minver__}',
        classifiers=__topics__,
        packages=setuptools.find_packages(include=('upcase*',)),
        install_requires=[],
        extras_require={'test': __test_requires__},
    )


if __name__ == '__main__':
    setuptools.setup(**get_config())
