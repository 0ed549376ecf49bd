#!/usr/bin/env python

"""The setup script."""

from setuptools import setup, find_packages

from ecpoint import __version__, __author__, __email__

with open('README.rst') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst') as history_file:
    history = history_file.read()

requirements = []

test_requirements = ['pytest>=3', ]

setup(
    name='ecpoint',
    version=__version__,
    author=__author__,
    author_email=__email__,
    license="MIT license",
    description="elliptic curve points in affine and jacobian coordinates",
    long_description=readme + '\n\n' + history,
    long_description_content_type='text/x-rst',
    install_requires=requirements,
    extras_require={'test': test_requirements},
    include_package_data=True,
    keywords=['ecc', 'elliptic-curve', 'jacobian', 'sm2', 'secp256k1'],
    packages=find_packages(include=['ecpoint', 'ecpoint.*']),
    test_suite='tests',
    tests_require=test_requirements,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Security :: Cryptography',
    ],
)
