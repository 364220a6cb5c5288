#!/usr/bin/env python3

# working from https://github.com/pypa/sampleproject
from setuptools import setup, find_packages
import sys

assert(sys.version_info >= (3,6))

setup(
    name='authsecret',
    version='1.0.0',
    description="generates random signing secrets for authentication settings",
    license='MIT',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: POSIX',
        'Topic :: Security',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
    ],
    keywords='secret random base64 auth',
    packages=find_packages(exclude=['contrib', 'docs', 'tests*']),
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'authsecret = authsecret.create_secrets:main',
        ],
    },
    data_files=[],
)
