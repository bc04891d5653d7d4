#!/usr/bin/env python

from setuptools import setup, find_packages


setup(
    name='pkgmatch',
    version='0.1.0',
    description='pkgsrc package names and dependency patterns matching',
    license='ISC',
    packages=find_packages(exclude=('tests', 'tests.*')),
    python_requires='>=3.10',
    install_requires=('requests>=2.0.0',),
    extras_require={
        'test': ['pytest'],
    },
    entry_points="""

        [console_scripts]
        pkgmatch = pkgmatch.cli:pkgmatch

        [pkgmatch.files.backend]
        file=pkgmatch.files.backends.filesystem:LocalFile
        http=pkgmatch.files.backends.http:HttpFile
        https=pkgmatch.files.backends.http:HttpFile
    """,
    classifiers=(
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: ISC License (ISCL)',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development',
        'Topic :: System :: Software Distribution',
        'Topic :: Utilities',
    ),
)
