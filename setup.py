import os
import re

from setuptools import setup, find_packages

# Utility function to read the README file.
# Used for the long_description.
def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()

# Read metadata from version file
metadata_file = read(os.path.join('causalfilt', '_version.py'))
metadata = dict(re.findall("__([a-z]+)__ = '([^']+)'", metadata_file))

setup(
    name = 'causalfilt',
    version = metadata['version'],
    description = ("Multi-dimensional causal filters with locally variable coefficients."),
    license = "Apache License, Version 2.0",
    keywords = "numpy, causal filter, recursive filter, helix, NSHP",
    packages=find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
    long_description=read('README.rst'),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.6',

    install_requires=[ 'numpy', ],

    extras_require={
        'docs': [ 'sphinx', 'docutils', 'matplotlib', ],
        'test': [ 'pytest', 'coverage', ],
    },
)

# vim:sw=4:sts=4:et
