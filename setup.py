#!/usr/bin/env python3

import sys
from setuptools import setup, find_packages

if sys.version_info < (3, 8):
    raise ValueError("Requires Python 3.8+")

about = {}
with open('erllambda_release/_version.py', 'r') as f:
    exec(f.read(), about)

with open('requirements.txt', 'r') as f:
    requires = [x.strip() for x in f if x.strip()]

with open('test-requirements.txt', 'r') as f:
    test_requires = [x.strip() for x in f if x.strip()]

with open('README.rst', 'r') as f:
    readme = f.read()

setup(
    name='molot-erllambda',
    version=about['__version__'],
    description="Molot target that builds erllambda releases on top of relx releases.",
    long_description=readme,
    long_description_content_type='text/x-rst',
    license='MIT License',
    packages=find_packages(exclude=['tests', 'examples']),
    python_requires='>=3.8',
    install_requires=requires,
    extras_require={'test': test_requires},
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.8',
        'Topic :: Software Development :: Build Tools',
    ],
)
