#!/usr/bin/env python
import setuptools


with open("README.md", "r") as fh:
    long_description = fh.read()


setuptools.setup(
    name='fontconv',
    version='0.1.0',
    author='The fontconv Authors',
    description='Pack a raw 64x4 grid of 8x16 glyphs into a bitmap font.',
    license='GPLv3+',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=['fontconv'],
    python_requires='>=3.6',
    install_requires=['pygame'],
    extras_require={'test': ['mock', 'pytest']},
    classifiers=[
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers',
        'Topic :: Text Processing :: Fonts',
        'Topic :: Software Development :: Libraries :: pygame',
    ],
)
