#!/usr/bin/env python3

from setuptools import find_packages, setup

setup(
    name='flatini',
    version='0.1.0',
    description='flat ini configuration reader',
    license='BSD',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.9',
    install_requires=['snakeoil'],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
    ],
)
