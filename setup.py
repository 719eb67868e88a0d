#!/usr/bin/python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import os

ROOT = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(ROOT, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='pysteamtoolbox',
    version='0.1.0',  # Ideally should be same as your GitHub release tag version
    packages=find_packages(exclude=['pysteamtoolbox.tests']),
    python_requires='>=3.8',
    description='pySteamToolbox - IAPWS-IF97 Water and Steam Property Utilities',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Mark W. Burgoyne',
    author_email='mark.w.burgoyne@gmail.com',
    url='https://github.com/mwburgoyne/pySteamToolbox',
    license='GPLv3',
    keywords=['steam', 'water', 'iapws', 'if97', 'steam tables', 'thermodynamics'],
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Topic :: Scientific/Engineering :: Physics',
    ],
    install_requires=[
        'numpy',
        'scipy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
