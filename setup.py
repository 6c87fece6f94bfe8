#!/usr/bin/env python

"""
    affinematrix
    ============

    affinematrix handles 2D affine transformation matrices.

"""

import sys

from setuptools import setup

if sys.version_info.major < 3:
    raise RuntimeError('affinematrix does not support Python 2.x.')

setup()
