#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""椭圆曲线点的仿射/Jacobian坐标表示与比较"""
import logging

from .curve import CURVES, CurveFp, get_curve, secp256k1, secp256r1, sm2p256v1
from .exceptions import DivisionByZero, ECError, InvalidState, UnsupportedOperation
from .field import FieldElement, PrimeField
from .point import Affine, Jacobian, Point

__version__ = '0.1.0'
__author__ = 'ecpoint developers'
__email__ = ''

logging.getLogger(__name__).addHandler(logging.NullHandler())
