#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   exceptions.py
# @Function     :   异常定义


class ECError(Exception):
    """ecpoint抛出的所有异常的基类"""


class InvalidState(ECError):
    """点处于非法状态, 如只有一个坐标为None, 或对已转换的点再次转换"""


class UnsupportedOperation(ECError):
    """当前坐标系下未定义的操作, 如仿射坐标点与Jacobian坐标点直接比较"""


class DivisionByZero(ECError, ZeroDivisionError):
    """除以有限域的零元, 如Z=0的Jacobian点转仿射坐标"""
