#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

from .config import DcFifoConfig


def default():
    """Default configuration: 16 x 8-bit entries, 2 synchronizer stages"""
    return DcFifoConfig()


def wide():
    """256 x 32-bit entries"""
    return DcFifoConfig(data_width=32, addr_width=8)


def three_stage():
    """Default FIFO with 3 synchronizer stages for fast clocks"""
    config = DcFifoConfig()
    config.sync_stages = 3
    return config


def minimal():
    """Smallest valid FIFO: 2 x 1-bit entries, 1 synchronizer stage"""
    return DcFifoConfig(data_width=1, addr_width=1, sync_stages=1)
