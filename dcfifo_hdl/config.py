#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

class DcFifoConfig:
    """Dual-clock FIFO configuration

    This class defines the construction-time parameters of the dual-clock
    FIFO top-level. They are fixed for the lifetime of the FIFO.
    """
    def __init__(self, data_width=8, addr_width=4, sync_stages=2):
        # bits per stored item
        self.data_width = data_width
        # log2 of the capacity
        self.addr_width = addr_width
        # depth of each pointer synchronizer
        self.sync_stages = sync_stages

    @property
    def depth(self):
        return 2**self.addr_width

    def validate(self):
        if self.data_width < 1:
            raise ValueError('data_width must be at least 1')
        if self.addr_width < 1:
            raise ValueError('addr_width must be at least 1')
        if self.sync_stages < 1:
            raise ValueError('sync_stages must be at least 1')

    def __repr__(self):
        return (f'DcFifoConfig(data_width={self.data_width}, '
                f'addr_width={self.addr_width}, '
                f'sync_stages={self.sync_stages})')
