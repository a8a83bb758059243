#!/usr/bin/env python3
#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

from amaranth import *
from amaranth.back.verilog import convert

from dcfifo_hdl.config import DcFifoConfig
from dcfifo_hdl.dcfifo import DcFifo


def main():
    dut = DcFifo(DcFifoConfig(data_width=16, addr_width=4, sync_stages=2))
    with open('dut.v', 'w') as f:
        f.write('`timescale 1ps/1ps\n')
        f.write(convert(
            dut, name='dut', ports=dut.ports(), emit_src=False))


if __name__ == '__main__':
    main()
