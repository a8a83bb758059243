#!/usr/bin/env python3
#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

"""Build dut.v and run the cocotb testbench

The simulator is selected with the SIM environment variable (Icarus Verilog
by default).
"""

import os
from pathlib import Path

from cocotb_tools.runner import get_runner

import verilog


def main():
    here = Path(__file__).resolve().parent
    os.chdir(here)
    verilog.main()
    runner = get_runner(os.getenv('SIM', 'icarus'))
    runner.build(
        sources=[here / 'dut.v'],
        hdl_toplevel='dut',
        timescale=('1ns', '1ps'),
        build_dir=here / 'sim_build',
    )
    runner.test(
        hdl_toplevel='dut',
        hdl_toplevel_lang='verilog',
        test_module='test_dcfifo',
        build_dir=here / 'sim_build',
        test_dir=here,
    )


if __name__ == '__main__':
    main()
