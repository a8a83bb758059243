#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

import cocotb

from cocotb.clock import Clock
from cocotb.triggers import ClockCycles, FallingEdge


async def counter(dut, count, max_iter=1000):
    falling = FallingEdge(dut.write_clk)
    for n in range(count):
        for _ in range(max_iter):
            await falling
            dut.wdata.value = n
            dut.winc.value = winc = not dut.wfull.value
            if winc:
                break
        else:
            raise Exception('exceeded maximum iterations')
    await falling
    dut.winc.value = 0


@cocotb.test()
async def test_dcfifo(dut):
    dut.read_rst.value = 1
    dut.write_rst.value = 1
    dut.winc.value = 0
    dut.rinc.value = 0
    cocotb.start_soon(Clock(dut.write_clk, 10, unit='ns').start())
    cocotb.start_soon(Clock(dut.read_clk, 17, unit='ns').start())
    await ClockCycles(dut.read_clk, 10)
    dut.read_rst.value = 0
    dut.write_rst.value = 0
    assert dut.rempty.value
    assert not dut.wfull.value
    await ClockCycles(dut.write_clk, 5)

    count = 1024
    cocotb.start_soon(counter(dut, count))

    falling = FallingEdge(dut.read_clk)
    for n in range(count):
        for _ in range(1000):
            await falling
            dut.rinc.value = rinc = not dut.rempty.value
            if rinc:
                assert dut.rdata.value == n % 2**16
                break
        else:
            raise Exception('exceeded maximum iterations')
    await falling
    dut.rinc.value = 0
    await ClockCycles(dut.read_clk, 5)
    assert dut.rempty.value
    assert dut.raddr.value == count % 32
