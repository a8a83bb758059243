#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

from amaranth import *
import numpy as np

import unittest

from dcfifo_hdl.gray import to_gray
from dcfifo_hdl.model import ReadPointerModel, WritePointerModel
from dcfifo_hdl.pointer import ReadPointer, WritePointer
from .amaranth_sim import AmaranthSim


class TestWritePointer(AmaranthSim):
    def setUp(self):
        self.addr_width = 4
        self.depth = 2**self.addr_width
        self.dut = WritePointer('sync', self.addr_width)

    def test_fill(self):
        async def bench(ctx):
            assert not ctx.get(self.dut.full)
            ctx.set(self.dut.inc, 1)
            for k in range(1, self.depth + 1):
                assert ctx.get(self.dut.en)
                await ctx.tick()
                assert ctx.get(self.dut.ptr) == k
                assert ctx.get(self.dut.ptr_gray) == to_gray(k)
                assert ctx.get(self.dut.addr) == k % self.depth
                assert ctx.get(self.dut.full) == (k == self.depth)
            # further increments are ignored
            for _ in range(10):
                assert not ctx.get(self.dut.en)
                await ctx.tick()
                assert ctx.get(self.dut.ptr) == self.depth
                assert ctx.get(self.dut.ptr_gray) == to_gray(self.depth)
                assert ctx.get(self.dut.full)
            # the read pointer moves by one entry
            ctx.set(self.dut.rptr_gray_sync, to_gray(1))
            await ctx.tick()
            assert not ctx.get(self.dut.full)
            assert ctx.get(self.dut.ptr) == self.depth
            await ctx.tick()
            assert ctx.get(self.dut.full)
            assert ctx.get(self.dut.ptr) == self.depth + 1

        self.simulate(bench)

    def test_no_increment(self):
        async def bench(ctx):
            for _ in range(10):
                await ctx.tick()
                assert ctx.get(self.dut.ptr) == 0
                assert ctx.get(self.dut.ptr_gray) == 0
                assert not ctx.get(self.dut.full)

        self.simulate(bench)

    def test_wrap_around(self):
        async def bench(ctx):
            ctx.set(self.dut.inc, 1)
            ptr = 0
            for _ in range(5 * self.depth):
                # read pointer trailing half a FIFO behind
                rptr = (ptr - self.depth // 2) % (2 * self.depth)
                ctx.set(self.dut.rptr_gray_sync, to_gray(rptr))
                await ctx.tick()
                ptr = (ptr + 1) % (2 * self.depth)
                assert ctx.get(self.dut.ptr) == ptr
                assert not ctx.get(self.dut.full)

        self.simulate(bench)

    def test_random_inputs(self):
        num_inputs = 1000
        inc = np.random.randint(0, 2, size=num_inputs)
        rptr = np.random.randint(0, 2 * self.depth, size=num_inputs)
        model = WritePointerModel(self.addr_width)

        async def bench(ctx):
            for j in range(num_inputs):
                ctx.set(self.dut.inc, int(inc[j]))
                ctx.set(self.dut.rptr_gray_sync, to_gray(int(rptr[j])))
                en = ctx.get(self.dut.en)
                await ctx.tick()
                accepted = model.step(inc[j], to_gray(int(rptr[j])))
                assert en == accepted, f'cycle = {j}'
                assert ctx.get(self.dut.ptr) == model.ptr
                assert ctx.get(self.dut.ptr_gray) == model.ptr_gray
                assert ctx.get(self.dut.addr) == model.addr
                assert ctx.get(self.dut.full) == model.full

        self.simulate(bench)

    def test_invalid_addr_width(self):
        with self.assertRaises(ValueError):
            WritePointer('sync', 0)


class TestReadPointer(AmaranthSim):
    def setUp(self):
        self.addr_width = 3
        self.depth = 2**self.addr_width
        self.dut = ReadPointer('sync', self.addr_width)

    def test_empty_after_reset(self):
        async def bench(ctx):
            assert ctx.get(self.dut.empty)
            ctx.set(self.dut.inc, 1)
            for _ in range(10):
                assert not ctx.get(self.dut.en)
                await ctx.tick()
                assert ctx.get(self.dut.empty)
                assert ctx.get(self.dut.ptr) == 0
                assert ctx.get(self.dut.ptr_gray) == 0

        self.simulate(bench)

    def test_drain(self):
        async def bench(ctx):
            ctx.set(self.dut.inc, 1)
            ctx.set(self.dut.wptr_gray_sync, to_gray(3))
            await ctx.tick()
            assert not ctx.get(self.dut.empty)
            assert ctx.get(self.dut.ptr) == 0
            for k in range(1, 4):
                assert ctx.get(self.dut.en)
                await ctx.tick()
                assert ctx.get(self.dut.ptr) == k
                assert ctx.get(self.dut.addr) == k
                assert ctx.get(self.dut.empty) == (k == 3)
            for _ in range(5):
                await ctx.tick()
                assert ctx.get(self.dut.ptr) == 3
                assert ctx.get(self.dut.empty)

        self.simulate(bench)

    def test_random_inputs(self):
        num_inputs = 1000
        inc = np.random.randint(0, 2, size=num_inputs)
        wptr = np.random.randint(0, 2 * self.depth, size=num_inputs)
        model = ReadPointerModel(self.addr_width)

        async def bench(ctx):
            for j in range(num_inputs):
                ctx.set(self.dut.inc, int(inc[j]))
                ctx.set(self.dut.wptr_gray_sync, to_gray(int(wptr[j])))
                en = ctx.get(self.dut.en)
                await ctx.tick()
                accepted = model.step(inc[j], to_gray(int(wptr[j])))
                assert en == accepted, f'cycle = {j}'
                assert ctx.get(self.dut.ptr) == model.ptr
                assert ctx.get(self.dut.ptr_gray) == model.ptr_gray
                assert ctx.get(self.dut.addr) == model.addr
                assert ctx.get(self.dut.empty) == model.empty

        self.simulate(bench)

    def test_invalid_addr_width(self):
        with self.assertRaises(ValueError):
            ReadPointer('sync', 0)


if __name__ == '__main__':
    unittest.main()
