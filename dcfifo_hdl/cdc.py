#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

from amaranth import *
import amaranth.back.verilog


class GraySynchronizer(Elaboratable):
    """Synchronizer for Gray-coded pointers

    This is a chain of registers clocked entirely by the output clock
    domain. It carries a Gray-coded pointer produced in another clock domain
    into ``o_domain``. Since consecutive values of the input differ in a
    single bit, a sample taken while the input is changing can only resolve
    to the value before or the value after the change, both of which are
    values that the source actually held. The input is always sampled as a
    whole on each active edge of ``o_domain``; in simulation, an input that
    changes at the same instant as the edge is sampled with its previous
    value.

    Unlike a plain flip-flop synchronizer, the stages are resettable by the
    ``o_domain`` reset, so that an asynchronous reset of the output domain
    immediately brings the synchronized pointer back to zero.

    Parameters
    ----------
    o_domain : str
        Output clock domain.
    width : int
        Width of the synchronized value.
    stages : int
        Number of synchronization stages. The output lags the input by
        exactly this number of ``o_domain`` clock edges. Two stages is the
        conventional minimum for an acceptable failure rate in hardware.

    Attributes
    ----------
    delay : int
        Latency (in ``o_domain`` clock edges) between a change of the input
        and its appearance at the output.
    i : Signal(width), in
        Input, driven from the source clock domain.
    o : Signal(width), out
        Output, synchronous to ``o_domain``.
    """
    def __init__(self, o_domain, width, stages=2):
        if width < 1:
            raise ValueError('width must be at least 1')
        if stages < 1:
            raise ValueError('stages must be at least 1')
        self._o_domain = o_domain
        self.w = width
        self.stages = stages

        self.i = Signal(width)
        self.o = Signal(width)

    @property
    def delay(self):
        return self.stages

    def model(self, i_samples):
        """Output after each o_domain edge

        ``i_samples`` holds the value of the input just before each edge.
        """
        i_samples = list(i_samples)
        return ([0] * (self.stages - 1) + i_samples)[:len(i_samples)]

    def elaborate(self, platform):
        m = Module()
        stages = [Signal(self.w, name=f'stage{j}')
                  for j in range(self.stages)]
        for src, dst in zip((self.i, *stages), stages):
            m.d[self._o_domain] += dst.eq(src)
        m.d.comb += self.o.eq(stages[-1])
        return m


def gen_verilog_gray_sync(width=5, stages=2):
    m = Module()
    read = ClockDomain(async_reset=True)
    m.domains += read
    m.submodules.sync = sync = GraySynchronizer('read', width, stages)
    with open('gray_sync.v', 'w') as f:
        f.write(amaranth.back.verilog.convert(
            m, ports=[sync.i, sync.o, read.clk, read.rst],
            emit_src=False))


if __name__ == '__main__':
    gen_verilog_gray_sync()
