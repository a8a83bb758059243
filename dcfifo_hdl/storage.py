#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

from amaranth import *
from amaranth.lib.memory import Memory
import amaranth.cli


class StorageArray(Elaboratable):
    """Dual-port storage for a dual-clock FIFO

    The write port is synchronous to the write clock domain. The read port
    is asynchronous: ``rdata`` always shows the contents of the entry
    addressed by ``raddr``, including a write committed on the last write
    clock edge.

    The contents are not affected by resets, and no write takes place while
    the write domain is in reset.

    Parameters
    ----------
    w_domain : str
        Write clock domain.
    data_width : int
        Width of each entry.
    addr_width : int
        Address width. The number of entries is ``2**addr_width``.

    Attributes
    ----------
    waddr : Signal(addr_width), in
        Write address.
    wdata : Signal(data_width), in
        Write data.
    wen : Signal(), in
        Write enable.
    raddr : Signal(addr_width), in
        Read address.
    rdata : Signal(data_width), out
        Read data.
    """
    def __init__(self, w_domain, data_width, addr_width):
        if data_width < 1:
            raise ValueError('data_width must be at least 1')
        if addr_width < 1:
            raise ValueError('addr_width must be at least 1')
        self._w_domain = w_domain
        self.w = data_width
        self.aw = addr_width

        self.waddr = Signal(addr_width)
        self.wdata = Signal(data_width)
        self.wen = Signal()
        self.raddr = Signal(addr_width)
        self.rdata = Signal(data_width)

    @property
    def depth(self):
        return 2**self.aw

    def elaborate(self, platform):
        m = Module()
        m.submodules.mem = mem = Memory(
            shape=self.w, depth=self.depth, init=[])
        wrport = mem.write_port(domain=self._w_domain)
        rdport = mem.read_port(domain='comb')
        m.d.comb += [
            wrport.addr.eq(self.waddr),
            wrport.data.eq(self.wdata),
            wrport.en.eq(self.wen & ~ResetSignal(self._w_domain)),
            rdport.addr.eq(self.raddr),
            self.rdata.eq(rdport.data),
        ]
        return m


if __name__ == '__main__':
    storage = StorageArray('sync', 8, 4)
    amaranth.cli.main(
        storage, ports=[
            storage.waddr, storage.wdata, storage.wen, storage.raddr,
            storage.rdata])
