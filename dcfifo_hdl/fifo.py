#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

from amaranth import *
import amaranth.cli

from .cdc import GraySynchronizer
from .pointer import ReadPointer, WritePointer
from .storage import StorageArray


class AsyncFifo(Elaboratable):
    """Dual-clock FIFO with Gray-coded pointer synchronization

    The write pointer logic runs in ``w_domain`` and the read pointer logic
    runs in ``r_domain``. Each pointer is Gray-coded and carried into the
    opposite domain by a :class:`GraySynchronizer` clocked by the destination
    domain. The full flag is computed in the write domain from the
    synchronized read pointer, and the empty flag is computed in the read
    domain from the synchronized write pointer. Because the synchronized
    pointers lag behind, the flags are pessimistic: ``wfull`` may stay
    asserted and ``rempty`` may stay asserted for a few cycles after the
    other side has moved, but the FIFO never overflows or underflows.

    Each domain is reset by its own reset signal, and the two resets are
    independent. Both domains are expected to use an asynchronous reset.

    Writes while ``wfull`` is asserted and reads while ``rempty`` is asserted
    are ignored.

    Parameters
    ----------
    data_width : int
        Width of each FIFO entry.
    addr_width : int
        log2 of the FIFO depth.
    sync_stages : int
        Number of stages in each pointer synchronizer.
    r_domain : str
        Read clock domain.
    w_domain : str
        Write clock domain.

    Attributes
    ----------
    winc : Signal(), in
        Write request. The entry in ``wdata`` is written on the next
        ``w_domain`` clock edge if ``wfull`` is not asserted.
    wdata : Signal(data_width), in
        Write data.
    wfull : Signal(), out
        FIFO full flag (``w_domain``).
    waddr : Signal(addr_width + 1), out
        Write pointer, including the wrap bit. For debug only.
    rinc : Signal(), in
        Read request. The entry shown in ``rdata`` is consumed on the next
        ``r_domain`` clock edge if ``rempty`` is not asserted.
    rdata : Signal(data_width), out
        Read data. It shows the entry at the head of the FIFO, and it is
        valid whenever ``rempty`` is not asserted.
    rempty : Signal(), out
        FIFO empty flag (``r_domain``).
    raddr : Signal(addr_width + 1), out
        Read pointer, including the wrap bit. For debug only.
    """
    def __init__(self, data_width, addr_width, sync_stages=2,
                 r_domain='read', w_domain='write'):
        if data_width < 1:
            raise ValueError('data_width must be at least 1')
        if addr_width < 1:
            raise ValueError('addr_width must be at least 1')
        if sync_stages < 1:
            raise ValueError('sync_stages must be at least 1')
        self._r_domain = r_domain
        self._w_domain = w_domain
        self.w = data_width
        self.aw = addr_width
        self.sync_stages = sync_stages

        self.winc = Signal()
        self.wdata = Signal(data_width)
        self.wfull = Signal()
        self.waddr = Signal(addr_width + 1)

        self.rinc = Signal()
        self.rdata = Signal(data_width)
        self.rempty = Signal()
        self.raddr = Signal(addr_width + 1)

    @property
    def depth(self):
        return 2**self.aw

    def ports(self):
        return [
            self.winc, self.wdata, self.wfull, self.waddr,
            self.rinc, self.rdata, self.rempty, self.raddr,
        ]

    def elaborate(self, platform):
        m = Module()
        m.submodules.wptr = wptr = WritePointer(self._w_domain, self.aw)
        m.submodules.rptr = rptr = ReadPointer(self._r_domain, self.aw)
        m.submodules.sync_w2r = sync_w2r = GraySynchronizer(
            self._r_domain, self.aw + 1, self.sync_stages)
        m.submodules.sync_r2w = sync_r2w = GraySynchronizer(
            self._w_domain, self.aw + 1, self.sync_stages)
        m.submodules.storage = storage = StorageArray(
            self._w_domain, self.w, self.aw)

        # Pointer synchronization
        m.d.comb += [
            sync_w2r.i.eq(wptr.ptr_gray),
            rptr.wptr_gray_sync.eq(sync_w2r.o),
            sync_r2w.i.eq(rptr.ptr_gray),
            wptr.rptr_gray_sync.eq(sync_r2w.o),
        ]

        # Write side
        m.d.comb += [
            wptr.inc.eq(self.winc),
            self.wfull.eq(wptr.full),
            self.waddr.eq(wptr.ptr),
            storage.waddr.eq(wptr.addr),
            storage.wdata.eq(self.wdata),
            storage.wen.eq(wptr.en),
        ]

        # Read side
        m.d.comb += [
            rptr.inc.eq(self.rinc),
            self.rempty.eq(rptr.empty),
            self.raddr.eq(rptr.ptr),
            storage.raddr.eq(rptr.addr),
            self.rdata.eq(storage.rdata),
        ]

        return m


if __name__ == '__main__':
    fifo = AsyncFifo(8, 4)
    amaranth.cli.main(fifo, ports=fifo.ports())
