#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

from amaranth import *
import amaranth.cli

from .gray import GrayEncoder


class WritePointer(Elaboratable):
    """Write pointer and full flag of a dual-clock FIFO

    This module keeps the binary write pointer, its Gray-coded copy, and the
    registered full flag, all in the write clock domain. Pointers are
    ``addr_width + 1`` bits wide and count modulo twice the FIFO depth. The
    extra MSB (the wrap bit) is only used to tell a full FIFO from an empty
    one.

    The FIFO is full when the next Gray write pointer equals the
    synchronized Gray read pointer with its two MSBs inverted, which means
    that the write pointer is exactly one lap ahead of the read pointer.

    An increment requested while the FIFO is full is ignored.

    Parameters
    ----------
    domain : str
        Write clock domain.
    addr_width : int
        Width of the storage address. The FIFO depth is ``2**addr_width``.

    Attributes
    ----------
    inc : Signal(), in
        Increment request.
    rptr_gray_sync : Signal(addr_width + 1), in
        Gray read pointer, synchronized to the write clock domain.
    full : Signal(), out
        Full flag.
    en : Signal(), out
        Asserted when the increment is accepted, i.e., ``inc & ~full``.
    ptr : Signal(addr_width + 1), out
        Binary write pointer, including the wrap bit.
    ptr_gray : Signal(addr_width + 1), out
        Gray write pointer.
    addr : Signal(addr_width), out
        Storage write address (the LSBs of ``ptr``).
    """
    def __init__(self, domain, addr_width):
        if addr_width < 1:
            raise ValueError('addr_width must be at least 1')
        self._domain = domain
        self.aw = addr_width

        self.inc = Signal()
        self.rptr_gray_sync = Signal(addr_width + 1)
        self.full = Signal()
        self.en = Signal()
        self.ptr = Signal(addr_width + 1)
        self.ptr_gray = Signal(addr_width + 1)
        self.addr = Signal(addr_width)

    def elaborate(self, platform):
        m = Module()
        m.submodules.gray_next = gray_next = GrayEncoder(self.aw + 1)
        ptr_next = Signal(self.aw + 1)
        rptr = self.rptr_gray_sync
        full_next = gray_next.o == Cat(rptr[:-2], ~rptr[-2:])
        m.d.comb += [
            self.en.eq(self.inc & ~self.full),
            ptr_next.eq(self.ptr + self.en),
            gray_next.i.eq(ptr_next),
            self.addr.eq(self.ptr[:-1]),
        ]
        m.d[self._domain] += [
            self.ptr.eq(ptr_next),
            self.ptr_gray.eq(gray_next.o),
            self.full.eq(full_next),
        ]
        return m


class ReadPointer(Elaboratable):
    """Read pointer and empty flag of a dual-clock FIFO

    This is the read-side counterpart of :class:`WritePointer`. The FIFO is
    empty when the next Gray read pointer equals the synchronized Gray write
    pointer. The empty flag is asserted after reset.

    An increment requested while the FIFO is empty is ignored.

    Parameters
    ----------
    domain : str
        Read clock domain.
    addr_width : int
        Width of the storage address. The FIFO depth is ``2**addr_width``.

    Attributes
    ----------
    inc : Signal(), in
        Increment request.
    wptr_gray_sync : Signal(addr_width + 1), in
        Gray write pointer, synchronized to the read clock domain.
    empty : Signal(), out
        Empty flag.
    en : Signal(), out
        Asserted when the increment is accepted, i.e., ``inc & ~empty``.
    ptr : Signal(addr_width + 1), out
        Binary read pointer, including the wrap bit.
    ptr_gray : Signal(addr_width + 1), out
        Gray read pointer.
    addr : Signal(addr_width), out
        Storage read address (the LSBs of ``ptr``).
    """
    def __init__(self, domain, addr_width):
        if addr_width < 1:
            raise ValueError('addr_width must be at least 1')
        self._domain = domain
        self.aw = addr_width

        self.inc = Signal()
        self.wptr_gray_sync = Signal(addr_width + 1)
        self.empty = Signal(init=1)
        self.en = Signal()
        self.ptr = Signal(addr_width + 1)
        self.ptr_gray = Signal(addr_width + 1)
        self.addr = Signal(addr_width)

    def elaborate(self, platform):
        m = Module()
        m.submodules.gray_next = gray_next = GrayEncoder(self.aw + 1)
        ptr_next = Signal(self.aw + 1)
        m.d.comb += [
            self.en.eq(self.inc & ~self.empty),
            ptr_next.eq(self.ptr + self.en),
            gray_next.i.eq(ptr_next),
            self.addr.eq(self.ptr[:-1]),
        ]
        m.d[self._domain] += [
            self.ptr.eq(ptr_next),
            self.ptr_gray.eq(gray_next.o),
            self.empty.eq(gray_next.o == self.wptr_gray_sync),
        ]
        return m


if __name__ == '__main__':
    wptr = WritePointer('sync', 4)
    amaranth.cli.main(
        wptr, ports=[
            wptr.inc, wptr.rptr_gray_sync, wptr.full, wptr.en, wptr.ptr,
            wptr.ptr_gray, wptr.addr])
