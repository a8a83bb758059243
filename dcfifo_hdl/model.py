#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

"""Cycle model of the dual-clock FIFO

The classes in this module advance one clock edge per call to ``step()``
and hold exactly the same registers as the gateware in :mod:`.fifo`, so
that they can be compared cycle by cycle in simulation. The write and read
domains only interact through the Gray pointer synchronizers.
"""

import logging

from .gray import to_gray

logger = logging.getLogger(__name__)


class GraySynchronizerModel:
    """Model of :class:`.cdc.GraySynchronizer`"""
    def __init__(self, stages=2):
        if stages < 1:
            raise ValueError('stages must be at least 1')
        self.stages = [0] * stages

    @property
    def output(self):
        return self.stages[-1]

    def reset(self):
        self.stages = [0] * len(self.stages)

    def step(self, value):
        self.stages = [value] + self.stages[:-1]
        return self.output


class _PointerModel:
    def __init__(self, addr_width):
        if addr_width < 1:
            raise ValueError('addr_width must be at least 1')
        self.aw = addr_width
        self.modulus = 2**(addr_width + 1)
        self.reset()

    def reset(self):
        self.ptr = 0
        self.ptr_gray = 0

    @property
    def addr(self):
        return self.ptr & (2**self.aw - 1)

    def _advance(self, en):
        self.ptr = (self.ptr + int(en)) % self.modulus
        self.ptr_gray = to_gray(self.ptr)


class WritePointerModel(_PointerModel):
    """Model of :class:`.pointer.WritePointer`"""
    def reset(self):
        super().reset()
        self.full = False

    def step(self, inc, rptr_gray_sync):
        """Write clock edge

        Returns whether the increment was accepted.
        """
        en = bool(inc) and not self.full
        if inc and not en:
            logger.debug('write increment ignored: FIFO full')
        self._advance(en)
        # the two MSBs of the read pointer are inverted
        top = 0b11 << (self.aw - 1)
        self.full = self.ptr_gray == rptr_gray_sync ^ top
        return en


class ReadPointerModel(_PointerModel):
    """Model of :class:`.pointer.ReadPointer`"""
    def reset(self):
        super().reset()
        self.empty = True

    def step(self, inc, wptr_gray_sync):
        """Read clock edge

        Returns whether the increment was accepted.
        """
        en = bool(inc) and not self.empty
        if inc and not en:
            logger.debug('read increment ignored: FIFO empty')
        self._advance(en)
        self.empty = self.ptr_gray == wptr_gray_sync
        return en


class AsyncFifoModel:
    """Model of :class:`.fifo.AsyncFifo`

    The write and read domains are advanced with :meth:`step_write` and
    :meth:`step_read`, or with :meth:`step` when the two clock edges happen
    at the same time. Each domain can be reset at any time with
    :meth:`reset_write` and :meth:`reset_read`.

    When both edges happen at the same time, each synchronizer samples the
    pointer of the other domain before the edge, which is how the gateware
    behaves in simulation.
    """
    def __init__(self, data_width, addr_width, sync_stages=2):
        if data_width < 1:
            raise ValueError('data_width must be at least 1')
        self.data_mask = 2**data_width - 1
        self.wptr = WritePointerModel(addr_width)
        self.rptr = ReadPointerModel(addr_width)
        self.sync_w2r = GraySynchronizerModel(sync_stages)
        self.sync_r2w = GraySynchronizerModel(sync_stages)
        self.storage = [0] * 2**addr_width

    @property
    def depth(self):
        return len(self.storage)

    @property
    def wfull(self):
        return self.wptr.full

    @property
    def waddr(self):
        return self.wptr.ptr

    @property
    def rempty(self):
        return self.rptr.empty

    @property
    def raddr(self):
        return self.rptr.ptr

    @property
    def rdata(self):
        return self.storage[self.rptr.addr]

    def reset_write(self):
        logger.debug('write domain reset')
        self.wptr.reset()
        self.sync_r2w.reset()

    def reset_read(self):
        logger.debug('read domain reset')
        self.rptr.reset()
        self.sync_w2r.reset()

    def step(self, write_edge=False, read_edge=False, winc=0, wdata=0,
             rinc=0):
        """Advance one or both clock domains by one edge

        Returns a tuple ``(written, read_data)``, where ``written`` tells
        whether ``wdata`` was accepted and ``read_data`` is the entry consumed
        by the read domain, or ``None`` if no entry was consumed.
        """
        wptr_gray = self.wptr.ptr_gray
        rptr_gray = self.rptr.ptr_gray
        written = False
        read_data = None
        if read_edge:
            head = self.rdata
            if self.rptr.step(rinc, self.sync_w2r.output):
                read_data = head
            self.sync_w2r.step(wptr_gray)
        if write_edge:
            addr = self.wptr.addr
            written = self.wptr.step(winc, self.sync_r2w.output)
            if written:
                self.storage[addr] = wdata & self.data_mask
            self.sync_r2w.step(rptr_gray)
        return written, read_data

    def step_write(self, winc, wdata=0):
        return self.step(write_edge=True, winc=winc, wdata=wdata)[0]

    def step_read(self, rinc):
        return self.step(read_edge=True, rinc=rinc)[1]


class DualClock:
    """Edge schedule of two free-running clocks

    Iterating over this object yields ``(time, write_edge, read_edge)`` for
    each instant at which at least one of the clocks has an active edge.
    Periods and phases are integers (for instance, in picoseconds), so that
    coincident edges are detected exactly.

    Parameters
    ----------
    write_period : int
        Period of the write clock.
    read_period : int
        Period of the read clock.
    write_phase : int
        Time of the first write clock edge.
    read_phase : int
        Time of the first read clock edge.
    """
    def __init__(self, write_period, read_period, write_phase=0,
                 read_phase=0):
        if write_period <= 0 or read_period <= 0:
            raise ValueError('clock periods must be positive')
        if write_phase < 0 or read_phase < 0:
            raise ValueError('clock phases cannot be negative')
        self.write_period = write_period
        self.read_period = read_period
        self.write_phase = write_phase
        self.read_phase = read_phase

    def __iter__(self):
        write_next = self.write_phase
        read_next = self.read_phase
        while True:
            now = min(write_next, read_next)
            write_edge = write_next == now
            read_edge = read_next == now
            if write_edge:
                write_next += self.write_period
            if read_edge:
                read_next += self.read_period
            yield now, write_edge, read_edge


def transfer(model, clock, data, max_events=100000, write_stall=None,
             read_stall=None):
    """Push data through the model and return the entries read

    The producer writes the entries of ``data`` in order, never asserting
    ``winc`` while ``wfull`` is asserted, and the consumer reads whenever
    ``rempty`` is deasserted. ``write_stall`` and ``read_stall`` are
    optional callables taking the event count, and returning ``True`` to
    idle that side on that event.

    Stops when all the entries have been read or after ``max_events`` clock
    events.
    """
    data = list(data)
    received = []
    n = 0
    for count, (_, write_edge, read_edge) in enumerate(clock):
        if count >= max_events or len(received) == len(data):
            break
        winc = (n < len(data) and not model.wfull
                and not (write_stall and write_stall(count)))
        rinc = not model.rempty and not (read_stall and read_stall(count))
        written, read_data = model.step(
            write_edge, read_edge, winc=winc,
            wdata=data[n] if n < len(data) else 0, rinc=rinc)
        if written:
            n += 1
        if read_data is not None:
            received.append(read_data)
    logger.debug('transferred %d of %d entries', len(received), len(data))
    return received
