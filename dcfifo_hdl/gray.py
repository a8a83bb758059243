#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

from amaranth import *
import amaranth.cli


def to_gray(b):
    """Binary to Gray code

    Works both with Python integers and with numpy integer arrays.
    """
    return b ^ (b >> 1)


def to_binary(g, width):
    """Gray code to binary

    The MSB is kept and each lower bit is the XOR of the next binary bit
    and the Gray bit in the same position. This is computed as a prefix XOR
    using log2(width) shifts, so it also works with numpy integer arrays.
    """
    b = g
    shift = 1
    while shift < width:
        b = b ^ (b >> shift)
        shift <<= 1
    return b


class GrayEncoder(Elaboratable):
    """Binary to Gray code encoder

    This module is purely combinational.

    Parameters
    ----------
    width : int
        Width of the input and output.

    Attributes
    ----------
    i : Signal(width), in
        Binary input.
    o : Signal(width), out
        Gray code output.
    """
    def __init__(self, width):
        if width < 1:
            raise ValueError('width must be at least 1')
        self.w = width

        self.i = Signal(width)
        self.o = Signal(width)

    def elaborate(self, platform):
        m = Module()
        m.d.comb += self.o.eq(self.i ^ self.i[1:])
        return m


class GrayDecoder(Elaboratable):
    """Gray code to binary decoder

    This module is purely combinational.

    Parameters
    ----------
    width : int
        Width of the input and output.

    Attributes
    ----------
    i : Signal(width), in
        Gray code input.
    o : Signal(width), out
        Binary output.
    """
    def __init__(self, width):
        if width < 1:
            raise ValueError('width must be at least 1')
        self.w = width

        self.i = Signal(width)
        self.o = Signal(width)

    def elaborate(self, platform):
        m = Module()
        bits = [None] * self.w
        bits[-1] = self.i[-1]
        for j in reversed(range(self.w - 1)):
            bits[j] = bits[j + 1] ^ self.i[j]
        m.d.comb += self.o.eq(Cat(*bits))
        return m


if __name__ == '__main__':
    decoder = GrayDecoder(5)
    amaranth.cli.main(decoder, ports=[decoder.i, decoder.o])
