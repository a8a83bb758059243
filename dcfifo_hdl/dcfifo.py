#
# Copyright (C) 2026 dcfifo-hdl contributors
#
# This file is part of dcfifo-hdl
#
# SPDX-License-Identifier: MIT
#

import argparse
import logging

from amaranth import *
import amaranth.back.verilog

from .config import DcFifoConfig
from . import configs
from .fifo import AsyncFifo

logger = logging.getLogger(__name__)

_config_names = ['default', 'wide', 'three_stage', 'minimal']


class DcFifo(Elaboratable):
    """Dual-clock FIFO top level

    This elaboratable wraps :class:`AsyncFifo` together with its two clock
    domains, ``write`` and ``read``. Both domains use an asynchronous reset,
    so asserting ``write.rst`` or ``read.rst`` immediately clears the state
    of that domain, regardless of its clock. Each reset should be held until
    the pointer synchronizers have settled (at least ``sync_stages`` cycles
    of both clocks) before the FIFO is used.

    Attributes
    ----------
    write : ClockDomain
        Write clock domain (``wclk`` and ``wrst``).
    read : ClockDomain
        Read clock domain (``rclk`` and ``rrst``).
    fifo : AsyncFifo
        The FIFO. Its ports are also exposed as attributes of this
        elaboratable.
    """
    def __init__(self, config=DcFifoConfig()):
        config.validate()
        self.config = config
        self.write = ClockDomain('write', async_reset=True)
        self.read = ClockDomain('read', async_reset=True)
        self.fifo = AsyncFifo(
            config.data_width, config.addr_width, config.sync_stages,
            r_domain='read', w_domain='write')

        self.winc = self.fifo.winc
        self.wdata = self.fifo.wdata
        self.wfull = self.fifo.wfull
        self.waddr = self.fifo.waddr
        self.rinc = self.fifo.rinc
        self.rdata = self.fifo.rdata
        self.rempty = self.fifo.rempty
        self.raddr = self.fifo.raddr

    def ports(self):
        return [
            self.write.clk, self.write.rst, self.read.clk, self.read.rst,
        ] + self.fifo.ports()

    def elaborate(self, platform):
        m = Module()
        m.domains += [self.write, self.read]
        m.submodules.fifo = self.fifo
        return m


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Generate Verilog for the dual-clock FIFO')
    parser.add_argument(
        '--config', default='default', choices=_config_names,
        help='FIFO configuration name [default=%(default)r]')
    parser.add_argument(
        '--data-width', type=int,
        help='Override the data width of the configuration')
    parser.add_argument(
        '--addr-width', type=int,
        help='Override the address width of the configuration')
    parser.add_argument(
        '--sync-stages', type=int,
        help='Override the number of synchronizer stages')
    parser.add_argument(
        '--log-level', default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level [default=%(default)r]')
    parser.add_argument(
        'output_file', help='Output verilog file')
    return parser.parse_args(argv)


def build_config(args):
    config = getattr(configs, args.config)()
    if args.data_width is not None:
        config.data_width = args.data_width
    if args.addr_width is not None:
        config.addr_width = args.addr_width
    if args.sync_stages is not None:
        config.sync_stages = args.sync_stages
    config.validate()
    return config


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s %(name)s %(levelname)s %(message)s')
    try:
        config = build_config(args)
    except ValueError as e:
        logger.error('invalid configuration: %s', e)
        raise SystemExit(1)
    logger.info('generating %r', config)
    top = DcFifo(config)
    with open(args.output_file, 'w') as f:
        f.write(amaranth.back.verilog.convert(
            top, name='dcfifo', ports=top.ports(), emit_src=False))
    logger.info('wrote %s', args.output_file)


if __name__ == '__main__':
    main()
