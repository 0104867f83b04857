#!/usr/bin/env python3

import argparse
import curses
import sys

from hexapod import labels
from hexapod.configuration import ConfigProvider, OscSenderConfig
from hexapod.exceptions import ConfigurationError
from hexapod.logger import Logger
from hexapod.runtime.console import CursesDisplay, CursesKeySource
from hexapod.runtime.hexapod_controller import HexapodController
from hexapod.servo import OscSender, PositionTable

log = Logger().setup_logger()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=labels.MAIN_CLI_DESCRIPTION)
    parser.add_argument('--config', help='Path to the JSON configuration (default: ~/hexapod.json)')
    parser.add_argument('--host', help='Override the OSC peer host')
    parser.add_argument('--port', type=int, help='Override the OSC peer port')
    parser.add_argument('--phase-delay', type=float, help='Override the settling delay between phases, in seconds')
    parser.add_argument('--verbose', action='store_true', help='Log every servo command')
    return parser.parse_args(argv)


def osc_config_from(config_provider: ConfigProvider, args: argparse.Namespace) -> OscSenderConfig:
    osc_config = config_provider.get_osc_sender_config()
    if args.host is not None:
        osc_config.host = args.host
    if args.port is not None:
        osc_config.port = args.port
    return osc_config


def _session(stdscr, sender, position_table, phase_delay) -> int:
    curses.curs_set(0)
    controller = HexapodController(
        CursesKeySource(stdscr),
        CursesDisplay(stdscr),
        sender,
        position_table,
        phase_delay,
    )
    return controller.run()


def main(argv=None) -> int:
    args = parse_args(argv)
    log.info(labels.MAIN_STARTING)

    try:
        config_provider = ConfigProvider(args.config)
        Logger().set_level('DEBUG' if args.verbose else config_provider.get_logging_level())

        position_table = PositionTable.from_config(config_provider)
        phase_delay = args.phase_delay if args.phase_delay is not None else config_provider.get_phase_delay()
        if phase_delay < 0:
            raise ConfigurationError(labels.CONFIG_NEGATIVE_DELAY.format(phase_delay))
        sender = OscSender.from_config(osc_config_from(config_provider, args))

    # PositionTableError and unknown logging levels are ValueErrors
    except (ConfigurationError, ValueError) as e:
        log.error(e)
        print(labels.APP_ERROR.format(e), file=sys.stderr)
        return 1

    try:
        return curses.wrapper(_session, sender, position_table, phase_delay)
    except KeyboardInterrupt:
        log.info(labels.MAIN_TERMINATED_CTRL_C)
        sender.close()
        return 130


if __name__ == '__main__':
    sys.exit(main())
