#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/shared/logger.py

import sys
import argparse

from overlaylab.core import config as c


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class OverlaylabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Logs argument errors with the color-coded logger, points at --help,
        then exits with the standard CLI error code 2.
        """
        log('error', message)
        log('info', f"use '{self.prog} --help' for more information")
        sys.exit(2)
