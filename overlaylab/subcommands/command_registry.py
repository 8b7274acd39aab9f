#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: overlaylab/subcommands/command_registry.py

from . import check

SUBCOMMANDS = {
    'check': check,
}
