#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/command_registry.py

from . import (
    info,
    encode,
    decode,
    resize,
    pick,
    contrast,
    depth,
    composite
)

SUBCOMMANDS = {
    'info': info,
    'encode': encode,
    'decode': decode,
    'resize': resize,
    'pick': pick,
    'contrast': contrast,
    'depth': depth,
    'composite': composite
}
