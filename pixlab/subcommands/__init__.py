#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/__init__.py
