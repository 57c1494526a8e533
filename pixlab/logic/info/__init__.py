#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/info/__init__.py
