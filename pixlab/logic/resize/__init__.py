#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/resize/__init__.py
