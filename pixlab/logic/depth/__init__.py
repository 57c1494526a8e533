#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/depth/__init__.py
