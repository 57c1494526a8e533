#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/__init__.py
