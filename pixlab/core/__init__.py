#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/__init__.py
