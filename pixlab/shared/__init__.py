#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/shared/__init__.py
