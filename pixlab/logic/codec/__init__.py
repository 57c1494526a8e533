#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/codec/__init__.py
