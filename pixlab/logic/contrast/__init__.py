#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/contrast/__init__.py
