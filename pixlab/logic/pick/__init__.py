#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/pick/__init__.py
