#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/composite/__init__.py
