#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/errors.py


class PixlabError(Exception):
    """Base class for every error raised by pixlab."""


class FormatError(PixlabError):
    """A GrayBit-7 payload could not be decoded."""

    kind = "format"


class BadSignatureError(FormatError):
    """
    The data does not start with the GrayBit-7 magic.

    This is the "not this format" signal: callers fall back to the
    platform decoder instead of reporting a failure.
    """

    kind = "bad_signature"


class UnsupportedVersionError(FormatError):
    kind = "unsupported_version"

    def __init__(self, version: int):
        super().__init__(f"unsupported GrayBit-7 version: {version}")
        self.version = version


class TruncatedDataError(FormatError):
    kind = "truncated_data"

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"not enough image data: expected {expected} bytes, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class DecodeError(PixlabError):
    """Neither GrayBit-7 nor the platform decoder could read the data."""


class LayerLimitError(PixlabError):
    """Adding a layer would exceed the stack capacity."""

    def __init__(self, limit: int):
        super().__init__(f"maximum number of layers: {limit}")
        self.limit = limit
