#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/shared/storage.py

import json
import os
from typing import Any, Dict, Optional

from pixlab.core import config as c
from pixlab.core.graybit7 import FormatMetadata
from .logger import log


class StateStore:
    """
    Small JSON key-value file that outlives a single CLI run.

    An unreadable or corrupt file is treated as empty; the next write
    replaces it.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or c.STATE_FILE

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            log("warning", f"ignoring unreadable state file '{self.path}': {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, Any]) -> None:
        tmp = f"{self.path}.tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp, self.path)

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


def remember_metadata(store: StateStore, metadata: Optional[FormatMetadata]) -> None:
    """Persist the last loaded format metadata, or forget it for non-GrayBit-7 files."""
    if metadata is None:
        store.remove(c.STATE_KEY_METADATA)
    else:
        store.set(c.STATE_KEY_METADATA, metadata.to_dict())


def recall_metadata(store: StateStore) -> Optional[FormatMetadata]:
    blob = store.get(c.STATE_KEY_METADATA)
    if not isinstance(blob, dict):
        return None
    try:
        return FormatMetadata.from_dict(blob)
    except (KeyError, TypeError, ValueError) as e:
        log("warning", f"ignoring stored format metadata: {e}")
        return None
