"""Shared serialisation helpers for model dataclasses."""

from __future__ import annotations

import dataclasses

_field_defaults_cache: dict[type, dict] = {}


def _field_defaults(cls: type) -> dict:
    """Return a dict of ``{field_name: default}`` for a dataclass.

    Only fields with simple defaults (not ``MISSING`` and not
    ``default_factory``) are included.  ``to_dict()`` compares
    against these so that only non-default fields are serialised.
    Results are cached per class.
    """
    if cls not in _field_defaults_cache:
        _field_defaults_cache[cls] = {
            f.name: f.default
            for f in dataclasses.fields(cls)
            if f.default is not dataclasses.MISSING
        }
    return _field_defaults_cache[cls]
