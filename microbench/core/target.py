"""Resolve ``module:attribute`` strings to callables."""

from __future__ import annotations

import importlib


def resolve_target(target: str):
    """Import ``package.module:attr.path`` and return the named object.

    Raises
    ------
    ValueError
        If ``target`` is not of the form ``module:attr``.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"target='{target}' is not valid. Must be of the form 'module:function'.")

    obj = importlib.import_module(module_name)
    for part in attr_path.split("."):
        obj = getattr(obj, part)
    return obj
