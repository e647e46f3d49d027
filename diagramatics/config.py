"""Configuration helpers for diagram construction and rendering defaults."""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from typing import Dict

_FALSY = ("", "0", "false", "no", "off")


def _bbox_caching_from_env() -> bool:
    value = os.environ.get("DIAGRAMATICS_DISABLE_BBOX_CACHE", "0")
    return value.strip().lower() in _FALSY


def _default_style() -> Dict[str, str]:
    return {
        "fill": "none",
        "stroke": "black",
        "stroke-width": "1",
        "stroke-linecap": "butt",
        "stroke-dasharray": "none",
        "stroke-linejoin": "round",
        "vector-effect": "non-scaling-stroke",
        "filter": "none",
        "opacity": "1",
    }


def _default_text_style() -> Dict[str, str]:
    style = _default_style()
    style.update({"fill": "black", "stroke": "none", "stroke-width": "0"})
    return style


def _default_textdata() -> Dict[str, str]:
    return {
        "text": "",
        "font-family": "Latin Modern Math, sans-serif",
        "font-style": "normal",
        "font-size": "18",
        "font-weight": "normal",
        "font-scale": "auto",
        "text-anchor": "middle",
        "dy": "0.25em",
        "angle": "0",
    }


@dataclass
class DiagramConfig:
    """Defaults the renderer layers node maps over, plus cache switches."""

    default_style: Dict[str, str] = field(default_factory=_default_style)
    default_text_style: Dict[str, str] = field(default_factory=_default_text_style)
    default_textdata: Dict[str, str] = field(default_factory=_default_textdata)
    default_linespace: str = "1em"
    bbox_caching: bool = field(default_factory=_bbox_caching_from_env)


_DIAGRAM_CONFIG = DiagramConfig()


def get_config() -> DiagramConfig:
    return copy.deepcopy(_DIAGRAM_CONFIG)


def set_config(config: DiagramConfig) -> None:
    global _DIAGRAM_CONFIG
    _DIAGRAM_CONFIG = copy.deepcopy(config)


def default_map(name: str) -> Dict[str, str]:
    """Shallow copy of one default map, e.g. ``"default_style"``."""
    return dict(getattr(_DIAGRAM_CONFIG, name))


def default_linespace() -> str:
    return _DIAGRAM_CONFIG.default_linespace


def bbox_caching_enabled() -> bool:
    return _DIAGRAM_CONFIG.bbox_caching


def reset_config() -> None:
    """Restore the defaults, re-reading the environment."""
    set_config(DiagramConfig())


__all__ = [
    "DiagramConfig",
    "get_config",
    "set_config",
    "reset_config",
    "bbox_caching_enabled",
    "default_map",
    "default_linespace",
]
