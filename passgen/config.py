# passgen/config.py
"""
Simple settings persistence for the passgen CLI.
Settings saved as JSON in %APPDATA%/Passgen/config.json (Windows) or ~/.passgen/config.json (fallback)
"""

import os
import json
import logging
from typing import Dict, Any, Optional

from .generator import Passgen
from .lang import parse_language

logger = logging.getLogger(__name__)

MODES = ("default", "strong", "new")

DEFAULTS: Dict[str, Any] = {
    "language": "english",
    "length": 16,
    "mode": "default",  # one of MODES
    "custom_charset": "",
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "Passgen")
    return os.path.join(os.path.expanduser("~"), ".passgen")

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if data is None:
        data = {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object, got %s", p, type(data).__name__)
        return DEFAULTS.copy()
    out = DEFAULTS.copy()
    # merge defaults
    out.update(data)
    return out

def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    return p

def build_generator(cfg: Dict[str, Any]) -> Passgen:
    """Return a Passgen configured from a settings dict (see DEFAULTS)."""
    mode = cfg.get("mode", DEFAULTS["mode"])
    if mode == "default":
        gen = Passgen.default()
    elif mode == "strong":
        gen = Passgen.default_strong_and_usab()
    elif mode == "new":
        gen = Passgen.new()
    else:
        raise ValueError(f"unknown mode {mode!r} (expected one of: {', '.join(MODES)})")
    if cfg.get("custom_charset"):
        gen.set_custom_charset(cfg["custom_charset"])
    return gen.set_language(parse_language(cfg.get("language", DEFAULTS["language"])))
