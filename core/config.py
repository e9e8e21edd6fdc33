# -*- coding: utf-8 -*-
import os
from pathlib import Path
try:
    import tomllib  # py3.11+
except Exception:
    import tomli as tomllib

PROJECT_ROOT = Path(__file__).resolve().parents[1]

def load_config():
    for name in ("config.toml", "config_example.toml"):
        cfg_path = PROJECT_ROOT / name
        if cfg_path.exists():
            with open(cfg_path, "rb") as f:
                return tomllib.load(f)
    return {}

CFG = load_config()
DEFAULT_ROOT = os.path.expanduser(CFG.get("default_root", "~/OneDrive"))
DATABASE_PATH = CFG.get("database_path", "fileIndex.db")
STRICT_ROOT = bool(CFG.get("strict_root", False))
LOG_LEVEL = str(CFG.get("log_level", "INFO")).upper()
