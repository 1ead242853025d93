"""Config loader.

Emitter deployments are YAML files listing named emitters:

    emitters:
      - name: fs
        kind: fs
        base_path: /data/out
    logging:
      level: INFO
      log_dir: logs

Keeping this in YAML lets operators add or retarget emitters without a
code change.
"""

from __future__ import annotations
from typing import Any, Dict
import yaml


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return data


def logging_options(cfg: Dict[str, Any]) -> Dict[str, Any]:
    opts = cfg.get("logging") or {}
    return {
        "level": str(opts.get("level", "INFO")).upper(),
        "log_dir": opts.get("log_dir"),
    }
