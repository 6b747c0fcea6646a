from __future__ import annotations
import json
from typing import Any, Dict, List
from pathlib import Path
from specmatch.core.suite import Expectation
from specmatch.io.config_loader import load_config, build_from_config

def load_suite(path: str | Path) -> List[Expectation]:
    p = Path(path)
    data = load_config(p)
    if isinstance(data, list):
        data = {"expectations": data}
    if not isinstance(data, dict):
        raise ValueError("Unrecognized suite format")
    return build_from_config(data, source=str(p))

def save_json(path: str | Path, obj: Dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)
