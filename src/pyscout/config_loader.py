"""Persist and load CLI region profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from pyscout.config.regions import RegionTier, build_region_map, region_map_to_payload


@dataclass
class RegionProfile:
    regions: Dict[str, RegionTier]

    @classmethod
    def load(cls, path: Path) -> "RegionProfile":
        data: Any = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, dict) and "regions" in data:
            data = data["regions"]
        return cls(regions=build_region_map(data))

    def save(self, path: Path) -> None:
        payload = {"regions": region_map_to_payload(self.regions)}
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
