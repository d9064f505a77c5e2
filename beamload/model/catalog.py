"""Beam catalog: physical attributes of every beam that can be ordered.

Widths and heights are in centimetres, weights in kilograms for the 12 m bar.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import numpy as np
import pandas as pd

from ..errors import BeamNotFoundError
from ..logger import logger
from .entities import BeamSpec

BEAM_CATALOG: List[BeamSpec] = [
    BeamSpec("w150x13", "W 150 x 13,0", 10.0, 14.8, 156.0),
    BeamSpec("w150x18", "W 150 x 18,0", 10.2, 15.3, 216.0),
    BeamSpec("w150x22.5", "W 150 x 22,5", 15.2, 15.2, 270.0),
    BeamSpec("w200x15", "W 200 x 15,0", 10.0, 20.0, 180.0),
    BeamSpec("w200x22.5", "W 200 x 22,5", 10.2, 20.6, 270.0),
    BeamSpec("w200x26.6", "W 200 x 26,6", 13.3, 20.7, 319.2),
    BeamSpec("w250x17.9", "W 250 x 17,9", 10.1, 25.1, 214.8),
    BeamSpec("w250x25.3", "W 250 x 25,3", 10.2, 25.7, 303.6),
    BeamSpec("w250x32.7", "W 250 x 32,7", 14.6, 25.8, 392.4),
    BeamSpec("w310x21", "W 310 x 21,0", 10.1, 30.3, 252.0),
    BeamSpec("w310x32.7", "W 310 x 32,7", 10.2, 31.3, 392.4),
    BeamSpec("w360x32.9", "W 360 x 32,9", 12.7, 34.9, 394.8),
    BeamSpec("w410x38.8", "W 410 x 38,8", 14.0, 39.9, 465.6),
    BeamSpec("w460x52", "W 460 x 52,0", 15.2, 45.0, 624.0),
    BeamSpec("w530x66", "W 530 x 66,0", 16.5, 52.5, 792.0),
]

CATALOG_COLUMNS = ("id", "gauge", "width", "height", "weight_12m")


class BeamCatalog:
    """Read-only lookup of beams by id."""

    def __init__(self, beams: Iterable[BeamSpec]) -> None:
        self._beams: Dict[str, BeamSpec] = {}
        for beam in beams:
            self._beams[beam.id] = beam

    def __len__(self) -> int:
        return len(self._beams)

    def __iter__(self):
        return iter(self._beams.values())

    def __contains__(self, beam_id: object) -> bool:
        return beam_id in self._beams

    def get(self, beam_id: str) -> BeamSpec:
        beam = self._beams.get(beam_id)
        if beam is None:
            raise BeamNotFoundError(beam_id)
        return beam

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "BeamCatalog":
        beams = []
        for record in records:
            missing = [c for c in CATALOG_COLUMNS if record.get(c) is None]
            if missing:
                raise ValueError(f"catalog row {record} is missing {missing}")
            beams.append(
                BeamSpec(
                    id=str(record["id"]).strip(),
                    gauge=str(record["gauge"]).strip(),
                    width=float(record["width"]),
                    height=float(record["height"]),
                    weight_12m=float(record["weight_12m"]),
                )
            )
        return cls(beams)

    @classmethod
    def from_file(cls, path: str) -> "BeamCatalog":
        if path.endswith(".csv"):
            df = pd.read_csv(path)
        elif path.endswith(".xlsx") or path.endswith(".xls"):
            df = pd.read_excel(path)
        else:
            raise ValueError("Invalid catalog file type. Only CSV and Excel supported.")

        df_replaced = df.replace({np.nan: None})
        catalog = cls.from_records(df_replaced.to_dict(orient="records"))
        logger.info(f"Loaded {len(catalog)} beams from {path}")
        return catalog


def load_catalog(path: Optional[str] = None) -> BeamCatalog:
    if path:
        return BeamCatalog.from_file(path)
    return BeamCatalog(BEAM_CATALOG)
