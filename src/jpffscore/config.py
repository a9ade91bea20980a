from __future__ import annotations
from pydantic import BaseModel
from typing import Optional
import yaml

from jpffscore.constants import RECENT_PLAYS

class DisplayCfg(BaseModel):
    title: str = "【JPFF East】"
    subtitle: str = "Game Scorer"
    recent_plays: int = RECENT_PLAYS

class StorageCfg(BaseModel):
    path: str = "data/"
    games_file: str = "games.json"

    def plays_file(self, game_id: str) -> str:
        return f"{self.path.rstrip('/')}/plays/{game_id}.json"

    def games_path(self) -> str:
        return f"{self.path.rstrip('/')}/{self.games_file}"

class ExportCfg(BaseModel):
    out_dir: str = "exports/"

class FullConfig(BaseModel):
    league: str = "JPFF East"
    log_level: str = "INFO"
    display: DisplayCfg = DisplayCfg()
    storage: StorageCfg = StorageCfg()
    export: ExportCfg = ExportCfg()

def load_config(path: Optional[str] = None) -> FullConfig:
    if path is None:
        return FullConfig()
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return FullConfig.model_validate(raw)
