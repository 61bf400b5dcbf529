from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from wzc.config import load_config
from wzc.logging import LogConfig, setup_logging
from wzc.zc.core.model import ZeroCrossing
from wzc.zc.core.partition import build_zero_crossings

DEFAULTS: Dict[str, Any] = {
    "log": {"level": "info", "json": False, "to_file": None, "utc": True},
    "partition": {"check_order": True},
}


@dataclass(frozen=True)
class Settings:
    log: LogConfig = field(default_factory=LogConfig)
    check_order: bool = True

    @staticmethod
    def from_dict(cfg: Dict[str, Any]) -> "Settings":
        lg = cfg.get("log") or {}
        part = cfg.get("partition") or {}
        return Settings(
            log=LogConfig(
                level=str(lg.get("level", "info")),
                json=bool(lg.get("json", False)),
                to_file=lg.get("to_file") or None,
                utc=bool(lg.get("utc", True)),
            ),
            check_order=bool(part.get("check_order", True)),
        )

    def build_zero_crossings(self, coeffs: Any, extrema: Any) -> List[ZeroCrossing]:
        """Partition with the configured input checks."""
        return build_zero_crossings(coeffs, extrema, check_order=self.check_order)


def load_settings(
    file_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
    *,
    use_env: bool = True,
) -> Settings:
    """Settings from defaults < file < WZC_* env < overrides."""
    return Settings.from_dict(load_config(DEFAULTS, file_path, use_env=use_env, overrides=overrides))


def configure(settings: Settings) -> None:
    setup_logging(settings.log)
