import sys
from pathlib import Path
from typing import Any, Dict, Optional, Type

import yaml
from loguru import logger
from pydantic import BaseModel

from pydantic_models.config.attendance_table_config import AttendanceTableConfig
from pydantic_models.config.balance_config import BalanceConfig
from pydantic_models.config.logging_config import LoggingConfig
from pydantic_models.config.rendering_config import RenderingConfig
from pydantic_models.config.structure_config import StructureConfig


class Config:
    """
    Singleton für das Laden und Prüfen der Konfiguration.
    Nutzt statische Pydantic-Modelle für alle Abschnitte.
    Fehlende Abschnitte werden mit den Defaultwerten der Modelle belegt.
    Ein erneuter Aufruf mit derselben Datei liefert den geladenen Stand,
    eine andere Datei wird neu geladen.
    """

    _instance: Optional["Config"] = None

    def __new__(cls, config_path: Path):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Path):
        # Bereits mit derselben Datei geladen: nicht erneut parsen
        if self._initialized and self.config_path == Path(config_path):
            return
        self._initialized = False

        # Fallback-Logger für Fehler beim Laden der Config
        logger.remove()
        logger.add(sys.stderr, level="WARNING")
        self.config_path = Path(config_path)
        try:
            self.raw_config: Dict[str, Any] = self._load_config()
            self.structure = self._parse_section(self.raw_config, "structure", StructureConfig)
            self.logging = self._parse_section(self.raw_config, "logging", LoggingConfig)
            self._validate_structure_and_paths()
            self._setup_logging()
            logger.debug(f"Lade Konfiguration von {self.config_path}")
        except Exception as e:
            logger.error(f"Fehler beim Laden der Konfiguration: {e}")
            raise

        try:
            self.balance = self._parse_section(self.raw_config, "balance", BalanceConfig)
            self.attendance_table = self._parse_section(
                self.raw_config, "attendance_table", AttendanceTableConfig
            )
            self.rendering = self._parse_section(self.raw_config, "rendering", RenderingConfig)
        except Exception as e:
            logger.error(f"Ungültige Konfiguration in {self.config_path}: {e}")
            raise

        logger.debug("Konfiguration erfolgreich geladen und validiert.")
        self._initialized = True

    @property
    def prj_root(self) -> Path:
        return Path(self.structure.prj_root).expanduser().resolve()

    @property
    def data_dir(self) -> Path:
        return self.prj_root / (self.structure.data_path or "data")

    @property
    def output_dir(self) -> Path:
        return self.prj_root / (self.structure.output_path or "output")

    def _setup_logging(self) -> None:
        """
        Initialisiert loguru mit den Einstellungen aus der Config-Datei.
        Die Logdatei liegt im log_path unterhalb der Projektwurzel.
        """
        logger.remove()
        log_file = getattr(self.logging, "log_file", None)
        log_level = getattr(self.logging, "log_level", "INFO") or "INFO"
        if log_file:
            log_dir = self.prj_root / (self.structure.log_path or ".logs")
            logger.add(log_dir / log_file, level=log_level)
        logger.add(sys.stderr, level=log_level)

    def _load_config(self) -> Dict[str, Any]:
        """
        Lädt die YAML-Konfigurationsdatei. Eine leere Datei ergibt eine leere Konfiguration.
        """
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _parse_section(self, config: Dict[str, Any], section: str, model: Type[BaseModel]) -> Any:
        """
        Parst einen Abschnitt der Config mit dem passenden Pydantic-Modell.
        """
        data = config.get(section) or {}
        logger.debug(f"Parsiere Abschnitt '{section}': {data}")
        return model(**data)

    def _validate_structure_and_paths(self) -> None:
        """
        Prüft einmalig die Pfadangaben. Scheitern die Prüfungen,
        wird die Konfiguration verworfen.
        """
        if not self.prj_root.exists():
            logger.error(f"Projektwurzel existiert nicht: {self.prj_root}")
            raise FileNotFoundError(f"Projektwurzel nicht gefunden: {self.prj_root}")

        # Das Datenverzeichnis darf fehlen, der Export kann später eintreffen
        if not self.data_dir.exists():
            logger.warning(f"Datenverzeichnis existiert (noch) nicht: {self.data_dir}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Allgemeiner Getter für beliebige Felder (dot-notation für verschachtelte Felder).
        """
        parts = key.split(".")
        val = self.raw_config
        for part in parts:
            if isinstance(val, dict) and part in val:
                val = val[part]
            else:
                logger.debug(f"Feld '{key}' nicht gefunden, Rückgabe Default: {default}")
                return default
        return val


if __name__ == "__main__":
    config_path = Path(__file__).parent.parent.parent / ".config" / "zeitsaldo_config.yaml"
    config = Config(config_path)
    logger.info("Projektwurzel: {}", config.prj_root)
