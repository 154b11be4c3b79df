import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from shared_modules.config import Config
from zeitsaldo.modules.balance_processor import BalanceProcessor


def main(argv: Optional[list] = None) -> int:
    """
    Einstiegspunkt für die Saldo-Berechnung.
    Lädt die zentrale Konfiguration, wartet auf den Zeiterfassungs-Export und
    gibt Banner und Saldo-Spalte aus. Optional kann der Pfad zum Export als
    erstes Argument übergeben werden, sonst gilt attendance_table.source_file.
    Die Konfigurationsdatei kann über ZEITSALDO_CONFIG überschrieben werden.
    """
    args = sys.argv[1:] if argv is None else argv
    default_path = Path(__file__).parents[2] / ".config" / "zeitsaldo_config.yaml"
    config_path = Path(os.getenv("ZEITSALDO_CONFIG", default_path))
    config = Config(config_path)

    source = Path(args[0]) if args else None
    report = BalanceProcessor(config).run(source)
    if report is None:
        logger.warning("Keine Zeiterfassung verarbeitet.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
