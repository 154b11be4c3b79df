from typing import Optional
from pydantic import BaseModel

class StructureConfig(BaseModel):
    """
    Modell für die Struktur-Konfiguration des Projekts.

    Attribute:
        prj_root (str): Wurzelverzeichnis des Projekts.
        data_path (Optional[str]): Verzeichnis mit den Zeiterfassungs-Exporten (Standard: "data").
        output_path (Optional[str]): Pfad zum Ausgabeverzeichnis (Standard: "output").
        log_path (Optional[str]): Pfad zum Log-Verzeichnis relativ zu prj_root (Standard: ".logs").
    """
    prj_root: str = "."
    data_path: Optional[str] = "data"
    output_path: Optional[str] = "output"
    log_path: Optional[str] = ".logs"
