from typing import Optional
from pydantic import BaseModel

class RenderingConfig(BaseModel):
    """
    Ausgabeoptionen für Banner und Saldo-Spalte.
    Leere Dateinamen schalten die jeweilige Ausgabe ab.
    """
    balance_header: str = "Saldo"
    highlight_color: str = "#e8eaf6"    # hellblau-violett, hebt die ergänzte Spalte ab
    console: bool = True
    html_file: Optional[str] = "zeitsaldo.html"
    xlsx_file: Optional[str] = None
