import re
from typing import Optional

# Stunden, Punkt, genau zwei Ziffern Minuten, z.B. "8.30"
_WORK_TIME_RE = re.compile(r"(\d+)\.(\d{2})", re.ASCII)


def parse_work_time(text: str) -> Optional[float]:
    """
    Wandelt eine Arbeitszeit im Format "H.MM" in Bruchstunden um ("8.30" -> 8.5).
    Alles andere (leer, "8.0", "8:30", Text) ergibt None.

    Der Minutenteil wird nicht auf < 60 geprüft: "8.75" ergibt 9.25.
    """
    match = _WORK_TIME_RE.fullmatch(text.strip())
    if not match:
        return None
    hours = int(match.group(1))
    minutes = int(match.group(2))
    return hours + minutes / 60
