import math


def format_unsigned(hours: float) -> str:
    """
    Formatiert Bruchstunden als "H:MM" ohne Vorzeichen (Betrag).
    Minuten werden kaufmännisch gerundet; 60 Minuten werden in die Stunde übertragen.
    """
    total = abs(hours)
    h = math.floor(total)
    m = math.floor((total - h) * 60 + 0.5)
    if m == 60:
        h += 1
        m = 0
    return f"{h}:{m:02d}"


def format_signed(hours: float) -> str:
    """Formatiert Bruchstunden als "+H:MM" bzw. "-H:MM"; 0 zählt als positiv."""
    sign = "+" if hours >= 0 else "-"
    return f"{sign}{format_unsigned(hours)}"
