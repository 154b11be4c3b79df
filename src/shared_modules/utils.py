import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Generator

from loguru import logger


def safe_str(val: Any) -> str:
    """
    Gibt immer einen String zurück, auch wenn val None oder numerisch ist.
    """
    return "" if val is None else str(val)


@contextmanager
def log_exceptions(msg: str, continue_on_error: bool = True) -> Generator[None, None, None]:
    """
    Context-Manager für das Logging von Ausnahmen.
    Loggt eine Fehlermeldung und entscheidet, ob die Exception weitergereicht wird.

    Args:
        msg (str): Nachricht für das Logging im Fehlerfall.
        continue_on_error (bool): Bei False wird die Exception erneut ausgelöst, ansonsten nur geloggt.

    Beispiel:
        with log_exceptions("Fehler beim Schreiben der Ausgabe", continue_on_error=False):
            write_output()
    """
    try:
        yield
    except Exception as e:
        logger.error(f"{msg}: {e}")
        if not continue_on_error:
            raise


def ensure_dir(path: Path) -> Path:
    """Erzeugt ein Verzeichnis (rekursiv), falls es fehlt, und gibt den Pfad zurück."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def wait_until(
    condition: Callable[[], bool],
    timeout: float,
    poll_interval: float,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """
    Prüft condition wiederholt, bis sie erfüllt ist oder timeout Sekunden verstrichen sind.
    Bei timeout=0 wird genau einmal geprüft.

    Returns:
        bool: True, sobald condition erfüllt ist, sonst False.
    """
    waited = 0.0
    while True:
        if condition():
            return True
        if waited >= timeout:
            return False
        sleep(poll_interval)
        waited += poll_interval
