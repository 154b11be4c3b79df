from pydantic import BaseModel, ConfigDict, Field, field_validator

# Sollzeit pro Arbeitstag in Stunden
DEFAULT_EXPECTED_HOURS: float = 8
# Monatliche Überstundengrenze in Stunden
OVERTIME_LIMIT: float = 45
# Anteil der Grenze, ab dem gewarnt wird
OVERTIME_WARNING_RATIO: float = 0.8


class BalanceConfig(BaseModel):
    """
    Schwellenwerte für Saldo-Berechnung und Überstunden-Warnung.
    Wird explizit an Accumulator und Banner-Builder übergeben, damit die
    Berechnung unabhängig vom Config-Singleton testbar bleibt.

    Attribute:
        expected_hours (float): Sollzeit pro Arbeitstag.
        overtime_limit (float): Überstundengrenze pro Monat.
        warning_ratio (float): Anteil der Grenze, ab dem die Warnstufe greift.
    """
    model_config = ConfigDict(frozen=True)

    expected_hours: float = Field(default=DEFAULT_EXPECTED_HOURS, gt=0)
    overtime_limit: float = Field(default=OVERTIME_LIMIT, gt=0)
    warning_ratio: float = OVERTIME_WARNING_RATIO

    @field_validator("warning_ratio")
    @classmethod
    def ratio_between_zero_and_one(cls, v: float) -> float:
        if not 0 < v < 1:
            raise ValueError("warning_ratio muss zwischen 0 und 1 liegen")
        return v

    @property
    def warning_threshold(self) -> float:
        return self.overtime_limit * self.warning_ratio
