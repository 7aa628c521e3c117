"""Runtime configuration for the Orbitron planet."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from orbitron.models import BasicResourceType, ComplexResourceType, PlanetType


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="ORBITRON_", env_file=".env", extra="ignore")

    app_name: str = "orbitron"
    log_level: str = "INFO"
    planet_id: int = 0
    orchestrator_id: int = Field(default=0, description="Identity reported as the orchestrator peer in telemetry.")
    planet_type: PlanetType = PlanetType.B
    generation_rules: list[BasicResourceType] = Field(
        default_factory=lambda: [BasicResourceType.HYDROGEN, BasicResourceType.OXYGEN],
    )
    combination_rules: list[ComplexResourceType] = Field(
        default_factory=lambda: [ComplexResourceType.WATER],
    )
    gate_when_stopped: bool = Field(
        default=True,
        description="Suppress decision-making handlers while the planet AI is stopped.",
    )
    telemetry_enabled: bool = True
    telemetry_path: str | None = Field(default=None, description="Optional JSONL file receiving telemetry events.")
    queue_size: int = 100


settings = Settings()
