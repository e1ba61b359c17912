"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from propmatch.models.scoring import CriterionWeights, ScoringCurves

# Encontrar la raíz del proyecto (donde está el .env)
# config.py -> propmatch/ -> src/ -> project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")

    # Matching: WEIGHTS__BUDGET=30, SCORING__MAX_OVER_PERCENT=20, ...
    weights: CriterionWeights = Field(
        default_factory=CriterionWeights, description="Peso de cada criterio"
    )
    scoring: ScoringCurves = Field(
        default_factory=ScoringCurves, description="Umbrales y curvas de penalización"
    )
    default_min_match_score: float = Field(
        50.0, ge=0.0, le=100.0, description="Score mínimo por defecto para listar matches"
    )

    # Analytics
    analytics_top_matches: int = Field(20, ge=1, description="Top matches del dashboard")
    analytics_list_limit: int = Field(
        10, ge=1, description="Largo de las listas de clientes sin match / propiedades hot"
    )

    # Importación
    import_batch_size: int = Field(50, ge=1, description="Filas por lote al persistir")


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()
