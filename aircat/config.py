"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe AIRCAT_,
et peut optionnellement être fournie via un fichier .env.

Les opérations du noyau (parsing, listing, codec, jetons) ne lisent jamais la
configuration : seuls le container, les services et la CLI l'utilisent.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aircat.utils.constants import AUDIO_EXTENSIONS, DEFAULT_TOKEN_LENGTH

# Trouver le fichier .env à la racine du projet (parent de aircat/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe AIRCAT_.
    Exemple : AIRCAT_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="AIRCAT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Médiathèque
    media_root: Path = Field(default=Path("~/Music"))
    media_extensions: frozenset[str] = Field(default=AUDIO_EXTENSIONS)
    show_hidden: bool = Field(default=False)
    follow_symlinks: bool = Field(default=True)

    # Sessions
    token_length: int = Field(default=DEFAULT_TOKEN_LENGTH, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/aircat.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("media_root", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("media_extensions", mode="after")
    @classmethod
    def normalize_extensions(cls, v: frozenset[str]) -> frozenset[str]:
        """Normalise les extensions en minuscules avec le point initial."""
        return frozenset(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v
        )
