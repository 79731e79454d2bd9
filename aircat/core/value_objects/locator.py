"""
Objets valeur pour les URL de ressources reseau.

Une URL est decomposee une seule fois par le parser puis manipulee
comme un objet valeur immutable par l'appelant.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Scheme(Enum):
    """Schema d'URL supporte.

    Valeurs:
        HTTP: http:// (port 80 par defaut)
        HTTPS: https:// (port 443 par defaut)
    """

    HTTP = "http"
    HTTPS = "https"

    @property
    def default_port(self) -> int:
        """Port canonique du schema."""
        return 443 if self is Scheme.HTTPS else 80


@dataclass(frozen=True)
class LocatorDescriptor:
    """
    URL decomposee en ses composants structurels.

    Attributs:
        scheme: Schema (HTTP ou HTTPS)
        host: Nom d'hote, jamais vide
        port: Port explicite ou port par defaut du schema
        username: Utilisateur, None si aucun identifiant dans l'URL
        password: Mot de passe, None si absent (distinct de "")
        path: Ressource demandee, "/" au minimum
    """

    scheme: Scheme
    host: str
    port: int
    username: Optional[str] = None
    password: Optional[str] = None
    path: str = "/"

    @property
    def has_credentials(self) -> bool:
        """Indique si l'URL contenait des identifiants."""
        return self.username is not None

    @property
    def url(self) -> str:
        """
        Reconstruit l'URL sans les identifiants.

        Le port est omis quand il vaut le port par defaut du schema.
        """
        netloc = self.host
        if self.port != self.scheme.default_port:
            netloc = f"{self.host}:{self.port}"
        return f"{self.scheme.value}://{netloc}{self.path}"
