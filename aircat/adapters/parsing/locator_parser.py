"""
Implementation du parser d'URL.

Ce module fournit LocatorParser qui implemente ILocatorParser pour
decomposer les URL http/https fournies par les clients ou la configuration.
Aucun acces reseau n'est effectue.
"""

import re
from typing import Optional

from aircat.core.errors import ParseError, ParseErrorKind
from aircat.core.ports.parser import ILocatorParser
from aircat.core.value_objects import LocatorDescriptor, Scheme

# Port maximal (16 bits)
MAX_PORT: int = 65535

_SCHEME_PATTERN = re.compile(r"^(https?)://", re.IGNORECASE)
_PORT_PATTERN = re.compile(r"[0-9]+")


class LocatorParser(ILocatorParser):
    """
    Parser d'URL de la forme scheme://[user[:pass]@]host[:port][/path].

    Regles de decoupage:
    - l'autorite s'arrete au premier '/' ou '?'
    - le dernier '@' de l'autorite separe identifiants et hote
    - le premier ':' des identifiants separe utilisateur et mot de passe
    """

    def parse(self, text: str) -> LocatorDescriptor:
        """
        Decompose une URL en LocatorDescriptor.

        Args:
            text: URL a interpreter

        Returns:
            LocatorDescriptor avec le port toujours renseigne.

        Raises:
            ParseError: schema non supporte, hote vide ou port invalide
        """
        match = _SCHEME_PATTERN.match(text)
        if match is None:
            raise ParseError(ParseErrorKind.UNSUPPORTED_SCHEME, text)
        scheme = Scheme(match.group(1).lower())

        authority, resource = self._split_authority(text[match.end():])

        username: Optional[str] = None
        password: Optional[str] = None
        hostport = authority
        if "@" in authority:
            credentials, _, hostport = authority.rpartition("@")
            username, password = self._split_credentials(credentials)

        host, port = self._split_host_port(hostport, text)
        if not host:
            raise ParseError(ParseErrorKind.INVALID_HOST, text)

        return LocatorDescriptor(
            scheme=scheme,
            host=host,
            port=scheme.default_port if port is None else port,
            username=username,
            password=password,
            path=self._normalize_resource(resource),
        )

    def _split_authority(self, remainder: str) -> tuple[str, str]:
        """Separe l'autorite de la ressource au premier '/' ou '?'."""
        for index, char in enumerate(remainder):
            if char in "/?":
                return remainder[:index], remainder[index:]
        return remainder, ""

    def _split_credentials(self, credentials: str) -> tuple[str, Optional[str]]:
        """Separe utilisateur et mot de passe au premier ':'."""
        if ":" in credentials:
            username, _, password = credentials.partition(":")
            return username, password
        return credentials, None

    def _split_host_port(self, hostport: str, text: str) -> tuple[str, Optional[int]]:
        """
        Separe l'hote du port.

        Les litteraux IPv6 entre crochets ne sont pas supportes :
        ils sont rejetes avec INVALID_HOST.

        Returns:
            Tuple (hote, port) avec port None si absent.
        """
        if hostport.startswith("["):
            raise ParseError(ParseErrorKind.INVALID_HOST, text, "IPv6 literal not supported")

        if ":" not in hostport:
            return hostport, None

        host, _, port_text = hostport.partition(":")
        if not _PORT_PATTERN.fullmatch(port_text):
            raise ParseError(ParseErrorKind.INVALID_PORT, text)
        port = int(port_text)
        if port > MAX_PORT:
            raise ParseError(ParseErrorKind.INVALID_PORT, text, f"port > {MAX_PORT}")
        return host, port

    @staticmethod
    def _normalize_resource(resource: str) -> str:
        """Ressource vide -> "/", ressource commencant par '?' -> "/?..."."""
        if not resource.startswith("/"):
            return "/" + resource
        return resource


_default_parser = LocatorParser()


def parse_url(text: str) -> LocatorDescriptor:
    """Decompose une URL avec le parser par defaut."""
    return _default_parser.parse(text)
