"""
AirCat core - Utilitaires du serveur de streaming AirCat.

Ce package fournit les briques sans etat utilisees par le serveur :
interpretation des URL, listing de repertoires pour la navigation
dans la mediatheque, encodage base64 et generation de jetons.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (objets valeur, ports, erreurs)
- services/ : Couche application (navigation dans la mediatheque)
- adapters/ : Couche infrastructure (systeme de fichiers, parsing, CLI)
- utils/ : Fonctions utilitaires (tri naturel, filtres, codec, jetons)
"""

__version__ = "0.1.0"
