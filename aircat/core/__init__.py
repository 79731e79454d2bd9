"""
Couche domaine (core).

Contient les objets valeur, les ports (interfaces abstraites) et la taxonomie d'erreurs.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- value_objects/ : Objets valeur immutables (LocatorDescriptor, DirectoryEntry)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- errors : Exceptions métier (ParseError, ScanError, CodecError)
"""
