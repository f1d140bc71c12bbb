"""
Couche domaine (core).

Contient les entités métier et les ports (interfaces abstraites).
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, HTTP).

Sous-packages :
- entities/ : Entités métier (Category, projection de watchlist)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
"""
