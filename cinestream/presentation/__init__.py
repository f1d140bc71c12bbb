"""
Couche présentation : construction des vues (fonctions pures).

Les routes web appellent ces fonctions puis rendent les templates Jinja2.
"""
