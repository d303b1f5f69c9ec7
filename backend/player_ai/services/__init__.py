"""
player_ai.services

Logique applicative (use-cases) indépendante des endpoints HTTP.

- performance_store   : accès à la table player_performances.
- performance_service : CRUD + ré-entraînement après chaque écriture + prédiction.
- training_service    : propriétaire du modèle, ré-entraînements sérialisés, ModelSync typé.

Principe :
- player_ai.api = transport HTTP (routes, validation, dépendances)
- player_ai.services = orchestration (réutilisable par l’API et les scripts, testable)
"""
