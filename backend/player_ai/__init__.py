"""
player_ai

Package racine du backend Player Performance AI.

Rôle (fonctionnel) :
- Stocke les performances de joueurs (batte, lancer, terrain + label “apte”).
- Ré-entraîne un réseau de neurones sur toute la table après chaque écriture.
- Prédit l’aptitude d’un joueur à partir de ses 5 statistiques.

Organisation :
- player_ai.api      : routes FastAPI (contrats HTTP, dépendances)
- player_ai.core     : briques transverses (settings, errors, logs, sécurité, rate-limit)
- player_ai.db       : base SQLAlchemy + session async
- player_ai.models   : modèle ORM (table player_performances)
- player_ai.schemas  : schémas Pydantic (entrées/sorties API)
- player_ai.services : use-cases (CRUD, ré-entraînement, prédiction)
- player_ai.ml       : vectorisation, réseau de neurones, chargement / sauvegarde de l’artefact
"""
