"""
player_ai.core

Briques transverses, indépendantes du domaine “performances” :

- settings    : configuration (env / .env), chemin du modèle, hyperparamètres.
- errors      : format d’erreur API uniforme + exceptions applicatives.
- logging     : logs JSON, request_id injecté dans chaque ligne.
- request_id  : identifiant de corrélation par requête (ContextVar).
- security    : clé API (démo) sur les routes d’écriture.
- rate_limit  : limitation des écritures (chaque écriture = un ré-entraînement).
"""
