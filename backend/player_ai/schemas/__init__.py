"""
player_ai.schemas

Schémas API (Pydantic) : contrat HTTP, distinct du modèle ORM (player_ai.models).
Les endpoints déclarent response_model=... et valident les payloads avec ces schémas.
"""
