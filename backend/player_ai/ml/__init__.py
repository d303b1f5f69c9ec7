"""
player_ai.ml

Package “Machine Learning” (couche modèle) :
- feature_vectorizer : enregistrement -> vecteur de 5 floats + label binaire.
- suitability_model  : réseau de neurones (MLPClassifier) avec fit / predict.
- model_registry     : chargement / sauvegarde de l’artefact unique (joblib, chemin fixe).

L’orchestration (quand ré-entraîner, verrouillage, remontée d’état) vit dans
player_ai.services.training_service.
"""
