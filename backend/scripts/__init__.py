"""
scripts

Scripts CLI de maintenance / data / ML :
- train_model : ré-entraînement hors API à partir de la base (engine sync + pandas).
- seed_demo   : insertion de performances de démo puis ré-entraînement.

Les scripts orchestrent et appellent les modules de `player_ai/` (ml, models, settings) :
aucune logique métier propre.
"""
