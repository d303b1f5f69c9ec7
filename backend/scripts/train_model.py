from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd
from sqlalchemy import create_engine, text

# Permet de lancer le script depuis backend/ sans souci d'import
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from player_ai.core.logging import setup_logging
from player_ai.core.settings import settings
from player_ai.ml.feature_vectorizer import build_training_set
from player_ai.ml.model_registry import load_model, new_model, save_model

"""
Script CLI: train_model

Rôle (fonctionnel) :
- Ré-entraîne le modèle hors API, à partir de toute la table player_performances (engine sync).
- Même pipeline que le runtime : build_training_set() puis SuitabilityModel.fit().
- Écrit l’artefact au chemin fixe (settings.MODEL_PATH par défaut), comme après une écriture API.

Usage :
    python scripts/train_model.py
    python scripts/train_model.py --fresh --epochs 200

Notes :
- --fresh repart d’un réseau vierge au lieu de prolonger les poids existants.
- Une API déjà lancée garde son modèle en mémoire jusqu’à la prochaine écriture ou au redémarrage.
"""

log = logging.getLogger("player_ai.scripts.train_model")


def load_dataset(database_url: str) -> pd.DataFrame:
    engine = create_engine(database_url)
    q = text("""
        SELECT id, average, strike_rate, bowling_average, economy_rate, fielding_stats, label
        FROM player_performances
        ORDER BY id
    """)
    return pd.read_sql(q, engine)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--epochs", type=int, default=settings.TRAINING_EPOCHS, help="Nombre de passes sur le batch")
    ap.add_argument("--model-path", default=settings.MODEL_PATH, help="Artefact à écrire (écrasé)")
    ap.add_argument("--fresh", action="store_true", help="Repartir d’un réseau non entraîné")
    args = ap.parse_args()

    setup_logging(settings.LOG_LEVEL)

    df = load_dataset(settings.DATABASE_URL_SYNC)
    if df.empty:
        print("Aucune performance en base. Seed avant d'entraîner.")
        return

    X, y = build_training_set(df.itertuples(index=False))

    model = new_model() if args.fresh else load_model(args.model_path)
    model.fit(X, y, args.epochs)

    out_path = save_model(model, args.model_path)
    log.info("Model retrained and saved", extra={"samples": len(X), "epochs": args.epochs, "model_path": str(out_path)})
    print("OK - saved:", out_path, f"({len(X)} samples, {int(y.sum())} suitable)")


if __name__ == "__main__":
    main()
