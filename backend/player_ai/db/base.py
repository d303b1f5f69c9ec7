from sqlalchemy.orm import DeclarativeBase

"""
DB Base.

Classe racine ORM : toute table du projet (player_performances) hérite de Base
pour être enregistrée dans la metadata (migrations Alembic, create_all en tests).
"""


class Base(DeclarativeBase):
    pass
