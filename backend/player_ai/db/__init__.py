"""
player_ai.db

Package base de données : Base déclarative + engine / session async (Depends(get_db)).
Les scripts CLI utilisent un engine sync séparé (DATABASE_URL_SYNC).
"""
