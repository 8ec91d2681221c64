"""
Models package: exposes the process-wide DBStorage as `storage`.
The engine is built when the app factory calls storage.reload().
"""
from models.db_storage import DBStorage

storage = DBStorage()
