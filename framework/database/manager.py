from .sql_driver import SQLDriver

class DatabaseManager:
    _instance = None

    def __init__(self, settings):
        self.sql = SQLDriver(settings.DATABASE_URL, echo=settings.DB_ECHO)

    @classmethod
    def get_instance(cls, settings=None):
        if cls._instance is None:
            if settings is None:
                from framework.config import settings as app_settings
                settings = app_settings
            cls._instance = cls(settings)
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Forget the singleton (after shutdown, or between test runs)."""
        cls._instance = None
