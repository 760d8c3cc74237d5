from .settings import settings, Settings
