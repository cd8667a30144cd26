from django.apps import AppConfig


class CoreutilsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'coreutils'
