from django.apps import AppConfig


class GiftConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "gift"
    verbose_name = "선물하기 위시리스트"
