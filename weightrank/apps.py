from django.apps import AppConfig


class WeightrankConfig(AppConfig):
    """Configuration for the weightrank Django app."""

    name = 'weightrank'
    verbose_name = 'Weighted PageRank'
