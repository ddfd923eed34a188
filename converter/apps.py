# converter/apps.py
from django.apps import AppConfig


class ConverterConfig(AppConfig):
    name = "converter"
    verbose_name = "Number to words"
