from affilink.config.settings import Settings
from affilink.conversion.base import BaseConverter
from affilink.conversion.converter import LinkConverter
from affilink.conversion.models import ConverterConfig


class ConverterFactory:
    """Creates the configured link converter."""

    @classmethod
    def create(cls, settings: Settings) -> BaseConverter:
        """Freeze the relevant settings and build a converter around them."""
        return LinkConverter(cls.build_config(settings))

    @classmethod
    def build_config(cls, settings: Settings) -> ConverterConfig:
        return ConverterConfig(
            affiliate_tag=settings.affiliate_tag,
            tracking_params=tuple(dict.fromkeys(settings.tracking_params)),
            tracking_param_suffix_count=settings.tracking_param_suffix_count,
        )
