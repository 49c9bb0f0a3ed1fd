import pytest

from affilink.config.settings import DEFAULT_TRACKING_PARAMS
from affilink.conversion.converter import LinkConverter
from affilink.conversion.models import ConverterConfig

TEST_TAG = "testtag-20"


@pytest.fixture()
def converter_config() -> ConverterConfig:
    return ConverterConfig(
        affiliate_tag=TEST_TAG,
        tracking_params=DEFAULT_TRACKING_PARAMS,
        tracking_param_suffix_count=10,
    )


@pytest.fixture()
def converter(converter_config: ConverterConfig) -> LinkConverter:
    return LinkConverter(converter_config)
