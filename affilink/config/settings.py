from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TRACKING_PARAMS: tuple[str, ...] = (
    "ref", "ref_", "pf_rd_p", "pf_rd_r", "pf_rd_s", "pf_rd_t", "pf_rd_i",
    "pd_rd_i", "pd_rd_r", "pd_rd_w", "pd_rd_wg", "psc", "qid", "sr",
    "dchild", "keywords", "crid", "sprefix", "spLa", "smid", "linkCode",
    "linkId", "camp", "creative", "creativeASIN", "tag", "ascsubtag",
    "th", "ie", "encoding", "pd_rd_p", "content-id", "cv_ct_cx",
    "_encoding", "rnid", "rps", "dib", "dib_tag",
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    affiliate_tag: str = Field(default="crystalrockma-20", min_length=1)
    tracking_params: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TRACKING_PARAMS)
    )
    tracking_param_suffix_count: int = Field(default=10, ge=0, le=100)
