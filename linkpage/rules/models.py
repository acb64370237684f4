from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class RangeRule(BaseModel):
    min: int
    max: int


class RegexRule(RangeRule):
    pattern: str


class ProfileDefaults(BaseModel):
    bio: str
    template: str
    primary_color: str
    background_color: str | None = None
    font_family: str
    font_size: str
    page_width: str
    is_rtl: bool


class ProfileRules(BaseModel):
    username: RegexRule
    reserved_usernames: list[str] = Field(default_factory=list)
    display_name_max: int
    bio_max: int
    defaults: ProfileDefaults


class LinksRules(BaseModel):
    title_max: int
    description_max: int
    url_max: int
    allowed_protocols: list[str]
    default_scheme: str = "https"


class ContentRules(BaseModel):
    title_max: int
    gallery_columns: int
    max_gallery_images: int


class UploadsRules(BaseModel):
    max_upload_bytes: int
    allowlist_mime_types: list[str]
    allowlist_extensions: list[str]
    public_prefix: str = "/assets"


class AnalyticsRules(BaseModel):
    enabled: bool
    event_names: list[str]
    summary_top_links: int
    summary_ranges: dict[str, int]


class OpsRules(BaseModel):
    data_dir_required: bool
    required_env: list[str]


class Rules(BaseModel):
    project: ProjectRules
    profile: ProfileRules
    links: LinksRules
    content: ContentRules
    uploads: UploadsRules
    analytics: AnalyticsRules
    ops: OpsRules
