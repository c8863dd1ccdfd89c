"""Configuration data for the rule catalog."""

from pathlib import PurePosixPath

from pydantic import BaseModel, Field, field_validator

DEFAULT_VARIANTS = (
    "classic",
    "minimal",
    "hardware",
    "neuro",
    "satellite",
    "transceiver",
    "groundstation",
    "funkcore",
)
DEFAULT_PUBLIC_ASSETS = ("favicon.ico", "logo.svg", "manifest.json")

_PATH_FIELDS = (
    "variants_dir",
    "store_path",
    "theme_config_path",
    "env_path",
    "logger_path",
    "domain_module_path",
    "manifest_path",
    "build_config_path",
    "public_dir",
)


class CatalogConfig(BaseModel):
    """Fixed lists and paths the rule catalog is built from.

    Every path is relative to the audited project root. Nothing here is
    discovered at runtime; changing the checklist means changing this data.
    """

    model_config = {"frozen": True}

    # UI variants
    variants: tuple[str, ...] = Field(
        default=DEFAULT_VARIANTS,
        description="Variant keys that must be implemented and registered",
    )
    variants_dir: str = Field(
        default="src/components/variants",
        description="Directory holding variant component files",
    )
    variant_suffixes: tuple[str, ...] = Field(
        default=("UI.tsx", ".tsx"),
        min_length=1,
        description="Recognized component filename suffixes",
    )
    store_path: str = Field(
        default="src/stores/uiStore.ts",
        description="State-store source that registers variant keys",
    )

    # Theme
    theme_config_path: str = Field(default="tailwind.config.js")
    theme_tokens: tuple[str, ...] = Field(default=("theme", "extend"), min_length=1)

    # Environment
    env_path: str = Field(default=".env.local")
    env_vars: tuple[str, ...] = Field(
        default=("NEXT_PUBLIC_UI_MODE", "NEXT_PUBLIC_THEME"),
        min_length=1,
    )

    # Logger
    logger_path: str = Field(default="src/lib/logger.ts")
    logger_name: str = Field(default="rfLogger", min_length=1)
    logger_methods: tuple[str, ...] = Field(
        default=("info", "debug"),
        min_length=2,
        description="Logging-level method tokens the logger source must mention",
    )

    # Domain module
    domain_module_path: str = Field(default="src/lib/rfCore.ts")
    domain_module_name: str = Field(default="rfCore", min_length=1)
    domain_module_symbols: tuple[str, ...] = Field(
        default=("FREQUENCY_BANDS", "detectHardware"),
        min_length=1,
    )

    # Manifest
    manifest_path: str = Field(default="package.json")
    manifest_scripts: tuple[str, ...] = Field(default=("build", "dev"), min_length=1)

    # Static export
    build_config_path: str = Field(default="next.config.js")
    build_config_tokens: tuple[str, ...] = Field(
        default=("output", "export"),
        min_length=1,
    )

    # Public assets
    public_dir: str = Field(default="public")
    public_assets: tuple[str, ...] = Field(default=DEFAULT_PUBLIC_ASSETS)

    @field_validator(*_PATH_FIELDS)
    @classmethod
    def _relative_path(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("path cannot be empty")
        path = PurePosixPath(value.replace("\\", "/"))
        if path.is_absolute() or value[1:3] == ":/" or value[1:3] == ":\\":
            raise ValueError(f"path must be relative to the project root: {value}")
        if ".." in path.parts:
            raise ValueError(f"path cannot leave the project root: {value}")
        return value

    @field_validator(
        "variants",
        "variant_suffixes",
        "theme_tokens",
        "env_vars",
        "logger_methods",
        "domain_module_symbols",
        "manifest_scripts",
        "build_config_tokens",
        "public_assets",
    )
    @classmethod
    def _no_blank_entries(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for entry in value:
            if not entry or not entry.strip():
                raise ValueError("entries cannot be blank")
        return value

    @field_validator("public_assets")
    @classmethod
    def _plain_asset_names(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for entry in value:
            if ".." in PurePosixPath(entry).parts or entry.startswith("/"):
                raise ValueError(f"asset must stay inside the public directory: {entry}")
        return value
