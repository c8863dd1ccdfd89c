"""Rule catalog: the ordered checklist an audit runs."""

from __future__ import annotations

import posixpath
from typing import Iterator, Sequence

from pydantic import ValidationError

from modulith_audit.core.project import ProjectView
from modulith_audit.models.audit import CheckCategory, CheckDefinition, CheckStatus
from modulith_audit.models.catalog import CatalogConfig
from modulith_audit.utils.errors import CatalogError
from modulith_audit.utils.logging import get_logger

logger = get_logger("catalog")


def component_filenames(variant: str, suffixes: Sequence[str]) -> list[str]:
    """Candidate component filenames for a variant, e.g. ``ClassicUI.tsx``."""
    capitalized = variant[:1].upper() + variant[1:]
    return [f"{capitalized}{suffix}" for suffix in suffixes]


def has_variant_component(project: ProjectView, config: CatalogConfig, variant: str) -> bool:
    return any(
        project.exists(posixpath.join(config.variants_dir, name))
        for name in component_filenames(variant, config.variant_suffixes)
    )


def is_variant_registered(project: ProjectView, config: CatalogConfig, variant: str) -> bool:
    """Check that the state store mentions the variant key as a string literal."""
    store = project.read_text(config.store_path)
    if store is None:
        return False
    return f"'{variant}'" in store or f'"{variant}"' in store


def has_manifest_scripts(project: ProjectView, config: CatalogConfig) -> bool:
    manifest = project.read_json(config.manifest_path)
    if not isinstance(manifest, dict):
        return False
    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        return False
    return all(
        isinstance(scripts.get(name), str) and scripts[name].strip()
        for name in config.manifest_scripts
    )


class RuleCatalog:
    """Ordered, immutable collection of checks.

    The catalog is built once from a CatalogConfig. Every check reads only
    the fixed relative paths named in that config.

    Example:
        catalog = RuleCatalog()
        for check in catalog:
            print(check.category.value, check.item)
    """

    def __init__(self, config: CatalogConfig | dict | None = None) -> None:
        """Build the catalog.

        Args:
            config: Catalog configuration, as a model or a raw mapping.
                Defaults to the built-in checklist.

        Raises:
            CatalogError: If the configuration is invalid
        """
        if config is None:
            config = CatalogConfig()
        elif isinstance(config, dict):
            try:
                config = CatalogConfig.model_validate(config)
            except ValidationError as e:
                field = ".".join(str(p) for p in e.errors()[0]["loc"]) if e.errors() else None
                raise CatalogError(f"Invalid catalog configuration: {e}", field=field) from e

        self._config = config
        self._checks = tuple(self._build())
        logger.debug(f"Catalog built with {len(self._checks)} checks")

    @property
    def config(self) -> CatalogConfig:
        return self._config

    @property
    def checks(self) -> tuple[CheckDefinition, ...]:
        return self._checks

    @property
    def categories(self) -> list[CheckCategory]:
        """Categories in the order they first appear."""
        seen: list[CheckCategory] = []
        for check in self._checks:
            if check.category not in seen:
                seen.append(check.category)
        return seen

    def for_category(self, category: CheckCategory) -> list[CheckDefinition]:
        """Get the checks of one category, in catalog order."""
        return [c for c in self._checks if c.category == category]

    def __iter__(self) -> Iterator[CheckDefinition]:
        return iter(self._checks)

    def __len__(self) -> int:
        return len(self._checks)

    def _build(self) -> Iterator[CheckDefinition]:
        cfg = self._config

        for variant in cfg.variants:
            yield CheckDefinition(
                category=CheckCategory.VARIANTS,
                item=variant,
                predicate=lambda p, v=variant: (
                    has_variant_component(p, cfg, v) and is_variant_registered(p, cfg, v)
                ),
                pass_message="Registered",
                fail_message="Missing or Unregistered",
                pass_details="Component file exists and is registered in UI store",
                fail_details="Component file missing or not registered in UI store",
            )

        yield CheckDefinition(
            category=CheckCategory.THEME,
            item="Tailwind Config",
            predicate=lambda p: p.contains_all(cfg.theme_config_path, cfg.theme_tokens),
            pass_message="OK",
            fail_message="Missing or incomplete",
            pass_details="Tailwind theme configuration is properly set up",
            fail_details="Tailwind theme configuration is missing or incomplete",
        )

        yield CheckDefinition(
            category=CheckCategory.ENVIRONMENT,
            item=posixpath.basename(cfg.env_path),
            predicate=lambda p: p.contains_all(cfg.env_path, cfg.env_vars),
            failure_status=CheckStatus.WARNING,
            pass_message="Contains required keys",
            fail_message=f"Missing {' or '.join(cfg.env_vars)}",
            pass_details="Environment variables are properly configured",
            fail_details="Some environment variables may be missing",
        )

        yield CheckDefinition(
            category=CheckCategory.LOGGER,
            item=cfg.logger_name,
            predicate=lambda p: p.contains_all(
                cfg.logger_path, [cfg.logger_name, *cfg.logger_methods]
            ),
            pass_message="Complete",
            fail_message="Missing methods",
            pass_details=f"Logger has all required methods ({', '.join(cfg.logger_methods)})",
            fail_details="Logger is missing required methods",
        )

        yield CheckDefinition(
            category=CheckCategory.DOMAIN_MODULE,
            item=cfg.domain_module_name,
            predicate=lambda p: p.contains_all(cfg.domain_module_path, cfg.domain_module_symbols),
            pass_message="Complete",
            fail_message="Missing components",
            pass_details=f"Module defines {', '.join(cfg.domain_module_symbols)}",
            fail_details="Module is missing key components",
        )

        yield CheckDefinition(
            category=CheckCategory.MANIFEST,
            item=posixpath.basename(cfg.manifest_path),
            predicate=lambda p: has_manifest_scripts(p, cfg),
            pass_message="Scripts configured",
            fail_message="Missing scripts",
            pass_details=f"Manifest has required scripts ({', '.join(cfg.manifest_scripts)})",
            fail_details="Manifest is missing required scripts",
        )

        yield CheckDefinition(
            category=CheckCategory.BUILD_CONFIG,
            item=posixpath.basename(cfg.build_config_path),
            predicate=lambda p: p.contains_all(cfg.build_config_path, cfg.build_config_tokens),
            pass_message="Static export configured",
            fail_message="Missing static export config",
            pass_details="Build is configured for static export",
            fail_details="Static export configuration is missing",
        )

        for asset in cfg.public_assets:
            yield CheckDefinition(
                category=CheckCategory.PUBLIC_ASSETS,
                item=asset,
                predicate=lambda p, a=asset: p.exists(posixpath.join(cfg.public_dir, a)),
                failure_status=CheckStatus.WARNING,
                pass_message="Found",
                fail_message="Missing",
                pass_details="Asset file exists in public directory",
                fail_details="Asset file is missing from public directory",
            )
