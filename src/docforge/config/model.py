# topmark:header:start
#
#   project      : DocForge
#   file         : model.py
#   file_relpath : src/docforge/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, validated runtime snapshot passed to the layout,
      PDF and CSV layers.
    - `MutableConfig`: a mutable builder used while loading and merging TOML
      sources; it can be frozen into `Config` and thawed back for edits.

Layering:
    Every `MutableConfig` field is ``None`` when unset. `MutableConfig.merge_with`
    lets the other layer win wherever it sets a value, and `MutableConfig.freeze`
    fills the remaining gaps from the runtime defaults before validating.

Testing guidance:
    - Unit-test merge behavior with synthetic builders (no I/O).
    - Use `Config.from_defaults()` wherever a test just needs a valid config.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import TYPE_CHECKING

from docforge.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_map,
    get_string_value_or_none,
    get_table,
    load_defaults_dict,
    load_toml_dict,
)
from docforge.config.keys import Toml
from docforge.config.logging import get_logger
from docforge.config.policy import OverflowPolicy
from docforge.constants import PDF_STANDARD_FONTS
from docforge.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from docforge.config.io.types import TomlTable
    from docforge.config.logging import DocforgeLogger

logger: DocforgeLogger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        wrap_width (int): Maximum characters per content line.
        title_fallback (str): Title used when the caller passes an empty one.
        max_lines (int): Content lines that fit on the page.
        overflow (OverflowPolicy): Handling of lines beyond ``max_lines``.
        page_width (int): MediaBox width in points.
        page_height (int): MediaBox height in points.
        margin_left (int): X coordinate of every text baseline origin.
        title_y (int): Baseline Y of the title.
        title_font_size (int): Title type size.
        body_font_size (int): Content line type size.
        body_top (int): Baseline Y of the first content line.
        line_height (int): Vertical distance between content baselines.
        base_font (str): Standard Type 1 font name.
        delimiter (str): CSV field separator.
        strip_backticks (bool): Strip one pair of backticks around CSV cells.
        extra_aliases (Mapping[str, tuple[str, ...]]): Additional header spellings
            per canonical field.
    """

    wrap_width: int
    title_fallback: str
    max_lines: int
    overflow: OverflowPolicy
    page_width: int
    page_height: int
    margin_left: int
    title_y: int
    title_font_size: int
    body_font_size: int
    body_top: int
    line_height: int
    base_font: str
    delimiter: str
    strip_backticks: bool
    extra_aliases: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the validated runtime defaults."""
        return MutableConfig.from_defaults().freeze()

    def thaw(self) -> MutableConfig:
        """Return a `MutableConfig` carrying every value of this snapshot."""
        return MutableConfig(
            wrap_width=self.wrap_width,
            title_fallback=self.title_fallback,
            max_lines=self.max_lines,
            overflow=self.overflow,
            page_width=self.page_width,
            page_height=self.page_height,
            margin_left=self.margin_left,
            title_y=self.title_y,
            title_font_size=self.title_font_size,
            body_font_size=self.body_font_size,
            body_top=self.body_top,
            line_height=self.line_height,
            base_font=self.base_font,
            delimiter=self.delimiter,
            strip_backticks=self.strip_backticks,
            extra_aliases={k: list(v) for k, v in self.extra_aliases.items()},
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration in the TOML schema of ``docforge-default.toml``."""
        return {
            Toml.SECTION_LAYOUT: {
                Toml.KEY_WRAP_WIDTH: self.wrap_width,
            },
            Toml.SECTION_DOCUMENT: {
                Toml.KEY_TITLE_FALLBACK: self.title_fallback,
                Toml.KEY_MAX_LINES: self.max_lines,
                Toml.KEY_OVERFLOW: self.overflow.value,
                Toml.KEY_PAGE_WIDTH: self.page_width,
                Toml.KEY_PAGE_HEIGHT: self.page_height,
                Toml.KEY_MARGIN_LEFT: self.margin_left,
                Toml.KEY_TITLE_Y: self.title_y,
                Toml.KEY_TITLE_FONT_SIZE: self.title_font_size,
                Toml.KEY_BODY_FONT_SIZE: self.body_font_size,
                Toml.KEY_BODY_TOP: self.body_top,
                Toml.KEY_LINE_HEIGHT: self.line_height,
                Toml.KEY_BASE_FONT: self.base_font,
            },
            Toml.SECTION_CSV: {
                Toml.KEY_DELIMITER: self.delimiter,
                Toml.KEY_STRIP_BACKTICKS: self.strip_backticks,
                Toml.KEY_ALIASES: {k: list(v) for k, v in self.extra_aliases.items()},
            },
        }


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Fields mirror `Config`; ``None`` means *unset* so that layers can be merged.
    ``config_files`` records the TOML sources that contributed, for diagnostics.
    """

    wrap_width: int | None = None
    title_fallback: str | None = None
    max_lines: int | None = None
    overflow: OverflowPolicy | None = None
    page_width: int | None = None
    page_height: int | None = None
    margin_left: int | None = None
    title_y: int | None = None
    title_font_size: int | None = None
    body_font_size: int | None = None
    body_top: int | None = None
    line_height: int | None = None
    base_font: str | None = None
    delimiter: str | None = None
    strip_backticks: bool | None = None
    extra_aliases: dict[str, list[str]] = field(default_factory=lambda: {})
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Build a builder holding the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Build a builder from a ``docforge.toml`` or ``pyproject.toml`` file.

        Args:
            path (Path): The configuration file.

        Returns:
            MutableConfig: A builder with only the values the file sets.

        Raises:
            ConfigError: If the file cannot be read or parsed (see `load_toml_dict`).
        """
        draft = cls.from_toml_dict(load_toml_dict(path))
        draft.config_files.append(path)
        logger.debug("Loaded configuration from %s", path)
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Build a builder from a parsed TOML table.

        Unknown sections and keys are logged as warnings and ignored.

        Args:
            data (TomlTable): The DocForge table.

        Returns:
            MutableConfig: A builder with only the values ``data`` sets.

        Raises:
            ConfigError: If ``overflow`` names no known policy.
        """
        for key in data:
            if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
                logger.warning("Ignoring unknown configuration section [%s]", key)
        for section, allowed in Toml.ALLOWED_SECTION_KEYS.items():
            for key in get_table(data, section):
                if key not in allowed:
                    logger.warning("Ignoring unknown key %r in [%s]", key, section)

        layout = get_table(data, Toml.SECTION_LAYOUT)
        document = get_table(data, Toml.SECTION_DOCUMENT)
        csv = get_table(data, Toml.SECTION_CSV)

        overflow_raw = get_string_value_or_none(document, Toml.KEY_OVERFLOW)
        try:
            overflow = OverflowPolicy.parse(overflow_raw) if overflow_raw is not None else None
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

        return cls(
            wrap_width=get_int_value_or_none(layout, Toml.KEY_WRAP_WIDTH),
            title_fallback=get_string_value_or_none(document, Toml.KEY_TITLE_FALLBACK),
            max_lines=get_int_value_or_none(document, Toml.KEY_MAX_LINES),
            overflow=overflow,
            page_width=get_int_value_or_none(document, Toml.KEY_PAGE_WIDTH),
            page_height=get_int_value_or_none(document, Toml.KEY_PAGE_HEIGHT),
            margin_left=get_int_value_or_none(document, Toml.KEY_MARGIN_LEFT),
            title_y=get_int_value_or_none(document, Toml.KEY_TITLE_Y),
            title_font_size=get_int_value_or_none(document, Toml.KEY_TITLE_FONT_SIZE),
            body_font_size=get_int_value_or_none(document, Toml.KEY_BODY_FONT_SIZE),
            body_top=get_int_value_or_none(document, Toml.KEY_BODY_TOP),
            line_height=get_int_value_or_none(document, Toml.KEY_LINE_HEIGHT),
            base_font=get_string_value_or_none(document, Toml.KEY_BASE_FONT),
            delimiter=get_string_value_or_none(csv, Toml.KEY_DELIMITER),
            strip_backticks=get_bool_value_or_none(csv, Toml.KEY_STRIP_BACKTICKS),
            extra_aliases=get_string_list_map(get_table(csv, Toml.KEY_ALIASES)),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where every value set in ``other`` wins.

        Extra aliases are combined per canonical field, ``self`` first.

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: The merged builder; neither input is modified.
        """
        merged = replace(self)
        for f in fields(self):
            if f.name in ("extra_aliases", "config_files"):
                continue
            value = getattr(other, f.name)
            if value is not None:
                setattr(merged, f.name, value)

        aliases: dict[str, list[str]] = {k: list(v) for k, v in self.extra_aliases.items()}
        for name, spellings in other.extra_aliases.items():
            bucket = aliases.setdefault(name, [])
            bucket.extend(s for s in spellings if s not in bucket)
        merged.extra_aliases = aliases
        merged.config_files = [*self.config_files, *other.config_files]
        return merged

    def freeze(self) -> Config:
        """Fill unset values from the runtime defaults, validate, and freeze.

        Returns:
            Config: The immutable snapshot.

        Raises:
            ConfigError: If a value is out of range or otherwise invalid.
        """
        # Defaults are loaded with from_toml_dict() directly to avoid recursing.
        base = MutableConfig.from_toml_dict(load_defaults_dict())
        r = base.merge_with(self)

        _require_positive(r, "wrap_width", minimum=2)
        _require_positive(r, "max_lines")
        _require_positive(r, "page_width")
        _require_positive(r, "page_height")
        _require_positive(r, "title_font_size")
        _require_positive(r, "body_font_size")
        _require_positive(r, "line_height")

        assert r.delimiter is not None
        if len(r.delimiter) != 1 or r.delimiter in ('"', "\n", "\r"):
            raise ConfigError(
                f"csv.delimiter must be a single character other than a quote or "
                f"line break, got {r.delimiter!r}"
            )
        assert r.base_font is not None
        if r.base_font not in PDF_STANDARD_FONTS:
            raise ConfigError(
                f"document.base_font must be one of the standard PDF fonts, got {r.base_font!r}"
            )
        assert r.title_fallback is not None
        if not r.title_fallback.strip() or not all(" " <= ch <= "~" for ch in r.title_fallback):
            raise ConfigError("document.title_fallback must be non-empty printable ASCII text")

        assert r.body_top is not None and r.max_lines is not None and r.line_height is not None
        lowest_baseline = r.body_top - (r.max_lines - 1) * r.line_height
        if lowest_baseline < 0:
            logger.warning(
                "With body_top=%s, line_height=%s and max_lines=%s the last lines fall "
                "below the page",
                r.body_top,
                r.line_height,
                r.max_lines,
            )

        return Config(
            wrap_width=r.wrap_width,  # type: ignore[arg-type]
            title_fallback=r.title_fallback,
            max_lines=r.max_lines,  # type: ignore[arg-type]
            overflow=r.overflow or OverflowPolicy.TRUNCATE,
            page_width=r.page_width,  # type: ignore[arg-type]
            page_height=r.page_height,  # type: ignore[arg-type]
            margin_left=r.margin_left,  # type: ignore[arg-type]
            title_y=r.title_y,  # type: ignore[arg-type]
            title_font_size=r.title_font_size,  # type: ignore[arg-type]
            body_font_size=r.body_font_size,  # type: ignore[arg-type]
            body_top=r.body_top,  # type: ignore[arg-type]
            line_height=r.line_height,  # type: ignore[arg-type]
            base_font=r.base_font,
            delimiter=r.delimiter,
            strip_backticks=bool(r.strip_backticks),
            extra_aliases=MappingProxyType({k: tuple(v) for k, v in r.extra_aliases.items()}),
        )


def _require_positive(draft: MutableConfig, name: str, *, minimum: int = 1) -> None:
    value = getattr(draft, name)
    if value is None or value < minimum:
        raise ConfigError(f"{name} must be an integer >= {minimum}, got {value!r}")


def load_config(paths: tuple[Path, ...] | list[Path] = ()) -> Config:
    """Merge the runtime defaults with the given TOML files, in order, and freeze.

    Args:
        paths (tuple[Path, ...] | list[Path]): Configuration files; later files win.

    Returns:
        Config: The effective configuration.

    Raises:
        ConfigError: If a file is unreadable or a value invalid.
    """
    draft = MutableConfig.from_defaults()
    for path in paths:
        draft = draft.merge_with(MutableConfig.from_toml_file(path))
    return draft.freeze()
