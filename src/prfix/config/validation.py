"""Configuration validation for prfix."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from prfix.config.models import ANALYZER_KEY, NOTES_KEY, ReleaseConfig

KNOWN_PRESETS = ("angular", "conventionalcommits")
KNOWN_RELEASES = ("major", "minor", "patch")


@dataclass(frozen=True)
class ValidationError:
    """A configuration validation error."""

    path: str
    message: str


class ConfigValidator:
    """Validate ReleaseConfig against the supported options."""

    def validate(self, config: ReleaseConfig) -> list[ValidationError]:
        """Validate config, return list of errors (empty if valid)."""
        errors: list[ValidationError] = []

        if not isinstance(config.repository.tag_prefix, str):
            errors.append(
                ValidationError(
                    "repository.tag_prefix",
                    f"Tag prefix {config.repository.tag_prefix!r} is not a string",
                )
            )

        analyzer = config.plugin.commit_analyzer_config
        if not isinstance(analyzer, Mapping):
            errors.append(ValidationError(f"plugin.{ANALYZER_KEY}", "Must be a table"))
        else:
            errors.extend(_validate_preset(f"plugin.{ANALYZER_KEY}", analyzer))
            errors.extend(_validate_release_rules(analyzer.get("releaseRules", [])))

        notes = config.plugin.notes_generator_config
        if notes is not False:
            if not isinstance(notes, Mapping):
                errors.append(ValidationError(f"plugin.{NOTES_KEY}", "Must be a table or false"))
            else:
                errors.extend(_validate_preset(f"plugin.{NOTES_KEY}", notes))

        return errors


def _validate_preset(path: str, section: Mapping) -> list[ValidationError]:
    preset = section.get("preset", "angular")
    if preset not in KNOWN_PRESETS:
        return [
            ValidationError(
                f"{path}.preset",
                f"Unknown preset {preset!r} (expected one of {', '.join(sorted(KNOWN_PRESETS))})",
            )
        ]
    return []


def _validate_release_rules(rules: object) -> list[ValidationError]:
    path = f"plugin.{ANALYZER_KEY}.releaseRules"
    if not isinstance(rules, list):
        return [ValidationError(path, "Must be an array of tables")]

    errors: list[ValidationError] = []
    for i, rule in enumerate(rules):
        if not isinstance(rule, Mapping):
            errors.append(ValidationError(f"{path}[{i}]", "Rule must be a table"))
            continue
        if "release" not in rule:
            errors.append(ValidationError(f"{path}[{i}]", "Rule needs a 'release' value"))
        elif not _is_known_release(rule["release"]):
            errors.append(
                ValidationError(
                    f"{path}[{i}].release",
                    f"Invalid release {rule['release']!r} (expected major, minor, patch or false)",
                )
            )
    return errors


def _is_known_release(value: object) -> bool:
    """A release type name, or literal false (0 and other falsy values are rejected)."""
    return value is False or (isinstance(value, str) and value in KNOWN_RELEASES)
